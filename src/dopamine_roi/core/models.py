"""SQLAlchemy ORM models for the Dopamine ROI assessment service.

Tables:
    assessments     : one row per quiz submission, never updated
    referral_clicks : append-only referral clicks and conversions
    events          : append-only funnel analytics events
"""

import uuid
from datetime import datetime
from typing import Any

from sqlalchemy import Boolean, DateTime, Integer, String, func
from sqlalchemy.dialects.postgresql import JSONB, UUID
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column


class Base(DeclarativeBase):
    """Declarative base for all service tables."""


class AssessmentRecord(Base):
    """A scored quiz submission.

    Created once at submission time. Referral conversions are recorded as
    separate ReferralClick rows, never as updates to this record.

    Table: assessments
    """

    __tablename__ = "assessments"

    id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True),
        primary_key=True,
        default=uuid.uuid4,
        comment="Primary key UUID",
    )
    email: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
        index=True,
        comment="Respondent email used for results delivery",
    )
    answers: Mapped[dict[str, Any]] = mapped_column(
        JSONB,
        nullable=False,
        comment="Raw questionnaire answers as submitted",
    )
    score: Mapped[int] = mapped_column(
        Integer,
        nullable=False,
        comment="Final Dopamine ROI score 0-100",
    )
    score_breakdown: Mapped[list[dict[str, Any]]] = mapped_column(
        JSONB,
        nullable=False,
        server_default="[]",
        comment="Per-component breakdown: [{component, score, weight, contribution}]",
    )
    category: Mapped[str] = mapped_column(
        String(50),
        nullable=False,
        index=True,
        comment="Category id: profitable-chaos | kill-zone | delegate-zone | cash-engine",
    )
    referral_code: Mapped[str] = mapped_column(
        String(16),
        nullable=False,
        unique=True,
        index=True,
        comment="Referral code generated for this respondent",
    )
    referred_by: Mapped[str | None] = mapped_column(
        String(16),
        nullable=True,
        index=True,
        comment="Referral code of the respondent who referred this one",
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        server_default=func.now(),
        comment="Submission timestamp",
    )


class ReferralClick(Base):
    """A click on a referral link, or a conversion from one.

    Table: referral_clicks
    """

    __tablename__ = "referral_clicks"

    id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True),
        primary_key=True,
        default=uuid.uuid4,
        comment="Primary key UUID",
    )
    referral_code: Mapped[str] = mapped_column(
        String(16),
        nullable=False,
        index=True,
        comment="Referral code that was clicked or converted",
    )
    converted: Mapped[bool] = mapped_column(
        Boolean,
        nullable=False,
        default=False,
        server_default="false",
        comment="True when the row records a completed referred assessment",
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        server_default=func.now(),
        comment="Click or conversion timestamp",
    )


class AnalyticsEvent(Base):
    """A front-end funnel event.

    Table: events
    """

    __tablename__ = "events"

    id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True),
        primary_key=True,
        default=uuid.uuid4,
        comment="Primary key UUID",
    )
    event_name: Mapped[str] = mapped_column(
        String(64),
        nullable=False,
        index=True,
        comment="Whitelisted event name, e.g. results_viewed",
    )
    referral_code: Mapped[str | None] = mapped_column(
        String(16),
        nullable=True,
        index=True,
        comment="Referral code of the visitor, if known",
    )
    event_metadata: Mapped[dict[str, Any]] = mapped_column(
        "metadata",
        JSONB,
        nullable=False,
        server_default="{}",
        comment="Free-form event properties",
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        server_default=func.now(),
        comment="Event timestamp",
    )
