"""initial: assessments, referral_clicks and events tables.

Creates the three append-only tables behind the Dopamine ROI quiz:
scored submissions, referral clicks/conversions and funnel events.

Revision ID: droi_001_initial
Revises:
Create Date: 2026-10-16 00:00:00.000000
"""

from collections.abc import Sequence

import sqlalchemy as sa
from alembic import op
from sqlalchemy.dialects import postgresql

revision: str = "droi_001_initial"
down_revision: str | None = None
branch_labels: str | Sequence[str] | None = None
depends_on: str | Sequence[str] | None = None


def upgrade() -> None:
    """Create assessments, referral_clicks and events."""
    # assessments: one row per scored submission
    op.create_table(
        "assessments",
        sa.Column(
            "id",
            postgresql.UUID(as_uuid=True),
            primary_key=True,
            server_default=sa.text("gen_random_uuid()"),
        ),
        sa.Column(
            "email",
            sa.String(255),
            nullable=False,
            comment="Respondent email used for results delivery",
        ),
        sa.Column(
            "answers",
            postgresql.JSONB,
            nullable=False,
            comment="Raw questionnaire answers as submitted",
        ),
        sa.Column(
            "score",
            sa.Integer,
            nullable=False,
            comment="Final Dopamine ROI score 0-100",
        ),
        sa.Column(
            "score_breakdown",
            postgresql.JSONB,
            nullable=False,
            server_default=sa.text("'[]'::jsonb"),
            comment="Per-component breakdown: [{component, score, weight, contribution}]",
        ),
        sa.Column(
            "category",
            sa.String(50),
            nullable=False,
            comment="Category id: profitable-chaos | kill-zone | delegate-zone | cash-engine",
        ),
        sa.Column(
            "referral_code",
            sa.String(16),
            nullable=False,
            comment="Referral code generated for this respondent",
        ),
        sa.Column(
            "referred_by",
            sa.String(16),
            nullable=True,
            comment="Referral code of the respondent who referred this one",
        ),
        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            nullable=False,
            server_default=sa.text("now()"),
            comment="Submission timestamp",
        ),
    )
    op.create_index("ix_assessments_email", "assessments", ["email"])
    op.create_index("ix_assessments_category", "assessments", ["category"])
    op.create_index("ix_assessments_referral_code", "assessments", ["referral_code"], unique=True)
    op.create_index("ix_assessments_referred_by", "assessments", ["referred_by"])

    # referral_clicks: clicks (converted=false) and conversions (converted=true)
    op.create_table(
        "referral_clicks",
        sa.Column(
            "id",
            postgresql.UUID(as_uuid=True),
            primary_key=True,
            server_default=sa.text("gen_random_uuid()"),
        ),
        sa.Column(
            "referral_code",
            sa.String(16),
            nullable=False,
            comment="Referral code that was clicked or converted",
        ),
        sa.Column(
            "converted",
            sa.Boolean,
            nullable=False,
            server_default=sa.text("false"),
            comment="True when the row records a completed referred assessment",
        ),
        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            nullable=False,
            server_default=sa.text("now()"),
            comment="Click or conversion timestamp",
        ),
    )
    op.create_index("ix_referral_clicks_referral_code", "referral_clicks", ["referral_code"])

    # events: funnel analytics
    op.create_table(
        "events",
        sa.Column(
            "id",
            postgresql.UUID(as_uuid=True),
            primary_key=True,
            server_default=sa.text("gen_random_uuid()"),
        ),
        sa.Column(
            "event_name",
            sa.String(64),
            nullable=False,
            comment="Whitelisted event name, e.g. results_viewed",
        ),
        sa.Column(
            "referral_code",
            sa.String(16),
            nullable=True,
            comment="Referral code of the visitor, if known",
        ),
        sa.Column(
            "metadata",
            postgresql.JSONB,
            nullable=False,
            server_default=sa.text("'{}'::jsonb"),
            comment="Free-form event properties",
        ),
        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            nullable=False,
            server_default=sa.text("now()"),
            comment="Event timestamp",
        ),
    )
    op.create_index("ix_events_event_name", "events", ["event_name"])
    op.create_index("ix_events_referral_code", "events", ["referral_code"])


def downgrade() -> None:
    """Drop events, referral_clicks and assessments."""
    op.drop_index("ix_events_referral_code", table_name="events")
    op.drop_index("ix_events_event_name", table_name="events")
    op.drop_table("events")

    op.drop_index("ix_referral_clicks_referral_code", table_name="referral_clicks")
    op.drop_table("referral_clicks")

    op.drop_index("ix_assessments_referred_by", table_name="assessments")
    op.drop_index("ix_assessments_referral_code", table_name="assessments")
    op.drop_index("ix_assessments_category", table_name="assessments")
    op.drop_index("ix_assessments_email", table_name="assessments")
    op.drop_table("assessments")
