"""Dopamine ROI question catalog.

Seven questions presented by the assessment wizard, in order, followed by a
separate email-capture step. This is presentation configuration consumed by
the front end. The only behaviour derived from it is the set of answer
vocabularies used for validation and scoring.

Questions:
    revenueRange      monthly revenue bracket (dropdown, six tiers)
    timeSplit         share of time on energising work (slider 0-100)
    energyVampires    draining tasks (multiselect, six tags)
    flowActivities    energising tasks (multiselect, six tags)
    chaosLevel        self-reported chaos (slider 1-10)
    delegationStatus  delegation situation (cards, four tiers)
    biggestStruggle   main struggle (cards, four options)
"""

from dataclasses import dataclass, field


@dataclass(frozen=True)
class QuestionOption:
    """A selectable answer for dropdown, multiselect or card questions.

    Attributes:
        value: Machine value submitted with the answers.
        label: Display label.
        description: Optional secondary text shown on cards.
        icon: Optional emoji shown next to the label.
    """

    value: str
    label: str
    description: str | None = None
    icon: str | None = None


@dataclass(frozen=True)
class Question:
    """A single step of the assessment wizard.

    Attributes:
        question_id: Answer key (camelCase, as submitted by the front end).
        title: Question text.
        subtitle: Helper text below the title.
        type: Presentation type: dropdown | slider | multiselect | cards | email.
        options: Selectable options (empty for sliders and email).
        min: Slider minimum.
        max: Slider maximum.
        step: Slider increment.
        labels: Slider end labels keyed by 'min' and 'max'.
    """

    question_id: str
    title: str
    subtitle: str
    type: str
    options: tuple[QuestionOption, ...] = ()
    min: int | None = None
    max: int | None = None
    step: int | None = None
    labels: dict[str, str] = field(default_factory=dict)

    @property
    def values(self) -> tuple[str, ...]:
        """Option values in display order."""
        return tuple(option.value for option in self.options)


QUESTION_TYPES: frozenset[str] = frozenset(
    {"dropdown", "slider", "multiselect", "cards", "email"}
)

REVENUE_RANGE = Question(
    question_id="revenueRange",
    title="What's your current monthly revenue?",
    subtitle="This helps us understand your business stage",
    type="dropdown",
    options=(
        QuestionOption("under-10k", "Under $10k/month"),
        QuestionOption("10k-50k", "$10k - $50k/month"),
        QuestionOption("50k-100k", "$50k - $100k/month"),
        QuestionOption("100k-250k", "$100k - $250k/month"),
        QuestionOption("250k-500k", "$250k - $500k/month"),
        QuestionOption("over-500k", "Over $500k/month"),
    ),
)

TIME_SPLIT = Question(
    question_id="timeSplit",
    title="How much of your work time is spent on dopamine-fueling tasks?",
    subtitle="Things that energize you vs. drain you",
    type="slider",
    min=0,
    max=100,
    step=5,
    labels={"min": "0% (All draining)", "max": "100% (All energizing)"},
)

ENERGY_VAMPIRES = Question(
    question_id="energyVampires",
    title="Which tasks drain your energy the most?",
    subtitle="Select all that apply",
    type="multiselect",
    options=(
        QuestionOption("bookkeeping", "Bookkeeping & Finances", icon="📊"),
        QuestionOption("email", "Email Management", icon="📧"),
        QuestionOption("admin", "Admin Tasks", icon="📋"),
        QuestionOption("scheduling", "Scheduling & Calendar", icon="📅"),
        QuestionOption("customer-support", "Customer Support", icon="💬"),
        QuestionOption("content-editing", "Content Editing", icon="✏️"),
    ),
)

FLOW_ACTIVITIES = Question(
    question_id="flowActivities",
    title="Which activities put you in flow state?",
    subtitle="Select all that apply",
    type="multiselect",
    options=(
        QuestionOption("strategy", "Strategy & Planning", icon="🎯"),
        QuestionOption("creating", "Creating Content", icon="🎨"),
        QuestionOption("selling", "Sales & Pitching", icon="💰"),
        QuestionOption("building", "Building Products", icon="🛠️"),
        QuestionOption("networking", "Networking & Relationships", icon="🤝"),
        QuestionOption("learning", "Learning & Research", icon="📚"),
    ),
)

CHAOS_LEVEL = Question(
    question_id="chaosLevel",
    title="How chaotic does your business feel right now?",
    subtitle="Be honest - this is about awareness, not judgment",
    type="slider",
    min=1,
    max=10,
    step=1,
    labels={"min": "1 (Zen master)", "max": "10 (Tornado)"},
)

DELEGATION_STATUS = Question(
    question_id="delegationStatus",
    title="What's your current delegation situation?",
    subtitle="Who's helping you run things?",
    type="cards",
    options=(
        QuestionOption("solo", "Flying Solo", "I do everything myself", "🦅"),
        QuestionOption("some-help", "Some Help", "Occasional contractors or VAs", "🤝"),
        QuestionOption("small-team", "Small Team", "Regular team members helping", "👥"),
        QuestionOption(
            "delegating-well",
            "Well Delegated",
            "Strong team, I focus on what I love",
            "🚀",
        ),
    ),
)

BIGGEST_STRUGGLE = Question(
    question_id="biggestStruggle",
    title="What's your biggest struggle right now?",
    subtitle="Pick the one that resonates most",
    type="cards",
    options=(
        QuestionOption("overwhelm", "Overwhelm", "Too many things, not enough focus", "🌊"),
        QuestionOption("consistency", "Consistency", "Hard to maintain momentum", "📈"),
        QuestionOption("delegation", "Letting Go", "Struggle to hand things off", "🎯"),
        QuestionOption("direction", "Direction", "Not sure what to focus on", "🧭"),
    ),
)

EMAIL_STEP = Question(
    question_id="email",
    title="Where should we send your results?",
    subtitle="We'll also send you personalized tips based on your score",
    type="email",
)

# Wizard order. The email step is handled separately as the final step.
QUESTIONS: list[Question] = [
    REVENUE_RANGE,
    TIME_SPLIT,
    ENERGY_VAMPIRES,
    FLOW_ACTIVITIES,
    CHAOS_LEVEL,
    DELEGATION_STATUS,
    BIGGEST_STRUGGLE,
]

QUESTIONS_BY_ID: dict[str, Question] = {q.question_id: q for q in QUESTIONS}

# Answer vocabularies
REVENUE_RANGES: tuple[str, ...] = REVENUE_RANGE.values
ENERGY_VAMPIRE_TAGS: tuple[str, ...] = ENERGY_VAMPIRES.values
FLOW_ACTIVITY_TAGS: tuple[str, ...] = FLOW_ACTIVITIES.values
DELEGATION_STATUSES: tuple[str, ...] = DELEGATION_STATUS.values
BIGGEST_STRUGGLES: tuple[str, ...] = BIGGEST_STRUGGLE.values

MAX_MULTISELECT_TAGS: int = 6
