"""Dopamine ROI result categories.

Each category describes a relationship between where a founder invests
energy and what that energy returns. Score ranges are inclusive, contiguous
and cover 0-100 without gaps:

    Category          Score range
    ----------------  -----------
    Profitable Chaos  0-19
    Kill Zone         20-39
    Delegate Zone     40-69
    Cash Engine       70-100
"""

from dataclasses import dataclass

SCORE_MIN: int = 0
SCORE_MAX: int = 100


@dataclass(frozen=True)
class Category:
    """A score bucket with the marketing copy shown on the results page.

    Attributes:
        id: Stable identifier persisted with each assessment.
        name: Display name.
        tagline: One-line summary.
        min_score: Inclusive lower bound.
        max_score: Inclusive upper bound.
        color: Accent hex color.
        bg_color: Translucent background color.
        description: Paragraph explaining the result.
        strengths: What the respondent already has going for them.
        recommendations: Next actions.
        share_emoji: Emoji used in social share text.
    """

    id: str
    name: str
    tagline: str
    min_score: int
    max_score: int
    color: str
    bg_color: str
    description: str
    strengths: tuple[str, ...]
    recommendations: tuple[str, ...]
    share_emoji: str

    def contains(self, score: float) -> bool:
        """Whether the score falls inside this category's inclusive range."""
        return self.min_score <= score <= self.max_score


CATEGORIES: tuple[Category, ...] = (
    Category(
        id="cash-engine",
        name="Cash Engine",
        tagline="Your chaos is profitable gold",
        min_score=70,
        max_score=100,
        color="#10B981",
        bg_color="rgba(16, 185, 129, 0.1)",
        description=(
            "You've cracked the code! Your high-dopamine activities are directly "
            "fueling your revenue. The activities that light you up are also "
            "making you money."
        ),
        strengths=(
            "Natural alignment between passion and profit",
            "Sustainable energy for business growth",
            "High flow-state productivity",
        ),
        recommendations=(
            "Double down on your flow-state activities",
            "Hire out the remaining energy vampires immediately",
            "Document your chaos - it's your secret sauce",
            "Consider teaching others your approach",
        ),
        share_emoji="🚀",
    ),
    Category(
        id="delegate-zone",
        name="Delegate Zone",
        tagline="One hire away from breakthrough",
        min_score=40,
        max_score=69,
        color="#3B82F6",
        bg_color="rgba(59, 130, 246, 0.1)",
        description=(
            "You're doing good work, but you're spending too much energy on tasks "
            "that drain you. Strategic delegation would unlock your full potential."
        ),
        strengths=(
            "Clear understanding of what drains you",
            "Revenue foundation is solid",
            "Ready for the next level",
        ),
        recommendations=(
            "Identify your top 3 energy vampires to outsource",
            "Calculate the true cost of doing draining tasks yourself",
            "Start with one VA or contractor this month",
            "Protect your high-dopamine time blocks",
        ),
        share_emoji="💪",
    ),
    Category(
        id="kill-zone",
        name="Kill Zone",
        tagline="Time to cut the dead weight",
        min_score=20,
        max_score=39,
        color="#F59E0B",
        bg_color="rgba(245, 158, 11, 0.1)",
        description=(
            "You're investing energy in activities that aren't paying off. Some "
            "business activities need to be eliminated entirely, not just delegated."
        ),
        strengths=(
            "Awareness of the problem is the first step",
            "Opportunity to radically simplify",
            "Potential for massive transformation",
        ),
        recommendations=(
            'List every activity and ask: "Does this make money?"',
            "Kill at least 3 activities this week",
            "Say no to new commitments for 30 days",
            "Focus only on your highest-ROI activities",
        ),
        share_emoji="⚡",
    ),
    Category(
        id="profitable-chaos",
        name="Profitable Chaos",
        tagline="Burning bright, but burning out",
        min_score=0,
        max_score=19,
        color="#EF4444",
        bg_color="rgba(239, 68, 68, 0.1)",
        description=(
            "Your energy is scattered across too many things. You might be making "
            "money, but at an unsustainable cost to your wellbeing and focus."
        ),
        strengths=(
            "You have energy and drive",
            "Multiple skills and interests",
            "Entrepreneurial courage",
        ),
        recommendations=(
            "STOP: Take a week off from everything possible",
            "Pick ONE thing that makes money and gives energy",
            "Consider a business model pivot",
            "Get accountability support or coaching",
        ),
        share_emoji="🔥",
    ),
)

CATEGORIES_BY_ID: dict[str, Category] = {c.id: c for c in CATEGORIES}


def get_category_by_score(score: float) -> Category:
    """Return the category whose inclusive range contains the score.

    The score is clamped to 0-100 first. Falls back to the last-defined
    category (the lowest range) if no range matches.

    Args:
        score: Dopamine ROI score.

    Returns:
        The matching Category.
    """
    clamped = max(SCORE_MIN, min(SCORE_MAX, score))
    for category in CATEGORIES:
        if category.contains(clamped):
            return category
    return CATEGORIES[-1]


def get_category_by_id(category_id: str) -> Category | None:
    """Look up a category by its identifier, or None if unknown."""
    return CATEGORIES_BY_ID.get(category_id)
