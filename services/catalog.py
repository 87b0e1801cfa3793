"""
services/catalog.py
-------------------
Static spending categories and the default mission for each pet stage.
"""

from decimal import Decimal

from models.character import Stage
from models.mission import MissionDefinition, MissionDirection, MissionMetric, WindowKind

# Ordered: the first category whose keyword appears in a description wins.
CATEGORY_KEYWORDS: dict[str, tuple[str, ...]] = {
    "coffee": ("coffee", "cafe", "café", "starbucks", "americano", "latte", "espresso"),
    "snack": ("snack", "dessert", "cookie", "chocolate", "ice cream", "candy", "chips"),
    "delivery": ("delivery", "takeout", "pizza", "chicken", "burger", "uber eats", "doordash"),
    "shopping": ("shopping", "clothes", "shoes", "cosmetics", "bag", "amazon", "mall"),
    "transport": ("bus", "subway", "metro", "taxi", "train", "transport", "fuel"),
}
OTHER_CATEGORY = "other"

LUXURY_KEYWORDS = ("luxury", "designer", "brand", "premium", "watch", "jewelry")

STAGE_MISSIONS: dict[Stage, MissionDefinition] = {
    Stage.EGG: MissionDefinition(
        code="COFFEE",
        description="Keep coffee spending under the weekly limit",
        keywords=frozenset(CATEGORY_KEYWORDS["coffee"]),
        target=Decimal("50000.00"),
    ),
    Stage.BABY: MissionDefinition(
        code="SNACK",
        description="Keep snack spending under the weekly limit",
        keywords=frozenset(CATEGORY_KEYWORDS["snack"]),
        target=Decimal("100000.00"),
    ),
    Stage.ADULT: MissionDefinition(
        code="DELIVERY",
        description="Keep food delivery spending under the weekly limit",
        keywords=frozenset(CATEGORY_KEYWORDS["delivery"]),
        target=Decimal("200000.00"),
    ),
    Stage.RICH: MissionDefinition(
        code="SHOPPING",
        description="Keep shopping spending under the weekly limit",
        keywords=frozenset(CATEGORY_KEYWORDS["shopping"]),
        target=Decimal("500000.00"),
    ),
    Stage.BILLIONAIRE: MissionDefinition(
        code="LUXURY",
        description="Keep luxury spending under the weekly limit",
        keywords=frozenset(LUXURY_KEYWORDS),
        target=Decimal("1000000.00"),
    ),
}

# Not tied to a stage; available to callers that inject their own selector.
NO_SPEND_DAY = MissionDefinition(
    code="NO_SPEND_DAY",
    description="Spend nothing today",
    keywords=frozenset(),
    target=Decimal("0.00"),
    window=WindowKind.DAILY,
    metric=MissionMetric.TOTAL_SPEND,
    direction=MissionDirection.AT_MOST,
)


def categorize(description: str) -> str:
    lowered = description.lower()
    for category, keywords in CATEGORY_KEYWORDS.items():
        if any(keyword in lowered for keyword in keywords):
            return category
    return OTHER_CATEGORY
