"""
services/progression_service.py
-------------------------------
Experience and stage transitions of the pet.

Each stage has a threshold: the experience that must be earned while in
that stage before the pet moves on. Boundaries are therefore cumulative
(EGG 100, BABY 100+500, ADULT 600+2000, RICH 2600+10000).
"""

from datetime import datetime
from itertools import accumulate
from typing import Optional

from errors import ValidationError
from models.character import Character, Stage
from utils.logger import get_logger

logger = get_logger(__name__)

STAGE_THRESHOLDS: dict[Stage, int] = {
    Stage.EGG: 100,
    Stage.BABY: 500,
    Stage.ADULT: 2000,
    Stage.RICH: 10000,
}

_BOUNDARIES: dict[Stage, int] = dict(zip(STAGE_THRESHOLDS, accumulate(STAGE_THRESHOLDS.values())))


def threshold(stage: Stage) -> Optional[int]:
    """Experience needed to leave `stage` once entered; None for the terminal stage."""
    return STAGE_THRESHOLDS.get(stage)


def boundary(stage: Stage) -> Optional[int]:
    """Total experience at which the pet leaves `stage`."""
    return _BOUNDARIES.get(stage)


def experience_to_next(character: Character) -> Optional[int]:
    limit = boundary(character.stage)
    if limit is None:
        return None
    return max(0, limit - character.experience)


def award_experience(character: Character, amount: int, now: Optional[datetime] = None) -> Character:
    """
    Add experience and advance through every stage boundary it crosses.

    The character is mutated in place and returned.

    Raises:
        ValidationError: `amount` is negative or not an integer; nothing changes.
    """
    if isinstance(amount, bool) or not isinstance(amount, int):
        raise ValidationError(f"Experience award must be an integer, got {amount!r}")
    if amount < 0:
        raise ValidationError(f"Experience award must not be negative, got {amount}")

    character.experience += amount
    while not character.stage.is_terminal and character.experience >= boundary(character.stage):
        old_stage = character.stage
        character.stage = old_stage.next
        character.last_evolution = now or datetime.now()
        logger.info(f"{character.name} evolved {old_stage.value} -> {character.stage.value}")
    return character
