"""
models/user_state.py
--------------------
Everything the engine knows about one user, loaded and saved as a unit.
"""

from dataclasses import dataclass, field
from typing import Optional

from models.award import AwardGuard
from models.budget import BudgetPeriod
from models.character import Character
from models.ledger import Ledger


@dataclass
class UserState:
    user_id: int
    character: Character
    ledger: Ledger = field(default_factory=Ledger)
    budget: Optional[BudgetPeriod] = None
    awards: AwardGuard = field(default_factory=AwardGuard)
