"""
models/award.py
---------------
Records which savings windows already paid out experience.
"""

from typing import Iterable


class AwardGuard:
    """
    Set of window keys (e.g. 'weekly:2026-10-12..2026-10-18') already rewarded.

    Only keys of currently open windows are worth keeping; `grant` drops
    older keys of the same kind so the set stays at one key per kind.
    """

    def __init__(self, keys: Iterable[str] = ()):
        self._keys: set[str] = set(keys)

    def __contains__(self, key: str) -> bool:
        return key in self._keys

    def is_granted(self, key: str) -> bool:
        return key in self._keys

    def grant(self, key: str) -> None:
        kind = key.split(":", 1)[0]
        self._keys = {k for k in self._keys if k.split(":", 1)[0] != kind}
        self._keys.add(key)

    @property
    def keys(self) -> frozenset:
        return frozenset(self._keys)
