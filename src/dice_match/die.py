# Area: Dice
"""
dice_match.die — A single n-sided die
=====================================

The die draws from an injected random source so tests can supply a
seeded ``random.Random`` or any object with a compatible ``randint``.
"""

from __future__ import annotations
import random
from typing import Optional


class Die:
    """
    A die with ``faces`` sides numbered 1..faces.

    Attributes:
        faces: Number of sides, at least 1
        last_value: Result of the most recent roll, or None before any roll
    """

    def __init__(self, faces: int, rng: Optional[random.Random] = None):
        if faces < 1:
            raise ValueError(f"A die needs at least one face, got {faces}")
        self._faces = faces
        self._rng = rng if rng is not None else random.Random()
        self._last_value: Optional[int] = None

    @property
    def faces(self) -> int:
        return self._faces

    @property
    def last_value(self) -> Optional[int]:
        return self._last_value

    def roll(self) -> int:
        """Roll the die and return the new face value."""
        self._last_value = self._rng.randint(1, self._faces)
        return self._last_value

    def reset(self) -> None:
        """Forget the last value, as if the die had never been rolled."""
        self._last_value = None

    def __str__(self) -> str:
        return "-" if self._last_value is None else str(self._last_value)

    def __repr__(self) -> str:
        return f"Die(faces={self._faces}, last_value={self._last_value})"
