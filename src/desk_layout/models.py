"""Data models for desk layout."""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional
import math


class DogStatus(str, Enum):
    """How a person feels about dogs in the office."""

    AVOID = "AVOID"
    LIKE = "LIKE"
    HAVE = "HAVE"


def parse_optional_text(value: object) -> Optional[str]:
    """Return stripped text or ``None`` for empty cells.

    ``pandas`` often provides ``float('nan')`` for missing values which is
    also treated as empty.
    """
    if value is None:
        return None
    if isinstance(value, float) and math.isnan(value):
        return None
    text = str(value).strip()
    if not text or text.lower() == "nan":
        return None
    return text


def parse_dog_status(value: object) -> DogStatus:
    """Map ``value`` onto :class:`DogStatus`.

    Anything that is not one of the three statuses raises ``ValueError``.
    """
    if isinstance(value, DogStatus):
        return value
    text = parse_optional_text(value)
    if text is None:
        raise ValueError("Missing dog status")
    try:
        return DogStatus(text.upper())
    except ValueError:
        raise ValueError(f"Unknown dog status: {value!r}") from None


@dataclass(frozen=True)
class Team:
    """A team whose members must sit next to each other."""

    id: str
    name: str = ""


@dataclass(frozen=True)
class Person:
    """Someone who needs a desk."""

    id: str
    name: str = ""
    dog_status: DogStatus = DogStatus.LIKE
    team: Optional[Team] = None

    def __post_init__(self) -> None:
        # frozen, so bypass the dataclass setattr guard
        object.__setattr__(self, "dog_status", parse_dog_status(self.dog_status))

    @property
    def team_id(self) -> Optional[str]:
        if self.team is None or not self.team.id:
            return None
        return self.team.id
