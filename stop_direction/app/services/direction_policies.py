from __future__ import annotations

from abc import ABC, abstractmethod
from collections import Counter
from dataclasses import dataclass
from typing import Iterable

from stop_direction.domain.models import CompassDirection


class IDirectionPolicy(ABC):
    """Chooses one direction for a stop from its per-trip candidates.

    Candidates arrive lazily, one per trip that has a stop after the queried
    one, in the store's trip order.
    """

    @abstractmethod
    def select(self, candidates: Iterable[CompassDirection]) -> CompassDirection:
        raise NotImplementedError


@dataclass(slots=True)
class FirstResolvableTripPolicy(IDirectionPolicy):
    """Direction of the first trip with a next stop, even if degenerate."""

    def select(self, candidates: Iterable[CompassDirection]) -> CompassDirection:
        return next(iter(candidates), CompassDirection.UNKNOWN)


@dataclass(slots=True)
class ModalDirectionPolicy(IDirectionPolicy):
    """Most frequent known direction across all trips.

    Ties go to the direction seen first. Consumes every candidate.
    """

    def select(self, candidates: Iterable[CompassDirection]) -> CompassDirection:
        # Counter keeps insertion order, and most_common() is stable on ties.
        counts: Counter[CompassDirection] = Counter(c for c in candidates if c.is_known)
        if not counts:
            return CompassDirection.UNKNOWN
        return counts.most_common(1)[0][0]


def policy_from_name(name: str | None) -> IDirectionPolicy:
    value = (name or "first").strip().lower()
    if value == "first":
        return FirstResolvableTripPolicy()
    if value == "modal":
        return ModalDirectionPolicy()
    raise ValueError(f"Unknown direction policy: {name!r}")
