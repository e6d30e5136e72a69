from __future__ import annotations

from typing import Iterator

import pytest

from stop_direction.app.services.direction_policies import (
    FirstResolvableTripPolicy,
    ModalDirectionPolicy,
    policy_from_name,
)
from stop_direction.domain.models import CompassDirection as D


def test_first_policy_takes_first_candidate_even_if_unknown() -> None:
    policy = FirstResolvableTripPolicy()
    assert policy.select([D.UNKNOWN, D.N]) is D.UNKNOWN
    assert policy.select([D.SE, D.N]) is D.SE


def test_first_policy_without_candidates_is_unknown() -> None:
    assert FirstResolvableTripPolicy().select([]) is D.UNKNOWN


def test_first_policy_stops_consuming_after_first() -> None:
    consumed: list[D] = []

    def candidates() -> Iterator[D]:
        for d in (D.W, D.E, D.S):
            consumed.append(d)
            yield d

    assert FirstResolvableTripPolicy().select(candidates()) is D.W
    assert consumed == [D.W]


@pytest.mark.parametrize(
    ("candidates", "expected"),
    [
        ([], D.UNKNOWN),
        ([D.UNKNOWN, D.UNKNOWN], D.UNKNOWN),
        ([D.N, D.S, D.S], D.S),
        ([D.UNKNOWN, D.UNKNOWN, D.NE], D.NE),
        # Ties go to the first seen.
        ([D.W, D.E, D.E, D.W], D.W),
        ([D.E, D.W], D.E),
    ],
)
def test_modal_policy(candidates: list[D], expected: D) -> None:
    assert ModalDirectionPolicy().select(candidates) is expected


@pytest.mark.parametrize(
    ("name", "expected_type"),
    [
        (None, FirstResolvableTripPolicy),
        ("", FirstResolvableTripPolicy),
        ("first", FirstResolvableTripPolicy),
        (" Modal ", ModalDirectionPolicy),
    ],
)
def test_policy_from_name(name: str | None, expected_type: type) -> None:
    assert isinstance(policy_from_name(name), expected_type)


def test_policy_from_name_rejects_unknown_names() -> None:
    with pytest.raises(ValueError):
        policy_from_name("majority")
