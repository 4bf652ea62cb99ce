from __future__ import annotations

import pytest

from wordscramble.api.models import OutcomeView
from wordscramble.core.outcomes import Accepted, Ignored, Rejected, RejectionReason, outcome_from_view


@pytest.mark.parametrize(
    ("reason", "title", "message"),
    [
        (RejectionReason.duplicate_word, "Used word", "Try and create something new"),
        (RejectionReason.letters_not_available, "Not possible", "Use the provided letters"),
        (RejectionReason.not_a_real_word, "Not a real word", "Do not try to invent a word"),
        (RejectionReason.too_short, "Too short", "Think of something longer than 2 letters"),
    ],
)
def test_every_reason_has_alert_text(reason: RejectionReason, title: str, message: str) -> None:
    rejected = Rejected(word="x", reason=reason)

    assert rejected.title == title
    assert rejected.message == message
    assert rejected.to_view().reason == reason.value


def test_outcomes_survive_storage_views() -> None:
    for outcome in (
        Accepted(word="worm", new_score=4),
        Rejected(word="zz", reason=RejectionReason.too_short),
        Ignored(),
    ):
        raw = outcome.to_view().model_dump_json()
        assert outcome_from_view(OutcomeView.model_validate_json(raw)) == outcome


def test_unknown_outcome_kind_raises() -> None:
    with pytest.raises(ValueError):
        outcome_from_view(OutcomeView(kind="exploded"))
