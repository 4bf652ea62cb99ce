from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum

from wordscramble.api.models import OutcomeView


class RejectionReason(StrEnum):
    duplicate_word = "duplicate_word"
    letters_not_available = "letters_not_available"
    not_a_real_word = "not_a_real_word"
    too_short = "too_short"

    @property
    def title(self) -> str:
        return _ALERTS[self][0]

    @property
    def message(self) -> str:
        return _ALERTS[self][1]


# Alert title/message per reason, shown by the UI as an error dialog.
_ALERTS: dict[RejectionReason, tuple[str, str]] = {
    RejectionReason.duplicate_word: ("Used word", "Try and create something new"),
    RejectionReason.letters_not_available: ("Not possible", "Use the provided letters"),
    RejectionReason.not_a_real_word: ("Not a real word", "Do not try to invent a word"),
    RejectionReason.too_short: ("Too short", "Think of something longer than 2 letters"),
}


@dataclass(frozen=True, slots=True)
class Accepted:
    word: str
    new_score: int

    def to_view(self) -> OutcomeView:
        return OutcomeView(kind="accepted", word=self.word, new_score=self.new_score)


@dataclass(frozen=True, slots=True)
class Rejected:
    word: str
    reason: RejectionReason

    @property
    def title(self) -> str:
        return self.reason.title

    @property
    def message(self) -> str:
        return self.reason.message

    def to_view(self) -> OutcomeView:
        return OutcomeView(
            kind="rejected",
            word=self.word,
            reason=self.reason.value,
            title=self.title,
            message=self.message,
        )


@dataclass(frozen=True, slots=True)
class Ignored:
    """Blank submission. Not an error; nothing to show."""

    def to_view(self) -> OutcomeView:
        return OutcomeView(kind="ignored")


SubmissionOutcome = Accepted | Rejected | Ignored


def outcome_from_view(view: OutcomeView) -> SubmissionOutcome:
    if view.kind == "accepted":
        return Accepted(word=view.word or "", new_score=view.new_score or 0)
    if view.kind == "rejected":
        return Rejected(word=view.word or "", reason=RejectionReason(view.reason))
    if view.kind == "ignored":
        return Ignored()
    raise ValueError(f"Unknown outcome kind: {view.kind}")
