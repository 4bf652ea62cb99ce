from __future__ import annotations

from wordscramble.api.models import GamePhase, GameState
from wordscramble.core.outcomes import Accepted, Rejected, SubmissionOutcome


def format_used_words(state: GameState) -> str:
    """Newest first, each prefixed with its length (the list's badge in the app)."""

    if not state.used_words:
        return "USED WORDS: (none yet)"

    lines = ["USED WORDS:"]
    for w in state.used_words:
        lines.append(f"  ({len(w)}) {w}")
    return "\n".join(lines)


def format_outcome(outcome: SubmissionOutcome | None) -> str:
    if isinstance(outcome, Rejected):
        return f"!! {outcome.title}: {outcome.message}"
    if isinstance(outcome, Accepted):
        return f"+1 for '{outcome.word}'"
    return ""


def game_state_to_text(*, state: GameState, outcome: SubmissionOutcome | None = None) -> str:
    """Deterministic multi-line rendering of what a player sees."""

    if state.phase != GamePhase.active:
        return "Game not started."

    sections: list[str] = [
        f"ROOT WORD: {state.root_word}",
        f"The current score is {state.score}",
        format_used_words(state),
    ]

    alert = format_outcome(outcome)
    if alert:
        sections.append(alert)

    return "\n".join(sections)
