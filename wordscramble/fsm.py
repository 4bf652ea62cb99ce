from __future__ import annotations

from statemachine import State, StateMachine

from wordscramble.api.models import GamePhase, GameState


class GameFSM(StateMachine):
    """FSM wrapper around GameState.

    - phases: not_started -> active; starting again while active resets the round.
    - there is no final phase, a session runs until the player stops.
    """

    not_started = State(
        GamePhase.not_started.value,
        value=GamePhase.not_started.value,
        initial=True,
    )
    active = State(GamePhase.active.value, value=GamePhase.active.value)

    begin = not_started.to(active) | active.to.itself()

    def __init__(self, game: GameState):
        self.game = game
        super().__init__(start_value=game.phase.value)

    @property
    def in_play(self) -> bool:
        return self.current_state_value == GamePhase.active.value

    def sync_phase_to_model(self) -> None:
        self.game.phase = GamePhase(str(self.current_state_value))
