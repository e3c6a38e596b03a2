"""
Game Loop - A greedy demo player for exercising the engine.

Each turn:
1. Draw from stock
2. Try the waste card on each tableau column, left to right
3. Otherwise try the waste card on its foundation
4. Try each column's top card on its foundation, stopping at the first

This is not a solver; it mostly shows the engine working end to end.
"""

from __future__ import annotations
from typing import Callable
from dataclasses import dataclass, field
from enum import Enum
import logging

from ..engine_core.state import GameState, TABLEAU_SIZE
from ..engine_core.action import Action, ActionResult
from ..engine_core.reducer import Reducer
from ..engine_core.moves import check_win

logger = logging.getLogger(__name__)


class LoopState(Enum):
    """State of the game loop."""
    PLAYING = "playing"
    WON = "won"
    TURN_LIMIT = "turn_limit"


@dataclass
class TurnResult:
    """Result of playing one turn."""
    turn: int
    loop_state: LoopState

    # Moves that succeeded this turn, human-readable
    moves: list[str] = field(default_factory=list)


class GameLoop:
    """
    Greedy loop driver over one game state.

    Usage:
        loop = GameLoop(deal_new_game(random_seed=7))
        for result in loop.run(max_turns=10):
            print(result.moves)
    """

    def __init__(self, game_state: GameState, reducer: Reducer | None = None):
        self.game_state = game_state
        self.reducer = reducer or Reducer()
        self.turn = 0
        self.state = LoopState.PLAYING

    def play_turn(self) -> TurnResult:
        """Play a single greedy turn."""
        self.turn += 1
        moves = []

        drawn = self._try(Action.draw())
        if drawn:
            moves.append(drawn)

        placed = self._first_success(
            Action.waste_to_tableau(i) for i in range(TABLEAU_SIZE)
        )
        if not placed:
            placed = self._try(Action.waste_to_foundation())
        if placed:
            moves.append(placed)

        founded = self._first_success(
            Action.tableau_to_foundation(i) for i in range(TABLEAU_SIZE)
        )
        if founded:
            moves.append(founded)

        if check_win(self.game_state):
            self.state = LoopState.WON
            logger.info("Game won", extra={"turn": self.turn})

        return TurnResult(turn=self.turn, loop_state=self.state, moves=moves)

    def run(
        self,
        max_turns: int,
        on_turn: Callable[[TurnResult], None] | None = None,
    ) -> list[TurnResult]:
        """
        Play turns until the game is won or max_turns is reached.

        on_turn, if given, is called with each TurnResult as it is played.
        """
        results = []
        while self.state == LoopState.PLAYING:
            if self.turn >= max_turns:
                self.state = LoopState.TURN_LIMIT
                break
            result = self.play_turn()
            results.append(result)
            if on_turn:
                on_turn(result)
        return results

    def _try(self, action: Action) -> str | None:
        result: ActionResult = self.reducer.apply(self.game_state, action)
        if result.success:
            logger.debug(action.describe(), extra={"turn": self.turn})
            return action.describe()
        return None

    def _first_success(self, actions) -> str | None:
        for action in actions:
            move = self._try(action)
            if move:
                return move
        return None
