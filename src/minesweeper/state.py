"""Game lifecycle states shared by the board and the engine modules."""
from enum import Enum, auto


class GameState(Enum):
    """Possible states of a game."""

    INIT = auto()
    PLAYING = auto()
    LOST = auto()
    WON = auto()

    @property
    def is_over(self) -> bool:
        """True once the game is won or lost."""
        return self in (GameState.LOST, GameState.WON)
