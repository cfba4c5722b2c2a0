"""
Game Data Models

Contains all game-related data structures and enums.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Dict, List, Optional, Tuple


class LetterStatus(Enum):
    """Letter evaluation status, shared by guess tiles and keyboard keys."""
    UNUSED = "unused"
    ABSENT = "absent"
    PRESENT = "present"
    CORRECT = "correct"

    @property
    def priority(self) -> int:
        return _PRIORITY[self]


_PRIORITY = {
    LetterStatus.UNUSED: 0,
    LetterStatus.ABSENT: 1,
    LetterStatus.PRESENT: 2,
    LetterStatus.CORRECT: 3,
}


class GameStatus(Enum):
    """Lifecycle of a single game; WON and LOST are terminal."""
    ONGOING = "ongoing"
    WON = "won"
    LOST = "lost"


@dataclass
class GameState:
    """Snapshot of a game handed to the presentation layer."""
    game_id: Optional[str]
    word_length: int
    max_guesses: int
    guesses: List[str]  # One entry per slot, "" while empty
    guess_results: List[List[Tuple[str, str]]]  # Letter status as string for JSON serialization
    current_attempt: str
    active_row: Optional[int]
    letter_status: Dict[str, str]
    status: str
    game_over: bool
    won: bool
    answer: Optional[str] = None  # Only included when game is over
