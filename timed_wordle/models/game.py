"""
Game Data Models

Contains all game-related data structures and enums.
"""

from dataclasses import dataclass
from enum import Enum
from typing import List, Optional, Tuple

# Letter held by a slot that has never been written. No dictionary word
# contains it, so a partially filled row can never validate.
EMPTY_LETTER = "\0"


class Verdict(Enum):
    """Per-slot evaluation status."""
    EMPTY = "EMPTY"
    OCCUPIED = "OCCUPIED"
    CORRECT = "CORRECT"
    WRONG_SPOT = "WRONG_SPOT"
    INCORRECT = "INCORRECT"


class RowId(Enum):
    """Identifies one of the two rows owned by a game."""
    INITIAL = "initial"
    GUESSING = "guessing"


class GamePhase(Enum):
    """Coarse game state derived from the engine flags."""
    AWAITING_INITIAL = "awaiting_initial"
    AWAITING_SUBSEQUENT = "awaiting_subsequent"
    WON = "won"
    LOST = "lost"


@dataclass
class Slot:
    """A single letter position in a guess row."""
    letter: str = EMPTY_LETTER
    verdict: Verdict = Verdict.EMPTY


class GuessRow:
    """
    Fixed-length sequence of slots forming one guess.

    Rows are cleared in place and reused across guesses. Index checking is
    the caller's responsibility.
    """

    def __init__(self, length: int):
        self.slots: List[Slot] = [Slot() for _ in range(length)]

    def __len__(self) -> int:
        return len(self.slots)

    @property
    def word(self) -> str:
        """Concatenation of the slot letters, unwritten slots included."""
        return "".join(slot.letter for slot in self.slots)

    def set_letter(self, index: int, letter: str) -> None:
        self.slots[index].letter = letter

    def set_verdict(self, index: int, verdict: Verdict) -> None:
        self.slots[index].verdict = verdict

    def clear(self) -> None:
        for slot in self.slots:
            slot.letter = EMPTY_LETTER
            slot.verdict = Verdict.EMPTY

    def is_fully_correct(self) -> bool:
        return all(slot.verdict == Verdict.CORRECT for slot in self.slots)

    def as_pairs(self) -> List[Tuple[str, str]]:
        """Slots as (letter, verdict) pairs for JSON serialization."""
        return [
            ("" if slot.letter == EMPTY_LETTER else slot.letter, slot.verdict.value)
            for slot in self.slots
        ]


@dataclass
class GameEvent:
    """Notification emitted by the engine for the presentation layer."""
    name: str
    payload: dict


@dataclass
class GameState:
    """Server-side game state representation."""
    game_id: str
    phase: str
    initial_row: List[Tuple[str, str]]
    guessing_row: List[Tuple[str, str]]
    cursor: int
    word_length: int
    initial_guess_submitted: bool
    game_over: bool
    won: bool
    lost: bool
    invalid_word_shown: bool
    attempts: int
    time_remaining: float
    timer_running: bool
    timer_display: str
    answer: Optional[str] = None  # Only included when game is over
