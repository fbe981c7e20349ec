"""
Game Engine

The board of a single timed game: two reusable rows, the input cursor, the
target word and the submission state machine, coupled to a countdown timer.
"""

from typing import Callable, Optional

from ..config.game_settings import ALPHABET, INVALID_WORD_PENALTY_SECONDS, WORD_LENGTH
from ..models.game import EMPTY_LETTER, GameEvent, GamePhase, GuessRow, RowId, Verdict
from .scorer import score
from .timer import CountdownTimer, format_time
from .word_bank import ConfigurationError, WordBank

EventListener = Callable[[GameEvent], None]


class GameEngine:
    """
    State machine for one game.

    The first accepted guess goes in the initial row and restarts the clock;
    every later guess is typed into the guessing row, which is cleared after
    each miss. There is no limit on guesses, only on time. Invalid words
    never consume a guess, but after the first guess each one costs
    INVALID_WORD_PENALTY_SECONDS.

    Input handlers are silent no-ops once the game is over or when the
    input does not fit the current row.
    """

    def __init__(self,
                 word_bank: WordBank,
                 timer: CountdownTimer,
                 listener: Optional[EventListener] = None,
                 word_length: int = WORD_LENGTH,
                 invalid_word_penalty: float = INVALID_WORD_PENALTY_SECONDS):
        self.word_bank = word_bank
        self.timer = timer
        self.word_length = word_length
        self.invalid_word_penalty = invalid_word_penalty
        self._listener = listener

        self.rows = {
            RowId.INITIAL: GuessRow(word_length),
            RowId.GUESSING: GuessRow(word_length),
        }

        self.target_word: Optional[str] = None
        self.cursor = 0
        self.initial_guess_submitted = False
        self.game_over = False
        self.won = False
        self.lost = False
        self.invalid_word_shown = False
        self.attempts = 0

        self.timer.set_expiry_callback(self.on_time_expired)
        self.timer.set_display_callback(self._on_timer_display)

    @property
    def initial_row(self) -> GuessRow:
        return self.rows[RowId.INITIAL]

    @property
    def guessing_row(self) -> GuessRow:
        return self.rows[RowId.GUESSING]

    @property
    def active_row_id(self) -> RowId:
        return RowId.GUESSING if self.initial_guess_submitted else RowId.INITIAL

    @property
    def active_row(self) -> GuessRow:
        return self.rows[self.active_row_id]

    @property
    def phase(self) -> GamePhase:
        if self.won:
            return GamePhase.WON
        if self.lost:
            return GamePhase.LOST
        if self.initial_guess_submitted:
            return GamePhase.AWAITING_SUBSEQUENT
        return GamePhase.AWAITING_INITIAL

    # Game lifecycle

    def new_game(self) -> None:
        """
        Start a game against a freshly drawn target word.

        Raises:
            ConfigurationError: If the drawn word does not fit the rows
        """
        target = self.word_bank.pick_target()
        if len(target) != self.word_length:
            raise ConfigurationError(
                f"Target '{target}' does not have {self.word_length} letters"
            )
        self.target_word = target
        self._reset()

    def restart_game(self) -> None:
        """Start over against the same target word."""
        if self.target_word is None:
            self.new_game()
            return
        self._reset()

    def _reset(self) -> None:
        self._clear_row(RowId.INITIAL)
        self._clear_row(RowId.GUESSING)
        self.cursor = 0
        self.initial_guess_submitted = False
        self.game_over = False
        self.won = False
        self.lost = False
        self.attempts = 0
        self._set_invalid_word_shown(False, force=True)
        self.timer.start()

    # Input events

    def on_letter_input(self, letter: str) -> None:
        if self.game_over:
            return
        if not isinstance(letter, str) or len(letter) != 1:
            return

        letter = letter.lower()
        if letter not in ALPHABET:
            return

        row_id = self.active_row_id
        row = self.rows[row_id]
        if self.cursor >= len(row):
            return

        row.set_letter(self.cursor, letter)
        row.set_verdict(self.cursor, Verdict.OCCUPIED)
        self._emit_slot(row_id, self.cursor)
        self.cursor += 1

    def on_backspace(self) -> None:
        if self.game_over or self.cursor == 0:
            return

        self.cursor -= 1
        row_id = self.active_row_id
        row = self.rows[row_id]
        row.set_letter(self.cursor, EMPTY_LETTER)
        row.set_verdict(self.cursor, Verdict.EMPTY)
        self._emit_slot(row_id, self.cursor)
        self._set_invalid_word_shown(False)

    def on_submit(self) -> None:
        # Nothing to score against until new_game() has drawn a target
        if self.game_over or self.target_word is None:
            return
        if self.cursor < len(self.active_row):
            return

        if self.initial_guess_submitted:
            self._submit_subsequent_guess()
        else:
            self._submit_initial_guess()

    def on_time_expired(self) -> None:
        """Expiry callback registered with the timer."""
        if self.game_over:
            return

        self.game_over = True
        self.lost = True
        self._set_invalid_word_shown(False)
        self._emit("game_lost", {"answer": self.target_word})

    # Submission phases

    def _submit_initial_guess(self) -> None:
        if not self.word_bank.is_valid(self.initial_row.word):
            self._set_invalid_word_shown(True)
            return

        self._score_row(RowId.INITIAL)
        self.initial_guess_submitted = True
        self.timer.start()
        self.cursor = 0
        self._clear_row(RowId.GUESSING)

        if self.initial_row.is_fully_correct():
            self._win()

    def _submit_subsequent_guess(self) -> None:
        if not self.word_bank.is_valid(self.guessing_row.word):
            self._set_invalid_word_shown(True)
            self.timer.deduct(self.invalid_word_penalty)
            return

        self._score_row(RowId.GUESSING)

        if self.guessing_row.is_fully_correct():
            self._win()
        else:
            self.cursor = 0
            self._clear_row(RowId.GUESSING)

    def _score_row(self, row_id: RowId) -> None:
        row = self.rows[row_id]
        verdicts = score(row.word, self.target_word, self.word_length)
        for index, verdict in enumerate(verdicts):
            row.set_verdict(index, verdict)
            self._emit_slot(row_id, index)
        self.attempts += 1
        self._set_invalid_word_shown(False)

    def _win(self) -> None:
        self.timer.stop()
        self.game_over = True
        self.won = True
        self._emit("game_won", {"attempts": self.attempts, "answer": self.target_word})

    # Notifications

    def _clear_row(self, row_id: RowId) -> None:
        row = self.rows[row_id]
        row.clear()
        for index in range(len(row)):
            self._emit_slot(row_id, index)

    def _set_invalid_word_shown(self, visible: bool, force: bool = False) -> None:
        if visible == self.invalid_word_shown and not force:
            return
        self.invalid_word_shown = visible
        self._emit("invalid_word_shown", {"visible": visible})

    def _on_timer_display(self, minutes: int, seconds: int) -> None:
        self._emit("timer_display", {
            "minutes": minutes,
            "seconds": seconds,
            "text": format_time(self.timer.remaining)
        })

    def _emit_slot(self, row_id: RowId, index: int) -> None:
        slot = self.rows[row_id].slots[index]
        self._emit("slot_changed", {
            "row": row_id.value,
            "index": index,
            "letter": "" if slot.letter == EMPTY_LETTER else slot.letter,
            "verdict": slot.verdict.value
        })

    def _emit(self, name: str, payload: dict) -> None:
        if self._listener is not None:
            self._listener(GameEvent(name, payload))
