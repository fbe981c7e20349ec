"""
Game Service

Manages timed game sessions: creation, player input, clock ticks and state
snapshots.
"""

import threading
import time
import uuid
from typing import Callable, Dict, List, Optional

from ..config.app_config import Config
from ..config.game_settings import load_word_text
from ..models.game import GameEvent, GameState
from ..utils.game_logger import game_logger
from .game_engine import GameEngine
from .timer import CountdownTimer
from .word_bank import ConfigurationError, WordBank

EventSink = Callable[[str, GameEvent], None]


class GameSession:
    """One engine, its timer and the lock that serializes all mutation."""

    def __init__(self, game_id: str, engine: GameEngine, timer: CountdownTimer):
        self.game_id = game_id
        self.engine = engine
        self.timer = timer
        self.lock = threading.RLock()
        self.created_at = time.time()


class GameService:
    """
    Core game service managing multiple game sessions.

    This class handles:
    - Game session management with unique game IDs
    - Routing decoded input events to the right engine
    - Advancing every running clock from the tick worker
    - Game state snapshots without exposing answers to clients

    Every operation on a game holds that game's lock, so a clock running out
    is resolved entirely before or after a submission, never in between.
    """

    def __init__(self,
                 word_bank: WordBank,
                 word_length: int = Config.WORD_LENGTH,
                 timer_start_seconds: float = Config.TIMER_START_SECONDS,
                 invalid_word_penalty: float = Config.INVALID_WORD_PENALTY_SECONDS,
                 event_sink: Optional[EventSink] = None):
        bad = [w for w in word_bank.solutions if len(w) != word_length]
        if bad:
            raise ConfigurationError(
                f"Solutions must be {word_length} letters long, found: {bad[:5]}"
            )

        self.word_bank = word_bank
        self.word_length = word_length
        self.timer_start_seconds = timer_start_seconds
        self.invalid_word_penalty = invalid_word_penalty
        self.event_sink = event_sink
        self.games: Dict[str, GameSession] = {}
        self._games_lock = threading.Lock()

    def set_event_sink(self, event_sink: Optional[EventSink]) -> None:
        self.event_sink = event_sink

    def create_new_game(self) -> str:
        """
        Creates a new game session with a randomly selected word and starts
        its clock.

        Returns:
            str: Unique game ID for this session
        """
        game_id = str(uuid.uuid4())

        timer = CountdownTimer(start_time=self.timer_start_seconds)
        engine = GameEngine(
            self.word_bank,
            timer,
            listener=lambda event: self._dispatch(game_id, event),
            word_length=self.word_length,
            invalid_word_penalty=self.invalid_word_penalty
        )
        session = GameSession(game_id, engine, timer)

        with self._games_lock:
            self.games[game_id] = session

        with session.lock:
            engine.new_game()

        return game_id

    def _get_session(self, game_id: str) -> Optional[GameSession]:
        with self._games_lock:
            return self.games.get(game_id)

    def _apply(self, game_id: str, action: Callable[[GameEngine], None]) -> Optional[GameState]:
        session = self._get_session(game_id)
        if session is None:
            return None

        with session.lock:
            action(session.engine)
            return self._snapshot(session)

    def restart_game(self, game_id: str) -> Optional[GameState]:
        """Restarts a game against the same target word."""
        state = self._apply(game_id, lambda engine: engine.restart_game())
        if state is not None:
            game_logger.log_game_event(game_id, 'game_restarted', 'system')
        return state

    def type_letter(self, game_id: str, letter: str) -> Optional[GameState]:
        return self._apply(game_id, lambda engine: engine.on_letter_input(letter))

    def backspace(self, game_id: str) -> Optional[GameState]:
        return self._apply(game_id, lambda engine: engine.on_backspace())

    def submit(self, game_id: str) -> Optional[GameState]:
        return self._apply(game_id, lambda engine: engine.on_submit())

    def get_game_state(self, game_id: str) -> Optional[GameState]:
        """
        Returns the current game state for a session (without revealing the
        answer until the game is over).
        """
        session = self._get_session(game_id)
        if session is None:
            return None

        with session.lock:
            return self._snapshot(session)

    def tick(self, delta_seconds: float) -> int:
        """
        Advances every running clock by delta_seconds.

        Returns:
            int: Number of clocks that were running
        """
        with self._games_lock:
            sessions: List[GameSession] = list(self.games.values())

        ticked = 0
        for session in sessions:
            with session.lock:
                if session.timer.running:
                    session.timer.tick(delta_seconds)
                    ticked += 1
        return ticked

    def delete_game(self, game_id: str) -> bool:
        """
        Removes a game session from memory.

        Returns:
            bool: True if game was deleted, False if not found
        """
        with self._games_lock:
            session = self.games.pop(game_id, None)

        if session is None:
            return False

        with session.lock:
            session.timer.stop()
        return True

    def active_game_count(self) -> int:
        with self._games_lock:
            return sum(1 for session in self.games.values() if not session.engine.game_over)

    def _snapshot(self, session: GameSession) -> GameState:
        engine = session.engine
        timer = session.timer

        return GameState(
            game_id=session.game_id,
            phase=engine.phase.value,
            initial_row=engine.initial_row.as_pairs(),
            guessing_row=engine.guessing_row.as_pairs(),
            cursor=engine.cursor,
            word_length=engine.word_length,
            initial_guess_submitted=engine.initial_guess_submitted,
            game_over=engine.game_over,
            won=engine.won,
            lost=engine.lost,
            invalid_word_shown=engine.invalid_word_shown,
            attempts=engine.attempts,
            time_remaining=round(timer.remaining, 3),
            timer_running=timer.running,
            timer_display=timer.display_text(),
            answer=engine.target_word if engine.game_over else None
        )

    def _dispatch(self, game_id: str, event: GameEvent) -> None:
        if event.name in ('game_won', 'game_lost'):
            game_logger.log_game_event(game_id, event.name, 'system', **event.payload)

        if self.event_sink is None:
            return

        try:
            self.event_sink(game_id, event)
        except Exception as e:
            game_logger.logger.error(f"Error delivering {event.name} for game {game_id}: {e}")


def load_word_bank(config_class=Config) -> WordBank:
    """
    Loads the configured word lists.

    Raises:
        FileNotFoundError: If a word list file is missing
        ConfigurationError: If a word list is empty or holds bad solutions
    """
    valid_text = load_word_text(config_class.VALID_WORDS_FILE)
    solutions_text = load_word_text(config_class.SOLUTIONS_FILE)
    return WordBank.from_text(valid_text, solutions_text, word_length=config_class.WORD_LENGTH)


# Global service instance
_game_service = None


def get_game_service() -> Optional[GameService]:
    """Get the global game service instance."""
    return _game_service


def initialize_game_service(config_class=Config, word_bank: Optional[WordBank] = None) -> GameService:
    """Initialize the global game service instance."""
    global _game_service
    if word_bank is None:
        word_bank = load_word_bank(config_class)

    _game_service = GameService(
        word_bank,
        word_length=config_class.WORD_LENGTH,
        timer_start_seconds=config_class.TIMER_START_SECONDS,
        invalid_word_penalty=config_class.INVALID_WORD_PENALTY_SECONDS
    )
    return _game_service
