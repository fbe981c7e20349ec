"""
Testing the board state machine and its coupling to the clock.
"""

import pytest

from timed_wordle.models.game import EMPTY_LETTER, GamePhase, GuessRow, RowId, Verdict
from timed_wordle.services.game_engine import GameEngine
from timed_wordle.services.timer import CountdownTimer
from timed_wordle.services.word_bank import ConfigurationError, WordBank


def type_word(game, word):
    for letter in word:
        game.on_letter_input(letter)


def event_names(events):
    return [event.name for event in events]


def submit_word(game, word):
    type_word(game, word)
    game.on_submit()


# GuessRow

def test_row_word_uses_sentinel_for_unwritten_slots():
    row = GuessRow(5)
    row.set_letter(0, 'c')
    row.set_letter(1, 'r')
    assert row.word == 'cr' + EMPTY_LETTER * 3


def test_row_clear_is_idempotent():
    row = GuessRow(5)
    for i, letter in enumerate('crane'):
        row.set_letter(i, letter)
        row.set_verdict(i, Verdict.CORRECT)
    assert row.is_fully_correct()

    row.clear()
    row.clear()
    assert row.word == EMPTY_LETTER * 5
    assert all(slot.verdict == Verdict.EMPTY for slot in row.slots)
    assert not row.is_fully_correct()
    assert row.as_pairs() == [('', 'EMPTY')] * 5


# Input handling

def test_new_game_resets_board_and_starts_clock(engine, timer):
    assert engine.target_word == 'crane'
    assert engine.cursor == 0
    assert engine.phase == GamePhase.AWAITING_INITIAL
    assert not engine.game_over
    assert timer.running
    assert timer.remaining == 180.0


def test_letter_input_fills_active_row(engine, events):
    type_word(engine, 'CR')
    assert engine.cursor == 2
    assert engine.initial_row.slots[0].letter == 'c'
    assert engine.initial_row.slots[1].verdict == Verdict.OCCUPIED
    assert event_names(events) == ['slot_changed', 'slot_changed']
    assert events[0].payload == {'row': 'initial', 'index': 0, 'letter': 'c', 'verdict': 'OCCUPIED'}


def test_letter_input_ignored_when_row_full(engine):
    type_word(engine, 'cranes')
    assert engine.cursor == 5
    assert engine.initial_row.word == 'crane'


def test_malformed_letters_are_ignored(engine, events):
    for value in ['', 'ab', '1', ' ', None, 'é']:
        engine.on_letter_input(value)
    assert engine.cursor == 0
    assert events == []


def test_backspace_clears_previous_slot(engine):
    type_word(engine, 'cra')
    engine.on_backspace()
    assert engine.cursor == 2
    assert engine.initial_row.slots[2].letter == EMPTY_LETTER
    assert engine.initial_row.slots[2].verdict == Verdict.EMPTY


def test_backspace_at_start_is_noop(engine, events):
    engine.on_backspace()
    assert engine.cursor == 0
    assert events == []


def test_submit_requires_full_row(engine, timer):
    type_word(engine, 'cran')
    engine.on_submit()
    assert engine.cursor == 4
    assert not engine.initial_guess_submitted
    assert not engine.invalid_word_shown
    assert timer.remaining == 180.0


# Initial phase

def test_invalid_initial_guess_has_no_penalty(engine, timer, events):
    timer.tick(20.0)
    submit_word(engine, 'zzzzz')

    assert engine.invalid_word_shown
    assert not engine.initial_guess_submitted
    assert engine.cursor == 5
    assert engine.initial_row.word == 'zzzzz'
    assert timer.remaining == 160.0
    assert events[-1].name == 'invalid_word_shown'
    assert events[-1].payload == {'visible': True}


def test_backspace_hides_invalid_word_message(engine):
    submit_word(engine, 'zzzzz')
    engine.on_backspace()
    assert not engine.invalid_word_shown
    engine.on_letter_input('a')
    assert engine.cursor == 5


def test_valid_initial_guess_scores_and_restarts_clock(engine, timer):
    timer.tick(42.0)
    submit_word(engine, 'crate')

    verdicts = [slot.verdict for slot in engine.initial_row.slots]
    assert verdicts == [Verdict.CORRECT, Verdict.CORRECT, Verdict.CORRECT,
                        Verdict.INCORRECT, Verdict.CORRECT]
    assert engine.initial_guess_submitted
    assert engine.phase == GamePhase.AWAITING_SUBSEQUENT
    assert engine.cursor == 0
    assert engine.guessing_row.word == EMPTY_LETTER * 5
    assert timer.remaining == 180.0
    assert timer.running
    assert engine.attempts == 1


def test_letters_go_to_guessing_row_after_initial_guess(engine):
    submit_word(engine, 'crate')
    type_word(engine, 'tr')
    assert engine.active_row_id == RowId.GUESSING
    assert engine.guessing_row.slots[1].letter == 'r'
    assert engine.initial_row.word == 'crate'


def test_winning_initial_guess(engine, timer, events):
    submit_word(engine, 'crane')

    assert engine.game_over
    assert engine.won
    assert engine.phase == GamePhase.WON
    assert not timer.running
    assert events[-1].name == 'game_won'
    assert events[-1].payload == {'attempts': 1, 'answer': 'crane'}


# Subsequent phase

def test_invalid_subsequent_guess_costs_ten_seconds(engine, timer):
    submit_word(engine, 'crate')
    timer.tick(5.0)
    submit_word(engine, 'zzzzz')

    assert engine.invalid_word_shown
    assert timer.remaining == 165.0
    assert engine.cursor == 5
    assert engine.guessing_row.word == 'zzzzz'
    assert engine.attempts == 1


def test_non_winning_subsequent_guess_clears_guessing_row(engine, timer):
    submit_word(engine, 'crate')
    timer.tick(30.0)
    submit_word(engine, 'trace')

    assert not engine.game_over
    assert engine.cursor == 0
    assert engine.guessing_row.word == EMPTY_LETTER * 5
    assert engine.attempts == 2
    # Only the first guess resets the clock
    assert timer.remaining == 150.0


def test_many_guesses_then_win(engine, timer, events):
    for word in ['crate', 'trace', 'react', 'cater', 'speed', 'about']:
        submit_word(engine, word)
        assert not engine.game_over

    submit_word(engine, 'crane')
    assert engine.game_over
    assert engine.won
    assert engine.attempts == 7
    assert not timer.running
    assert engine.guessing_row.is_fully_correct()
    assert event_names(events).count('game_won') == 1


def test_penalty_running_out_the_clock_loses(engine, timer, events):
    submit_word(engine, 'crate')
    timer.tick(175.0)
    submit_word(engine, 'zzzzz')

    assert engine.game_over
    assert engine.lost
    assert engine.phase == GamePhase.LOST
    assert not engine.invalid_word_shown
    assert timer.remaining == 0
    assert event_names(events).count('game_lost') == 1


# Time expiry

def test_clock_expiry_ends_game_and_blocks_input(engine, timer, events):
    type_word(engine, 'cra')
    timer.tick(181.0)

    assert engine.game_over
    assert engine.lost
    assert events[-1].name in ('game_lost', 'timer_display')
    assert event_names(events).count('game_lost') == 1

    events.clear()
    engine.on_letter_input('n')
    engine.on_backspace()
    engine.on_submit()
    assert engine.cursor == 3
    assert event_names(events) == []


def test_repeated_expiry_callback_signals_once(engine, events):
    engine.on_time_expired()
    engine.on_time_expired()
    assert event_names(events).count('game_lost') == 1


def test_no_input_after_win(engine):
    submit_word(engine, 'crane')
    engine.on_letter_input('a')
    assert engine.cursor == 0
    assert engine.guessing_row.word == EMPTY_LETTER * 5


# Restart and new game

def test_restart_keeps_target_and_resets_board(engine, timer, word_bank, monkeypatch):
    submit_word(engine, 'crate')
    timer.tick(100.0)
    submit_word(engine, 'zzzzz')

    picks = []
    monkeypatch.setattr(word_bank, 'pick_target', lambda: picks.append(1) or 'trace')
    engine.restart_game()

    assert picks == []
    assert engine.target_word == 'crane'
    assert engine.cursor == 0
    assert not engine.initial_guess_submitted
    assert not engine.invalid_word_shown
    assert engine.attempts == 0
    assert engine.initial_row.word == EMPTY_LETTER * 5
    assert timer.remaining == 180.0
    assert timer.running


def test_new_game_after_loss_draws_new_target(engine, timer, word_bank, monkeypatch):
    timer.tick(200.0)
    assert engine.lost

    monkeypatch.setattr(word_bank, 'pick_target', lambda: 'trace')
    engine.new_game()

    assert engine.target_word == 'trace'
    assert not engine.game_over
    assert not engine.lost
    assert engine.phase == GamePhase.AWAITING_INITIAL
    assert timer.running


def test_submit_before_first_game_is_ignored(word_bank):
    game = GameEngine(word_bank, CountdownTimer())
    type_word(game, 'crane')
    game.on_submit()
    assert not game.initial_guess_submitted


def test_new_game_rejects_target_that_does_not_fit_rows():
    bank = WordBank(['crane', 'cranes'], ['cranes'])
    game = GameEngine(bank, CountdownTimer())
    with pytest.raises(ConfigurationError):
        game.new_game()
    assert game.target_word is None

    type_word(game, 'crane')
    game.on_submit()
    assert not game.initial_guess_submitted


def test_timer_display_events_carry_formatted_text(engine, timer, events):
    timer.tick(54.3)
    shown = [event.payload for event in events if event.name == 'timer_display']
    assert shown[-1] == {'minutes': 2, 'seconds': 5, 'text': '02:05'}
