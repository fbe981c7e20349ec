"""
Data Models Package

Contains all data models and schemas used throughout the application.
"""

from .game import EMPTY_LETTER, GameEvent, GamePhase, GameState, GuessRow, RowId, Slot, Verdict

__all__ = ['EMPTY_LETTER', 'GameEvent', 'GamePhase', 'GameState', 'GuessRow', 'RowId', 'Slot', 'Verdict']
