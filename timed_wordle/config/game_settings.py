"""
Game Configuration Constants Module

This module defines the fixed rules of the timed game and the loading of the
two plain-text word lists. Tunable values (durations, file locations) live in
app_config; the constants here are the defaults those settings fall back on.
"""

from typing import Dict, Final, Iterable

# Core Game Configuration Constants
WORD_LENGTH: Final[int] = 5
"""
Number of letter slots in each guess row.
Type: Final[int] - Immutable to prevent accidental modification
"""

TIMER_START_SECONDS: Final[float] = 180.0
"""Clock duration at the start of a game and again after the first guess."""

INVALID_WORD_PENALTY_SECONDS: Final[float] = 10.0
"""Seconds deducted for an invalid word after the first guess."""

ALPHABET: Final[str] = "abcdefghijklmnopqrstuvwxyz"


def load_word_text(file_path: str) -> str:
    """
    Read a word list file as raw text.

    Splitting and normalization are left to the WordBank; this function only
    surfaces missing files as configuration problems.

    Args:
        file_path: Path to a line-delimited word list

    Returns:
        str: File contents

    Raises:
        FileNotFoundError: If the word list file is not found
    """
    try:
        with open(file_path, 'r', encoding='utf-8') as f:
            return f.read()
    except FileNotFoundError:
        raise FileNotFoundError(f"Word list file not found: {file_path}")


def get_word_statistics(words: Iterable[str]) -> Dict:
    """
    Analyzes a word list and returns statistical information.

    Returns:
        dict: Statistical analysis including:
            - total_words: Number of words in the list
            - avg_vowel_count: Average vowels per word
            - most_common_letters: Five most frequent letters with counts
    """
    words = list(words)
    if not words:
        return {"error": "Word list is empty"}

    vowels = set('aeiou')
    total_vowels = sum(len([char for char in word if char in vowels]) for word in words)

    letter_frequency = {}
    for word in words:
        for char in word:
            letter_frequency[char] = letter_frequency.get(char, 0) + 1

    return {
        "total_words": len(words),
        "avg_vowel_count": round(total_vowels / len(words), 2),
        "most_common_letters": sorted(letter_frequency.items(), key=lambda x: x[1], reverse=True)[:5]
    }
