"""
Guess Scoring

Implements the Wordle letter evaluation algorithm.
"""

from typing import List, Optional

from ..models.game import Verdict


def score(guess: str, target: str, length: int) -> List[Verdict]:
    """
    Scores a guess against the target word, one verdict per letter.

    Exact matches are credited first and consume their target letter; the
    remaining guess letters then consume the first unclaimed occurrence in
    the target, left to right. A target letter is credited at most once.

    Args:
        guess: The guessed word
        target: The hidden word
        length: Expected length of both words

    Returns:
        List of verdicts, CORRECT / WRONG_SPOT / INCORRECT

    Raises:
        ValueError: If either word does not have the expected length
    """
    if len(guess) != length or len(target) != length:
        raise ValueError(f"Guess and target must both be {length} letters long")

    result: List[Optional[Verdict]] = [None] * length

    # Working copy of the target to track letter consumption
    remaining: List[Optional[str]] = list(target)

    # First pass: exact position matches
    for i in range(length):
        if guess[i] == target[i]:
            result[i] = Verdict.CORRECT
            remaining[i] = None

    # Second pass: present letters and misses
    for i in range(length):
        if result[i] is Verdict.CORRECT:
            continue

        letter = guess[i]
        if letter in remaining:
            result[i] = Verdict.WRONG_SPOT
            remaining[remaining.index(letter)] = None
        else:
            result[i] = Verdict.INCORRECT

    return result  # type: ignore[return-value]
