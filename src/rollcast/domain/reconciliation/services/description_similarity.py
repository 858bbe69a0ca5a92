"""Description similarity metric for fuzzy duplicate detection."""

import re

WORD_WEIGHT = 0.7
CHARACTER_WEIGHT = 0.3

_DIGIT_RUN = re.compile(r"\d+")
_WHITESPACE = re.compile(r"\s")


def description_similarity(first: str, second: str) -> float:
    """Blend of word overlap and character-set Jaccard, in ``[0, 1]``.

    Word overlap counts the words of ``first`` that also occur in ``second``
    divided by the larger word count. Digit runs inside words are masked
    first, so ``PAYMENT #1234`` and ``PAYMENT #1235`` share every word.
    The character score is the Jaccard index of the non-whitespace
    character sets of both strings.
    """
    a = first.lower().strip()
    b = second.lower().strip()
    if a == b:
        return 1.0

    word_score = _word_overlap(a, b)
    character_score = _character_jaccard(a, b)
    return WORD_WEIGHT * word_score + CHARACTER_WEIGHT * character_score


def _word_overlap(a: str, b: str) -> float:
    words_a = [_DIGIT_RUN.sub("0", word) for word in a.split()]
    words_b = [_DIGIT_RUN.sub("0", word) for word in b.split()]
    longest = max(len(words_a), len(words_b))
    if longest == 0:
        return 0.0
    lookup = set(words_b)
    common = sum(1 for word in words_a if word in lookup)
    return common / longest


def _character_jaccard(a: str, b: str) -> float:
    chars_a = set(_WHITESPACE.sub("", a))
    chars_b = set(_WHITESPACE.sub("", b))
    union = chars_a | chars_b
    if not union:
        return 0.0
    return len(chars_a & chars_b) / len(union)
