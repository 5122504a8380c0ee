"""Word and bigram tokenizers over extracted document text."""

from __future__ import annotations

from collections.abc import Iterator
from itertools import groupby, pairwise

from pdfwords.models import ExtractionMode


def iter_words(text: str) -> Iterator[str]:
    """
    Yield maximal runs of Unicode letters, case preserved.

    ``str.isalpha`` is true exactly for the letter categories (Lu, Ll, Lt,
    Lm, Lo), so digits, punctuation, whitespace and combining marks all act
    as separators.
    """
    for is_letter, run in groupby(text, key=str.isalpha):
        if is_letter:
            yield "".join(run)


def _collapse_non_letters(text: str) -> str:
    return "".join(ch if ch.isalpha() else " " for ch in text)


def iter_bigrams(text: str) -> Iterator[str]:
    """Yield lower-cased adjacent word pairs joined by a single space."""
    words = _collapse_non_letters(text).split()
    for left, right in pairwise(words):
        yield f"{left.lower()} {right.lower()}"


def tokenize(text: str, mode: ExtractionMode) -> Iterator[str]:
    if mode is ExtractionMode.BIGRAMS:
        return iter_bigrams(text)
    return iter_words(text)
