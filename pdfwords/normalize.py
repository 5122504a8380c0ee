"""Unicode normalization applied to every token before deduplication."""

from __future__ import annotations

import unicodedata
from collections.abc import Iterable, Iterator

NORMAL_FORM = "NFKC"


def normalize_token(token: str) -> str:
    return unicodedata.normalize(NORMAL_FORM, token)


def normalize_tokens(tokens: Iterable[str]) -> Iterator[str]:
    return (normalize_token(token) for token in tokens)
