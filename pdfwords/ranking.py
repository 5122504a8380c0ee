"""Deduplication, ranking and output of the final token list."""

from __future__ import annotations

import logging
import os
import tempfile
from collections.abc import Iterable
from pathlib import Path

from pdfwords.models import ExtractionMode

log = logging.getLogger(__name__)


def deduplicate(tokens: Iterable[str]) -> set[str]:
    return set(tokens)


def word_rank_key(token: str) -> tuple[int, str]:
    # len() counts code points, not encoded bytes.
    return len(token), token


def rank_tokens(tokens: Iterable[str], mode: ExtractionMode) -> list[str]:
    """
    Order unique tokens for output.

    Words sort shortest first with same-length words in code-point order.
    Bigrams sort by the joined string alone.
    """
    unique = deduplicate(tokens)
    if mode is ExtractionMode.BIGRAMS:
        return sorted(unique)
    return sorted(unique, key=word_rank_key)


def write_ranked_list(tokens: Iterable[str], destination: str | Path) -> Path:
    """
    Write one token per line, replacing ``destination`` only once the whole
    list is on disk.
    """
    out_path = Path(destination).expanduser().resolve()
    fd, tmp_name = tempfile.mkstemp(
        prefix=f".{out_path.name}.",
        suffix=".tmp",
        dir=out_path.parent,
    )
    try:
        with os.fdopen(fd, "w", encoding="utf-8", newline="\n") as handle:
            for token in tokens:
                handle.write(f"{token}\n")
        os.replace(tmp_name, out_path)
    except BaseException:
        Path(tmp_name).unlink(missing_ok=True)
        raise
    log.debug("Wrote ranked list to %s", out_path)
    return out_path
