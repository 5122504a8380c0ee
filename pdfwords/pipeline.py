"""End-to-end pipeline: OCR, extract, tokenize, normalize, rank, write."""

from __future__ import annotations

import logging
import tempfile
from collections.abc import Iterable
from pathlib import Path

from pdfwords.collaborators import (
    DocumentError,
    OcrEngine,
    OcrMyPdfEngine,
    PipelineError,
    PyMuPdfExtractor,
    TextExtractor,
)
from pdfwords.config import OCR_ARTIFACT_SUFFIX
from pdfwords.ingest import collect_documents, validate_output_path
from pdfwords.models import Document, DocumentOutcome, ExtractionMode, RunReport
from pdfwords.normalize import normalize_tokens
from pdfwords.ranking import rank_tokens, write_ranked_list
from pdfwords.tokenizer import tokenize

log = logging.getLogger(__name__)


class TokenAccumulator:
    """Unique normalized tokens collected over one run."""

    def __init__(self) -> None:
        self._tokens: set[str] | None = set()

    def __enter__(self) -> TokenAccumulator:
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    def __len__(self) -> int:
        return len(self._active())

    def _active(self) -> set[str]:
        if self._tokens is None:
            raise RuntimeError("TokenAccumulator is closed.")
        return self._tokens

    @property
    def closed(self) -> bool:
        return self._tokens is None

    def add_all(self, tokens: Iterable[str]) -> None:
        self._active().update(tokens)

    def snapshot(self) -> frozenset[str]:
        return frozenset(self._active())

    def close(self) -> None:
        self._tokens = None


def _document_tokens(text: str, mode: ExtractionMode) -> list[str]:
    tokens = normalize_tokens(tokenize(text, mode))
    if mode is ExtractionMode.BIGRAMS:
        # NFKC can map letters to uppercase, e.g. U+210C to "H".
        return [token.lower() for token in tokens]
    return list(tokens)


def process_document(
    document: Document,
    accumulator: TokenAccumulator,
    mode: ExtractionMode,
    ocr: OcrEngine,
    extractor: TextExtractor,
) -> DocumentOutcome:
    source = Path(document.path)
    log.info("Processing: %s", source)
    document.exists = source.is_file()
    if not document.exists:
        warning = f"File no longer exists: {source}"
        log.warning("Skipping %s: %s", source, warning)
        return DocumentOutcome(path=document.path, ok=False, warning=warning)
    with tempfile.TemporaryDirectory(prefix="pdfwords-") as scratch:
        ocr_copy = Path(scratch) / f"{source.stem}{OCR_ARTIFACT_SUFFIX}"
        try:
            ocr.ocr(source, ocr_copy)
            document.has_text_layer = True
            text = extractor.extract(ocr_copy)
        except DocumentError as exc:
            log.warning("Skipping %s: %s", source, exc)
            return DocumentOutcome(path=document.path, ok=False, warning=str(exc))

    tokens = _document_tokens(text, mode)
    accumulator.add_all(tokens)
    log.debug("%s contributed %d tokens", source, len(tokens))
    return DocumentOutcome(path=document.path, ok=True, tokens=len(tokens))


def run_pipeline(
    input_path: str | Path,
    output_path: str | Path,
    mode: ExtractionMode = ExtractionMode.WORDS,
    ocr: OcrEngine | None = None,
    extractor: TextExtractor | None = None,
) -> RunReport:
    """
    Process every document under ``input_path`` and write the ranked list.

    Per-document failures are recorded in the report and skipped. Invalid
    paths raise ``InputError``. A run where every document fails, or where
    ranking or writing fails, raises ``PipelineError`` and leaves
    ``output_path`` untouched.
    """
    ocr = ocr or OcrMyPdfEngine()
    extractor = extractor or PyMuPdfExtractor()
    out_path = validate_output_path(output_path)
    documents = collect_documents(input_path)

    report = RunReport(mode=mode, input_path=str(input_path), output_path=str(out_path))
    with TokenAccumulator() as accumulator:
        for document in documents:
            report.documents.append(
                process_document(document, accumulator, mode, ocr, extractor)
            )
        if not report.processed:
            raise PipelineError(
                f"None of the {len(documents)} input documents could be processed."
            )
        try:
            ranked = rank_tokens(accumulator.snapshot(), mode)
            write_ranked_list(ranked, out_path)
        except (OSError, ValueError) as exc:
            raise PipelineError(f"Post-processing of {mode.value} failed: {exc}") from exc

    report.unique_tokens = len(ranked)
    if report.skipped:
        log.warning("%d of %d documents were skipped.", report.skipped, len(documents))
    return report
