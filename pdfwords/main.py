"""CLI entrypoint for pdfwords."""

from __future__ import annotations

import argparse
import json
import logging
import sys

from pdfwords.collaborators import (
    NullOcrEngine,
    OcrMyPdfEngine,
    PdfWordsError,
    check_dependencies,
)
from pdfwords.config import (
    LOG_DATEFMT,
    LOG_FORMAT,
    LOG_LEVEL,
    OCR_IMAGE_DPI,
    OCR_LANGUAGE,
)
from pdfwords.models import ExtractionMode
from pdfwords.pipeline import run_pipeline

log = logging.getLogger("pdfwords")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="pdfwords",
        description=(
            "OCR a PDF or a folder of PDFs and write the unique words, "
            "sorted by length, one per line."
        ),
    )
    parser.add_argument(
        "--bigrams",
        action="store_true",
        help="Emit lower-cased adjacent word pairs, sorted alphabetically.",
    )
    parser.add_argument(
        "--lang",
        default=OCR_LANGUAGE,
        help=f"OCR language passed to ocrmypdf -l (default: {OCR_LANGUAGE}).",
    )
    parser.add_argument(
        "--image-dpi",
        type=int,
        default=OCR_IMAGE_DPI,
        help=f"Assumed DPI for images without resolution info (default: {OCR_IMAGE_DPI}).",
    )
    parser.add_argument(
        "--no-ocr",
        action="store_true",
        help="Skip OCR and extract the existing text layer only.",
    )
    parser.add_argument(
        "--report",
        action="store_true",
        help="Print a JSON run report to stdout.",
    )
    verbosity = parser.add_mutually_exclusive_group()
    verbosity.add_argument("-v", "--verbose", action="store_true", help="Debug logging.")
    verbosity.add_argument("-q", "--quiet", action="store_true", help="Warnings and errors only.")
    parser.add_argument("input", help="Input PDF file or directory of PDFs.")
    parser.add_argument("output", help="Output text file.")
    return parser


def configure_logging(verbose: bool = False, quiet: bool = False) -> None:
    if verbose:
        level = logging.DEBUG
    elif quiet:
        level = logging.WARNING
    else:
        level = getattr(logging, LOG_LEVEL, logging.INFO)
    if not logging.getLogger().handlers:
        logging.basicConfig(
            level=level,
            format=LOG_FORMAT,
            datefmt=LOG_DATEFMT,
            stream=sys.stderr,
        )
    logging.getLogger().setLevel(level)


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    configure_logging(verbose=args.verbose, quiet=args.quiet)
    mode = ExtractionMode.BIGRAMS if args.bigrams else ExtractionMode.WORDS

    if args.no_ocr:
        ocr = NullOcrEngine()
    else:
        ocr = OcrMyPdfEngine(language=args.lang, image_dpi=args.image_dpi)

    try:
        check_dependencies(ocr.required_commands)
        report = run_pipeline(args.input, args.output, mode=mode, ocr=ocr)
    except PdfWordsError as exc:
        log.error("Error: %s", exc)
        return 1

    if mode is ExtractionMode.BIGRAMS:
        log.info("Processed bigram output saved to: %s", report.output_path)
    else:
        log.info("Processed output saved to: %s", report.output_path)
    if args.report:
        print(json.dumps(report.model_dump(mode="json"), indent=2, ensure_ascii=False))
    return 0


if __name__ == "__main__":
    sys.exit(main())
