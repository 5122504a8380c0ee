"""External collaborators: OCR engine and PDF text extraction."""

from __future__ import annotations

import logging
import shutil
import subprocess
from collections.abc import Iterable
from pathlib import Path
from typing import Protocol

import fitz

from pdfwords.config import OCR_COMMAND, OCR_IMAGE_DPI, OCR_LANGUAGE

log = logging.getLogger(__name__)


class PdfWordsError(RuntimeError):
    """Raised for conditions that abort the whole run."""


class MissingDependencyError(PdfWordsError):
    """Raised when a required external command is not installed."""


class InputError(PdfWordsError):
    """Raised when the input or output path cannot be used."""


class PipelineError(PdfWordsError):
    """Raised when ranking or writing the final list fails."""


class DocumentError(RuntimeError):
    """Raised when a single document cannot be processed."""


class OcrError(DocumentError):
    """Raised when the OCR engine fails for a document."""


class ExtractionError(DocumentError):
    """Raised when text cannot be extracted from a document."""


class OcrEngine(Protocol):
    def ocr(self, source: Path, destination: Path) -> None: ...


class TextExtractor(Protocol):
    def extract(self, path: Path) -> str: ...


def check_dependencies(commands: Iterable[str]) -> None:
    for command in commands:
        if shutil.which(command) is None:
            raise MissingDependencyError(
                f"Required command '{command}' not found. Please install it."
            )


class OcrMyPdfEngine:
    """Adds a text layer to pages that lack one by shelling out to OCRmyPDF."""

    def __init__(
        self,
        command: str = OCR_COMMAND,
        language: str = OCR_LANGUAGE,
        image_dpi: int = OCR_IMAGE_DPI,
    ) -> None:
        self.command = command
        self.language = language
        self.image_dpi = image_dpi

    @property
    def required_commands(self) -> tuple[str, ...]:
        return (self.command,)

    def build_command(self, source: Path, destination: Path) -> list[str]:
        return [
            self.command,
            "--skip-text",  # leave pages that already carry text untouched
            "--image-dpi",
            str(self.image_dpi),
            "-l",
            self.language,
            str(source),
            str(destination),
        ]

    def ocr(self, source: Path, destination: Path) -> None:
        cmd = self.build_command(source, destination)
        log.debug("Running %s", " ".join(cmd))
        try:
            result = subprocess.run(cmd, capture_output=True, text=True, errors="replace")
        except OSError as exc:
            raise OcrError(f"Could not start {self.command}: {exc}") from exc
        if result.returncode != 0:
            detail = (result.stderr or result.stdout).strip().splitlines()
            reason = detail[-1] if detail else f"exit status {result.returncode}"
            raise OcrError(f"{self.command} failed for {source}: {reason}")
        if not destination.exists():
            raise OcrError(f"{self.command} produced no output for {source}")


class NullOcrEngine:
    """Passes documents through unchanged, for PDFs that already carry text."""

    required_commands: tuple[str, ...] = ()

    def ocr(self, source: Path, destination: Path) -> None:
        try:
            shutil.copyfile(source, destination)
        except OSError as exc:
            raise OcrError(f"Could not copy {source}: {exc}") from exc


class PyMuPdfExtractor:
    def extract(self, path: Path) -> str:
        try:
            with fitz.open(path) as pdf:
                return "\n".join(page.get_text("text") for page in pdf)
        except (RuntimeError, ValueError, OSError) as exc:
            # PyMuPDF reports damaged or non-PDF input as FileDataError/RuntimeError.
            raise ExtractionError(f"Failed to extract text from {path}: {exc}") from exc
