"""Input path validation and PDF enumeration."""

from __future__ import annotations

import os
from pathlib import Path

from pdfwords.collaborators import InputError
from pdfwords.config import PDF_SUFFIX
from pdfwords.models import Document


def _is_candidate_pdf(path: Path) -> bool:
    return path.is_file() and path.name.lower().endswith(PDF_SUFFIX)


def collect_documents(input_path: str | Path) -> list[Document]:
    """
    Resolve the input argument to the documents to process.

    A file is taken as-is. A directory contributes the PDFs directly inside
    it, sorted by name; subdirectories are not searched.
    """
    path = Path(input_path).expanduser().resolve()
    if path.is_file():
        return [Document(path=str(path), exists=True)]
    if not path.is_dir():
        raise InputError(f"'{input_path}' is not a valid file or directory.")

    pdfs = sorted(p for p in path.iterdir() if _is_candidate_pdf(p))
    if not pdfs:
        raise InputError(f"No PDF files found in directory: {input_path}")
    return [Document(path=str(pdf), exists=True) for pdf in pdfs]


def validate_output_path(output_path: str | Path) -> Path:
    path = Path(output_path).expanduser().resolve()
    if path.is_dir():
        raise InputError(f"Output path '{output_path}' is a directory.")
    if not path.parent.is_dir():
        raise InputError(f"Output directory does not exist: {path.parent}")
    # the list is renamed into place, so the directory itself must be writable
    if not os.access(path.parent, os.W_OK | os.X_OK):
        raise InputError(f"Output directory is not writable: {path.parent}")
    return path
