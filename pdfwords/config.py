"""Centralized configuration for pdfwords."""

from __future__ import annotations

import os
from pathlib import Path

from dotenv import load_dotenv

PROJECT_ROOT = Path(__file__).resolve().parent.parent
load_dotenv(PROJECT_ROOT / ".env")

# OCR collaborator
OCR_COMMAND = os.getenv("PDFWORDS_OCR_COMMAND", "ocrmypdf")
OCR_LANGUAGE = os.getenv("PDFWORDS_OCR_LANGUAGE", "hin")
OCR_IMAGE_DPI = int(os.getenv("PDFWORDS_OCR_IMAGE_DPI", "300"))

# Input enumeration
PDF_SUFFIX = ".pdf"
OCR_ARTIFACT_SUFFIX = "_ocr.pdf"

# Diagnostics
LOG_LEVEL = os.getenv("PDFWORDS_LOG_LEVEL", "INFO").strip().upper()
LOG_FORMAT = "%(asctime)s [%(name)s] %(levelname)s %(message)s"
LOG_DATEFMT = "%H:%M:%S"
