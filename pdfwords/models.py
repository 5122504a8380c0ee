"""Shared data models for pdfwords."""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, Field, computed_field


class ExtractionMode(str, Enum):
    WORDS = "words"
    BIGRAMS = "bigrams"


class Document(BaseModel):
    path: str
    exists: bool = False
    has_text_layer: bool | None = Field(
        default=None,
        description="Unknown until the OCR collaborator has run.",
    )


class DocumentOutcome(BaseModel):
    path: str
    ok: bool
    tokens: int = 0
    warning: str | None = None


class RunReport(BaseModel):
    mode: ExtractionMode
    input_path: str
    output_path: str
    documents: list[DocumentOutcome] = Field(default_factory=list)
    unique_tokens: int = 0

    @computed_field
    @property
    def processed(self) -> int:
        return sum(1 for outcome in self.documents if outcome.ok)

    @computed_field
    @property
    def skipped(self) -> int:
        return sum(1 for outcome in self.documents if not outcome.ok)
