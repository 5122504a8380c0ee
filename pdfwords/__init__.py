"""Extract deduplicated, ranked word and bigram lists from PDF files."""

__version__ = "0.1.0"
