"""Page-extraction boundary for PDF sources."""

from .errors import DocumentLoadError
from .pdf_pages import LoadedIssue, load_pdf_pages, looks_like_pdf

__all__ = ["DocumentLoadError", "LoadedIssue", "load_pdf_pages", "looks_like_pdf"]
