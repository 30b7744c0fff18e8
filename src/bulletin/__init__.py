"""Newsletter segmentation and significance-scoring engine."""

from .engine import extract, score_candidates
from .models import Article, ExtractionResult, Page, PatternKind, Section

__all__ = [
    "Article",
    "ExtractionResult",
    "Page",
    "PatternKind",
    "Section",
    "extract",
    "score_candidates",
]
