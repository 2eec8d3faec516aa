"""Bag-of-words duplication checking for Chinese documents."""

from .cleaning import SegmentOptions, filter_tokens, preprocess_text, segment
from .model import check_documents, cosine_similarity, format_score, text_similarity
from .types import CheckResult, CleanedDocument

__all__ = [
    "SegmentOptions",
    "segment",
    "filter_tokens",
    "preprocess_text",
    "cosine_similarity",
    "text_similarity",
    "format_score",
    "check_documents",
    "CheckResult",
    "CleanedDocument",
]
