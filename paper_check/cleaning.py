from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from pathlib import Path
from typing import Callable, Iterable, List

import jieba

from paper_check.stopwords import is_stop_word
from paper_check.types import CleanedDocument

LOGGER = logging.getLogger(__name__)

DIGITS_PATTERN = re.compile(r"[0-9]+")
MIN_TOKEN_LENGTH = 2


@dataclass(frozen=True)
class SegmentOptions:
    """Configuration for Chinese word segmentation."""

    hmm: bool = True
    user_dict: Path | None = None


def load_document(path: Path) -> str:
    """Read a UTF-8 document, normalizing line endings to ``\\n``."""

    LOGGER.info("Loading document from %s", path)
    with path.open("r", encoding="utf-8", newline="") as infile:
        text = normalize_text(infile.read())
    LOGGER.debug("Loaded %d characters from %s", len(text), path)
    return text


def normalize_text(text: str) -> str:
    return text.replace("\r\n", "\n").replace("\r", "\n")


def _load_jieba_tokenizer(options: SegmentOptions) -> jieba.Tokenizer:
    if options.user_dict is None:
        return jieba.dt

    # A private instance keeps the user dictionary out of jieba's global state.
    LOGGER.info("Loading jieba user dictionary from %s", options.user_dict)
    tokenizer = jieba.Tokenizer()
    tokenizer.load_userdict(str(options.user_dict))
    return tokenizer


def build_segmenter(options: SegmentOptions | None = None) -> Callable[[str], List[str]]:
    """Return a callable that splits text into surface tokens.

    Whitespace is consumed and never emitted. Segmentation is deterministic for
    a given dictionary, so identical text always yields identical tokens.
    """

    segment_options = options or SegmentOptions()
    tokenizer = _load_jieba_tokenizer(segment_options)

    def segmenter(text: str) -> List[str]:
        tokens: List[str] = []
        for token in tokenizer.cut(text, HMM=segment_options.hmm):
            stripped = token.strip()
            if stripped:
                tokens.append(stripped)
        return tokens

    return segmenter


def segment(text: str, options: SegmentOptions | None = None) -> List[str]:
    return build_segmenter(options)(text)


def keep_token(token: str) -> bool:
    """Decide whether an already case-folded token survives filtering.

    Single characters are dropped, including Han words such as 书 and 水.
    """

    if is_stop_word(token):
        return False
    if DIGITS_PATTERN.fullmatch(token):
        return False
    return len(token) >= MIN_TOKEN_LENGTH


def filter_tokens(tokens: Iterable[str]) -> List[str]:
    """Case fold, then drop stopwords, ASCII digit runs and short tokens."""

    filtered: List[str] = []
    for token in tokens:
        lowered = token.lower()
        if keep_token(lowered):
            filtered.append(lowered)
    return filtered


def preprocess_text(
    text: str,
    segmenter: Callable[[str], List[str]] | None = None,
) -> List[str]:
    tokens = (segmenter or build_segmenter())(normalize_text(text))
    words = filter_tokens(tokens)
    LOGGER.debug("Segmented %d tokens, kept %d", len(tokens), len(words))
    return words


def clean_document(
    path: Path,
    *,
    segmenter: Callable[[str], List[str]] | None = None,
) -> CleanedDocument:
    """Load a document from disk and return its retained tokens."""

    text = load_document(path)
    return {
        "filename": path.name,
        "text": text,
        "words": preprocess_text(text, segmenter),
    }
