from __future__ import annotations

import logging
import math
import os
import stat
import tempfile
from collections import Counter
from decimal import ROUND_HALF_UP, Decimal
from pathlib import Path
from typing import Iterable, Mapping

import numpy as np
from numpy.typing import NDArray

from paper_check.cleaning import SegmentOptions, build_segmenter, clean_document
from paper_check.types import CheckResult

LOGGER = logging.getLogger(__name__)
FloatArray = NDArray[np.float64]

SCORE_QUANTUM = Decimal("0.01")


def _ensure_file_exists(path: Path, description: str) -> None:
    if not path.exists():
        raise FileNotFoundError(f"{description} does not exist: {path}")
    if not path.is_file():
        raise ValueError(f"{description} is not a file: {path}")


def build_frequency(words: Iterable[str]) -> Counter[str]:
    """Count occurrences of each distinct token."""

    return Counter(words)


def build_term_vectors(
    first: Mapping[str, int],
    second: Mapping[str, int],
) -> tuple[FloatArray, FloatArray, list[str]]:
    """Project two frequency maps onto their sorted shared vocabulary."""

    vocabulary = sorted(set(first) | set(second))
    first_vector: FloatArray = np.zeros(len(vocabulary), dtype=np.float64)
    second_vector: FloatArray = np.zeros(len(vocabulary), dtype=np.float64)

    for index, term in enumerate(vocabulary):
        first_vector[index] = first.get(term, 0)
        second_vector[index] = second.get(term, 0)

    return first_vector, second_vector, vocabulary


def cosine_similarity(first: Mapping[str, int], second: Mapping[str, int]) -> float:
    """Cosine of the angle between two bag-of-words vectors, in [0, 1].

    Either map being empty short-circuits to 0.0. Keys are summed in sorted
    order so repeated runs agree bit for bit, and swapping the arguments
    gives exactly the same value.
    """

    if not first or not second:
        return 0.0

    first_vector, second_vector, _ = build_term_vectors(first, second)
    dot_product = float(np.dot(first_vector, second_vector))
    first_norm = math.sqrt(float(np.dot(first_vector, first_vector)))
    second_norm = math.sqrt(float(np.dot(second_vector, second_vector)))

    denominator = first_norm * second_norm
    if denominator == 0:
        return 0.0
    return min(dot_product / denominator, 1.0)


def text_similarity(first_words: Iterable[str], second_words: Iterable[str]) -> float:
    return cosine_similarity(build_frequency(first_words), build_frequency(second_words))


def format_score(similarity: float) -> str:
    """Render a similarity as a percentage with two decimals, rounding half up."""

    if not math.isfinite(similarity) or not 0.0 <= similarity <= 1.0:
        raise ValueError(f"Similarity must be within [0, 1], got {similarity!r}")
    percentage = Decimal(repr(similarity * 100)).quantize(SCORE_QUANTUM, rounding=ROUND_HALF_UP)
    return f"{percentage:.2f}"


def format_console_line(similarity: float) -> str:
    return f"重复率: {format_score(similarity)}%"


def _result_mode(result_path: Path) -> int:
    if result_path.exists():
        return stat.S_IMODE(result_path.stat().st_mode)
    umask = os.umask(0)
    os.umask(umask)
    return 0o666 & ~umask


def save_result(similarity: float, result_path: Path) -> Path:
    """Write the formatted score, replacing the target only once fully written."""

    content = format_score(similarity)
    result_path.parent.mkdir(parents=True, exist_ok=True)

    LOGGER.info("Writing result %s to %s", content, result_path)
    fd, temp_name = tempfile.mkstemp(
        prefix=f".{result_path.name}.", suffix=".tmp", dir=result_path.parent
    )
    temp_path = Path(temp_name)
    try:
        with os.fdopen(fd, "w", encoding="utf-8", newline="") as outfile:
            outfile.write(content)
        os.chmod(temp_path, _result_mode(result_path))
        os.replace(temp_path, result_path)
    except BaseException:
        temp_path.unlink(missing_ok=True)
        raise
    return result_path


def check_documents(
    paper_path: Path,
    reference_path: Path,
    result_path: Path,
    *,
    options: SegmentOptions | None = None,
) -> CheckResult:
    """Compare two documents and write the percentage score to ``result_path``."""

    LOGGER.info("Preparing to compare %s with %s", paper_path, reference_path)
    _ensure_file_exists(paper_path, "Paper file")
    _ensure_file_exists(reference_path, "Reference file")

    segmenter = build_segmenter(options)
    paper = clean_document(paper_path, segmenter=segmenter)
    reference = clean_document(reference_path, segmenter=segmenter)

    similarity = text_similarity(paper["words"], reference["words"])
    LOGGER.info(
        "Similarity %.6f (%d vs %d retained tokens)",
        similarity,
        len(paper["words"]),
        len(reference["words"]),
    )

    save_result(similarity, result_path)
    return {
        "paper": str(paper_path),
        "reference": str(reference_path),
        "similarity": similarity,
        "score": format_score(similarity),
    }
