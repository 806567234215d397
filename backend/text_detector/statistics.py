"""
Numeric primitives shared by the signal extractors.

All helpers are total: degenerate input (too few values, zero variance,
zero mean) yields 0 instead of raising. Sums accumulate left to right so
tie-breaking at the rounding step is reproducible across platforms.
"""
import math
import re
from decimal import ROUND_HALF_UP, Decimal
from typing import Iterable, Mapping, Sequence

import numpy as np

from .tokenizer import WORD_RE, split_sentences

_SYLLABLE_SUFFIX_RE = re.compile(r'(?:[^laeiouy]es|ed|[^laeiouy]e)$')
_VOWEL_GROUP_RE = re.compile(r'[aeiouy]{1,2}')


def normalize(raw: float, center: float, steepness: float, invert: bool = False) -> float:
    """
    Map a raw statistic to an AI-likelihood in [0, 1] with a logistic curve.

    With invert=True, values below the center score as AI-like.
    """
    x = (center - raw) * steepness if invert else (raw - center) * steepness
    if x >= 0:
        return 1.0 / (1.0 + math.exp(-x))
    z = math.exp(x)
    return z / (1.0 + z)


def clamp(value: float, low: float = 0.05, high: float = 0.95) -> float:
    return min(high, max(low, value))


def round_half_up(value: float) -> int:
    """Round to the nearest integer with ties going up."""
    return int(math.floor(value + 0.5))


def round_tenth(value: float) -> float:
    return round_half_up(value * 10) / 10


def to_fixed(value: float, digits: int = 1) -> str:
    """
    Fixed-point rendering of the exact binary value, ties rounded up.

    format(0.25, '.1f') gives '0.2'; this gives '0.3'.
    """
    quantum = Decimal(1).scaleb(-digits)
    return str(Decimal(value).quantize(quantum, rounding=ROUND_HALF_UP))


def format_count(value: float) -> str:
    """Integral values without a trailing '.0' or exponent."""
    if float(value).is_integer():
        return str(int(value))
    return repr(float(value))


def sequential_sum(values) -> float:
    """Left-to-right float sum (np.sum is pairwise, builtin sum may compensate)."""
    arr = np.asarray(values, dtype=float)
    if arr.size == 0:
        return 0.0
    return float(np.add.accumulate(arr)[-1])


def shannon_entropy(freq: Mapping[str, int], total: int) -> float:
    """H = -sum(p * log2(p)) over a frequency table."""
    if total == 0:
        return 0.0
    counts = np.fromiter((c for c in freq.values() if c > 0), dtype=float)
    if counts.size == 0:
        return 0.0
    p = counts / total
    return -sequential_sum(p * np.log2(p))


def _mean(arr: np.ndarray) -> float:
    return sequential_sum(arr) / arr.size


def pearson(xs: Sequence[float], ys: Sequence[float]) -> float:
    if len(xs) < 3:
        return 0.0
    x = np.asarray(xs, dtype=float)
    y = np.asarray(ys, dtype=float)
    dx = x - _mean(x)
    dy = y - _mean(y)
    den = math.sqrt(sequential_sum(dx * dx) * sequential_sum(dy * dy))
    if den == 0:
        return 0.0
    return sequential_sum(dx * dy) / den


def autocorrelation(values: Sequence[float]) -> float:
    """Lag-1 autocorrelation."""
    if len(values) < 3:
        return 0.0
    arr = np.asarray(values, dtype=float)
    centered = arr - _mean(arr)
    den = sequential_sum(centered ** 2)
    if den == 0:
        return 0.0
    return sequential_sum(centered[:-1] * centered[1:]) / den


def coefficient_of_variation(values: Iterable[float]) -> float:
    """Population standard deviation over mean."""
    arr = np.asarray(list(values), dtype=float)
    if arr.size < 2:
        return 0.0
    mean = _mean(arr)
    if mean == 0:
        return 0.0
    return math.sqrt(sequential_sum((arr - mean) ** 2) / arr.size) / mean


def count_syllables(word: str) -> int:
    word = _SYLLABLE_SUFFIX_RE.sub('', word.lower(), count=1)
    if word.startswith('y'):
        word = word[1:]
    groups = _VOWEL_GROUP_RE.findall(word)
    return max(len(groups), 1) if groups else 1


def flesch_kincaid_grade(text: str) -> float:
    sentences = split_sentences(text)
    words = WORD_RE.findall(text)
    if not words:
        return 0.0
    syllables = sum(count_syllables(w) for w in words)
    return 0.39 * (len(words) / len(sentences)) + 11.8 * (syllables / len(words)) - 15.59
