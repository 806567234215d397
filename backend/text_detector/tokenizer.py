"""
Tokenizer & normalizer.

Splits raw text into sentences, lowercase word tokens and paragraphs and
builds the frequency tables the signal extractors share. The input gate
(minimum characters / words) lives here so nothing downstream ever sees
an undersized document.
"""
import re
from collections import Counter
from dataclasses import dataclass, field
from typing import List, Tuple

from .config import (
    INPUT_TOO_SHORT_MESSAGE,
    INSUFFICIENT_WORDS_MESSAGE,
    MIN_TEXT_CHARS,
    MIN_TEXT_WORDS,
)

SENTENCE_RE = re.compile(r'[^.!?]+[.!?]+')
WORD_RE = re.compile(r"\b[a-z']+\b", re.IGNORECASE | re.ASCII)
ALNUM_TOKEN_RE = re.compile(r'\b\w+\b', re.ASCII)
PARAGRAPH_SPLIT_RE = re.compile(r'\n\s*\n')
WHITESPACE_RE = re.compile(r'\s+')


class TextValidationError(ValueError):
    """Input rejected before analysis; str(error) is the user-facing message."""

    message = ''

    def __init__(self, message: str = None):
        super().__init__(message or self.message)


class InputTooShortError(TextValidationError):
    message = INPUT_TOO_SHORT_MESSAGE


class InsufficientWordsError(TextValidationError):
    message = INSUFFICIENT_WORDS_MESSAGE


def split_sentences(text: str) -> List[str]:
    return SENTENCE_RE.findall(text) or [text]


def tokenize_words(text: str) -> List[str]:
    """Lowercase alphabetic word tokens (apostrophes kept)."""
    return WORD_RE.findall(text.lower())


def count_tokens(text: str) -> int:
    """Count of alphanumeric runs, used for sentence and paragraph lengths."""
    return len(ALNUM_TOKEN_RE.findall(text))


def first_word(sentence: str) -> str:
    return WHITESPACE_RE.split(sentence.strip())[0]


@dataclass(frozen=True)
class TextDocument:
    """Tokenized view of one input text."""

    clean: str
    lower: str
    collapsed: str
    sentences: Tuple[str, ...]
    words: Tuple[str, ...]
    paragraphs: Tuple[str, ...]
    sentence_lengths: Tuple[int, ...]
    word_freq: Counter = field(compare=False)
    bigram_freq: Counter = field(compare=False)
    char_trigram_freq: Counter = field(compare=False)

    @classmethod
    def from_text(cls, text) -> 'TextDocument':
        """
        Tokenize text, enforcing the minimum-size gate.

        Raises:
            InputTooShortError: trimmed text shorter than 50 characters
            InsufficientWordsError: fewer than 10 word tokens
        """
        if not isinstance(text, str) or len(text.strip()) < MIN_TEXT_CHARS:
            raise InputTooShortError()

        clean = text.strip()
        lower = clean.lower()
        words = tuple(WORD_RE.findall(lower))
        if len(words) < MIN_TEXT_WORDS:
            raise InsufficientWordsError()

        sentences = tuple(split_sentences(clean))
        paragraphs = tuple(p for p in PARAGRAPH_SPLIT_RE.split(clean) if p.strip())
        collapsed = WHITESPACE_RE.sub(' ', lower)

        bigrams = Counter(
            f'{words[i]} {words[i + 1]}' for i in range(len(words) - 1)
        )
        char_trigrams = Counter(
            collapsed[i:i + 3] for i in range(len(collapsed) - 2)
        )

        return cls(
            clean=clean,
            lower=lower,
            collapsed=collapsed,
            sentences=sentences,
            words=words,
            paragraphs=paragraphs,
            sentence_lengths=tuple(count_tokens(s) for s in sentences),
            word_freq=Counter(words),
            bigram_freq=bigrams,
            char_trigram_freq=char_trigrams,
        )

    @property
    def word_count(self) -> int:
        return len(self.words)

    @property
    def sentence_count(self) -> int:
        return len(self.sentences)

    @property
    def unique_word_count(self) -> int:
        return len(self.word_freq)

    def ngrams(self, n: int) -> List[str]:
        return [' '.join(self.words[i:i + n]) for i in range(len(self.words) - n + 1)]
