"""
VisioNova Text Detector
Heuristic AI-generated text detection from 37 statistical and stylometric signals.

Architecture:
- Tokenizer: TextDocument built once per call (sentences, words, paragraphs, frequency tables)
- Signals: 37 independent extractors, each normalized to an AI-likelihood in [0, 1]
- Ensemble: weighted sum + cross-group agreement + single-signal overrides
- Calibration: short-text pull toward 0.5, clamp to [0.05, 0.95]
- Output: integer AI / human percentages, verdict, confidence, per-signal details

The detector is deterministic and holds no per-request state, so a single
instance can be shared between request threads.
"""
import logging
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Tuple

from .config import ANALYSIS_FAILED_PREFIX
from .ensemble import (
    combine,
    confidence_label,
    finalize_probability,
    to_percent,
    verdict_for_percent,
)
from .signals import SIGNAL_CATALOG, SignalSpec, extract_scores
from .statistics import round_half_up, round_tenth, to_fixed
from .tokenizer import TextDocument, TextValidationError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Signal:
    """One scored signal, as shown to the user."""

    key: str
    name: str
    category: str
    weight: float
    score: float
    high_description: str
    low_description: str
    icon: str

    @classmethod
    def from_spec(cls, spec: SignalSpec, score: float) -> 'Signal':
        return cls(
            key=spec.key,
            name=spec.name,
            category=spec.category,
            weight=spec.weight,
            score=score,
            high_description=spec.high_description,
            low_description=spec.low_description,
            icon=spec.icon,
        )

    @property
    def percent(self) -> int:
        return round_half_up(self.score * 100)

    @property
    def description(self) -> str:
        return self.high_description if self.score > 0.5 else self.low_description

    def to_dict(self) -> Dict:
        return {
            "key": self.key,
            "name": self.name,
            "category": self.category,
            "score": self.percent,
            "weight": self.weight,
            "description": self.description,
            "icon": self.icon,
        }


@dataclass(frozen=True)
class TextStats:
    word_count: int
    sentence_count: int
    paragraph_count: int
    unique_word_count: int
    avg_sentence_length: float
    avg_word_length: float
    vocabulary_richness: str

    @classmethod
    def from_document(cls, doc: TextDocument) -> 'TextStats':
        wc = doc.word_count
        lengths = doc.sentence_lengths
        return cls(
            word_count=wc,
            sentence_count=doc.sentence_count,
            paragraph_count=len(doc.paragraphs),
            unique_word_count=doc.unique_word_count,
            avg_sentence_length=round_tenth(sum(lengths) / len(lengths)),
            avg_word_length=round_tenth(sum(len(w) for w in doc.words) / wc),
            vocabulary_richness=f"{to_fixed(doc.unique_word_count / wc * 100)}%",
        )

    def to_dict(self) -> Dict:
        return {
            "wordCount": self.word_count,
            "sentenceCount": self.sentence_count,
            "paragraphCount": self.paragraph_count,
            "uniqueWordCount": self.unique_word_count,
            "avgSentenceLength": self.avg_sentence_length,
            "avgWordLength": self.avg_word_length,
            "vocabularyRichness": self.vocabulary_richness,
        }


@dataclass(frozen=True)
class EnsembleResult:
    ai_probability: int
    human_probability: int
    verdict: str
    verdict_color: str
    confidence: str
    probability: float
    stats: TextStats
    signals: Tuple[Signal, ...] = field(default_factory=tuple)

    def signal(self, key: str) -> Optional[Signal]:
        for sig in self.signals:
            if sig.key == key:
                return sig
        return None

    def to_dict(self) -> Dict:
        return {
            "type": "text",
            "aiProbability": self.ai_probability,
            "humanProbability": self.human_probability,
            "verdict": self.verdict,
            "verdictColor": self.verdict_color,
            "confidence": self.confidence,
            "details": [sig.to_dict() for sig in self.signals],
            "stats": self.stats.to_dict(),
        }


class AIContentDetector:
    """
    Ensemble heuristic detector.

    evaluate() raises TextValidationError for undersized input and returns
    typed results; analyze() is the dict boundary used by the API and never
    raises.
    """

    def __init__(self, catalog: Optional[Tuple[SignalSpec, ...]] = None):
        self.catalog = catalog or SIGNAL_CATALOG
        self.weights = {spec.key: spec.weight for spec in self.catalog}
        logger.info(f"AIContentDetector initialized with {len(self.catalog)} signals")

    def score_signals(self, doc: TextDocument) -> List[Signal]:
        return [Signal.from_spec(spec, score) for spec, score in extract_scores(doc, self.catalog)]

    def evaluate(self, text: str) -> EnsembleResult:
        """
        Run the full pipeline on text.

        Raises:
            InputTooShortError, InsufficientWordsError
        """
        doc = TextDocument.from_text(text)
        signals = self.score_signals(doc)
        scores = {sig.key: sig.score for sig in signals}

        raw = combine(scores, self.weights)
        probability = finalize_probability(raw, doc.word_count)
        ai_percent = to_percent(probability)
        verdict, color = verdict_for_percent(ai_percent)

        logger.debug(
            f"Analyzed {doc.word_count} words: raw={raw:.4f} final={probability:.4f} ({ai_percent}%)"
        )

        return EnsembleResult(
            ai_probability=ai_percent,
            human_probability=100 - ai_percent,
            verdict=verdict,
            verdict_color=color,
            confidence=confidence_label(doc.word_count, probability),
            probability=probability,
            stats=TextStats.from_document(doc),
            signals=tuple(signals),
        )

    def analyze(self, text: str) -> Dict:
        """Analyze text and return the wire dict, or {"error": message}."""
        try:
            return self.evaluate(text).to_dict()
        except TextValidationError as e:
            return {"error": str(e)}
        except Exception as e:
            logger.exception("Text analysis failed")
            return {"error": f"{ANALYSIS_FAILED_PREFIX}{e}"}


_detector: Optional[AIContentDetector] = None


def get_detector() -> AIContentDetector:
    """Shared detector instance."""
    global _detector
    if _detector is None:
        _detector = AIContentDetector()
    return _detector


def analyze(text: str) -> Dict:
    return get_detector().analyze(text)
