"""
VisioNova Text Detector Module
Heuristic AI-generated text detection from 37 statistical and stylometric signals.
"""
from . import config
from .behavior import BehaviorMetrics, InvalidBehaviorError, apply_behavior
from .document_analyzer import DocumentAnalyzer
from .document_parser import DocumentParser
from .signals import SIGNAL_CATALOG, SignalSpec
from .text_detector_service import (
    AIContentDetector,
    EnsembleResult,
    Signal,
    TextStats,
    analyze,
    get_detector,
)
from .tokenizer import (
    InputTooShortError,
    InsufficientWordsError,
    TextDocument,
    TextValidationError,
)

__all__ = [
    'AIContentDetector', 'EnsembleResult', 'Signal', 'TextStats', 'analyze', 'get_detector',
    'BehaviorMetrics', 'InvalidBehaviorError', 'apply_behavior',
    'DocumentAnalyzer', 'DocumentParser',
    'SIGNAL_CATALOG', 'SignalSpec',
    'TextDocument', 'TextValidationError', 'InputTooShortError', 'InsufficientWordsError',
    'config',
]
