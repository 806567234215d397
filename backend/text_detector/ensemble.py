"""
Ensemble combiner: weighted sum, cross-group agreement, single-signal
overrides, length calibration, confidence and verdict mapping.
"""
from typing import Mapping, Sequence, Tuple

from .config import (
    PROBABILITY_CEILING,
    PROBABILITY_FLOOR,
    Confidence,
    Verdict,
    VerdictColor,
)
from .statistics import clamp, round_half_up

AGREEMENT_STEP = 0.035

# (group name, member signal keys, members needed to count as agreeing)
SIGNAL_GROUPS: Tuple[Tuple[str, Tuple[str, ...], int], ...] = (
    ('style', (
        'transition_density', 'filler_absence', 'contraction_rate',
        'first_person_density', 'sentence_openers', 'formal_adverb_density',
        'tonal_neutrality',
    ), 4),
    ('vocabulary', (
        'cliche_density', 'lexical_sophistication', 'specificity',
        'bigram_perplexity', 'vocabulary_level_variance', 'function_word_profile',
    ), 3),
    ('structure', (
        'sentence_burstiness', 'readability_consistency', 'sentence_entropy_variance',
        'list_enumeration', 'discourse_repetition', 'probability_smoothness',
    ), 3),
    ('surface', (
        'punctuation_diversity', 'question_exclamation_ratio', 'passive_voice',
        'grammar_perfection', 'emotional_flatness', 'conjunction_starts',
    ), 3),
)


def weighted_sum(weighted_scores: Sequence[Tuple[float, float]]) -> float:
    """Accumulated left to right."""
    total = 0.0
    for score, weight in weighted_scores:
        total += score * weight
    return total


def group_agreement(scores: Mapping[str, float]) -> Tuple[int, int]:
    """Number of groups agreeing on AI (> 0.6) and on human (< 0.4)."""
    ai_groups = 0
    human_groups = 0
    for _, members, needed in SIGNAL_GROUPS:
        values = [scores[key] for key in members]
        if sum(1 for v in values if v > 0.6) >= needed:
            ai_groups += 1
        if sum(1 for v in values if v < 0.4) >= needed:
            human_groups += 1
    return ai_groups, human_groups


def agreement_adjustment(scores: Mapping[str, float]) -> float:
    ai_groups, human_groups = group_agreement(scores)
    if ai_groups >= 2:
        return AGREEMENT_STEP * ai_groups
    if human_groups >= 2:
        return -AGREEMENT_STEP * human_groups
    return 0.0


def override_adjustment(scores: Mapping[str, float]) -> float:
    cliche = scores['cliche_density']
    grammar = scores['grammar_perfection']
    filler = scores['filler_absence']

    shift = 0.0
    if cliche > 0.85:
        shift += 0.03
    if cliche < 0.15:
        shift -= 0.02
    if grammar < 0.2 and filler < 0.2:
        shift -= 0.03
    if grammar > 0.8 and filler > 0.8:
        shift += 0.02
    return shift


def combine(scores: Mapping[str, float], weights: Mapping[str, float]) -> float:
    """Raw (uncalibrated, unclamped) probability from keyed signal scores."""
    probability = weighted_sum([(scores[key], weights[key]) for key in weights])
    probability += agreement_adjustment(scores)
    probability += override_adjustment(scores)
    return probability


def calibrate_for_length(probability: float, word_count: int) -> float:
    """Pull short texts toward 0.5."""
    if word_count < 50:
        return probability * 0.65 + 0.5 * 0.35
    if word_count < 100:
        return probability * 0.9 + 0.5 * 0.1
    return probability


def finalize_probability(probability: float, word_count: int) -> float:
    return clamp(calibrate_for_length(probability, word_count), PROBABILITY_FLOOR, PROBABILITY_CEILING)


def to_percent(probability: float) -> int:
    return round_half_up(probability * 100)


def confidence_label(word_count: int, probability: float) -> str:
    decisiveness = abs(probability - 0.5) * 2
    if word_count < 50:
        length_factor = 0.3
    elif word_count < 100:
        length_factor = 0.5
    elif word_count < 200:
        length_factor = 0.75
    elif word_count < 500:
        length_factor = 0.9
    else:
        length_factor = 1.0

    confidence = decisiveness * length_factor
    if confidence >= 0.6:
        return Confidence.HIGH
    if confidence >= 0.35:
        return Confidence.MEDIUM
    return Confidence.LOW


def verdict_for_percent(ai_percent: int) -> Tuple[str, str]:
    """Map an integer AI percentage to (verdict, colour)."""
    if ai_percent >= 75:
        return Verdict.LIKELY_AI, VerdictColor.RED
    if ai_percent >= 55:
        return Verdict.POSSIBLY_AI, VerdictColor.ORANGE
    if ai_percent >= 40:
        return Verdict.UNCERTAIN, VerdictColor.YELLOW
    return Verdict.LIKELY_HUMAN, VerdictColor.GREEN
