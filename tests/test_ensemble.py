"""
Test Suite for the ensemble combiner, calibration and verdict mapping
"""

import pytest

from text_detector import ensemble
from text_detector.config import Confidence, Verdict, VerdictColor
from text_detector.signals import SIGNAL_CATALOG

WEIGHTS = {spec.key: spec.weight for spec in SIGNAL_CATALOG}


def uniform_scores(value):
    return {key: value for key in WEIGHTS}


class TestAgreement:

    def test_neutral_scores_have_no_agreement(self):
        assert ensemble.group_agreement(uniform_scores(0.5)) == (0, 0)
        assert ensemble.agreement_adjustment(uniform_scores(0.5)) == 0.0

    def test_all_ai_groups(self):
        assert ensemble.group_agreement(uniform_scores(0.7)) == (4, 0)
        assert ensemble.agreement_adjustment(uniform_scores(0.7)) == pytest.approx(0.14)

    def test_all_human_groups(self):
        assert ensemble.agreement_adjustment(uniform_scores(0.3)) == pytest.approx(-0.14)

    def test_single_group_is_not_enough(self):
        scores = uniform_scores(0.5)
        for key in ensemble.SIGNAL_GROUPS[0][1]:
            scores[key] = 0.9
        assert ensemble.group_agreement(scores) == (1, 0)
        assert ensemble.agreement_adjustment(scores) == 0.0

    def test_style_group_needs_four(self):
        scores = uniform_scores(0.5)
        style_members = ensemble.SIGNAL_GROUPS[0][1]
        vocab_members = ensemble.SIGNAL_GROUPS[1][1]
        for key in style_members[:3] + vocab_members[:3]:
            scores[key] = 0.9
        assert ensemble.group_agreement(scores) == (1, 0)
        scores[style_members[3]] = 0.9
        assert ensemble.agreement_adjustment(scores) == pytest.approx(0.07)


class TestOverrides:

    def test_strong_cliche(self):
        scores = uniform_scores(0.5)
        scores['cliche_density'] = 0.9
        assert ensemble.override_adjustment(scores) == pytest.approx(0.03)

    def test_no_cliche(self):
        scores = uniform_scores(0.5)
        scores['cliche_density'] = 0.1
        assert ensemble.override_adjustment(scores) == pytest.approx(-0.02)

    def test_imperfect_and_chatty(self):
        scores = uniform_scores(0.5)
        scores['grammar_perfection'] = 0.1
        scores['filler_absence'] = 0.1
        assert ensemble.override_adjustment(scores) == pytest.approx(-0.03)

    def test_polished_and_formal(self):
        scores = uniform_scores(0.5)
        scores['grammar_perfection'] = 0.9
        scores['filler_absence'] = 0.9
        assert ensemble.override_adjustment(scores) == pytest.approx(0.02)

    def test_combine_neutral(self):
        assert ensemble.combine(uniform_scores(0.5), WEIGHTS) == pytest.approx(0.5)


class TestCalibration:

    @pytest.mark.parametrize('word_count, expected', [
        (30, 0.9 * 0.65 + 0.175),
        (80, 0.9 * 0.9 + 0.05),
        (150, 0.9),
    ])
    def test_length_calibration(self, word_count, expected):
        assert ensemble.calibrate_for_length(0.9, word_count) == pytest.approx(expected)

    def test_finalize_clamps(self):
        assert ensemble.finalize_probability(1.3, 500) == 0.95
        assert ensemble.finalize_probability(-0.2, 500) == 0.05

    def test_percent_rounds_half_up(self):
        assert ensemble.to_percent(0.555) in (55, 56)
        assert ensemble.to_percent(0.125) == 13
        assert ensemble.to_percent(0.05) == 5


class TestConfidence:

    @pytest.mark.parametrize('word_count, probability, expected', [
        (40, 0.95, Confidence.LOW),
        (80, 0.95, Confidence.MEDIUM),
        (150, 0.95, Confidence.HIGH),
        (600, 0.85, Confidence.HIGH),
        (600, 0.7, Confidence.MEDIUM),
        (600, 0.55, Confidence.LOW),
        (300, 0.05, Confidence.HIGH),
    ])
    def test_confidence_label(self, word_count, probability, expected):
        assert ensemble.confidence_label(word_count, probability) == expected

    def test_short_text_always_low(self):
        for probability in (0.05, 0.5, 0.95):
            assert ensemble.confidence_label(49, probability) == Confidence.LOW


class TestVerdict:

    @pytest.mark.parametrize('percent, verdict, color', [
        (95, Verdict.LIKELY_AI, VerdictColor.RED),
        (75, Verdict.LIKELY_AI, VerdictColor.RED),
        (74, Verdict.POSSIBLY_AI, VerdictColor.ORANGE),
        (55, Verdict.POSSIBLY_AI, VerdictColor.ORANGE),
        (54, Verdict.UNCERTAIN, VerdictColor.YELLOW),
        (40, Verdict.UNCERTAIN, VerdictColor.YELLOW),
        (39, Verdict.LIKELY_HUMAN, VerdictColor.GREEN),
        (5, Verdict.LIKELY_HUMAN, VerdictColor.GREEN),
    ])
    def test_thresholds(self, percent, verdict, color):
        assert ensemble.verdict_for_percent(percent) == (verdict, color)


class TestWeightedSum:

    def test_accumulates_left_to_right(self):
        assert ensemble.weighted_sum([(1e16, 1.0), (1.0, 1.0), (-1e16, 1.0)]) == 0.0

    def test_empty(self):
        assert ensemble.weighted_sum([]) == 0.0
