"""
Test Suite for the Text Detector
End-to-end behaviour of AIContentDetector on representative inputs.
"""

import pytest

from conftest import AI_STYLE_TEXT, CASUAL_TEXT, REPEATED_WORD_TEXT, SHORT_TEXT
from text_detector import (
    AIContentDetector,
    InputTooShortError,
    InsufficientWordsError,
    analyze,
)
from text_detector.config import Confidence, Verdict
from text_detector.signals import SIGNAL_CATALOG
from text_detector.statistics import round_half_up


class TestInputValidation:
    """Undersized input is rejected before any signal runs"""

    def test_random_characters_too_short(self, detector):
        with pytest.raises(InputTooShortError):
            detector.evaluate('xq7#kz!pw0 lm3vb9 ty2&nc8rd 5fj')

    def test_repeated_word_insufficient_words(self, detector):
        assert len(REPEATED_WORD_TEXT) >= 50
        with pytest.raises(InsufficientWordsError):
            detector.evaluate(REPEATED_WORD_TEXT)

    def test_whitespace_padding_does_not_count(self, detector):
        with pytest.raises(InputTooShortError):
            detector.evaluate('   short text   ' + ' ' * 100)

    def test_analyze_returns_error_dict(self, detector):
        assert detector.analyze('too short') == {
            "error": "Please provide at least 50 characters for meaningful analysis."
        }
        assert detector.analyze(REPEATED_WORD_TEXT) == {
            "error": "Please provide at least 10 words for accurate analysis."
        }

    @pytest.mark.parametrize('value', [None, '', 12345, ['a list']])
    def test_non_text_counts_as_too_short(self, detector, value):
        result = detector.analyze(value)
        assert result["error"].startswith("Please provide at least 50 characters")

    def test_unexpected_failure_is_reported(self, detector, monkeypatch):
        def boom(doc):
            raise RuntimeError("boom")

        monkeypatch.setattr(detector, 'score_signals', boom)
        assert detector.analyze(AI_STYLE_TEXT) == {"error": "Analysis failed: boom"}


class TestScenarios:
    """Representative AI-styled and casual human texts"""

    def test_cliche_saturated_text_scores_as_ai(self, detector):
        result = detector.evaluate(AI_STYLE_TEXT)

        assert result.ai_probability >= 55
        assert result.verdict in (Verdict.POSSIBLY_AI, Verdict.LIKELY_AI)
        assert result.signal('cliche_density').percent == 100
        assert result.signal('transition_density').percent == 100

    def test_casual_text_scores_as_human(self, detector):
        result = detector.evaluate(CASUAL_TEXT)

        assert result.ai_probability < 40
        assert result.verdict == Verdict.LIKELY_HUMAN
        assert result.verdict_color == 'green'
        assert result.signal('filler_absence').percent == 0
        assert result.signal('contraction_rate').percent == 0

    def test_repeat_runs_are_identical(self, detector):
        first = detector.analyze(AI_STYLE_TEXT)
        second = detector.analyze(AI_STYLE_TEXT)
        assert first == second
        assert [d["key"] for d in first["details"]] == [s.key for s in SIGNAL_CATALOG]

    def test_separate_instances_agree(self):
        assert AIContentDetector().analyze(CASUAL_TEXT) == AIContentDetector().analyze(CASUAL_TEXT)

    def test_module_level_analyze(self):
        assert analyze(CASUAL_TEXT)["aiProbability"] < 40


class TestResultShape:
    """Wire contract of a successful analysis"""

    @pytest.fixture
    def result(self, detector):
        return detector.analyze(CASUAL_TEXT)

    def test_top_level_fields(self, result):
        assert result["type"] == "text"
        for key in ("aiProbability", "humanProbability", "verdict", "verdictColor",
                    "confidence", "details", "stats"):
            assert key in result

    def test_probabilities_sum_to_100(self, result):
        assert result["aiProbability"] + result["humanProbability"] == 100
        assert 5 <= result["aiProbability"] <= 95

    def test_details_cover_catalog(self, result):
        details = result["details"]
        assert len(details) == 37
        for detail, spec in zip(details, SIGNAL_CATALOG):
            assert detail["name"] == spec.name
            assert detail["icon"] == spec.icon
            assert 0 <= detail["score"] <= 100
            expected = spec.high_description if detail["score"] > 50 else spec.low_description
            if detail["score"] != 50:
                assert detail["description"] == expected

    def test_stats(self, result):
        assert result["stats"] == {
            "wordCount": 155,
            "sentenceCount": 15,
            "paragraphCount": 3,
            "uniqueWordCount": 117,
            "avgSentenceLength": 11.2,
            "avgWordLength": 4.1,
            "vocabularyRichness": "75.5%",
        }

    def test_verdict_matches_percentage(self, detector):
        for text in (AI_STYLE_TEXT, CASUAL_TEXT, SHORT_TEXT):
            result = detector.analyze(text)
            ai = result["aiProbability"]
            if ai >= 75:
                assert result["verdict"] == Verdict.LIKELY_AI
            elif ai >= 55:
                assert result["verdict"] == Verdict.POSSIBLY_AI
            elif ai >= 40:
                assert result["verdict"] == Verdict.UNCERTAIN
            else:
                assert result["verdict"] == Verdict.LIKELY_HUMAN


class TestShortText:
    """Texts under 50 words are pulled toward the middle"""

    def test_short_text_low_confidence(self, detector):
        result = detector.evaluate(SHORT_TEXT)
        assert result.stats.word_count < 50
        assert result.confidence == Confidence.LOW

    def test_short_text_stays_near_middle(self, detector):
        result = detector.evaluate(SHORT_TEXT)
        # 0.65 * p + 0.175 keeps every short text inside [17.5, 82.5]
        assert 17 <= result.ai_probability <= 83

    def test_gated_signals_are_neutral(self, detector):
        result = detector.evaluate(SHORT_TEXT)
        for key in ('hapax_ratio', 'bigram_perplexity', 'probability_smoothness',
                    'function_word_profile', 'ngram_repetition', 'paragraph_consistency'):
            assert result.signal(key).score == 0.5


class TestStatsFormatting:

    def test_vocabulary_richness_rounds_ties_up(self, detector):
        # 13 unique words out of 16 is exactly 81.25%
        text = 'alpha beta gamma delta epsilon zeta eta theta iota kappa lambda mu nu alpha beta gamma.'
        stats = detector.analyze(text)["stats"]
        assert stats["wordCount"] == 16
        assert stats["uniqueWordCount"] == 13
        assert stats["vocabularyRichness"] == "81.3%"
        assert stats["avgWordLength"] == 4.4

    def test_probability_is_the_final_fraction(self, detector):
        result = detector.evaluate(CASUAL_TEXT)
        assert 0.05 <= result.probability <= 0.95
        assert round_half_up(result.probability * 100) == result.ai_probability
