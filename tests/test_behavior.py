"""
Test Suite for behavioural post-processing
"""

import pytest

from text_detector.behavior import (
    BehaviorMetrics,
    InvalidBehaviorError,
    apply_behavior,
    score_behavior,
)


def base_result(ai=50):
    return {
        "type": "text",
        "aiProbability": ai,
        "humanProbability": 100 - ai,
        "verdict": "Uncertain",
        "verdictColor": "yellow",
        "confidence": "Medium",
        "details": [],
        "stats": {},
    }


class TestPayloadValidation:

    def test_full_payload(self):
        metrics = BehaviorMetrics.from_payload({
            'pasteRatio': 0.9, 'avgCharsPerSecond': 60, 'editCount': 0, 'typingBurstiness': 0.2,
        })
        assert metrics == BehaviorMetrics(0.9, 60, 0, 0.2)

    def test_missing_fields_are_none(self):
        metrics = BehaviorMetrics.from_payload({})
        assert metrics.is_empty

    @pytest.mark.parametrize('payload', [
        'fast',
        [0.5],
        {'pasteRatio': 'high'},
        {'editCount': True},
        {'pasteRatio': 1.5},
        {'avgCharsPerSecond': -3},
        {'pasteRatio': float('nan')},
        {'avgCharsPerSecond': float('inf')},
        {'editCount': float('inf')},
    ])
    def test_invalid_payloads(self, payload):
        with pytest.raises(InvalidBehaviorError):
            BehaviorMetrics.from_payload(payload)


class TestScoring:

    def test_pasted_fast_unedited(self):
        details, shift = score_behavior(BehaviorMetrics(0.9, 60, 0, 0.2))
        assert [d["name"] for d in details] == [
            'Paste Detection', 'Input Speed', 'Edit Patterns', 'Typing Rhythm',
        ]
        assert [d["score"] for d in details] == [75, 80, 60, 65]
        assert shift == pytest.approx(0.05 + 0.04 + 0.02)
        assert details[0]["description"] == '90% of text was pasted — AI text is often pasted in'
        assert details[1]["description"] == '60.0 chars/sec — abnormally fast, suggests paste/auto-fill'

    def test_typed_slowly_with_edits(self):
        details, shift = score_behavior(BehaviorMetrics(0.1, 4.2, 12, 0.9))
        assert [d["score"] for d in details] == [20, 20, 20, 20]
        assert shift == pytest.approx(-0.03 - 0.02 - 0.02)
        assert details[0]["description"] == '10% of text was pasted — text appears to be typed'
        assert details[1]["description"] == '4.2 chars/sec — consistent with manual typing'
        assert details[2]["description"] == '12 edit(s) detected — text was revised during input'
        assert details[3]["description"] == 'Natural typing rhythm with pauses and bursts'

    def test_speed_rounds_ties_up(self):
        details, _ = score_behavior(BehaviorMetrics(avg_chars_per_second=0.25))
        assert details[0]["description"] == '0.3 chars/sec — consistent with manual typing'

    def test_large_edit_count_is_not_exponential(self):
        details, _ = score_behavior(BehaviorMetrics(edit_count=1234567))
        assert details[0]["description"] == '1234567 edit(s) detected — text was revised during input'

    def test_zero_speed_is_skipped(self):
        details, shift = score_behavior(BehaviorMetrics(avg_chars_per_second=0))
        assert details == []
        assert shift == 0

    def test_no_edits_without_paste_has_no_shift(self):
        details, shift = score_behavior(BehaviorMetrics(edit_count=0))
        assert details[0]["description"] == 'No edits detected — text entered without revision'
        assert shift == 0


class TestApply:

    def test_shift_recomputes_verdict(self):
        result = base_result(70)
        adjusted = apply_behavior(result, BehaviorMetrics(0.9, 60, 0, 0.2))
        assert adjusted["aiProbability"] == 81
        assert adjusted["humanProbability"] == 19
        assert adjusted["verdict"] == "Likely AI-Generated"
        assert adjusted["verdictColor"] == "red"
        assert len(adjusted["behavioralDetails"]) == 4

    def test_input_not_mutated(self):
        result = base_result(70)
        apply_behavior(result, BehaviorMetrics(0.9))
        assert result == base_result(70)

    def test_clamped_to_bounds(self):
        adjusted = apply_behavior(base_result(94), BehaviorMetrics(0.95, 80, 0))
        assert adjusted["aiProbability"] == 95
        adjusted = apply_behavior(base_result(6), BehaviorMetrics(0.0, 3, 20))
        assert adjusted["aiProbability"] == 5

    def test_rhythm_only_keeps_probability(self):
        adjusted = apply_behavior(base_result(50), BehaviorMetrics(typing_burstiness=0.1))
        assert adjusted["aiProbability"] == 50
        assert adjusted["behavioralDetails"][0]["name"] == 'Typing Rhythm'

    def test_empty_metrics_change_nothing(self):
        assert apply_behavior(base_result(50), BehaviorMetrics()) == base_result(50)

    def test_error_result_passes_through(self):
        error = {"error": "Please provide at least 50 characters for meaningful analysis."}
        assert apply_behavior(error, BehaviorMetrics(0.9)) is error
