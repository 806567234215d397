"""
Behavioural post-processing.

The frontend can report how the text was entered (paste ratio, typing
speed, edits, rhythm). These readings nudge the final AI percentage and are
reported alongside the linguistic signals as `behavioralDetails`.
"""
import copy
import logging
import math
import numbers
from dataclasses import dataclass
from typing import Dict, List, Mapping, Optional

from .ensemble import verdict_for_percent
from .statistics import clamp, format_count, round_half_up, to_fixed

logger = logging.getLogger(__name__)


class InvalidBehaviorError(ValueError):
    """Behaviour payload has the wrong shape or out-of-range values."""


# payload key -> attribute name
_PAYLOAD_FIELDS = {
    'pasteRatio': 'paste_ratio',
    'avgCharsPerSecond': 'avg_chars_per_second',
    'editCount': 'edit_count',
    'typingBurstiness': 'typing_burstiness',
}


def _number(payload: Mapping, key: str) -> Optional[float]:
    value = payload.get(key)
    if value is None:
        return None
    if isinstance(value, bool) or not isinstance(value, numbers.Real):
        raise InvalidBehaviorError(f"behavior.{key} must be a number")
    if isinstance(value, float) and not math.isfinite(value):
        raise InvalidBehaviorError(f"behavior.{key} must be a finite number")
    if value < 0:
        raise InvalidBehaviorError(f"behavior.{key} must not be negative")
    return value


@dataclass(frozen=True)
class BehaviorMetrics:
    paste_ratio: Optional[float] = None
    avg_chars_per_second: Optional[float] = None
    edit_count: Optional[float] = None
    typing_burstiness: Optional[float] = None

    @classmethod
    def from_payload(cls, payload) -> 'BehaviorMetrics':
        if not isinstance(payload, Mapping):
            raise InvalidBehaviorError("behavior must be an object")
        values = {attr: _number(payload, key) for key, attr in _PAYLOAD_FIELDS.items()}
        paste_ratio = values['paste_ratio']
        if paste_ratio is not None and paste_ratio > 1:
            raise InvalidBehaviorError("behavior.pasteRatio must be between 0 and 1")
        return cls(**values)

    @property
    def is_empty(self) -> bool:
        return all(getattr(self, attr) is None for attr in _PAYLOAD_FIELDS.values())


def _detail(name: str, score: int, description: str, icon: str) -> Dict:
    return {"name": name, "score": score, "description": description, "icon": icon}


def score_behavior(metrics: BehaviorMetrics):
    """Return (details, probability shift) for the supplied readings."""
    details: List[Dict] = []
    shift = 0.0

    paste = metrics.paste_ratio
    if paste is not None:
        score = 75 if paste > 0.8 else 60 if paste > 0.5 else 45 if paste > 0.2 else 20
        pasted = round_half_up(paste * 100)
        if paste > 0.5:
            description = f"{pasted}% of text was pasted — AI text is often pasted in"
        else:
            description = f"{pasted}% of text was pasted — text appears to be typed"
        details.append(_detail('Paste Detection', score, description, 'file'))
        if paste > 0.8:
            shift += 0.05
        elif paste < 0.2:
            shift -= 0.03

    speed = metrics.avg_chars_per_second
    if speed is not None and speed > 0:
        score = 80 if speed > 50 else 65 if speed > 20 else 50 if speed > 10 else 35 if speed > 5 else 20
        if speed > 20:
            description = f"{to_fixed(speed)} chars/sec — abnormally fast, suggests paste/auto-fill"
        else:
            description = f"{to_fixed(speed)} chars/sec — consistent with manual typing"
        details.append(_detail('Input Speed', score, description, 'settings'))
        if speed > 50:
            shift += 0.04
        elif speed < 8:
            shift -= 0.02

    edits = metrics.edit_count
    if edits is not None:
        score = 60 if edits == 0 else 45 if edits < 3 else 30 if edits < 10 else 20
        if edits == 0:
            description = 'No edits detected — text entered without revision'
        else:
            description = f'{format_count(edits)} edit(s) detected — text was revised during input'
        details.append(_detail('Edit Patterns', score, description, 'edit'))
        if edits == 0 and paste is not None and paste > 0.5:
            shift += 0.02
        elif edits > 5:
            shift -= 0.02

    burst = metrics.typing_burstiness
    if burst is not None:
        score = 65 if burst < 0.3 else 50 if burst < 0.5 else 35 if burst < 0.8 else 20
        if burst < 0.3:
            description = 'Very consistent input speed — not typical of manual typing'
        else:
            description = 'Natural typing rhythm with pauses and bursts'
        details.append(_detail('Typing Rhythm', score, description, 'ruler'))

    return details, shift


def apply_behavior(result: Dict, metrics: BehaviorMetrics) -> Dict:
    """
    Adjust a text analysis result with behavioural readings.

    Returns a new dict; error results and the input dict are left untouched.
    """
    if "error" in result:
        return result

    details, shift = score_behavior(metrics)
    adjusted = copy.deepcopy(result)

    if shift != 0:
        probability = clamp(result["aiProbability"] / 100 + shift) * 100
        ai_percent = round_half_up(probability)
        verdict, color = verdict_for_percent(ai_percent)
        adjusted["aiProbability"] = ai_percent
        adjusted["humanProbability"] = 100 - ai_percent
        adjusted["verdict"] = verdict
        adjusted["verdictColor"] = color
        logger.debug(f"Behavioral shift {shift:+.2f}: {result['aiProbability']}% -> {ai_percent}%")

    if details:
        adjusted["behavioralDetails"] = details

    return adjusted
