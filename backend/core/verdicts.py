"""
Verdict classification for scored IC markings.

A detection's verdict is fixed when the detection is stored, from the match
score reported by the matching engine and the thresholds configured at that
moment. Reviewers may later attach an override; the computed verdict is kept
next to it and the override wins wherever a single verdict is displayed.
"""
import enum
from typing import Optional


class Verdict(str, enum.Enum):
    Genuine = "Genuine"
    Suspicious = "Suspicious"
    Counterfeit = "Counterfeit"


def check_thresholds(genuine: float, suspicious: float):
    """
    Raises ValueError unless both thresholds are fractions and
    ``suspicious <= genuine``.

    Equal thresholds are accepted and leave the Suspicious band empty.
    """
    for name, value in (("genuine", genuine), ("suspicious", suspicious)):
        if not 0.0 <= value <= 1.0:
            raise ValueError(f"{name} threshold must be between 0 and 1, got {value}")
    if suspicious > genuine:
        raise ValueError(
            f"suspicious threshold ({suspicious}) must not exceed genuine threshold ({genuine})"
        )


def classify(score: float, genuine: float, suspicious: float) -> Verdict:
    """
    Maps a match score onto a verdict.

    Args:
        score (float): Match score in [0, 1] from the matching engine.
        genuine (float): Lowest score classified as Genuine.
        suspicious (float): Lowest score classified as Suspicious.

    Each band is closed at its lower bound, so ``score == genuine`` is Genuine
    and ``score == suspicious`` is Suspicious.
    """
    if not 0.0 <= score <= 1.0:
        raise ValueError(f"match score must be between 0 and 1, got {score}")
    check_thresholds(genuine, suspicious)

    if score >= genuine:
        return Verdict.Genuine
    if score >= suspicious:
        return Verdict.Suspicious
    return Verdict.Counterfeit


def effective_verdict(verdict: Verdict, override_verdict: Optional[Verdict]) -> Verdict:
    """The verdict to display: the reviewer's override when present."""
    return override_verdict if override_verdict is not None else verdict


def apply_override(detection, reviewer_name: str, verdict: Verdict, notes: Optional[str] = None):
    """
    Records a reviewer's verdict on ``detection``, replacing any earlier
    override completely. The computed ``verdict`` attribute is left alone.
    """
    reviewer_name = (reviewer_name or "").strip()
    if not reviewer_name:
        raise ValueError("reviewer name is required")
    verdict = Verdict(verdict)

    detection.override_by = reviewer_name
    detection.override_verdict = verdict
    detection.override_notes = notes or ""
    return detection
