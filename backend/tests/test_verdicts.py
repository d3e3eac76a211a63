import pytest
from types import SimpleNamespace
from core.verdicts import Verdict, apply_override, classify, effective_verdict


@pytest.mark.parametrize("score, expected", [
    (0.85, Verdict.Genuine),
    (0.70, Verdict.Suspicious),
    (0.59, Verdict.Counterfeit),
    (0.60, Verdict.Suspicious),
    (1.0, Verdict.Genuine),
    (0.0, Verdict.Counterfeit),
])
def test_classify_default_thresholds(score, expected):
    assert classify(score, genuine=0.85, suspicious=0.6) == expected


def test_bands_partition_unit_interval():
    """Every score lands in exactly one band, with no gaps between them."""
    genuine, suspicious = 0.8, 0.45
    for step in range(0, 1001):
        score = step / 1000
        verdict = classify(score, genuine, suspicious)
        if score >= genuine:
            assert verdict == Verdict.Genuine
        elif score >= suspicious:
            assert verdict == Verdict.Suspicious
        else:
            assert verdict == Verdict.Counterfeit


def test_equal_thresholds_leave_no_suspicious_band():
    assert classify(0.7, genuine=0.7, suspicious=0.7) == Verdict.Genuine
    assert classify(0.69, genuine=0.7, suspicious=0.7) == Verdict.Counterfeit


def test_inverted_thresholds_are_rejected():
    with pytest.raises(ValueError):
        classify(0.7, genuine=0.6, suspicious=0.85)


@pytest.mark.parametrize("score", [-0.01, 1.01])
def test_score_out_of_range(score):
    with pytest.raises(ValueError):
        classify(score, genuine=0.85, suspicious=0.6)


@pytest.mark.parametrize("verdict, override, expected", [
    (Verdict.Suspicious, None, Verdict.Suspicious),
    (Verdict.Suspicious, Verdict.Genuine, Verdict.Genuine),
    (Verdict.Genuine, Verdict.Counterfeit, Verdict.Counterfeit),
    (Verdict.Counterfeit, Verdict.Counterfeit, Verdict.Counterfeit),
])
def test_effective_verdict(verdict, override, expected):
    assert effective_verdict(verdict, override) == expected


def _detection():
    return SimpleNamespace(verdict=Verdict.Suspicious, override_by=None, override_verdict=None, override_notes=None)


def test_second_override_replaces_first():
    detection = _detection()
    apply_override(detection, "alice", Verdict.Genuine, "ok")
    apply_override(detection, "bob", "Counterfeit", "recheck")

    assert detection.override_by == "bob"
    assert detection.override_verdict == Verdict.Counterfeit
    assert detection.override_notes == "recheck"
    assert detection.verdict == Verdict.Suspicious


@pytest.mark.parametrize("reviewer, verdict", [("", "Genuine"), ("   ", "Genuine"), ("alice", "Fake")])
def test_invalid_override_leaves_detection_untouched(reviewer, verdict):
    detection = _detection()
    with pytest.raises(ValueError):
        apply_override(detection, reviewer, verdict, "notes")

    assert detection.override_by is None
    assert detection.override_verdict is None
