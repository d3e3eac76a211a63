import pytest
from core.roster import DuplicateCameraError, add_camera, check_unique, remove_camera


def test_add_camera_returns_new_roster():
    cameras = ["CAM-01", "CAM-02"]
    assert add_camera(cameras, " CAM-03 ") == ["CAM-01", "CAM-02", "CAM-03"]
    assert cameras == ["CAM-01", "CAM-02"]


def test_add_duplicate_camera_is_rejected():
    cameras = ["CAM-01", "CAM-02"]
    with pytest.raises(DuplicateCameraError):
        add_camera(cameras, "CAM-02")
    assert cameras == ["CAM-01", "CAM-02"]


def test_add_blank_camera_is_rejected():
    with pytest.raises(ValueError):
        add_camera([], "  ")


def test_remove_missing_camera_is_noop():
    assert remove_camera(["CAM-01"], "CAM-09") == ["CAM-01"]


def test_remove_camera():
    assert remove_camera(["CAM-01", "CAM-02"], "CAM-01") == ["CAM-02"]


def test_check_unique():
    assert check_unique(["A", "B"]) == ["A", "B"]
    with pytest.raises(DuplicateCameraError):
        check_unique(["A", "B", "A"])
