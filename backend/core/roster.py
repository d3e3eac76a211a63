from typing import List


class DuplicateCameraError(ValueError):
    """Raised when a camera name is already on the roster."""

    def __init__(self, camera: str):
        super().__init__(f"Camera {camera} already exists")
        self.camera = camera


def normalize_camera(camera: str) -> str:
    camera = (camera or "").strip()
    if not camera:
        raise ValueError("camera name must not be blank")
    return camera


def add_camera(cameras: List[str], camera: str) -> List[str]:
    """Returns a new roster with ``camera`` appended; the input list is never modified."""
    camera = normalize_camera(camera)
    if camera in cameras:
        raise DuplicateCameraError(camera)
    return [*cameras, camera]


def remove_camera(cameras: List[str], camera: str) -> List[str]:
    """Returns a new roster without ``camera``. Removing an unknown camera changes nothing."""
    return [c for c in cameras if c != camera]


def check_unique(cameras: List[str]) -> List[str]:
    seen = []
    for camera in cameras:
        camera = normalize_camera(camera)
        if camera in seen:
            raise DuplicateCameraError(camera)
        seen.append(camera)
    return seen
