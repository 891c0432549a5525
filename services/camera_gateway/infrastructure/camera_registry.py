"""Static camera registry with per-camera online state."""

from __future__ import annotations

import threading
from dataclasses import replace

from libs.core.domain.entities import CameraRecord

DEFAULT_CAMERAS = (
    CameraRecord("CAM-001", "Main Entrance", "Building A", True),
    CameraRecord("CAM-002", "Parking Lot", "External", True),
    CameraRecord("CAM-003", "Server Room", "Building B", True),
    CameraRecord("CAM-004", "Loading Dock", "Warehouse", False),
    CameraRecord("CAM-005", "Reception", "Building A", True),
)


class InMemoryCameraRepository:
    def __init__(self, cameras: tuple[CameraRecord, ...] = DEFAULT_CAMERAS) -> None:
        self._seed = cameras
        self._cameras: dict[str, CameraRecord] = {}
        self._locks: dict[str, threading.Lock] = {}
        self.reset()

    def get(self, camera_id: str) -> CameraRecord | None:
        return self._cameras.get(camera_id)

    def list(self) -> list[CameraRecord]:
        return list(self._cameras.values())

    def set_online(
        self,
        camera_id: str,
        is_online: bool,
    ) -> tuple[CameraRecord, CameraRecord] | None:
        lock = self._locks.get(camera_id)
        if lock is None:
            return None
        with lock:
            previous = self._cameras[camera_id]
            current = replace(previous, is_online=is_online)
            self._cameras[camera_id] = current
        return previous, current

    def online_count(self) -> int:
        return sum(1 for camera in self.list() if camera.is_online)

    def reset(self) -> None:
        """Restore the seed records; the set of camera ids never changes."""
        for camera in self._seed:
            self._locks.setdefault(camera.camera_id, threading.Lock())
            self._cameras[camera.camera_id] = camera
