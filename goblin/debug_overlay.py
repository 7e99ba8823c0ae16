"""Frame metrics shown in a corner of the screen."""
from __future__ import annotations

from goblin.constants import DEBUG_OVERLAY_UPDATE_INTERVAL_MS

POSITIONS = ("top-left", "top-right", "bottom-left", "bottom-right")


class DebugOverlay:
    def __init__(
        self,
        *,
        enabled: bool = True,
        position: str = "top-left",
        update_interval_ms: float = DEBUG_OVERLAY_UPDATE_INTERVAL_MS,
    ) -> None:
        if position not in POSITIONS:
            raise ValueError(f"Unknown overlay position {position!r}")
        self.enabled = enabled
        self.position = position
        self.update_interval_ms = update_interval_ms
        self.fps = 0
        self._frame_count = 0
        self._last_fps_update = 0.0
        self._metrics: dict[str, str] = {}

    def update(self, now: float, delta: float) -> None:
        """Count a frame; FPS is recomputed once per update interval."""

        if not self.enabled:
            return

        self._frame_count += 1
        elapsed = now - self._last_fps_update
        if elapsed >= self.update_interval_ms:
            self.fps = round(self._frame_count / (elapsed / 1000))
            self._frame_count = 0
            self._last_fps_update = now

        self.set_metric("FPS", self.fps)
        self.set_metric("Frame Time", f"{round(delta)}ms")

    def set_metric(self, key: str, value) -> None:
        self._metrics[key] = str(value)

    def lines(self) -> list[str]:
        return [f"{key}: {value}" for key, value in self._metrics.items()]

    def toggle(self, force: bool | None = None) -> None:
        self.enabled = (not self.enabled) if force is None else force
