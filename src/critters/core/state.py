"""Per-session simulation context passed explicitly to each tick."""

from dataclasses import dataclass

from critters.constants import DEFAULT_WINDOW_SIZE, FPS_SMOOTHING


@dataclass
class SimulationState:
    """Current input and frame state."""
    # Pointer position in viewport pixels
    pointer_x: float = 0.0
    pointer_y: float = 0.0

    # Index into the creature list
    current_index: int = 0

    # Draw spine links/joints on top of the creature
    debug_view: bool = False

    viewport_width: int = DEFAULT_WINDOW_SIZE[0]
    viewport_height: int = DEFAULT_WINDOW_SIZE[1]

    # Frame stats
    frame_count: int = 0
    fps: float = 0.0

    @property
    def pointer(self) -> tuple[float, float]:
        return (self.pointer_x, self.pointer_y)

    def set_pointer(self, x: float, y: float) -> None:
        self.pointer_x = float(x)
        self.pointer_y = float(y)

    def set_viewport_size(self, width: int, height: int) -> None:
        self.viewport_width = max(1, int(width))
        self.viewport_height = max(1, int(height))

    @property
    def viewport_center(self) -> tuple[float, float]:
        return (self.viewport_width / 2.0, self.viewport_height / 2.0)

    def record_frame(self, dt: float) -> None:
        """Count a frame and fold *dt* into the smoothed fps estimate."""
        self.frame_count += 1
        if dt <= 0.0:
            return
        instant = 1.0 / dt
        if self.fps == 0.0:
            self.fps = instant
        else:
            self.fps += (instant - self.fps) * FPS_SMOOTHING
