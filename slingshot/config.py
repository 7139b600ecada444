"""
Game constants.

Display settings live at module level; everything the physics and input code
reads is bundled into a frozen ``SessionConstants`` so a session can be built
with different numbers in tests.
"""
import math
from dataclasses import dataclass

import pymunk

# ---------- Display ----------
WIDTH, HEIGHT = 800, 600
FPS = 60
TITLE = "Slingshot"

BACKGROUND_COLOR = (200, 255, 255)
GROUND_COLOR = (90, 160, 60)
POST_COLOR = (100, 50, 20)
BAND_COLOR = (100, 50, 20)
PROJECTILE_COLOR = (200, 30, 30)
PIG_COLOR = (110, 200, 70)
TEXT_COLOR = (0, 0, 0)

BAND_WIDTH = 5
POST_WIDTH = 8
GROUND_HEIGHT = 10

# ---------- Targets ----------
PIG_RADIUS = 20
PIG_XS = (500, 600, 700)


@dataclass(frozen=True)
class SessionConstants:
    gravity: float = 0.8
    ground_friction: float = 0.2
    speed_factor: float = 0.3
    band_half_length: float = 50.0
    anchor: pymunk.Vec2d = pymunk.Vec2d(100, 300)
    projectile_radius: float = 15.0
    rest_threshold: float = 1.0
    play_width: float = WIDTH
    play_height: float = HEIGHT

    def __post_init__(self):
        if not 0 <= self.ground_friction < 1:
            raise ValueError(f"ground_friction must be in [0, 1), got {self.ground_friction}")
        if not self.projectile_radius > 0:
            raise ValueError(f"projectile_radius must be positive, got {self.projectile_radius}")
        if not (self.play_width > 0 and self.play_height > 0):
            raise ValueError(f"playfield must have a positive size, got {self.play_width}x{self.play_height}")
        if not all(math.isfinite(c) for c in self.anchor):
            raise ValueError(f"anchor must be a finite point, got {self.anchor}")
        # Accept plain tuples for the anchor
        object.__setattr__(self, "anchor", pymunk.Vec2d(*self.anchor))

    @property
    def floor_y(self) -> float:
        """Lowest y the projectile centre may reach before bouncing."""
        return self.play_height - self.projectile_radius
