import logging

from pymunk import Vec2d

from slingshot.config import SessionConstants
from slingshot.entities import Projectile
from slingshot.geometry import as_vec

logger = logging.getLogger(__name__)


class SlingShot:
    """
    Turns pointer presses, moves and releases into drag state and a launch velocity.

    The projectile is only picked up when the press lands inside its hit radius.
    A press anywhere else puts it back on the anchor. Releasing launches it away
    from the release point, proportionally to how far it was pulled.
    """

    def __init__(self, projectile: Projectile, constants: SessionConstants):
        self.projectile = projectile
        self.anchor_pos: Vec2d = constants.anchor
        self.speed_factor = constants.speed_factor
        self.band_half_length = constants.band_half_length

        self.drag_start: Vec2d | None = None

        self.left_band: tuple[Vec2d, Vec2d] = (self.left_post, self.anchor_pos)
        self.right_band: tuple[Vec2d, Vec2d] = (self.right_post, self.anchor_pos)

    @property
    def left_post(self) -> Vec2d:
        return self.anchor_pos - (self.band_half_length, 0)

    @property
    def right_post(self) -> Vec2d:
        return self.anchor_pos + (self.band_half_length, 0)

    @property
    def bands_collapsed(self) -> bool:
        return self.left_band[1] == self.anchor_pos and self.right_band[1] == self.anchor_pos

    def pointer_down(self, pos) -> bool:
        """Returns True when the press picked up the projectile."""
        pos = as_vec(pos)
        if not self.projectile.contains(pos):
            self.reset()
            return False

        # Presses on a projectile in flight don't grab it
        if self.projectile.is_flying:
            return False

        self.projectile.is_dragging = True
        self.drag_start = pos
        return True

    def pointer_move(self, pos):
        if not self.projectile.is_dragging:
            return

        self.projectile.position = as_vec(pos)
        self.set_bands(self.projectile.position)

    def pointer_up(self, pos) -> Vec2d | None:
        """Launches the projectile if it was being dragged and returns its new velocity."""
        if not self.projectile.is_dragging:
            return None

        self.projectile.is_dragging = False
        self.projectile.is_flying = True
        self.projectile.velocity = (self.drag_start - as_vec(pos)) * self.speed_factor
        self.drag_start = None
        self.hide_bands()

        logger.info(f"Launched from {self.projectile.position} with velocity {self.projectile.velocity}")
        return self.projectile.velocity

    def set_bands(self, center: Vec2d):
        self.left_band = (self.left_post, center)
        self.right_band = (self.right_post, center)

    def hide_bands(self):
        self.set_bands(self.anchor_pos)

    def reset(self):
        self.projectile.place_at(self.anchor_pos)
        self.drag_start = None
        self.hide_bands()
        logger.debug("Projectile reset to the anchor.")
