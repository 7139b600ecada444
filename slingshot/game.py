import logging
from typing import Callable

from slingshot import physics
from slingshot.config import PIG_RADIUS, PIG_XS, SessionConstants
from slingshot.entities import Projectile, Target
from slingshot.geometry import boxes_intersect
from slingshot.sling import SlingShot

logger = logging.getLogger(__name__)

STATE_IDLE = "idle"
STATE_DRAGGING = "dragging"
STATE_FLYING = "flying"


def default_targets(constants: SessionConstants, radius: float = PIG_RADIUS) -> list[Target]:
    """Pigs sitting on the ground on the far side of the field."""
    y = constants.play_height - radius
    return [Target.from_circle((x, y), radius) for x in PIG_XS]


class GameSession:
    """
    Everything one round needs: the projectile, the slingshot driving it and the pigs.

    The shell calls ``update()`` once per frame and forwards pointer events to
    ``pointer_down``/``pointer_move``/``pointer_up``. ``on_victory`` is called once,
    on the tick that removes the last pig.
    """

    def __init__(self, constants: SessionConstants | None = None, targets: list[Target] | None = None,
                 on_victory: Callable[[], None] | None = None):
        self.constants = constants if constants is not None else SessionConstants()
        self.targets = list(targets) if targets is not None else default_targets(self.constants)
        if not self.targets:
            raise ValueError("A session needs at least one target")

        self.on_victory = on_victory
        self.won = False

        self.projectile = Projectile(self.constants.anchor, self.constants.projectile_radius)
        self.slingshot = SlingShot(self.projectile, self.constants)
        self.slingshot.reset()

    @property
    def state(self) -> str:
        if self.projectile.is_dragging:
            return STATE_DRAGGING
        if self.projectile.is_flying:
            return STATE_FLYING
        return STATE_IDLE

    @property
    def alive_targets(self) -> list[Target]:
        return [target for target in self.targets if target.alive]

    def pointer_down(self, pos) -> bool:
        return self.slingshot.pointer_down(pos)

    def pointer_move(self, pos):
        self.slingshot.pointer_move(pos)

    def pointer_up(self, pos):
        return self.slingshot.pointer_up(pos)

    def reset(self):
        self.slingshot.reset()

    def update(self):
        """One tick: move the projectile, then look for a pig it hit."""
        if not self.projectile.is_flying:
            return

        if physics.step(self.projectile, self.constants):
            logger.info("Projectile came to rest, back to the anchor.")
            self.reset()
            return

        self.check_collisions()

    def check_collisions(self) -> Target | None:
        """Removes the first pig the projectile overlaps and stops the projectile there."""
        projectile_box = self.projectile.box
        hit = next((t for t in self.alive_targets if boxes_intersect(t.box, projectile_box)), None)
        if hit is None:
            return None

        hit.remove()
        self.projectile.halt()
        logger.info(f"Hit a pig at {hit.center}, {len(self.alive_targets)} left.")

        if not self.alive_targets and not self.won:
            self.won = True
            logger.info("All pigs removed.")
            if self.on_victory is not None:
                self.on_victory()
        return hit
