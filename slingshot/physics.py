"""
Per-tick projectile motion.

Units are pixels and ticks: velocity is added to the position once per tick
and gravity is added to the vertical velocity once per tick.
"""
import logging

from pymunk import Vec2d

from slingshot.config import SessionConstants
from slingshot.entities import Projectile

logger = logging.getLogger(__name__)


def bounce(velocity: Vec2d, ground_friction: float) -> Vec2d:
    return Vec2d(velocity.x, -velocity.y * ground_friction)


def step(projectile: Projectile, constants: SessionConstants) -> bool:
    """
    Advances a flying projectile by one tick.

    Returns True when a ground bounce left too little vertical speed to keep
    going, i.e. the projectile has come to rest and should go back to the anchor.
    """
    if not projectile.is_flying:
        return False

    projectile.position += projectile.velocity
    projectile.velocity += (0, constants.gravity)

    floor_y = constants.floor_y
    if projectile.position.y <= floor_y:
        return False

    projectile.position = Vec2d(projectile.position.x, floor_y)
    projectile.velocity = bounce(projectile.velocity, constants.ground_friction)
    logger.debug(f"Bounced at x={projectile.position.x:.1f}, vy={projectile.velocity.y:.2f}")

    return abs(projectile.velocity.y) < constants.rest_threshold
