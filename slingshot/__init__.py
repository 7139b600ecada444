from slingshot.config import SessionConstants
from slingshot.entities import Projectile, Target
from slingshot.game import GameSession, default_targets

__all__ = ["GameSession", "Projectile", "SessionConstants", "Target", "default_targets"]
