from dataclasses import dataclass

from pymunk import BB, Vec2d

from slingshot.geometry import as_vec, circle_box, distance


class Projectile:
    def __init__(self, position, radius: float):
        self.position: Vec2d = as_vec(position)
        self.velocity: Vec2d = Vec2d.zero()
        self.radius = radius

        self.is_flying = False
        self.is_dragging = False

    @property
    def box(self) -> BB:
        return circle_box(self.position, self.radius)

    @property
    def top_left(self) -> Vec2d:
        """Where a sprite of the projectile's size is placed so it is centred on the position."""
        return self.position - (self.radius, self.radius)

    def contains(self, point) -> bool:
        return distance(point, self.position) <= self.radius

    def halt(self):
        self.velocity = Vec2d.zero()
        self.is_flying = False

    def place_at(self, position):
        self.halt()
        self.is_dragging = False
        self.position = as_vec(position)


@dataclass
class Target:
    """A pig. Removing it is permanent."""
    box: BB
    alive: bool = True

    @classmethod
    def from_circle(cls, center, radius: float) -> "Target":
        return cls(circle_box(center, radius))

    @property
    def center(self) -> Vec2d:
        return self.box.center()

    @property
    def radius(self) -> float:
        return min(self.box.right - self.box.left, self.box.top - self.box.bottom) / 2

    def remove(self):
        self.alive = False
