import pygame

from slingshot.config import (BACKGROUND_COLOR, BAND_COLOR, BAND_WIDTH, GROUND_COLOR, GROUND_HEIGHT, PIG_COLOR,
                              POST_COLOR, POST_WIDTH, PROJECTILE_COLOR, TEXT_COLOR)
from slingshot.game import GameSession

VICTORY_TEXT = "You win!"


def to_screen(point) -> tuple[int, int]:
    return round(point[0]), round(point[1])


def draw_ground(surface: pygame.Surface):
    pygame.draw.rect(surface, GROUND_COLOR,
                     (0, surface.get_height() - GROUND_HEIGHT, surface.get_width(), GROUND_HEIGHT))


def draw_slingshot(surface: pygame.Surface, session: GameSession):
    sling = session.slingshot
    for post in (sling.left_post, sling.right_post):
        pygame.draw.line(surface, POST_COLOR, to_screen(post), to_screen((post.x, surface.get_height())), POST_WIDTH)

    for start, end in (sling.left_band, sling.right_band):
        pygame.draw.line(surface, BAND_COLOR, to_screen(start), to_screen(end), BAND_WIDTH)


def draw_targets(surface: pygame.Surface, session: GameSession):
    for target in session.alive_targets:
        pygame.draw.circle(surface, PIG_COLOR, to_screen(target.center), round(target.radius))


def draw_projectile(surface: pygame.Surface, session: GameSession):
    projectile = session.projectile
    diameter = round(projectile.radius * 2)
    rect = pygame.Rect(to_screen(projectile.top_left), (diameter, diameter))
    pygame.draw.ellipse(surface, PROJECTILE_COLOR, rect)


def draw_banner(surface: pygame.Surface, font: pygame.font.Font, text: str = VICTORY_TEXT):
    rendered = font.render(text, True, TEXT_COLOR)
    surface.blit(rendered, rendered.get_rect(center=(surface.get_width() / 2, surface.get_height() / 3)))


def draw(surface: pygame.Surface, session: GameSession, font: pygame.font.Font | None = None):
    """Redraws the whole playfield for the current session state."""
    surface.fill(BACKGROUND_COLOR)
    draw_ground(surface)
    draw_targets(surface, session)
    draw_slingshot(surface, session)
    draw_projectile(surface, session)

    if session.won and font is not None:
        draw_banner(surface, font)
