import logging

import pygame

from slingshot import render
from slingshot.config import FPS, HEIGHT, TITLE, WIDTH
from slingshot.game import GameSession
from slingshot.logging_config import setup_logging

logger = logging.getLogger(__name__)


def handle_event(event: pygame.event.Event, session: GameSession) -> bool:
    """Forwards one pygame event to the session. Returns False when the window was closed."""
    match event.type:
        case pygame.QUIT:
            return False
        case pygame.MOUSEBUTTONDOWN:
            if event.button == 1:
                session.pointer_down(event.pos)
        case pygame.MOUSEMOTION:
            session.pointer_move(event.pos)
        case pygame.MOUSEBUTTONUP:
            if event.button == 1:
                session.pointer_up(event.pos)
    return True


def main() -> int:
    setup_logging(logging.INFO)

    pygame.init()
    screen = pygame.display.set_mode((WIDTH, HEIGHT))
    pygame.display.set_caption(TITLE)
    clock = pygame.time.Clock()
    font = pygame.font.SysFont("arial", 48, bold=True)

    session = GameSession(on_victory=lambda: logger.info("You win!"))
    logger.info(f"Session started with {len(session.targets)} pigs.")

    running = True
    while running:
        for event in pygame.event.get():
            if not handle_event(event, session):
                running = False
                break

        session.update()

        render.draw(screen, session, font)
        pygame.display.flip()
        clock.tick(FPS)

    pygame.quit()
    return 0
