import pygame
from pymunk import Vec2d

from slingshot.app import handle_event
from slingshot.game import STATE_DRAGGING, STATE_FLYING, STATE_IDLE


def event(kind, **attrs):
    return pygame.event.Event(kind, attrs)


def test_quit_stops_the_loop(session):
    assert not handle_event(event(pygame.QUIT), session)


def test_left_button_drag_and_release(session):
    anchor = session.constants.anchor
    press = (round(anchor.x), round(anchor.y))

    assert handle_event(event(pygame.MOUSEBUTTONDOWN, pos=press, button=1), session)
    assert session.state == STATE_DRAGGING

    handle_event(event(pygame.MOUSEMOTION, pos=(80, 280), rel=(-20, -20), buttons=(1, 0, 0)), session)
    assert session.projectile.position == Vec2d(80, 280)

    handle_event(event(pygame.MOUSEBUTTONUP, pos=(80, 280), button=1), session)
    assert session.state == STATE_FLYING


def test_other_buttons_are_ignored(session):
    handle_event(event(pygame.MOUSEBUTTONDOWN, pos=(100, 300), button=3), session)
    assert session.state == STATE_IDLE
