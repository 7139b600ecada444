import os

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

import pytest

from slingshot import GameSession, SessionConstants, Target


@pytest.fixture
def constants():
    return SessionConstants()


@pytest.fixture
def far_target():
    # Well away from anything the projectile touches in the tests
    return Target.from_circle((700, 100), 20)


@pytest.fixture
def session(constants, far_target):
    return GameSession(constants, targets=[far_target])
