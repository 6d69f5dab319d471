import logging

import pytest

from songlist.config.settings import Settings
from songlist.services.models import Song


@pytest.fixture(autouse=True)
def restore_root_logger():
    """setup_logging() replaces root handlers; put the originals back."""
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)


@pytest.fixture
def dev_settings():
    return Settings(_env_file=None, ENV="development", NO_COLOR=True, LOG_LEVEL="INFO", SHUFFLE_SEED=None)


@pytest.fixture
def killchain():
    return Song("The Killchain", "Bolt Thrower", "Those Once Loyal", 2005, 4.41)


@pytest.fixture
def four_songs(killchain):
    return [
        killchain,
        Song("You Only Live Once", "Suicide Silence", "The Black Crown", 2011, 3.13),
        Song("Pull the Plug", "Death", "Leprosy", 1988, 4.27),
        Song("Tyende Sang", "Afsky", "Ofte Jeg Drømmer Mig Død", 2020, 8.39),
    ]


@pytest.fixture
def write_csv(tmp_path):
    def _write(text: str, name: str = "songs.csv"):
        path = tmp_path / name
        path.write_text(text, encoding="utf-8")
        return path
    return _write
