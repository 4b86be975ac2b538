"""Pytest configuration and fixtures."""

from uuid import UUID

import pytest
from soundbind.core.binding import BindingEngine
from soundbind.core.config import SoundBindConfig
from soundbind.core.enums import AttributeKey
from soundbind.core.host import HostObjectAdapter
from soundbind.core.items import Item


SOUND_ID = UUID("3f2b8c1e-5d4a-4e6f-9a7b-1c2d3e4f5a6b")
OTHER_SOUND_ID = UUID("9e8d7c6b-5a49-4382-b1a0-f9e8d7c6b5a4")


def _make_disc(song: str = "cat") -> Item:
    """A music disc that can still be played in a jukebox."""
    disc = Item(item_id=f"minecraft:music_disc_{song}")
    disc.attributes.set(AttributeKey.JUKEBOX_PLAYABLE, f"minecraft:{song}")
    return disc


def _make_horn(instrument: str = "ponder_goat_horn") -> Item:
    horn = Item(item_id="minecraft:goat_horn")
    horn.attributes.set(AttributeKey.INSTRUMENT, f"minecraft:{instrument}")
    return horn


@pytest.fixture
def config():
    """Create a test configuration with small, distinct ranges."""
    return SoundBindConfig(
        filebin_url="https://bins.test/",
        music_disc_range=4.0,
        max_music_disc_range=8.0,
        goat_horn_range=16.0,
        max_goat_horn_range=32.0,
    )


@pytest.fixture
def adapter(config):
    return HostObjectAdapter(config)


@pytest.fixture
def engine(adapter):
    return BindingEngine(adapter)


@pytest.fixture
def sound_id():
    return SOUND_ID


@pytest.fixture
def other_sound_id():
    return OTHER_SOUND_ID


@pytest.fixture
def make_disc():
    """Factory for playable music discs."""
    return _make_disc


@pytest.fixture
def make_horn():
    """Factory for goat horns carrying an instrument."""
    return _make_horn


@pytest.fixture
def disc():
    return _make_disc()


@pytest.fixture
def horn():
    return _make_horn()


@pytest.fixture
def shulker_box():
    """An empty purple shulker box."""
    return Item(item_id="minecraft:purple_shulker_box")
