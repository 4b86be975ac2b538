"""Enumerations for item categories, attribute keys and bind outcomes."""

from enum import Enum


class HostObjectCategory(Enum):
    """Kinds of items that can carry a custom sound."""

    MUSIC_DISC = "music_disc"
    GOAT_HORN = "goat_horn"
    SHULKER_BOX = "shulker_box"
    NONE = "none"

    @property
    def is_container(self) -> bool:
        """Only containers are applied to recursively, slot by slot."""
        return self is HostObjectCategory.SHULKER_BOX


class AttributeKey(str, Enum):
    """Attributes an item's store may hold."""

    CUSTOM_SOUND = "custom_sound"  # serialized SoundReference
    CUSTOM_NAME = "custom_name"  # name given to the item itself
    LORE = "lore"  # display-name override written on apply
    INSTRUMENT = "instrument"  # horn sound variant, conflicts with custom audio
    JUKEBOX_PLAYABLE = "jukebox_playable"  # disc song, required to play in a jukebox
    HIDE_ADDITIONAL_TOOLTIP = "hide_additional_tooltip"
    CONTAINER = "container"  # tuple of slot Items


class BindOutcome(Enum):
    """Terminal state of an apply or set_static request."""

    SUCCEEDED = "succeeded"
    REJECTED_INVALID_TARGET = "rejected_invalid_target"
    REJECTED_RANGE_TOO_HIGH = "rejected_range_too_high"
    REJECTED_NO_BINDING = "rejected_no_binding"
