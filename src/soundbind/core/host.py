"""Classification and attribute access for items that carry sounds."""

import logging
import re
from typing import List, Optional, Sequence

from .config import SoundBindConfig
from .enums import AttributeKey, HostObjectCategory
from .items import Item
from .sound import SoundReference

logger = logging.getLogger(__name__)

# Slots in a shulker box
CONTAINER_SIZE = 27

_MUSIC_DISC_PATTERN = re.compile(r"^minecraft:music_disc_[a-z0-9_]+$")
_SHULKER_BOX_PATTERN = re.compile(r"^minecraft:([a-z_]+_)?shulker_box$")


class HostObjectAdapter:
    """Knows which items can carry a sound and how the binding is stored on them."""

    def __init__(self, config: Optional[SoundBindConfig] = None):
        self.config = config or SoundBindConfig()

    # =========================================================================
    # CLASSIFICATION
    # =========================================================================

    def classify(self, item: Item) -> HostObjectCategory:
        """Category of an item, NONE for empty slots and unsupported items."""
        if item.is_empty:
            return HostObjectCategory.NONE
        if _MUSIC_DISC_PATTERN.match(item.item_id):
            return HostObjectCategory.MUSIC_DISC
        if item.item_id == "minecraft:goat_horn":
            return HostObjectCategory.GOAT_HORN
        if _SHULKER_BOX_PATTERN.match(item.item_id):
            return HostObjectCategory.SHULKER_BOX
        return HostObjectCategory.NONE

    def is_valid(self, category: HostObjectCategory, item: Item) -> bool:
        """Whether this particular item of the category accepts a sound."""
        if category is HostObjectCategory.MUSIC_DISC:
            # A disc without a jukebox song can't be played, so there's nothing to replace
            return item.attributes.has(AttributeKey.JUKEBOX_PLAYABLE)
        if category in (HostObjectCategory.GOAT_HORN, HostObjectCategory.SHULKER_BOX):
            return True
        return False

    def max_range(self, category: HostObjectCategory) -> Optional[float]:
        """Ceiling for a range override. None for containers, which defer to their slots."""
        if category is HostObjectCategory.MUSIC_DISC:
            return self.config.max_music_disc_range
        if category is HostObjectCategory.GOAT_HORN:
            return self.config.max_goat_horn_range
        if category is HostObjectCategory.SHULKER_BOX:
            return None
        raise ValueError(f"No range ceiling for category {category.name}")

    def default_range(self, category: HostObjectCategory) -> float:
        """Range used when a binding has no override."""
        if category is HostObjectCategory.MUSIC_DISC:
            return self.config.music_disc_range
        if category is HostObjectCategory.GOAT_HORN:
            return self.config.goat_horn_range
        raise ValueError(f"No default range for category {category.name}")

    # =========================================================================
    # BINDINGS
    # =========================================================================

    def current_binding(self, item: Item) -> Optional[SoundReference]:
        blob = item.attributes.get(AttributeKey.CUSTOM_SOUND)
        if blob is None:
            return None
        try:
            return SoundReference.from_dict(blob)
        except ValueError as e:
            logger.warning(f"Ignoring unreadable sound on {item.item_id}: {e}")
            return None

    def write_binding(self, item: Item, sound: SoundReference) -> None:
        """Replace the item's sound and drop attributes derived from the old one."""
        item.attributes.set(AttributeKey.CUSTOM_SOUND, sound.to_dict())
        item.attributes.remove(AttributeKey.INSTRUMENT)

    # =========================================================================
    # CONTAINERS
    # =========================================================================

    def container_slots(self, item: Item) -> List[Item]:
        """Copies of every slot in a container, empty slots included."""
        self._require_container(item)
        stored = item.attributes.get(AttributeKey.CONTAINER) or ()
        slots = [slot.copy() for slot in stored[:CONTAINER_SIZE]]
        slots.extend(Item.empty() for _ in range(CONTAINER_SIZE - len(slots)))
        return slots

    def write_container_slots(self, item: Item, slots: Sequence[Item]) -> None:
        """Replace all slot contents at once."""
        self._require_container(item)
        if len(slots) != CONTAINER_SIZE:
            raise ValueError(f"Expected {CONTAINER_SIZE} slots, got {len(slots)}")
        item.attributes.set(AttributeKey.CONTAINER, tuple(slots))

    def _require_container(self, item: Item) -> None:
        if not self.classify(item).is_container:
            raise ValueError(f"{item.item_id} is not a container")
