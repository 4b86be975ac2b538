"""Tests for items, attribute stores and the host object adapter."""

import pytest
from soundbind.core.enums import AttributeKey, HostObjectCategory
from soundbind.core.host import CONTAINER_SIZE
from soundbind.core.items import DictAttributeStore, Item
from soundbind.core.sound import SoundReference


class TestAttributeStore:
    """Tests for the in-memory attribute store."""

    def test_get_set_remove(self):
        store = DictAttributeStore()
        assert store.get(AttributeKey.LORE) is None
        assert not store.has(AttributeKey.LORE)

        store.set(AttributeKey.LORE, "Lobby theme")
        assert store.get(AttributeKey.LORE) == "Lobby theme"
        assert store.has(AttributeKey.LORE)

        store.remove(AttributeKey.LORE)
        assert not store.has(AttributeKey.LORE)

        # Removing again is fine
        store.remove(AttributeKey.LORE)

    def test_unknown_keys_rejected(self):
        """Test only the fixed attribute keys are accepted."""
        store = DictAttributeStore()
        with pytest.raises(KeyError):
            store.set("lore", "x")
        with pytest.raises(KeyError):
            store.get("custom_sound")

    def test_copy_is_independent(self):
        store = DictAttributeStore({AttributeKey.CUSTOM_SOUND: {"id": "a", "static": False}})
        clone = store.copy()

        clone.get(AttributeKey.CUSTOM_SOUND)["static"] = True
        assert store.get(AttributeKey.CUSTOM_SOUND)["static"] is False


class TestItem:
    """Tests for item stacks."""

    def test_empty_slot(self):
        assert Item.empty().is_empty
        assert Item("minecraft:music_disc_cat", count=0).is_empty
        assert not Item("minecraft:music_disc_cat").is_empty

    def test_display_name(self):
        """Test custom names win over the id-derived name."""
        item = Item("minecraft:music_disc_cat")
        assert item.display_name == "Music Disc Cat"

        item.attributes.set(AttributeKey.CUSTOM_NAME, "Cat Remix")
        assert item.display_name == "Cat Remix"

    def test_copy_deep_copies_attributes(self, disc):
        clone = disc.copy()
        clone.attributes.remove(AttributeKey.JUKEBOX_PLAYABLE)

        assert disc.attributes.has(AttributeKey.JUKEBOX_PLAYABLE)
        assert clone.item_id == disc.item_id


class TestClassify:
    """Tests for HostObjectAdapter.classify."""

    @pytest.mark.parametrize(
        "item_id,expected",
        [
            ("minecraft:music_disc_cat", HostObjectCategory.MUSIC_DISC),
            ("minecraft:music_disc_pigstep", HostObjectCategory.MUSIC_DISC),
            ("minecraft:goat_horn", HostObjectCategory.GOAT_HORN),
            ("minecraft:shulker_box", HostObjectCategory.SHULKER_BOX),
            ("minecraft:light_blue_shulker_box", HostObjectCategory.SHULKER_BOX),
            ("minecraft:diamond_sword", HostObjectCategory.NONE),
            ("minecraft:chest", HostObjectCategory.NONE),
            ("minecraft:disc_fragment_5", HostObjectCategory.NONE),
        ],
    )
    def test_classify_by_item_id(self, adapter, item_id, expected):
        assert adapter.classify(Item(item_id)) is expected

    def test_empty_slot_is_none(self, adapter):
        assert adapter.classify(Item.empty()) is HostObjectCategory.NONE

    def test_only_shulker_box_is_container(self):
        assert HostObjectCategory.SHULKER_BOX.is_container
        assert not HostObjectCategory.MUSIC_DISC.is_container
        assert not HostObjectCategory.GOAT_HORN.is_container
        assert not HostObjectCategory.NONE.is_container


class TestValidityAndRanges:
    """Tests for per-category validity and range policy."""

    def test_music_disc_requires_jukebox_song(self, adapter, disc):
        assert adapter.is_valid(HostObjectCategory.MUSIC_DISC, disc)

        disc.attributes.remove(AttributeKey.JUKEBOX_PLAYABLE)
        assert not adapter.is_valid(HostObjectCategory.MUSIC_DISC, disc)

    def test_horn_and_box_always_valid(self, adapter, horn, shulker_box):
        assert adapter.is_valid(HostObjectCategory.GOAT_HORN, horn)
        assert adapter.is_valid(HostObjectCategory.SHULKER_BOX, shulker_box)

    def test_none_never_valid(self, adapter):
        assert not adapter.is_valid(HostObjectCategory.NONE, Item("minecraft:stick"))

    def test_max_range_from_config(self, adapter):
        assert adapter.max_range(HostObjectCategory.MUSIC_DISC) == 8.0
        assert adapter.max_range(HostObjectCategory.GOAT_HORN) == 32.0
        assert adapter.max_range(HostObjectCategory.SHULKER_BOX) is None

        with pytest.raises(ValueError):
            adapter.max_range(HostObjectCategory.NONE)

    def test_default_range_from_config(self, adapter):
        assert adapter.default_range(HostObjectCategory.MUSIC_DISC) == 4.0
        assert adapter.default_range(HostObjectCategory.GOAT_HORN) == 16.0

        with pytest.raises(ValueError):
            adapter.default_range(HostObjectCategory.SHULKER_BOX)


class TestBindingStorage:
    """Tests for reading and writing the stored binding."""

    def test_write_then_read_round_trip(self, adapter, disc, sound_id):
        sound = SoundReference(id=sound_id, range=5.0, static=True)
        adapter.write_binding(disc, sound)

        assert adapter.current_binding(disc) == sound

    def test_no_binding(self, adapter, disc):
        assert adapter.current_binding(disc) is None

    def test_write_clears_instrument(self, adapter, horn, sound_id):
        assert horn.attributes.has(AttributeKey.INSTRUMENT)

        adapter.write_binding(horn, SoundReference(id=sound_id))
        assert not horn.attributes.has(AttributeKey.INSTRUMENT)

    def test_unreadable_binding_treated_as_absent(self, adapter, disc):
        disc.attributes.set(AttributeKey.CUSTOM_SOUND, {"range": 5.0})
        assert adapter.current_binding(disc) is None

    def test_nan_range_binding_treated_as_absent(self, adapter, disc, sound_id):
        disc.attributes.set(AttributeKey.CUSTOM_SOUND, {"id": str(sound_id), "range": float("nan")})
        assert adapter.current_binding(disc) is None


class TestContainerSlots:
    """Tests for container slot access."""

    def test_empty_box_has_all_slots(self, adapter, shulker_box):
        slots = adapter.container_slots(shulker_box)
        assert len(slots) == CONTAINER_SIZE
        assert all(slot.is_empty for slot in slots)

    def test_slots_are_copies(self, adapter, shulker_box, disc):
        adapter.write_container_slots(shulker_box, [disc] + [Item.empty()] * (CONTAINER_SIZE - 1))

        slots = adapter.container_slots(shulker_box)
        slots[0].attributes.set(AttributeKey.LORE, "changed")

        stored = shulker_box.attributes.get(AttributeKey.CONTAINER)
        assert not stored[0].attributes.has(AttributeKey.LORE)

    def test_short_contents_padded(self, adapter, shulker_box, disc):
        shulker_box.attributes.set(AttributeKey.CONTAINER, (disc,))

        slots = adapter.container_slots(shulker_box)
        assert len(slots) == CONTAINER_SIZE
        assert slots[0].item_id == disc.item_id
        assert slots[1].is_empty

    def test_write_requires_full_size(self, adapter, shulker_box):
        with pytest.raises(ValueError):
            adapter.write_container_slots(shulker_box, [Item.empty()])

    def test_non_container_rejected(self, adapter, disc):
        with pytest.raises(ValueError):
            adapter.container_slots(disc)
        with pytest.raises(ValueError):
            adapter.write_container_slots(disc, [Item.empty()] * CONTAINER_SIZE)
