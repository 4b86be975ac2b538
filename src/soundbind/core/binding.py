"""Binding engine: applies custom sounds to items and containers of items.

Every public operation returns a BindResult. Binding errors are raised
internally while validating a target and converted to a rejected result
before returning, so callers never see them as exceptions. Nothing is
written to a target until all of its checks have passed.
"""

import logging
from dataclasses import dataclass
from typing import Optional
from uuid import UUID

from .enums import AttributeKey, BindOutcome, HostObjectCategory
from .errors import BindingError, InvalidTargetError, NoBindingError, RangeTooHighError
from .host import HostObjectAdapter
from .items import Item
from .sound import SoundReference

logger = logging.getLogger(__name__)


@dataclass
class BindResult:
    """Outcome of an apply or set_static request."""

    outcome: BindOutcome
    target_name: str
    bound_count: int = 0  # items that received the sound
    static: Optional[bool] = None  # new static state after set_static
    error: Optional[BindingError] = None
    container: bool = False

    @property
    def succeeded(self) -> bool:
        return self.outcome is BindOutcome.SUCCEEDED

    @classmethod
    def rejected(cls, target: Item, error: BindingError) -> "BindResult":
        """Rejection carrying the error that caused it."""
        if isinstance(error, RangeTooHighError):
            outcome = BindOutcome.REJECTED_RANGE_TOO_HIGH
        elif isinstance(error, NoBindingError):
            outcome = BindOutcome.REJECTED_NO_BINDING
        else:
            outcome = BindOutcome.REJECTED_INVALID_TARGET
        return cls(outcome=outcome, target_name=target.display_name, error=error)


class BindingEngine:
    """Applies, and toggles the static mode of, custom sounds on items."""

    def __init__(self, adapter: Optional[HostObjectAdapter] = None):
        self.adapter = adapter or HostObjectAdapter()

    # =========================================================================
    # APPLY
    # =========================================================================

    def apply(
        self,
        target: Item,
        sound: SoundReference,
        display_name: Optional[str] = None,
    ) -> BindResult:
        """Bind a sound to an item, or to every eligible item inside a container.

        Args:
            target: Item to bind to (modified in place)
            sound: Sound to bind, replacing any existing one
            display_name: Optional name shown on the item afterwards

        Returns:
            BindResult. Container applies always succeed; bound_count says how
            many slots took the sound.
        """
        category = self.adapter.classify(target)
        if category.is_container:
            return self._apply_container(target, sound, display_name)

        try:
            bound = self._apply_item(target, category, sound, display_name)
        except BindingError as e:
            logger.info(f"Rejected sound {sound.id} for {target.item_id}: {e}")
            return BindResult.rejected(target, e)

        return BindResult(
            outcome=BindOutcome.SUCCEEDED,
            target_name=target.display_name,
            bound_count=1 if bound else 0,
        )

    def apply_direct(
        self,
        target: Item,
        sound_id: UUID,
        range: Optional[float] = None,
        display_name: Optional[str] = None,
    ) -> BindResult:
        """Apply a new, non-static sound built from an id and optional range."""
        return self.apply(target, SoundReference(id=sound_id, range=range), display_name)

    def _apply_container(
        self,
        container: Item,
        sound: SoundReference,
        display_name: Optional[str],
    ) -> BindResult:
        slots = self.adapter.container_slots(container)
        bound_count = 0

        for index, slot in enumerate(slots):
            category = self.adapter.classify(slot)
            if category is HostObjectCategory.NONE or category.is_container:
                continue
            try:
                if self._apply_item(slot, category, sound, display_name):
                    bound_count += 1
            except BindingError as e:
                logger.debug(f"Skipping slot {index} ({slot.item_id}): {e}")

        self.adapter.write_container_slots(container, slots)
        logger.info(f"Applied sound {sound.id} to {bound_count} item(s) in {container.item_id}")

        return BindResult(
            outcome=BindOutcome.SUCCEEDED,
            target_name=container.display_name,
            bound_count=bound_count,
            container=True,
        )

    def _apply_item(
        self,
        item: Item,
        category: HostObjectCategory,
        sound: SoundReference,
        display_name: Optional[str],
    ) -> bool:
        """Validate and bind a single item. Returns False for the silent no-op case."""
        if category is HostObjectCategory.NONE:
            raise InvalidTargetError(empty_slot=item.is_empty, item_id=item.item_id)

        # Range is checked before the per-item eligibility rule
        max_range = self.adapter.max_range(category)
        if sound.range is not None and max_range is not None and sound.range > max_range:
            raise RangeTooHighError(sound.range, max_range)

        if not self.adapter.is_valid(category, item):
            logger.debug(f"{item.item_id} is not eligible for custom audio, leaving it untouched")
            return False

        self.adapter.write_binding(item, sound)

        if display_name is not None:
            item.attributes.set(AttributeKey.LORE, display_name)
        item.attributes.set(AttributeKey.HIDE_ADDITIONAL_TOOLTIP, True)

        logger.info(f"Bound sound {sound.id} to {item.display_name}")
        return True

    # =========================================================================
    # STATIC MODE
    # =========================================================================

    def set_static(self, target: Item, enabled: bool = True) -> BindResult:
        """Turn static playback on or off for an item's existing sound."""
        category = self.adapter.classify(target)
        try:
            # Containers only pass sounds on to their contents, they never hold one
            if category is HostObjectCategory.NONE or category.is_container:
                raise InvalidTargetError(empty_slot=target.is_empty, item_id=target.item_id)
            current = self.adapter.current_binding(target)
            if current is None:
                raise NoBindingError(item_id=target.item_id)
        except BindingError as e:
            logger.info(f"Rejected static change for {target.item_id}: {e}")
            return BindResult.rejected(target, e)

        self.adapter.write_binding(target, current.as_static(enabled))
        logger.info(f"{'Enabled' if enabled else 'Disabled'} static audio on {target.display_name}")

        return BindResult(
            outcome=BindOutcome.SUCCEEDED,
            target_name=target.display_name,
            bound_count=1,
            static=enabled,
        )
