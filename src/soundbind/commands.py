"""Command handlers for applying sounds to the item in a player's hand.

The command framework (argument parsing, chat rendering) belongs to the
host server. These handlers take already-parsed arguments, check the
caller's permission, run the binding engine against the main-hand item and
report the outcome through a Notifier.

Usage:
    commands = SoundCommands(engine, permissions=server.has_permission, notifier=chat)
    commands.apply(player, sound_id, range=32.0, custom_name="Lobby theme")
    commands.set_static(player, enabled=True)
"""

import logging
import math
from dataclasses import dataclass
from typing import Callable, Optional, Protocol, runtime_checkable
from uuid import UUID

from .core.binding import BindingEngine, BindResult
from .core.config import SoundBindConfig
from .core.enums import BindOutcome
from .core.errors import InvalidTargetError, RangeTooHighError
from .core.items import Item
from .core.sound import SoundReference

logger = logging.getLogger(__name__)


@dataclass
class Actor:
    """Whoever ran the command."""

    name: str
    main_hand: Item


@runtime_checkable
class Notifier(Protocol):
    """Sends feedback to the actor who ran a command."""

    def send_success(self, actor: Actor, message: str) -> None:
        ...

    def send_failure(self, actor: Actor, message: str) -> None:
        ...


class LoggingNotifier:
    """Notifier that only writes feedback to the log."""

    def send_success(self, actor: Actor, message: str) -> None:
        logger.info(f"[{actor.name}] {message}")

    def send_failure(self, actor: Actor, message: str) -> None:
        logger.warning(f"[{actor.name}] {message}")


PermissionOracle = Callable[[Actor, str], bool]


def allow_all(actor: Actor, permission: str) -> bool:
    return True


class SoundCommands:
    """The apply and setstatic commands."""

    def __init__(
        self,
        engine: BindingEngine,
        permissions: PermissionOracle = allow_all,
        notifier: Optional[Notifier] = None,
        config: Optional[SoundBindConfig] = None,
    ):
        self.engine = engine
        self.permissions = permissions
        self.notifier = notifier or LoggingNotifier()
        self.config = config or engine.adapter.config

    def apply(
        self,
        actor: Actor,
        sound_id: UUID,
        range: Optional[float] = None,
        custom_name: Optional[str] = None,
    ) -> Optional[BindResult]:
        """Bind a sound to the main-hand item (or the contents of a held shulker box).

        Returns:
            The engine's BindResult, or None if the command never reached it
        """
        if not self._check_permission(actor, self.config.apply_permission):
            return None
        if range is not None and (not math.isfinite(range) or range < self.config.min_command_range):
            self.notifier.send_failure(
                actor, f"Range must be at least {self.config.min_command_range:g}"
            )
            return None

        sound = SoundReference(id=sound_id, range=range, static=False)
        result = self.engine.apply(actor.main_hand, sound, custom_name)

        if result.succeeded:
            if result.container:
                self.notifier.send_success(actor, "Successfully updated contents")
            elif result.bound_count:
                self.notifier.send_success(actor, f"Successfully updated {result.target_name}")
            # Ineligible items are left alone without a message
        else:
            self._report_rejection(actor, result)
        return result

    def set_static(self, actor: Actor, enabled: Optional[bool] = None) -> Optional[BindResult]:
        """Toggle static playback on the main-hand item. enabled=None means on."""
        if not self._check_permission(actor, self.config.set_static_permission):
            return None

        enabled = True if enabled is None else enabled
        result = self.engine.set_static(actor.main_hand, enabled)

        if result.succeeded:
            self.notifier.send_success(
                actor, f"{'Enabled' if enabled else 'Disabled'} static audio"
            )
        else:
            self._report_rejection(actor, result)
        return result

    def _check_permission(self, actor: Actor, permission: str) -> bool:
        if self.permissions(actor, permission):
            return True
        logger.info(f"{actor.name} lacks permission {permission}")
        self.notifier.send_failure(actor, "You don't have permission to use this command")
        return False

    def _report_rejection(self, actor: Actor, result: BindResult):
        error = result.error
        if result.outcome is BindOutcome.REJECTED_INVALID_TARGET:
            if isinstance(error, InvalidTargetError) and error.empty_slot:
                message = "You don't have an item in your main hand"
            else:
                message = "The item in your main hand can not have custom audio"
        elif result.outcome is BindOutcome.REJECTED_RANGE_TOO_HIGH and isinstance(
            error, RangeTooHighError
        ):
            message = f"Range {error.range:g} is higher than the maximum of {error.max_range:g}"
        else:
            message = str(error)
        self.notifier.send_failure(actor, message)
