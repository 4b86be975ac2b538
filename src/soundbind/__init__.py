"""SoundBind: custom sounds for music discs, goat horns and shulker boxes.

Sounds are identified by a UUID naming a Filebin upload. Binding attaches
that id (plus range and static-mode settings) to an item; resolution turns
the id into a downloadable wav URL when the sound is first played.

Usage:
    from soundbind import BindingEngine, Item, SoundReference, ResolutionClient

    engine = BindingEngine()
    result = engine.apply(disc, SoundReference(id=sound_id, range=32.0))

    with ResolutionClient("https://filebin.net") as client:
        asset = client.resolve(sound_id)
"""

from .core import (
    AttributeKey,
    AttributeStore,
    BindingEngine,
    BindingError,
    BindOutcome,
    BindResult,
    CONTAINER_SIZE,
    DictAttributeStore,
    HostObjectAdapter,
    HostObjectCategory,
    InvalidTargetError,
    Item,
    MalformedResponseError,
    NoAudioAssetError,
    NoBindingError,
    RangeTooHighError,
    ResolutionError,
    ResolvedAsset,
    SoundBindConfig,
    SoundBindError,
    SoundReference,
    UpstreamError,
)
from .resolution import ResolutionClient
from .commands import Actor, LoggingNotifier, Notifier, SoundCommands

__version__ = "0.1.0"

__all__ = [
    "AttributeKey",
    "AttributeStore",
    "BindingEngine",
    "BindingError",
    "BindOutcome",
    "BindResult",
    "CONTAINER_SIZE",
    "DictAttributeStore",
    "HostObjectAdapter",
    "HostObjectCategory",
    "InvalidTargetError",
    "Item",
    "MalformedResponseError",
    "NoAudioAssetError",
    "NoBindingError",
    "RangeTooHighError",
    "ResolutionError",
    "ResolvedAsset",
    "SoundBindConfig",
    "SoundBindError",
    "SoundReference",
    "UpstreamError",
    "ResolutionClient",
    "Actor",
    "LoggingNotifier",
    "Notifier",
    "SoundCommands",
]
