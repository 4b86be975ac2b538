"""Core data model and binding engine."""

from .binding import BindingEngine, BindResult
from .config import SoundBindConfig
from .enums import AttributeKey, BindOutcome, HostObjectCategory
from .errors import (
    BindingError,
    InvalidTargetError,
    MalformedResponseError,
    NoAudioAssetError,
    NoBindingError,
    RangeTooHighError,
    ResolutionError,
    SoundBindError,
    UpstreamError,
)
from .host import CONTAINER_SIZE, HostObjectAdapter
from .items import AttributeStore, DictAttributeStore, Item
from .sound import ResolvedAsset, SoundReference

__all__ = [
    "BindingEngine",
    "BindResult",
    "SoundBindConfig",
    "AttributeKey",
    "BindOutcome",
    "HostObjectCategory",
    "BindingError",
    "InvalidTargetError",
    "MalformedResponseError",
    "NoAudioAssetError",
    "NoBindingError",
    "RangeTooHighError",
    "ResolutionError",
    "SoundBindError",
    "UpstreamError",
    "CONTAINER_SIZE",
    "HostObjectAdapter",
    "AttributeStore",
    "DictAttributeStore",
    "Item",
    "ResolvedAsset",
    "SoundReference",
]
