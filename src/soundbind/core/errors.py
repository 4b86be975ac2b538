"""Exceptions raised while resolving and binding sounds."""

from typing import Optional


class SoundBindError(Exception):
    """Base class for all SoundBind errors."""


# =============================================================================
# RESOLUTION
# =============================================================================

class ResolutionError(SoundBindError):
    """The file host could not turn a sound id into an audio URL."""

    def __init__(self, url: str, message: str):
        self.url = url
        self.message = message
        super().__init__(message)


class UpstreamError(ResolutionError):
    """The file host answered with a status other than 200."""

    def __init__(self, url: str, status_code: int):
        self.status_code = status_code
        super().__init__(url, f"{url} responded with status {status_code}")


class MalformedResponseError(ResolutionError):
    """The file host answered 200 with JSON of an unexpected shape."""

    def __init__(self, url: str, reason: str = "Invalid response"):
        self.reason = reason
        super().__init__(url, f"Invalid response from {url}: {reason}")


class NoAudioAssetError(ResolutionError):
    """No uploaded file has the accepted content type."""

    def __init__(self, url: str, content_type: str):
        self.content_type = content_type
        super().__init__(url, f"No compatible audio uploaded to {url} (expected {content_type})")


# =============================================================================
# BINDING
# =============================================================================

class BindingError(SoundBindError):
    """A sound could not be bound to (or changed on) a target item."""


class InvalidTargetError(BindingError):
    """The target cannot carry a custom sound.

    Args:
        empty_slot: True if there was no item at all, False for the wrong kind of item
        item_id: Id of the rejected item, if any
    """

    def __init__(self, empty_slot: bool, item_id: Optional[str] = None):
        self.empty_slot = empty_slot
        self.item_id = item_id
        if empty_slot:
            message = "No item to apply the sound to"
        else:
            message = f"{item_id} can not have custom audio"
        super().__init__(message)


class RangeTooHighError(BindingError):
    """Requested range is above the ceiling for the target's category."""

    def __init__(self, range: float, max_range: float):
        self.range = range
        self.max_range = max_range
        super().__init__(f"Range {range} is higher than the maximum of {max_range}")


class NoBindingError(BindingError):
    """The target has no custom sound to modify."""

    def __init__(self, item_id: Optional[str] = None):
        self.item_id = item_id
        super().__init__("This item does not have custom audio")
