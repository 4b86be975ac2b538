"""Sound reference data structures."""

import math
from dataclasses import dataclass, replace
from typing import Any, Dict, Optional
from uuid import UUID


@dataclass(frozen=True)
class SoundReference:
    """A custom sound bound to an item.

    range: audible radius override in blocks, None means the category default
    static: play without positional attenuation
    """

    id: UUID
    range: Optional[float] = None
    static: bool = False

    def __post_init__(self):
        if not isinstance(self.id, UUID):
            raise ValueError(f"Sound id must be a UUID, got {self.id!r}")
        if self.range is not None:
            if isinstance(self.range, bool) or not isinstance(self.range, (int, float)):
                raise ValueError(f"Range must be a number, got {self.range!r}")
            if not math.isfinite(self.range) or self.range <= 0:
                raise ValueError(f"Range must be a positive finite number, got {self.range}")
            object.__setattr__(self, "range", float(self.range))

    def as_static(self, enabled: bool = True) -> "SoundReference":
        """Copy of this reference with only the static flag changed."""
        return replace(self, static=enabled)

    def effective_range(self, default: float) -> float:
        """Range to play at, falling back to the category default."""
        return self.range if self.range is not None else default

    def to_dict(self) -> Dict[str, Any]:
        """Convert to the blob stored on an item."""
        data: Dict[str, Any] = {"id": str(self.id), "static": self.static}
        if self.range is not None:
            data["range"] = self.range
        return data

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "SoundReference":
        """Parse a stored blob.

        Raises:
            ValueError: If the blob has no valid id, an invalid range or a non-bool static flag
        """
        if not isinstance(data, dict):
            raise ValueError(f"Sound blob must be a dict, got {type(data).__name__}")
        raw_id = data.get("id")
        if raw_id is None:
            raise ValueError("Sound blob has no id")
        try:
            sound_id = raw_id if isinstance(raw_id, UUID) else UUID(str(raw_id))
        except ValueError:
            raise ValueError(f"Invalid sound id: {raw_id!r}") from None
        static = data.get("static", False)
        if not isinstance(static, bool):
            raise ValueError(f"Static flag must be a bool, got {static!r}")
        return cls(id=sound_id, range=data.get("range"), static=static)


@dataclass(frozen=True)
class ResolvedAsset:
    """Downloadable audio file found for a sound id. Never persisted."""

    sound_id: UUID
    url: str
    content_type: str
