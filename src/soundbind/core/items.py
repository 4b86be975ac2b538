"""Items and the attribute stores that hold their side data."""

import copy
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any, Dict, Iterator, Optional

from .enums import AttributeKey

EMPTY_ITEM_ID = "minecraft:air"


class AttributeStore(ABC):
    """Keyed side data attached to an item.

    Only AttributeKey members are accepted as keys. Each set() replaces the
    whole value for its key in one step.
    """

    @abstractmethod
    def get(self, key: AttributeKey, default: Any = None) -> Any:
        pass

    @abstractmethod
    def set(self, key: AttributeKey, value: Any) -> None:
        pass

    @abstractmethod
    def remove(self, key: AttributeKey) -> None:
        """Remove a key. Removing a missing key is not an error."""
        pass

    @abstractmethod
    def keys(self) -> Iterator[AttributeKey]:
        pass

    @abstractmethod
    def copy(self) -> "AttributeStore":
        """Independent deep copy."""
        pass

    def has(self, key: AttributeKey) -> bool:
        return key in set(self.keys())

    @staticmethod
    def _check_key(key: Any) -> AttributeKey:
        if not isinstance(key, AttributeKey):
            raise KeyError(f"Unknown attribute key: {key!r}")
        return key


class DictAttributeStore(AttributeStore):
    """In-memory attribute store."""

    def __init__(self, values: Optional[Dict[AttributeKey, Any]] = None):
        self._values: Dict[AttributeKey, Any] = {}
        for key, value in (values or {}).items():
            self.set(key, value)

    def get(self, key: AttributeKey, default: Any = None) -> Any:
        return self._values.get(self._check_key(key), default)

    def set(self, key: AttributeKey, value: Any) -> None:
        self._values[self._check_key(key)] = value

    def remove(self, key: AttributeKey) -> None:
        self._values.pop(self._check_key(key), None)

    def keys(self) -> Iterator[AttributeKey]:
        return iter(list(self._values))

    def has(self, key: AttributeKey) -> bool:
        return self._check_key(key) in self._values

    def copy(self) -> "DictAttributeStore":
        return DictAttributeStore(copy.deepcopy(self._values))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, DictAttributeStore):
            return NotImplemented
        return self._values == other._values

    def __repr__(self) -> str:
        inner = ", ".join(f"{k.value}={v!r}" for k, v in self._values.items())
        return f"DictAttributeStore({inner})"


@dataclass
class Item:
    """An item stack that may carry a custom sound."""

    item_id: str  # e.g., "minecraft:music_disc_cat"
    count: int = 1
    attributes: AttributeStore = field(default_factory=DictAttributeStore)

    @classmethod
    def empty(cls) -> "Item":
        """An empty inventory slot."""
        return cls(item_id=EMPTY_ITEM_ID, count=0)

    @property
    def is_empty(self) -> bool:
        return self.item_id == EMPTY_ITEM_ID or self.count <= 0

    @property
    def path(self) -> str:
        """Item id without its namespace."""
        return self.item_id.split(":", 1)[-1]

    @property
    def display_name(self) -> str:
        """Name shown for the item: its custom name, else one derived from the id."""
        custom_name = self.attributes.get(AttributeKey.CUSTOM_NAME)
        if custom_name:
            return custom_name
        return self.path.replace("_", " ").title()

    def copy(self) -> "Item":
        return Item(item_id=self.item_id, count=self.count, attributes=self.attributes.copy())
