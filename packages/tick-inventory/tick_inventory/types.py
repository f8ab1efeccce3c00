"""Core data types for slot inventories."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True, eq=False)
class Item:
    """Immutable item value placed in container slots.

    Items compare by identity: two items with identical fields are still two
    distinct items, and a slot holds a reference, never a copy.

    Attributes:
        id: Opaque identifier (catalog key).
        price: Base price in game currency.
        is_discounted: Whether ``discounted_price`` applies.
        discounted_price: Price used while discounted.
    """

    id: str
    price: int = 0
    is_discounted: bool = False
    discounted_price: int = 0

    def __post_init__(self) -> None:
        if not self.id:
            raise ValueError("Item id must be non-empty")
        if self.price < 0:
            raise ValueError(f"price must be >= 0, got {self.price}")
        if self.discounted_price < 0:
            raise ValueError(
                f"discounted_price must be >= 0, got {self.discounted_price}"
            )

    @property
    def effective_price(self) -> int:
        """Price used for purchase logic."""
        return self.discounted_price if self.is_discounted else self.price


# A slot is either empty (None) or holds exactly one item.
Slot = Optional[Item]


class InvalidCapacityError(ValueError):
    """Raised when a container is configured with a non-positive capacity."""

    def __init__(self, capacity: int) -> None:
        self.capacity = capacity
        super().__init__(f"capacity must be > 0, got {capacity}")
