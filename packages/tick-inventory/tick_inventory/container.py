"""Container — fixed-capacity slot array and the transfer engine."""
from __future__ import annotations

import logging
from typing import Any, Iterator, Sequence

from tick_inventory.policy import TransferPolicy
from tick_inventory.signal import ChangeSignal
from tick_inventory.types import InvalidCapacityError, Item, Slot

logger = logging.getLogger(__name__)

DEFAULT_CAPACITY = 5


class Container:
    """Fixed number of slots, each empty (None) or holding one item.

    Every successful mutation fires ``changed`` exactly once after the
    mutation completes (a cross-container transfer fires it on both
    containers). Failed operations return False and fire nothing.

    Transfer flags:
        allow_internal_move: Items may move between slots of this container.
        allow_external_move: This container may be the destination of a
            move from another container.
        allow_external_swap: Items here may be swapped with an incoming
            item from another container. Both sides must allow it.
        disallowed_sources: Containers barred from moving items in.
    """

    def __init__(
        self,
        capacity: int | None = None,
        *,
        items: Sequence[Slot] | None = None,
        policy: TransferPolicy | None = None,
    ) -> None:
        if items is not None:
            if capacity is not None and capacity != len(items):
                raise ValueError(
                    f"capacity {capacity} does not match {len(items)} items"
                )
            capacity = len(items)
        elif capacity is None:
            capacity = DEFAULT_CAPACITY
        if capacity <= 0:
            raise InvalidCapacityError(capacity)

        self._capacity: int = capacity
        self._slots: list[Slot] = list(items) if items is not None else [None] * capacity
        self.policy: TransferPolicy = policy if policy is not None else TransferPolicy()
        self.changed = ChangeSignal()

        self.allow_internal_move: bool = True
        self.allow_external_move: bool = True
        self.allow_external_swap: bool = True
        self.disallowed_sources: set[Container] = set()

    @classmethod
    def from_items(cls, items: Sequence[Slot], **kwargs: Any) -> Container:
        """Build a container whose capacity is ``len(items)``."""
        if items is None:
            raise TypeError("items must not be None")
        return cls(items=items, **kwargs)

    # --- Read surface ---

    @property
    def capacity(self) -> int:
        return self._capacity

    @property
    def items(self) -> tuple[Slot, ...]:
        """Snapshot of all slots. Mutating it does not affect the container."""
        return tuple(self._slots)

    @property
    def count(self) -> int:
        """Number of occupied slots."""
        return sum(1 for item in self._slots if item is not None)

    @property
    def is_full(self) -> bool:
        return self.count == self._capacity

    @property
    def is_empty(self) -> bool:
        return self.count == 0

    def is_index_valid(self, index: int) -> bool:
        return 0 <= index < self._capacity

    def get(self, index: int) -> Slot:
        """Item at *index*. Raises IndexError for an invalid index."""
        if not self.is_index_valid(index):
            raise IndexError(f"slot index {index} out of range 0..{self._capacity - 1}")
        return self._slots[index]

    def index_of(self, item: Item) -> int:
        """Index of the slot holding *item* (by identity), or -1."""
        for index, slot in enumerate(self._slots):
            if slot is item:
                return index
        return -1

    def first_empty_index(self) -> int:
        """Lowest empty slot index, or -1 when full."""
        for index, slot in enumerate(self._slots):
            if slot is None:
                return index
        return -1

    def __getitem__(self, index: int) -> Slot:
        return self.get(index)

    def __len__(self) -> int:
        return self._capacity

    def __iter__(self) -> Iterator[Slot]:
        return iter(tuple(self._slots))

    def __repr__(self) -> str:
        return f"{type(self).__name__}(capacity={self._capacity}, count={self.count})"

    # --- Slot operations ---

    def set(self, index: int, item: Slot) -> bool:
        """Overwrite a slot with no policy check. False for an invalid index."""
        if not self.is_index_valid(index):
            return False
        self._slots[index] = item
        self._notify()
        return True

    def add(self, item: Item) -> bool:
        """Place *item* in the first empty slot. False if full."""
        index = self.first_empty_index()
        return index != -1 and self.set(index, item)

    def remove(self, item: Item) -> bool:
        """Clear the first slot holding *item*. False if not present."""
        index = self.index_of(item)
        return index >= 0 and self.remove_at(index)

    def remove_at(self, index: int) -> bool:
        """Clear an occupied slot. False for invalid or empty slots."""
        if not self.is_index_valid(index) or self._slots[index] is None:
            return False
        self._slots[index] = None
        self._notify()
        return True

    def clear(self) -> None:
        """Empty every slot. Always notifies, even if already empty."""
        self._slots = [None] * self._capacity
        self._notify()

    def set_items(self, items: Sequence[Slot] | None) -> bool:
        """Replace all slots at once. False unless ``len(items) == capacity``."""
        if items is None or len(items) != self._capacity:
            return False
        self._slots = list(items)
        self._notify()
        return True

    # --- Extension points ---

    def can_receive_item(self, item: Item, source: Container) -> bool:
        return self.policy.can_receive_item(self, item, source)

    def can_send_item(self, item: Item, destination: Container) -> bool:
        return self.policy.can_send_item(self, item, destination)

    def on_item_moved_away(self, item: Item, index: int, destination: Container) -> None:
        self.policy.on_item_moved_away(self, item, index, destination)

    def on_item_received(self, item: Item, index: int, source: Container) -> None:
        self.policy.on_item_received(self, item, index, source)

    def discard(self, index: int) -> None:
        """Empty a slot without notifying.

        Meant for ``on_item_received`` hooks that consume the item they were
        handed; the transfer's own notification follows and observes the
        empty slot. Raises IndexError for an invalid index.
        """
        if not self.is_index_valid(index):
            raise IndexError(f"slot index {index} out of range 0..{self._capacity - 1}")
        self._slots[index] = None

    # --- Transfer engine ---

    def move_item(self, destination: Container, from_index: int, to_index: int) -> bool:
        """Move the item at *from_index* into ``destination[to_index]``.

        An occupied destination slot is swapped back into *from_index*.
        Returns True if the transfer committed. Nothing is written, no hook
        reacts and no signal fires unless every check passes.
        """
        # 1. Destination required
        if destination is None:
            raise TypeError("destination must not be None")

        # 2. Indices
        if not self.is_index_valid(from_index) or not destination.is_index_valid(to_index):
            return self._reject("invalid index", destination, from_index)

        # 3-4. Move permissions
        if not self._move_permitted(destination):
            return self._reject("move not permitted", destination, from_index)

        # 5. Nothing to move
        item = self._slots[from_index]
        if item is None:
            return self._reject("source slot empty", destination, from_index)

        # 6. Cross-container swap needs both sides to opt in
        displaced = destination._slots[to_index]
        external = destination is not self
        if displaced is not None and external and not (
            self.allow_external_swap and destination.allow_external_swap
        ):
            return self._reject("swap not permitted", destination, from_index)

        # 7-8. Policy gates
        if not self._gates_approve(item, destination):
            return self._reject("policy rejected", destination, from_index)

        self._slots[from_index] = displaced
        destination._slots[to_index] = item

        if external:
            self.on_item_moved_away(item, from_index, destination)
            destination.on_item_received(item, to_index, self)
            if displaced is not None:
                destination.on_item_moved_away(displaced, to_index, self)
                self.on_item_received(displaced, from_index, destination)

        self._notify()
        if external:
            destination._notify()
        return True

    def move_to_first_empty_slot(self, destination: Container, from_index: int) -> bool:
        """Move the item at *from_index* into the lowest empty destination slot."""
        if destination is None:
            raise TypeError("destination must not be None")

        if not self.is_index_valid(from_index):
            return self._reject("invalid index", destination, from_index)

        if not self._move_permitted(destination):
            return self._reject("move not permitted", destination, from_index)

        item = self._slots[from_index]
        if item is None:
            return self._reject("source slot empty", destination, from_index)

        if not self._gates_approve(item, destination):
            return self._reject("policy rejected", destination, from_index)

        to_index = destination.first_empty_index()
        if to_index == -1:
            return self._reject("destination full", destination, from_index)

        self._slots[from_index] = None
        destination._slots[to_index] = item

        external = destination is not self
        if external:
            self.on_item_moved_away(item, from_index, destination)
            destination.on_item_received(item, to_index, self)

        self._notify()
        if external:
            destination._notify()
        return True

    # --- Internals ---

    def _move_permitted(self, destination: Container) -> bool:
        if destination is self:
            return self.allow_internal_move
        if not destination.allow_external_move:
            return False
        return self not in destination.disallowed_sources

    def _gates_approve(self, item: Item, destination: Container) -> bool:
        if not self.can_send_item(item, destination):
            return False
        return destination.can_receive_item(item, self)

    def _reject(self, reason: str, destination: Container, from_index: int) -> bool:
        logger.debug(
            "transfer %r[%d] -> %r rejected: %s", self, from_index, destination, reason
        )
        return False

    def _notify(self) -> None:
        self.changed.emit()

