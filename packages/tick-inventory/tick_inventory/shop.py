"""Shop containers: discount-aware price gates and per-slot lock flags."""
from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Callable, Sequence

from tick_inventory.container import Container
from tick_inventory.policy import TransferPolicy

if TYPE_CHECKING:
    from tick_inventory.types import Item, Slot

logger = logging.getLogger(__name__)


class ShopPolicy(TransferPolicy):
    """Gate both directions on ``item.effective_price``.

    Without a funds query the buyer is treated as having no money, so every
    cross-container transfer is refused. Moves between two slots of the
    same shop are never gated on the send side.
    """

    def __init__(
        self,
        funds: Callable[[], int] | None = None,
        spend: Callable[[int], None] | None = None,
        refund: Callable[[int], None] | None = None,
    ) -> None:
        self.funds = funds
        self.spend = spend
        self.refund = refund

    def available(self) -> int:
        return self.funds() if self.funds is not None else 0

    def can_send_item(
        self, container: Container, item: Item, destination: Container
    ) -> bool:
        if destination is container:
            return True
        return self.available() >= item.effective_price

    def can_receive_item(
        self, container: Container, item: Item, source: Container
    ) -> bool:
        return self.available() >= item.effective_price

    def on_item_moved_away(
        self, container: Container, item: Item, index: int, destination: Container
    ) -> None:
        if destination is container:
            return
        logger.debug("sold %s from shop slot %d for %d", item.id, index, item.effective_price)
        if self.spend is not None:
            self.spend(item.effective_price)

    def on_item_received(
        self, container: Container, item: Item, index: int, source: Container
    ) -> None:
        if source is container:
            return
        logger.debug("returned %s to shop slot %d for %d", item.id, index, item.effective_price)
        if self.refund is not None:
            self.refund(item.effective_price)


class ShopContainer(Container):
    """Shop stock. A vacated slot stays vacated: external swaps are off.

    Lock flags are informational: they are kept alongside the slots and
    announced through ``changed``, but transfers never consult them.
    """

    def __init__(
        self,
        capacity: int | None = None,
        *,
        funds: Callable[[], int] | None = None,
        spend: Callable[[int], None] | None = None,
        refund: Callable[[int], None] | None = None,
        items: Sequence[Slot] | None = None,
    ) -> None:
        super().__init__(
            capacity,
            items=items,
            policy=ShopPolicy(funds, spend=spend, refund=refund),
        )
        self.allow_external_swap = False
        self._locked: list[bool] = [False] * self.capacity

    def set_locked(self, index: int, locked: bool) -> bool:
        """Set the lock flag of a slot. False for an invalid index."""
        if not self.is_index_valid(index):
            return False
        self._locked[index] = locked
        self._notify()
        return True

    def is_locked(self, index: int) -> bool:
        return self.is_index_valid(index) and self._locked[index]

    def locked_indices(self) -> list[int]:
        return [index for index, locked in enumerate(self._locked) if locked]
