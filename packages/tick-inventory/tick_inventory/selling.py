"""Selling containers: a one-way sink that turns items into money."""
from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Callable, Iterable, Sequence

from tick_inventory.container import Container
from tick_inventory.policy import TransferPolicy

if TYPE_CHECKING:
    from tick_inventory.drop import DragContext
    from tick_inventory.types import Item, Slot

logger = logging.getLogger(__name__)

PriceFn = Callable[["Item"], int]


class SellingPolicy(TransferPolicy):
    """Accept anything, pay for it, then destroy it. Nothing ever leaves.

    Attributes:
        add_money: Called with the sale price of each received item.
        price: Maps an item to its sale price. Defaults to effective price.
        on_sold: Called with each sold item after ``add_money``.
    """

    def __init__(
        self,
        add_money: Callable[[int], None] | None = None,
        price: PriceFn | None = None,
        on_sold: Callable[[Item], None] | None = None,
    ) -> None:
        self.add_money = add_money
        self.price = price
        self.on_sold = on_sold

    def quote(self, item: Item) -> int:
        if self.price is not None:
            return self.price(item)
        return item.effective_price

    def can_send_item(
        self, container: Container, item: Item, destination: Container
    ) -> bool:
        return False

    def on_item_received(
        self, container: Container, item: Item, index: int, source: Container
    ) -> None:
        amount = self.quote(item)
        logger.debug("sold %s for %d", item.id, amount)
        if self.add_money is not None:
            self.add_money(amount)
        if self.on_sold is not None:
            self.on_sold(item)
        # The pending change notification announces the receipt; by then
        # the slot already reads empty again.
        container.discard(index)


class SellingContainer(Container):
    """Currency sink. ``watched`` lists containers whose drags get a quote.

    External swaps are disabled: a held item never goes back out, not even
    as the displaced half of a swap. Prices come from the current ``policy``.
    """

    def __init__(
        self,
        capacity: int | None = None,
        *,
        add_money: Callable[[int], None] | None = None,
        price: PriceFn | None = None,
        on_sold: Callable[[Item], None] | None = None,
        watched: Iterable[Container] = (),
        items: Sequence[Slot] | None = None,
    ) -> None:
        super().__init__(
            capacity,
            items=items,
            policy=SellingPolicy(add_money, price=price, on_sold=on_sold),
        )
        self.allow_external_swap = False
        self.watched: list[Container] = list(watched)

    def quote(self, item: Item) -> int:
        """Price this container would pay for *item*."""
        quote = getattr(self.policy, "quote", None)
        if quote is None:
            return item.effective_price
        return quote(item)

    def preview(self, drag: DragContext | None) -> int | None:
        """Quote for the dragged item, or None when there is nothing to price.

        Only drags out of a watched container are priced.
        """
        if drag is None or not any(c is drag.container for c in self.watched):
            return None
        if not drag.container.is_index_valid(drag.index):
            return None
        item = drag.container[drag.index]
        if item is None:
            return None
        return self.quote(item)
