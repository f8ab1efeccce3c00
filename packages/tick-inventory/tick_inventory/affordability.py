"""Affordability-gated containers: entering costs money, leaving refunds it."""
from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Callable, Sequence

from tick_inventory.container import Container
from tick_inventory.policy import TransferPolicy

if TYPE_CHECKING:
    from tick_inventory.types import Item, Slot

logger = logging.getLogger(__name__)

FundsQuery = Callable[[], int]
Payment = Callable[[int], None]


class AffordabilityPolicy(TransferPolicy):
    """Admit an item only when ``funds() >= item.price``.

    ``spend(price)`` fires when an item leaves for another container and
    ``refund(price)`` when one arrives from another container. Base price is
    used throughout; discounts are a shop concern.
    """

    def __init__(
        self,
        funds: FundsQuery,
        spend: Payment | None = None,
        refund: Payment | None = None,
    ) -> None:
        if funds is None:
            raise TypeError("funds query must not be None")
        self.funds = funds
        self.spend = spend
        self.refund = refund

    def can_receive_item(
        self, container: Container, item: Item, source: Container
    ) -> bool:
        return self.funds() >= item.price

    def on_item_moved_away(
        self, container: Container, item: Item, index: int, destination: Container
    ) -> None:
        if destination is container or self.spend is None:
            return
        logger.debug("spend %d for %s", item.price, item.id)
        self.spend(item.price)

    def on_item_received(
        self, container: Container, item: Item, index: int, source: Container
    ) -> None:
        if source is container or self.refund is None:
            return
        logger.debug("refund %d for %s", item.price, item.id)
        self.refund(item.price)


class AffordabilityGatedContainer(Container):
    """Container preconfigured with an :class:`AffordabilityPolicy`."""

    def __init__(
        self,
        capacity: int | None = None,
        *,
        funds: FundsQuery,
        spend: Payment | None = None,
        refund: Payment | None = None,
        items: Sequence[Slot] | None = None,
    ) -> None:
        super().__init__(
            capacity,
            items=items,
            policy=AffordabilityPolicy(funds, spend=spend, refund=refund),
        )
