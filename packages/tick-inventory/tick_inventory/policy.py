"""TransferPolicy — the four hooks that gate and react to item movement."""
from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from tick_inventory.container import Container
    from tick_inventory.types import Item


class TransferPolicy:
    """Accept-all, no-op policy. Variants override any subset of the hooks.

    Every hook receives the container that owns the policy first, so one
    policy instance may be shared by several containers.

    The gates (``can_send_item``, ``can_receive_item``) run before any slot
    is written and must not mutate state. The reactions
    (``on_item_moved_away``, ``on_item_received``) run only for
    cross-container transfers, after the slots are written and before the
    change signals fire.
    """

    def can_receive_item(
        self, container: Container, item: Item, source: Container
    ) -> bool:
        return True

    def can_send_item(
        self, container: Container, item: Item, destination: Container
    ) -> bool:
        return True

    def on_item_moved_away(
        self, container: Container, item: Item, index: int, destination: Container
    ) -> None:
        pass

    def on_item_received(
        self, container: Container, item: Item, index: int, source: Container
    ) -> None:
        pass
