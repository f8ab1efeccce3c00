"""tick-inventory — Slot containers with policy-governed transfers."""
from tick_inventory.affordability import AffordabilityGatedContainer, AffordabilityPolicy
from tick_inventory.container import DEFAULT_CAPACITY, Container
from tick_inventory.drop import DragContext, drop_on_container, drop_on_slot
from tick_inventory.policy import TransferPolicy
from tick_inventory.selling import SellingContainer, SellingPolicy
from tick_inventory.shop import ShopContainer, ShopPolicy
from tick_inventory.signal import ChangeSignal, Subscription
from tick_inventory.types import InvalidCapacityError, Item, Slot

__all__ = [
    "AffordabilityGatedContainer",
    "AffordabilityPolicy",
    "ChangeSignal",
    "Container",
    "DEFAULT_CAPACITY",
    "DragContext",
    "InvalidCapacityError",
    "Item",
    "SellingContainer",
    "SellingPolicy",
    "ShopContainer",
    "ShopPolicy",
    "Slot",
    "Subscription",
    "TransferPolicy",
    "drop_on_container",
    "drop_on_slot",
]
