"""Drop routing for drag-and-drop front ends.

The front end captures the gesture and owns the ghost icon; it only passes
the dragged slot in as a :class:`DragContext` when the drop lands.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from tick_inventory.container import Container


@dataclass(frozen=True)
class DragContext:
    """The slot a drag started from."""

    container: Container
    index: int


def drop_on_slot(drag: DragContext, container: Container, index: int) -> bool:
    """Drop onto a specific slot: move or swap, else first free slot."""
    if drag.container.move_item(container, drag.index, index):
        return True
    return drag.container.move_to_first_empty_slot(container, drag.index)


def drop_on_container(drag: DragContext, container: Container) -> bool:
    """Drop onto a container's empty space.

    Within the same container the item only moves up to an earlier free
    slot; dropping past the last item leaves it where it is.
    """
    if drag.container is container:
        empty = container.first_empty_index()
        if 0 <= empty < drag.index:
            return container.move_item(container, drag.index, empty)
        return False
    return drag.container.move_to_first_empty_slot(container, drag.index)
