"""
Decoration item exports.

Importing this package registers every item kind with the ItemRegistry.
"""

from atelier.entities.items.item_registry import ItemRegistry
from atelier.entities.items.base_item import DecorationItem
from atelier.entities.items.lantern_item import LanternItem
from atelier.entities.items.origami_item import OrigamiItem

__all__ = [
    'ItemRegistry',
    'DecorationItem',
    'LanternItem',
    'OrigamiItem',
]
