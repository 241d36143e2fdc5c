"""
base_item.py
------------
Base class for decorations placed in the room.

A plain DecorationItem has no customization capability; subclasses that
accept mini-activity results implement apply_customization(result).
"""

from atelier.entities.items.item_registry import ItemRegistry


class DecorationItem:
    """Decoration instantiated at a placement pose."""

    __registry_kind__ = "decoration"

    def __init_subclass__(cls, **kwargs):
        """Auto-register item subclasses when they're defined."""
        super().__init_subclass__(**kwargs)
        ItemRegistry.auto_register(cls)

    def __init__(self, prefab_id: str, pose):
        """
        Args:
            prefab_id: Identifier of the prefab this item was built from
            pose: World pose the item was placed at
        """
        self.prefab_id = prefab_id
        self.pose = pose
        self.alive = True

    def destroy(self):
        """Remove the item from the room."""
        self.alive = False

    def __repr__(self):
        return f"{self.__class__.__name__}({self.prefab_id})"


ItemRegistry.auto_register(DecorationItem)
