"""
item_registry.py
----------------
Registry and factory for placed decoration items.

Responsibilities
----------------
- Map prefab kinds to item classes (registered automatically on subclassing)
- Instantiate an item from an ItemPrefab at a given pose
"""

from atelier.core.debug.debug_logger import DebugLogger


class ItemRegistry:
    """Global registry mapping prefab kinds to decoration classes."""

    _registry = {}  # {kind: class}

    # ===========================================================
    # Registration
    # ===========================================================
    @classmethod
    def register(cls, kind: str, item_class):
        """Register an item class under a prefab kind."""
        if kind in cls._registry and cls._registry[kind] is not item_class:
            DebugLogger.warn(
                f"[Registry] Overwriting item kind '{kind}' "
                f"({cls._registry[kind].__name__} -> {item_class.__name__})",
                category="loading"
            )
        cls._registry[kind] = item_class
        DebugLogger.state(f"Registered item [{kind}] -> {item_class.__name__}", category="loading")

    @classmethod
    def auto_register(cls, item_class):
        """Register using the class's __registry_kind__, if it declares one."""
        # Only kinds declared on the class itself, not inherited ones
        kind = item_class.__dict__.get("__registry_kind__")
        if not kind or not isinstance(kind, str):
            return
        cls.register(kind, item_class)

    # ===========================================================
    # Factory
    # ===========================================================
    @classmethod
    def create(cls, prefab, pose):
        """
        Instantiate the decoration described by prefab at pose.

        Returns:
            Item instance, or None if the prefab kind is unknown
        """
        if prefab is None:
            DebugLogger.fail("Cannot instantiate item - no prefab", category="item")
            return None

        item_class = cls._registry.get(prefab.kind)
        if item_class is None:
            DebugLogger.fail(f"Unknown item kind '{prefab.kind}' for prefab '{prefab.prefab_id}'", category="item")
            return None

        item = item_class(prefab.prefab_id, pose)
        DebugLogger.trace(f"Instantiated {item}", category="item")
        return item

    @classmethod
    def has(cls, kind: str) -> bool:
        return kind in cls._registry

    @classmethod
    def kinds(cls) -> list:
        return list(cls._registry.keys())
