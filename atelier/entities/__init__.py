"""
atelier/entities/__init__.py
----------------------------
Entity module root. Decorations live in atelier.entities.items.
"""
