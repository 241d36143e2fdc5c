"""
Scene module exports.

Provides base scene class and lifecycle states.
"""

from atelier.scenes.base_scene import BaseScene
from atelier.scenes.scene_state import SceneState

__all__ = [
    'BaseScene',
    'SceneState',
]
