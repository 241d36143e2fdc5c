from atelier.systems.camera.camera_controller import CameraController
from atelier.systems.camera.easing import EASING_CURVES, resolve_easing

__all__ = [
    'CameraController',
    'EASING_CURVES',
    'resolve_easing',
]
