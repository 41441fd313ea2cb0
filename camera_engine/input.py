from dataclasses import dataclass
from typing import Optional

import numpy as np
import pygame

from camera_engine.errors import InputError


@dataclass
class CameraActions:
    """
    Camera input for one frame.

    - pan:  mouse / stick delta, must be a 2D axis pair
    - zoom: wheel steps, positive zooms in
    """

    pan: Optional[object] = None
    zoom: float = 0.0

    def axis_pair(self) -> np.ndarray:
        """
        Returns pan as a (2,) float32 vector.

        :raises InputError: If pan is missing or not a two-component value
        """
        if self.pan is None:
            raise InputError("Camera movement is not an axis pair")
        try:
            pan = np.asarray(self.pan, dtype=np.float32)
        except (TypeError, ValueError) as e:
            raise InputError("Camera movement is not an axis pair") from e
        if pan.shape != (2,):
            raise InputError("Camera movement is not an axis pair")
        return pan

    def clamped_zoom(self) -> float:
        return max(-1.0, min(1.0, float(self.zoom)))


class InputState:
    """
    Collects pygame events into per-frame camera actions.

    - Pan: relative mouse motion, summed between samples
    - Zoom: mouse wheel, summed between samples
    - Toggle camera: edge-triggered (press once)
    """

    def __init__(self, toggle_key: int = pygame.K_v):
        """
        Docstring für __init__

        :param self: The object itself
        :param toggle_key: Key that switches between camera modes
        """
        self.toggle_key = toggle_key
        self.quit_requested = False

        self._pan = np.zeros(2, dtype=np.float32)
        self._zoom = 0.0
        self._toggle = False

    def handle_event(self, event):
        """
        Docstring für handle_event

        :param self: The object itself
        :param event: A pygame event
        """
        if event.type == pygame.QUIT:
            self.quit_requested = True
        elif event.type == pygame.MOUSEMOTION:
            dx, dy = event.rel
            self._pan += (dx, dy)
        elif event.type == pygame.MOUSEWHEEL:
            self._zoom += event.y
        elif event.type == pygame.KEYDOWN and event.key == self.toggle_key:
            # KEYDOWN fires once per press, so holding the key toggles once
            self._toggle = True

    def update(self, events=None):
        """
        Feeds all pending (or the given) events into the state.
        """
        if events is None:
            events = pygame.event.get()
        for event in events:
            self.handle_event(event)

    def sample(self) -> tuple[CameraActions, bool]:
        """
        Returns this frame's actions and whether a camera toggle was
        requested, then resets the accumulators.
        """
        actions = CameraActions(pan=self._pan.copy(), zoom=self._zoom)
        toggle = self._toggle

        self._pan[:] = 0.0
        self._zoom = 0.0
        self._toggle = False
        return actions, toggle
