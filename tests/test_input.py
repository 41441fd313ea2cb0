import numpy as np
import pygame
import pytest

from camera_engine.errors import CameraError, InputError
from camera_engine.input import CameraActions, InputState


def test_axis_pair_returns_float_vector():
    pan = CameraActions(pan=[3, -4]).axis_pair()
    assert pan.dtype == np.float32
    np.testing.assert_array_equal(pan, [3.0, -4.0])


@pytest.mark.parametrize("pan", [None, 1.0, (1.0,), (1.0, 2.0, 3.0), "xy", [[1, 2]]])
def test_axis_pair_rejects_non_pairs(pan):
    with pytest.raises(InputError, match="not an axis pair"):
        CameraActions(pan=pan).axis_pair()


def test_input_error_is_a_camera_error():
    assert issubclass(InputError, CameraError)


@pytest.mark.parametrize("zoom, expected", [(0.5, 0.5), (3.0, 1.0), (-7.0, -1.0)])
def test_clamped_zoom(zoom, expected):
    assert CameraActions(zoom=zoom).clamped_zoom() == pytest.approx(expected)


def test_input_state_accumulates_until_sampled():
    state = InputState()
    state.update(
        [
            pygame.event.Event(pygame.MOUSEMOTION, rel=(3, -1)),
            pygame.event.Event(pygame.MOUSEMOTION, rel=(2, 4)),
            pygame.event.Event(pygame.MOUSEWHEEL, x=0, y=1),
            pygame.event.Event(pygame.MOUSEWHEEL, x=0, y=1),
        ]
    )

    actions, toggle = state.sample()
    np.testing.assert_array_equal(actions.axis_pair(), [5.0, 3.0])
    assert actions.zoom == pytest.approx(2.0)
    assert not toggle

    # nothing carries over into the next frame
    actions, _ = state.sample()
    np.testing.assert_array_equal(actions.axis_pair(), [0.0, 0.0])
    assert actions.zoom == 0.0


def test_toggle_key_and_quit():
    state = InputState()
    state.update(
        [
            pygame.event.Event(pygame.KEYDOWN, key=pygame.K_v),
            pygame.event.Event(pygame.KEYDOWN, key=pygame.K_w),
            pygame.event.Event(pygame.QUIT),
        ]
    )
    _, toggle = state.sample()
    assert toggle
    assert state.quit_requested
    _, toggle = state.sample()
    assert not toggle
