import json
import math

import pytest

from camera_engine.config import (
    CameraConfig,
    GameConfig,
    ThirdPersonConfig,
    config_from_dict,
    load_config,
)
from camera_engine.errors import ConfigError


def test_defaults_are_valid():
    config = GameConfig()
    assert config.validate() is config
    third_person = config.camera.third_person
    assert third_person.min_distance <= third_person.max_distance
    assert third_person.line_of_sight_epsilon == pytest.approx(1e-3)


def test_snapshot_is_immutable():
    config = GameConfig()
    with pytest.raises(AttributeError):
        config.camera.mouse_sensitivity_x = 1.0


def test_load_config_overrides_nested_values(tmp_path):
    path = tmp_path / "camera.json"
    path.write_text(
        json.dumps(
            {
                "camera": {
                    "mouse_sensitivity_x": 0.01,
                    "third_person": {"min_distance": 2, "max_distance": 8},
                }
            }
        )
    )
    config = load_config(path)

    assert config.camera.mouse_sensitivity_x == pytest.approx(0.01)
    assert config.camera.third_person.min_distance == pytest.approx(2.0)
    assert config.camera.third_person.max_distance == pytest.approx(8.0)
    # untouched keys keep defaults
    assert config.camera.first_person == GameConfig().camera.first_person


def test_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_config(tmp_path / "missing.json")


def test_invalid_json(tmp_path):
    path = tmp_path / "camera.json"
    path.write_text("{not json")
    with pytest.raises(ConfigError):
        load_config(path)


@pytest.mark.parametrize(
    "data",
    [
        {"camera": {"mouse_sensitivity": 1.0}},
        {"camera": {"third_person": {"zoom_speed": "fast"}}},
        {"camera": {"third_person": {"zoom_speed": True}}},
        {"camera": {"first_person": 3}},
        {"camera": {"third_person": {"min_distance": 9, "max_distance": 2}}},
        {"camera": {"first_person": {"rotation_smoothing": 0}}},
        {"camera": {"first_person": {"most_acute_from_above": 2.0, "most_acute_from_below": 1.5}}},
    ],
)
def test_bad_config_is_rejected(data):
    with pytest.raises(ConfigError):
        config_from_dict(data)


def test_config_error_is_a_value_error():
    with pytest.raises(ValueError):
        GameConfig(
            camera=CameraConfig(third_person=ThirdPersonConfig(most_acute_from_above=math.pi))
        ).validate()
