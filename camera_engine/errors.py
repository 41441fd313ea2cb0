class CameraError(Exception):
    """Base class for errors raised by the camera core."""


class InputError(CameraError):
    """The input signal cannot be read the way the camera needs it."""


class ConfigError(CameraError, ValueError):
    """The configuration snapshot is malformed or inconsistent."""
