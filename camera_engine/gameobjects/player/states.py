from enum import Enum, auto


class CameraKind(Enum):
    """
    Interchangeable camera behaviors.
    Exactly one is active at a time; switching converts the state over.
    """

    FIRST_PERSON = auto()
    THIRD_PERSON = auto()
    FIXED_ANGLE = auto()
