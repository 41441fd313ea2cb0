import numpy as np


class AABBCollider:
    def __init__(self, size=(1, 1, 1), margin: float = 0.0):
        """
        Docstring für __init__

        :param self: The object itself
        :param size: The size of the collider
        :param margin: Extra padding added on every side (in meters)
        """
        self.size = np.array(size, dtype=np.float32)
        self.margin = float(margin)

    def get_bounds(self, position, scale=(1, 1, 1)):
        """
        Docstring für get_bounds

        :param self: The object itself
        :param position: The world position of the owning object
        :param scale: The visual scale of the owning object
        :return: (min corner, max corner)
        """
        # World-space collider size = visual scale × local collider size
        world_size = self.size * np.asarray(scale, dtype=np.float32)

        half = (world_size * 0.5) + self.margin

        position = np.asarray(position, dtype=np.float32)
        min_v = position - half
        max_v = position + half
        return min_v, max_v
