import argparse
import logging

import pygame

from camera_engine.config import GameConfig, load_config
from camera_engine.gameobjects.player.camera.ingame import IngameCamera
from camera_engine.gameobjects.player.states import CameraKind
from camera_engine.gameobjects.transform import Transform
from camera_engine.input import CameraActions, InputState
from camera_engine.world import World

logger = logging.getLogger(__name__)

WIDTH, HEIGHT = 640, 360
LOG_INTERVAL = 1.0


def default_world() -> World:
    """Floor plus one wall behind the spawn point."""
    world = World()
    world.add_box((0.0, -0.5, 0.0), (50.0, 1.0, 50.0), name="floor")
    world.add_box((0.0, 2.0, 4.0), (6.0, 4.0, 0.5), name="wall")
    world.add_box((3.0, 1.0, 0.0), (1.0, 2.0, 1.0), name="trigger", sensor=True)
    return world


class CameraDemo:
    def __init__(self, world: World, config: GameConfig, kind=CameraKind.THIRD_PERSON):
        """
        Docstring für __init__

        :param self: The object itself
        :param world: Collision world the camera is kept clear of
        :param config: Camera tuning
        :param kind: The initially active camera behavior
        """
        self.world = world
        self.camera = IngameCamera(kind, config)
        self.camera.set_primary_target(world.spawn)
        self.rendered = Transform(world.spawn)
        self._since_log = 0.0

    def step(self, dt: float, actions: CameraActions, toggle: bool = False) -> Transform:
        """
        Per frame body: optional mode switch, camera update, pose logging.
        """
        if toggle:
            self.camera.toggle_first_person()

        self.rendered = self.camera.update_transform(
            dt, actions, self.world.physics, self.rendered
        )

        self._since_log += dt
        if self._since_log >= LOG_INTERVAL:
            self._since_log = 0.0
            logger.info(
                "%s camera at %s looking %s",
                self.camera.kind.name,
                [round(float(c), 2) for c in self.rendered.position],
                [round(float(c), 2) for c in self.rendered.forward()],
            )
        return self.rendered

    def run(self, frames: int | None = None):
        pygame.init()
        pygame.display.set_caption("Camera Demo")
        pygame.display.set_mode((WIDTH, HEIGHT))
        pygame.mouse.set_visible(False)
        pygame.event.set_grab(True)

        clock = pygame.time.Clock()
        input_state = InputState()
        frame = 0
        try:
            while frames is None or frame < frames:
                dt = clock.tick(120) / 1000.0

                input_state.update()
                if input_state.quit_requested:
                    break

                actions, toggle = input_state.sample()
                self.step(dt, actions, toggle)
                pygame.display.flip()
                frame += 1
        finally:
            pygame.quit()


def main(argv=None):
    parser = argparse.ArgumentParser(description="Interactive camera demo (V toggles first/third person)")
    parser.add_argument("--config", help="JSON camera config")
    parser.add_argument("--level", help="JSON level with colliders")
    parser.add_argument("--log-level", default="INFO")
    parser.add_argument("--frames", type=int, default=None, help="stop after N frames")
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=args.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    config = load_config(args.config) if args.config else GameConfig()
    world = World(args.level) if args.level else default_world()

    CameraDemo(world, config).run(args.frames)


if __name__ == "__main__":
    main()
