"""The rolling, ever angrier player cube."""

from __future__ import annotations

import math
import threading

from angrycube.gameobject import GameObject, Matrix, Vector2, Vector3
from angrycube.misc import GameInfo

DEG2RAD = math.pi / 180.0


def _c_remainder(value: int, divisor: int) -> int:
    """Integer remainder that keeps the sign of the dividend."""
    return int(math.fmod(value, divisor))


def vec_sin(vec: Vector2) -> Vector2:
    """Sine of 45 degrees plus each component folded into a quarter turn."""
    return Vector2(
        math.sin(DEG2RAD * (45 + abs(int(vec.x)) % 90)),
        math.sin(DEG2RAD * (45 + abs(_c_remainder(int(vec.y), 90)))),
    )


class MrAngryCube(GameObject):
    """The player: a cube that rolls over its edges a quarter turn at a time.

    Rendering goes through a renderer offering ``draw_mesh(model_path, transform)``.
    """

    def __init__(
        self,
        texture_path: str = "",
        shader_path: str = "",
        model_path: str = "",
        speed: float | None = None,
    ) -> None:
        super().__init__(texture_path, shader_path, model_path)
        self.rotation = Vector3()
        self.next_rotation_axis = Vector3()
        self.rotation_axis = Vector3()
        self.rotation_count = Vector3()
        self.size = 1.0
        self.half_size = self.size / 2.0
        self.hypotenuse = math.sqrt(self.half_size * self.half_size * 2)
        self.speed = GameInfo().possible_speeds[0] if speed is None else speed
        self.is_moving = True

    def render(self, renderer) -> None:
        renderer.draw_mesh(self.model_path, self.transform)

    def update(self, delta_time: float) -> None:
        """Advance the roll by one step of the current speed, in degrees."""
        if not self.is_moving:
            return

        self.rotation = self.rotation + self.rotation_axis.scale(self.speed)

        # x follows the roll about the x axis, y the roll about the z axis;
        # turning about y does not change the height of the cube.
        lift = vec_sin(Vector2(self.rotation.x, self.rotation.z))
        factor = self.hypotenuse / self.half_size
        lift_x, lift_y = lift.x * factor, lift.y * factor

        increment = self.rotation_axis.scale(DEG2RAD * self.speed)
        self.transform = self.transform @ Matrix.rotate_xyz(increment)

        self.transform.m12 = -self.rotation.z / 90.0 * self.size * 2
        self.transform.m13 = lift_y * lift_x * self.size
        self.transform.m14 = self.rotation.x / 90.0 * self.size * 2

        if self.is_at_quarter_rotation():
            self.rotation_count = self.rotation_count + self.rotation_axis.abs()
            self.rotation_axis = self.next_rotation_axis

    def is_face_on_the_ground(self) -> bool:
        """Tell whether the cube has just landed on its face."""
        if not self.is_at_quarter_rotation():
            return False
        down = Vector3(0.0, 1.0, 0.0)
        cube_up = self.transform.transform_point(down)
        return abs(cube_up.dot(down)) < 0.1

    def is_at_quarter_rotation(self, omit_zero: bool = True) -> bool:
        """Tell whether the roll about the active axis sits on a multiple of 90 degrees.

        A cube with no rotation axis counts as resting on a quarter. Unless
        ``omit_zero`` is set, an unrolled cube does not count.
        """
        axis = self.rotation_axis
        rotation = self.rotation
        result = (
            (int(rotation.x) % 90 == 0 and axis.x != 0.0)
            or (int(rotation.z) % 90 == 0 and axis.z != 0.0)
            or (int(rotation.y) % 90 == 0 and axis.y != 0.0)
            or (axis.x == 0.0 and axis.z == 0.0 and axis.y == 0.0)
        )
        if not omit_zero:
            result = result and (rotation.x != 0 or rotation.z != 0)
        return result

    def wait_for_non_blocking(self, seconds: float) -> threading.Timer:
        """Stop moving now and resume after ``seconds`` in the background."""
        self.is_moving = False

        def resume() -> None:
            self.is_moving = True

        timer = threading.Timer(seconds, resume)
        timer.daemon = True
        timer.start()
        return timer