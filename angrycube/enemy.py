"""Static cubes that the player squashes by rolling over them."""

from __future__ import annotations

from angrycube.gameobject import GameObject, Matrix, Vector2, Vector3
from angrycube.misc import RED


class Enemy(GameObject):
    """A coloured cube that rests on the ground.

    Rendering goes through a renderer offering
    ``draw_cube(position, width, height, length, color)``.
    """

    def __init__(
        self,
        texture_path: str = "",
        shader_path: str = "",
        model_path: str = "",
        size: float = 1.0,
        color: tuple = RED,
    ) -> None:
        super().__init__(texture_path, shader_path, model_path)
        self.size = size
        self.color = color

    @property
    def position(self) -> Vector3:
        return Vector3(self.transform.m12, self.transform.m13, self.transform.m14)

    def render(self, renderer) -> None:
        renderer.draw_cube(self.position, self.size, self.size, self.size, self.color)

    def update(self, delta_time: float) -> None:
        """Keep the cube resting on the ground."""
        self.transform.m13 = self.size / 2

    def set_position(self, position: Vector2) -> None:
        """Move the cube by (x, y) on the ground plane, lifting it onto the ground."""
        self.transform = Matrix.translate(position.x, self.size / 2, position.y) @ self.transform