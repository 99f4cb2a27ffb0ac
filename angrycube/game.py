"""The game loop: state machine, collisions, anger, HUD and drawing."""

from __future__ import annotations

import argparse
import itertools
import logging
import math
import random
import time
from dataclasses import dataclass, field
from pathlib import Path
from typing import Callable, Optional

import pygame

from angrycube.config import GameConfig
from angrycube.cube import MrAngryCube
from angrycube.enemy import Enemy
from angrycube.gameobject import GameObject, Vector2, Vector3
from angrycube.gui import Menu, PushButton
from angrycube.misc import (
    DARKGRAY,
    DARKGREEN,
    RED,
    WHITE,
    YELLOW,
    GameInfo,
    GameState,
    draw_text,
    get_timed_text,
    log,
    measure_text,
    sum_vector3,
)

logger = logging.getLogger(__name__)

DIZZY_QUOTE = "Dizzy and angry!!!"
FACE_QUOTE = "My Face!\n No more Mr. Nice Cube!"
SHORT_PAUSE = 0.2
FACE_PAUSE = 0.2 * 3
HUD_FONT_SIZE = 20
BANNER_FONT_SIZE = 30

_GRID_COLOR = (130, 130, 130)
_GRID_AXIS_COLOR = (190, 190, 190)
_CUBE_COLOR = (200, 200, 200)
_EDGE_COLOR = (0, 0, 0)
_NEAR_PLANE = 0.1

_ROOT = Path(__file__).resolve().parent
_TEXTURE_PATH = str(_ROOT / "textures" / "texel_checker.png")
_SHADER_PATH = str(_ROOT / "shaders" / "blur.fs")
_MODEL_PATH = str(_ROOT / "models" / "mr_angry_cube_high_res.obj")


def _sub(a: Vector3, b: Vector3) -> Vector3:
    return a + b.scale(-1.0)


def _cross(a: Vector3, b: Vector3) -> Vector3:
    return Vector3(a.y * b.z - a.z * b.y, a.z * b.x - a.x * b.z, a.x * b.y - a.y * b.x)


def _normalize(v: Vector3) -> Vector3:
    length = math.sqrt(v.dot(v))
    return v if length == 0.0 else v.scale(1.0 / length)


@dataclass
class _Camera:
    position: Vector3 = field(default_factory=lambda: Vector3(0.0, 10.0, -5.0))
    target: Vector3 = field(default_factory=Vector3)
    up: Vector3 = field(default_factory=lambda: Vector3(0.0, 1.0, 0.0))
    fovy: float = 45.0


# Corners of a cube of half-size one, indexed by (x > 0) * 4 + (y > 0) * 2 + (z > 0).
_CORNERS = [Vector3(*signs) for signs in itertools.product((-1.0, 1.0), repeat=3)]
_FACES = {
    "-x": (0, 1, 3, 2),
    "+x": (4, 6, 7, 5),
    "-y": (0, 4, 5, 1),
    "+y": (2, 3, 7, 6),
    "-z": (0, 2, 6, 4),
    "+z": (1, 5, 7, 3),
}


class _Renderer:
    """Perspective projection of simple 3D shapes onto a pygame surface."""

    def __init__(self, surface, camera: _Camera) -> None:
        self.surface = surface
        self.camera = camera
        self.forward = _normalize(_sub(camera.target, camera.position))
        self.right = _normalize(_cross(self.forward, camera.up))
        self.up = _cross(self.right, self.forward)
        width, height = surface.get_size()
        self.center = (width / 2.0, height / 2.0)
        self.focal = (height / 2.0) / math.tan(math.radians(camera.fovy) / 2.0)

    def _to_camera(self, point: Vector3) -> Vector3:
        d = _sub(point, self.camera.position)
        return Vector3(d.dot(self.right), d.dot(self.up), d.dot(self.forward))

    def _project(self, c: Vector3) -> tuple:
        return (
            self.center[0] + c.x * self.focal / c.z,
            self.center[1] - c.y * self.focal / c.z,
        )

    def draw_line3d(self, start: Vector3, end: Vector3, color) -> None:
        a, b = self._to_camera(start), self._to_camera(end)
        if a.z < _NEAR_PLANE and b.z < _NEAR_PLANE:
            return
        if a.z < _NEAR_PLANE or b.z < _NEAR_PLANE:
            t = (_NEAR_PLANE - a.z) / (b.z - a.z)
            clipped = a + _sub(b, a).scale(t)
            if a.z < _NEAR_PLANE:
                a = clipped
            else:
                b = clipped
        pygame.draw.line(self.surface, color, self._project(a), self._project(b))

    def draw_grid(self, slices: int, spacing: float) -> None:
        half = slices // 2
        extent = half * spacing
        for i in range(-half, half + 1):
            offset = i * spacing
            color = _GRID_AXIS_COLOR if i == 0 else _GRID_COLOR
            self.draw_line3d(Vector3(offset, 0.0, -extent), Vector3(offset, 0.0, extent), color)
            self.draw_line3d(Vector3(-extent, 0.0, offset), Vector3(extent, 0.0, offset), color)

    def _draw_faces(self, vertices: list, colors: dict) -> None:
        projected = [self._to_camera(v) for v in vertices]
        visible = []
        for name, indices in _FACES.items():
            points = [projected[i] for i in indices]
            if any(p.z < _NEAR_PLANE for p in points):
                continue
            depth = sum(p.z for p in points) / len(points)
            visible.append((depth, [self._project(p) for p in points], colors[name]))
        for _, polygon, color in sorted(visible, key=lambda item: item[0], reverse=True):
            pygame.draw.polygon(self.surface, color, polygon)
            pygame.draw.polygon(self.surface, _EDGE_COLOR, polygon, 1)

    def draw_cube(self, position: Vector3, width: float, height: float, length: float, color) -> None:
        vertices = [
            Vector3(
                position.x + c.x * width / 2,
                position.y + c.y * height / 2,
                position.z + c.z * length / 2,
            )
            for c in _CORNERS
        ]
        self._draw_faces(vertices, {name: color for name in _FACES})

    def draw_mesh(self, model_path: str, transform) -> None:
        vertices = [transform.transform_point(c.scale(0.5)) for c in _CORNERS]
        colors = {name: _CUBE_COLOR for name in _FACES}
        colors["-z"] = RED
        self._draw_faces(vertices, colors)


class Game:
    """Owns the world, the player cube, the menu and the game state."""

    def __init__(
        self,
        config: GameConfig,
        *,
        clock: Callable[[], float] = time.monotonic,
        rng: Optional[random.Random] = None,
        measure: Callable[[str, int], int] = measure_text,
    ) -> None:
        log("Created Game singleton class.", "GAME")
        self.config = config
        self.clock = clock
        self.rng = rng if rng is not None else random.Random()
        self._measure = measure
        self.game_info = GameInfo()
        self.timed_texts: list = []
        self.game_objects: list = []
        self.state = GameState.MAIN_MENU
        self.last_update_time = 0.0
        self.camera = _Camera()
        self.mouse_pos = (0, 0)
        self.mouse_down = False
        self.mouse_released = False
        self.menu = Menu()
        self.init_menu()
        self.cube = MrAngryCube(
            config.texture_path,
            config.shader_path,
            config.model_path,
            speed=self.game_info.possible_speeds[0],
        )
        self.register(self.cube)

    def init_menu(self) -> None:
        """Build the main menu with its Play and Exit buttons."""
        self.menu = Menu()
        width, height = self.config.screen_width, self.config.screen_height

        def play() -> None:
            self.state = GameState.PLAYING

        self.menu.add_item(
            PushButton("     Play     ", width // 2, height // 3, play, measure=self._measure)
        )
        self.menu.add_item(
            PushButton("     Exit     ", width // 2, height // 3 + 50, self.exit, measure=self._measure)
        )

    def spawn_enemy(self, coordinates: Vector2) -> Enemy:
        """Place an enemy at a random even spot between 2 and 20 units on each axis."""
        rand_x = self.rng.randint(2, 20)
        rand_z = self.rng.randint(2, 20)
        if rand_x % 2:
            rand_x += 1
        if rand_z % 2:
            rand_z += 1
        enemy = Enemy(self.config.texture_path, self.config.shader_path, self.config.model_path)
        enemy.set_position(Vector2(float(rand_x), float(rand_z)))
        self.register(enemy)
        return enemy

    def register(self, game_object: GameObject) -> None:
        self.game_objects.append(game_object)

    def unregister(self, game_object: GameObject) -> None:
        if game_object in self.game_objects:
            self.game_objects.remove(game_object)

    def colliding_enemies(self) -> list:
        """Enemies standing on the same ground cell as the player cube."""
        if not self.game_objects or self.cube is None:
            return []
        cube_x, cube_z = self.cube.transform.m12, self.cube.transform.m14
        return [
            enemy
            for enemy in self.enemies()
            if abs(cube_x - enemy.transform.m12) < 0.1 and abs(cube_z - enemy.transform.m14) < 0.1
        ]

    def enemies(self) -> list:
        if not self.game_objects or self.cube is None:
            return []
        return [obj for obj in self.game_objects if isinstance(obj, Enemy)]

    def handle_key(self, key: int) -> None:
        """React to a key press."""
        axes = {
            pygame.K_w: Vector3(1.0, 0.0, 0.0),
            pygame.K_s: Vector3(-1.0, 0.0, 0.0),
            pygame.K_a: Vector3(0.0, 0.0, -1.0),
            pygame.K_d: Vector3(0.0, 0.0, 1.0),
            pygame.K_e: Vector3(0.0, -1.0, 0.0),
            pygame.K_q: Vector3(0.0, 1.0, 0.0),
        }
        if key in axes:
            self.cube.next_rotation_axis = axes[key]
        elif key == pygame.K_r:
            self.spawn_enemy(Vector2(0.0, 0.0))
        elif key == pygame.K_ESCAPE:
            transitions = {
                GameState.PLAYING: GameState.PAUSED,
                GameState.PAUSED: GameState.PLAYING,
                GameState.GAME_OVER: GameState.MAIN_MENU,
            }
            self.state = transitions.get(self.state, self.state)
        elif key == pygame.K_f and pygame.display.get_surface() is not None:
            pygame.display.toggle_fullscreen()

    def _follow_cube(self) -> None:
        t = self.cube.transform
        self.camera.target = Vector3(t.m12, t.m13, t.m14)
        self.camera.position = Vector3(t.m12, t.m13 + 5, t.m14 - 20.0)

    def update(self) -> None:
        """Advance the world by one step, at most update_speed times a second."""
        if self.state is not GameState.PLAYING:
            return
        self._follow_cube()

        delta_time = self.clock() - self.last_update_time
        if delta_time < 1.0 / self.config.update_speed:
            return

        for game_object in list(self.game_objects):
            game_object.update(delta_time)

        cube = self.cube
        info = self.game_info
        top_anger = len(info.possible_speeds) - 1
        if cube.is_at_quarter_rotation() and cube.is_moving:
            increase_anger = False
            quote = ""
            rotation_sum = sum_vector3(cube.rotation_count)

            if info.anger >= top_anger:
                info.rotation_countdown -= 1
                logger.warning("Game over in: %i rotations.", info.rotation_countdown)
            else:
                info.rotation_countdown = GameInfo().rotation_countdown

            if rotation_sum % 10 == 0 and rotation_sum > 0:
                quote = DIZZY_QUOTE
                increase_anger = True

            if cube.is_face_on_the_ground():
                quote = FACE_QUOTE
                increase_anger = True
                cube.wait_for_non_blocking(FACE_PAUSE)
            else:
                cube.wait_for_non_blocking(SHORT_PAUSE)

            if increase_anger:
                info.anger = min(top_anger, info.anger + 1)
                cube.speed = info.possible_speeds[info.anger]

            if quote:
                self.timed_texts.append(get_timed_text(quote, now=self.clock()))

        for enemy in self.colliding_enemies():
            if cube.is_face_on_the_ground():
                break
            self.unregister(enemy)
            info.score += 1
            info.anger = max(0, info.anger - 1)

        if info.rotation_countdown == 0:
            self.state = GameState.GAME_OVER

        self.last_update_time = self.clock()

    def render(self, surface) -> None:
        """Draw the current state and the HUD onto the surface."""
        surface.fill(self.config.background_color)
        if self.state is GameState.MAIN_MENU:
            self.menu.update(self.mouse_pos, self.mouse_down, self.mouse_released)
            self.menu.render(surface)
        elif self.state is GameState.PLAYING:
            renderer = _Renderer(surface, self.camera)
            renderer.draw_grid(200, 1.0)
            for game_object in self.game_objects:
                game_object.render(renderer)
        elif self.state in (GameState.PAUSED, GameState.GAME_OVER):
            surface.fill(DARKGREEN)
        else:
            logger.warning("Unknown game state!")
        self.render_hud(surface)

    def _draw_banner(self, surface, text: str) -> None:
        width, height = surface.get_size()
        x = (width - measure_text(text, BANNER_FONT_SIZE)) // 2
        y = (height - BANNER_FONT_SIZE) // 2
        draw_text(surface, text, x, y, BANNER_FONT_SIZE, WHITE)

    def render_hud(self, surface) -> list:
        """Draw the overlay for the current state and return its lines of text."""
        if self.state is GameState.PLAYING:
            now = self.clock()
            self.timed_texts = [t for t in self.timed_texts if not t.expired(now)]
            for timed_text in self.timed_texts:
                timed_text.draw(surface)

            info = self.game_info
            percentage = int(info.anger / (len(info.possible_speeds) - 1) * 100)
            count = self.cube.rotation_count
            rotations = int(count.x + count.y + count.z)
            lines = [
                f"Score: {info.score}",
                f"Anger: {percentage}%",
                f"Enemies Alive: {len(self.enemies())}",
                f"Rotations: {rotations}",
            ]
            for row, text in enumerate(lines):
                draw_text(
                    surface,
                    text,
                    2 * HUD_FONT_SIZE,
                    (2 + 2 * row) * HUD_FONT_SIZE,
                    HUD_FONT_SIZE,
                    YELLOW,
                )
            return lines
        if self.state is GameState.PAUSED:
            self._draw_banner(surface, "GAME PAUSED")
            return ["GAME PAUSED"]
        if self.state is GameState.GAME_OVER:
            self._draw_banner(surface, "GAME OVER")
            return ["GAME OVER"]
        return []

    def run(self) -> int:
        """Open the window and run the main loop until it is closed."""
        pygame.init()
        screen = pygame.display.set_mode((self.config.screen_width, self.config.screen_height))
        pygame.display.set_caption(self.config.window_title)
        self.camera = _Camera()
        frame_clock = pygame.time.Clock()
        frame_rate = max(240, self.config.update_speed * 2)

        running = True
        while running:
            self.mouse_released = False
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                elif event.type == pygame.KEYDOWN:
                    self.handle_key(event.key)
                elif event.type == pygame.MOUSEBUTTONUP and event.button == 1:
                    self.mouse_released = True
            if not running:
                break
            self.mouse_pos = pygame.mouse.get_pos()
            self.mouse_down = pygame.mouse.get_pressed()[0]
            self.update()
            self.render(screen)
            pygame.display.flip()
            frame_clock.tick(frame_rate)

        pygame.quit()
        return 0

    def exit(self) -> None:
        """Close the window and leave the program."""
        pygame.quit()
        raise SystemExit(0)


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(prog="angrycube", description="Roll Mr. AngryCube over his enemies.")
    parser.parse_args(argv)
    config = GameConfig(_TEXTURE_PATH, _SHADER_PATH, _MODEL_PATH, 800, 600, 120, DARKGRAY)
    return Game(config).run()


if __name__ == "__main__":
    raise SystemExit(main())