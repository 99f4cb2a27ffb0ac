"""Settings the game is started with."""

from __future__ import annotations

from dataclasses import dataclass

from angrycube.misc import log


@dataclass
class GameConfig:
    """Asset paths, window geometry, update rate and colours."""

    texture_path: str
    shader_path: str
    model_path: str
    screen_width: int
    screen_height: int
    update_speed: int
    background_color: tuple
    window_title: str = "Mr. AngryCube (DEV)"

    def __post_init__(self) -> None:
        log("Created game configuration.", "GAMECONFIG")