import logging

import pygame
import pytest

from angrycube.gameobject import Vector2, Vector3
from angrycube.misc import (
    GameInfo,
    TimedText,
    abs_vector3,
    get_timed_text,
    log,
    sum_vector3,
)


def test_game_info_defaults():
    info = GameInfo()
    assert info.possible_speeds == [1.0, 1.5, 2.0, 2.5, 3.0, 5.0, 6.0, 7.5, 9.0]
    assert info.rotation_countdown == 20
    assert (info.score, info.anger, info.face_hits) == (0, 0, 0)


def test_game_info_speed_lists_are_independent():
    first, second = GameInfo(), GameInfo()
    first.possible_speeds.append(99.0)
    assert 99.0 not in second.possible_speeds


def test_timed_text_expiry():
    timed = TimedText(lambda surface: None, last_check_time=10.0)
    assert timed.duration == 3.0
    assert not timed.expired(13.0)
    assert timed.expired(13.5)


def test_timed_text_draw_forwards_surface():
    seen = []
    timed = TimedText(seen.append)
    timed.draw("surface")
    assert seen == ["surface"]


def test_get_timed_text_keeps_text_and_time():
    timed = get_timed_text("hello", Vector2(5, 5), now=5.0)
    assert timed.text == "hello"
    assert timed.last_check_time == 5.0
    assert not timed.expired(6.0)


def test_get_timed_text_draws_yellow_at_position():
    surface = pygame.Surface((200, 100))
    surface.fill((0, 0, 0))
    get_timed_text("WWWW", Vector2(10, 10), now=0.0).draw(surface)
    region = surface.subsurface(pygame.Rect(10, 10, 60, 20))
    average = pygame.transform.average_color(region)
    assert average[0] > 0
    assert average[2] == 0


def test_get_timed_text_centres_without_position():
    surface = pygame.Surface((300, 300))
    surface.fill((0, 0, 0))
    get_timed_text("WWWW", now=0.0).draw(surface)
    corner = pygame.transform.average_color(surface.subsurface(pygame.Rect(0, 0, 50, 50)))
    band = pygame.transform.average_color(surface.subsurface(pygame.Rect(0, 100, 300, 20)))
    assert corner[:3] == (0, 0, 0)
    assert band[0] > 0


def test_abs_vector3():
    assert abs_vector3(Vector3(-1.5, 2.0, -0.0)) == Vector3(1.5, 2.0, 0.0)


@pytest.mark.parametrize(
    "vector, expected",
    [(Vector3(1, 2, 3), 6), (Vector3(1.5, 1.5, 0.5), 3), (Vector3(-1, -1, -0.5), -2)],
)
def test_sum_vector3_truncates(vector, expected):
    assert sum_vector3(vector) == expected


def test_log_formats_and_emits(caplog):
    with caplog.at_level(logging.INFO):
        line = log("Created Game singleton class.", "GAME")
    assert line == "[GAME]: Created Game singleton class."
    assert caplog.records[-1].getMessage() == line


def test_log_default_prefix_and_level(caplog):
    with caplog.at_level(logging.DEBUG):
        line = log("hi", level=logging.WARNING)
    assert line == "[CUSTOM]: hi"
    assert caplog.records[-1].levelno == logging.WARNING