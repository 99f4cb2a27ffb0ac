import logging
import math

import pytest

from angrycube.gameobject import GameObject, Matrix, Vector2, Vector3


def _values(m: Matrix) -> tuple:
    return (
        m.m0, m.m1, m.m2, m.m3, m.m4, m.m5, m.m6, m.m7,
        m.m8, m.m9, m.m10, m.m11, m.m12, m.m13, m.m14, m.m15,
    )


def test_vector_add_and_scale():
    assert Vector3(1, 2, 3) + Vector3(4, 5, 6) == Vector3(5, 7, 9)
    assert Vector3(1, -2, 3).scale(2) == Vector3(2, -4, 6)


def test_vector_dot_and_abs():
    assert Vector3(1, 0, 0).dot(Vector3(0, 1, 0)) == 0
    assert Vector3(2, 3, 4).dot(Vector3(2, 3, 4)) == 29
    assert Vector3(-1, 2, -3).abs() == Vector3(1, 2, 3)


def test_vector2_fields():
    v = Vector2(3.0, 4.0)
    assert (v.x, v.y) == (3.0, 4.0)


def test_identity_is_neutral():
    m = Matrix.translate(1, 2, 3) @ Matrix.rotate_xyz(Vector3(0.3, 0.2, 0.1))
    left = Matrix.identity() @ m
    right = m @ Matrix.identity()
    assert _values(left) == pytest.approx(_values(m), abs=1e-9)
    assert _values(right) == pytest.approx(_values(m), abs=1e-9)


def test_translate_moves_origin():
    point = Matrix.translate(2, 3, 4).transform_point(Vector3())
    assert point == Vector3(2, 3, 4)


def test_translate_composes_by_adding():
    m = Matrix.translate(1, 2, 3) @ Matrix.translate(4, 5, 6)
    assert (m.m12, m.m13, m.m14) == (5, 7, 9)


def test_zero_rotation_is_identity():
    rotation = Matrix.rotate_xyz(Vector3())
    expected = (1, 0, 0, 0, 0, 1, 0, 0, 0, 0, 1, 0, 0, 0, 0, 1)
    assert _values(rotation) == pytest.approx(expected, abs=1e-9)


@pytest.mark.parametrize("axis", [Vector3(1, 0, 0), Vector3(0, 1, 0), Vector3(0, 0, 1)])
def test_single_axis_rotation_inverts(axis):
    forward = Matrix.rotate_xyz(axis.scale(0.7))
    backward = Matrix.rotate_xyz(axis.scale(-0.7))
    product = forward @ backward
    expected = (1, 0, 0, 0, 0, 1, 0, 0, 0, 0, 1, 0, 0, 0, 0, 1)
    assert _values(product) == pytest.approx(expected, abs=1e-9)


def test_rotation_preserves_length():
    m = Matrix.rotate_xyz(Vector3(0.4, 1.1, -0.6))
    v = Vector3(1, 2, 3)
    rotated = m.transform_point(v)
    assert math.isclose(rotated.dot(rotated), v.dot(v))


def test_quarter_rotation_about_axis_keeps_axis():
    m = Matrix.rotate_xyz(Vector3(math.pi / 2, 0, 0))
    result = m.transform_point(Vector3(1, 0, 0))
    assert math.isclose(result.x, 1.0)
    assert math.isclose(result.y, 0.0, abs_tol=1e-12)
    assert math.isclose(result.z, 0.0, abs_tol=1e-12)


def test_matmul_is_associative():
    a = Matrix.rotate_xyz(Vector3(0.1, 0.2, 0.3))
    b = Matrix.translate(1, 2, 3)
    c = Matrix.rotate_xyz(Vector3(-0.5, 0.0, 0.9))
    assert _values((a @ b) @ c) == pytest.approx(_values(a @ (b @ c)), abs=1e-9)


def test_game_object_starts_at_identity():
    obj = GameObject("tex.png", "shader.fs", "model.obj")
    assert obj.transform == Matrix.identity()
    assert obj.model_path == "model.obj"


def test_game_object_base_methods_warn(caplog):
    obj = GameObject()
    with caplog.at_level(logging.INFO):
        obj.render(None)
        obj.update(0.5)
        obj.set_position(Vector2(1, 1))
    levels = [record.levelno for record in caplog.records]
    assert levels == [logging.WARNING, logging.WARNING, logging.INFO]
    assert obj.transform == Matrix.identity()