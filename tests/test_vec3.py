import math

import pytest

from gprengine.angle import Degree, Radian
from gprengine.vec3 import Vec3F, Vec3I, Vec3U


def assert_components(vec, expected, rel=1e-5, abs_=1e-5):
    assert tuple(vec) == pytest.approx(tuple(expected), rel=rel, abs=abs_)


def test_constructor():
    assert tuple(Vec3I(1, -2, 3)) == (1, -2, 3)
    assert tuple(Vec3F(1.5, 2.5, 3.5)) == (1.5, 2.5, 3.5)
    assert tuple(Vec3U(1, 2, 3)) == (1, 2, 3)


def test_add():
    assert tuple(Vec3I(1, 2, 3) + Vec3I(4, 5, 6)) == (5, 7, 9)
    assert_components(Vec3F(1.2, 2.2, 3.2) + Vec3F(4.3, 5.3, 6.3), (5.5, 7.5, 9.5))


def test_sub():
    assert tuple(Vec3I(4, 5, 6) - Vec3I(1, 2, 3)) == (3, 3, 3)
    assert_components(Vec3F(4.5, 5.5, 6.5) - Vec3F(1.2, 2.2, 3.2), (3.3, 3.3, 3.3))


def test_mul():
    vec1 = Vec3I(4, 5, 6)
    vec2 = Vec3I(1, 2, 3)
    assert tuple(vec1 * 2) == (8, 10, 12)
    assert tuple(vec1 * vec2) == (4, 10, 18)
    assert tuple(2 * vec2) == (2, 4, 6)

    vec_f1 = Vec3F(4.3, 5.3, 6.3)
    vec_f2 = Vec3F(1.2, 2.2, 3.2)
    assert_components(vec_f1 * 2, (8.6, 10.6, 12.6))
    assert_components(vec_f1 * vec_f2, (4.3 * 1.2, 5.3 * 2.2, 6.3 * 3.2))
    assert_components(2 * vec_f2, (2.4, 4.4, 6.4))


def test_dot():
    vec1 = Vec3I(1, 2, -2)
    vec2 = Vec3I(2, -1, 0)
    assert vec1.dot(vec2) == 0
    assert Vec3I.dot(vec1, vec2) == 0
    vec_f1 = Vec3F(1.2, -3.5, 2.1)
    vec_f2 = Vec3F(3.5, 1.2, 0.0)
    assert vec_f1.dot(vec_f2) == pytest.approx(0.0, abs=1e-6)
    assert Vec3F.dot(vec_f1, vec_f2) == pytest.approx(0.0, abs=1e-6)


def test_cross():
    vec1 = Vec3I(4, 5, 6)
    vec2 = Vec3I(1, 2, 3)
    assert tuple(vec1.cross(vec2)) == (3, -6, 3)
    assert tuple(Vec3I.cross(vec2, vec1)) == (-3, 6, -3)

    vec_f1 = Vec3F(4.3, 5.3, 6.3)
    vec_f2 = Vec3F(1.2, 2.2, 3.2)
    assert_components(vec_f1.cross(vec_f2), (3.1, -6.2, 3.1))
    assert_components(Vec3F.cross(vec_f2, vec_f1), (-3.1, 6.2, -3.1))


def test_cross_is_orthogonal():
    a = Vec3I(4, 5, 6)
    b = Vec3I(1, 2, 3)
    c = a.cross(b)
    assert c.dot(a) == 0
    assert c.dot(b) == 0


def test_div():
    vec1 = Vec3I(4, 5, 6)
    assert tuple(vec1 / 2) == (2, 2, 3)
    assert tuple(vec1 / Vec3I(1, 2, 3)) == (4, 2, 2)

    vec_f1 = Vec3F(4.3, 5.3, 6.3)
    assert_components(vec_f1 / 2, (2.15, 2.65, 3.15))
    assert_components(
        vec_f1 / Vec3F(1.2, 2.2, 3.2), (4.3 / 1.2, 5.3 / 2.2, 6.3 / 3.2)
    )


def test_magnitude_sqr():
    assert Vec3F(1.2, 2.2, 3.2).magnitude_sqr() == pytest.approx(16.52, rel=1e-5)


def test_magnitude():
    assert Vec3F(1.2, 2.2, 3.2).magnitude() == pytest.approx(math.sqrt(16.52), rel=1e-5)


def test_normalize():
    length = math.sqrt(16.52)
    result = Vec3F(1.2, 2.2, 3.2).normalize()
    assert_components(result, (1.2 / length, 2.2 / length, 3.2 / length))


def test_normalize_zero_vector():
    assert Vec3F(0.0, 0.0, 0.0).normalize() == Vec3F(0.0, 0.0, 0.0)


def test_rotate():
    vec = Vec3F(1.2, 2.2, 3.2)
    quarter = Radian.from_degree(Degree(90))
    assert_components(vec.pitch(quarter), (1.2, -3.2, 2.2))
    assert_components(vec.yaw(quarter), (3.2, 2.2, -1.2))
    assert_components(vec.roll(quarter), (-2.2, 1.2, 3.2))


def test_lerp():
    result = Vec3F.lerp(Vec3F(1.2, 2.2, 3.2), Vec3F(4.3, 5.3, 6.3), 0.5)
    assert_components(result, (2.75, 3.75, 4.75))


def test_slerp_keeps_unit_length_and_bisects():
    n1 = Vec3F(1.2, 2.2, 3.2).normalize()
    n2 = Vec3F(4.3, 5.3, 6.3).normalize()
    result = Vec3F.slerp(n1, n2, 0.5)
    assert result.magnitude() == pytest.approx(1.0, rel=1e-5)
    assert result.dot(n1) == pytest.approx(result.dot(n2), rel=1e-5)


def test_slerp_orthogonal_midpoint():
    result = Vec3F.slerp(Vec3F(1.0, 0.0, 0.0), Vec3F(0.0, 1.0, 0.0), 0.5)
    half = math.sqrt(0.5)
    assert_components(result, (half, half, 0.0))


def test_projection():
    assert tuple(Vec3I.projection(Vec3I(1, 2, 3), Vec3I(4, 5, 6))) == (0, 0, 0)
    factor = 36.98 / 86.27
    result = Vec3F.projection(Vec3F(1.2, 2.2, 3.2), Vec3F(4.3, 5.3, 6.3))
    assert_components(result, (4.3 * factor, 5.3 * factor, 6.3 * factor))


def test_reflection():
    assert tuple(Vec3I.reflection(Vec3I(1, 2, 3), Vec3I(4, 5, 6))) == (-255, -318, -381)
    result = Vec3F.reflection(Vec3F(1.2, 2.2, 3.2), Vec3F(4.3, 5.3, 6.3))
    assert_components(result, (-316.828, -389.788, -462.748))


def test_integer_vector_cannot_rotate():
    with pytest.raises(TypeError):
        Vec3I(1, 2, 3).pitch(Radian(1.0))


def test_from_vector():
    assert Vec3F.from_vector(Vec3I(1, 2, 3)) == Vec3F(1.0, 2.0, 3.0)