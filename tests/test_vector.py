import copy
import math
import random
import sys

import pytest

from py_raymath import Matrix, MatrixIndexError, Point, Vector


class TestVector:

    def test_homogeneous_component(self):
        assert Vector(1., 2., 3.).xyzw == Matrix(4, 1, [1., 2., 3., 0.])
        assert Vector(1., 2., 3.).w == 0.0

    def test_add_vector(self):
        assert Vector(1., 2., 3.).add(Vector(1., 2., 3.)) == Vector(2., 4., 6.)
        assert Vector(1., 2., 3.) + Vector(1., 2., 3.) == Vector(2., 4., 6.)

    def test_add_point(self):
        result = Vector(1., 2., 3.).add(Point(1., 2., 3.))
        assert isinstance(result, Point)
        assert result == Point(2., 4., 6.)
        assert Vector(1., 2., 3.) + Point(1., 2., 3.) == Point(2., 4., 6.)

    def test_negate(self):
        negated = Vector(1., 2., 3.).negate()
        assert negated == Vector(-1., -2., -3.)
        assert negated.w == 0.0
        assert -Vector(1., 2., 3.) == Vector(-1., -2., -3.)

    def test_subtract(self):
        assert Vector(1., 2., 3.).subtract(Vector(1., 2., 3.)) == Vector(0., 0., 0.)
        assert Vector.zero() - Vector(1., 2., 3.) == Vector(-1., -2., -3.)

    def test_subtract_point_is_undefined(self):
        with pytest.raises(TypeError):
            Vector(1., 2., 3.).subtract(Point(1., 2., 3.))  # type: ignore[arg-type]
        with pytest.raises(TypeError):
            _ = Vector(1., 2., 3.) - Point(1., 2., 3.)  # type: ignore[operator]

    def test_scalar_multiply_and_divide(self):
        assert Vector(1., 2., 3.).multiply(2) == Vector(2., 4., 6.)
        assert Vector(1., 2., 3.) * 2 == Vector(2., 4., 6.)
        assert 2 * Vector(1., 2., 3.) == Vector(2., 4., 6.)
        assert Vector(4., 4., 4.).divide(2.) == Vector(2., 2., 2.)
        assert Vector(4., 4., 4.) / 2. == Vector(2., 2., 2.)

    def test_divide_by_zero(self):
        v = Vector(1., -1., 0.).divide(0.)
        assert v.x == math.inf
        assert v.y == -math.inf
        assert math.isnan(v.z)
        assert v.w == 0.0

    def test_dot(self):
        assert Vector(1., 2., 3.).dot(Vector(2., 3., 4.)) == 20.

    def test_cross(self):
        a = Vector(1., 2., 3.)
        b = Vector(2., 3., 4.)
        assert a.cross(b) == Vector(-1., 2., -1.)
        assert b.cross(a) == Vector(1., -2., 1.)
        assert a.cross(b).w == 0.0

    @pytest.mark.parametrize("seed", range(5))
    def test_cross_anti_commutative(self, seed):
        rng = random.Random(seed)
        a = Vector(*(rng.uniform(-10, 10) for _ in range(3)))
        b = Vector(*(rng.uniform(-10, 10) for _ in range(3)))
        assert a.cross(b) == b.cross(a).negate()

    def test_magnitude(self):
        assert Vector(1., 2., 3.).magnitude() == math.sqrt(14.)
        assert Vector(-1., -2., -3.).magnitude() == math.sqrt(14.)

    def test_normalize(self):
        assert Vector(1., 0., 0.).normalize() == Vector(1., 0., 0.)
        assert Vector(4., 0., 0.).normalize() == Vector(1., 0., 0.)

        c = Vector(1., 2., 3.)
        m = c.magnitude()
        assert c.normalize() == Vector(1. / m, 2. / m, 3. / m)

    @pytest.mark.parametrize("seed", range(5))
    def test_normalized_is_unit(self, seed):
        rng = random.Random(seed)
        v = Vector(*(rng.uniform(-100, 100) for _ in range(3)))
        assert abs(v.normalize().magnitude() - 1.0) <= 4 * sys.float_info.epsilon

    def test_normalize_zero_is_nan(self):
        n = Vector.zero().normalize()
        assert all(math.isnan(c) for c in n.xyzw)

    def test_component_access(self):
        v = Vector(1., 2., 3.)
        assert (v.get(0), v.get(1), v.get(2), v.get(3)) == (1., 2., 3., 0.)
        v.set(1, 5.)
        assert v.y == 5.
        v.get_ref(2).value += 1.
        assert v.z == 4.
        with pytest.raises(MatrixIndexError):
            v.get(4)
        with pytest.raises(MatrixIndexError):
            v.set(-1, 0.)

    def test_equality_is_exact(self):
        assert Vector(0.1 + 0.2, 0., 0.) != Vector(0.3, 0., 0.)
        assert Vector(1., 2., 3.) != Point(1., 2., 3.)

    def test_repr(self):
        assert repr(Vector(1., 2.5, -3.)) == "V(1, 2.5, -3)"


class TestPoint:

    def test_homogeneous_component(self):
        assert Point(1., 2., 3.).xyzw == Matrix(4, 1, [1., 2., 3., 1.])
        assert Point.origin() == Point(0., 0., 0.)

    def test_add_vector(self):
        result = Point(1., 2., 3.).add(Vector(1., 2., 3.))
        assert isinstance(result, Point)
        assert result == Point(2., 4., 6.)
        assert Point(1., 2., 3.) + Vector(1., 2., 3.) == Point(2., 4., 6.)

    def test_add_point_is_undefined(self):
        with pytest.raises(TypeError):
            Point(1., 2., 3.).add(Point(1., 2., 3.))  # type: ignore[arg-type]
        with pytest.raises(TypeError):
            _ = Point(1., 2., 3.) + Point(1., 2., 3.)  # type: ignore[operator]

    def test_negate_keeps_kind(self):
        negated = Point(1., 2., 3.).negate()
        assert negated == Point(-1., -2., -3.)
        assert negated.w == 1.0
        assert -Point(1., 2., 3.) == Point(-1., -2., -3.)

    def test_subtract_point(self):
        result = Point(1., 2., 3.).subtract(Point(1., 2., 3.))
        assert isinstance(result, Vector)
        assert result == Vector(0., 0., 0.)
        assert result.w == 0.0

    def test_subtract_vector(self):
        result = Point(1., 2., 3.) - Vector(1., 2., 3.)
        assert isinstance(result, Point)
        assert result == Point(0., 0., 0.)

    def test_scalar_multiply_and_divide(self):
        assert Point(1., 2., 3.).multiply(2.) == Point(2., 4., 6.)
        assert Point(4., 4., 4.) / 2. == Point(2., 2., 2.)
        assert (Point(1., 2., 3.) * 2.).w == 1.0

    def test_component_access(self):
        p = Point(1., 2., 3.)
        assert p.get(3) == 1.
        with pytest.raises(MatrixIndexError):
            p.get(4)

    def test_repr(self):
        assert repr(Point(0., 1., 0.)) == "P(0, 1, 0)"


class TestCopy:

    @pytest.mark.parametrize("copier", [copy.copy, copy.deepcopy])
    def test_vector_copy_is_independent(self, copier):
        original = Vector(1., 2., 3.)
        dup = copier(original)
        assert isinstance(dup, Vector)
        assert dup == original
        dup.set(0, 99.)
        assert original == Vector(1., 2., 3.)

    @pytest.mark.parametrize("copier", [copy.copy, copy.deepcopy])
    def test_point_copy_is_independent(self, copier):
        original = Point(1., 2., 3.)
        dup = copier(original)
        assert isinstance(dup, Point)
        dup.get_ref(1).value = -5.
        assert original == Point(1., 2., 3.)
        assert dup == Point(1., -5., 3.)
