# -*- encoding: utf-8 -*-
#
# The MIT License (MIT)
#
# Copyright © 2021 Maurizio Tomasi
#
# Permission is hereby granted, free of charge, to any person obtaining a copy of this software and associated
# documentation files (the “Software”), to deal in the Software without restriction, including without limitation the
# rights to use, copy, modify, merge, publish, distribute, sublicense, and/or sell copies of the Software,
# and to permit persons to whom the Software is furnished to do so, subject to the following conditions:
#
# The above copyright notice and this permission notice shall be included in all copies or substantial portions of
# the Software. THE SOFTWARE IS PROVIDED “AS IS”, WITHOUT WARRANTY OF ANY KIND, EXPRESS OR IMPLIED, INCLUDING BUT NOT
# LIMITED TO THE WARRANTIES OF MERCHANTABILITY, FITNESS FOR A PARTICULAR PURPOSE AND NONINFRINGEMENT. IN NO EVENT
# SHALL THE AUTHORS OR COPYRIGHT HOLDERS BE LIABLE FOR ANY CLAIM, DAMAGES OR OTHER LIABILITY, WHETHER IN AN ACTION OF
# CONTRACT, TORT OR OTHERWISE, ARISING FROM, OUT OF OR IN CONNECTION WITH THE SOFTWARE OR THE USE OR OTHER DEALINGS
# IN THE SOFTWARE.

from copy import deepcopy
from math import sin, cos, radians

from pyraycaster.geometry import Vec, UnitVec, Point, Normal
from pyraycaster.misc import are_close
from pyraycaster.ray import Ray


def _matr_prod(a, b):
    result = [[0.0 for i in range(4)] for j in range(4)]
    for i in range(4):
        for j in range(4):
            for k in range(4):
                result[i][j] += a[i][k] * b[k][j]

    return result


def _are_matr_close(m1, m2):
    for i in range(4):
        for j in range(4):
            if not are_close(m1[i][j], m2[i][j]):
                return False

    return True


IDENTITY_MATR4x4 = [[1.0, 0.0, 0.0, 0.0],
                    [0.0, 1.0, 0.0, 0.0],
                    [0.0, 0.0, 1.0, 0.0],
                    [0.0, 0.0, 0.0, 1.0]]


class Matrix:
    """A 4×4 matrix acting on homogeneous coordinates

    The matrix is stored as a list of four rows. Points are multiplied assuming an implicit fourth coordinate
    w = 1 and vectors assuming w = 0, so that translations never affect vectors. In both cases the homogeneous
    row of the result is dropped.
    """

    def __init__(self, rows=None):
        self.rows = rows if rows is not None else deepcopy(IDENTITY_MATR4x4)

    def __getitem__(self, item):
        """Return the i-th row of the matrix"""
        return self.rows[item]

    def __mul__(self, other):
        """Multiply two matrices"""
        if isinstance(other, Matrix):
            return Matrix(_matr_prod(self.rows, other.rows))
        else:
            raise TypeError(f"Invalid type {type(other)} multiplied to a Matrix object")

    def apply_to_point(self, point: Point) -> Point:
        row0, row1, row2, _ = self.rows
        return Point(x=point.x * row0[0] + point.y * row0[1] + point.z * row0[2] + row0[3],
                     y=point.x * row1[0] + point.y * row1[1] + point.z * row1[2] + row1[3],
                     z=point.x * row2[0] + point.y * row2[1] + point.z * row2[2] + row2[3])

    def apply_to_vec(self, vec: Vec) -> Vec:
        row0, row1, row2, _ = self.rows
        return Vec(x=vec.x * row0[0] + vec.y * row0[1] + vec.z * row0[2],
                   y=vec.x * row1[0] + vec.y * row1[1] + vec.z * row1[2],
                   z=vec.x * row2[0] + vec.y * row2[1] + vec.z * row2[2])

    def transpose(self):
        return Matrix([[self.rows[j][i] for j in range(4)] for i in range(4)])

    def is_close(self, other):
        return _are_matr_close(self.rows, other.rows)

    def __repr__(self):
        fmtstring = "   [{0:6.3e} {1:6.3e} {2:6.3e} {3:6.3e}],\n"
        result = "[\n"
        for row in self.rows:
            result += fmtstring.format(*row)
        result += "]"
        return result


IDENTITY = Matrix(IDENTITY_MATR4x4)


class Transformation:
    """An affine transformation.

    This class encodes an affine transformation. It has been designed with the aim of making the calculation
    of the inverse transformation particularly efficient: every constructor in this module computes the inverse
    matrix analytically, and :meth:`.Transformation.inverse` just swaps the two matrices.

    Use :meth:`.Transformation.apply` (or the ``*`` operator) to transform points, vectors, normals and rays.
    """

    def __init__(self, m=IDENTITY, invm=IDENTITY):
        self.m = m if isinstance(m, Matrix) else Matrix(m)
        self.invm = invm if isinstance(invm, Matrix) else Matrix(invm)

    def apply(self, other):
        """Apply the transformation to a :class:`.Point`, :class:`.Vec`, :class:`.Normal` or :class:`.Ray`"""
        if isinstance(other, Point):
            return self.m.apply_to_point(other)
        elif isinstance(other, Vec):
            return self.m.apply_to_vec(other)
        elif isinstance(other, Normal):
            # Normals transform with the transposed inverse matrix
            return Normal.from_vec(self.invm.transpose().apply_to_vec(other.vec))
        elif isinstance(other, Ray):
            result = other.transform(self)
            if isinstance(other.dir, UnitVec) and not result.dir.is_unit():
                result = Ray(origin=result.origin, dir=result.dir.normalize())
            return result
        else:
            raise TypeError(f"Invalid type {type(other)} passed to Transformation.apply")

    def __mul__(self, other):
        if isinstance(other, Transformation):
            result_m = self.m * other.m
            result_invm = other.invm * self.invm  # Reverse order! (A B)^-1 = B^-1 A^-1
            return Transformation(m=result_m, invm=result_invm)

        return self.apply(other)

    def and_then(self, other):
        """Return a transformation equivalent to applying this one first and `other` afterwards"""
        return other * self

    def is_consistent(self):
        """Check the internal consistency of the transformation.

        This method is useful when writing tests."""
        prod = self.m * self.invm
        return prod.is_close(IDENTITY)

    def __repr__(self):
        return repr(self.m)

    def is_close(self, other):
        """Check if `other` represents the same transform."""
        return self.m.is_close(other.m) and self.invm.is_close(other.invm)

    def inverse(self):
        """Return a `Transformation` object representing the inverse affine transformation.

        This method is very cheap to call."""
        return Transformation(m=self.invm, invm=self.m)


def translation(vec):
    """Return a :class:`.Transformation` object encoding a rigid translation

    The parameter `vec` specifies the amount of shift to be applied along the three axes."""
    return Transformation(
        m=[[1.0, 0.0, 0.0, vec.x],
           [0.0, 1.0, 0.0, vec.y],
           [0.0, 0.0, 1.0, vec.z],
           [0.0, 0.0, 0.0, 1.0]],
        invm=[[1.0, 0.0, 0.0, -vec.x],
              [0.0, 1.0, 0.0, -vec.y],
              [0.0, 0.0, 1.0, -vec.z],
              [0.0, 0.0, 0.0, 1.0]],
    )


def scaling(vec):
    """Return a :class:`.Transformation` object encoding a scaling

    The parameter `vec` specifies the amount of scaling along the three directions X, Y, Z."""
    return Transformation(
        m=[[vec.x, 0.0, 0.0, 0.0],
           [0.0, vec.y, 0.0, 0.0],
           [0.0, 0.0, vec.z, 0.0],
           [0.0, 0.0, 0.0, 1.0]],
        invm=[[1 / vec.x, 0.0, 0.0, 0.0],
              [0.0, 1 / vec.y, 0.0, 0.0],
              [0.0, 0.0, 1 / vec.z, 0.0],
              [0.0, 0.0, 0.0, 1.0]],
    )


def rotation_x(angle_deg: float):
    """Return a :class:`.Transformation` object encoding a rotation around the X axis

    The parameter `angle_deg` specifies the rotation angle (in degrees). The positive sign is
    given by the right-hand rule."""

    sinang, cosang = sin(radians(angle_deg)), cos(radians(angle_deg))
    return Transformation(
        m=[[1.0, 0.0, 0.0, 0.0],
           [0.0, cosang, -sinang, 0.0],
           [0.0, sinang, cosang, 0.0],
           [0.0, 0.0, 0.0, 1.0]],
        invm=[[1.0, 0.0, 0.0, 0.0],
              [0.0, cosang, sinang, 0.0],
              [0.0, -sinang, cosang, 0.0],
              [0.0, 0.0, 0.0, 1.0]],
    )


def rotation_y(angle_deg: float):
    """Return a :class:`.Transformation` object encoding a rotation around the Y axis

    The parameter `angle_deg` specifies the rotation angle (in degrees). The positive sign is
    given by the right-hand rule."""
    sinang, cosang = sin(radians(angle_deg)), cos(radians(angle_deg))
    return Transformation(
        m=[[cosang, 0.0, sinang, 0.0],
           [0.0, 1.0, 0.0, 0.0],
           [-sinang, 0.0, cosang, 0.0],
           [0.0, 0.0, 0.0, 1.0]],
        invm=[[cosang, 0.0, -sinang, 0.0],
              [0.0, 1.0, 0.0, 0.0],
              [sinang, 0.0, cosang, 0.0],
              [0.0, 0.0, 0.0, 1.0]],
    )


def rotation_z(angle_deg: float):
    """Return a :class:`.Transformation` object encoding a rotation around the Z axis

    The parameter `angle_deg` specifies the rotation angle (in degrees). The positive sign is
    given by the right-hand rule."""
    sinang, cosang = sin(radians(angle_deg)), cos(radians(angle_deg))
    return Transformation(
        m=[[cosang, -sinang, 0.0, 0.0],
           [sinang, cosang, 0.0, 0.0],
           [0.0, 0.0, 1.0, 0.0],
           [0.0, 0.0, 0.0, 1.0]],
        invm=[[cosang, sinang, 0.0, 0.0],
              [-sinang, cosang, 0.0, 0.0],
              [0.0, 0.0, 1.0, 0.0],
              [0.0, 0.0, 0.0, 1.0]],
    )


def from_vectors(x: UnitVec, y: UnitVec, z: UnitVec):
    """Return a :class:`.Transformation` mapping the X, Y, Z axes onto the vectors `x`, `y`, `z`

    The three vectors must form an orthonormal basis: the inverse is computed as the transposed matrix."""
    return Transformation(
        m=[[x.x, y.x, z.x, 0.0],
           [x.y, y.y, z.y, 0.0],
           [x.z, y.z, z.z, 0.0],
           [0.0, 0.0, 0.0, 1.0]],
        invm=[[x.x, x.y, x.z, 0.0],
              [y.x, y.y, y.z, 0.0],
              [z.x, z.y, z.z, 0.0],
              [0.0, 0.0, 0.0, 1.0]],
    )


def view_transformation(from_point: Point, to_point: Point, up: Vec):
    """Return the transformation placing an observer at `from_point` and looking at `to_point`

    The result maps the observer's reference frame into world space. In its own frame the observer sits at the
    origin and looks towards −Z, with +Y pointing upwards; `up` does not need to be orthogonal to the viewing
    direction, nor normalized."""
    forward = (to_point - from_point).normalize()
    right = forward.cross(up).normalize()
    true_up = right.cross(forward).normalize()

    return from_vectors(right, true_up, -forward).and_then(translation(from_point.to_vec()))
