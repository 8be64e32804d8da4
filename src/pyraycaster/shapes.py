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

from copy import copy
from math import sqrt
from typing import List

from pyraycaster.geometry import Point, Vec, Normal, VEC_Y
from pyraycaster.materials import Material
from pyraycaster.ray import Ray
from pyraycaster.transformations import Transformation

# Below this value of |dir.y| / |dir| a ray is considered parallel to a plane
PLANE_EPSILON = 1e-4


def _solve_quadratic_equation(a: float, b: float, c: float) -> List[float]:
    """Return the real roots of a·t² + b·t + c = 0, smallest first

    A double root is returned twice; if there are no real roots, the list is empty."""
    delta = b * b - 4.0 * a * c
    if delta < 0.0:
        return []

    sqrt_delta = sqrt(delta)
    return [(-b - sqrt_delta) / (2.0 * a), (-b + sqrt_delta) / (2.0 * a)]


class Shape:
    """A generic 3D shape

    This is an abstract class, and you should only use it to derive
    concrete classes. Each shape is defined in its own «local» reference
    frame, and :attr:`.Shape.transformation` maps it into the world. Derived
    classes only need to redefine :meth:`.Shape.local_normal_at` and
    :meth:`.Shape.local_intersect_with`: the conversion from and to world
    coordinates is done here.

    """

    def __init__(self, transformation: Transformation = Transformation(), material: Material = None):
        """Create a shape, potentially associating a transformation and a material to it"""
        self.transformation = transformation
        self.material = material if material is not None else Material()

    def with_material(self, material: Material):
        """Return a copy of this shape using a different material"""
        result = copy(self)
        result.material = material
        return result

    def with_transformation(self, transformation: Transformation):
        """Return a copy of this shape using a different transformation"""
        result = copy(self)
        result.transformation = transformation
        return result

    def normal_at(self, point: Point) -> Normal:
        """Return the normal to the surface at `point` (in world coordinates)"""
        local_point = self.transformation.inverse() * point
        local_normal = Normal.from_vec(self.local_normal_at(local_point))
        return self.transformation * local_normal

    def intersect_with(self, ray: Ray) -> List[float]:
        """Return the values of `t` where `ray` crosses the surface, sorted in ascending order

        Values can be negative, if the intersection happens behind the origin of the ray."""
        return self.local_intersect_with(ray.transform(self.transformation.inverse()))

    def local_normal_at(self, point: Point) -> Vec:
        """Return a vector perpendicular to the surface at `point` (in local coordinates)"""
        raise NotImplementedError(
            "Shape.local_normal_at is an abstract method and cannot be called directly"
        )

    def local_intersect_with(self, ray: Ray) -> List[float]:
        """Compute the intersections between the shape and a ray expressed in local coordinates"""
        raise NotImplementedError(
            "Shape.local_intersect_with is an abstract method and cannot be called directly"
        )


class Sphere(Shape):
    """A 3D unit sphere centered on the origin of the axes"""

    def __init__(self, transformation=Transformation(), material: Material = None):
        """Create a unit sphere, potentially associating a transformation to it"""
        super().__init__(transformation, material)

    def local_normal_at(self, point: Point) -> Vec:
        return point.to_vec()

    def local_intersect_with(self, ray: Ray) -> List[float]:
        origin_vec = ray.origin.to_vec()
        a = ray.dir.squared_norm()
        b = 2.0 * ray.scalar_projection_of(origin_vec)
        c = origin_vec.squared_norm() - 1.0

        return _solve_quadratic_equation(a, b, c)


class Plane(Shape):
    """A 3D infinite plane parallel to the x and z axis and passing through the origin"""

    def __init__(self, transformation=Transformation(), material: Material = None):
        """Create a xz plane, potentially associating a transformation to it"""
        super().__init__(transformation, material)

    def local_normal_at(self, point: Point) -> Vec:
        return VEC_Y

    def local_intersect_with(self, ray: Ray) -> List[float]:
        # The direction is not normalized: compare the slope, not the raw component
        if abs(ray.dir.y) < PLANE_EPSILON * ray.dir.norm():
            # Parallel and coplanar rays never produce a hit
            return []

        return [-ray.origin.y / ray.dir.y]
