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

from dataclasses import dataclass

from pyraycaster.geometry import Point, Normal, Vec


@dataclass
class Intersection:
    """A crossing between a ray and one of the shapes of a :class:`.World`

    -   `shape_index`: position of the shape in :attr:`.World.shapes`
    -   `t`: distance from the origin of the ray where the crossing happened
    """
    shape_index: int
    t: float


@dataclass
class RayHit:
    """
    A class holding information about the nearest ray-shape intersection

    The parameters defined in this dataclass are the following:

    -   `t`: a floating-point value specifying the distance from the origin of the ray where the hit happened
    -   `point`: a :class:`.Point` object holding the world coordinates of the hit point
    -   `normal`: a :class:`.Normal` object holding the orientation of the normal to the surface where the hit
        happened. It always points towards the observer, even if the ray hit the surface from inside
    -   `eye_direction`: a unit vector pointing from the hit point back to the origin of the ray
    -   `shape`: the shape that has been hit
    -   `inside`: True if the ray hit the inner side of the surface
    """
    t: float
    point: Point
    normal: Normal
    eye_direction: Vec
    shape: "Shape"
    inside: bool = False

    @property
    def over_point(self) -> Point:
        """The hit point, moved slightly above the surface"""
        return self.normal.over_point(self.point)
