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
from math import tan, radians

from pyraycaster.geometry import Point, ORIGIN
from pyraycaster.ray import Ray
from pyraycaster.transformations import Transformation


class Camera:
    """A pinhole camera implementing a perspective 3D → 2D projection

    In its own reference frame the camera sits at the origin and looks towards −Z, with +Y pointing
    upwards; the screen is the plane z = −1. Use :meth:`.Camera.with_transformation` (typically together with
    :func:`.view_transformation`) to place the camera in the world.
    """

    def __init__(self, hsize: int, vsize: int, fov_deg: float = 90.0, transformation=Transformation()):
        """Create a new camera

        The parameters `hsize` and `vsize` are the number of columns and rows of the image, and `fov_deg`
        is the field-of-view angle (in degrees) along the longest side of the image.

        The `transformation` parameter is an instance of the :class:`.Transformation` class."""
        self.hsize = hsize
        self.vsize = vsize
        self.fov_deg = fov_deg
        self.transformation = transformation

        half_view = tan(radians(fov_deg) / 2.0)
        aspect_ratio = hsize / vsize
        if aspect_ratio >= 1.0:
            self.half_width, self.half_height = half_view, half_view / aspect_ratio
        else:
            self.half_width, self.half_height = half_view * aspect_ratio, half_view

        self.pixel_size = 2.0 * half_view / max(hsize, vsize)

    def with_transformation(self, transformation: Transformation):
        """Return a copy of this camera placed in the world through `transformation`"""
        result = copy(self)
        result.transformation = transformation
        return result

    def ray_for_pixel(self, px: int, py: int) -> Ray:
        """Shoot a ray through the center of the pixel at column `px` and row `py`

        The pixel (0, 0) is in the top-left corner of the image."""
        screen_point = Point(
            -self.half_width + (px + 0.5) * self.pixel_size,
            self.half_height - (py + 0.5) * self.pixel_size,
            -1.0,
        )
        return Ray.between(self.transformation * ORIGIN, self.transformation * screen_point)

    def scan_space(self, func):
        """Shoot one ray through each pixel of the image

        For each pixel, call `func(px, py, ray)`. Pixels are visited row by row, starting from the top-left
        corner."""
        for py in range(self.vsize):
            for px in range(self.hsize):
                func(px, py, self.ray_for_pixel(px, py))
