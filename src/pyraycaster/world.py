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

import logging
from time import process_time
from typing import List, Optional

from pyraycaster.camera import Camera
from pyraycaster.canvas import Canvas
from pyraycaster.colors import Color, BLACK
from pyraycaster.geometry import Point
from pyraycaster.hitrecord import Intersection, RayHit
from pyraycaster.lights import PointLight
from pyraycaster.ray import Ray
from pyraycaster.shapes import Shape

logger = logging.getLogger(__name__)


class World:
    """A class holding a list of shapes and a point light, which make a «world»

    You can add shapes to a world using :meth:`.World.add_shape`. Typically, you call
    :meth:`.World.get_color` to compute the color seen along a ray, or :meth:`.World.render`
    to produce a whole image through a :class:`.Camera`.
    """

    shapes: List[Shape]
    light: PointLight

    def __init__(self, light: PointLight):
        self.light = light
        self.shapes = []

    def add_shape(self, shape: Shape):
        """Append a new shape to this world"""
        self.shapes.append(shape)

    def intersect_with(self, ray: Ray) -> List[Intersection]:
        """Return all the intersections in front of the origin of the ray, nearest first

        Intersections at the same distance are kept in the same order as the shapes."""
        intersections = []
        for shape_index, shape in enumerate(self.shapes):
            for t in shape.intersect_with(ray):
                if t >= 0.0:
                    intersections.append(Intersection(shape_index=shape_index, t=t))

        # `sorted` is stable, so ties are broken by the order of the shapes
        return sorted(intersections, key=lambda x: x.t)

    def hit_with_ray(self, ray: Ray) -> Optional[RayHit]:
        """Determine which shape the ray hits first, or return None if it misses them all"""
        intersections = self.intersect_with(ray)
        if not intersections:
            return None

        nearest = intersections[0]
        shape = self.shapes[nearest.shape_index]
        point = ray.at(nearest.t)
        normal = shape.normal_at(point)
        eye_direction = -ray.dir

        inside = normal.dot(eye_direction) < 0.0
        if inside:
            normal = -normal

        return RayHit(
            t=nearest.t,
            point=point,
            normal=normal,
            eye_direction=eye_direction,
            shape=shape,
            inside=inside,
        )

    def is_shadowed(self, point: Point) -> bool:
        """Return True if some shape lies between `point` and the light"""
        distance = self.light.distance_from(point)
        ray = Ray(origin=point, dir=self.light.direction_from(point))

        intersections = self.intersect_with(ray)
        return bool(intersections) and (intersections[0].t < distance)

    def get_color(self, ray: Ray) -> Optional[Color]:
        """Compute the color seen along `ray`, or return None if the ray does not hit anything"""
        hit = self.hit_with_ray(ray)
        if not hit:
            return None

        return hit.shape.material.lighting(
            light=self.light,
            point=hit.point,
            eye_direction=hit.eye_direction,
            normal=hit.normal,
            in_shadow=self.is_shadowed(hit.over_point),
        )

    def render(self, camera: Camera, background_color: Color = BLACK, callback=None,
               callback_time_s: float = 2.0) -> Canvas:
        """Render the world as seen by `camera`

        Return a :class:`.Canvas` with the same size as the camera. Pixels whose ray does not hit any shape
        are set to `background_color`. If `callback` is not None, it is called as `callback(row, col)` at most
        once every `callback_time_s` seconds of processor time, so that the caller can report progress."""
        canvas = Canvas(camera.hsize, camera.vsize)
        logger.debug("rendering %d shapes on a %d×%d canvas", len(self.shapes), canvas.width, canvas.height)

        last_call_time = process_time()

        def shade_pixel(px: int, py: int, ray: Ray):
            nonlocal last_call_time

            color = self.get_color(ray)
            canvas.write_pixel(px, py, color if color is not None else background_color)

            current_time = process_time()
            if callback and (current_time - last_call_time > callback_time_s):
                callback(py, px)
                last_call_time = current_time

        start_time = process_time()
        camera.scan_space(shade_pixel)
        logger.info("rendered %d pixels in %.1f s", canvas.width * canvas.height, process_time() - start_time)

        return canvas
