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

from dataclasses import dataclass, field

from pyraycaster.colors import Color, WHITE
from pyraycaster.geometry import Normal, Point, Vec
from pyraycaster.lights import PointLight


@dataclass
class Material:
    """A material following the Phong reflection model

    The class has the following fields:

    -   `color`: the color of the surface (a :class:`.Color` object)
    -   `ambient`: fraction of the light that reaches the surface regardless of its orientation
    -   `diffuse`: weight of the light scattered evenly in all directions (Lambert's law)
    -   `specular`: weight of the highlight reflected around the mirror direction
    -   `shininess`: exponent controlling the size of the highlight; larger values give smaller highlights
    """
    color: Color = field(default_factory=lambda: WHITE)
    ambient: float = 0.1
    diffuse: float = 0.9
    specular: float = 0.9
    shininess: float = 200.0

    def lighting(self, light: PointLight, point: Point, eye_direction: Vec, normal: Normal,
                 in_shadow: bool = False) -> Color:
        """Compute the color of the surface at `point` as seen from `eye_direction`

        Both `eye_direction` and `normal` must be unit vectors pointing away from the surface. If `in_shadow`
        is True, the light does not reach the point and only the ambient term survives."""
        light_direction = light.direction_from(point)

        if in_shadow:
            diffuse_factor, specular_factor = 0.0, 0.0
        else:
            diffuse_factor = self._diffuse_factor(light_direction, normal)
            specular_factor = self._specular_factor(light_direction, eye_direction, normal)

        effective_color = light.intensity * self.color * (self.ambient + diffuse_factor)
        return effective_color + light.intensity * specular_factor

    def _diffuse_factor(self, light_direction: Vec, normal: Normal) -> float:
        light_dot_normal = normal.dot(light_direction)
        if light_dot_normal < 0.0:
            # The light is on the other side of the surface
            return 0.0

        return self.diffuse * light_dot_normal

    def _specular_factor(self, light_direction: Vec, eye_direction: Vec, normal: Normal) -> float:
        reflected = normal.reflect(-light_direction)
        reflect_dot_eye = reflected.dot(eye_direction)
        if reflect_dot_eye <= 0.0:
            return 0.0

        return self.specular * reflect_dot_eye ** self.shininess
