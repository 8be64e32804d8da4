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

from pyraycaster.camera import Camera
from pyraycaster.colors import Color, WHITE
from pyraycaster.geometry import Point, Vec
from pyraycaster.lights import PointLight
from pyraycaster.materials import Material
from pyraycaster.shapes import Sphere, Plane
from pyraycaster.transformations import translation, scaling, view_transformation
from pyraycaster.world import World


def demo_world() -> World:
    """Build a world with three spheres resting on a floor, lit from above-left"""
    world = World(light=PointLight(position=Point(-10.0, 10.0, -10.0), intensity=WHITE))

    world.add_shape(Plane().with_material(Material(color=Color(1.0, 0.9, 0.9), specular=0.0)))

    world.add_shape(
        Sphere()
        .with_transformation(translation(Vec(-0.5, 1.0, 0.5)))
        .with_material(Material(color=Color(0.1, 1.0, 0.5), diffuse=0.7, specular=0.3))
    )
    world.add_shape(
        Sphere()
        .with_transformation(scaling(Vec(0.5, 0.5, 0.5)).and_then(translation(Vec(1.5, 0.5, -0.5))))
        .with_material(Material(color=Color(0.5, 1.0, 0.1), diffuse=0.7, specular=0.3))
    )
    world.add_shape(
        Sphere()
        .with_transformation(scaling(Vec(0.33, 0.33, 0.33)).and_then(translation(Vec(-1.5, 0.33, -0.75))))
        .with_material(Material(color=Color(1.0, 0.8, 0.1), diffuse=0.7, specular=0.3))
    )

    return world


def demo_camera(width: int, height: int, fov_deg: float = 60.0) -> Camera:
    """Build a camera looking at the spheres of :func:`.demo_world` from slightly above"""
    return Camera(width, height, fov_deg).with_transformation(
        view_transformation(from_point=Point(0.0, 1.5, -5.0), to_point=Point(0.0, 1.0, 0.0), up=Vec(0.0, 1.0, 0.0))
    )
