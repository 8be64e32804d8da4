#!/usr/bin/env python3

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
import logging
import sys
from time import process_time

import click

from pyraycaster.canvas import Canvas
from pyraycaster.colors import Color, BLACK
from pyraycaster.imagefiles import save_image, InvalidImageFormat
from pyraycaster.scenes import demo_world, demo_camera


@dataclass
class RenderParameters:
    width: int = 320
    height: int = 200
    fov_deg: float = 60.0
    background_color: Color = field(default_factory=lambda: BLACK)
    output_file_name: str = "output.ppm"


def parse_color(definition: str) -> Color:
    """Parse a color in the form «R,G,B», where each component is a floating-point number"""
    parts = definition.split(",")
    if len(parts) != 3:
        raise ValueError(f"the color «{definition}» does not follow the pattern R,G,B")

    try:
        r, g, b = [float(part) for part in parts]
    except ValueError:
        raise ValueError(f"invalid floating-point value in color «{definition}»")

    return Color(r, g, b)


def render_demo(parameters: RenderParameters, callback=None) -> Canvas:
    """Render the demo scene using the size, field of view and background color in `parameters`"""
    world = demo_world()
    camera = demo_camera(parameters.width, parameters.height, parameters.fov_deg)

    return world.render(camera, background_color=parameters.background_color, callback=callback)


@click.group()
@click.option("--verbose", "-v", is_flag=True, default=False, help="Print debugging messages")
def cli(verbose):
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s %(name)s %(levelname)s: %(message)s",
    )


@click.command("render")
@click.option("--width", type=int, default=320, help="Width of the image to render")
@click.option("--height", type=int, default=200, help="Height of the image to render")
@click.option("--fov-deg", type=float, default=60.0, help="Field of view along the longest side (degrees)")
@click.option(
    "--background",
    type=str,
    default="0,0,0",
    help="Color of the pixels not covered by any shape, in the form R,G,B (e.g., 0.2,0.2,0.4)",
)
@click.argument("output_file_name", type=str)
def render(width, height, fov_deg, background, output_file_name):
    """Render the demo scene into OUTPUT_FILE_NAME (.ppm, .png, …)"""
    try:
        background_color = parse_color(background)
    except ValueError as e:
        print(f"error, {e}")
        sys.exit(1)

    parameters = RenderParameters(
        width=width,
        height=height,
        fov_deg=fov_deg,
        background_color=background_color,
        output_file_name=output_file_name,
    )

    print(f"Generating a {width}×{height} image")

    def print_progress(row, col):
        print(f"Rendering row {row + 1}/{height}\r", end="")

    start_time = process_time()
    canvas = render_demo(parameters, callback=print_progress)
    elapsed_time = process_time() - start_time

    print(f"Rendering completed in {elapsed_time:.1f} s")

    try:
        save_image(parameters.output_file_name, canvas)
    except (InvalidImageFormat, OSError) as e:
        print(f"error, unable to write {output_file_name}: {e}")
        sys.exit(1)

    print(f"Image written to {output_file_name}")


cli.add_command(render)

if __name__ == "__main__":
    cli()
