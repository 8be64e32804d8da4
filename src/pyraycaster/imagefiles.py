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
import math
from pathlib import Path

from pyraycaster.canvas import Canvas

logger = logging.getLogger(__name__)

# PPM readers are not required to accept lines longer than this
PPM_MAX_LINE_LENGTH = 70
PPM_MAX_COLOR_VALUE = 255


class InvalidImageFormat(Exception):
    """Unsupported image format exception"""

    def __init__(self, error_message):
        super().__init__(error_message)


def _to_8bit(channel: float) -> int:
    """Round a channel in [0, 1] to the nearest integer in [0, 255]"""
    return int(channel * PPM_MAX_COLOR_VALUE + 0.5)


def write_ppm(stream, canvas: Canvas):
    """Write the image in a plain-text PPM («P3») file

    The `stream` parameter must be a text I/O stream. Color channels are mapped from [0, 1] to [0, 255]; values
    outside the range are clamped. No line in the file is longer than 70 characters."""
    stream.write(f"P3\n{canvas.width} {canvas.height}\n{PPM_MAX_COLOR_VALUE}\n")

    line = ""
    for color in canvas.pixels:
        pixel_str = " ".join(str(_to_8bit(channel)) for channel in color.clamp().to_tuple()) + " "
        if len(line) + len(pixel_str) >= PPM_MAX_LINE_LENGTH:
            stream.write(line.strip() + "\n")
            line = ""

        line += pixel_str

    stream.write(line.strip() + "\n")


def write_ldr_image(stream, canvas: Canvas, format="PNG", gamma=1.0):
    """Save the image in a LDR format supported by Pillow

    Color channels are clamped to [0, 1] before being converted to 8-bit values."""
    from PIL import Image
    img = Image.new("RGB", (canvas.width, canvas.height))

    for y in range(canvas.height):
        for x in range(canvas.width):
            cur_color = canvas.pixel_at(x, y).clamp()
            img.putpixel(xy=(x, y), value=tuple(
                _to_8bit(math.pow(channel, 1 / gamma)) for channel in cur_color.to_tuple()
            ))

    img.save(stream, format=format)


def _pillow_format_for(suffix: str):
    """Return the name of the Pillow format able to write files with extension `suffix`, or None"""
    from PIL import Image
    format = Image.registered_extensions().get(suffix)

    # Some formats (e.g., PSD) can be read but not written
    return format if format in Image.SAVE else None


def save_image(file_name, canvas: Canvas):
    """Save `canvas` into a file, choosing the format from the extension of `file_name`

    Files ending with ``.ppm`` are written in plain-text PPM format; any other extension known to Pillow
    (``.png``, ``.jpg``, …) is written through :func:`.write_ldr_image`. Raise :class:`.InvalidImageFormat` if
    Pillow cannot write files with that extension (the file is not created in this case); I/O errors are
    propagated to the caller."""
    suffix = Path(file_name).suffix.lower()

    if suffix == ".ppm":
        with open(file_name, "wt") as outf:
            write_ppm(outf, canvas)
    else:
        format = _pillow_format_for(suffix)
        if not format:
            raise InvalidImageFormat(f"unsupported image format «{suffix}» for file {file_name}")

        with open(file_name, "wb") as outf:
            write_ldr_image(outf, canvas, format=format)

    logger.debug("image written to %s", file_name)
