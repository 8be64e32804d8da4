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

from pyraycaster.colors import Color, BLACK


class Canvas:
    """A 2D image made of :class:`.Color` pixels

    This class has the following members:

    -   `width` (int): number of columns in the 2D matrix of colors
    -   `height` (int): number of rows in the 2D matrix of colors
    -   `pixels` (array of `Color`): the 2D matrix, represented as a 1D array in row-major order
    """

    def __init__(self, width=0, height=0):
        """Create a black image with the specified resolution"""
        (self.width, self.height) = (width, height)
        self.pixels = [BLACK for i in range(self.width * self.height)]

    def valid_coordinates(self, x, y):
        """Return True if ``(x, y)`` are coordinates within the 2D matrix"""
        return ((x >= 0) and (x < self.width) and
                (y >= 0) and (y < self.height))

    def pixel_offset(self, x, y):
        """Return the position in the 1D array of the specified pixel"""
        return y * self.width + x

    def pixel_at(self, x, y) -> Color:
        """Return the `Color` value for a pixel in the image

        The pixel at the top-left corner has coordinates (0, 0)."""
        assert self.valid_coordinates(x, y)
        return self.pixels[self.pixel_offset(x, y)]

    def write_pixel(self, x, y, new_color: Color):
        """Set the new color for a pixel in the image

        The pixel at the top-left corner has coordinates (0, 0)."""
        assert self.valid_coordinates(x, y)
        self.pixels[self.pixel_offset(x, y)] = new_color

    def fill(self, color: Color):
        """Set all the pixels of the image to the same color"""
        self.pixels = [color for i in range(self.width * self.height)]
