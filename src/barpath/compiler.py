#!/usr/bin/env python3
# Copyright Petr Machek
#
# Library for rendering linear barcodes as scalable vector paths
#
import logging
from collections import namedtuple


logger = logging.getLogger(__name__)


GeometryOptions = namedtuple("GeometryOptions", "bar_width bar_height")

Bar = namedtuple("Bar", "x y width height")


def _number(value):
    """Formats number for path data, integral floats without fraction"""
    if isinstance(value, float) and value.is_integer():
        value = int(value)
    return repr(value)


def rect_path(x, y, width, height):
    """
    Returns path command drawing one filled rectangle

    :param x:               Left edge
    :param y:               Top edge
    :param width:           Rectangle width
    :param height:          Rectangle height
    :return:                Path data string
    """
    return "M{x},{y}h{w}v{h}h-{w}z".format(
        x=_number(x),
        y=_number(y),
        w=_number(width),
        h=_number(height)
    )


class CompiledBarcode(namedtuple("CompiledBarcode", "bars total_width")):
    """Geometry of a linear barcode, bars ordered left to right"""
    __slots__ = ()

    @property
    def rects(self):
        return tuple(rect_path(*bar) for bar in self.bars)

    @property
    def path(self):
        return "".join(self.rects)


def compile_bits(bits, options):
    """
    Converts encoded barcode into rectangles, one for every run of
    consecutive 1 columns. Any character other than "1" is background.

    :param bits:            String of "0" and "1", one per column
    :param options:         GeometryOptions with bar width and height
    :return:                CompiledBarcode
    """
    bar_width = options.bar_width
    bar_height = options.bar_height
    bars = []
    run = 0
    for column, bit in enumerate(bits):
        if bit == "1":
            run += 1
        elif run:
            bars.append(Bar(
                (column - run) * bar_width, 0, run * bar_width, bar_height
            ))
            run = 0
    if run:
        # barcodes usually end with a bar, there is no 0 to close it
        bars.append(Bar(
            (len(bits) - run) * bar_width, 0, run * bar_width, bar_height
        ))
    logger.debug("Compiled %d columns into %d bars", len(bits), len(bars))
    return CompiledBarcode(tuple(bars), len(bits) * bar_width)
