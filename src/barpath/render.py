#!/usr/bin/env python3
# Copyright Petr Machek
#
# Library for rendering linear barcodes as scalable vector paths
#
import logging
from collections import namedtuple

from .compiler import GeometryOptions, compile_bits
from .encoding import BarcodeEncoding, get_encoding
from .errors import (
    ConstructionError, LegibilityWarning, Result, ValidationError
)
from .fit import FitResult, fit


logger = logging.getLogger(__name__)


_BarcodeOptions = namedtuple(
    "BarcodeOptions",
    "value format text width height line_color text_color background "
    "on_error encoder_options"
)


class BarcodeOptions(_BarcodeOptions):
    """Configuration of a rendered barcode

    `width` is the width of the thinnest bar, `height` the bar height.
    Without `text` no label is rendered. Without `on_error` failures
    are raised instead of reported. `encoder_options` are passed to the
    encoder, e.g. `{"add_checksum": False}` for CODE39.
    """
    __slots__ = ()

    def __new__(cls, value=None, format="CODE128", text=None, width=2,
                height=100, line_color="#000000", text_color="#000000",
                background="#ffffff", on_error=None,
                encoder_options=None):
        return super().__new__(
            cls, value, format, text, width, height, line_color,
            text_color, background, on_error,
            dict(encoder_options or {})
        )

    @property
    def geometry_key(self):
        return (
            self.value, self.format, self.width, self.height,
            tuple(sorted(dict(self.encoder_options or {}).items()))
        )


class RenderedBarcode(namedtuple(
        "RenderedBarcode",
        "geometry scale height text line_color text_color background")):
    """Everything a renderer needs to draw one barcode"""
    __slots__ = ()

    @property
    def rects(self):
        return self.geometry.rects

    @property
    def path(self):
        return self.geometry.path

    @property
    def total_width(self):
        return self.geometry.total_width


class Barcode:
    """
    Renders a barcode value: encodes it, compiles bits into bar
    geometry and fits the geometry into the available width.

    Geometry is kept only for the options it was computed from.
    """

    def __init__(self, value=None, **options):
        self.options = BarcodeOptions(value, **options)
        self._geometry_key = None
        self._geometry = None

    def update(self, **changes):
        """Replaces some of the options, geometry is recomputed lazily"""
        self.options = self.options._replace(**changes)
        return self

    @classmethod
    def encode(cls, value, format, options=None):
        """
        Encodes value with encoder registered for the format

        :param value:       Value of the barcode
        :param format:      Format name
        :param options:     Options passed to encoder
        :return:            Result of the bit string
        """
        encoding = get_encoding(format)
        if encoding is None:
            return Result.failure(ConstructionError(
                "Invalid barcode format."
            ))
        value = "" if value is None else str(value)
        try:
            encoder = encoding(value, options)
        except Exception as error:
            logger.debug("Can't construct %s encoder: %s", format, error)
            return Result.failure(ConstructionError(
                "Invalid barcode format.", error
            ))
        try:
            if not encoder.valid():
                return Result.failure(ValidationError(
                    "Invalid barcode for selected format."
                ))
            bits = BarcodeEncoding.join_segments(encoder.encode())
        except Exception as error:
            logger.debug("%s encoder failed: %s", format, error)
            return Result.failure(ValidationError(
                "Invalid barcode for selected format.", error
            ))
        return Result.success(bits)

    def geometry(self):
        """Returns Result of CompiledBarcode for current options"""
        key = self.options.geometry_key
        if key == self._geometry_key:
            logger.debug("Reusing geometry for %r", key)
            return Result.success(self._geometry)
        self._geometry_key = None
        self._geometry = None
        value, format, width, height, encoder_options = key
        encoded = self.encode(value, format, dict(encoder_options))
        if not encoded.ok:
            return encoded
        compiled = compile_bits(encoded.value, GeometryOptions(width, height))
        self._geometry_key = key
        self._geometry = compiled
        return Result.success(compiled)

    def render_result(self, viewport_width=None):
        """
        Runs one render cycle without raising barcode errors

        :param viewport_width:  Available width, a number, callable
                                returning it, or None for no limit
        :return:                Result of RenderedBarcode
        """
        geometry = self.geometry()
        if not geometry.ok:
            return geometry
        compiled = geometry.value
        if callable(viewport_width):
            viewport_width = viewport_width()
        if viewport_width is None:
            fitted = FitResult(1, False)
        else:
            fitted = fit(compiled.total_width, viewport_width)
        if fitted.degraded:
            logger.warning(
                "Barcode %r needs scale %.3f to fit width %s",
                self.options.value, fitted.scale, viewport_width
            )
            return Result.failure(LegibilityWarning(
                "Value too long to render legibly.", fitted.scale
            ))
        options = self.options
        return Result.success(RenderedBarcode(
            geometry=compiled,
            scale=fitted.scale,
            height=options.height,
            text=options.text,
            line_color=options.line_color,
            text_color=options.text_color,
            background=options.background
        ))

    def render(self, viewport_width=None):
        """
        Runs one render cycle. Errors go to `on_error` when set,
        otherwise they are raised.

        :return:                RenderedBarcode or None after reported error
        """
        result = self.render_result(viewport_width)
        if result.ok:
            return result.value
        if self.options.on_error is None:
            raise result.error
        self.options.on_error(result.error)
        return None
