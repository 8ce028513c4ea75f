import logging

import barcode

from .encoding import BarcodeEncoding, EncodedSegment


logger = logging.getLogger(__name__)


class PyBarcodeEncoding(BarcodeEncoding):
    """
    Encoder backed by a python-barcode symbology class.
    Subclasses set `symbology` to the python-barcode name.
    """
    symbology = None
    _bits = frozenset("01")

    def __init__(self, value, options=None):
        super().__init__(value, options)
        symbol_class = barcode.get_barcode_class(self.symbology)
        # python-barcode validates the value in its constructor
        self.symbol = symbol_class(value, **self.options)
        self._lines = None

    def _build(self):
        if self._lines is None:
            self._lines = list(self.symbol.build())
        return self._lines

    def valid(self):
        if not self.value:
            return False
        try:
            lines = self._build()
        except Exception as error:
            logger.debug(
                "%s rejected %r: %s", self.symbology, self.value, error
            )
            return False
        return bool(lines) and all(
            line and set(line) <= self._bits for line in lines
        )

    def encode(self):
        text = self.symbol.get_fullcode()
        segments = [EncodedSegment(text, line) for line in self._build()]
        if len(segments) == 1:
            return segments[0]
        return segments


def pybarcode_encoding(symbology):
    """Creates encoder class for python-barcode symbology name"""
    return type(
        "{}Encoding".format(symbology.replace("-", "_").title()),
        (PyBarcodeEncoding,),
        {"symbology": symbology}
    )
