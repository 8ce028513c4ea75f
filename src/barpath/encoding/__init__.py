from .encoding import BarcodeEncoding, EncodedSegment
from .pybarcode import PyBarcodeEncoding, pybarcode_encoding


# format name -> encoder class
barcodes = {}


def register(name, encoding=None):
    """
    Registers encoder class under format name. Usable as decorator.

    :param name:            Format name, case insensitive
    :param encoding:        BarcodeEncoding subclass
    """
    def decorator(encoding):
        barcodes[name.upper()] = encoding
        return encoding
    if encoding is None:
        return decorator
    return decorator(encoding)


def get_encoding(name):
    """Returns encoder class for format name or None"""
    if name is None:
        return None
    return barcodes.get(name.upper())


for _name, _symbology in (
        ("CODE128", "code128"),
        ("CODE39", "code39"),
        ("EAN13", "ean13"),
        ("EAN8", "ean8"),
        ("EAN14", "ean14"),
        ("UPC", "upc"),
        ("ITF", "itf"),
        ("CODABAR", "codabar"),
        ("ISBN13", "isbn13"),
        ("ISBN10", "isbn10"),
        ("ISSN", "issn"),
        ("PZN", "pzn"),
        ("GS1_128", "gs1_128")):
    register(_name, pybarcode_encoding(_symbology))
