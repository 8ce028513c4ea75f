from .compiler import (
    Bar, CompiledBarcode, GeometryOptions, compile_bits, rect_path
)
from .encoding import (
    BarcodeEncoding, EncodedSegment, barcodes, get_encoding, register
)
from .errors import (
    BarcodeRenderError, ConstructionError, LegibilityWarning, Result,
    ValidationError
)
from .fit import FitResult, fit
from .render import Barcode, BarcodeOptions, RenderedBarcode
