from collections import namedtuple


class BarcodeRenderError(Exception):
    """Base class of errors reported by a render cycle"""
    code = "error"

    def __init__(self, message, cause=None):
        super().__init__(message)
        self.cause = cause


class ConstructionError(BarcodeRenderError):
    """Encoder can't be created for the format and value"""
    code = "invalid_format"


class ValidationError(BarcodeRenderError):
    """Encoder rejected the value"""
    code = "invalid_value"


class LegibilityWarning(BarcodeRenderError):
    """Barcode would have to shrink below legible size"""
    code = "value_too_long"

    def __init__(self, message, scale=None):
        super().__init__(message)
        self.scale = scale


class Result(namedtuple("Result", "value error")):
    __slots__ = ()

    @classmethod
    def success(cls, value):
        return cls(value, None)

    @classmethod
    def failure(cls, error):
        return cls(None, error)

    @property
    def ok(self):
        return self.error is None

    def unwrap(self):
        if self.error is not None:
            raise self.error
        return self.value
