from abc import ABC, abstractmethod
from collections import namedtuple


EncodedSegment = namedtuple("EncodedSegment", "text data")


class BarcodeEncoding(ABC):
    """Linear barcode encoder base class

    Encoder is constructed from the value and options, construction
    fails for values which can't be encoded at all.
    """
    def __init__(self, value, options=None):
        self.value = value
        self.options = dict(options or {})

    @abstractmethod
    def valid(self):
        raise NotImplementedError

    @abstractmethod
    def encode(self):
        """Returns EncodedSegment or list of them for multi-segment
        symbologies"""
        raise NotImplementedError

    @classmethod
    def join_segments(cls, encoded):
        """Concatenates data of all segments in order

        :param encoded:     EncodedSegment or sequence of EncodedSegment
        :return:            Single bit string"""
        if isinstance(encoded, EncodedSegment):
            return encoded.data
        return "".join(segment.data for segment in encoded)
