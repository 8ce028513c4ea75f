from collections import namedtuple


# fraction of viewport used when barcode has to shrink
MARGIN = 0.95
# below this scale the barcode is unlikely to scan
MIN_SCALE = 0.5


FitResult = namedtuple("FitResult", "scale degraded")


def fit(total_width, viewport_width):
    """
    Computes uniform scale making barcode fit into the viewport.
    Barcodes are only ever shrunk, never enlarged.

    :param total_width:     Natural barcode width in pixels
    :param viewport_width:  Available display width in pixels,
                            less than one pixel counts as one
    :return:                FitResult, degraded when scale < MIN_SCALE
    """
    # at least one pixel of room, scale stays positive
    viewport_width = max(viewport_width, 1)
    if viewport_width - total_width >= 0:
        return FitResult(1, False)
    scale = viewport_width * MARGIN / total_width
    return FitResult(scale, scale < MIN_SCALE)
