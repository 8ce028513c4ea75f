import argparse
import math
import logging
import sys

from .encoding import barcodes
from .image.svg import SvgBarcodeImage
from .render import Barcode


logger = logging.getLogger(__name__)


def positive_number(text):
    number = float(text)
    if not math.isfinite(number) or number <= 0:
        raise argparse.ArgumentTypeError(
            "{!r} is not a positive number".format(text)
        )
    return int(number) if number.is_integer() else number


parser = argparse.ArgumentParser(
    prog="barpath",
    description="Render linear barcode as svg image",
)
parser.add_argument(
    "--format",
    type=str.upper,
    default="CODE128",
    choices=sorted(barcodes),
    help="Barcode symbology."
)
parser.add_argument(
    "--width",
    type=positive_number,
    default=2,
    help="Width of the thinnest bar in pixels."
)
parser.add_argument(
    "--height",
    type=positive_number,
    default=100,
    help="Bar height in pixels. Does not include the label."
)
parser.add_argument(
    "--text",
    type=str,
    default=None,
    help="Text label appearing under the barcode."
)
parser.add_argument(
    "--line-color",
    type=str,
    default="#000000",
    help="Color of bars."
)
parser.add_argument(
    "--text-color",
    type=str,
    default="#000000",
    help="Color of label text."
)
parser.add_argument(
    "--background",
    type=str,
    default="#ffffff",
    help="Background color."
)
parser.add_argument(
    "--viewport-width",
    type=positive_number,
    default=None,
    help="Available display width. Wider barcodes are shrunk to fit."
)
parser.add_argument(
    "-v", "--verbose",
    action="store_true",
    help="Log debugging information."
)
parser.add_argument(
    "content",
    type=str,
    help="Content of barcode."
)
parser.add_argument(
    "out",
    type=str,
    help="Output path, - for standard output."
)


def main(cmd_args=None):
    args = parser.parse_args(cmd_args)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s"
    )

    def report(error):
        logger.debug("Render failed", exc_info=error)
        parser.exit(1, "{}: error: {}\n".format(parser.prog, error))

    barcode = Barcode(
        args.content,
        format=args.format,
        text=args.text,
        width=args.width,
        height=args.height,
        line_color=args.line_color,
        text_color=args.text_color,
        background=args.background,
        on_error=report
    )
    rendered = barcode.render(args.viewport_width)
    image = SvgBarcodeImage(rendered)
    if args.out == "-":
        image.write(sys.stdout)
        return
    with open(args.out, image.file_open_mode) as image_file:
        image.write(image_file)
    logger.debug("Written %s", args.out)
