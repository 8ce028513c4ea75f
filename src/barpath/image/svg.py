from xml.sax.saxutils import escape, quoteattr


class SvgBarcodeImage:
    """Class for saving rendered barcode as .svg file

    All bars are drawn as a single path, label is centered under
    the bars and as wide as the barcode.
    """
    file_open_mode = "w"
    PADDING = 10
    FONT_SIZE = 14
    LABEL_HEIGHT = 20

    SVG_OPEN = '<svg xmlns="http://www.w3.org/2000/svg"\n'\
        '    version="1.1" xmlns:xlink="http://www.w3.org/1999/xlink"\n'\
        '    width="{width}" height="{height}">\n'
    SVG_CLOSE = "</svg>\n"
    RECTANGLE = '    <rect x="{x}" y="{y}" width="{width}"'\
                ' height="{height}" fill={fill} />\n'
    GROUP_OPEN = '    <g transform="scale({scale}) translate({x},{y})">\n'
    GROUP_CLOSE = '    </g>\n'
    PATH = '        <path d="{d}" fill={fill} />\n'
    TEXT = '        <text x="{x}" y="{y}" textLength="{width}"'\
           ' font-size="{font_size}" font-family="monospace"'\
           ' text-anchor="middle" fill={fill}>{text}</text>\n'

    def __init__(self, rendered):
        self.rendered = rendered

    @property
    def label_height(self):
        return 0 if self.rendered.text is None else self.LABEL_HEIGHT

    @property
    def image_width(self):
        """Total image width in pixels, after scaling"""
        width = self.rendered.total_width + 2 * self.PADDING
        return width * self.rendered.scale

    @property
    def image_height(self):
        """Total image height in pixels, after scaling"""
        height = self.rendered.height + self.label_height + 2 * self.PADDING
        return height * self.rendered.scale

    def _write_header(self, image_file):
        image_file.write(
            self.SVG_OPEN.format(
                width=self.image_width,
                height=self.image_height
            )
        )
        image_file.write(
            self.RECTANGLE.format(
                x=0,
                y=0,
                width=self.image_width,
                height=self.image_height,
                fill=quoteattr(self.rendered.background)
            )
        )
        image_file.write(
            self.GROUP_OPEN.format(
                scale=self.rendered.scale,
                x=self.PADDING,
                y=self.PADDING
            )
        )

    def _write_bars(self, image_file):
        if not self.rendered.rects:
            return
        image_file.write(
            self.PATH.format(
                d=self.rendered.path,
                fill=quoteattr(self.rendered.line_color)
            )
        )

    def _write_text_area(self, image_file):
        # baseline sits a few pixels above the bottom of label area
        image_file.write(
            self.TEXT.format(
                x=self.rendered.total_width / 2,
                y=self.rendered.height + self.label_height - 4,
                width=self.rendered.total_width,
                font_size=self.FONT_SIZE,
                fill=quoteattr(self.rendered.text_color),
                text=escape(self.rendered.text)
            )
        )

    def _write_finish(self, image_file):
        image_file.write(self.GROUP_CLOSE)
        image_file.write(self.SVG_CLOSE)

    def write(self, image_file):
        self._write_header(image_file)
        self._write_bars(image_file)
        if self.rendered.text is not None:
            self._write_text_area(image_file)
        self._write_finish(image_file)
