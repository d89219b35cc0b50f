import math

from PIL import Image, ImageDraw, ImageFont

from asciiconv.engine import WHITE, CellGrid

# Monospace advance width as a fraction of the font size
CHAR_WIDTH_RATIO = 0.6


def _load_font(font_path: str | None, font_size: int):
    if font_path is not None:
        return ImageFont.truetype(font_path, font_size)
    return ImageFont.load_default(size=font_size)


def render_image(
    grid: CellGrid,
    font_size: int = 8,
    font_path: str | None = None,
    background: tuple[int, int, int] = (0, 0, 0),
) -> Image.Image:
    """Draw a cell grid onto an RGB image.

    Cell (row, col) is drawn at (col * char_width, row * line_height) where
    line_height is the font size and char_width is 0.6 of it.
    """
    line_height = font_size
    char_width = font_size * CHAR_WIDTH_RATIO
    width = max(1, math.ceil(grid.cols * char_width))
    height = max(1, grid.rows * line_height)

    image = Image.new("RGB", (width, height), background)
    draw = ImageDraw.Draw(image)
    font = _load_font(font_path, font_size)

    if grid.grayscale:
        for r, line in enumerate(grid.chars):
            draw.text((0, r * line_height), line, fill=WHITE, font=font)
        return image

    for r, line in enumerate(grid.chars):
        for c, char in enumerate(line):
            colour = tuple(int(v) for v in grid.colours[r, c])
            draw.text((c * char_width, r * line_height), char, fill=colour, font=font)
    return image
