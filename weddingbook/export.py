# export.py
"""
PNG export of the details card
"""

import logging

from PIL import Image, ImageDraw, ImageFont

from weddingbook.constants import COLORS, EXPORT_WIDTH, EXPORT_PADDING, EXPORT_LINE_SPACING
from weddingbook.details_view import NAME

logger = logging.getLogger(__name__)


def _load_font(size):
    try:
        return ImageFont.truetype("arial.ttf", size)
    except OSError:
        logger.debug("arial.ttf not available, using Pillow's default font")
        return ImageFont.load_default(size)


def export_details_png(fields, path, scale=2.0):
    """Export the visible fields of a FieldStates to a PNG card

    Lines are drawn in panel order; hidden fields are skipped. The name line
    uses a larger font.

    Args:
        fields (FieldStates): Rendered details to draw
        path (str): Output PNG file
        scale (float): Resolution multiplier

    Returns:
        tuple: (width, height) of the written image
    """
    name_font = _load_font(int(18 * scale))
    detail_font = _load_font(int(11 * scale))
    padding = int(EXPORT_PADDING * scale)
    spacing = int(EXPORT_LINE_SPACING * scale)
    width = int(EXPORT_WIDTH * scale)

    # Measure on a scratch image first so the card fits its content
    scratch = ImageDraw.Draw(Image.new('RGB', (1, 1)))
    blocks = []
    height = padding
    for field, text in fields.visible_lines():
        font = name_font if field == NAME else detail_font
        bbox = scratch.multiline_textbbox((0, 0), text, font=font, spacing=spacing)
        blocks.append((field, text, font, height))
        width = max(width, bbox[2] + 2 * padding)
        height += (bbox[3] - bbox[1]) + spacing * (3 if field == NAME else 1)
    height += padding

    image = Image.new('RGB', (width, height), COLORS['background'])
    draw = ImageDraw.Draw(image)
    border = max(1, int(scale))
    draw.rectangle([border, border, width - border - 1, height - border - 1],
                   fill=COLORS['surface'], outline=COLORS['border'], width=border)

    for field, text, font, y in blocks:
        color = COLORS['primary'] if field == NAME else COLORS['text_primary']
        draw.multiline_text((padding, y), text, fill=color, font=font, spacing=spacing)

    image.save(path, 'PNG')
    logger.info(f"Exported details card ({width}x{height}) to {path}")
    return image.size
