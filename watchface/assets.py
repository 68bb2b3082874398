"""Loading and drawing of the watch face image layers."""
import logging
import math
import os

from PIL import Image, ImageDraw

from . import config

logger = logging.getLogger(__name__)


def _canvas(size):
    return Image.new('RGBA', (size, size), (0, 0, 0, 0))


def draw_body(size):
    """Dark bezel filling the whole square."""
    image = _canvas(size)
    draw = ImageDraw.Draw(image)
    draw.ellipse((0, 0, size - 1, size - 1), fill=(40, 42, 48, 255))
    inset = int(size * 0.03)
    draw.ellipse((inset, inset, size - 1 - inset, size - 1 - inset), outline=(150, 150, 160, 255),
                 width=max(1, size // 128))
    return image


def draw_face(size):
    """Light dial with 60 minute ticks and 12 heavier hour marks."""
    image = _canvas(size)
    draw = ImageDraw.Draw(image)
    c = size / 2
    radius = size * 0.44
    draw.ellipse((c - radius, c - radius, c + radius, c + radius), fill=(245, 243, 235, 255))

    for i in range(60):
        # 0 = 12 o'clock, clockwise
        theta = i / 60 * 2 * math.pi
        sin, cos = math.sin(theta), math.cos(theta)
        if i % 5 == 0:
            inner, width = radius * 0.82, max(2, size // 80)
        else:
            inner, width = radius * 0.92, max(1, size // 256)
        outer = radius * 0.97
        draw.line(
            (c + inner * sin, c - inner * cos, c + outer * sin, c - outer * cos),
            fill=(20, 20, 20, 255),
            width=width,
        )
    return image


def draw_hand(size, length, width, color, tail=0.0):
    """Hand pointing at 12 o'clock, pivoting on the image center.

    Args:
        size: Edge of the square image in pixels
        length: Hand length as a fraction of the face radius
        width: Hand width as a fraction of the image size
        color: RGBA fill
        tail: Length behind the pivot as a fraction of the face radius
    """
    image = _canvas(size)
    draw = ImageDraw.Draw(image)
    c = size / 2
    radius = size * 0.44
    half = max(1.0, size * width / 2)
    draw.polygon(
        [
            (c - half, c + radius * tail),
            (c + half, c + radius * tail),
            (c + half * 0.6, c - radius * length),
            (c - half * 0.6, c - radius * length),
        ],
        fill=color,
    )
    pin = max(2.0, half * 1.5)
    draw.ellipse((c - pin, c - pin, c + pin, c + pin), fill=color)
    return image


DEFAULT_HANDS = {
    # (length, width, color, tail)
    'hour_hand': (0.55, 0.035, (25, 25, 30, 255), 0.0),
    'minute_hand': (0.85, 0.025, (25, 25, 30, 255), 0.0),
    'second_hand': (0.9, 0.012, (200, 20, 20, 255), 0.15),
}


def draw_default(name, size=config.DEFAULT_SIZE):
    if name == 'body':
        return draw_body(size)
    if name == 'face':
        return draw_face(size)
    length, width, color, tail = DEFAULT_HANDS[name]
    return draw_hand(size, length, width, color, tail)


def default_images(size=config.DEFAULT_SIZE):
    """Draw every layer with Pillow."""
    return {name: draw_default(name, size) for name in config.IMAGE_NAMES}


def load_images(asset_dir=None, size=config.DEFAULT_SIZE):
    """Load the five layers from ``<asset_dir>/<name>.png``.

    Missing files are replaced by drawn defaults. All layers are converted to
    RGBA and resized to match the face, whose size wins over ``size`` when
    a face image is found.

    Returns:
        dict of {name: PIL.Image.Image} keyed by config.IMAGE_NAMES
    """
    explicit = asset_dir is not None
    if asset_dir is None:
        asset_dir = config.ASSETS_PATH
    if not os.path.isdir(asset_dir):
        if explicit:
            raise FileNotFoundError(f"Asset directory not found: {asset_dir}")
        return default_images(size)

    loaded = {}
    for name in config.IMAGE_NAMES:
        path = os.path.join(asset_dir, name + '.png')
        if os.path.exists(path):
            with Image.open(path) as img:
                loaded[name] = img.convert('RGBA')
            logger.debug("Loaded %s from %s", name, path)

    if 'face' in loaded:
        size = loaded['face'].width

    images = {}
    for name in config.IMAGE_NAMES:
        image = loaded.get(name)
        if image is None:
            logger.warning("No %s.png in %s; using drawn default", name, asset_dir)
            image = draw_default(name, size)
        elif image.size != (size, size):
            image = image.resize((size, size), Image.BICUBIC)
        images[name] = image
    return images
