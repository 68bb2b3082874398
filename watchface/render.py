"""Pillow compositor: draws a reading onto the face without a GUI."""
import logging
import math

from PIL import Image

from . import config

logger = logging.getLogger(__name__)


def _rotate_hand(hand_image, angle):
    """Rotate a hand layer about its center.

    Args:
        hand_image: RGBA layer with the hand pointing at 12 o'clock
        angle: Angle in radians (0 = 12 o'clock, clockwise)
    """
    # PIL rotates counter-clockwise, and we want clockwise, so negate
    return hand_image.rotate(-math.degrees(angle), resample=Image.BICUBIC)


def compose(images, reading):
    """Stack body, face and the three rotated hands into one RGBA image.

    Args:
        images: dict of layers as returned by assets.load_images()
        reading: ClockReading whose angles place the hands
    """
    face = images['face'].convert('RGBA')
    result = Image.new('RGBA', face.size, (0, 0, 0, 0))

    body = images.get('body')
    if body is not None:
        result = Image.alpha_composite(result, body.convert('RGBA'))
    result = Image.alpha_composite(result, face)

    hand_angles = (reading.hour_angle, reading.minute_angle, reading.second_angle)
    for name, angle in zip(config.HAND_NAMES, hand_angles):
        layer = _rotate_hand(images[name].convert('RGBA'), angle)
        result = Image.alpha_composite(result, layer)

    return result


def snapshot(path, reading, images):
    """Write the composed face for ``reading`` to ``path`` and return the image."""
    image = compose(images, reading)
    image.save(path)
    logger.info("Wrote %s (%s)", path, reading.description)
    return image
