"""
Configuration & Path Management
===============================
Central registry for the watch face's constants and asset paths.

Exports:
    TICK_INTERVAL (float): Seconds between readings.
    ASSETS_PATH (str): Directory searched for replacement images.
    IMAGE_NAMES (tuple): Layer names, bottom to top.
"""
import os
import sys
from pathlib import Path


def get_resource_path(relative_path: str) -> str:
    """
    Get absolute path to resource, works for dev and for PyInstaller.
    """
    if hasattr(sys, '_MEIPASS'):
        base_path: str = getattr(sys, '_MEIPASS')
        return os.path.join(base_path, relative_path)

    # config.py is in watchface/, assets sit next to it
    return os.path.join(str(Path(__file__).parent), relative_path)


TICK_INTERVAL: float = 1.0

# Override location only: no images ship with the package. Dropping
# <name>.png files here replaces the drawn defaults.
ASSETS_PATH: str = get_resource_path("assets")

# Layers drawn bottom to top; every image is square and shares the face's size
IMAGE_NAMES = ('body', 'face', 'hour_hand', 'minute_hand', 'second_hand')
# Hand layers in ClockReading field order
HAND_NAMES = ('hour_hand', 'minute_hand', 'second_hand')
DEFAULT_SIZE: int = 512

WINDOW_TITLE: str = "Watch"
DEFAULT_STYLE: str = 'positional'
