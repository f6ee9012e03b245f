# renderer/image_output.py
import os
from typing import TextIO
import numpy as np
from PIL import Image


def to_image(pixels: np.ndarray, width: int, height: int) -> Image.Image:
    """
    Wraps a flat RGBA buffer (top row first) in a PIL image.
    """
    return Image.fromarray(np.asarray(pixels, dtype=np.uint8).reshape(height, width, 4))


def write_ppm(pixels: np.ndarray, width: int, height: int, stream: TextIO):
    """
    Writes the buffer as a plain-text P3 PPM; the alpha channel is dropped.
    """
    stream.write(f"P3\n{width} {height}\n255\n")
    rgba = np.asarray(pixels).reshape(height * width, 4)
    for r, g, b, _ in rgba:
        stream.write(f"{r} {g} {b}\n")


IMAGE_FORMATS = (".png", ".ppm")


def image_format(path: str) -> str:
    """
    Returns the lower-cased extension of path, or raises ValueError when it
    is not one save_image can write.
    """
    extension = os.path.splitext(path)[1].lower()
    if extension not in IMAGE_FORMATS:
        raise ValueError(f"Unsupported image format: {extension or path!r}")
    return extension


def save_image(pixels: np.ndarray, width: int, height: int, path: str):
    """
    Saves the buffer as PNG (via Pillow) or PPM, chosen by file extension.
    """
    if image_format(path) == ".png":
        to_image(pixels, width, height).save(path)
    else:
        with open(path, "w") as f:
            write_ppm(pixels, width, height, f)
