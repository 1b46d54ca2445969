"""Black-on-white circle and square bitmaps and their pixel sums."""

from __future__ import annotations

import random
import struct
from array import array
from os import PathLike
from pathlib import Path
from typing import Iterator, Union

PathArg = Union[str, PathLike]

WIDTH = 60
HEIGHT = 60
BYTES_PER_PIXEL = 3
HEADER_SIZE = 54
INFO_HEADER_SIZE = 40
SAMPLE_COUNT = 120
CIRCLE_RADIUS = 10
SQUARE_SIDE = 20

_FILE_HEADER = struct.Struct("<2sIHHI")
_INFO_HEADER = struct.Struct("<IiiHHIIiiII")
_BLACK = b"\x00\x00\x00"


def _blank(width: int, height: int) -> bytearray:
    return bytearray(b"\xff" * (width * height * BYTES_PER_PIXEL))


def _paint(pixels: bytearray, width: int, x: int, y: int) -> None:
    index = (y * width + x) * BYTES_PER_PIXEL
    pixels[index:index + BYTES_PER_PIXEL] = _BLACK


def draw_circle(rng: random.Random, width: int = WIDTH, height: int = HEIGHT) -> bytes:
    """White BGR image with a black disc of radius 10 centred at a random point."""
    cx = 20 + rng.randrange(20)
    cy = 20 + rng.randrange(20)
    pixels = _blank(width, height)
    limit = CIRCLE_RADIUS * CIRCLE_RADIUS
    for y in range(height):
        for x in range(width):
            if (x - cx) ** 2 + (y - cy) ** 2 <= limit:
                _paint(pixels, width, x, y)
    return bytes(pixels)


def draw_square(rng: random.Random, width: int = WIDTH, height: int = HEIGHT) -> bytes:
    """White BGR image with a black square strictly inside a random 20-pixel box."""
    cx = 10 + rng.randrange(20)
    cy = 10 + rng.randrange(20)
    pixels = _blank(width, height)
    for y in range(height):
        for x in range(width):
            if cx < x < cx + SQUARE_SIDE and cy < y < cy + SQUARE_SIDE:
                _paint(pixels, width, x, y)
    return bytes(pixels)


def encode_bmp(pixels: bytes, width: int = WIDTH, height: int = HEIGHT) -> bytes:
    """A 24-bit top-down BMP file holding the given unpadded BGR rows."""
    expected = width * height * BYTES_PER_PIXEL
    if len(pixels) != expected:
        raise ValueError(f"expected {expected} pixel bytes, got {len(pixels)}")
    file_header = _FILE_HEADER.pack(b"BM", HEADER_SIZE + expected, 0, 0, HEADER_SIZE)
    info_header = _INFO_HEADER.pack(INFO_HEADER_SIZE, width, -height, 1, 24, 0, 0, 0, 0, 0, 0)
    return file_header + info_header + bytes(pixels)


def sample_path(directory: PathArg, index: int) -> Path:
    """Path of the numbered sample image inside directory."""
    return Path(directory) / f"amostra{index:04d}.bmp"


def generate_samples(
    directory: PathArg, rng: random.Random, count: int = SAMPLE_COUNT
) -> Iterator[Path]:
    """Write count images, circles first and squares after; yield each path once written."""
    for index in range(count):
        pixels = draw_circle(rng) if index < count // 2 else draw_square(rng)
        path = sample_path(directory, index)
        path.write_bytes(encode_bmp(pixels))
        yield path


def pixel_sum(path: PathArg) -> float:
    """Sum of the image's pixel bytes, each read as a signed byte."""
    size = WIDTH * HEIGHT * BYTES_PER_PIXEL
    with open(path, "rb") as handle:
        handle.seek(HEADER_SIZE)
        data = handle.read(size)
    if len(data) < size:
        raise ValueError(f"{path}: expected {size} pixel bytes, found {len(data)}")
    return float(sum(array("b", data)))


def load_pixel_sums(directory: PathArg, count: int = SAMPLE_COUNT) -> list[float]:
    """Pixel sums of the first count sample images in directory."""
    return [pixel_sum(sample_path(directory, index)) for index in range(count)]