import random
import struct

import pytest

from biasclassifier.bitmaps import (
    HEADER_SIZE,
    HEIGHT,
    WIDTH,
    draw_circle,
    draw_square,
    encode_bmp,
    generate_samples,
    load_pixel_sums,
    pixel_sum,
    sample_path,
)

SIZE = WIDTH * HEIGHT * 3


def _black_pixels(pixels):
    return sum(1 for i in range(0, len(pixels), 3) if pixels[i:i + 3] == b"\x00\x00\x00")


@pytest.mark.parametrize("draw", [draw_circle, draw_square])
def test_shapes_are_black_on_white(draw):
    pixels = draw(random.Random(2))
    assert len(pixels) == SIZE
    assert set(pixels) == {0, 255}


@pytest.mark.parametrize("draw", [draw_circle, draw_square])
def test_shape_area_independent_of_position(draw):
    areas = {_black_pixels(draw(random.Random(seed))) for seed in range(6)}
    assert len(areas) == 1


def test_square_area():
    assert _black_pixels(draw_square(random.Random(4))) == 19 * 19


def test_circle_smaller_than_square():
    assert _black_pixels(draw_circle(random.Random(1))) < _black_pixels(draw_square(random.Random(1)))


def test_encode_header_fields():
    pixels = draw_circle(random.Random(0))
    data = encode_bmp(pixels)
    assert data[:2] == b"BM"
    assert len(data) == HEADER_SIZE + SIZE
    assert struct.unpack_from("<I", data, 2)[0] == len(data)
    assert struct.unpack_from("<I", data, 10)[0] == HEADER_SIZE
    assert struct.unpack_from("<ii", data, 18) == (WIDTH, -HEIGHT)
    assert data[HEADER_SIZE:] == pixels


def test_encode_rejects_wrong_size():
    with pytest.raises(ValueError):
        encode_bmp(b"\xff" * (SIZE - 3))


def test_sample_path_name(tmp_path):
    assert sample_path(tmp_path, 7) == tmp_path / "amostra0007.bmp"


def test_pixel_sum_of_black_image(tmp_path):
    path = tmp_path / "black.bmp"
    path.write_bytes(encode_bmp(bytes(SIZE)))
    assert pixel_sum(path) == 0.0


def test_pixel_sum_reads_bytes_as_signed(tmp_path):
    path = tmp_path / "white.bmp"
    path.write_bytes(encode_bmp(b"\xff" * SIZE))
    assert pixel_sum(path) == -float(SIZE)


def test_pixel_sum_truncated(tmp_path):
    path = tmp_path / "short.bmp"
    path.write_bytes(encode_bmp(bytes(SIZE))[:-10])
    with pytest.raises(ValueError):
        pixel_sum(path)


def test_generate_and_load(tmp_path):
    paths = list(generate_samples(tmp_path, random.Random(8), 6))
    assert paths == [sample_path(tmp_path, i) for i in range(6)]
    sums = load_pixel_sums(tmp_path, 6)
    assert sums == [pixel_sum(p) for p in paths]
    assert max(sums[:3]) < min(sums[3:])


def test_generate_into_missing_directory(tmp_path):
    with pytest.raises(FileNotFoundError):
        list(generate_samples(tmp_path / "missing", random.Random(0), 2))