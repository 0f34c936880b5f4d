import pytest

from wireframe.image import HEIGHT, WIDTH, Image

IM1_SX = 42
IM1_SY = 42
IM3_SX = 242
IM3_SY = 242
WIN1_SX = 242
WIN1_SY = 242


def _color(x, y, w, h, kind):
    if kind == 2:
        return (y * 255) // w + ((((w - x) * 255) // w) << 16) + (((y * 255) // h) << 8)
    return (x * 255) // w + ((((w - x) * 255) // w) << 16) + (((y * 255) // h) << 8)


def _fill(image, kind):
    for y in range(image.height):
        for x in range(image.width):
            image.put_pixel(x, y, _color(x, y, image.width, image.height, kind))


def test_default_size_is_window_size():
    image = Image()
    assert (image.width, image.height) == (WIDTH, HEIGHT)
    assert len(image.data) == WIDTH * HEIGHT * 4


def test_layout_of_new_image():
    image = Image(IM1_SX, IM1_SY)
    assert image.bits_per_pixel == 32
    assert image.line_length == IM1_SX * 4
    assert image.endian == 0
    assert image.data == bytearray(IM1_SX * IM1_SY * 4)


@pytest.mark.parametrize("size", [(0, 10), (10, 0), (-1, 5)])
def test_bad_size_raises(size):
    with pytest.raises(ValueError):
        Image(*size)


def test_pixel_bytes_are_little_endian():
    image = Image(4, 4)
    image.put_pixel(1, 2, 0xFF0000)
    offset = 2 * image.line_length + 1 * 4
    assert image.data[offset:offset + 4] == b"\x00\x00\xff\x00"


def test_fill_and_read_back_image1():
    image = Image(IM1_SX, IM1_SY)
    _fill(image, 1)
    for x, y in [(0, 0), (41, 0), (0, 41), (20, 33), (41, 41)]:
        assert image.pixel(x, y) == _color(x, y, IM1_SX, IM1_SY, 1)


def test_fill_type_two_image4():
    image = Image(IM3_SX, IM3_SY)
    _fill(image, 2)
    assert image.pixel(100, 200) == _color(100, 200, IM3_SX, IM3_SY, 2)


def test_put_image1_into_window_at_offset():
    window = Image(WIN1_SX, WIN1_SY)
    im1 = Image(IM1_SX, IM1_SY)
    _fill(im1, 1)
    window.paste(im1, 20, 20)
    assert window.pixel(20, 20) == im1.pixel(0, 0)
    assert window.pixel(20 + 41, 20 + 41) == im1.pixel(41, 41)
    assert window.pixel(19, 19) == 0
    assert window.pixel(20 + 42, 20) == 0


def test_put_image3_is_clipped_to_window():
    window = Image(WIN1_SX, WIN1_SY)
    im3 = Image(IM3_SX, IM3_SY)
    _fill(im3, 1)
    window.paste(im3, 20, 20)
    assert window.pixel(WIN1_SX - 1, WIN1_SY - 1) == im3.pixel(221, 221)
    assert len(window.data) == WIN1_SX * WIN1_SY * 4


def test_paste_with_negative_offset():
    target = Image(3, 3)
    source = Image(3, 3)
    source.put_pixel(2, 2, 7)
    target.paste(source, -2, -2)
    assert target.pixel(0, 0) == 7


def test_paste_entirely_outside_changes_nothing():
    target = Image(3, 3)
    source = Image(2, 2)
    source.put_pixel(0, 0, 9)
    target.paste(source, 10, 10)
    assert target.data == bytearray(3 * 3 * 4)


def test_clear_zeroes_everything():
    image = Image(5, 5)
    image.put_pixel(3, 3, 0x123456)
    image.clear()
    assert image.pixel(3, 3) == 0
    assert not any(image.data)


def test_color_is_truncated_to_32_bits():
    image = Image(2, 2)
    image.put_pixel(0, 0, -1)
    assert image.pixel(0, 0) == 0xFFFFFFFF


@pytest.mark.parametrize("point", [(-1, 0), (0, -1), (5, 0), (0, 5)])
def test_out_of_bounds_raises(point):
    image = Image(5, 5)
    with pytest.raises(IndexError):
        image.put_pixel(*point, 1)
    with pytest.raises(IndexError):
        image.pixel(*point)