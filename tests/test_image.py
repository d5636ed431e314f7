import pytest

from cub3d.image import Image


def test_new_image_is_blank():
    img = Image(3, 2)
    assert all(img.get_pixel(x, y) == 0 for x in range(3) for y in range(2))
    assert not any(img.data)


def test_put_get_round_trip():
    img = Image(4, 4)
    img.put_pixel(2, 3, 0x00ABCDEF)
    assert img.get_pixel(2, 3) == 0x00ABCDEF
    assert img.get_pixel(3, 2) == 0


def test_bytes_are_little_endian():
    img = Image(2, 2)
    img.put_pixel(1, 1, 0x00112233)
    start = img.offset(1, 1)
    assert bytes(img.data[start:start + 4]) == bytes([0x33, 0x22, 0x11, 0x00])


def test_offsets_follow_row_stride():
    img = Image(5, 3)
    assert img.offset(0, 1) == img.size_line
    assert img.offset(1, 0) == img.bits_per_pixel // 8
    assert img.offset(2, 2) == 2 * img.size_line + 2 * (img.bits_per_pixel // 8)


def test_negative_colour_is_stored_unsigned():
    img = Image(1, 1)
    img.put_pixel(0, 0, -1)
    assert img.get_pixel(0, 0) == 0xFFFFFFFF


def test_buffer_holds_all_rows():
    img = Image(7, 5)
    assert len(img.data) >= img.size_line * img.height


@pytest.mark.parametrize("x, y", [(-1, 0), (0, -1), (4, 0), (0, 4)])
def test_out_of_range_pixel_raises(x, y):
    img = Image(4, 4)
    with pytest.raises(IndexError):
        img.put_pixel(x, y, 1)
    with pytest.raises(IndexError):
        img.get_pixel(x, y)


@pytest.mark.parametrize("width, height", [(0, 3), (3, 0), (-1, 2)])
def test_invalid_size_raises(width, height):
    with pytest.raises(ValueError):
        Image(width, height)