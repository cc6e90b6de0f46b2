import pytest
import voxreader
from voxreader.cursor import ByteCursor


def test_next():
    cursor = ByteCursor(b"\x01\x02")
    assert cursor.has_next()
    assert cursor.next() == 1
    assert cursor.next() == 2
    assert not cursor.has_next()

    with pytest.raises(voxreader.OutOfBoundsError):
        cursor.next()

    # a failed read does not move the cursor
    assert cursor.position == 2


def test_read_uint32():
    cursor = ByteCursor(b"\x01\x02\x03\x04\xff\xff\xff\xff")
    assert cursor.read_uint32() == 1 + 2 * 256 + 3 * 256**2 + 4 * 256**3
    assert cursor.read_uint32() == 0xFFFFFFFF


def test_read_uint32_out_of_bounds():
    cursor = ByteCursor(b"\x01\x02\x03")
    with pytest.raises(voxreader.OutOfBoundsError) as info:
        cursor.read_uint32()
    assert info.value.length == 3


def test_read_ascii():
    cursor = ByteCursor(b"MAIN\xff")
    assert cursor.read_ascii(4) == "MAIN"
    assert cursor.read_ascii(1) == "\xff"


def test_sub_cursor():
    cursor = ByteCursor(bytearray(b"abcdef"))
    cursor.next()
    sub = cursor.sub_cursor(3)

    assert cursor.position == 4
    assert len(sub) == 3
    assert sub.read_bytes(3) == b"bcd"
    with pytest.raises(voxreader.OutOfBoundsError):
        sub.next()

    assert cursor.read_bytes(2) == b"ef"


def test_sub_cursor_out_of_bounds():
    cursor = ByteCursor(b"abc")
    with pytest.raises(voxreader.OutOfBoundsError):
        cursor.sub_cursor(4)


def test_skip():
    cursor = ByteCursor(b"abc")
    cursor.skip(2)
    assert cursor.remaining == 1
    with pytest.raises(voxreader.OutOfBoundsError):
        cursor.skip(2)
