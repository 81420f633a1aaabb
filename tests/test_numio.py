import pytest

from vaultkit.numio import (
    big_endian_bytes,
    big_endian_value,
    format_bytes,
    hex_string,
    little_endian_bytes,
    little_endian_value,
    scan_hex,
)


def test_scan_hex_round_trip_with_format():
    assert format_bytes(scan_hex("00ff10ab", 4)) == "00FF10AB"


def test_scan_hex_reads_only_requested_length():
    assert scan_hex("0a0b0c", 2) == bytes([0x0A, 0x0B])


def test_scan_hex_invalid_character():
    with pytest.raises(ValueError):
        scan_hex("zz", 1)


def test_scan_hex_too_short():
    with pytest.raises(ValueError):
        scan_hex("ab", 2)


@pytest.mark.parametrize("data", [b"\x00", b"\x01\x02\xfe\xff", bytes(range(40))])
def test_format_bytes_matches_hex(data):
    assert format_bytes(data) == data.hex().upper()


def test_format_bytes_words_with_remainder():
    assert format_bytes(b"\x01\x02\x03\x04\x05", "-", 2) == "0102-0304-05"


def test_format_bytes_no_trailing_delimiter():
    data = bytes(range(8))
    text = format_bytes(data, " ", 4)
    assert not text.endswith(" ")
    assert text.split(" ") == [data[:4].hex().upper(), data[4:].hex().upper()]


def test_format_bytes_empty():
    assert format_bytes(b"") == ""


def test_hex_string_prints_with_title(capsys):
    line = hex_string(b"\x0a\x0b", "Key")
    assert line == "Key: 0A0B"
    assert capsys.readouterr().out == "Key: 0A0B\n"


def test_hex_string_without_title(capsys):
    hex_string(b"\xff", None)
    assert capsys.readouterr().out == "FF\n"


@pytest.mark.parametrize("value", [0, 1, 0x01020304, 0xFFFFFFFF])
def test_little_endian_round_trip(value):
    assert little_endian_value(little_endian_bytes(value)) == value


@pytest.mark.parametrize("value", [0, 1, 0x01020304, 0xFFFFFFFF])
def test_big_endian_round_trip(value):
    assert big_endian_value(big_endian_bytes(value)) == value


def test_endian_orders_are_reversed():
    assert little_endian_bytes(0xA1B2C3D4) == big_endian_bytes(0xA1B2C3D4)[::-1]


def test_value_reads_at_most_four_bytes():
    data = bytes([1, 2, 3, 4, 5, 6])
    assert big_endian_value(data) == big_endian_value(data[:4])
    assert little_endian_value(data) == little_endian_value(data[:4])


def test_truncated_output_keeps_low_bytes():
    assert big_endian_bytes(0x01020304, 2) == b"\x03\x04"
    assert little_endian_bytes(0x01020304, 2) == b"\x04\x03"
    assert little_endian_bytes(0x01020304, 0) == b""