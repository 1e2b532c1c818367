from unittest.mock import patch

import pytest

from mosaic.units import (
    ByteUnit,
    convert,
    from_bytes,
    from_bytes_ceil,
    platform_name,
    remainder,
    to_bytes,
)


def test_unit_constants_match_definitions():
    assert to_bytes(1, ByteUnit.KB) == 1000
    assert to_bytes(1, ByteUnit.MB) == 1000000
    assert to_bytes(1, ByteUnit.GB) == 1000000000
    assert to_bytes(1, ByteUnit.KIB) == 1024
    assert to_bytes(1, ByteUnit.MIB) == 1048576
    assert to_bytes(1, ByteUnit.GIB) == 1073741824


@pytest.mark.parametrize("unit", list(ByteUnit))
def test_to_bytes_and_back(unit):
    for amount in (0, 1, 7, 123):
        assert from_bytes(to_bytes(amount, unit), unit) == amount


@pytest.mark.parametrize("unit", list(ByteUnit))
def test_division_identity(unit):
    for nbytes in (0, 1, 999, 1024, 5_000_001, 3_221_225_473):
        assert from_bytes(nbytes, unit) * unit.nbytes + remainder(nbytes, unit) == nbytes
        assert 0 <= remainder(nbytes, unit) < unit.nbytes


@pytest.mark.parametrize("unit", list(ByteUnit))
def test_ceil_rounds_up_only_with_remainder(unit):
    exact = to_bytes(3, unit)
    assert from_bytes_ceil(exact, unit) == 3
    assert from_bytes_ceil(exact + 1, unit) == 4
    assert from_bytes_ceil(0, unit) == 0


def test_convert_within_decimal_family():
    assert convert(1, ByteUnit.GB, ByteUnit.MB) == ByteUnit.KB.nbytes
    assert convert(ByteUnit.KB.nbytes, ByteUnit.KB, ByteUnit.MB) == 1


def test_convert_within_binary_family():
    assert convert(1, ByteUnit.GIB, ByteUnit.KIB) == ByteUnit.MIB.nbytes
    assert convert(ByteUnit.KIB.nbytes, ByteUnit.MIB, ByteUnit.GIB) == 1


def test_convert_rounds_down():
    assert convert(999, ByteUnit.KB, ByteUnit.MB) == 0


@pytest.mark.parametrize("unit", list(ByteUnit))
def test_convert_to_same_unit_is_identity(unit):
    assert convert(42, unit, unit) == 42


def test_negative_amounts_rejected():
    with pytest.raises(ValueError):
        to_bytes(-1, ByteUnit.KB)
    with pytest.raises(ValueError):
        from_bytes(-1, ByteUnit.KB)
    with pytest.raises(ValueError):
        convert(-5, ByteUnit.MB, ByteUnit.KB)


@pytest.mark.parametrize(
    "plat, expected",
    [("win32", "Windows"), ("darwin", "macOS"), ("linux", "Linux"), ("emscripten", "WASM")],
)
def test_platform_name(plat, expected):
    with patch("sys.platform", plat):
        assert platform_name() == expected


def test_unknown_platform_raises():
    with patch("sys.platform", "plan9"):
        with pytest.raises(RuntimeError):
            platform_name()