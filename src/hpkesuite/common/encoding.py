"""Fixed-width big-endian integer encoding (I2OSP / OS2IP, RFC 8017 §4)."""

from __future__ import annotations

from typing import Union

BytesLike = Union[bytes, bytearray, memoryview]


class I2OSPError(ValueError):
    """Invalid encoding parameters: zero width, negative value, or too narrow."""


def _require_int(name: str, value: object) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"{name} must be an int, got {type(value).__name__}")
    return value


def required_bytes(value: int) -> int:
    """Minimum number of bytes holding ``value``; zero still occupies one byte."""
    value = _require_int("value", value)
    if value < 0:
        raise I2OSPError("value must be >= 0")
    return max(1, (value.bit_length() + 7) // 8)


def check_i2osp_params(value: int, output_byte_count: int) -> int:
    """Validate I2OSP inputs in contract order and return the required width."""
    output_byte_count = _require_int("output_byte_count", output_byte_count)
    value = _require_int("value", value)
    if output_byte_count <= 0:
        raise I2OSPError("output_byte_count must be > 0")
    if value < 0:
        raise I2OSPError("value must be >= 0")
    needed = required_bytes(value)
    if output_byte_count < needed:
        raise I2OSPError(
            f"value needs {needed} bytes, output_byte_count is {output_byte_count}"
        )
    return needed


def i2osp_portable(value: int, output_byte_count: int) -> bytes:
    needed = check_i2osp_params(value, output_byte_count)
    out = bytearray(output_byte_count)
    for i in range(output_byte_count - needed, output_byte_count):
        out[i] = (value >> (8 * (output_byte_count - 1 - i))) & 0xFF
    return bytes(out)


def i2osp_native(value: int, output_byte_count: int) -> bytes:
    check_i2osp_params(value, output_byte_count)
    return value.to_bytes(output_byte_count, byteorder="big", signed=False)


def os2ip(data: BytesLike) -> int:
    bv = bytes(data)
    if not bv:
        raise ValueError("os2ip expects at least one byte")
    return int.from_bytes(bv, byteorder="big", signed=False)
