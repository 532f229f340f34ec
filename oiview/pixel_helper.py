"""Counting distinct texel values in an image buffer."""

from __future__ import annotations


def count_unique_values(
    buffer: bytes,
    width: int,
    height: int,
    row_pitch: int,
    bits_per_texel: int,
) -> int:
    """Number of distinct texel values in a ``width`` by ``height`` image.

    Rows start every ``row_pitch`` bytes; bytes past a row's texels are
    ignored. Returns -1 for a texel width of zero.
    """
    if bits_per_texel % 8 != 0:
        raise ValueError(
            "unsupported bit width, currently only 8 bit and higher image are supported"
        )
    if bits_per_texel == 0:
        return -1
    texel_bytes = bits_per_texel // 8
    data = memoryview(bytes(buffer))
    row_bytes = width * texel_bytes
    if height > 0 and width > 0:
        needed = row_pitch * (height - 1) + row_bytes
        if len(data) < needed:
            raise ValueError(f"buffer holds {len(data)} bytes but {needed} are needed")
    values = {
        bytes(data[start:start + texel_bytes])
        for row in range(height)
        for start in range(row * row_pitch, row * row_pitch + row_bytes, texel_bytes)
    }
    return len(values)