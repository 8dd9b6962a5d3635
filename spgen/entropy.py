"""
Entropy mixing helpers for the quantum random source:
pack measured bits into bytes, XOR independent streams together and
stretch a seed to any length with SHA-256.
"""

from __future__ import annotations

import hashlib
from typing import List


def bits_to_bytes(bits: List[int]) -> bytes:
    """
    Pack a list of bits [0,1,1,0,...] into bytes (8 bits per byte).
    If bits length is not a multiple of 8, pad with zeros at the end.
    """
    if not bits:
        return b""

    # Pad to multiple of 8
    pad_len = (8 - (len(bits) % 8)) % 8
    bits_padded = bits + [0] * pad_len

    byte_values = []
    for i in range(0, len(bits_padded), 8):
        byte = 0
        for bit in bits_padded[i : i + 8]:
            byte = (byte << 1) | bit
        byte_values.append(byte)

    return bytes(byte_values)


def xor_bits(a: List[int], b: List[int]) -> List[int]:
    if len(a) != len(b):
        raise ValueError(
            f"Cannot XOR bit streams of different lengths ({len(a)} != {len(b)})."
        )
    return [x ^ y for x, y in zip(a, b)]


def xor_bytes(a: bytes, b: bytes) -> bytes:
    if len(a) != len(b):
        raise ValueError(
            f"Cannot XOR byte strings of different lengths ({len(a)} != {len(b)})."
        )
    return bytes(x ^ y for x, y in zip(a, b))


def expand_entropy(seed: bytes, n_bytes: int) -> bytes:
    """
    Stretch `seed` to `n_bytes` with SHA-256 in counter mode.

    Block i is SHA-256(seed || i as 8 big-endian bytes); blocks are
    concatenated and truncated. The output carries no more entropy than
    the seed, it only spreads it evenly.
    """
    if n_bytes <= 0:
        return b""

    out = bytearray()
    counter = 0
    while len(out) < n_bytes:
        out += hashlib.sha256(seed + counter.to_bytes(8, "big")).digest()
        counter += 1
    return bytes(out[:n_bytes])
