"""
Cryptographically secure random sources.

A source hands out raw bytes; read_uint32() turns them into the unsigned
32-bit draws the generator maps onto the character pool. No source falls
back to the `random` module: if the operating system cannot provide secure
randomness the caller gets RandomnessUnavailable.
"""

from __future__ import annotations

import logging
import os
from typing import List

from .config import QuantumSourceConfig, DEFAULT_QUANTUM_CONFIG
from .entropy import bits_to_bytes, expand_entropy, xor_bytes
from .errors import RandomnessUnavailable

logger = logging.getLogger(__name__)

UINT32_BYTES = 4


def _os_random_bytes(n: int) -> bytes:
    try:
        return os.urandom(n)
    except (NotImplementedError, OSError) as exc:
        raise RandomnessUnavailable() from exc


class RandomSource:
    """
    Base class for random sources. Subclasses implement read_bytes().
    """

    name = "abstract"

    def read_bytes(self, n: int) -> bytes:
        raise NotImplementedError

    def read_uint32(self, count: int) -> List[int]:
        """
        Return `count` unsigned 32-bit integers, big-endian decoded from
        read_bytes().
        """
        if count <= 0:
            return []
        data = self.read_bytes(count * UINT32_BYTES)
        if len(data) != count * UINT32_BYTES:
            raise RandomnessUnavailable(
                f"Random source {self.name!r} returned {len(data)} bytes, "
                f"expected {count * UINT32_BYTES}."
            )
        return [
            int.from_bytes(data[i : i + UINT32_BYTES], "big")
            for i in range(0, len(data), UINT32_BYTES)
        ]


class SystemRandomSource(RandomSource):
    """
    The operating system CSPRNG (os.urandom).
    """

    name = "system"

    def read_bytes(self, n: int) -> bytes:
        return _os_random_bytes(n)


class QuantumRandomSource(RandomSource):
    """
    Quantum-seeded source.

    Each call samples a simulated qubit register, stretches the measured
    bits with SHA-256 and XORs the result with the same number of OS
    random bytes, so the output is never weaker than os.urandom alone.
    """

    name = "quantum"

    def __init__(self, config: QuantumSourceConfig | None = None) -> None:
        self.config = config or DEFAULT_QUANTUM_CONFIG

    def read_bytes(self, n: int) -> bytes:
        if n <= 0:
            return b""

        # Imported here so qiskit is only loaded when this source is used.
        from qiskit.exceptions import QiskitError

        from .quantum_engine import QuantumEngine

        try:
            bits = QuantumEngine(self.config).sample_streams()
        except QiskitError as exc:
            raise RandomnessUnavailable(
                f"Quantum simulator failed: {exc}"
            ) from exc

        logger.debug("Mixing %d quantum bits into %d output bytes", len(bits), n)
        stretched = expand_entropy(bits_to_bytes(bits), n)
        return xor_bytes(stretched, _os_random_bytes(n))


SOURCES = {
    SystemRandomSource.name: SystemRandomSource,
    QuantumRandomSource.name: QuantumRandomSource,
}


def get_source(name: str = "system") -> RandomSource:
    try:
        source_cls = SOURCES[name]
    except KeyError:
        raise ValueError(
            f"Unknown random source {name!r}; choose from {sorted(SOURCES)}."
        ) from None
    return source_cls()
