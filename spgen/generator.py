"""
Secure generator: draws one 32-bit value per output position from a
random source and maps it onto the character pool.
"""

from __future__ import annotations

import logging

from .charsets import CharacterPool
from .config import MAX_LENGTH
from .errors import EmptyPoolAfterFiltering, InvalidLength
from .mapping import values_to_password
from .sources import RandomSource, SystemRandomSource

logger = logging.getLogger(__name__)


def generate_password(
    pool: CharacterPool,
    length: int,
    source: RandomSource | None = None,
) -> str:
    """
    Return a fresh password of `length` symbols drawn uniformly (up to the
    documented modulo bias) from `pool`.

    Raises EmptyPoolAfterFiltering for an empty pool and
    RandomnessUnavailable when the source cannot deliver secure bytes.
    """
    if pool.size == 0:
        raise EmptyPoolAfterFiltering()
    if length < 0:
        raise InvalidLength(length, 0, MAX_LENGTH)

    src = source or SystemRandomSource()
    values = src.read_uint32(length)
    password = values_to_password(values, pool)

    logger.debug(
        "Generated %d-character password from a %d-symbol pool (%s source)",
        len(password),
        pool.size,
        src.name,
    )
    return password
