"""
Mapping logic: convert random integers into pool symbols.
"""

from __future__ import annotations

from typing import Iterable

from .charsets import CharacterPool


def values_to_password(values: Iterable[int], pool: CharacterPool) -> str:
    """
    Map each random value onto the pool with `value % pool.size`.

    Modulo reduction is slightly biased when pool.size does not divide
    2**32: the first 2**32 % size symbols are favoured by one extra
    preimage out of roughly 2**32 / size. For the 94-symbol pool that is
    a relative skew below 2**-25, far under anything a statistical test
    on realistic sample sizes could detect, so it is accepted rather than
    removed with rejection sampling.
    """
    size = pool.size
    return "".join(pool[value % size] for value in values)
