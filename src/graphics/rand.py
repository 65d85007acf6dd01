from __future__ import annotations

"""Uniform random selection backed by :class:`numpy.random.Generator`.

A module-level generator serves callers that do not bring their own; reseed it
with :func:`random_seed` for reproducible sketches.
"""

from typing import Iterable, List, Optional, Sequence, TypeVar

import numpy as np

T = TypeVar("T")

_rng: np.random.Generator = np.random.default_rng()


def random_seed(seed: Optional[int]) -> None:
    """Reseed the module generator (``None`` draws fresh OS entropy)."""
    global _rng
    _rng = np.random.default_rng(seed)


def default_rng() -> np.random.Generator:
    """Return the module generator."""
    return _rng


def random_choice(seq: Sequence[T], rng: Optional[np.random.Generator] = None) -> T:
    """Pick one element of ``seq`` uniformly at random."""
    if len(seq) == 0:
        raise IndexError("cannot choose from an empty sequence")
    gen = _rng if rng is None else rng
    return seq[int(gen.integers(len(seq)))]


def shuffle(seq: Iterable[T], rng: Optional[np.random.Generator] = None) -> List[T]:
    """Return a uniformly shuffled copy of ``seq``; the input is left untouched."""
    items = list(seq)
    gen = _rng if rng is None else rng
    order = gen.permutation(len(items))
    return [items[int(i)] for i in order]


__all__ = ["random_seed", "default_rng", "random_choice", "shuffle"]
