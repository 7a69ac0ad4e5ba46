"""Randomized greedy pairing implementation"""

import numba as nb
import numpy as np

from roompair.errors import PoolExhaustedError
from roompair.utils import random_choice

__all__ = ["tier_candidates", "solve_trial"]


@nb.njit('int64[:](boolean[:,:], int64[:], int64, int64)')
def tier_candidates(M, pool, size, a):
  """Positions in `pool[:size]` of the people `a` can share a room with.

  Person `b` qualifies when `M[a, b]` is True. Positions rather than people
  are returned so that the caller can swap-remove the chosen one.
  """
  out = np.empty(size, dtype=np.int64)
  k = 0
  for i in range(size):
    if M[a, pool[i]]:
      out[k] = i
      k += 1
  return out[:k]


def _swap_remove(pool, size, i):
  """Remove `pool[i]` from `pool[:size]` by moving the last one into its place.

  Returns the removed person.
  """
  person = pool[i]
  pool[i] = pool[size - 1]
  return person


def solve_trial(tier_matrices, num_people, rng):
  """One randomized greedy pass over a shuffled pool of people.

  People are popped from the end of a shuffled pool. Each popped person is
  paired with someone chosen uniformly at random from the first tier in
  `tier_matrices` that has a candidate left in the pool; if no tier has one,
  the roommate is chosen uniformly at random from the whole pool (the
  fallback tier).

  Args:
    tier_matrices: list of (n, n) boolean numpy arrays, in priority order.
    num_people: number of people n, labelled 0 .. n-1.
    rng: a `numpy.random.Generator`.

  Returns:
    rooms: list of `(a, b)` index pairs, in the order they were formed.
    counts: int64 array of length `len(tier_matrices) + 1`. `counts[t]` is
      the number of rooms formed in tier t; the last entry counts fallback
      rooms.

  Raises:
    PoolExhaustedError if a roommate is needed but the pool is empty, which
      happens exactly when `num_people` is odd. Its `person` is the index of
      whoever was left over.
  """
  fallback = len(tier_matrices)
  pool = rng.permutation(num_people).astype(np.int64)
  size = num_people
  rooms = []
  counts = np.zeros(fallback + 1, dtype=np.int64)
  while size > 0:
    size -= 1
    a = pool[size]
    if size == 0:
      raise PoolExhaustedError(
          "Nobody left to share a room; the number of people ({0}) is "
          "odd.".format(num_people), person=int(a))
    for tier, M in enumerate(tier_matrices):
      candidates = tier_candidates(M, pool, size, a)
      if candidates.size > 0:
        break
    else:
      tier = fallback
      candidates = np.arange(size)
    b = _swap_remove(pool, size, random_choice(candidates, rng))
    size -= 1
    rooms.append((int(a), int(b)))
    counts[tier] += 1
  return rooms, counts
