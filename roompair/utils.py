"""Selection and checking util functions."""

import numpy as np

from roompair.errors import EmptyInputError


_DIRECTIONS = {"min": min, "max": max}


def random_choice(seq, rng):
  """Choose one element of `seq` uniformly at random.

  Args:
    seq: a non-empty sequence (list, tuple or 1-d numpy array).
    rng: a `numpy.random.Generator`.

  Raises:
    EmptyInputError if `seq` is empty.
  """
  if len(seq) == 0:
    raise EmptyInputError("Cannot choose a random item from an empty list.")
  return seq[rng.integers(len(seq))]


def filter_by_criteria(items, criteria):
  """Reduce `items` by an ordered list of criteria.

  Each criterion keeps only the items that reach the smallest (or largest)
  key among the items that survived the previous criteria, so the result is
  the set of lexicographically optimal items, with ties kept.

  Usage: `filter_by_criteria(sols, [(lambda s: s.cost, "min")])`
  Args:
    items: a non-empty sequence.
    criteria: list of `(key, direction)`, where `key` maps an item to a
      comparable value and `direction` is "min" or "max".

  Returns:
    1. list of surviving items, in their original order.
    2. list of the threshold reached at each criterion.

  Raises:
    EmptyInputError if `items` is empty.
    ValueError if a direction is neither "min" nor "max".
  """
  survivors = list(items)
  if not survivors:
    raise EmptyInputError("Cannot rank an empty collection.")
  thresholds = []
  for key, direction in criteria:
    if direction not in _DIRECTIONS:
      raise ValueError("Unknown direction {0!r}.".format(direction))
    best = _DIRECTIONS[direction](key(x) for x in survivors)
    survivors = [x for x in survivors if key(x) == best]
    thresholds.append(best)
  return survivors, thresholds


def check_pairing(rooms, people):
  """Check if `rooms` puts each of `people` in exactly one room.

  Args:
    rooms: list of pairs.
    people: collection of everybody who should be housed.

  Returns:
    True if every person appears exactly once and nobody else appears.
  """
  housed = [p for room in rooms for p in room]
  return (all(len(room) == 2 for room in rooms) and
          len(housed) == len(set(housed)) and
          set(housed) == set(people))


def check_symmetric(M):
  """Check if a square boolean matrix is symmetric."""
  M = np.asarray(M)
  return M.shape[0] == M.shape[1] and bool(np.all(M == M.T))
