"""Unit tests for the pairing kernels and selection utils"""

import os
import sys
sys.path.insert(0, os.path.abspath('..'))

import numpy as np
import unittest

from roompair import core
from roompair import utils
from roompair.errors import EmptyInputError, PoolExhaustedError


class TestUtils(unittest.TestCase):
  def setUp(self):
    self.rng = np.random.default_rng(0)

  def test_random_choice(self):
    self.assertEqual(utils.random_choice(["x"], self.rng), "x")
    seen = {utils.random_choice("abc", self.rng) for _ in range(100)}
    self.assertSetEqual(seen, {"a", "b", "c"})
    self.assertIn(utils.random_choice(np.array([4, 5]), self.rng), (4, 5))

  def test_random_choice_empty(self):
    with self.assertRaises(EmptyInputError):
      utils.random_choice([], self.rng)
    with self.assertRaises(ValueError):
      utils.random_choice(np.array([], dtype=np.int64), self.rng)

  def test_filter_by_criteria(self):
    items = [(2, 5), (1, 3), (1, 7), (1, 7), (3, 9)]
    survivors, thresholds = utils.filter_by_criteria(
        items, [(lambda x: x[0], "min"), (lambda x: x[1], "max")])
    self.assertListEqual(survivors, [(1, 7), (1, 7)])
    self.assertListEqual(thresholds, [1, 7])

  def test_filter_by_no_criteria(self):
    survivors, thresholds = utils.filter_by_criteria([3, 1, 2], [])
    self.assertListEqual(survivors, [3, 1, 2])
    self.assertListEqual(thresholds, [])

  def test_filter_by_criteria_errors(self):
    with self.assertRaises(EmptyInputError):
      utils.filter_by_criteria([], [(abs, "min")])
    with self.assertRaises(ValueError):
      utils.filter_by_criteria([1], [(abs, "median")])

  def test_check_pairing(self):
    self.assertTrue(utils.check_pairing([("a", "b"), ("d", "c")], "abcd"))
    self.assertFalse(utils.check_pairing([("a", "b"), ("a", "c")], "abc"))
    self.assertFalse(utils.check_pairing([("a", "b")], "abcd"))
    self.assertFalse(utils.check_pairing([("a", "b", "c")], "abc"))


class _UnshuffledGenerator():
  """Generator that leaves the pool in order but draws picks at random."""
  def __init__(self, seed):
    self._rng = np.random.default_rng(seed)

  def permutation(self, n):
    return np.arange(n)

  def integers(self, *args, **kwargs):
    return self._rng.integers(*args, **kwargs)


class TestCore(unittest.TestCase):
  def setUp(self):
    self.rng = np.random.default_rng(1)

  def test_tier_candidates(self):
    M = np.zeros((5, 5), dtype=np.bool_)
    M[0, [2, 4]] = True
    pool = np.array([4, 1, 2, 3], dtype=np.int64)
    self.assertListEqual(core.tier_candidates(M, pool, 4, 0).tolist(), [0, 2])
    # only the first `size` entries of the pool are live
    self.assertListEqual(core.tier_candidates(M, pool, 2, 0).tolist(), [0])
    self.assertListEqual(core.tier_candidates(M, pool, 0, 0).tolist(), [])

  def test_fallback_only(self):
    rooms, counts = core.solve_trial([], 6, self.rng)
    self.assertTrue(utils.check_pairing(rooms, range(6)))
    self.assertListEqual(counts.tolist(), [3])

  def test_fallback_pick_covers_pool(self):
    # person 3 is popped first and may end up with any of 0, 1 or 2
    rng = _UnshuffledGenerator(2)
    roommates = set()
    for _ in range(60):
      rooms, counts = core.solve_trial([], 4, rng)
      self.assertEqual(rooms[0][0], 3)
      roommates.add(rooms[0][1])
    self.assertSetEqual(roommates, {0, 1, 2})

  def test_tier_pick_covers_candidates(self):
    M = np.zeros((4, 4), dtype=np.bool_)
    M[3, [0, 2]] = M[[0, 2], 3] = True
    rng = _UnshuffledGenerator(3)
    roommates = set()
    for _ in range(60):
      rooms, counts = core.solve_trial([M], 4, rng)
      roommates.add(rooms[0][1])
      self.assertEqual(int(counts[0]), 1)
    self.assertSetEqual(roommates, {0, 2})

  def test_tier_priority(self):
    # 0-1 and 2-3 are the only preferred rooms, everybody accepts everybody
    preferred = np.zeros((4, 4), dtype=np.bool_)
    preferred[[0, 1, 2, 3], [1, 0, 3, 2]] = True
    accepted = ~np.eye(4, dtype=np.bool_)
    for _ in range(20):
      rooms, counts = core.solve_trial([preferred, accepted], 4, self.rng)
      self.assertSetEqual({frozenset(r) for r in rooms},
                          {frozenset((0, 1)), frozenset((2, 3))})
      self.assertListEqual(counts.tolist(), [2, 0, 0])

  def test_counts_add_up(self):
    M = self.rng.random((10, 10)) < 0.3
    M = M & M.T
    np.fill_diagonal(M, False)
    for _ in range(20):
      rooms, counts = core.solve_trial([M], 10, self.rng)
      self.assertTrue(utils.check_pairing(rooms, range(10)))
      self.assertEqual(int(counts.sum()), 5)
      self.assertEqual(int(counts[0]), sum(bool(M[a, b]) for a, b in rooms))

  def test_odd_pool(self):
    for n in (1, 3, 7):
      with self.assertRaises(PoolExhaustedError):
        core.solve_trial([], n, self.rng)


if __name__ == '__main__':
  unittest.main()
