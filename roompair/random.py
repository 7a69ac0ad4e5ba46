"""Random Instance Generators"""

import numpy as np

import roompair.instance

__all__ = ["gen_random_instance"]


def _matrix_2_relation(people, M):
  return {p: [people[j] for j in np.nonzero(M[i])[0]]
          for i, p in enumerate(people)}


def gen_random_instance(num_people, pref_prob=0.2, unpref_prob=0.1, rng=None):
  """Generate a uniform random instance.

  Generate a roommate instance where every person flags every other person as
  preferred with probability `pref_prob`, and independently as unpreferred
  with probability `unpref_prob`. Nobody flags themselves.

  Args:
    num_people: int
      Number of people, named "p0", "p1", ...
    pref_prob: float, optional
      Probability of a preferred flag. Default is 0.2.
    unpref_prob: float, optional
      Probability of an unpreferred flag. Default is 0.1.
    rng: a `numpy.random.Generator`, an integer seed or None.

  Returns:
    A `RoommateInstance` object.
  """
  rng = np.random.default_rng(rng)
  people = ["p{0}".format(i) for i in range(num_people)]
  off_diagonal = ~np.eye(num_people, dtype=np.bool_)
  P = (rng.random((num_people, num_people)) < pref_prob) & off_diagonal
  N = (rng.random((num_people, num_people)) < unpref_prob) & off_diagonal
  return roompair.instance.RoommateInstance(
      preferred=_matrix_2_relation(people, P),
      unpreferred=_matrix_2_relation(people, N)
  )
