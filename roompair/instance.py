"""Roommate pairing library for python3.

Pair a group of people into rooms of two by running many randomized greedy
trials and keeping the best one.
"""

import collections

import numpy as np

import roompair.core
from roompair.errors import MissingDataError, PoolExhaustedError
from roompair.utils import filter_by_criteria, random_choice

__all__ = [
    "TIERS", "RoommateInstance", "RoomSolution", "Ranking",
    "generate_solutions", "rank_solutions", "solve"
]

TIERS = ("preferred", "accepted", "unpreferred")


def _relation_2_matrix(relation, name, people, index):
  """Transform a preference relation into a boolean matrix.

  Args:
    relation: dict from person to a collection of people.
    name: name of the relation, used in error messages.
    people: list of everybody, `people[i]` is person i.
    index: dict from person to its index in `people`.

  Returns:
    A (n, n) boolean array M where M[i, j] is True if person i flagged
    person j. Flags on unknown people and self references are dropped.

  Raises:
    MissingDataError if a person has no entry in `relation`.
  """
  M = np.zeros((len(people), len(people)), dtype=np.bool_)
  for i, p in enumerate(people):
    if p not in relation:
      raise MissingDataError(p, name)
    cols = [index[q] for q in relation[p] if q in index and q != p]
    M[i, cols] = True
  return M


class RoommateInstance():
  """Roommate pairing problem instance.

  An object storing who would like (and who would not like) to share a room
  with whom.

  Attributes:
    people: list of everybody to be housed, in the key order of the
      unpreferred relation. Person i in the matrices below is `people[i]`.
    num_people: `len(people)`.
    preferred: the preferred relation, as given.
    unpreferred: the unpreferred relation, as given.
    preferred_matrix: (n, n) boolean array, [i, j] is True if person i listed
      person j as preferred.
    unpreferred_matrix: (n, n) boolean array, [i, j] is True if person i
      listed person j as unpreferred.
    tier_matrices: list of symmetric (n, n) boolean arrays, one for each tier
      in `TIERS` except the last (fallback) one. [i, j] is True if i and j
      qualify for that tier.
  """
  def __init__(self, preferred, unpreferred):
    """
    Create a roommate pairing instance.

    Args:
      preferred: dict from each person to the people they would like to share
        a room with.
      unpreferred: dict from each person to the people they would rather not
        share a room with. Its keys are the people to be housed.

    Raises:
      MissingDataError if somebody has no entry in `preferred`.
    """
    self.people = list(unpreferred)
    self.num_people = len(self.people)
    self._index = {p: i for i, p in enumerate(self.people)}
    self.preferred = preferred
    self.unpreferred = unpreferred
    self.preferred_matrix = _relation_2_matrix(
        preferred, "preferred", self.people, self._index)
    self.unpreferred_matrix = _relation_2_matrix(
        unpreferred, "unpreferred", self.people, self._index)
    self.tier_matrices = self._create_tier_matrices()

  def __repr__(self):
    return "<RoommateInstance with {n} people>".format(n=self.num_people)

  def _create_tier_matrices(self):
    """Create the tier predicates, in priority order."""
    P, N = self.preferred_matrix, self.unpreferred_matrix
    mutually_preferred = P & P.T
    mutually_accepted = ~N & ~N.T
    # Nobody shares a room with themselves.
    np.fill_diagonal(mutually_preferred, False)
    np.fill_diagonal(mutually_accepted, False)
    return [mutually_preferred, mutually_accepted]

  def index(self, person):
    """Obtains the index of a person.

    Raises:
      MissingDataError if `person` is not one of `people`.
    """
    try:
      return self._index[person]
    except KeyError:
      raise MissingDataError(person, "unpreferred") from None

  def classify(self, person, pool):
    """Classify candidate roommates of `person` into tiers.

    Usage: `S.classify("Alice", ["Bob", "Carol"])`
    Args:
      person: name of the person looking for a roommate.
      pool: names of the candidates.

    Returns:
      A dict from each tier but the fallback one to the list of candidates in
      `pool` qualifying for it, in pool order. The tiers are checked
      independently, a mutually preferred candidate is usually also mutually
      accepted. Candidates in no list are fallback candidates.
    """
    a = self.index(person)
    cols = [self.index(b) for b in pool]
    return {tier: [b for b, j in zip(pool, cols) if M[a, j]]
            for tier, M in zip(TIERS, self.tier_matrices)}

  def tier_of(self, a, b):
    """Obtains the tier of a room shared by `a` and `b`."""
    i, j = self.index(a), self.index(b)
    for tier, M in zip(TIERS, self.tier_matrices):
      if M[i, j]:
        return tier
    return TIERS[-1]

  def solve_trial(self, rng=None):
    """Run one randomized greedy trial.

    Args:
      rng: a `numpy.random.Generator`, an integer seed or None.

    Returns:
      A `RoomSolution`.

    Raises:
      PoolExhaustedError if the number of people is odd. Its `person` is the
        name of whoever was left over.
    """
    rng = np.random.default_rng(rng)
    try:
      rooms, counts = roompair.core.solve_trial(
          self.tier_matrices, self.num_people, rng)
    except PoolExhaustedError as e:
      person = self.people[e.person]
      raise PoolExhaustedError(
          "Nobody left to share a room with {0!r}; the number of people "
          "({1}) is odd.".format(person, self.num_people),
          person=person) from None
    return RoomSolution(
        rooms=tuple((self.people[a], self.people[b]) for a, b in rooms),
        **{tier: int(c) for tier, c in zip(TIERS, counts)})


class RoomSolution(collections.namedtuple(
    "RoomSolution", ["rooms", "preferred", "accepted", "unpreferred"])):
  """Outcome of one trial.

  For a `RoomSolution` sol,
    `sol.rooms` is a tuple of rooms, each a pair of names.
    `sol.preferred`, `sol.accepted` and `sol.unpreferred` are the number of
      rooms formed in each tier.
    `sol["Alice"]` or `sol.roommate("Alice")` is Alice's roommate.
  """
  __slots__ = ()

  def __repr__(self):
    return ("<RoomSolution with {r} rooms: {p} preferred, {a} accepted, "
            "{u} unpreferred>").format(
                r=len(self.rooms), p=self.preferred, a=self.accepted,
                u=self.unpreferred)

  def __getitem__(self, s):
    if isinstance(s, str):
      return self.roommate(s)
    return super().__getitem__(s)

  def roommate(self, person):
    for a, b in self.rooms:
      if a == person:
        return b
      if b == person:
        return a
    raise KeyError(person)

  def counts(self):
    """Room counts in the order of `TIERS`."""
    return (self.preferred, self.accepted, self.unpreferred)


class Ranking():
  """Ranking of a set of solutions.

  Attributes:
    solutions: every ranked solution.
    optimal: solutions with the fewest unpreferred rooms, and among those the
      most preferred rooms.
    best: the solution picked at random from `optimal`.
    min_unpreferred: smallest number of unpreferred rooms found.
    max_preferred: largest number of preferred rooms among the solutions with
      `min_unpreferred` unpreferred rooms.
  """
  def __init__(self, solutions, optimal, best, min_unpreferred, max_preferred):
    self.solutions = solutions
    self.optimal = optimal
    self.best = best
    self.min_unpreferred = min_unpreferred
    self.max_preferred = max_preferred

  @property
  def num_optimal(self):
    return len(self.optimal)

  def __repr__(self):
    return ("<Ranking of {n} solutions, {k} optimal with {u} unpreferred "
            "and {p} preferred rooms>").format(
                n=len(self.solutions), k=self.num_optimal,
                u=self.min_unpreferred, p=self.max_preferred)


def generate_solutions(ins, num_trials, rng=None, verbose=False):
  """Run `num_trials` independent trials.

  Args:
    ins: a `RoommateInstance` object.
    num_trials: positive int.
    rng: a `numpy.random.Generator`, an integer seed or None. The same
      generator is used by every trial in turn.
    verbose: bool, optional
      If set to True, progress will be printed. Default is False.

  Returns:
    list of `RoomSolution` objects, one per trial.

  Raises:
    TypeError if `num_trials` is not an integer.
    ValueError if `num_trials` is less than 1.
    The first error raised by any trial; no solutions are returned then.
  """
  if (isinstance(num_trials, bool) or
      not isinstance(num_trials, (int, np.integer))):
    raise TypeError("Number of trials must be an integer.")
  if num_trials < 1:
    raise ValueError("Number of trials must be at least 1, got {0}.".format(
        num_trials))
  rng = np.random.default_rng(rng)
  if verbose:
    print("Generating {0} solutions for {1} people.".format(
        num_trials, ins.num_people))
  solutions = []
  for t in range(num_trials):
    if t % 200 == 0 and t > 0 and verbose:
      print("current trial: #{0}".format(t))
    solutions.append(ins.solve_trial(rng))
  return solutions


def rank_solutions(solutions, rng=None, verbose=False):
  """Select the best solution.

  Keep the solutions with the fewest unpreferred rooms, then among them the
  ones with the most preferred rooms, and pick one of those at random.

  Args:
    solutions: non-empty list of `RoomSolution` objects.
    rng: a `numpy.random.Generator`, an integer seed or None.
    verbose: bool, optional

  Returns:
    A `Ranking` object.

  Raises:
    EmptyInputError if `solutions` is empty.
  """
  rng = np.random.default_rng(rng)
  optimal, (min_unpreferred, max_preferred) = filter_by_criteria(
      solutions, [(lambda s: s.unpreferred, "min"),
                  (lambda s: s.preferred, "max")])
  best = random_choice(optimal, rng)
  if verbose:
    print("Fewest unpreferred rooms: {0}, most preferred rooms: {1}.".format(
        min_unpreferred, max_preferred))
    print("{0} optimal solutions found.".format(len(optimal)))
  return Ranking(solutions=solutions, optimal=optimal, best=best,
                 min_unpreferred=min_unpreferred, max_preferred=max_preferred)


def solve(ins, num_trials, rng=None, verbose=False, full_output=False):
  """Pair everybody in a roommate instance.

  Args:
    ins: a `RoommateInstance` object.
    num_trials: number of randomized trials to run.
    rng: a `numpy.random.Generator`, an integer seed or None.
    verbose: bool, optional
      If set to True, extra information will be printed when running the
      algorithm. Default is False.
    full_output: bool, optional
      If set to True, the `Ranking` is returned as well. Default is False.

  Returns:
    sol: the best `RoomSolution`.
    ranking: the `Ranking`, only if `full_output` is True.
  """
  rng = np.random.default_rng(rng)
  solutions = generate_solutions(ins, num_trials, rng=rng, verbose=verbose)
  ranking = rank_solutions(solutions, rng=rng, verbose=verbose)
  if full_output:
    return ranking.best, ranking
  return ranking.best
