"""Exceptions raised while pairing people into rooms."""

__all__ = ["RoompairError", "MissingDataError", "PoolExhaustedError",
           "EmptyInputError"]


class RoompairError(Exception):
  """Base class of all roompair errors."""


class MissingDataError(RoompairError, KeyError):
  """A person has no entry in one of the preference relations.

  Attributes:
    person: the name that could not be found.
    relation: either "preferred" or "unpreferred".
  """
  def __init__(self, person, relation):
    self.person = person
    self.relation = relation
    super().__init__(person)

  def __str__(self):
    return "{0!r} has no entry in the {1} relation".format(
        self.person, self.relation)


class PoolExhaustedError(RoompairError, RuntimeError):
  """A roommate is needed but nobody is left in the pool.

  Attributes:
    person: whoever was left without a roommate, or None if unknown.
  """
  def __init__(self, message, person=None):
    self.person = person
    super().__init__(message)


class EmptyInputError(RoompairError, ValueError):
  """Selection from an empty collection."""
