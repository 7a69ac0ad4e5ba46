"""
Roompair
=============================================
Pairing people into rooms of two.

Example:

Suppose that four people, Alice, Bob, Carol and Dave, have to share two rooms.
Everybody lists who they would like to share a room with:
---------------------------------------------
  >>> preferred = {"Alice": ["Bob"], "Bob": ["Alice", "Carol"],
  ...              "Carol": [], "Dave": ["Carol"]}
---------------------------------------------
and who they would rather not share a room with:
---------------------------------------------
  >>> unpreferred = {"Alice": ["Dave"], "Bob": [],
  ...                "Carol": ["Dave"], "Dave": []}
---------------------------------------------
Every person must have an entry in both tables, even if it is empty. The keys of
`unpreferred` are the people to be housed, so there must be an even number of
them.

A room falls in one of three tiers:
- "preferred": both roommates listed each other as preferred (Alice and Bob),
- "accepted": neither roommate listed the other as unpreferred,
- "unpreferred": anything else (Carol and Dave).

Construct the instance and solve it:
----------------------------------------------
  >>> import roompair
  >>> S = roompair.RoommateInstance(preferred, unpreferred)
  >>> sol = roompair.solve(S, num_trials=1000, rng=0)
----------------------------------------------
Each trial shuffles everybody, then repeatedly takes the last person left and
gives them a random roommate from the best non-empty tier. Among all trials,
the ones with the fewest unpreferred rooms, and then the most preferred rooms,
are optimal; one of them is returned at random. Pass `full_output=True` to
obtain the `Ranking` of all trials as well.

The returned `RoomSolution` lists the rooms and how many of them fall in each
tier:
----------------------------------------------
  >>> sol.rooms
  >>> sol.preferred, sol.accepted, sol.unpreferred
  >>> sol["Alice"]
----------------------------------------------
Instances can also be read from the toml configuration file used by the
command line tool (`python -m roompair config.toml`) with
`roompair.load_config`.
"""

__author__ = "Roompair developers"

from roompair.errors import *
from roompair.instance import *
from roompair.io import *
from roompair.random import *
