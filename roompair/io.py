"""Roommate instance input/output."""

import json
import os
import pickle
import tomllib

import numpy as np
from scipy import io as sio

import roompair.instance

__all__ = ["load_config", "save_json", "load_json", "save_mat",
           "save_pickle", "load_pickle", "format_solution"]


def _relation_check(obj, name):
  if not isinstance(obj, dict):
    raise TypeError("The {0} relation must be a table of lists.".format(name))
  for person, li in obj.items():
    if not isinstance(li, list):
      raise TypeError("{0!r} in the {1} relation must map to a list.".format(
          person, name))
  return obj


def _instance_from_fields(all_fields, filename):
  for name in ("preferred", "unpreferred"):
    if name not in all_fields:
      raise ValueError("{0} has no [{1}] section.".format(filename, name))
  return roompair.instance.RoommateInstance(
      preferred=_relation_check(all_fields["preferred"], "preferred"),
      unpreferred=_relation_check(all_fields["unpreferred"], "unpreferred")
  )


def load_config(filename):
  """Read a configuration file.

  The file holds a `settings` table with the number of trials under
  `solutions`, and the `preferred` and `unpreferred` tables:

    [settings]
    solutions = 1000

    [preferred]
    Alice = ["Bob"]
    Bob = ["Alice"]

    [unpreferred]
    Alice = []
    Bob = []

  Files ending with ".json" are read as json with the same structure,
  anything else as toml.

  Args:
    filename: input file name.
  Returns:
    1. A `RoommateInstance` object.
    2. The number of trials to run.
  """
  if os.path.splitext(filename)[1].lower() == ".json":
    with open(filename) as f:
      all_fields = json.load(f)
  else:
    with open(filename, "rb") as f:
      all_fields = tomllib.load(f)
  try:
    num_trials = all_fields["settings"]["solutions"]
  except (KeyError, TypeError):
    raise ValueError("{0} has no 'solutions' entry in [settings].".format(
        filename)) from None
  if isinstance(num_trials, bool) or not isinstance(num_trials, int):
    raise TypeError("settings.solutions must be an integer, got {0!r}.".format(
        num_trials))
  if num_trials < 1:
    raise ValueError("settings.solutions must be at least 1, got {0}.".format(
        num_trials))
  return _instance_from_fields(all_fields, filename), num_trials


def save_json(ins, filename, num_trials=None):
  """Save RoommateInstance to json format.

  Args:
    ins: a `RoommateInstance` object.
    filename: output file name.
    num_trials: int, optional
      If given, it is stored under `settings` so that the file can be read
      back with `load_config`.
  """
  all_fields = {
      "preferred": {p: sorted(ins.preferred[p]) for p in ins.people},
      "unpreferred": {p: sorted(ins.unpreferred[p]) for p in ins.people}
  }
  if num_trials is not None:
    all_fields["settings"] = {"solutions": num_trials}
  with open(filename, mode="w") as g:
    json.dump(all_fields, g, indent=4)


def load_json(filename):
  """Read instance from a json file of preferences.

  Args:
    filename: input json file name.
  Returns:
    A `RoommateInstance` object.
  """
  with open(filename) as f:
    all_fields = json.load(f)
  return _instance_from_fields(all_fields, filename)


def save_mat(ins, filename):
  """Save the instance matrices to MATLAB style .mat file.

  Saves the preferred and unpreferred matrices, the tier matrices and the
  list of names, for use in MATLAB.

  Args:
    ins: A `RoommateInstance`.
    filename: output filename with or without '.mat' extension.
  """
  sio.savemat(
        filename,
        {
            "P": ins.preferred_matrix.astype(np.int8),
            "N": ins.unpreferred_matrix.astype(np.int8),
            "T": np.stack(ins.tier_matrices).astype(np.int8),
            "people": np.array(ins.people, dtype=object)
        }
  )


def save_pickle(ins, filename):
  """Save RoommateInstance to python's pickle format.

  Args:
    ins: a `RoommateInstance`.
    filename: output file name.
  """
  with open(filename, "wb") as g:
    pickle.dump(
        {
            "preferred": ins.preferred,
            "unpreferred": ins.unpreferred
        }, g
    )


def load_pickle(filename):
  """Read instance from a python pickle file of preferences.

  Only load pickle files you trust, unpickling can run arbitrary code.

  Args:
    filename: pickle file name.
  Returns:
    A `RoommateInstance` object.
  """
  with open(filename, "rb") as f:
    all_data = pickle.load(f)
  return roompair.instance.RoommateInstance(
      preferred=all_data["preferred"],
      unpreferred=all_data["unpreferred"]
  )


def format_solution(sol, ins=None):
  """Format a solution as text, one room per line.

  Args:
    sol: a `RoomSolution`.
    ins: a `RoommateInstance`, optional
      If given, the tier of each room is shown as well.

  Returns:
    A string.
  """
  width = max([len(a) for a, _ in sol.rooms] + [0])
  lines = []
  for r, (a, b) in enumerate(sol.rooms):
    line = "Room {0:>3}: {1:<{w}} & {2}".format(r + 1, a, b, w=width)
    if ins is not None:
      line += " ({0})".format(ins.tier_of(a, b))
    lines.append(line)
  lines.append("{0} preferred, {1} accepted, {2} unpreferred".format(
      sol.preferred, sol.accepted, sol.unpreferred))
  return "\n".join(lines)
