"""Command line entry point.

Usage: python -m roompair [config.toml] [--trials N] [--seed S] [--verbose]
"""

import argparse
import os
import sys

import roompair


def main(argv=None):
  parser = argparse.ArgumentParser(
      prog="roompair",
      description="Pair people into rooms of two according to their "
                  "preferences.")
  parser.add_argument(
      "config", nargs="?", default="config.toml",
      help="configuration file (default: config.toml in the working "
           "directory)")
  parser.add_argument(
      "--trials", type=int, default=None,
      help="number of trials, overrides settings.solutions")
  parser.add_argument(
      "--seed", type=int, default=None,
      help="seed of the random number generator")
  parser.add_argument(
      "--verbose", action="store_true",
      help="print progress information")
  args = parser.parse_args(argv)

  try:
    if args.verbose:
      print("Parsing config file at {0}".format(os.path.abspath(args.config)))
    ins, num_trials = roompair.load_config(args.config)
    if args.trials is not None:
      num_trials = args.trials
    sol = roompair.solve(ins, num_trials, rng=args.seed, verbose=args.verbose)
  except (OSError, ValueError, TypeError, roompair.RoompairError) as e:
    print("roompair: error: {0}".format(e), file=sys.stderr)
    return 1
  print(roompair.format_solution(sol, ins))
  return 0


if __name__ == "__main__":
  sys.exit(main())
