#!/usr/bin/env python3
import argparse
import sys

import numpy as np

from .config import GeneratorConfig, load_config, save_config
from .constraints import Mode, Constraint, resolve, mode_for
from .errors import ConstraintError, ConfigError
from .fetch import fetch_history
from .frequency import load_frequencies
from .game import generate_games, save_games
from .report import print_frequencies, print_frequency_bars

MENU = """
===== Lotto Number Generator =====
1. Random numbers
2. Include specific numbers
3. Exclude specific numbers
4. Include + exclude specific numbers
5. Frequency per number (counts)
6. Frequency per number (bar chart)
7. Exit"""

MODE_TITLES = {
    Mode.UNCONSTRAINED: "Random numbers",
    Mode.INCLUDE: "Include specific numbers",
    Mode.EXCLUDE: "Exclude specific numbers",
    Mode.INCLUDE_EXCLUDE: "Include + exclude specific numbers",
}


# ----------------------
# Shared helpers
# ----------------------
def parse_numbers(line):
    """'3 17 42' -> {3, 17, 42}; raises ValueError on anything non-integer."""
    return {int(tok) for tok in line.split()}


def play(table, cfg, mode, constraint=None, rng=None, verbose=False):
    """Generate one batch, print it and overwrite the output file."""
    constraint = constraint or Constraint()
    if verbose:
        res = resolve(mode, constraint)
        print(f"[INFO] mode={mode.value} fixed={list(res.fixed)} "
              f"candidates={len(res.candidates)} need={res.need}")
    games = generate_games(table, mode, constraint, cfg.games, rng)

    print(f"\n--- {MODE_TITLES[mode]} ---")
    for i, game in enumerate(games, 1):
        print(f"Game {i}: {game}")
    try:
        save_games(games, cfg.output_file)
        print(f"Generated numbers saved to {cfg.output_file}")
    except OSError as e:
        print(f"[WARN] Could not save to {cfg.output_file}: {e}")
    return games


# ----------------------
# Interactive menu
# ----------------------
def _ask_numbers(prompt, input_func):
    while True:
        line = input_func(prompt).strip()
        if line:
            return parse_numbers(line)
        print("No input. Please try again.")


def _play_constrained(table, cfg, mode, rng, verbose, input_func):
    # keep asking until the lists parse and pass validation
    while True:
        try:
            include = exclude = frozenset()
            if mode in (Mode.INCLUDE, Mode.INCLUDE_EXCLUDE):
                include = _ask_numbers("Numbers to include (space separated): ", input_func)
            if mode in (Mode.EXCLUDE, Mode.INCLUDE_EXCLUDE):
                exclude = _ask_numbers("Numbers to exclude (space separated): ", input_func)
            return play(table, cfg, mode, Constraint(include, exclude), rng, verbose)
        except ConstraintError as e:
            print(f"Input error: {e}")
        except ValueError as e:
            print(f"Input error: not a number ({e})")
        print("Please try again.")


def run_menu(table, cfg, rng=None, verbose=False, input_func=input):
    modes = {1: Mode.UNCONSTRAINED, 2: Mode.INCLUDE, 3: Mode.EXCLUDE, 4: Mode.INCLUDE_EXCLUDE}
    while True:
        print(MENU)
        try:
            choice = input_func("Select a menu: ").strip()
            try:
                menu = int(choice)
            except ValueError:
                print("Please enter a number.")
                continue

            if menu == 1:
                play(table, cfg, Mode.UNCONSTRAINED, rng=rng, verbose=verbose)
            elif menu in modes:
                _play_constrained(table, cfg, modes[menu], rng, verbose, input_func)
            elif menu == 5:
                print_frequencies(table)
            elif menu == 6:
                print_frequency_bars(table, cfg.bar_width)
            elif menu == 7:
                print("Exiting.")
                return
            else:
                print("Invalid menu option.")
        except EOFError:
            print("\nExiting.")
            return


# ----------------------
# CLI
# ----------------------
def build_parser():
    p = argparse.ArgumentParser(
        prog="lottogen",
        description="6/45 lotto generator weighted towards historically rare numbers.")
    p.add_argument("--config", help="JSON config file (keys of GeneratorConfig).")
    p.add_argument("--history", help="History file: 7 comma-separated numbers per line.")
    p.add_argument("--output", help="Where generated games are written (overwritten).")
    p.add_argument("--seed", type=int, help="RNG seed for reproducibility.")
    p.add_argument("--save-config", help="Write the effective config to this JSON file.")
    p.add_argument("--verbose", action="store_true", help="Verbose progress.")

    sub = p.add_subparsers(dest="command")
    sub.add_parser("menu", help="Interactive menu (default).")

    g = sub.add_parser("generate", help="Generate one batch and exit.")
    g.add_argument("--games", type=int, help="How many games to generate.")
    g.add_argument("--include", type=int, nargs="+", default=[], help="Numbers every game must contain.")
    g.add_argument("--exclude", type=int, nargs="+", default=[], help="Numbers no game may contain.")

    fr = sub.add_parser("freq", help="Print the frequency table.")
    fr.add_argument("--bars", action="store_true", help="Bar chart instead of counts.")

    fe = sub.add_parser("fetch", help="Download draw history into the history file.")
    fe.add_argument("--start", type=int, default=1, help="First draw number.")
    fe.add_argument("--end", type=int, help="Last draw number (default: latest).")
    fe.add_argument("--delay", type=float, default=0.2, help="Seconds between requests.")
    return p


def main(argv=None):
    args = build_parser().parse_args(argv)
    command = args.command or "menu"

    try:
        cfg = load_config(args.config) if args.config else GeneratorConfig()
        cfg = cfg.with_overrides(history_file=args.history, output_file=args.output,
                                 seed=args.seed, games=getattr(args, "games", None))
    except ConfigError as e:
        raise SystemExit(str(e))
    if args.save_config:
        save_config(cfg, args.save_config)

    if command == "fetch":
        fetch_history(cfg.history_file, args.start, args.end, args.delay)
        return 0

    table = load_frequencies(cfg.history_file)
    rng = np.random.default_rng(cfg.seed)

    if command == "menu":
        run_menu(table, cfg, rng, args.verbose)
    elif command == "generate":
        mode = mode_for(args.include, args.exclude)
        try:
            play(table, cfg, mode, Constraint(args.include, args.exclude), rng, args.verbose)
        except ConstraintError as e:
            print(f"Input error: {e}", file=sys.stderr)
            return 2
    elif command == "freq":
        if args.bars:
            print_frequency_bars(table, cfg.bar_width)
        else:
            print_frequencies(table)
    return 0


if __name__ == "__main__":
    sys.exit(main())
