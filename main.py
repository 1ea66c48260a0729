"""
polysolve — Command-line entry point.

    python main.py "x^2 - 5x + 6 = 0"
    python main.py "2x + 4 = 0" --unicode --graph roots.png
    python main.py --set render=unicode --set max_decimals=4
    python main.py --history
"""

import argparse
import json
import logging
import sys

from polysolve import storage
from polysolve.engine import solve_equation
from polysolve.graph import build_figure
from polysolve.parsing import detect_variable, parse_equation


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Solve linear and quadratic equations step by step.")
    parser.add_argument("equation", nargs="?",
                        help='equation to solve, e.g. "x^2 - 5x + 6 = 0"')
    style = parser.add_mutually_exclusive_group()
    style.add_argument("--html", dest="render", action="store_const", const="html",
                       help="render polynomials as HTML")
    style.add_argument("--unicode", dest="render", action="store_const", const="unicode",
                       help="render exponents as Unicode superscripts")
    parser.add_argument("--graph", metavar="PATH", help="save a plot of both sides to PATH")
    parser.add_argument("--no-history", action="store_true",
                        help="do not record this solve in the history file")

    stored = parser.add_argument_group("settings and history")
    stored.add_argument("--set", metavar="KEY=VALUE", action="append", default=[],
                        help="store a setting (repeatable), e.g. render=unicode")
    stored.add_argument("--reset-settings", action="store_true",
                        help="restore the default settings")
    stored.add_argument("--show-settings", action="store_true",
                        help="print the current settings")
    stored.add_argument("--history", action="store_true",
                        help="print past solves, newest first")
    stored.add_argument("--delete-history", metavar="ID",
                        help="remove one history record")
    stored.add_argument("--clear-history", action="store_true",
                        help="remove every history record")

    parser.add_argument("-v", "--verbose", action="store_true", help="enable debug logging")
    return parser


def _parse_assignment(text: str) -> tuple[str, object]:
    """Split ``key=value``; the value is read as JSON when it parses."""
    key, sep, raw = text.partition("=")
    if not sep or not key.strip():
        raise ValueError(f"Invalid setting '{text}'. Expected KEY=VALUE.")
    try:
        value = json.loads(raw)
    except json.JSONDecodeError:
        value = raw
    return key.strip(), value


def _manage_storage(args) -> bool:
    """Apply the settings/history flags.  Returns True if any was given."""
    acted = False
    if args.reset_settings:
        storage.reset_settings()
        acted = True
    if args.set:
        settings = storage.get_settings()
        settings.update(_parse_assignment(item) for item in args.set)
        storage.save_settings(settings)
        acted = True
    if args.show_settings:
        for key, value in storage.get_settings().items():
            print(f"{key} = {value}")
        acted = True
    if args.delete_history:
        storage.delete_history_item(args.delete_history)
        acted = True
    if args.clear_history:
        storage.clear_history()
        acted = True
    if args.history:
        for record in storage.get_history():
            answer = record["answer"].replace("\n", ", ")
            print(f"{record['id']}  {record['timestamp']}  {record['equation']}  ->  {answer}")
        acted = True
    return acted


def main(argv=None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        acted = _manage_storage(args)
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    if args.equation is None:
        if not acted:
            parser.print_usage(sys.stderr)
            print("Error: an equation or a settings/history option is required.",
                  file=sys.stderr)
            return 2
        return 0

    settings = storage.get_settings()
    if args.render:
        settings["render"] = args.render

    try:
        result = solve_equation(args.equation, settings)
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    print(result["equation"])
    for i, step in enumerate(result["steps"], 1):
        print(f"  {i}. {step['description']}: {step['expression']}")
    print(result["final_answer"])
    if result["verification_steps"]:
        print(f"Verification: {result['summary']['validation_status']}")

    if args.graph:
        fig = build_figure(parse_equation(args.equation), settings["graph_span"],
                           detect_variable(args.equation))
        if fig is None:
            print("Nothing to plot: both sides are identical.", file=sys.stderr)
        else:
            fig.savefig(args.graph, facecolor=fig.get_facecolor())

    if not args.no_history:
        storage.add_history(result["equation"], result["final_answer"])
    return 0


if __name__ == "__main__":
    sys.exit(main())
