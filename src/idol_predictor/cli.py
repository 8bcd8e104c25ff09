"""Command-line interface for picking a pitcher from a league snapshot."""

from __future__ import annotations

import argparse
import json
import logging
from pathlib import Path
from typing import Optional, Sequence

from idol_predictor.algorithms import ALGORITHMS, JOKE_ALGORITHMS, AlgorithmError, get_algorithm
from idol_predictor.evaluate import evaluate
from idol_predictor.ingest import StateLoadError, fetch_state, load_state
from idol_predictor.models import LeagueState
from idol_predictor.report import algorithm_response, format_pick, pick_response
from idol_predictor.settings import Settings


def _parse_args(argv: Optional[Sequence[str]], settings: Settings) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Pick a pitcher with a named algorithm")
    source = parser.add_mutually_exclusive_group()
    source.add_argument("--state", type=Path, default=None, help="Path to a league state JSON file")
    source.add_argument("--url", default=None, help="URL serving league state JSON")
    parser.add_argument(
        "--algorithm",
        type=int,
        default=settings.algorithm_id,
        help="Algorithm id (see --list)",
    )
    parser.add_argument("--list", action="store_true", help="List algorithms and exit")
    parser.add_argument("--json", action="store_true", help="Print the pick as JSON")
    parser.add_argument("--log-level", default=settings.log_level, help="Logging level")
    return parser.parse_args(argv)


def _print_algorithms(as_json: bool) -> None:
    rows = [algorithm_response(i, get_algorithm(i), joke=False) for i in ALGORITHMS]
    rows += [algorithm_response(i, get_algorithm(i), joke=True) for i in JOKE_ALGORITHMS]
    if as_json:
        print(json.dumps([row.model_dump() for row in rows], indent=2))
        return
    for row in rows:
        suffix = " (joke)" if row.joke else ""
        print(f"{row.id:>3}  {row.name}{suffix}")


def _load(args: argparse.Namespace, settings: Settings) -> LeagueState:
    if args.state is not None:
        return load_state(args.state)
    if args.url is not None:
        return fetch_state(args.url, timeout=settings.http_timeout)
    if settings.state_path is not None:
        return load_state(settings.state_path)
    if settings.state_url is not None:
        return fetch_state(settings.state_url, timeout=settings.http_timeout)
    raise SystemExit("No league state given; pass --state or --url")


def main(argv: Optional[Sequence[str]] = None) -> None:
    settings = Settings.from_env()
    args = _parse_args(argv, settings)
    logging.basicConfig(level=args.log_level.upper(), format="%(levelname)s %(name)s: %(message)s")

    if args.list:
        _print_algorithms(args.json)
        return

    try:
        algorithm = get_algorithm(args.algorithm)
    except KeyError:
        raise SystemExit(f"Unknown algorithm id {args.algorithm}; see --list") from None

    try:
        state = _load(args, settings)
    except StateLoadError as exc:
        raise SystemExit(f"Could not load league state from {exc.source}: {exc.message}") from exc

    try:
        evaluation = evaluate(algorithm, state)
    except AlgorithmError as exc:
        raise SystemExit(f"{algorithm.name} failed: {exc.message}") from exc

    if args.json:
        print(pick_response(evaluation).model_dump_json(indent=2))
    else:
        print(format_pick(evaluation))


if __name__ == "__main__":
    main()
