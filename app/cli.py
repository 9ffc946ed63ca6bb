"""
allokator command line.

  allokator roll --name "Project 1" --start 2022-01-01 --weeks 4 --revenue 33333 -n 10
  allokator contribution --start 2022-01-02 --weeks 4 --revenue 2000 --on 2022-01-30
  allokator summary --start 2022-01-02 --weeks 4 --revenue 2000 -n 10000 --seed 7
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import Sequence

import numpy as np
import pandas as pd

from core.config import JITTER_DAYS, RollConfig
from core.log import configure_logging
from core.utils import to_date
from engine.runner import iter_rolls, simulate_timeline
from timelines.contribution import contribution_on
from timelines.spec import DEFAULT_NAME, DEFAULT_START_DATE, DEFAULT_WEEKS, TimelineSpec

logger = logging.getLogger(__name__)


def _add_timeline_args(p: argparse.ArgumentParser) -> None:
    p.add_argument("--name", default=DEFAULT_NAME)
    p.add_argument("--start", default=DEFAULT_START_DATE.isoformat(), help="start date, YYYY-MM-DD")
    p.add_argument("--weeks", type=int, default=DEFAULT_WEEKS)
    p.add_argument("--days", type=int, default=None, help="duration in days (overrides --weeks)")
    p.add_argument("--revenue", type=int, default=0)


def _add_roll_args(p: argparse.ArgumentParser, *, default_n: int) -> None:
    p.add_argument("-n", "--n-rolls", type=int, default=default_n)
    p.add_argument("--seed", type=int, default=None)
    p.add_argument("--jitter-days", type=int, default=JITTER_DAYS)


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="allokator",
        description="Timeline contribution queries and roll forecasts.",
    )
    p.add_argument("--log-level", default="WARNING")
    sub = p.add_subparsers(dest="command", required=True)

    p_roll = sub.add_parser("roll", help="print sampled (value, date) rolls")
    _add_timeline_args(p_roll)
    _add_roll_args(p_roll, default_n=1)
    p_roll.set_defaults(_fn=_cmd_roll)

    p_contrib = sub.add_parser("contribution", help="scheduled contribution on a date")
    _add_timeline_args(p_contrib)
    p_contrib.add_argument("--on", required=True, help="query date, YYYY-MM-DD")
    p_contrib.set_defaults(_fn=_cmd_contribution)

    p_summary = sub.add_parser("summary", help="percentile summary of N rolls")
    _add_timeline_args(p_summary)
    _add_roll_args(p_summary, default_n=1000)
    p_summary.set_defaults(_fn=_cmd_summary)

    return p


def _timeline_from_args(args: argparse.Namespace):
    spec = TimelineSpec(
        name=args.name,
        start_date=to_date(args.start),
        weeks=args.weeks,
        days=args.days,
        revenue=args.revenue,
    )
    return spec.build()


def _config_from_args(args: argparse.Namespace) -> RollConfig:
    return RollConfig(jitter_days=args.jitter_days, n_rolls=args.n_rolls, seed=args.seed)


def _cmd_roll(args: argparse.Namespace) -> int:
    timeline = _timeline_from_args(args)
    config = _config_from_args(args)
    rng = np.random.default_rng(config.seed)
    for _, r in iter_rolls([timeline], rng, config, rounds=config.n_rolls):
        print(f"{r.value} {r.date.isoformat()}")
    return 0


def _cmd_contribution(args: argparse.Namespace) -> int:
    timeline = _timeline_from_args(args)
    print(contribution_on(timeline, to_date(args.on)))
    return 0


def _cmd_summary(args: argparse.Namespace) -> int:
    timeline = _timeline_from_args(args)
    config = _config_from_args(args)
    rolls = simulate_timeline(timeline, config)
    print(f"{timeline.name}: {timeline.start_date} -> {timeline.end_date()}, expected {timeline.expected_value}")
    with pd.option_context("display.width", 120, "display.max_columns", None):
        print(rolls.summary().round(2).to_string(index=False))
        print()
        print(rolls.multiplier_frequencies(config.value_multipliers).round(4).to_string())
    return 0


def main(argv: Sequence[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(list(argv) if argv is not None else None)
    configure_logging(level=args.log_level)

    try:
        return args._fn(args)
    except ValueError as e:
        # includes pydantic.ValidationError
        logger.debug("invalid input", exc_info=True)
        print(f"allokator: error: {e}", file=sys.stderr)
        return 2
    except KeyboardInterrupt:
        return 130


if __name__ == "__main__":
    sys.exit(main())
