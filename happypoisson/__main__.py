"""CLI entry point: python -m happypoisson

Runs one or more tick-clock simulations and prints the arrivals each run
reported next to the expected rate * T.

Example:
    python -m happypoisson --rate 100 --unit HOUR --tick-seconds 2 --ticks 7200 --runs 20
"""

from __future__ import annotations

import argparse
import sys

from happypoisson.core.clock import TickClock
from happypoisson.core.temporal import Duration
from happypoisson.load.config import GeneratorBuilder
from happypoisson.load.driver import expected_events, run_ticks
from happypoisson.load.gap_provider import BufferPolicy
from happypoisson.load.reference_unit import ReferenceUnit
from happypoisson.load.uniform import NumpyUniformSource
from happypoisson.logging_config import enable_console_logging


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="python -m happypoisson",
        description="Simulate Poisson arrivals on a virtual tick clock",
    )
    parser.add_argument("--rate", type=int, required=True, help="Events per reference unit")
    parser.add_argument(
        "--unit",
        default="HOUR",
        help="Reference unit (%(default)s); one of: " + ", ".join(u.name for u in ReferenceUnit),
    )
    parser.add_argument(
        "--tick-seconds",
        type=float,
        default=1.0,
        help="Virtual clock tick size in seconds (default: %(default)s)",
    )
    parser.add_argument("--ticks", type=int, required=True, help="Ticks per run")
    parser.add_argument("--runs", type=int, default=1, help="Independent runs (default: %(default)s)")
    parser.add_argument("--seed", type=int, default=None, help="Seed for the first run")
    parser.add_argument(
        "--buffer-size",
        type=int,
        default=0,
        metavar="N",
        help="Precompute N gaps per generator (default: unbuffered)",
    )
    parser.add_argument(
        "--refresh-buffer",
        action="store_true",
        help="Redraw the buffer each time it wraps instead of replaying it",
    )
    parser.add_argument("--log-level", default=None, help="Enable console logging at this level")
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    if args.log_level:
        enable_console_logging(level=args.log_level)

    try:
        unit = ReferenceUnit.parse(args.unit)
        tick = Duration.from_seconds(args.tick_seconds)
        if args.ticks < 0 or args.runs <= 0:
            raise ValueError("--ticks must be >= 0 and --runs must be > 0")
        policy = BufferPolicy.REFRESH if args.refresh_buffer else BufferPolicy.RECYCLE
        totals = []
        expected = expected_events(args.rate, unit, tick.nanoseconds * args.ticks)
        for run in range(args.runs):
            seed = None if args.seed is None else args.seed + run
            clock = TickClock(tick)
            generator = (
                GeneratorBuilder(args.rate, unit)
                .with_clock(clock)
                .with_uniform_source(NumpyUniformSource(seed))
                .with_buffering(args.buffer_size, policy)
                .build()
            )
            summary = run_ticks(generator, clock, args.ticks)
            totals.append(summary.total)
            deviation = summary.deviation_pct(expected) if expected > 0 else 0.0
            print(
                f"run {run + 1:>3}: total={summary.total} "
                f"max/tick={summary.max_per_tick} deviation={deviation:.3f}%"
            )
    except (ValueError, OverflowError) as e:
        print(f"error: {e}", file=sys.stderr)
        return 2

    mean_total = sum(totals) / len(totals)
    print(f"expected={expected:.1f} mean={mean_total:.1f}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
