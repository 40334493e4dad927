"""
Run a lane duel.

    python -m game.duel                     # Arcade window
    python -m game.duel --headless --ticks 2000 --seed 42
"""

import argparse
import random

from .clock import SimulationClock
from .config import CLOCK_CONFIG
from .engine import DuelEngine
from .utils import seed_everything


def run_headless(engine: DuelEngine, ticks: int, fire_prob: float = 0.02):
    """Tick synchronously with heroes firing at random; returns final scores"""
    clock = SimulationClock(engine)
    n = engine.state.n_heroes
    for _ in range(ticks):
        for index in range(n):
            if random.random() < fire_prob:
                engine.commands.fire(index)
        clock.step()
    return engine.snapshot().scores


def main():
    parser = argparse.ArgumentParser(description="Two-hero lane duel simulation")
    parser.add_argument(
        "--headless",
        action="store_true",
        help="Run without a window and print the final scores",
    )
    parser.add_argument(
        "--ticks",
        type=int,
        default=1800,
        help="Number of ticks for a headless run (default: 1800)",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Random seed for headless firing (default: none)",
    )
    parser.add_argument(
        "--period-ms",
        type=float,
        default=CLOCK_CONFIG["period_ms"],
        help=f"Tick period in milliseconds (default: {CLOCK_CONFIG['period_ms']})",
    )
    parser.add_argument(
        "--enforce-fire-interval",
        action="store_true",
        help="Reject shots fired faster than each hero's fire interval",
    )

    args = parser.parse_args()

    engine = DuelEngine(
        period_ms=args.period_ms,
        enforce_fire_interval=args.enforce_fire_interval,
    )

    if args.headless:
        seed_everything(args.seed)
        scores = run_headless(engine, args.ticks)
        print(f"\n{'='*60}")
        print(f"Ran {args.ticks:,} ticks")
        for index, score in enumerate(scores):
            print(f"Hero {index + 1}: {score}")
        print(f"{'='*60}\n")
        return

    from .render import run_window
    run_window(engine)


if __name__ == "__main__":
    main()
