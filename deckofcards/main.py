"""
Console entry point: play at the card table from a terminal.

    deck-of-cards --seed 42 --policy swap
"""

import argparse
import logging
import os
import sys
from typing import List, Optional

from deckofcards.adapters import CLIAdapter, PlatformAdapter
from deckofcards.config import TableConfig, parse_pick_policy
from deckofcards.exceptions import ConfigError
from deckofcards.table.constants import PickPolicy
from deckofcards.table.machine import HandStateMachine

logger = logging.getLogger(__name__)

LOG_LEVEL = os.getenv("LOG_LEVEL", "WARNING").upper()


def setup_logging(level: str = LOG_LEVEL) -> None:
    """Call once at program start."""
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.WARNING),
        format="%(asctime)s.%(msecs)03d [%(levelname)s] %(name)s: %(message)s",
        datefmt="%H:%M:%S",
    )


def play(machine: HandStateMachine, adapter: PlatformAdapter) -> int:
    """
    Run a session: render, take one intent, apply it, render again.

    Args:
        machine: The table to play on
        adapter: Where the table is shown and intents come from

    Returns:
        Number of intents handled
    """
    unsubscribe = machine.event_bus.on_any(
        lambda event: adapter.notify_event(event[0], event[1])
    )
    handled = 0

    adapter.initialize()
    try:
        adapter.render_table_state(machine.view())
        while True:
            request = adapter.request_intent()
            if request is None:
                break

            intent, args = request
            machine.dispatch(intent, *args)
            handled += 1
            logger.debug("%s -> %s", intent, machine.last_outcome)

            adapter.render_table_state(machine.view())
    finally:
        unsubscribe()
        adapter.shutdown()

    return handled


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Draw, deal, pick, swap and toss cards from a 52-card deck."
    )
    parser.add_argument(
        "-s",
        "--seed",
        type=int,
        default=None,
        help="random seed for a reproducible table (default: $DECK_SEED or random)",
    )
    parser.add_argument(
        "-p",
        "--policy",
        choices=[policy.value for policy in PickPolicy],
        default=None,
        help="what picking a second card does (default: $DECK_PICK_POLICY or swap)",
    )
    parser.add_argument(
        "--log-level",
        default=LOG_LEVEL,
        help="logging level (default: $LOG_LEVEL or WARNING)",
    )
    return parser.parse_args(argv)


def build_config(args: argparse.Namespace) -> TableConfig:
    """Merge command-line options over the environment configuration."""
    config = TableConfig.from_env()
    seed = args.seed if args.seed is not None else config.seed
    policy = parse_pick_policy(args.policy) if args.policy else config.pick_policy
    return TableConfig(seed=seed, pick_policy=policy, deal_sizes=config.deal_sizes)


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)
    setup_logging(args.log_level)

    try:
        config = build_config(args)
    except ConfigError as e:
        print(f"error: {e}", file=sys.stderr)
        return 2

    machine = HandStateMachine(config)
    play(machine, CLIAdapter())
    return 0


if __name__ == "__main__":
    sys.exit(main())
