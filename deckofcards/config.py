"""
Configuration for the card table.

A ``TableConfig`` can be built directly, from a plain dictionary (as engines
receive their ``config``) or from environment variables.
"""

from dataclasses import dataclass, fields
from typing import Any, Dict, Mapping, Optional, Tuple
import os
import random

from deckofcards.exceptions import ConfigError
from deckofcards.table.constants import DEFAULT_DEAL_SIZES, FULL_DECK_SIZE, PickPolicy


@dataclass(frozen=True)
class TableConfig:
    """
    Settings for a card table.

    Attributes:
        seed: Random seed for reproducible tables; None for a fresh seed
        pick_policy: What clicking a second card in the hand does
        deal_sizes: Hand sizes offered as deal buttons
    """

    seed: Optional[int] = None
    pick_policy: PickPolicy = PickPolicy.SWAP
    deal_sizes: Tuple[int, ...] = DEFAULT_DEAL_SIZES

    def __post_init__(self):
        """Validate the configuration."""
        if self.seed is not None and (
            isinstance(self.seed, bool) or not isinstance(self.seed, int)
        ):
            raise ConfigError(f"seed must be an integer, got {self.seed!r}")

        if not isinstance(self.pick_policy, PickPolicy):
            raise ConfigError(f"Invalid pick policy: {self.pick_policy!r}")

        if not self.deal_sizes:
            raise ConfigError("deal_sizes cannot be empty")
        for size in self.deal_sizes:
            if isinstance(size, bool) or not isinstance(size, int):
                raise ConfigError(f"deal size must be an integer, got {size!r}")
            if not 0 < size <= FULL_DECK_SIZE:
                raise ConfigError(
                    f"deal size must be between 1 and {FULL_DECK_SIZE}, got {size}"
                )

    def make_rng(self) -> random.Random:
        """Create the random source for a table using this configuration."""
        return random.Random(self.seed)

    @classmethod
    def from_dict(cls, config: Optional[Mapping[str, Any]] = None) -> "TableConfig":
        """
        Build a configuration from plain values.

        Args:
            config: Mapping with any of ``seed``, ``pick_policy`` (name or
                    PickPolicy) and ``deal_sizes``

        Returns:
            The validated configuration

        Raises:
            ConfigError: On unknown keys or invalid values
        """
        config = dict(config or {})
        known = {f.name for f in fields(cls)}
        unknown = set(config) - known
        if unknown:
            raise ConfigError(f"Unknown config keys: {', '.join(sorted(unknown))}")

        kwargs: Dict[str, Any] = {}
        if config.get("seed") is not None:
            kwargs["seed"] = config["seed"]
        if "pick_policy" in config:
            kwargs["pick_policy"] = parse_pick_policy(config["pick_policy"])
        if "deal_sizes" in config:
            try:
                kwargs["deal_sizes"] = tuple(config["deal_sizes"])
            except TypeError:
                raise ConfigError(
                    f"deal_sizes must be a sequence, got {config['deal_sizes']!r}"
                ) from None

        return cls(**kwargs)

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "TableConfig":
        """
        Build a configuration from ``DECK_SEED`` and ``DECK_PICK_POLICY``.

        Args:
            environ: Mapping to read instead of ``os.environ``
        """
        environ = os.environ if environ is None else environ
        config: Dict[str, Any] = {}

        seed = environ.get("DECK_SEED")
        if seed:
            try:
                config["seed"] = int(seed)
            except ValueError:
                raise ConfigError(f"DECK_SEED must be an integer, got {seed!r}") from None

        policy = environ.get("DECK_PICK_POLICY")
        if policy:
            config["pick_policy"] = policy

        return cls.from_dict(config)


def parse_pick_policy(value: Any) -> PickPolicy:
    """
    Convert a policy name (``"pick"``/``"swap"``, any case) to a PickPolicy.

    Raises:
        ConfigError: If the name is not a known policy
    """
    if isinstance(value, PickPolicy):
        return value
    try:
        return PickPolicy(str(value).lower())
    except ValueError:
        choices = ", ".join(p.value for p in PickPolicy)
        raise ConfigError(
            f"Invalid pick policy: {value!r} (expected one of {choices})"
        ) from None
