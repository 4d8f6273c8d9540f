"""Config — load simulation parameters from YAML files.

Grid size, seeding densities, growth-event odds, and the turn rule
constants all live in YAML and are parsed into typed dataclasses here.
"""

from __future__ import annotations

from dataclasses import dataclass, field, fields
from pathlib import Path

import yaml

from reallife.errors import ConfigError
from reallife.rules.constants import Rules


@dataclass
class SimulationConfig:
    """Top-level simulation configuration.

    Attributes:
        seed: RNG seed for deterministic replay.
        world_size: Number of rows and columns of the grid.
        initial_life: Lives placed at start.
        initial_resources: Resources placed at start.
        life_energy: Inclusive (min, max) starting energy of placed lives.
        resource_energy: Inclusive (min, max) energy of placed resources.
        growth_chance: Probability of one exogenous growth event per turn.
        growth_amount: Inclusive (min, max) energy of a growth event.
        rules: Turn rule constants.
    """

    seed: int = 42
    world_size: int = 20

    initial_life: int = 8
    initial_resources: int = 40
    life_energy: tuple[int, int] = (10, 20)
    resource_energy: tuple[int, int] = (1, 10)

    growth_chance: float = 0.3
    growth_amount: tuple[int, int] = (1, 5)

    rules: Rules = field(default_factory=Rules)

    @classmethod
    def from_yaml(cls, path: str | Path) -> SimulationConfig:
        """Load configuration from a YAML file.

        Keys that are absent keep their defaults.

        Args:
            path: Path to the YAML config file.

        Returns:
            A populated, validated SimulationConfig instance.

        Raises:
            FileNotFoundError: If the config file does not exist.
            ConfigError: If a value is out of range.
        """
        path = Path(path)
        with path.open("r") as f:
            data = yaml.safe_load(f) or {}

        defaults = cls()
        rule_data = data.get("rules") or {}
        known = {f.name for f in fields(Rules)}
        unknown = set(rule_data) - known
        if unknown:
            msg = f"unknown rule keys: {', '.join(sorted(unknown))}"
            raise ConfigError(msg)

        config = cls(
            seed=data.get("seed", defaults.seed),
            world_size=data.get("world_size", defaults.world_size),
            initial_life=data.get("initial_life", defaults.initial_life),
            initial_resources=data.get(
                "initial_resources",
                defaults.initial_resources,
            ),
            life_energy=_pair(data, "life_energy", defaults.life_energy),
            resource_energy=_pair(
                data,
                "resource_energy",
                defaults.resource_energy,
            ),
            growth_chance=data.get("growth_chance", defaults.growth_chance),
            growth_amount=_pair(data, "growth_amount", defaults.growth_amount),
            rules=Rules(**rule_data),
        )
        config.validate()
        return config

    def validate(self) -> None:
        """Check all values are in range.

        Raises:
            ConfigError: On the first invalid value found.
        """
        if self.world_size <= 0:
            msg = f"world_size must be positive, got {self.world_size}"
            raise ConfigError(msg)
        if self.initial_life < 0 or self.initial_resources < 0:
            msg = "initial_life and initial_resources cannot be negative"
            raise ConfigError(msg)
        if self.initial_life + self.initial_resources > self.world_size**2:
            msg = (
                f"{self.initial_life + self.initial_resources} starting tiles "
                f"do not fit on a {self.world_size}x{self.world_size} grid"
            )
            raise ConfigError(msg)
        if not 0.0 <= self.growth_chance <= 1.0:
            msg = f"growth_chance must be within [0, 1], got {self.growth_chance}"
            raise ConfigError(msg)
        for name in ("life_energy", "resource_energy", "growth_amount"):
            lo, hi = getattr(self, name)
            if lo <= 0 or hi < lo:
                msg = f"{name} must be a positive (min, max) range, got ({lo}, {hi})"
                raise ConfigError(msg)
        self.rules.validate()


def _pair(data: dict, key: str, default: tuple[int, int]) -> tuple[int, int]:
    """Read a two-element ``[min, max]`` list from ``data``."""
    value = data.get(key)
    if value is None:
        return default
    if len(value) != 2:
        msg = f"{key} must be a [min, max] pair, got {value!r}"
        raise ConfigError(msg)
    return int(value[0]), int(value[1])
