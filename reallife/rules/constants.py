"""Rules — the fixed numeric constants of the turn transition.

Kept in one frozen dataclass so a whole turn is parameterised by a single
value, and so the YAML config can override them for experiments.
"""

from __future__ import annotations

from dataclasses import dataclass

from reallife.errors import ConfigError


@dataclass(frozen=True)
class Rules:
    """Constants governing hatching, reproduction, and blooming.

    Attributes:
        starting_life_energy: Energy of a freshly hatched life, and the
            cost a parent pays to lay an egg.
        reproduction_threshold: Energy at which a life tries to reproduce.
        bloom_neighbour_count: Exact number of Resource neighbours that
            makes an Empty cell bloom sparsely.
        bloom_energy_threshold: Summed neighbouring Resource energy at
            which an Empty cell blooms densely.
        sparse_bloom_energy: Energy of a sparse bloom.
        dense_bloom_energy: Energy of a dense bloom.
    """

    starting_life_energy: int = 10
    reproduction_threshold: int = 50
    bloom_neighbour_count: int = 4
    bloom_energy_threshold: int = 20
    sparse_bloom_energy: int = 1
    dense_bloom_energy: int = 2

    @property
    def egg_hatch_steps(self) -> int:
        """Turns a newly laid egg waits before hatching."""
        return 2 * self.starting_life_energy

    def validate(self) -> None:
        """Check every constant is in range.

        Raises:
            ConfigError: If a constant is not positive, or the reproduction
                threshold would leave a parent with no energy.
        """
        for name in (
            "starting_life_energy",
            "reproduction_threshold",
            "bloom_neighbour_count",
            "bloom_energy_threshold",
            "sparse_bloom_energy",
            "dense_bloom_energy",
        ):
            if getattr(self, name) <= 0:
                msg = f"{name} must be positive, got {getattr(self, name)}"
                raise ConfigError(msg)
        if self.reproduction_threshold <= self.starting_life_energy:
            msg = (
                "reproduction_threshold must exceed starting_life_energy "
                f"({self.reproduction_threshold} <= {self.starting_life_energy})"
            )
            raise ConfigError(msg)
        if self.bloom_neighbour_count > 8:
            msg = f"bloom_neighbour_count cannot exceed 8, got {self.bloom_neighbour_count}"
            raise ConfigError(msg)
