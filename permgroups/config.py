from dataclasses import dataclass, field
from random import Random


@dataclass
class Stats:
    products: int = 0
    rounds: int = 0


@dataclass
class Config:
    # Use the randomized Monte Carlo Schreier-Sims algorithm when no group
    # order is known. The result is verified by sifting all Schreier
    # generators, so it is correct either way.
    monte_carlo: bool = False

    # Exit the Monte Carlo algorithm after the given number of rounds without
    # progress.
    exit_rounds: int = 10

    # For Monte Carlo, whenever a sift residue is added to some stabilizer
    # subgroup, also add this many random Schreier generators.
    random_schreier_gens: int = 0

    # Parameters for product replacement random element generation. See GAP's
    # documentation for ProductReplacer. The extra slots are filled by
    # repeating the generators.
    rng_accus: int = 5
    rng_extra_slots: int = 5
    rng_scramble: int = 30
    rng_scramble_factor: int = 4

    stats: Stats = field(default_factory=lambda: Stats())
    rng: Random = field(default_factory=lambda: Random())
