"""
Computational group theory for finite permutation groups.

This implements permutations, orbits and transversals, stabilizer chains built
by the Schreier-Sims algorithm and backtrack search over them. It is meant for
exploring how these algorithms work on small to medium sized groups. Well tuned
implementations of permutation group algorithms can be found in the open
source GAP computer algebra system (gap-system.org).
"""

from .backtrack import (
    backtrack, backtrack_stack, iter_backtrack, preserves_blocks, stabilizes,
    search, find)
from .chain import StabilizerChain
from .config import Config, Stats
from .errors import (
    InvalidPermutation, EmptyGeneratorSet, PointNotInOrbit, ImpossibleImage,
    IncompleteStrongGeneratingSet, ParseError, InvalidCharacterError,
    MissingOpenError, StraySeparatorError, StrayTerminatorError,
    EmptyCycleError, UnterminatedCycleError)
from .groups import PermutationGroup
from .orbits import (
    image_action, orbit_producer, AbstractOrbit, Orbit, Transversal,
    FactoredTransversal, SchreierTree, representative)
from .parsing import (
    string_to_cycles, parse_perm, parse_perm_regex, parse_perm_list, perm)
from .permutations import (
    AbstractPermutation, Permutation, CyclePermutation, identity, from_cycles,
    mult_perms)
from .sampling import ProductReplacement, random_element
from .schreier_sims import schreier_sims, verify

__all__ = [
    'AbstractPermutation', 'Permutation', 'CyclePermutation', 'identity',
    'from_cycles', 'mult_perms',
    'string_to_cycles', 'parse_perm', 'parse_perm_regex', 'parse_perm_list',
    'perm',
    'image_action', 'orbit_producer', 'AbstractOrbit', 'Orbit', 'Transversal',
    'FactoredTransversal', 'SchreierTree', 'representative',
    'StabilizerChain', 'schreier_sims', 'verify',
    'PermutationGroup',
    'backtrack', 'backtrack_stack', 'iter_backtrack', 'preserves_blocks',
    'stabilizes', 'search', 'find',
    'ProductReplacement', 'random_element',
    'Config', 'Stats',
    'InvalidPermutation', 'EmptyGeneratorSet', 'PointNotInOrbit',
    'ImpossibleImage', 'IncompleteStrongGeneratingSet', 'ParseError',
    'InvalidCharacterError', 'MissingOpenError', 'StraySeparatorError',
    'StrayTerminatorError', 'EmptyCycleError', 'UnterminatedCycleError',
]
