"""
The Schreier-Sims algorithm for building stabilizer chains.

Three variants are implemented on top of the same primitives:

* The deterministic algorithm. Whenever a generator is added to some level of
  the chain, all Schreier generators of that level are sifted through the
  level below and any non-trivial residue is added there, recursively. The
  result is a complete chain.

* The randomized (Las Vegas) algorithm when the group order is known. Random
  elements from product replacement are sifted and their residues added until
  the order of the chain matches. As the order of an incomplete chain is always
  smaller than the group order, the result is complete. If the chain stops
  growing before it reaches the given order, it is completed by verification
  as below and a wrong order raises ValueError.

* The randomized Monte Carlo algorithm when the order is not known. It stops
  after a number of rounds without progress and is then verified by sifting all
  Schreier generators, adding any witness of incompleteness and starting over.

For an overview see Seress's "Permutation Group Algorithms", chapter 4.
"""

import logging

from .chain import StabilizerChain
from .config import Config
from .errors import IncompleteStrongGeneratingSet
from .orbits import Transversal
from .permutations import Permutation, identity as identity_perm
from .sampling import ProductReplacement

logger = logging.getLogger(__name__)


def schreier_generators(node):
    """Yield all Schreier generators of one level of a chain.

    For every orbit point a and every generator s this is
    `T[a] * s * T[s(a)]^-1`, an element fixing the base point.
    """
    transversal = node.transversal
    for s in node.generators():
        for a in list(transversal.points):
            node.cfg.stats.products += 2
            yield transversal[a] * s * \
                transversal.inverse_representative(s(a))


def add_gen(chain, gen):
    """Add a generator to the group of chain.
    """
    gen = chain.sift_residue(gen)

    if not gen.is_one():
        add_nonmember_gen(chain, gen)


def add_nonmember_gen(chain, gen, las_vegas=False):
    """Add a generator that is not a member of the group of chain yet.
    """
    if chain.basepoint is None:
        chain.basepoint = gen.first_moved()
        if chain.basepoint is None:
            return

        logger.debug('new base point %d', chain.basepoint)
        chain.stab = StabilizerChain(
            chain.transversal_type, cfg=chain.cfg, identity=chain.identity)

    if gen(chain.basepoint) == chain.basepoint:
        # we can add this generator directly to the stabilizer subgroup
        add_nonmember_gen(chain.stab, gen, las_vegas)
    else:
        chain.gens.append(gen)

    chain.rebuild_transversal()

    if chain.cfg.monte_carlo or las_vegas:
        add_random_schreier_gens(chain)
    else:
        add_all_schreier_gens(chain)


def add_all_schreier_gens(chain):
    """Add all Schreier generators to the stabilizer subgroup.
    """
    for schreier_gen in schreier_generators(chain):
        add_gen(chain.stab, schreier_gen)


def add_random_schreier_gens(chain):
    """Add some random Schreier generators to the stabilizer subgroup.

    Used for the randomized variants if cfg.random_schreier_gens is nonzero.
    """
    rng = chain.cfg.rng
    gens = chain.generators()
    orbit = chain.transversal.points
    for _ in range(chain.cfg.random_schreier_gens):
        gen = rng.choice(gens)
        a = rng.choice(orbit)
        schreier_gen = chain.transversal[a] * gen * \
            chain.transversal.inverse_representative(gen(a))

        # We can't use add_gen recursively for the randomized variants so we
        # manually sift and check for identity
        schreier_gen = chain.stab.sift_residue(schreier_gen)
        if not schreier_gen.is_one():
            add_nonmember_gen(chain.stab, schreier_gen, las_vegas=True)


def random_round(chain, rng):
    """One iteration of the randomized Schreier-Sims algorithm.

    Returns whether a new generator was found.
    """
    chain.cfg.stats.rounds += 1
    p = chain.sift_residue(rng.sample())
    p_is_missing = not p.is_one()
    if p_is_missing:
        add_nonmember_gen(chain, p, las_vegas=True)
    return p_is_missing


def build(chain, rng, known_order=None):
    """Run the randomized algorithm until the exit condition is met.

    Without known_order it exits after cfg.exit_rounds many rounds without
    progress. With known_order it runs until the chain reaches that order. If
    it stops making progress before that, the chain is completed by
    verification instead and the given order is checked against the result.
    """
    stationary_rounds = 0
    if known_order is None:
        while stationary_rounds < chain.cfg.exit_rounds:
            stationary_rounds += 1
            if random_round(chain, rng):
                stationary_rounds = 0
        return

    while stationary_rounds < chain.cfg.exit_rounds:
        order = chain.order()
        if order == known_order:
            return
        if order > known_order:
            raise ValueError(
                f'the generators generate a group of order at least {order}, '
                f'larger than the given order {known_order}')
        stationary_rounds += 1
        if random_round(chain, rng):
            stationary_rounds = 0

    logger.debug('stuck at order %d below the given order %d, verifying',
                 chain.order(), known_order)
    build_verified(chain, rng)
    if chain.order() != known_order:
        raise ValueError(
            f'the generators generate a group of order {chain.order()}, '
            f'not the given order {known_order}')


def verify_level(node):
    """Sift all Schreier generators of one level through the next.

    Raises an IncompleteStrongGeneratingSet exception carrying the residue as
    witness if verification fails.
    """
    if node.basepoint is None:
        return

    for schreier_gen in schreier_generators(node):
        residue = node.stab.sift_residue(schreier_gen)
        if not residue.is_one():
            raise IncompleteStrongGeneratingSet(
                'incomplete strong generating set detected'
                ' while sifting Schreier generators',
                witness=residue)


def verify(chain):
    """Verify every level of the chain, starting at the bottom.
    """
    for node in reversed(chain.levels()):
        verify_level(node)


def build_verified(chain, rng):
    """Run the Monte Carlo algorithm until verification succeeds.

    Returns the number of verification failures.
    """
    failures = 0
    build(chain, rng)
    while True:
        try:
            verify(chain)
        except IncompleteStrongGeneratingSet as e:
            failures += 1
            logger.debug('verification failed, adding witness %s', e.witness)
            add_nonmember_gen(chain, e.witness, las_vegas=True)
            rng.add_gen(e.witness)
            build(chain, rng)
        else:
            break
    return failures


def schreier_sims(gens, order=None, transversal_type=Transversal, base=(),
                  cfg=None):
    """Build a complete stabilizer chain for the group generated by gens.

    If the order of the group is known, passing it allows using the much faster
    randomized algorithm. Without it the deterministic algorithm is used,
    unless cfg.monte_carlo is set, in which case a verified Monte Carlo build
    is performed.

    base is used as a prefix of the base of the chain.
    """
    cfg = cfg or Config()
    gens = list(gens)
    one = gens[0].one() if gens else identity_perm(Permutation)

    chain = StabilizerChain(transversal_type, base, cfg, one)

    if order is None and not cfg.monte_carlo:
        for gen in gens:
            add_gen(chain, gen)
        logger.debug('deterministic Schreier-Sims: base %s, order %d, '
                     '%d products', chain.basis(), chain.order(),
                     cfg.stats.products)
        return chain

    for gen in gens:
        residue = chain.sift_residue(gen)
        if not residue.is_one():
            add_nonmember_gen(chain, residue, las_vegas=True)

    if chain.order() == order or (order is None and not gens):
        return chain
    if not gens:
        raise ValueError(f'the trivial group does not have order {order}')

    rng = ProductReplacement.from_gens(gens, cfg)
    if order is not None:
        build(chain, rng, order)
        failures = 0
    else:
        failures = build_verified(chain, rng)

    logger.debug('randomized Schreier-Sims: base %s, order %d, %d rounds, '
                 '%d verification failures, %d products', chain.basis(),
                 chain.order(), cfg.stats.rounds, failures,
                 cfg.stats.products)
    return chain
