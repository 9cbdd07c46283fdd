"""
Permutation groups given by generators.

The stabilizer chain and the order of a group are only computed when they are
first needed and then kept for the lifetime of the group.
"""

import logging
import sys
import threading

from .backtrack import backtrack, iter_backtrack, search, find
from .config import Config
from .orbits import Orbit, Transversal
from .permutations import Permutation, identity as identity_perm
from .sampling import ProductReplacement
from .schreier_sims import schreier_sims

logger = logging.getLogger(__name__)


class PermutationGroup:
    """The group generated by a list of permutations.

    If the order of the group is known in advance it can be passed and is then
    used to build the stabilizer chain with the faster randomized
    Schreier-Sims algorithm. The order is only trusted once the chain confirms
    it, so `order()` still builds the chain and raises ValueError if the
    generators generate a group of a different order.

    A complete stabilizer chain can be passed as well, in which case both it
    and the order are checked against the generators unless check is False.
    """
    def __init__(self, gens, order=None, chain=None, check=True,
                 transversal_type=Transversal, cfg=None):
        self._gens = list(gens)
        self.transversal_type = transversal_type
        self.cfg = cfg or Config()

        self._order = None
        self._order_hint = None
        self._chain = None
        self._lock = threading.RLock()
        self._pseudorandom = None

        if chain is not None:
            if order is None:
                order = chain.order()
            if check:
                if chain.order() != order:
                    raise ValueError(
                        f'stabilizer chain has order {chain.order()}, '
                        f'expected {order}')
                for g in self._gens:
                    if g not in chain:
                        raise ValueError(
                            f'generator {g} is not in the stabilizer chain')
            self._chain = chain
            self._order = chain.order()
        elif order is not None:
            self._order_hint = int(order)

    def __repr__(self):
        return 'PermutationGroup([%s])' % ', '.join(map(str, self._gens))

    def unsafe_gens(self):
        """Return the generators without copying.

        The returned list may alias internal state of the group and must not
        be modified or leave the caller's scope. Use `gens` for that.
        """
        return self._gens

    def gens(self, i=None):
        if i is not None:
            return self._gens[i]
        return list(self._gens)

    def knows_order(self):
        return self._order is not None or self._order_hint is not None

    def knows_stabilizer_chain(self):
        return self._chain is not None

    def stabilizer_chain(self):
        """Return the stabilizer chain, computing it on first use.
        """
        if self._chain is None:
            with self._lock:
                if self._chain is None:
                    logger.debug('computing stabilizer chain of %r '
                                 '(known order: %s)', self, self._order_hint)
                    self._chain = schreier_sims(
                        self._gens, self._order_hint, self.transversal_type,
                        cfg=self.cfg)
        return self._chain

    def order(self):
        """Return the order of the group, computing it on first use.
        """
        if self._order is None:
            with self._lock:
                if self._order is None:
                    self._order = self.stabilizer_chain().order()
        return self._order

    def __len__(self):
        # practical limit when iterating
        return min(self.order(), sys.maxsize)

    def __contains__(self, g):
        return g in self.stabilizer_chain()

    def one(self):
        if self._gens:
            return self._gens[0].one()
        return identity_perm(Permutation)

    def degree(self):
        return max((g.degree() for g in self._gens), default=1)

    def base(self):
        return self.stabilizer_chain().basis()

    def orbit(self, point):
        """Return the orbit of point under the group.
        """
        return Orbit(point, self._gens or [self.one()])

    def __iter__(self):
        return iter_backtrack(self.stabilizer_chain())

    def elements(self):
        """Return a list of all elements of the group.
        """
        return backtrack(self.stabilizer_chain())

    def search(self, oracle, predicate=None):
        """Lazily yield the elements accepted by the oracle.
        """
        return search(self.stabilizer_chain(), predicate or (lambda g: True),
                      oracle)

    def find(self, predicate, oracle=None):
        """Return some element satisfying predicate, or None.
        """
        return find(self.stabilizer_chain(), predicate, oracle)

    def perm_by_images(self, images):
        """Return the element mapping the base points to images.
        """
        return self.stabilizer_chain().perm_by_images(images)

    def random_element(self, rng=None):
        """Return a uniformly distributed random element.
        """
        return self.stabilizer_chain().random_element(rng or self.cfg.rng)

    def pseudorandom_element(self):
        """Return an approximately uniform random element.

        This uses product replacement and doesn't need a stabilizer chain.
        """
        if not self._gens:
            return self.one()
        with self._lock:
            if self._pseudorandom is None:
                self._pseudorandom = ProductReplacement.from_gens(
                    self._gens, self.cfg)
            return self._pseudorandom.sample()

    def pointwise_stabilizer(self, points):
        """Return the subgroup of elements fixing each of points.
        """
        # one base level per distinct point
        points = list(dict.fromkeys(points))
        chain = schreier_sims(self._gens, self.order(), self.transversal_type,
                              base=points, cfg=self.cfg)
        stab = chain.node(len(points))
        return PermutationGroup(stab.generators(), stab.order(), stab,
                                check=False,
                                transversal_type=self.transversal_type,
                                cfg=self.cfg)
