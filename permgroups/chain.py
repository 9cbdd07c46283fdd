"""
Stabilizer chains.

A stabilizer chain for a group G with base (b_0, ..., b_{d-1}) is a sequence of
nested subgroups

    G = G_0 >= G_1 >= ... >= G_d = 1,   G_{k+1} = Stab_{G_k}(b_k)

where each level stores a transversal for the orbit of b_k under G_k. The
order of G is the product of the sizes of these orbits and every element of G
is uniquely determined by the images of the base points.

Here a chain is represented by its first node. Every node stores the base
point of its level, the strong generators that were added at this level (they
all move the base point), the transversal and the chain for the stabilizer
subgroup. The last node has no base point and represents the trivial group.

The code that builds chains lives in `permgroups.schreier_sims`.
"""

import logging
import math

from .config import Config
from .errors import PointNotInOrbit, ImpossibleImage
from .orbits import Transversal
from .permutations import Permutation, identity as identity_perm

logger = logging.getLogger(__name__)


class StabilizerChain:
    """A (possibly incomplete) stabilizer chain of a permutation group.

    The base parameter specifies a prefix of the base that will be used. It
    will be extended automatically as necessary. Repeated points are only
    used once, as base points must be distinct.

    transversal_type selects how each level stores its coset representatives,
    usually `Transversal` or `SchreierTree`.
    """
    def __init__(self, transversal_type=Transversal, base=(), cfg=None,
                 identity=None):
        self.cfg = cfg or Config()
        self.transversal_type = transversal_type
        self.identity = identity if identity is not None \
            else identity_perm(Permutation)

        self.gens = []
        self.basepoint = None
        self.transversal = None
        self.stab = None

        base = list(dict.fromkeys(base))
        if base:
            self.basepoint = base[0]
            self.stab = StabilizerChain(
                transversal_type, base[1:], self.cfg, self.identity)
            self.rebuild_transversal()

    def nodes(self, prefix=None):
        """Return all nodes of the chain, including the trivial last one.
        """
        if prefix is None:
            prefix = []
        prefix.append(self)
        if self.stab is None:
            return prefix
        return self.stab.nodes(prefix)

    def levels(self):
        """Return the nodes that have a base point.
        """
        return self.nodes()[:-1]

    def depth(self):
        return len(self.levels())

    def node(self, k):
        """Return the chain of the k-th stabilizer G_k.
        """
        return self.nodes()[k]

    def basis(self, k=None):
        """Return the base points, or the k-th base point.
        """
        if k is not None:
            return self.levels()[k].basepoint
        return [node.basepoint for node in self.levels()]

    def transversals(self):
        return [node.transversal for node in self.levels()]

    def transversal_at(self, k):
        return self.levels()[k].transversal

    def generators(self):
        """Return a strong generating set for the group of this node.
        """
        if self.stab is None:
            return list(self.gens)
        return self.stab.generators() + self.gens

    def gens_at(self, k):
        """Return the strong generators of the k-th stabilizer G_k.
        """
        return self.node(k).generators()

    def order(self):
        """Compute the order of the group.
        """
        order = 1
        for node in self.levels():
            order *= len(node.transversal)
        return order

    def rebuild_transversal(self):
        """Recompute the orbit of the base point under the current generators.
        """
        gens = self.generators() or [self.identity]
        self.transversal = self.transversal_type(self.basepoint, gens)
        logger.debug('orbit of base point %d has size %d',
                     self.basepoint, len(self.transversal))

    def move_to_basepoint(self, g):
        """Multiply g by an inverse coset representative to fix basepoint.

        Returns `g * u^-1` where u is the representative of the image of
        basepoint under g. Raises PointNotInOrbit when that image is not in
        the orbit.
        """
        point = g(self.basepoint)
        u_inv = self.transversal.inverse_representative(point)
        self.cfg.stats.products += 1
        return g * u_inv

    def sift(self, g, depth=math.inf):
        """Sift g through the chain.

        Returns a pair (decomposition, residual) where decomposition lists the
        coset representatives [u_0, u_1, ..., u_k] that were stripped off and

            g == residual * u_k * ... * u_1 * u_0.

        If sifting got stuck because the image of some base point is not in
        that level's orbit, the residual moves that base point. Otherwise the
        residual fixes all base points and g is in the group if and only if
        the residual is the identity.
        """
        decomposition = []
        node = self
        while depth and node.basepoint is not None:
            point = g(node.basepoint)
            try:
                g = node.move_to_basepoint(g)
            except PointNotInOrbit:
                break
            decomposition.append(node.transversal[point])
            node = node.stab
            depth -= 1
        return decomposition, g

    def sift_residue(self, g, depth=math.inf):
        """Like sift but only return the residual.
        """
        node = self
        while depth and node.basepoint is not None:
            try:
                g = node.move_to_basepoint(g)
            except PointNotInOrbit:
                break
            node = node.stab
            depth -= 1
        return g

    def __contains__(self, g):
        return self.sift_residue(g).is_one()

    def perm_by_images(self, images):
        """Return the element mapping the k-th base point to images[k].

        Raises ImpossibleImage if no element of the group does that.
        """
        levels = self.levels()
        if len(images) != len(levels):
            raise ValueError(
                f'expected {len(levels)} base images, got {len(images)}')

        images = list(images)
        g = self.identity
        for k, node in enumerate(levels):
            point = images[k]
            if point not in node.transversal:
                raise ImpossibleImage(
                    f'no element maps base point {node.basepoint} to {point}')
            u = node.transversal[point]
            u_inv = node.transversal.inverse_representative(point)
            # the rest of the element lies in the stabilizer, so we pull the
            # remaining images back through u
            images[k + 1:] = [u_inv(i) for i in images[k + 1:]]
            g = u * g
        return g

    def random_element(self, rng=None):
        """Return a uniformly distributed random element of the group.

        Every element is uniquely a product u_{d-1} * ... * u_0 of coset
        representatives, so picking a uniformly random orbit point per level
        gives a uniformly random element.

        This is only correct if the chain is complete.
        """
        rng = rng or self.cfg.rng
        g = self.identity
        for node in self.levels():
            point = rng.choice(node.transversal.points)
            g = node.transversal[point] * g
            self.cfg.stats.products += 1
        return g

    def remove_redundant_basepoints(self):
        """Remove base points whose orbit is trivial.
        """
        if self.stab is None:
            return

        self.stab.remove_redundant_basepoints()

        if len(self.transversal) == 1:
            stab = self.stab
            self.__dict__.clear()
            self.__dict__.update(stab.__dict__)
            self.gens = list(self.gens)

    def __repr__(self):
        return (f'<StabilizerChain base={self.basis()} '
                f'orbits={[len(t) for t in self.transversals()]}>')
