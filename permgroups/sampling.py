"""
Random elements of permutation groups.

Two sources are available:

* `random_element(chain)` samples uniformly, using a complete stabilizer
  chain. Each level contributes a uniformly chosen coset representative.

* `ProductReplacement` produces approximately uniform elements from just a
  generating set by a random walk on tuples of group elements. It is much
  cheaper to set up and is what the randomized Schreier-Sims algorithm feeds
  on, but consecutive samples are correlated and the distribution is only
  close to uniform.
"""

import logging

from .config import Config

logger = logging.getLogger(__name__)


def random_element(chain, rng=None):
    """Return a uniformly distributed element of the group of chain.
    """
    return chain.random_element(rng)


class ProductReplacement:
    """Generate approximately uniform random elements of a group.

    The state is a list of slots holding a generating set of the group, padded
    by repeating the generators, and a ring of accumulators. Each step picks
    two different slots, multiplies the first by the second (or its inverse)
    from a randomly chosen side and folds the new slot into the next
    accumulator, which is returned. Replacing a slot this way keeps the slots
    generating the group. Reading the results from the accumulators instead
    of the slots is the "rattle" variant described in GAP's documentation.
    """
    def __init__(self, cfg=None):
        self.cfg = cfg or Config()
        self.gens = []
        self.slots = []
        self.accus = []
        self.accu = 0
        self.new_gens = False

    @classmethod
    def from_gens(cls, gens, cfg=None):
        rng = cls(cfg)
        for gen in gens:
            rng.add_gen(gen)
        return rng

    def add_gen(self, gen):
        """Add a generator to the group.
        """
        if not self.accus:
            self.accus = [gen.one()] * self.cfg.rng_accus
        self.gens.append(gen)
        self.slots.append(gen)
        self.new_gens = True

    def sample(self):
        """Sample a random element of the group.
        """
        if not self.gens:
            raise ValueError('no generators to sample from')

        if self.new_gens:
            self.new_gens = False
            self.pad()
            self.scramble()

        return self.stir()

    __call__ = sample

    def pad(self):
        """Fill up the slots by cycling through the generators.
        """
        size = max(2, len(self.gens) + self.cfg.rng_extra_slots)
        while len(self.slots) < size:
            self.slots.append(self.gens[len(self.slots) % len(self.gens)])

    def stir(self):
        """Perform a random replacement step.
        """
        rng = self.cfg.rng

        i, j = rng.sample(range(len(self.slots)), 2)
        factor = self.slots[j]
        if rng.randrange(2):
            factor = factor.inv()

        self.accu = (self.accu + 1) % len(self.accus)
        if rng.randrange(2):
            self.slots[i] = p = self.slots[i] * factor
            self.accus[self.accu] = r = self.accus[self.accu] * p
        else:
            self.slots[i] = p = factor * self.slots[i]
            self.accus[self.accu] = r = p * self.accus[self.accu]
        self.cfg.stats.products += 2
        return r

    def scramble(self):
        """Mix the slots after generators were added.
        """
        steps = max(
            self.cfg.rng_scramble,
            self.cfg.rng_scramble_factor * len(self.gens))

        logger.debug('scrambling product replacement state with %d steps',
                     steps)
        for _ in range(steps):
            self.stir()
