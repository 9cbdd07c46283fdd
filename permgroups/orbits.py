"""
Orbits, transversals and Schreier trees.

All of these are built by the same breadth-first traversal, `orbit_producer`,
which discovers the orbit of a point under a generating set and reports every
newly discovered point. The different structures only differ in what they
record per discovery:

    Orbit                nothing
    Transversal          the full coset representative T[delta] * s
    FactoredTransversal  the representative as a word in the generators
    SchreierTree         the single generator s that discovered the point

Group elements act from the right via `action(point, g)`, which defaults to
`g(point)` for permutations acting on integers. Passing `operator.mul` gives
the action of a group on itself by right multiplication.
"""

from .errors import EmptyGeneratorSet, PointNotInOrbit
from .permutations import AbstractPermutation, mult_perms


def image_action(point, g):
    """The natural action of a permutation on a point.
    """
    return g(point)


def _as_gens(gens):
    if isinstance(gens, AbstractPermutation):
        return [gens]
    return list(gens)


def orbit_producer(x, gens, on_discovery=None, action=image_action):
    """Compute the orbit of x under the group generated by gens.

    For every point gamma that is discovered as gamma = action(delta, s),
    `on_discovery(delta, s, gamma)` is called exactly once. Points are
    processed in discovery order, so the orbit is serialized breadth-first.

    Returns the orbit as a list and as a set.
    """
    gens = _as_gens(gens)
    if not gens:
        raise EmptyGeneratorSet('groups need generators')

    orbit = [x]
    seen = {x}

    i = 0
    while i < len(orbit):
        delta = orbit[i]
        i += 1
        for s in gens:
            gamma = action(delta, s)
            if gamma in seen:
                continue
            seen.add(gamma)
            orbit.append(gamma)
            if on_discovery is not None:
                on_discovery(delta, s, gamma)

    return orbit, seen


class AbstractOrbit:
    """Common interface of all orbit structures.

    Supports `len`, iteration in discovery order, `point in orbit` in O(1) and,
    for the subclasses that record representatives, `orbit[point]`.
    """

    def __init__(self, x, gens, action=image_action):
        self.seed = x
        self.action = action
        self.points, self._seen = orbit_producer(
            x, _as_gens(gens), self._record, action)

    def _record(self, delta, s, gamma):
        pass

    def __len__(self):
        return len(self.points)

    def __iter__(self):
        return iter(self.points)

    def __contains__(self, point):
        return point in self._seen

    def _check(self, point):
        if point not in self._seen:
            raise PointNotInOrbit(
                f'{point!r} is not in the orbit of {self.seed!r}')

    def __getitem__(self, point):
        raise TypeError(f'{type(self).__name__} does not store representatives')

    def inverse_representative(self, point):
        """Return an element mapping point to the seed.
        """
        return self[point].inv()

    def __repr__(self):
        return f'{type(self).__name__}({self.seed!r}, size={len(self)})'


class Orbit(AbstractOrbit):
    """The plain orbit of a point.
    """


class Transversal(AbstractOrbit):
    """The orbit of a point together with a coset representative per point.

    For every point y of the orbit `action(seed, T[y]) == y` and the seed is
    represented by the identity.
    """

    def __init__(self, x, gens, action=image_action):
        gens = _as_gens(gens)
        self.reps = {}
        if gens:
            self.reps[x] = gens[0].one()
        super().__init__(x, gens, action)

    def _record(self, delta, s, gamma):
        self.reps[gamma] = self.reps[delta] * s

    def __getitem__(self, point):
        self._check(point)
        return self.reps[point]


class FactoredTransversal(AbstractOrbit):
    """A transversal storing each representative as a list of generators.
    """

    def __init__(self, x, gens, action=image_action):
        gens = _as_gens(gens)
        self.words = {x: []}
        self._one = gens[0].one() if gens else None
        super().__init__(x, gens, action)

    def _record(self, delta, s, gamma):
        self.words[gamma] = self.words[delta] + [s]

    def word(self, point):
        self._check(point)
        return list(self.words[point])

    def __getitem__(self, point):
        word = self.word(point)
        if not word:
            return self._one
        return mult_perms(word)


class SchreierTree(AbstractOrbit):
    """A transversal storing only the generator that discovered each point.

    The seed is mapped to the identity, which can't be confused with any
    generator that discovered a point. Representatives are reconstructed on
    demand by walking back to the seed, so lookups cost O(depth of the tree)
    but storage is O(size of the orbit).
    """

    def __init__(self, x, gens, action=image_action):
        gens = _as_gens(gens)
        self.tree = {}
        if gens:
            self.tree[x] = gens[0].one()
        self._inverses = {}
        super().__init__(x, gens, action)

    def _record(self, delta, s, gamma):
        self.tree[gamma] = s

    def _inverse(self, s):
        inv = self._inverses.get(s)
        if inv is None:
            self._inverses[s] = inv = s.inv()
        return inv

    def edges(self, point):
        """Yield the generators on the path from point back to the seed.

        Each is yielded together with its inverse, starting with the generator
        that discovered point.
        """
        self._check(point)
        while point != self.seed:
            s = self.tree[point]
            s_inv = self._inverse(s)
            yield s, s_inv
            point = self.action(point, s_inv)

    def __getitem__(self, point):
        g = self.tree[self.seed]
        for s, s_inv in self.edges(point):
            g = s * g
        return g

    def inverse_representative(self, point):
        g = self.tree[self.seed]
        for s, s_inv in self.edges(point):
            g = g * s_inv
        return g


def representative(y, orbit, tree, action=image_action, one=None):
    """Compute a representative g with action(x, g) == y from a Schreier tree.

    `orbit` is the orbit of x in discovery order (only its first point, x, is
    used) and `tree` maps each point other than x to the generator that
    discovered it. The identity is taken from the generators in `tree` unless
    given as `one`.
    """
    if not orbit:
        raise PointNotInOrbit(f'{y!r} is not in an empty orbit')
    x = orbit[0]

    if y != x and y not in tree:
        raise PointNotInOrbit(f'{y!r} is not in the orbit of {x!r}')

    if one is None:
        for s in tree.values():
            one = s.one()
            break
        else:
            raise EmptyGeneratorSet(
                "can't determine the identity from an empty Schreier tree")

    g = one
    current = y
    while current != x:
        s = tree[current]
        current = action(current, s.inv())
        g = s * g
    return g
