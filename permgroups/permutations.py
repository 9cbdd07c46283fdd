"""
Permutations of the points 1..n.

Every permutation type derives from AbstractPermutation and needs to implement
just two things: the image of a point (`__call__`) and `degree`. Everything
else, products, inverses, powers, equality, hashing and cycle notation, is
defined on top of those, so different representations can be mixed freely,
e.g. as keys of the same dict.

A permutation acts on the right: `(p * q)(i) == q(p(i))`, i.e. `p` is applied
first.
"""

from abc import ABC, abstractmethod
import math

from .errors import InvalidPermutation


def check_images(images):
    """Raise an exception if images is not a permutation of 1..n.
    """
    if sorted(images) != list(range(1, len(images) + 1)):
        raise InvalidPermutation(
            f'image vector {list(images)!r} does not define a permutation')


class AbstractPermutation(ABC):
    """A permutation of 1..n with implicit fixed points beyond its degree.

    Subclasses must implement `__call__` and `degree` and accept
    `Cls(images, check=True)` as constructor, where `images[i - 1]` is the
    image of `i`. Passing `check=False` skips validation and must only be done
    when the caller already knows that `images` is a bijection.
    """

    __slots__ = ()

    @abstractmethod
    def __init__(self, images=(), check=True):
        pass

    @abstractmethod
    def __call__(self, i):
        """Return the image of the point i.
        """

    @abstractmethod
    def degree(self):
        """Return the minimal n such that all points larger than n are fixed.

        By convention the identity has degree 1.
        """

    def images(self):
        """Return the images of 1..degree as a tuple.
        """
        return tuple(self(i) for i in range(1, self.degree() + 1))

    def one(self):
        return type(self)((), False)

    def is_one(self):
        return self.degree() == 1

    def next_moved(self, d):
        """Return the first point i >= d with p(i) != i or None.
        """
        for i in range(d, self.degree() + 1):
            if self(i) != i:
                return i
        return None

    def first_moved(self):
        return self.next_moved(1)

    def __mul__(self, other):
        if not isinstance(other, AbstractPermutation):
            return NotImplemented
        deg = max(self.degree(), other.degree())
        return type(self)([other(self(i)) for i in range(1, deg + 1)], False)

    def inv(self):
        """Inverse of a permutation.
        """
        deg = self.degree()
        inv = [0] * deg
        for i in range(1, deg + 1):
            inv[self(i) - 1] = i
        return type(self)(inv, False)

    def _power_by_composition(self, n):
        deg = self.degree()
        images = []
        for i in range(1, deg + 1):
            k = i
            for _ in range(n):
                k = self(k)
            images.append(k)
        return type(self)(images, False)

    def __pow__(self, n):
        """Take a permutation to the nth power.
        """
        if n < 0:
            return self.inv() ** -n
        if n == 0:
            return self.one()
        if n <= 10:
            return self._power_by_composition(n)

        q = self ** (n >> 1)
        q = q * q
        if n & 1:
            q = q * self
        return q

    def cycles(self):
        """Return the cycle decomposition, fixed points included.

        Cycles are listed in the order of their smallest point, each starting
        with that point.
        """
        seen = set()
        out = []
        for i in range(1, self.degree() + 1):
            if i in seen:
                continue
            cycle = [i]
            seen.add(i)
            j = self(i)
            while j != i:
                seen.add(j)
                cycle.append(j)
                j = self(j)
            out.append(cycle)
        return out

    def order(self):
        """Return the order of the permutation as a group element.
        """
        return math.lcm(*map(len, self.cycles()))

    def __eq__(self, other):
        if not isinstance(other, AbstractPermutation):
            return NotImplemented
        return self.images() == other.images()

    def __hash__(self):
        return hash(self.images())

    def __str__(self):
        out = [
            '(%s)' % ','.join(map(str, cycle))
            for cycle in self.cycles()
            if len(cycle) > 1
        ]
        if not out:
            return '()'
        return ''.join(out)

    def __repr__(self):
        return f'{type(self).__name__}({str(self)!r})'


class Permutation(AbstractPermutation):
    """A permutation stored as its vector of images.
    """

    __slots__ = ('_images', '_degree')

    def __init__(self, images=(), check=True):
        images = tuple(images)
        if check:
            check_images(images)
        deg = len(images)
        while deg > 1 and images[deg - 1] == deg:
            deg -= 1
        if not deg:
            images, deg = (1,), 1
        self._images = images[:deg]
        self._degree = deg

    @classmethod
    def from_cycles(cls, *cycles):
        """Return the product of the given (not necessarily disjoint) cycles.

        The cycles are composed left to right, so `from_cycles([1, 2], [2, 3])`
        first swaps 1 and 2 and then swaps 2 and 3.
        """
        return from_cycles(cycles, cls)

    def __call__(self, i):
        if i > self._degree:
            return i
        return self._images[i - 1]

    def degree(self):
        return self._degree

    def images(self):
        return self._images[:self._degree]


class CyclePermutation(AbstractPermutation):
    """A permutation stored as a list of disjoint cycles.

    Only cycles of length at least two are stored. A lookup table of successors
    keeps computing images O(1).
    """

    __slots__ = ('_cycles', '_next', '_degree')

    def __init__(self, images=(), check=True):
        images = tuple(images)
        if check:
            check_images(images)

        self._next = {}
        self._cycles = []
        for i, j in enumerate(images, 1):
            if i == j or i in self._next:
                continue
            cycle = [i]
            while j != i:
                cycle.append(j)
                j = images[j - 1]
            self._add_cycle(cycle)
        self._degree = max(self._next, default=1)

    def _add_cycle(self, cycle):
        k = cycle.index(min(cycle))
        cycle = cycle[k:] + cycle[:k]
        self._cycles.append(tuple(cycle))
        for a, b in zip(cycle, cycle[1:]):
            self._next[a] = b
        self._next[cycle[-1]] = cycle[0]

    @classmethod
    def from_disjoint_cycles(cls, cycles, check=True):
        """Build a permutation directly from disjoint cycles.
        """
        cycles = [list(c) for c in cycles if len(c) > 1]
        if check:
            flat = [i for c in cycles for i in c]
            if len(set(flat)) != len(flat) or any(i < 1 for i in flat):
                raise InvalidPermutation(
                    f'{cycles!r} is not a product of disjoint cycles')
        p = cls((), False)
        for cycle in cycles:
            p._add_cycle(cycle)
        p._degree = max(p._next, default=1)
        return p

    @classmethod
    def from_cycles(cls, *cycles):
        return from_cycles(cycles, cls)

    def __call__(self, i):
        return self._next.get(i, i)

    def degree(self):
        return self._degree

    def cycles(self):
        if not self._cycles:
            return [[1]]
        fixed = [[i] for i in range(1, self._degree + 1) if i not in self._next]
        # keep the same order as the generic implementation
        return sorted([list(c) for c in self._cycles] + fixed,
                      key=lambda c: c[0])

    def __str__(self):
        if not self._cycles:
            return '()'
        return ''.join('(%s)' % ','.join(map(str, c))
                       for c in sorted(self._cycles, key=lambda c: c[0]))


def identity(cls=Permutation):
    """Return the identity permutation using the given representation.
    """
    return cls((), False)


def cycle_images(n, cycle):
    """Return the image vector of a single cycle acting on 1..n.
    """
    p = list(range(1, n + 1))
    if not cycle:
        return p
    for i, j in zip(cycle, cycle[1:]):
        p[i - 1] = j
    p[cycle[-1] - 1] = cycle[0]
    return p


def from_cycles(cycles, cls=Permutation):
    """Multiply a list of cycles, left to right.
    """
    cycles = [list(c) for c in cycles]
    for cycle in cycles:
        if any(i < 1 for i in cycle) or len(set(cycle)) != len(cycle):
            raise InvalidPermutation(f'{cycle!r} is not a cycle')
    n = max((max(c) for c in cycles if c), default=1)
    out = identity(cls)
    for cycle in cycles:
        if len(cycle) > 1:
            out = out * cls(cycle_images(n, cycle), False)
    return out


def mult_perms(ps):
    """Multiply a sequence of permutations, left to right.
    """
    w = None
    for p in ps:
        w = p if w is None else w * p
    return identity() if w is None else w
