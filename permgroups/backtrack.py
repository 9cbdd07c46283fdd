"""
Backtrack search over a stabilizer chain.

The levels of a stabilizer chain form a search tree: a node at depth k
corresponds to a choice of coset representatives u_0, ..., u_{k-1}, i.e. to the
partial element

    g = u_{k-1} * ... * u_1 * u_0

which already maps the base points b_0, ..., b_{k-1} to their final images.
Every element of the group is reached by exactly one leaf.

An oracle is a callable `oracle(g, depth)` returning whether the subtree below
the partial element g (which fixes the images of the first `depth` base points)
may contain elements of interest. Returning False prunes the subtree. Leaves
are only produced when the oracle accepts them, so an oracle that inspects
only the images of the first `depth` base points acts as a filter.

Only the set of produced elements is specified, the recursive and the stack
based search visit the leaves in different orders.
"""


def backtrack(chain, oracle=None):
    """Return a list of all elements accepted by the oracle.
    """
    return list(iter_backtrack(chain, oracle))


def iter_backtrack(chain, oracle=None):
    """Lazily produce all elements accepted by the oracle.

    The search is suspended between elements. Once exhausted, a new iterator
    has to be created to search again.
    """
    levels = chain.levels()
    yield from _backtrack(levels, 0, chain.identity, oracle)


def _backtrack(levels, depth, g, oracle):
    if depth == len(levels):
        yield g
        return

    transversal = levels[depth].transversal
    for point in transversal:
        h = transversal[point] * g
        if oracle is not None and not oracle(h, depth + 1):
            continue
        yield from _backtrack(levels, depth + 1, h, oracle)


def backtrack_stack(chain, oracle=None):
    """Like backtrack but using an explicit stack instead of recursion.
    """
    levels = chain.levels()
    out = []
    stack = [(0, chain.identity)]

    while stack:
        depth, g = stack.pop()
        if depth == len(levels):
            out.append(g)
            continue

        transversal = levels[depth].transversal
        for point in transversal:
            h = transversal[point] * g
            if oracle is not None and not oracle(h, depth + 1):
                continue
            stack.append((depth + 1, h))

    return out


def preserves_blocks(blocks, base):
    """Return an oracle accepting the elements that map every block to itself.

    `blocks` is a collection of disjoint sets of points and `base` the base of
    the chain that is searched. At depth k only the images of the first k base
    points are known and the oracle checks that each of them stays in its
    block. At the leaves every point of every block is checked.
    """
    blocks = [frozenset(block) for block in blocks]
    block_of = {}
    for block in blocks:
        for point in block:
            block_of[point] = block

    def oracle(g, depth):
        if depth == len(base):
            return stabilizes(blocks, g)
        for b in base[:depth]:
            block = block_of.get(b)
            if block is not None and g(b) not in block:
                return False
        return True

    return oracle


def stabilizes(blocks, g):
    """Return whether g maps every block into itself.
    """
    return all(g(point) in block for block in blocks for point in block)


def search(chain, predicate, oracle=None):
    """Yield the elements accepted by the oracle that satisfy predicate.
    """
    for g in iter_backtrack(chain, oracle):
        if predicate(g):
            yield g


def find(chain, predicate, oracle=None):
    """Return the first element found satisfying predicate, or None.
    """
    return next(search(chain, predicate, oracle), None)
