from concurrent.futures import ThreadPoolExecutor
from random import Random

import pytest

from permgroups import (
    Config, ImpossibleImage, Permutation, PermutationGroup, SchreierTree,
    perm, preserves_blocks, schreier_sims)

from small_groups import GROUPS, closure


@pytest.fixture
def s3():
    return PermutationGroup([perm('(1,2)'), perm('(1,2,3)')])


class TestLaziness:
    def test_nothing_computed_up_front(self, s3):
        assert not s3.knows_order()
        assert not s3.knows_stabilizer_chain()

    def test_order_computes_chain(self, s3):
        assert s3.order() == 6
        assert s3.knows_order()
        assert s3.knows_stabilizer_chain()

    def test_known_order(self):
        g = PermutationGroup(GROUPS['S4'], order=24)
        assert g.knows_order()
        assert not g.knows_stabilizer_chain()
        assert len(g) == 24
        assert g.order() == 24
        assert g.knows_stabilizer_chain()
        assert g.stabilizer_chain().order() == 24

    @pytest.mark.parametrize('order', [12, 48])
    def test_wrong_order_is_rejected(self, order):
        g = PermutationGroup(GROUPS['S3'], order=order,
                             cfg=Config(rng=Random(4)))
        with pytest.raises(ValueError):
            g.order()

    def test_chain_is_computed_once(self, s3):
        with ThreadPoolExecutor(4) as pool:
            chains = list(pool.map(
                lambda _: s3.stabilizer_chain(), range(8)))
        assert all(chain is chains[0] for chain in chains)

    def test_given_chain(self):
        chain = schreier_sims(GROUPS['D5'])
        g = PermutationGroup(GROUPS['D5'], chain=chain)
        assert g.knows_order()
        assert g.order() == 10
        assert g.stabilizer_chain() is chain

    def test_given_chain_is_checked(self):
        chain = schreier_sims(GROUPS['D5'])
        with pytest.raises(ValueError):
            PermutationGroup(GROUPS['D5'], order=5, chain=chain)
        with pytest.raises(ValueError):
            PermutationGroup(GROUPS['S4'], chain=chain)
        PermutationGroup(GROUPS['S4'], chain=chain, check=False)


class TestGenerators:
    def test_gens_is_a_copy(self, s3):
        gens = s3.gens()
        gens.append(perm('(4,5)'))
        assert len(s3.gens()) == 2
        assert s3.order() == 6

    def test_gens_index(self, s3):
        assert s3.gens(0) == perm('(1,2)')
        assert s3.gens(1) == perm('(1,2,3)')

    def test_unsafe_gens(self, s3):
        assert s3.unsafe_gens() is s3.unsafe_gens()
        assert s3.unsafe_gens() == s3.gens()

    def test_degree_and_one(self, s3):
        assert s3.degree() == 3
        assert s3.one().is_one()
        assert PermutationGroup([]).one().is_one()
        assert PermutationGroup([]).degree() == 1


@pytest.mark.parametrize('name', sorted(GROUPS))
def test_elements(name):
    gens = GROUPS[name]
    group = PermutationGroup(gens)
    elements = group.elements()
    assert len(elements) == len(set(elements)) == group.order()
    assert set(elements) == closure(gens)
    assert set(group) == set(elements)


class TestQueries:
    def test_s3(self, s3):
        assert set(s3.elements()) == {
            perm(''), perm('(1,2)'), perm('(1,3)'), perm('(2,3)'),
            perm('(1,2,3)'), perm('(1,3,2)')}

    def test_membership(self, s3):
        assert perm('(1,3)') in s3
        assert perm('(3,4)') not in s3

    def test_orbit(self):
        group = PermutationGroup(GROUPS['C2xC3'])
        assert set(group.orbit(3)) == {3, 4, 5}
        assert set(group.orbit(6)) == {6}

    def test_perm_by_images(self, s3):
        base = s3.base()
        assert base == [1, 2]
        g = s3.perm_by_images([2, 3])
        assert g == perm('(1,2,3)')
        with pytest.raises(ImpossibleImage):
            s3.perm_by_images([2, 2])

    def test_find(self):
        group = PermutationGroup(GROUPS['S4'])
        g, h = perm('(1,2,3)'), perm('(2,4,3)')
        x = group.find(lambda x: x.inv() * g * x == h)
        assert x is not None
        assert x.inv() * g * x == h
        assert group.find(lambda x: x.order() == 5) is None

    def test_search_with_oracle(self):
        group = PermutationGroup(GROUPS['S4'])
        blocks = [{1, 2}, {3, 4}]
        found = set(group.search(preserves_blocks(blocks, group.base())))
        assert found == {
            perm(''), perm('(1,2)'), perm('(3,4)'), perm('(1,2)(3,4)')}

    def test_transversal_type(self):
        group = PermutationGroup(GROUPS['S4'], transversal_type=SchreierTree)
        assert group.order() == 24
        assert isinstance(group.stabilizer_chain().transversal, SchreierTree)


class TestRandomElements:
    def test_random_element(self):
        group = PermutationGroup(GROUPS['A4'])
        rng = Random(4)
        for _ in range(50):
            assert group.random_element(rng) in group

    def test_pseudorandom_element(self):
        group = PermutationGroup(GROUPS['D6'], cfg=Config(rng=Random(9)))
        samples = [group.pseudorandom_element() for _ in range(200)]
        assert not group.knows_stabilizer_chain()
        assert all(g in group for g in samples)
        assert len(set(samples)) > 1

    def test_pseudorandom_element_of_trivial_group(self):
        assert PermutationGroup([]).pseudorandom_element().is_one()


class TestPointwiseStabilizer:
    @pytest.mark.parametrize('points, order', [
        ([1], 6),
        ([1, 2], 2),
        ([4, 1], 2),
        ([1, 2, 3], 1),
        ([7], 24),
        ([1, 1], 6),
        ([2, 3, 2], 2),
    ])
    def test_symmetric_group(self, points, order):
        group = PermutationGroup(GROUPS['S4'], cfg=Config(rng=Random(2)))
        stab = group.pointwise_stabilizer(points)
        assert stab.order() == order
        for g in stab.gens():
            assert all(g(p) == p for p in points)
        for g in stab.elements():
            assert g in group

    def test_elements_fix_points(self):
        group = PermutationGroup(GROUPS['random6'])
        stab = group.pointwise_stabilizer([2])
        expected = {g for g in closure(GROUPS['random6']) if g(2) == 2}
        assert set(stab.elements()) == expected


def test_repr():
    group = PermutationGroup([perm('(1,2)'), Permutation([2, 3, 1])])
    assert repr(group) == 'PermutationGroup([(1,2), (1,2,3)])'
