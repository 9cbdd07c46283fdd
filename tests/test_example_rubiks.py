from random import Random

from permgroups import Config, PermutationGroup, perm, schreier_sims

import example_rubiks


def test_generators_are_permutations_of_facelets():
    gens = example_rubiks.rubiks_gens()
    assert [g.degree() for g in gens] == [54, 54, 54]
    assert [g.order() for g in gens] == [4, 4, 4]


def test_known_order():
    cfg = Config(rng=Random(1))
    chain = schreier_sims(
        example_rubiks.rubiks_gens(), example_rubiks.KNOWN_ORDER, cfg=cfg)
    assert chain.order() == example_rubiks.KNOWN_ORDER
    assert cfg.stats.rounds > 0


def test_fixed_orientation():
    cube = PermutationGroup(
        example_rubiks.rubiks_gens(), example_rubiks.KNOWN_ORDER,
        cfg=Config(rng=Random(2)))
    fixed = cube.pointwise_stabilizer(example_rubiks.center_cubelet_faces)
    assert fixed.order() == 43252003274489856000

    scrambled = fixed.random_element(Random(3))
    assert scrambled in cube
    assert all(scrambled(p) == p
               for p in example_rubiks.center_cubelet_faces)
    # swapping two facelets can't be done by turning faces
    assert perm('(1,2)') not in cube


def test_fmt_large_num():
    assert example_rubiks.fmt_large_num(1234567) == '1,234,567'
    assert example_rubiks.fmt_large_num(123) == '123'
