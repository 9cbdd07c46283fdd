from permgroups import (
    Config, Permutation, PermutationGroup, Stats, schreier_sims)
from random import Random
import re

# Three permutations that generate the Rubik's Cube, acting on the facelets
# numbered 0..53. Shamelessly stolen from
# https://github.com/runjak/2020-06-06.enthusiasticon/blob/master/src/permutations.ts#L58

X = [
   9, 10, 11, 12, 13, 14, 15, 16, 17,
  45, 46, 47, 48, 49, 50, 51, 52, 53,
  24, 21, 18, 25, 22, 19, 26, 23, 20,
   8,  7,  6,  5,  4,  3,  2,  1,  0,
  38, 41, 44, 37, 40, 43, 36, 39, 42,
  35, 34, 33, 32, 31, 30, 29, 28, 27,
]
Y = [
  20, 23, 26, 19, 22, 25, 18, 21, 24,
  11, 14, 17, 10, 13, 16,  9, 12, 15,
  47, 50, 53, 46, 49, 52, 45, 48, 51,
  33, 30, 27, 34, 31, 28, 35, 32, 29,
   2,  5,  8,  1,  4,  7,  0,  3,  6,
  38, 41, 44, 37, 40, 43, 36, 39, 42,
]
R = [
   0,  1, 11,  3,  4, 14,  6,  7, 17,
   9, 10, 47, 12, 13, 50, 15, 16, 53,
  24, 21, 18, 25, 22, 19, 26, 23, 20,
   8, 28, 29,  5, 31, 32,  2, 34, 35,
  36, 37, 38, 39, 40, 41, 42, 43, 44,
  45, 46, 33, 48, 49, 30, 51, 52, 27,
]

# Permutations act on 1..n, so facelet i is point i + 1.
center_cubelet_faces = [i + 1 for i in range(4, 54, 9)]

# 43,252,003,274,489,856,000 positions times 24 orientations of the cube
KNOWN_ORDER = 24 * 43252003274489856000


def from_facelets(p):
    return Permutation([i + 1 for i in p])


def rubiks_gens():
    return [from_facelets(p) for p in (X, Y, R)]


def fmt_large_num(x):
    return re.subn(r'(?<=\d)(?=(\d{3})+$)', ',', str(x))[0]


def print_chain_stats(chain):
    print(f"  group order = {fmt_large_num(chain.order())}")
    print(f"  base = {chain.basis()}")
    print(f"  strong generating set size = {len(chain.generators())}")


def print_performance_stats(cfg):
    print(f"  took {fmt_large_num(cfg.stats.products)} group products")
    if cfg.stats.rounds:
        print(f"  took {cfg.stats.rounds} sifting rounds")


def main(seed=0):
    print("""
We're going to build a stabilizer chain for the Rubik's Cube group, including
reorientations of the whole cube. This is a permutation group of the
9 * 6 = 54 visible cublet faces.

It is generated using the operations X, Y which allow us to arbitrarily
reorient the whole cube without turning any sides, and R which turns a single
side.
""")
    x, y, r = rubiks_gens()
    print('X =', x)
    print('Y =', y)
    print('R =', r)

    print("""
------------------------------------------------------------------------------
As we know the order of the group, we can use the randomized Schreier-Sims
algorithm as a Las Vegas algorithm. It terminates as soon as the stabilizer
chain is complete.
""")
    cfg = Config(rng=Random(seed))
    chain = schreier_sims(rubiks_gens(), KNOWN_ORDER, cfg=cfg)
    print_chain_stats(chain)
    print_performance_stats(cfg)

    print("""
------------------------------------------------------------------------------
If we don't know the order of the group, the Monte Carlo variant stops after a
few rounds without progress and then verifies its result by sifting all
Schreier generators. That's basically what the deterministic algorithm does,
so we lose some of the advantage of the randomized approach.
""")
    cfg = Config(monte_carlo=True, rng=Random(seed))
    chain = schreier_sims(rubiks_gens(), cfg=cfg)
    print_chain_stats(chain)
    print_performance_stats(cfg)

    print("""
------------------------------------------------------------------------------
With a complete stabilizer chain we can test membership and sample uniformly
random positions of the cube.
""")
    cube = PermutationGroup(rubiks_gens(), KNOWN_ORDER, chain)
    scrambled = cube.random_element(Random(seed))
    print('  random position =', scrambled)
    print('  is a member:', scrambled in cube)
    swap = Permutation.from_cycles([1, 2])
    print('  swapping two facelets is a member:', swap in cube)

    print("""
------------------------------------------------------------------------------
The printed group order is larger than the roughly 43 quintillion that is
often quoted, as we're also counting orientations of the cube. To not count
them, we stabilize the center cubelet faces of each cube face. These are
used as a prefix of the base and the subgroup fixing them is read off the
stabilizer chain.
""")
    cube.cfg.stats = Stats()
    fixed = cube.pointwise_stabilizer(center_cubelet_faces)
    print(f'  base prefix = {center_cubelet_faces}')
    print_chain_stats(fixed.stabilizer_chain())
    print_performance_stats(cube.cfg)

    return cube, fixed


if __name__ == '__main__':
    main()
