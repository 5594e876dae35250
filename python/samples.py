"""
Published worked examples and their answers, shared by the demo and tests.
"""

from __future__ import annotations

__all__ = ["SAMPLES", "ANSWERS"]

RISK_MAP = """
1163751742
1381373672
2136511328
3694931569
7463417111
1319128137
1359912421
3125421639
1293138521
2311944581
"""

CAVES_SMALL = """
start-A
start-b
A-c
A-b
b-d
A-end
b-end
"""

CAVES_MEDIUM = """
dc-end
HN-start
start-kj
dc-start
dc-HN
LN-dc
HN-end
kj-sa
kj-HN
kj-dc
"""

CAVES_LARGE = """
fs-end
he-DX
fs-he
start-DX
pj-DX
end-zg
zg-sl
zg-pj
pj-he
RW-he
fs-DX
pj-RW
zg-RW
start-pj
he-WI
zg-he
pj-fs
start-RW
"""

HEIGHT_MAP = """
2199943210
3987894921
9856789892
8767896789
9899965678
"""

OCTOPUSES = """
5483143223
2745854711
5264556173
6141336146
6357385478
4167524645
2176841721
6882881134
4846848554
5283751526
"""

IMAGE = """
..#.#..#####.#.#.#.###.##.....###.##.#..###.####..#####..#....#..#..##..###..######.###...####..#..#####..##..#.#####...##.#.#..#.##..#.#......#.###.######.###.####...#.##.##..#..#..#####.....#.#....###..#.##......#.....#..#..#..##..#...##.######.####.####.#.#...#.......#..#.#.#...####.##.#......#..#...##.#.##..#...##.#.##..###.#......#.#.......#.#.#.####.###.##...#.....####.#..#..#.##.#....##..#.####....##...##..#...#......#.#.......#.......##..####..#...#.#.#...##..#.#..###..#####........#..####......#..#

#..#.
#....
##..#
..#..
..###
"""

SAMPLES: dict[str, str] = {
    "risk_map": RISK_MAP,
    "caves_small": CAVES_SMALL,
    "caves_medium": CAVES_MEDIUM,
    "caves_large": CAVES_LARGE,
    "height_map": HEIGHT_MAP,
    "octopuses": OCTOPUSES,
    "image": IMAGE,
}

# (sample, part) -> published answer
ANSWERS: dict[tuple[str, int], int] = {
    ("risk_map", 1): 40,
    ("risk_map", 2): 315,
    ("caves_small", 1): 10,
    ("caves_small", 2): 36,
    ("caves_medium", 1): 19,
    ("caves_medium", 2): 103,
    ("caves_large", 1): 226,
    ("caves_large", 2): 3509,
    ("height_map", 1): 15,
    ("height_map", 2): 1134,
    ("octopuses", 1): 1656,
    ("octopuses", 2): 195,
    ("image", 1): 35,
    ("image", 2): 3351,
}
