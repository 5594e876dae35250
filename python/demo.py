"""
Run every solver on the published worked examples and check the answers.

Usage:
    python demo.py               # summary panel
    python demo.py --verbose     # plus solver log lines
    python demo.py --render      # plus the lowest-risk path drawing
    python demo.py --workers 4   # candidate searches in a process pool
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import Callable

from rich.console import Console
from rich.panel import Panel
from rich.text import Text

from ascii_render import render_risk_path
from basins import HeightMap
from caves import CaveMap, PathRules, count_paths, count_paths_with_revisit
from image_enhance import ImageEnhancer
from octopus import OctopusGrid
from risk_map import RiskMap
from samples import ANSWERS, SAMPLES

Solver = Callable[[str], int | None]


def _enhanced(times: int) -> Solver:
    def solve(text: str) -> int:
        enhancer = ImageEnhancer.from_lines(text)
        enhancer.enhance(times)
        return enhancer.lit_count()

    return solve


def build_solvers(rules: PathRules) -> dict[tuple[str, int], Solver]:
    solvers: dict[tuple[str, int], Solver] = {
        ("risk_map", 1): lambda text: RiskMap.from_lines(text).lowest_risk(),
        ("risk_map", 2): lambda text: RiskMap.from_lines(text).expand_5x().lowest_risk(),
        ("height_map", 1): lambda text: HeightMap.from_lines(text).risk_level_sum(),
        ("height_map", 2): lambda text: HeightMap.from_lines(text).largest_basins_product(),
        ("octopuses", 1): lambda text: OctopusGrid.from_lines(text).flashes_after(100),
        ("octopuses", 2): lambda text: OctopusGrid.from_lines(text).first_synchronised_step(),
        ("image", 1): _enhanced(2),
        ("image", 2): _enhanced(50),
    }
    for name in ("caves_small", "caves_medium", "caves_large"):
        solvers[(name, 1)] = lambda text: count_paths(CaveMap.from_lines(text))
        solvers[(name, 2)] = lambda text: count_paths_with_revisit(CaveMap.from_lines(text), rules)
    return solvers


def run(rules: PathRules, console: Console) -> bool:
    """Solve every sample; returns False if any answer differs from the published one."""
    solvers = build_solvers(rules)
    report = Text()
    all_passed = True

    for (name, part), expected in ANSWERS.items():
        result = solvers[(name, part)](SAMPLES[name])
        passed = result == expected
        all_passed = all_passed and passed

        report.append(f"{name:<14} part {part}  ", style="bold")
        report.append(f"{result!s:>6}", style="green" if passed else "red")
        if not passed:
            report.append(f"  expected {expected}", style="red")
        report.append("\n")

    title = "All samples match" if all_passed else "Sample mismatch"
    console.print(Panel(report, title=title, border_style="green" if all_passed else "red"))
    return all_passed


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description=__doc__, formatter_class=argparse.RawDescriptionHelpFormatter)
    parser.add_argument("--verbose", action="store_true", help="log solver summaries")
    parser.add_argument("--render", action="store_true", help="draw the lowest-risk path")
    parser.add_argument("--workers", type=int, default=1, help="processes for the cave revisit search")
    args = parser.parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.INFO, format="%(levelname)s: %(message)s")

    console = Console()
    if args.render:
        print(render_risk_path(RiskMap.from_lines(SAMPLES["risk_map"])))
        print()

    return 0 if run(PathRules(workers=args.workers), console) else 1


if __name__ == "__main__":
    sys.exit(main())
