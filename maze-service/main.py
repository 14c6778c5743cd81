import argparse
import logging
import sys
from typing import List, Optional

from mazesolver.algorithms.algo import MazeSolver
from mazesolver.entities.entity import MalformedGridError, load_maze
from mazesolver.tools.consts import DEFAULT_WORKLIST, WORKLISTS
from mazesolver.tools.movement import Direction
from mazesolver.tools.render import render_optimal_cells


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Solve a turn-weighted maze from a text file.")
    parser.add_argument("maze", type=str, help="Path to maze file")
    parser.add_argument(
        "--start-direction", default="E", choices=["N", "E", "S", "W"],
        help="Facing on the start tile (default: E)"
    )
    parser.add_argument("--worklist", default=DEFAULT_WORKLIST, choices=WORKLISTS)
    parser.add_argument("--render", action="store_true", help="Print the maze with optimal cells marked")
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    )

    try:
        maze = load_maze(args.maze, Direction.from_letter(args.start_direction))
    except (OSError, MalformedGridError) as e:
        print(f"Could not load maze: {e}", file=sys.stderr)
        return 2

    result = MazeSolver(maze, worklist=args.worklist).solve()

    if not result.reachable:
        print("No path from start to goal")
        return 1

    print(f"Minimum cost: {result.minimum_cost}")
    print(f"Cells on optimal paths: {result.optimal_cell_count}")
    print(f"Time: {result.runtime:.3f}s")

    if args.render:
        print()
        for line in render_optimal_cells(maze, result.optimal_cells):
            print(line)

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
