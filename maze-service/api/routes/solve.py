import logging
from fastapi import APIRouter, HTTPException

from api.schemas.requests import SolveRequest
from api.schemas.responses import SolveResponse, CellModel
from mazesolver.algorithms.algo import MazeSolver
from mazesolver.entities.entity import MalformedGridError, parse_maze
from mazesolver.tools.movement import Direction
from mazesolver.tools.render import render_optimal_cells

router = APIRouter(tags=["Solve"])
logger = logging.getLogger(__name__)


@router.post("/solve", response_model=SolveResponse)
def solve(request: SolveRequest):
    """
    Compute the cheapest route cost through a maze and the cells on any cheapest route.

    Each step forward costs 1 and each 90 degree turn costs 1000. This endpoint:
    1. Parses the maze rows
    2. Relaxes costs over every (cell, facing) state from the start
    3. Walks back from the goal along cost-consistent moves to collect optimal cells

    Returns the minimum cost, the optimal cells and optionally the marked maze.
    """
    try:
        maze = parse_maze(request.maze, Direction(request.start_direction))
    except MalformedGridError as e:
        raise HTTPException(status_code=400, detail=str(e))

    try:
        result = MazeSolver(maze, worklist=request.worklist).solve()

        logger.info(
            f"Maze {maze.width}x{maze.height} solved in {result.runtime:.3f}s, "
            f"cost={result.minimum_cost}, cells={result.optimal_cell_count}"
        )

        if not result.reachable:
            raise HTTPException(
                status_code=422,
                detail="No path from start to goal"
            )

        rendered = None
        if request.render:
            rendered = render_optimal_cells(maze, result.optimal_cells)

        return SolveResponse(
            minimum_cost=result.minimum_cost,
            optimal_cell_count=result.optimal_cell_count,
            optimal_cells=[
                CellModel(x=x, y=y)
                for x, y in sorted(result.optimal_cells, key=lambda cell: (cell[1], cell[0]))
            ],
            rendered=rendered,
            runtime=result.runtime
        )

    except HTTPException:
        raise
    except Exception as e:
        logger.exception("Error in maze solving")
        raise HTTPException(status_code=500, detail=str(e))
