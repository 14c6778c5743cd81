from pydantic import BaseModel, Field, field_validator
from typing import List, Literal

from mazesolver.tools.consts import MAX_MAZE_SIDE


class SolveRequest(BaseModel):
    """Request body for the /solve endpoint."""
    maze: List[str] = Field(
        ...,
        min_length=1,
        max_length=MAX_MAZE_SIDE,
        description="Maze rows using '#' wall, '.' open, 'S' start, 'E' goal"
    )
    start_direction: int = Field(1, ge=0, le=3, description="Facing on the start tile (0=N, 1=E, 2=S, 3=W)")
    worklist: Literal["heap", "stack"] = Field("heap", description="Relaxation worklist")
    render: bool = Field(False, description="Include the maze with optimal cells marked 'O'")

    @field_validator("maze")
    @classmethod
    def check_row_width(cls, rows: List[str]) -> List[str]:
        for row in rows:
            if len(row.strip()) > MAX_MAZE_SIDE:
                raise ValueError(f"Rows may hold at most {MAX_MAZE_SIDE} tiles")
        return rows

    model_config = {
        "json_schema_extra": {
            "examples": [{
                "maze": [
                    "#####",
                    "#...#",
                    "#S#E#",
                    "#...#",
                    "#####"
                ],
                "start_direction": 1,
                "worklist": "heap",
                "render": True
            }]
        }
    }
