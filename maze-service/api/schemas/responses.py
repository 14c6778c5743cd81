from pydantic import BaseModel
from typing import List, Optional


class CellModel(BaseModel):
    """Single maze cell."""
    x: int
    y: int


class SolveResponse(BaseModel):
    """Response body for successful /solve requests."""
    minimum_cost: int
    optimal_cell_count: int
    optimal_cells: List[CellModel]
    rendered: Optional[List[str]] = None
    runtime: float


class HealthResponse(BaseModel):
    """Response for health check endpoint."""
    status: str
    version: str
