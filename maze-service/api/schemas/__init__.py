from .requests import SolveRequest
from .responses import SolveResponse, CellModel, HealthResponse

__all__ = [
    "SolveRequest",
    "SolveResponse", "CellModel", "HealthResponse"
]
