from .health import router as health_router
from .solve import router as solve_router

__all__ = ["health_router", "solve_router"]
