from ohcraps.api.health import router as health_router
from ohcraps.api.rules import router as rules_router
from ohcraps.api.strategies import router as strategies_router
from ohcraps.api.user_strategies import router as user_strategies_router

__all__ = [
    "health_router",
    "rules_router",
    "strategies_router",
    "user_strategies_router",
]
