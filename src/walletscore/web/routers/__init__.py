from walletscore.web.routers.scores import router as scores_router
from walletscore.web.routers.sessions import router as sessions_router
from walletscore.web.routers.users import router as users_router

__all__ = [
    "scores_router",
    "sessions_router",
    "users_router",
]
