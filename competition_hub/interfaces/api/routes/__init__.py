from fastapi import FastAPI

from .admin import router as admin_router
from .auth import router as auth_router
from .competitions import router as competitions_router
from .forum import router as forum_router
from .notifications import router as notifications_router
from .submissions import router as submissions_router
from .users import router as users_router


def register_routes(app: FastAPI) -> None:
    """Register every API router on the FastAPI application."""

    app.include_router(auth_router)
    app.include_router(users_router)
    app.include_router(competitions_router)
    app.include_router(forum_router)
    app.include_router(submissions_router)
    app.include_router(notifications_router)
    app.include_router(admin_router)
