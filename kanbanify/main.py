from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from kanbanify.api.v1 import admin, boards, cards, checklist, labels, lists, setup, team_members
from kanbanify.config import settings
from kanbanify.database import init_db
from kanbanify.errors import register_exception_handlers
from kanbanify.logging_config import configure_logging


@asynccontextmanager
async def lifespan(_: FastAPI):
    configure_logging()
    init_db()
    yield


def create_app() -> FastAPI:
    app = FastAPI(title=settings.APP_NAME, version=settings.APP_VERSION, lifespan=lifespan)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins_list,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_exception_handlers(app)

    prefix = settings.API_PREFIX.rstrip("/")
    app.include_router(boards.router, prefix=f"{prefix}/boards", tags=["boards"])
    app.include_router(lists.router, prefix=f"{prefix}/lists", tags=["lists"])
    app.include_router(cards.router, prefix=f"{prefix}/cards", tags=["cards"])
    app.include_router(team_members.router, prefix=f"{prefix}/team-members", tags=["team-members"])
    app.include_router(checklist.router, prefix=f"{prefix}/checklist", tags=["checklist"])
    app.include_router(labels.router, prefix=f"{prefix}/labels", tags=["labels"])
    app.include_router(admin.router, prefix=f"{prefix}/admin", tags=["admin"])
    app.include_router(setup.router, prefix=f"{prefix}/setup", tags=["setup"])

    return app


app = create_app()
