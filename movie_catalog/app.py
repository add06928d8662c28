import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from strawberry.fastapi import GraphQLRouter

from . import __version__
from .config import Settings
from .loaders import make_context
from .schema import schema
from .seed import seeded_store
from .store import CatalogStore

logger = logging.getLogger(__name__)


def create_app(settings: Settings | None = None, store: CatalogStore | None = None) -> FastAPI:
    settings = settings or Settings.from_env()
    store = store if store is not None else seeded_store()

    app = FastAPI(title="Movie Catalog GraphQL", version=__version__)
    app.state.store = store

    if settings.cors_origins:
        app.add_middleware(
            CORSMiddleware,
            allow_origins=settings.cors_origins,
            allow_methods=["GET", "POST", "OPTIONS"],
            allow_headers=["*"],
        )

    async def get_context() -> dict:
        return make_context(store)

    # NOTE: GraphiQL is served from the same path for GET requests from a browser
    graphql_app = GraphQLRouter(
        schema,
        context_getter=get_context,
        graphql_ide="graphiql" if settings.graphiql else None,
    )
    app.include_router(graphql_app, prefix=settings.graphql_path)

    @app.get("/health", tags=["system"])
    def health():
        return {"status": "ok", **store.counts()}

    logger.info(
        "Catalog app ready: path=%s graphiql=%s", settings.graphql_path, settings.graphiql
    )
    return app


app = create_app()
