from contextlib import asynccontextmanager

import structlog
from fastapi import FastAPI

from shared.config.database import create_db_engine, create_session_factory, init_models
from shared.config.settings import Settings
from shared.errors import register_error_handlers
from shared.observability import setup_observability
from shared.storage import S3ObjectStore
from .router import router, public_router
from .models import Product  # Import to register with Base

logger = structlog.get_logger(__name__)


def create_app(settings: Settings | None = None, object_store=None) -> FastAPI:
    """Build the product service. Pass object_store to replace the S3 client (tests)."""
    settings = settings or Settings.from_env()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        engine = create_db_engine(settings.database_url, echo=settings.db_echo)
        app.state.engine = engine
        app.state.sessionmaker = create_session_factory(engine)
        app.state.object_store = object_store or S3ObjectStore.from_settings(settings)

        await init_models(engine)
        logger.info("product_service_started", port=settings.port,
                    bucket=settings.s3_bucket_name, region=settings.aws_region,
                    tables=sorted(Product.metadata.tables.keys()))
        yield
        await engine.dispose()
        app.state.object_store.close()
        logger.info("product_service_stopped")

    product_app = FastAPI(
        title="Product Service",
        version="1.0.0",
        lifespan=lifespan
    )
    product_app.state.settings = settings

    # --- OBSERVABILITY BOOTSTRAP ---
    setup_observability(product_app, "product_service", settings)
    register_error_handlers(product_app)

    product_app.include_router(public_router)
    product_app.include_router(router)
    return product_app
