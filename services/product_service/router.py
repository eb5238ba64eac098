import structlog
from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from shared.config.database import get_db
from shared.config.settings import Settings
from shared.errors import InternalError
from .dependencies import get_object_store, get_settings
from .schemas import (
    MessageResponse,
    ProductCreate,
    ProductCreatedResponse,
    ProductResponse,
    ProductUpdate,
)
from .service import ProductService

logger = structlog.get_logger(__name__)

router = APIRouter(prefix="/products", tags=["products"])
public_router = APIRouter()  # For any public endpoints (e.g. health check)

@public_router.get("/health")
async def health_check():
    return {"service": "product", "status": "running"}


@router.post("", response_model=ProductCreatedResponse)
async def create_product(
    product: ProductCreate,
    db: AsyncSession = Depends(get_db),
    store=Depends(get_object_store),
    settings: Settings = Depends(get_settings)
):
    try:
        return await ProductService.create_product(db, store, product, settings.mirror_failure_policy)
    except Exception:
        logger.exception("product_create_failed", name=product.name)
        raise InternalError()

@router.get("", response_model=list[ProductResponse])
async def list_products(db: AsyncSession = Depends(get_db)):
    return await ProductService.list_products(db)

@router.get("/{product_id}", response_model=ProductResponse)
async def get_product(product_id: int, db: AsyncSession = Depends(get_db)):
    return await ProductService.get_product_by_id(db, product_id)

@router.put("/{product_id}", response_model=MessageResponse)
async def update_product(
    product_id: int,
    payload: ProductUpdate | None = None,
    db: AsyncSession = Depends(get_db)
):
    message = await ProductService.update_product(db, product_id, payload or ProductUpdate())
    return {"message": message}

@router.delete("/{product_id}", response_model=MessageResponse)
async def delete_product(
    product_id: int,
    db: AsyncSession = Depends(get_db),
    store=Depends(get_object_store)
):
    message = await ProductService.delete_product(db, store, product_id)
    return {"message": message}
