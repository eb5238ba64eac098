import structlog
from sqlalchemy.ext.asyncio import AsyncSession

from shared.errors import NotFoundError
from shared.observability import product_mirror_total
from .mirror_saga import build_mirror_saga, object_key
from .repository import ProductRepository
from .schemas import ProductCreate, ProductCreatedResponse, ProductUpdate

logger = structlog.get_logger(__name__)

CREATED_MESSAGE = "Product created and JSON mirrored to S3"
UPDATED_MESSAGE = "Product updated"
DELETED_MESSAGE = "Product deleted and JSON removed from S3"


class ProductService:

    @staticmethod
    async def create_product(db: AsyncSession, store, data: ProductCreate, failure_policy: str = "degraded"):
        # 1. Insert pending row, 2. upload JSON, 3. attach fileUrl
        ctx = {"db": db, "store": store, "data": data, "failure_policy": failure_policy}
        try:
            await build_mirror_saga().execute(ctx)
        except Exception:
            product_mirror_total.labels(outcome="failed").inc()
            raise
        product_mirror_total.labels(outcome="mirrored").inc()
        logger.info("product_created", product_id=ctx["document"].id, key=ctx["key"])
        return ProductCreatedResponse(message=CREATED_MESSAGE, data=ctx["document"], file_url=ctx["file_url"])

    @staticmethod
    async def list_products(db: AsyncSession):
        return await ProductRepository.get_all_products(db)

    @staticmethod
    async def get_product_by_id(db: AsyncSession, product_id: int):
        product = await ProductRepository.get_product_by_id(db, product_id)
        if not product:
            raise NotFoundError()
        return product

    @staticmethod
    async def update_product(db: AsyncSession, product_id: int, data: ProductUpdate):
        if data.name is None or data.price is None:
            logger.warning("product_update_missing_fields", product_id=product_id,
                           name_missing=data.name is None, price_missing=data.price is None)
        matched = await ProductRepository.update_product(db, product_id, data.name, data.price)
        # The mirrored JSON is left as it was at creation time
        logger.info("product_updated", product_id=product_id, matched=matched)
        return UPDATED_MESSAGE

    @staticmethod
    async def delete_product(db: AsyncSession, store, product_id: int):
        # 1. Get Product
        product = await ProductRepository.get_product_by_id(db, product_id)
        if not product:
            raise NotFoundError()

        # 2. Resolve the object key (rows that never got a fileUrl use the deterministic key)
        if product.file_url:
            key = store.key_from_url(product.file_url)
        else:
            key = object_key(product.id)
            logger.warning("product_without_file_url", product_id=product.id, status=product.status, key=key)

        # 3. Delete the object, then the row
        await store.delete_object(key)
        await ProductRepository.delete_product(db, product_id)
        logger.info("product_deleted", product_id=product_id, key=key)
        return DELETED_MESSAGE
