from datetime import datetime, timezone

import structlog

from shared.storage import JSON_CONTENT_TYPE
from .models import Product, MirrorStatus
from .repository import ProductRepository
from .saga import SagaOrchestrator
from .schemas import ProductDocument

logger = structlog.get_logger(__name__)


def object_key(product_id: int) -> str:
    return f"product_{product_id}.json"

# ctx keys in: db, store, data (ProductCreate), failure_policy
# ctx keys out: product, document, key, file_url

# --- ACTIONS ---

async def insert_row(ctx: dict):
    db, data = ctx["db"], ctx["data"]
    product = Product(name=data.name, price=data.price, status=MirrorStatus.PENDING.value)
    ctx["product"] = await ProductRepository.create_product(db, product)

async def upload_object(ctx: dict):
    store, product = ctx["store"], ctx["product"]
    document = ProductDocument(
        id=product.id,
        name=product.name,
        price=product.price,
        created_at=datetime.now(timezone.utc),
    )
    key = object_key(product.id)
    await store.put_object(key, document.model_dump_json(by_alias=True), content_type=JSON_CONTENT_TYPE)
    ctx["document"] = document
    ctx["key"] = key
    ctx["file_url"] = store.public_url(key)

async def attach_file_url(ctx: dict):
    await ProductRepository.attach_file_url(ctx["db"], ctx["product"].id, ctx["file_url"])


# --- COMPENSATIONS (Rollbacks) ---

async def rollback_row(ctx: dict):
    db, product_id = ctx["db"], ctx["product"].id
    # The failed step may have left the session mid-transaction
    await db.rollback()
    if ctx["failure_policy"] == "rollback":
        await ProductRepository.delete_product(db, product_id)
        logger.warning("product_row_rolled_back", product_id=product_id)
    else:
        await ProductRepository.mark_degraded(db, product_id)
        logger.warning("product_marked_degraded", product_id=product_id)

async def rollback_object(ctx: dict):
    key = ctx.get("key")
    if key:
        await ctx["store"].delete_object(key)


# --- BUILDER FACTORY ---

def build_mirror_saga() -> SagaOrchestrator:
    saga = SagaOrchestrator()
    saga.add_step("insert_row", insert_row, rollback_row)
    saga.add_step("upload_object", upload_object, rollback_object)
    saga.add_step("attach_file_url", attach_file_url, None) # Last step, nothing after it to undo
    return saga
