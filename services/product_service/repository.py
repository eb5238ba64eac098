from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select, update, delete
from .models import Product, MirrorStatus

class ProductRepository:

    @staticmethod
    async def create_product(db: AsyncSession, product: Product):
        db.add(product)
        await db.commit()
        await db.refresh(product)
        return product

    @staticmethod
    async def get_all_products(db: AsyncSession):
        result = await db.execute(select(Product).order_by(Product.id))
        return result.scalars().all()

    @staticmethod
    async def get_product_by_id(db: AsyncSession, product_id: int):
        result = await db.execute(select(Product).where(Product.id == product_id))
        return result.scalars().first()

    @staticmethod
    async def attach_file_url(db: AsyncSession, product_id: int, file_url: str):
        await db.execute(
            update(Product)
            .where(Product.id == product_id)
            .values({Product.file_url: file_url, Product.status: MirrorStatus.MIRRORED.value})
        )
        await db.commit()

    @staticmethod
    async def mark_degraded(db: AsyncSession, product_id: int):
        await db.execute(
            update(Product)
            .where(Product.id == product_id)
            .values({Product.status: MirrorStatus.DEGRADED.value})
        )
        await db.commit()

    @staticmethod
    async def update_product(db: AsyncSession, product_id: int, name, price) -> int:
        # Unconditional: None values are sent as NULL
        result = await db.execute(
            update(Product)
            .where(Product.id == product_id)
            .values({Product.name: name, Product.price: price})
        )
        await db.commit()
        return result.rowcount

    @staticmethod
    async def delete_product(db: AsyncSession, product_id: int) -> int:
        result = await db.execute(delete(Product).where(Product.id == product_id))
        await db.commit()
        return result.rowcount
