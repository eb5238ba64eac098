from enum import Enum

from sqlalchemy import Column, Integer, String, Float
from shared.config.database import Base


class MirrorStatus(str, Enum):
    PENDING = "pending"      # row inserted, object not confirmed yet
    MIRRORED = "mirrored"
    DEGRADED = "degraded"    # create flow failed after the insert


class Product(Base):
    __tablename__ = "products"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(255), nullable=False)
    price = Column(Float, nullable=False)
    file_url = Column("fileUrl", String(1024), nullable=True)
    status = Column(String(16), nullable=False, default=MirrorStatus.PENDING.value)
