from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class ProductCreate(BaseModel):
    name: str = Field(min_length=1)
    price: float = Field(gt=0, allow_inf_nan=False)


class ProductUpdate(BaseModel):
    # No presence checks: whatever arrives is written as-is
    name: str | None = None
    price: float | None = Field(default=None, allow_inf_nan=False)


class ProductResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True, populate_by_name=True)

    id: int
    name: str
    price: float
    file_url: str | None = Field(default=None, alias="fileUrl")
    status: str


class ProductDocument(BaseModel):
    """The JSON mirrored to object storage, frozen at creation time."""
    model_config = ConfigDict(populate_by_name=True)

    id: int
    name: str
    price: float
    created_at: datetime = Field(alias="createdAt")


class ProductCreatedResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    message: str
    data: ProductDocument
    file_url: str = Field(alias="fileUrl")


class MessageResponse(BaseModel):
    message: str
