from datetime import datetime
from typing import Optional
from pydantic import BaseModel, Field, ConfigDict

from app.schemas.common import TrimmedStr
from app.schemas.catalog.brand import BrandRef


class CarModelCreate(BaseModel):
    name: TrimmedStr
    brand: int = Field(..., description="Brand id")


class CarModelUpdate(BaseModel):
    name: Optional[TrimmedStr] = None
    brand: Optional[int] = None


class CarModelRef(BaseModel):
    id: int
    name: str

    model_config = ConfigDict(from_attributes=True, populate_by_name=True)


class CarModelRead(CarModelRef):
    brand: BrandRef
    created_at: datetime = Field(alias="createdAt")


class CarModelResponse(BaseModel):
    success: bool = True
    message: Optional[str] = None
    model: CarModelRead


class CarModelListResponse(BaseModel):
    success: bool = True
    models: list[CarModelRead]
