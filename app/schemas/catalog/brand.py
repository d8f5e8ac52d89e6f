from datetime import datetime
from typing import Optional
from pydantic import BaseModel, Field, ConfigDict

from app.enums.brand_category import BrandCategory
from app.schemas.common import TrimmedStr


class BrandCreate(BaseModel):
    name: TrimmedStr
    category: BrandCategory = BrandCategory.regular


class BrandUpdate(BaseModel):
    name: Optional[TrimmedStr] = None
    category: Optional[BrandCategory] = None


class BrandRef(BaseModel):
    id: int
    name: str

    model_config = ConfigDict(from_attributes=True, populate_by_name=True)


class BrandRead(BrandRef):
    category: BrandCategory
    created_at: datetime = Field(alias="createdAt")


class BrandResponse(BaseModel):
    success: bool = True
    message: Optional[str] = None
    brand: BrandRead


class BrandListResponse(BaseModel):
    success: bool = True
    brands: list[BrandRead]
