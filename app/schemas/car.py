from datetime import date, datetime
from decimal import Decimal
from typing import Optional, List
from pydantic import BaseModel, ConfigDict, Field, field_serializer, field_validator

from app.schemas.common import IdentifierStr, TrimmedStr
from app.schemas.catalog.brand import BrandRef
from app.schemas.catalog.model import CarModelRef
from app.schemas.user import UserRef


class CarCreate(BaseModel):
    """Listing fields submitted with a new car (images travel separately)"""
    stock_code: IdentifierStr
    plate_number: IdentifierStr
    brand: int
    model: int
    variant: TrimmedStr
    year_of_manufacture: int = Field(..., ge=1900)
    registration_year: int = Field(..., ge=1900)
    fuel_type: TrimmedStr
    transmission: TrimmedStr
    km: int = Field(..., ge=0)
    price: Decimal = Field(..., ge=0, max_digits=12, decimal_places=2)
    ownership: TrimmedStr
    registration_state: TrimmedStr
    rto: TrimmedStr
    insurance_valid_till: Optional[date] = None

    @field_validator("year_of_manufacture", "registration_year")
    @classmethod
    def not_in_future(cls, v: Optional[int]) -> Optional[int]:
        if v is not None and v > date.today().year + 1:
            raise ValueError("year cannot be in the future")
        return v


class CarUpdate(CarCreate):
    """Partial update: only the fields that were sent are applied"""
    stock_code: Optional[IdentifierStr] = None
    plate_number: Optional[IdentifierStr] = None
    brand: Optional[int] = None
    model: Optional[int] = None
    variant: Optional[TrimmedStr] = None
    year_of_manufacture: Optional[int] = Field(None, ge=1900)
    registration_year: Optional[int] = Field(None, ge=1900)
    fuel_type: Optional[TrimmedStr] = None
    transmission: Optional[TrimmedStr] = None
    km: Optional[int] = Field(None, ge=0)
    price: Optional[Decimal] = Field(None, ge=0, max_digits=12, decimal_places=2)
    ownership: Optional[TrimmedStr] = None
    registration_state: Optional[TrimmedStr] = None
    rto: Optional[TrimmedStr] = None


class CarRead(BaseModel):
    id: int
    stock_code: str
    plate_number: str
    brand: BrandRef
    model: CarModelRef
    variant: str
    year_of_manufacture: int
    registration_year: int
    fuel_type: str
    transmission: str
    km: int
    price: Decimal
    ownership: str
    registration_state: str
    rto: str
    insurance_valid_till: Optional[date]
    images: List[str]
    created_by: UserRef = Field(alias="createdBy")
    created_at: datetime = Field(alias="createdAt")
    updated_at: datetime = Field(alias="updatedAt")

    model_config = ConfigDict(from_attributes=True, populate_by_name=True)

    @field_serializer("price")
    def serialize_price(self, v: Decimal, _info):
        return float(v)


class CarResponse(BaseModel):
    success: bool = True
    message: Optional[str] = None
    car: CarRead


class CarListResponse(BaseModel):
    success: bool = True
    cars: List[CarRead]
    total_pages: int = Field(alias="totalPages")
    current_page: int = Field(alias="currentPage")
    total_cars: int = Field(alias="totalCars")

    model_config = ConfigDict(populate_by_name=True)


class CarFilter(BaseModel):
    brand: Optional[int] = None
    model: Optional[int] = None
    fuel_type: Optional[str] = None
    transmission: Optional[str] = None
    rto: Optional[str] = None
    registration_state: Optional[str] = None
