from datetime import date
from decimal import Decimal
from typing import List, Optional

from fastapi import APIRouter, Depends, File, Form, Query, UploadFile, status
from fastapi.exceptions import RequestValidationError
from pydantic import ValidationError as SchemaValidationError

from app.api.dependencies import staff_required
from app.core.config import settings
from app.models.user import User
from app.schemas.car import CarCreate, CarUpdate, CarRead, CarResponse, CarListResponse, CarFilter
from app.services.listing import CarService, ListingLifecycleService
from app.services.store import get_image_storage
from app.services.store.base import ImageStorage

router = APIRouter()


def _build(schema, values: dict):
    try:
        return schema(**values)
    except SchemaValidationError as e:
        raise RequestValidationError(e.errors(include_url=False, include_context=False))


def car_create_form(
    stock_code: str = Form(...),
    plate_number: str = Form(...),
    brand: int = Form(...),
    model: int = Form(...),
    variant: str = Form(...),
    year_of_manufacture: int = Form(...),
    registration_year: int = Form(...),
    fuel_type: str = Form(...),
    transmission: str = Form(...),
    km: int = Form(...),
    price: Decimal = Form(...),
    ownership: str = Form(...),
    registration_state: str = Form(...),
    rto: str = Form(...),
    insurance_valid_till: Optional[date] = Form(None),
) -> CarCreate:
    return _build(CarCreate, dict(
        stock_code=stock_code, plate_number=plate_number, brand=brand, model=model,
        variant=variant, year_of_manufacture=year_of_manufacture,
        registration_year=registration_year, fuel_type=fuel_type, transmission=transmission,
        km=km, price=price, ownership=ownership, registration_state=registration_state,
        rto=rto, insurance_valid_till=insurance_valid_till,
    ))


def car_update_form(
    stock_code: Optional[str] = Form(None),
    plate_number: Optional[str] = Form(None),
    brand: Optional[int] = Form(None),
    model: Optional[int] = Form(None),
    variant: Optional[str] = Form(None),
    year_of_manufacture: Optional[int] = Form(None),
    registration_year: Optional[int] = Form(None),
    fuel_type: Optional[str] = Form(None),
    transmission: Optional[str] = Form(None),
    km: Optional[int] = Form(None),
    price: Optional[Decimal] = Form(None),
    ownership: Optional[str] = Form(None),
    registration_state: Optional[str] = Form(None),
    rto: Optional[str] = Form(None),
    insurance_valid_till: Optional[date] = Form(None),
) -> dict:
    """Only the fields present in the request end up in the returned dict"""
    sent = {key: value for key, value in dict(
        stock_code=stock_code, plate_number=plate_number, brand=brand, model=model,
        variant=variant, year_of_manufacture=year_of_manufacture,
        registration_year=registration_year, fuel_type=fuel_type, transmission=transmission,
        km=km, price=price, ownership=ownership, registration_state=registration_state,
        rto=rto, insurance_valid_till=insurance_valid_till,
    ).items() if value is not None}
    return _build(CarUpdate, sent).model_dump(exclude_unset=True)


@router.get("", response_model=CarListResponse)
async def list_cars(
    brand: Optional[int] = Query(None),
    model: Optional[int] = Query(None),
    fuel_type: Optional[str] = Query(None),
    transmission: Optional[str] = Query(None),
    rto: Optional[str] = Query(None),
    registration_state: Optional[str] = Query(None),
    page: int = Query(1, ge=1, description="Page number, starting at 1"),
    limit: int = Query(settings.DEFAULT_PAGE_SIZE, ge=1, le=settings.MAX_PAGE_SIZE),
    current_user: User = Depends(staff_required)
):
    filters = CarFilter(
        brand=brand, model=model, fuel_type=fuel_type, transmission=transmission,
        rto=rto, registration_state=registration_state
    )
    cars, total, pages = await CarService.list_cars(filters, page=page, page_size=limit)
    return CarListResponse(
        cars=[CarRead.model_validate(car) for car in cars],
        total_pages=pages,
        current_page=page,
        total_cars=total
    )


@router.get("/{car_id}", response_model=CarResponse)
async def get_car(car_id: int, current_user: User = Depends(staff_required)):
    car = await CarService.get_car(car_id)
    return CarResponse(car=CarRead.model_validate(car))


@router.post("", response_model=CarResponse, status_code=status.HTTP_201_CREATED)
async def create_car(
    data: CarCreate = Depends(car_create_form),
    images: Optional[List[UploadFile]] = File(None, description="4 to 10 images (jpg, png, webp)"),
    current_user: User = Depends(staff_required),
    storage: ImageStorage = Depends(get_image_storage)
):
    car = await ListingLifecycleService.create_listing(data, images or [], current_user, storage)
    return CarResponse(message="Car added successfully", car=CarRead.model_validate(car))


@router.put("/{car_id}", response_model=CarResponse)
async def update_car(
    car_id: int,
    changes: dict = Depends(car_update_form),
    images: Optional[List[UploadFile]] = File(None, description="Images appended to the listing"),
    removeImages: Optional[List[str]] = Form(None, description="Image URLs to drop"),
    current_user: User = Depends(staff_required),
    storage: ImageStorage = Depends(get_image_storage)
):
    car = await ListingLifecycleService.update_listing(
        car_id, changes, images or [], removeImages, storage
    )
    return CarResponse(message="Car updated successfully", car=CarRead.model_validate(car))


@router.delete("/{car_id}")
async def delete_car(car_id: int, current_user: User = Depends(staff_required)):
    await ListingLifecycleService.delete_listing(car_id)
    return {"success": True, "message": "Car deleted successfully"}
