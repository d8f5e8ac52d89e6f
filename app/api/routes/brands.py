from fastapi import APIRouter, Depends, status

from app.api.dependencies import admin_required, staff_required
from app.schemas.catalog.brand import (BrandCreate, BrandUpdate, BrandRead,
                                       BrandResponse, BrandListResponse)
from app.services.catalog import brand as brand_service

router = APIRouter()


@router.get("", response_model=BrandListResponse, dependencies=[Depends(staff_required)])
async def list_brands():
    brands = await brand_service.get_all_brands()
    return BrandListResponse(brands=[BrandRead.model_validate(b) for b in brands])


@router.get("/{brand_id}", response_model=BrandResponse, dependencies=[Depends(staff_required)])
async def get_brand(brand_id: int):
    brand = await brand_service.get_brand(brand_id)
    return BrandResponse(brand=BrandRead.model_validate(brand))


@router.post("", response_model=BrandResponse, status_code=status.HTTP_201_CREATED,
             dependencies=[Depends(admin_required)])
async def create_brand(data: BrandCreate):
    brand = await brand_service.create_brand(data)
    return BrandResponse(message="Brand added successfully", brand=BrandRead.model_validate(brand))


@router.put("/{brand_id}", response_model=BrandResponse, dependencies=[Depends(admin_required)])
async def update_brand(brand_id: int, data: BrandUpdate):
    brand = await brand_service.update_brand(brand_id, data)
    return BrandResponse(message="Brand updated successfully", brand=BrandRead.model_validate(brand))


@router.delete("/{brand_id}", dependencies=[Depends(admin_required)])
async def delete_brand(brand_id: int):
    """Refused with 409 while the brand still has models"""
    await brand_service.delete_brand(brand_id)
    return {"success": True, "message": "Brand deleted successfully"}
