from typing import Optional
from fastapi import APIRouter, Depends, Query, status

from app.api.dependencies import admin_required, staff_required
from app.schemas.catalog.model import (CarModelCreate, CarModelUpdate, CarModelRead,
                                       CarModelResponse, CarModelListResponse)
from app.services.catalog import model as model_service

router = APIRouter()


@router.get("", response_model=CarModelListResponse, dependencies=[Depends(staff_required)])
async def list_car_models(brand: Optional[int] = Query(None, description="Only models of this brand")):
    models = await model_service.get_car_models(brand_id=brand)
    return CarModelListResponse(models=[CarModelRead.model_validate(m) for m in models])


@router.get("/{model_id}", response_model=CarModelResponse, dependencies=[Depends(staff_required)])
async def get_car_model(model_id: int):
    model = await model_service.get_car_model(model_id)
    return CarModelResponse(model=CarModelRead.model_validate(model))


@router.post("", response_model=CarModelResponse, status_code=status.HTTP_201_CREATED,
             dependencies=[Depends(admin_required)])
async def create_car_model(data: CarModelCreate):
    model = await model_service.create_car_model(data)
    model = await model_service.get_car_model(model.id)
    return CarModelResponse(message="Model added successfully", model=CarModelRead.model_validate(model))


@router.put("/{model_id}", response_model=CarModelResponse, dependencies=[Depends(admin_required)])
async def update_car_model(model_id: int, data: CarModelUpdate):
    model = await model_service.update_car_model(model_id, data)
    return CarModelResponse(message="Model updated successfully", model=CarModelRead.model_validate(model))


@router.delete("/{model_id}", dependencies=[Depends(admin_required)])
async def delete_car_model(model_id: int):
    await model_service.delete_car_model(model_id)
    return {"success": True, "message": "Model deleted successfully"}
