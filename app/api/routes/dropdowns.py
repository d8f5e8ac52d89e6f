from fastapi import APIRouter, Depends

from app.api.dependencies import admin_required, staff_required
from app.schemas.catalog.dropdown import (DropdownUpdate, DropdownRead,
                                          DropdownResponse, DropdownListResponse)
from app.services.catalog import dropdown as dropdown_service

router = APIRouter()


@router.get("", response_model=DropdownListResponse, dependencies=[Depends(staff_required)])
async def list_dropdowns():
    dropdowns = await dropdown_service.get_all_dropdowns()
    return DropdownListResponse(dropdowns=[DropdownRead.model_validate(d) for d in dropdowns])


@router.get("/{field_name}", response_model=DropdownResponse, dependencies=[Depends(staff_required)])
async def get_dropdown(field_name: str):
    dropdown = await dropdown_service.get_dropdown(field_name)
    return DropdownResponse(dropdown=DropdownRead.model_validate(dropdown))


@router.put("/{field_name}", response_model=DropdownResponse, dependencies=[Depends(admin_required)])
async def update_dropdown(field_name: str, data: DropdownUpdate):
    """Replace the whole option list (no merge)"""
    dropdown = await dropdown_service.update_dropdown(field_name, data.options)
    return DropdownResponse(
        message="Dropdown options updated successfully",
        dropdown=DropdownRead.model_validate(dropdown)
    )
