from datetime import datetime
from typing import List, Optional
from pydantic import BaseModel, Field, ConfigDict

from app.enums.dropdown_field import DropdownField


class DropdownUpdate(BaseModel):
    options: List[str]


class DropdownRead(BaseModel):
    field_name: DropdownField
    options: List[str]
    updated_at: datetime = Field(alias="updatedAt")

    model_config = ConfigDict(from_attributes=True, populate_by_name=True)


class DropdownResponse(BaseModel):
    success: bool = True
    message: Optional[str] = None
    dropdown: DropdownRead


class DropdownListResponse(BaseModel):
    success: bool = True
    dropdowns: List[DropdownRead]
