from .car import CarCreate, CarUpdate, CarRead, CarResponse, CarListResponse, CarFilter
from .catalog.brand import BrandCreate, BrandUpdate, BrandRead, BrandResponse, BrandListResponse
from .catalog.model import (CarModelCreate, CarModelUpdate, CarModelRead,
                            CarModelResponse, CarModelListResponse)
from .catalog.dropdown import DropdownUpdate, DropdownRead, DropdownResponse, DropdownListResponse
from .user import UserRef, UserResponse, TokenResponse
