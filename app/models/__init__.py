from .user import User
from .role import Role
from .catalog.brand import Brand
from .catalog.model import CarModel
from .catalog.dropdown import DropdownOption
from .car import Car
