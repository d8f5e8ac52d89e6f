from enum import Enum


class DropdownField(str, Enum):
    fuel_type = "fuel_type"
    transmission = "transmission"
    ownership = "ownership"
    registration_state = "registration_state"
