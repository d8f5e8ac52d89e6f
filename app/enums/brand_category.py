from enum import Enum


class BrandCategory(str, Enum):
    regular = "regular"
    luxury = "luxury"
