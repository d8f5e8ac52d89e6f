from .user_role import UserRole
from .brand_category import BrandCategory
from .dropdown_field import DropdownField
