from .brand import create_brand, get_all_brands, get_brand, update_brand, delete_brand
from .model import (create_car_model, get_car_models, get_car_model,
                    update_car_model, delete_car_model)
from .dropdown import get_all_dropdowns, get_dropdown, update_dropdown
