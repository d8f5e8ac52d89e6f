from .auth import router as auth_router
from .cars import router as cars_router
from .brands import router as brands_router
from .car_models import router as car_models_router
from .dropdowns import router as dropdowns_router
