from .images import merge_images
from .car_service import CarService
from .lifecycle import ListingLifecycleService
