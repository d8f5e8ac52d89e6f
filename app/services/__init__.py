from .init_service import InitService
from .listing import CarService, ListingLifecycleService, merge_images
