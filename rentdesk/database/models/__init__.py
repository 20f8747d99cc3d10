from .user_model import User
from .customer_model import Customer
from .tablecloth_color_model import TableclothColor
from .inventory_model import Inventory
from .rental_model import Rental

__all__ = ["User", "Customer", "TableclothColor", "Inventory", "Rental"]
