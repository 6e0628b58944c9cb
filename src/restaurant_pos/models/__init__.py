from .menu import Menu
from .food import Food
from .table import Table
from .order import Order
from .order_item import OrderItem, QuantityEnum
from .invoice import Invoice, PaymentMethodEnum, PaymentStatusEnum
from .user import User

__all__ = [
    "Menu",
    "Food",
    "Table",
    "Order",
    "OrderItem",
    "QuantityEnum",
    "Invoice",
    "PaymentMethodEnum",
    "PaymentStatusEnum",
    "User",
]
