"""SQLAlchemy models for the dashboard schema."""

from dashboard.models.base import Base
from dashboard.models.customer import Customer
from dashboard.models.invoice import Invoice
from dashboard.models.user import User

__all__ = [
    "Base",
    "Customer",
    "Invoice",
    "User",
]
