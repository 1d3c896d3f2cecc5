from .database import Database, get_database, reset_database
from .migrations import init_db
from .models import Brand, Tenant
from .utils import get_db

__all__ = [
    "Database",
    "get_database",
    "reset_database",
    "init_db",
    "Brand",
    "Tenant",
    "get_db",
]
