from .pagination import Pagination
from .unit_of_work import UnitOfWork

__all__ = ["Pagination", "UnitOfWork"]
