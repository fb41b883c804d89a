# app/utils/pagination.py

from pymongo import ASCENDING, DESCENDING

from app.utils.errors import BadRequestError

SORT_ORDERS = ("asc", "desc")

def build_pagination(page: int, page_size: int):
    if page < 1 or page_size < 1:
        raise BadRequestError("page and page_size must be positive")
    skip = (page - 1) * page_size
    return skip, page_size

def build_sort(sort_by: str = "created_at", sort_order: str = "desc"):
    if sort_order not in SORT_ORDERS:
        raise BadRequestError(f"sort_order must be one of {', '.join(SORT_ORDERS)}")
    direction = DESCENDING if sort_order == "desc" else ASCENDING
    # _id breaks ties between messages created in the same instant
    return [(sort_by, direction), ("_id", direction)]
