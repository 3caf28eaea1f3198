from typing import Any
from config.setting import settings


def filter_records(records: list[dict], **filters: Any) -> list[dict]:
    """Keep records whose fields contain every non-empty filter value"""
    for field, value in filters.items():
        if value:
            records = [record for record in records if value in record[field]]
    return records


def paginate(records: list[dict], page: int, limit: int) -> list[dict]:
    # out of range values are clamped
    page = max(page, 1)
    limit = min(max(limit, 1), settings.MAX_PAGE_SIZE)
    start = (page - 1) * limit
    return records[start:start + limit]
