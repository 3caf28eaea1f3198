from typing import Optional, Union


def to_record_id(value: Union[int, str]) -> Optional[int]:
    """Integer id from a path segment, None when it is not a number"""
    try:
        return int(value)
    except (TypeError, ValueError):
        return None
