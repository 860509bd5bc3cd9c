from __future__ import annotations

from typing import Any

from pydantic import BaseModel


def to_jsonable(obj: Any) -> Any:
    """
    Convert API records (or lists of them) to JSON-serializable equivalents.

    Notes:
    - pydantic records are dumped with their wire names (`type`, not `image_type`).

    """
    if obj is None or isinstance(obj, (str, int, float, bool)):
        return obj

    if isinstance(obj, BaseModel):
        return obj.model_dump(mode="json", by_alias=True)

    if isinstance(obj, (list, tuple)):
        return [to_jsonable(v) for v in obj]

    return str(obj)
