# product_api/core.py
import re
import time
from pydantic import BaseModel, StrictFloat, StrictInt, StrictStr
from typing import Optional, Dict, Any, List, Union

StrictNumber = Union[StrictInt, StrictFloat]
_ID_RE = re.compile(r"[+-]?[0-9]+")

REQUIRED_FIELDS = ("name", "description", "price", "category", "stock")

class ProductIn(BaseModel):
    # Every field is optional here so a missing one is reported as a 400
    # by the service instead of a 422 from the framework.
    # Strict types: a wrongly-typed value is a 400, never silently coerced.
    name: Optional[StrictStr] = None
    description: Optional[StrictStr] = None
    price: Optional[StrictNumber] = None
    category: Optional[StrictStr] = None
    stock: Optional[StrictNumber] = None

def _missing_fields(p: ProductIn) -> List[str]:
    return [f for f in REQUIRED_FIELDS if getattr(p, f) is None]

def _make_product_dict(product_id: int, p: ProductIn) -> Dict[str, Any]:
    return {
        "id": product_id,
        "name": p.name,
        "description": p.description,
        "price": p.price,
        "category": p.category,
        "stock": p.stock,
    }

def _parse_product_id(raw: str) -> Optional[int]:
    """Path ids are compared as integers; anything unparseable matches nothing."""
    if not isinstance(raw, str):
        return None
    raw = raw.strip()
    if not _ID_RE.fullmatch(raw):
        return None
    return int(raw)

def _find_index(products: List[Dict[str, Any]], product_id: Optional[int]) -> int:
    if product_id is None:
        return -1
    for i, p in enumerate(products):
        stored = p.get("id")
        if isinstance(stored, bool) or not isinstance(stored, (int, float)):
            continue
        if stored == product_id:
            return i
    return -1

def _now_ms() -> int:
    return int(time.time() * 1000)

def _next_product_id(products: List[Dict[str, Any]], now_ms: Optional[int] = None) -> int:
    candidate = _now_ms() if now_ms is None else now_ms
    taken = {p.get("id") for p in products}
    if candidate not in taken:
        return candidate
    highest = max(i for i in taken if isinstance(i, (int, float)) and not isinstance(i, bool))
    return int(highest) + 1
