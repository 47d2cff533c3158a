# product_api/service.py
import logging
from typing import Dict, Any, List

from .core import (
    ProductIn, _missing_fields, _make_product_dict,
    _parse_product_id, _find_index, _next_product_id
)
from .errors import ValidationError, NotFoundError

logger = logging.getLogger(__name__)

# Request logic for the product endpoints. Each call is one
# read-modify-write against whatever store the route injects.

def _require_fields(payload: ProductIn) -> None:
    missing = _missing_fields(payload)
    if missing:
        logger.info(f"Rejected product payload, missing: {', '.join(missing)}")
        raise ValidationError(missing)

async def list_products_logic(store) -> List[Dict[str, Any]]:
    return await store.read()

async def create_product_logic(store, payload: ProductIn) -> Dict[str, Any]:
    _require_fields(payload)
    products = await store.read()
    product = _make_product_dict(_next_product_id(products), payload)
    products.append(product)
    await store.write(products)
    logger.info(f"Created product {product['id']} ({product['name']!r})")
    return product

async def update_product_logic(store, product_id: str, payload: ProductIn) -> Dict[str, Any]:
    _require_fields(payload)
    pid = _parse_product_id(product_id)
    products = await store.read()
    idx = _find_index(products, pid)
    if idx == -1:
        raise NotFoundError()

    products[idx] = _make_product_dict(pid, payload)
    await store.write(products)
    logger.info(f"Updated product {pid}")
    return products[idx]

async def delete_product_logic(store, product_id: str) -> None:
    pid = _parse_product_id(product_id)
    products = await store.read()
    idx = _find_index(products, pid)
    if idx == -1:
        raise NotFoundError()

    del products[idx]
    await store.write(products)
    logger.info(f"Deleted product {pid}")
