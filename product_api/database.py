# product_api/database.py
import copy
import json
import logging
import os
from pathlib import Path
from typing import Dict, Any, List, Optional

import aiofiles

from . import config
from .errors import StorageError

logger = logging.getLogger(__name__)

# The whole collection is read and rewritten on every call. There is no
# locking and no atomic replace, so a crash mid-write can leave a torn file.

class JsonFileStore:
    """Product collection kept as one JSON array in a single file."""

    def __init__(self, path: os.PathLike):
        self.path = Path(path)

    async def _ensure_file(self) -> None:
        if self.path.exists():
            return
        logger.info(f"Store file {self.path} missing, creating empty collection")
        self.path.parent.mkdir(parents=True, exist_ok=True)
        async with aiofiles.open(self.path, "w", encoding="utf-8") as f:
            await f.write("[]")

    async def read(self) -> List[Dict[str, Any]]:
        try:
            await self._ensure_file()
            async with aiofiles.open(self.path, "r", encoding="utf-8") as f:
                raw = await f.read()
            data = json.loads(raw)
        except (OSError, ValueError) as e:
            raise StorageError(f"Failed to read database file {self.path}") from e

        if not isinstance(data, list):
            raise StorageError(f"Database file {self.path} does not hold a JSON array")
        if not all(isinstance(p, dict) for p in data):
            raise StorageError(f"Database file {self.path} holds non-object entries")
        logger.debug(f"Read {len(data)} products from {self.path}")
        return data

    async def write(self, products: List[Dict[str, Any]]) -> None:
        try:
            payload = json.dumps(products, indent=2, ensure_ascii=False)
            async with aiofiles.open(self.path, "w", encoding="utf-8") as f:
                await f.write(payload + "\n")
        except (OSError, TypeError, ValueError) as e:
            raise StorageError(f"Failed to write to database file {self.path}") from e
        logger.debug(f"Wrote {len(products)} products to {self.path}")


class MemoryStore:
    """Same read/write capability as JsonFileStore, without touching disk."""

    def __init__(self, products: Optional[List[Dict[str, Any]]] = None):
        self._products: List[Dict[str, Any]] = copy.deepcopy(products or [])

    async def read(self) -> List[Dict[str, Any]]:
        return copy.deepcopy(self._products)

    async def write(self, products: List[Dict[str, Any]]) -> None:
        self._products = copy.deepcopy(products)


def get_store() -> JsonFileStore:
    return JsonFileStore(config.PRODUCTS_DB_PATH)
