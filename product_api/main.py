# product_api/main.py
import logging

from fastapi import FastAPI, Depends, Request, Response
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from . import config
from .core import ProductIn
from .models import Product
from .database import get_store
from .errors import ProductStoreError, StorageError, ValidationError
from .service import (
    list_products_logic, create_product_logic,
    update_product_logic, delete_product_logic
)

logging.basicConfig(
    level=config.LOG_LEVEL,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)

app = FastAPI(title="product-store (JSON file backed)")

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_methods=["*"],
    allow_headers=["*"],
)

# ---------------------------
# Error handlers
# ---------------------------
@app.exception_handler(ProductStoreError)
async def product_store_error_handler(request: Request, exc: ProductStoreError):
    return JSONResponse(status_code=exc.status_code, content={"message": exc.message})

@app.exception_handler(RequestValidationError)
async def request_validation_error_handler(request: Request, exc: RequestValidationError):
    logger.info(f"Unparseable body on {request.method} {request.url.path}: {exc.errors()}")
    err = ValidationError()
    return JSONResponse(status_code=err.status_code, content={"message": err.message})

def _storage_failure(exc: StorageError, message: str) -> StorageError:
    logger.exception(f"{message}: {exc}")
    return StorageError(message)

# ---------------------------
# Product endpoints
# ---------------------------
@app.get("/products")
async def list_products(store=Depends(get_store)):
    try:
        return await list_products_logic(store)
    except StorageError as e:
        raise _storage_failure(e, "Error retrieving products") from e

@app.post("/products", status_code=201, response_model=Product)
async def create_product(payload: ProductIn, store=Depends(get_store)):
    try:
        return await create_product_logic(store, payload)
    except StorageError as e:
        raise _storage_failure(e, "Error adding product") from e

@app.put("/products/{product_id}", response_model=Product)
async def update_product(product_id: str, payload: ProductIn, store=Depends(get_store)):
    try:
        return await update_product_logic(store, product_id, payload)
    except StorageError as e:
        raise _storage_failure(e, "Error updating product") from e

@app.delete("/products/{product_id}", status_code=204)
async def delete_product(product_id: str, store=Depends(get_store)):
    try:
        await delete_product_logic(store, product_id)
    except StorageError as e:
        raise _storage_failure(e, "Error deleting product") from e
    return Response(status_code=204)


if __name__ == "__main__":
    import uvicorn

    logger.info(f"Server is running on http://{config.HOST}:{config.PORT} (store: {config.PRODUCTS_DB_PATH})")
    uvicorn.run(app, host=config.HOST, port=config.PORT, log_level=config.LOG_LEVEL.lower())
