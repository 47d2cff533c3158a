# product_api/models.py
from pydantic import BaseModel
from typing import Union

Number = Union[int, float]

class Product(BaseModel):
    id: int
    name: str
    description: str
    price: Number
    category: str
    stock: Number
