# sdk/products.py
import requests
import httpx
from typing import Optional, Union, Dict, Any, List

Number = Union[int, float]

class ProductClient:
    def __init__(self, base_url: str = "http://127.0.0.1:3000", timeout: int = 10,
                 async_transport: Optional[httpx.AsyncBaseTransport] = None):
        self.base_url = base_url.rstrip("/")
        self.session = requests.Session()
        self.timeout = timeout
        # lets the async calls target an in-process app (httpx.ASGITransport)
        self.async_transport = async_transport

    @staticmethod
    def _payload(name: str, description: str, price: Number, category: str, stock: Number) -> Dict[str, Any]:
        return {
            "name": name, "description": description, "price": price,
            "category": category, "stock": stock
        }

    def list_products(self) -> List[Dict[str, Any]]:
        r = self.session.get(f"{self.base_url}/products", timeout=self.timeout)
        r.raise_for_status()
        return r.json()

    def create_product(self, name: str, description: str, price: Number, category: str, stock: Number):
        r = self.session.post(f"{self.base_url}/products",
                              json=self._payload(name, description, price, category, stock),
                              timeout=self.timeout)
        r.raise_for_status()
        return r.json()

    def update_product(self, product_id: int, name: str, description: str, price: Number, category: str, stock: Number):
        r = self.session.put(f"{self.base_url}/products/{product_id}",
                             json=self._payload(name, description, price, category, stock),
                             timeout=self.timeout)
        r.raise_for_status()
        return r.json()

    def delete_product(self, product_id: int) -> None:
        r = self.session.delete(f"{self.base_url}/products/{product_id}", timeout=self.timeout)
        r.raise_for_status()

    def get_product(self, product_id: int) -> Optional[Dict[str, Any]]:
        # no single-item endpoint on the server; filter the full listing
        for p in self.list_products():
            if p.get("id") == product_id:
                return p
        return None

    # Async create (example)
    async def create_product_async(self, name: str, description: str, price: Number, category: str, stock: Number):
        async with httpx.AsyncClient(timeout=self.timeout, transport=self.async_transport) as client:
            r = await client.post(f"{self.base_url}/products",
                                  json=self._payload(name, description, price, category, stock))
            r.raise_for_status()
            return r.json()
