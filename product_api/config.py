# product_api/config.py
from dotenv import load_dotenv
import os

load_dotenv()

PRODUCTS_DB_PATH = os.getenv("PRODUCTS_DB_PATH", "data.json")
HOST = os.getenv("HOST", "0.0.0.0")
PORT = int(os.getenv("PORT", "3000"))
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
PRODUCTS_API_URL = os.getenv("PRODUCTS_API_URL", "http://127.0.0.1:3000")
