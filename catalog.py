import logging
from typing import List, Optional

from pymongo.errors import PyMongoError

from database import PRODUCTS, Store, to_public, utcnow
from errors import NotFoundError, PersistenceError
from schemas import Product, ProductIn

logger = logging.getLogger(__name__)

IMAGE_DELIMITER = ","


def join_images(images: Optional[List[str]]) -> Optional[str]:
    if not images:
        return None
    return IMAGE_DELIMITER.join(images)


def split_images(value) -> List[str]:
    if not value:
        return []
    if isinstance(value, list):
        return value
    return [part.strip() for part in value.split(IMAGE_DELIMITER) if part.strip()]


def to_document(fields: ProductIn) -> dict:
    data = fields.model_dump()
    data["additional_images"] = join_images(fields.additional_images)
    return data


def from_document(doc: dict) -> Product:
    d = to_public(doc)
    d["additional_images"] = split_images(d.get("additional_images"))
    return Product(**d)


class CatalogService:
    def __init__(self, store: Store):
        self.store = store

    def list_products(self) -> List[Product]:
        try:
            docs = self.store.get_documents(PRODUCTS, sort=[("_id", 1)])
        except PyMongoError as e:
            raise PersistenceError("Failed to fetch products") from e
        return [from_document(d) for d in docs]

    def get_product(self, product_id: int) -> Product:
        try:
            doc = self.store[PRODUCTS].find_one({"_id": product_id})
        except PyMongoError as e:
            raise PersistenceError("Failed to fetch product") from e
        if not doc:
            raise NotFoundError("Product not found")
        return from_document(doc)

    def create_product(self, fields: ProductIn) -> int:
        try:
            product_id = self.store.create_document(PRODUCTS, to_document(fields))
        except PyMongoError as e:
            raise PersistenceError("Failed to add product") from e
        logger.info("Created product %s (%s)", product_id, fields.name)
        return product_id

    def update_product(self, product_id: int, fields: ProductIn) -> None:
        """Replace every editable field of a product."""
        data = to_document(fields)
        data["updated_at"] = utcnow()
        try:
            result = self.store[PRODUCTS].update_one({"_id": product_id}, {"$set": data})
        except PyMongoError as e:
            raise PersistenceError("Failed to update product") from e
        if result.matched_count == 0:
            raise NotFoundError("Product not found")
        logger.info("Updated product %s", product_id)

    def delete_product(self, product_id: int) -> None:
        # Orders keep their product_id references; the order listing skips them
        try:
            result = self.store[PRODUCTS].delete_one({"_id": product_id})
        except PyMongoError as e:
            raise PersistenceError("Failed to delete product") from e
        if result.deleted_count == 0:
            raise NotFoundError("Product not found")
        logger.info("Deleted product %s", product_id)
