"""
Order placement and the admin order listing.

An order and its line items are one MongoDB document, so the single
`insert_one` in `place_order` is the atomic unit: a failed placement
leaves nothing behind and two placements can never share items.
"""
import logging
from typing import Dict, List

from pymongo import DESCENDING
from pymongo.errors import PyMongoError

from database import ORDERS, PRODUCTS, Store, to_public
from errors import OrderFailedError, PersistenceError, ValidationError
from schemas import Order, OrderItem, OrderRequest, OrderSummary

logger = logging.getLogger(__name__)


def format_summary(entries: List[tuple]) -> str:
    return ", ".join(f"{name} (x{quantity})" for name, quantity in entries)


class OrderService:
    def __init__(self, store: Store):
        self.store = store

    def _load_products(self, product_ids) -> Dict[int, dict]:
        docs = self.store[PRODUCTS].find({"_id": {"$in": list(set(product_ids))}})
        return {d["_id"]: d for d in docs}

    def place_order(self, req: OrderRequest) -> int:
        if not req.items:
            raise ValidationError("Cart is empty")

        try:
            products = self._load_products(i.product_id for i in req.items)
        except PyMongoError as e:
            logger.exception("Order creation failed while loading products")
            raise OrderFailedError() from e

        # Price every line from the catalog, never from the client
        order_items: List[OrderItem] = []
        total = 0.0
        for item in req.items:
            prod = products.get(item.product_id)
            if prod is None:
                logger.error("Order creation failed: unknown product %s", item.product_id)
                raise OrderFailedError()
            price = float(prod["price"])
            order_items.append(OrderItem(product_id=item.product_id, quantity=item.quantity, price=price))
            total += price * item.quantity

        if req.total_amount is not None and abs(req.total_amount - total) > 0.005:
            logger.warning("Client total %.2f differs from catalog total %.2f; using catalog total",
                           req.total_amount, total)

        order = Order(
            customer_name=req.customer_name,
            customer_email=req.customer_email,
            customer_phone=req.customer_phone,
            customer_address=req.customer_address,
            total_amount=total,
            items=order_items,
        )
        try:
            order_id = self.store.create_document(ORDERS, order)
        except PyMongoError as e:
            logger.exception("Order creation failed")
            raise OrderFailedError() from e

        logger.info("Placed order %s with %d items, total %.2f", order_id, len(order_items), total)
        return order_id

    def list_orders_with_summary(self) -> List[OrderSummary]:
        """Newest orders first, each with a "Name (xN), ..." summary of its items.

        Items whose product has since been deleted are left out, and an order
        left with no items is not listed at all.
        """
        try:
            docs = self.store.get_documents(ORDERS, sort=[("created_at", DESCENDING), ("_id", DESCENDING)])
            products = self._load_products(
                item["product_id"] for d in docs for item in d.get("items") or []
            )
        except PyMongoError as e:
            raise PersistenceError("Failed to fetch orders") from e

        summaries = []
        for doc in docs:
            entries = [
                (products[item["product_id"]]["name"], item["quantity"])
                for item in doc.get("items") or []
                if item["product_id"] in products
            ]
            if not entries:
                continue
            row = to_public(doc)
            row.pop("items", None)
            summaries.append(OrderSummary(**row, items_summary=format_summary(entries)))
        return summaries
