"""
Database Schemas

Home furnishing storefront models.
Each document model maps to a MongoDB collection; request models describe
the JSON bodies the API accepts.
"""
from datetime import datetime
from typing import List, Optional

from pydantic import AliasChoices, BaseModel, Field, field_validator

# Largest id BSON can encode (signed 64-bit)
MAX_ID = 2**63 - 1


class ProductIn(BaseModel):
    """Fields an admin supplies when creating or replacing a product."""
    name: str = Field(..., min_length=1, description="Display name")
    description: Optional[str] = Field(None, description="Long description")
    price: float = Field(..., allow_inf_nan=False, description="Unit price")
    category: Optional[str] = Field(None, description="Free-form category, e.g. 'Living Room'")
    image_url: Optional[str] = Field(None, description="Primary image URL")
    dimensions: Optional[str] = Field(None, description="e.g. '220cm x 95cm x 85cm'")
    materials: Optional[str] = None
    fabrics: Optional[str] = None
    additional_images: List[str] = Field(default_factory=list, description="Extra image URLs, in display order")

    @field_validator("additional_images", mode="before")
    @classmethod
    def split_delimited(cls, value):
        # Older admin clients post the images as one comma separated string
        if value is None:
            return []
        if isinstance(value, str):
            return [part.strip() for part in value.split(",") if part.strip()]
        return value


class Product(ProductIn):
    """
    Products available in the store
    Collection: "products"
    """
    id: int


class LineItem(BaseModel):
    product_id: int = Field(..., ge=1, le=MAX_ID, validation_alias=AliasChoices("product_id", "productId", "id"))
    quantity: int = Field(..., ge=1)
    unit_price: Optional[float] = Field(
        None,
        allow_inf_nan=False,
        validation_alias=AliasChoices("unit_price", "unitPrice", "price"),
        description="Price the client saw; informational only",
    )


class OrderRequest(BaseModel):
    customer_name: str = Field(..., min_length=1)
    customer_email: str = Field(..., min_length=1)
    customer_phone: Optional[str] = None
    customer_address: Optional[str] = None
    items: List[LineItem]
    total_amount: Optional[float] = Field(None, allow_inf_nan=False, description="Client computed total; recomputed server side")


class OrderItem(BaseModel):
    product_id: int
    quantity: int = Field(..., ge=1)
    price: float = Field(..., description="Unit price at the time of purchase")


class Order(BaseModel):
    """
    Orders with their line items embedded
    Collection: "orders"
    """
    customer_name: str
    customer_email: str
    customer_phone: Optional[str] = None
    customer_address: Optional[str] = None
    total_amount: float
    status: str = Field("pending", description="Order status")
    items: List[OrderItem]


class OrderSummary(BaseModel):
    id: int
    customer_name: str
    customer_email: str
    customer_phone: Optional[str] = None
    customer_address: Optional[str] = None
    total_amount: float
    status: str
    created_at: datetime
    items_summary: str


class WaitlistRequest(BaseModel):
    email: Optional[str] = None


class WaitlistEntry(BaseModel):
    """
    Waitlist sign-ups
    Collection: "waitlist"
    """
    email: str
