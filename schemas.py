"""
Database Schemas for the storefront catalog

Each Pydantic model describes the documents of one MongoDB collection:
Product -> products, Order -> orders, Review -> reviews, User -> users,
WishlistItem -> wishlist. Stored documents are not validated on read; these
models are only used when the tools create documents themselves.
"""
from typing import Dict, List, Optional, Union
from pydantic import BaseModel, Field


class Color(BaseModel):
    name: str
    code: Optional[str] = None


class Product(BaseModel):
    name: str
    category: str
    sub_category: Optional[str] = None
    price: float = Field(..., ge=0)
    rating: float = Field(4.0, ge=0, le=5)
    reviews: int = Field(0, ge=0, description="Review count")
    description: Optional[str] = None
    image: Optional[str] = None
    specifications: Dict[str, str] = {}
    sizes: Optional[List[str]] = None
    colors: List[Union[str, Color]] = []
    seller_id: str = "system_generated"
    is_approved: bool = True
    status: str = "Active"


class OrderItem(BaseModel):
    product_id: str
    name: str
    price: float
    quantity: int = 1
    image: Optional[str] = None


class Order(BaseModel):
    order_id: str
    user_id: str
    items: List[OrderItem]
    status: str = Field("Placed", description="Placed | Processing | Shipped | Delivered | Cancelled")


class Review(BaseModel):
    user_id: str
    product_id: str
    product_name: Optional[str] = None
    customer_name: Optional[str] = None
    rating: int = Field(..., ge=1, le=5)
    verified: bool = False
    status: str = "Active"


class User(BaseModel):
    full_name: str
    role: str = "CONSUMER"
    phone_number: str = ""
    email: Optional[str] = None


class WishlistItem(BaseModel):
    user_id: str
    product_id: str
    name: str
    price: float
    image: Optional[str] = None
    category: Optional[str] = None
    rating: Optional[float] = None
    reviews: int = 0
    added_at: int = Field(..., description="Epoch milliseconds")
