"""
Record API Schemas - Request/response models per resource

These models only document the usual fields in /docs. Request bodies are
read as plain JSON objects and stored as sent; the repositories check
required-field presence and nothing else.
"""

from typing import Dict, List, Optional, Type, Union

from pydantic import BaseModel, ConfigDict, Field

Number = Union[int, float]


class RecordBase(BaseModel):
    """Common base: optional read-only id, extra fields allowed"""

    model_config = ConfigDict(extra="allow")

    id: Optional[str] = Field(None, description="Generated on creation; never changed by updates")


class User(RecordBase):
    model_config = ConfigDict(extra="allow", json_schema_extra={"example": {
        "name": "Camila Basso",
        "contact_email": "camila.basso@unesc.net",
        "user": "camila.basso",
        "pwd": "7a6cc1282c5f6ec0235acd2bfa780145aaskem5n",
        "level": "admin",
        "status": "on",
    }})

    name: Optional[str] = Field(None, description="User's full name")
    contact_email: Optional[str] = Field(None, description="User's email")
    user: Optional[str] = Field(None, description="Login name")
    pwd: Optional[str] = Field(None, description="Password hash")
    level: Optional[str] = Field(None, description="Authority level")
    status: Optional[str] = Field(None, description="on = active, off = inactive")


class Product(RecordBase):
    model_config = ConfigDict(extra="allow", json_schema_extra={"example": {
        "name": "Martelo",
        "description": "Martelo com cabo de madeira",
        "price": 20,
        "stock_quantity": 15,
        "supplier_id": "7a6cc1282c5f6ec0235acd2bfa780145aa2a67fd",
        "status": "on",
    }})

    name: Optional[str] = Field(None, description="Product name")
    description: Optional[str] = Field(None, description="Product description")
    price: Optional[Union[Number, str]] = Field(None, description="Unit price")
    stock_quantity: Optional[Union[int, str]] = Field(None, description="Units in stock")
    supplier_id: Optional[str] = Field(None, description="Supplier id")
    status: Optional[str] = Field(None, description="on = active, off = inactive")


class Store(RecordBase):
    model_config = ConfigDict(extra="allow", json_schema_extra={"example": {
        "store_name": "Bingo Heeler",
        "cnpj": "12.123.123.1234-12",
        "address": "Bandit Hemmer, 42",
        "phone_number": "48 9696 5858",
        "contact_email": "down@bingo.com",
        "status": "on",
    }})

    store_name: Optional[str] = Field(None, description="Store name")
    cnpj: Optional[str] = Field(None, description="Company registration number")
    address: Optional[str] = Field(None, description="Street address")
    phone_number: Optional[str] = Field(None, description="Contact phone")
    contact_email: Optional[str] = Field(None, description="Contact email")
    status: Optional[str] = Field(None, description="on = active, off = inactive")


class OrderItem(BaseModel):
    model_config = ConfigDict(extra="allow")

    product_id: Optional[str] = Field(None, description="Product id")
    quantity: Optional[int] = Field(None, description="Units ordered")
    campaign_id: Optional[str] = Field(None, description="Campaign applied to this line")
    unit_price: Optional[Number] = Field(None, description="Price per unit")


class Order(RecordBase):
    model_config = ConfigDict(extra="allow", json_schema_extra={"example": {
        "store_id": "7a6cc1282c5f6ec0235acd2bfa780145aa2a67fd",
        "items": [
            {"product_id": "101", "quantity": 2, "campaign_id": "301", "unit_price": 20.0}
        ],
        "total_amount": 123.0,
        "status": "Pending",
        "date": "2023-08-15",
    }})

    store_id: Optional[str] = Field(None, description="Store placing the order")
    items: Optional[List[OrderItem]] = Field(None, description="Line items")
    total_amount: Optional[Number] = Field(None, description="Order total")
    status: Optional[str] = Field(None, description="Pending, Shipped or Delivered")
    date: Optional[str] = Field(
        None,
        description="dd/mm/yyyy or yyyy-mm-dd[ time]; stored as dd/mm/yyyy"
    )


class Supplier(RecordBase):
    model_config = ConfigDict(extra="allow", json_schema_extra={"example": {
        "supplier_name": "Judite Heeler",
        "supplier_category": "Informática, Segurança",
        "contact_email": "j.heeler@gmail.com",
        "phone_number": "48 9696 5858",
        "status": "on",
    }})

    supplier_name: Optional[str] = Field(None, description="Supplier name")
    supplier_category: Optional[str] = Field(None, description="Category or segment")
    contact_email: Optional[str] = Field(None, description="Contact email")
    phone_number: Optional[str] = Field(None, description="Contact phone")
    status: Optional[str] = Field(None, description="on = active, off = inactive")


class Campaign(RecordBase):
    model_config = ConfigDict(extra="allow", json_schema_extra={"example": {
        "supplier_id": "7a6cc1282c5f6ec0235acd2bfa780145aa2a67fd",
        "name": "Black Friday",
        "start_date": "2023-08-15 16:00:00",
        "end_date": "2023-08-20 23:59:59",
        "discount_percentage": 20,
    }})

    supplier_id: Optional[str] = Field(None, description="Supplier running the campaign")
    name: Optional[str] = Field(None, description="Campaign name")
    start_date: Optional[str] = Field(None, description="Start (YYYY-MM-DD HH:MM:SS)")
    end_date: Optional[str] = Field(None, description="End (YYYY-MM-DD HH:MM:SS)")
    discount_percentage: Optional[Number] = Field(None, description="Discount in percent")


class ErrorResponse(BaseModel):
    """Body of 4xx/5xx responses"""

    detail: str = Field(..., description="Human-readable error message")


def example_for(schema: Type[RecordBase]) -> Dict:
    """Example body declared on a schema, or an empty object"""
    extra = schema.model_config.get("json_schema_extra") or {}
    return dict(extra.get("example", {})) if isinstance(extra, dict) else {}


RECORD_SCHEMAS: Dict[str, Type[RecordBase]] = {
    "users": User,
    "products": Product,
    "stores": Store,
    "orders": Order,
    "suppliers": Supplier,
    "campaigns": Campaign,
}
