from decimal import Decimal

from pydantic import BaseModel, Field, ConfigDict, field_serializer

# Range of the INTEGER columns (PRODUCTID, STOCK)
MAX_INT = 2**31 - 1
MIN_INT = -(2**31)


class ProductBase(BaseModel):
    """Base schema for Product with common attributes."""
    name: str = Field(..., alias="PRODUCTNAME", min_length=1, max_length=100, description="Product name")
    price: Decimal = Field(
        ...,
        alias="PRICE",
        gt=0,
        max_digits=10,
        decimal_places=2,
        description="Product price (must be positive, at most two decimal places)"
    )
    stock: int = Field(
        ...,
        alias="STOCK",
        ge=0,
        le=MAX_INT,
        strict=True,
        description="Available stock (must be non-negative)"
    )

    model_config = ConfigDict(populate_by_name=True)

    @field_serializer("price")
    def serialize_price(self, price: Decimal) -> float:
        return float(price)


class ProductCreate(ProductBase):
    """Schema for creating a new product."""
    pass


class ProductUpdate(ProductBase):
    """Schema for updating a product. All fields are replaced."""
    pass


class ProductResponse(ProductBase):
    """Schema for product response including the generated identifier."""
    id: int = Field(..., alias="PRODUCTID")

    model_config = ConfigDict(populate_by_name=True, from_attributes=True)


class MessageResponse(BaseModel):
    """Confirmation returned by write endpoints."""
    message: str


class ProductCreatedResponse(MessageResponse):
    """Confirmation returned by the create endpoint."""
    id: int = Field(..., alias="PRODUCTID")

    model_config = ConfigDict(populate_by_name=True)
