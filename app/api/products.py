from fastapi import APIRouter, Depends, HTTPException, Path, status
from sqlalchemy.orm import Session
from typing import Annotated, List

from app.database import get_db
from app.services.product_service import ProductService, DuplicateProductError
from app.schemas.product import (
    ProductCreate,
    ProductUpdate,
    ProductResponse,
    MessageResponse,
    ProductCreatedResponse,
    MAX_INT,
    MIN_INT
)

router = APIRouter(prefix="/products", tags=["Products"])

NOT_FOUND = "Product not found"

ProductId = Annotated[int, Path(ge=MIN_INT, le=MAX_INT, description="Product ID")]


@router.get(
    "",
    response_model=List[ProductResponse],
    summary="List all products",
    description="Get every product in the catalog."
)
def list_products(db: Session = Depends(get_db)):
    """Get all products. Returns an empty list when the catalog is empty."""
    service = ProductService(db)
    return service.list_all()


@router.get(
    "/{product_id}",
    response_model=ProductResponse,
    summary="Get product by ID",
    description="Get detailed information about a specific product."
)
def get_product(
    product_id: ProductId,
    db: Session = Depends(get_db)
):
    """Get a product by ID."""
    service = ProductService(db)
    product = service.get_by_id(product_id)

    if not product:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=NOT_FOUND
        )

    return product


@router.post(
    "",
    response_model=ProductCreatedResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create a new product",
    description="Create a new product with a unique name, price, and initial stock."
)
def create_product(
    product_data: ProductCreate,
    db: Session = Depends(get_db)
):
    """
    Create a new product.

    - **PRODUCTNAME**: Product name, must not already exist (required)
    - **PRICE**: Product price, must be positive (required)
    - **STOCK**: Initial stock quantity, must be non-negative (required)
    """
    service = ProductService(db)

    try:
        product = service.create(product_data)
    except DuplicateProductError as e:
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail=str(e)
        )

    return ProductCreatedResponse(message="Product created successfully", id=product.id)


@router.put(
    "/{product_id}",
    response_model=MessageResponse,
    summary="Update a product",
    description="Replace the name, price, and stock of a product."
)
def update_product(
    product_id: ProductId,
    product_data: ProductUpdate,
    db: Session = Depends(get_db)
):
    """
    Update a product.

    All three fields are required. The response reports success even when
    no product has the given ID.
    """
    service = ProductService(db)
    service.update(product_id, product_data)
    return MessageResponse(message="Product updated successfully")


@router.delete(
    "/{product_id}",
    response_model=MessageResponse,
    summary="Delete a product",
    description="Delete a product by ID."
)
def delete_product(
    product_id: ProductId,
    db: Session = Depends(get_db)
):
    """Delete a product."""
    service = ProductService(db)
    deleted = service.delete(product_id)

    if not deleted:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=NOT_FOUND
        )

    return MessageResponse(message="Product deleted successfully")
