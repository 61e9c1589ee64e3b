from sqlalchemy.orm import Session
from sqlalchemy import select, update, delete, func
from sqlalchemy.exc import SQLAlchemyError
from typing import Optional, Sequence
import logging

from app.models.product import Product
from app.schemas.product import ProductCreate, ProductUpdate

logger = logging.getLogger(__name__)


class DuplicateProductError(Exception):
    """Exception raised when a product with the same name already exists."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Product name '{name}' already exists.")


class ProductService:
    """
    Service class for Product CRUD operations.

    Every operation issues a single parameterized statement, except create,
    which checks for a duplicate name before inserting. The check and the
    insert are not atomic: two concurrent creates with the same name can
    both pass the check.

    Storage errors are not caught here beyond rolling back the session;
    they propagate to the API layer's exception handlers.
    """

    def __init__(self, db: Session):
        self.db = db

    def list_all(self) -> Sequence[Product]:
        """Return every product, in storage order."""
        return self.db.scalars(select(Product)).all()

    def get_by_id(self, product_id: int) -> Optional[Product]:
        """
        Get a product by ID.

        Args:
            product_id: Product ID to look up

        Returns:
            Product instance or None if not found
        """
        return self.db.scalars(select(Product).where(Product.id == product_id)).first()

    def exists_by_name(self, name: str) -> bool:
        count = self.db.scalar(
            select(func.count()).select_from(Product).where(Product.name == name)
        )
        return count > 0

    def create(self, product_data: ProductCreate) -> Product:
        """
        Create a new product.

        Args:
            product_data: Validated product data

        Returns:
            Created product instance

        Raises:
            DuplicateProductError: If a product with the same name exists
        """
        if self.exists_by_name(product_data.name):
            raise DuplicateProductError(product_data.name)

        product = Product(
            name=product_data.name,
            price=product_data.price,
            stock=product_data.stock
        )
        try:
            self.db.add(product)
            self.db.commit()
        except SQLAlchemyError:
            self.db.rollback()
            raise
        self.db.refresh(product)

        logger.info(f"Product #{product.id} '{product.name}' created")
        return product

    def update(self, product_id: int, product_data: ProductUpdate) -> int:
        """
        Replace name, price and stock of a product.

        The name is not checked for duplicates and a missing product is
        not an error.

        Args:
            product_id: ID of product to update
            product_data: Validated replacement data

        Returns:
            Number of rows matched by the update
        """
        try:
            result = self.db.execute(
                update(Product)
                .where(Product.id == product_id)
                .values({
                    Product.name: product_data.name,
                    Product.price: product_data.price,
                    Product.stock: product_data.stock,
                })
            )
            self.db.commit()
        except SQLAlchemyError:
            self.db.rollback()
            raise

        if result.rowcount == 0:
            logger.warning(f"Update matched no product with ID {product_id}")
        return result.rowcount

    def delete(self, product_id: int) -> bool:
        """
        Delete a product.

        Args:
            product_id: ID of product to delete

        Returns:
            True if deleted, False if not found
        """
        try:
            result = self.db.execute(delete(Product).where(Product.id == product_id))
            self.db.commit()
        except SQLAlchemyError:
            self.db.rollback()
            raise

        if result.rowcount > 0:
            logger.info(f"Product #{product_id} deleted")
        return result.rowcount > 0
