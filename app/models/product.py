from sqlalchemy import Column, Integer, String, Numeric

from app.database import Base


class Product(Base):
    """
    Product model mapped onto the PRODUCTS table.

    Attributes:
        id: Unique identifier, generated by the database
        name: Product name (unique among products, checked by the service)
        price: Product price (positive, checked by the request schema)
        stock: Available quantity (non-negative, checked by the request schema)
    """
    __tablename__ = "PRODUCTS"

    id = Column("PRODUCTID", Integer, primary_key=True, autoincrement=True)
    name = Column("PRODUCTNAME", String(100), nullable=False)
    price = Column("PRICE", Numeric(10, 2, asdecimal=False), nullable=False)
    stock = Column("STOCK", Integer, nullable=False)

    def __repr__(self):
        return f"<Product(id={self.id}, name='{self.name}', stock={self.stock})>"
