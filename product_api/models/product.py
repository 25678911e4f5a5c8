from datetime import datetime, timezone

from sqlalchemy import Integer, Column, String, Numeric, DateTime

from product_api.database import Base


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class Product(Base):
    """
        SQLAlchemy model for the 'products' table.

        Instances built by the CSV import pipeline stay transient until the
        repository persists them, which is when `id_product` is assigned.

        Attributes:
            __tablename__ (str): table name, 'products'.
            id_product (Column): primary key, assigned by the database and never changed afterwards.
            name (Column): product name, at most 100 characters.
            description (Column): product description, at most 200 characters.
            price (Column): unit price, decimal with two fractional digits.
            stock (Column): units in stock.
            category (Column): optional category label, at most 50 characters.
            created_at (Column): UTC creation timestamp, set on insert.
    """
    __tablename__ = "products"

    id_product = Column(Integer, primary_key=True, index=True)
    name = Column(String(100), nullable=False)
    description = Column(String(200), nullable=False)
    price = Column(Numeric(18, 2), nullable=False)
    stock = Column(Integer, nullable=False, default=0)
    category = Column(String(50), default=None, index=True)
    created_at = Column(DateTime(timezone=True), default=_utcnow, nullable=False)

    def __repr__(self) -> str:
        return f"<Product id={self.id_product} name={self.name!r}>"
