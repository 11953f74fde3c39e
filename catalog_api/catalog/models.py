"""SQLAlchemy models for the product catalog.

Defines Attribute, ProductType, Product and ProductVariant tables for
persistent storage.
"""

from datetime import datetime, timezone

from sqlalchemy import DateTime, Float, ForeignKey, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from catalog_api.infrastructure.database import Base


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class Attribute(Base):
    """Catalog attribute (e.g., Color, Size, Material).

    Attributes:
        id: Unique attribute identifier.
        name: Attribute name, unique across the catalog.
        description: Optional free-form description.
        data_type: Kind of value the attribute holds
            (text, number, decimal or color).
        created_at: Creation timestamp.
    """

    __tablename__ = "attributes"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(100), nullable=False, unique=True, index=True)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    data_type: Mapped[str] = mapped_column(String(20), nullable=False, default="text")
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=_utcnow,
    )

    def __repr__(self) -> str:
        """String representation."""
        return f"<Attribute(id={self.id}, name={self.name})>"


class ProductType(Base):
    """Product type grouping related products (e.g., Electronics).

    Attributes:
        id: Unique product type identifier.
        name: Product type name.
        description: Optional description.
        created_at: Creation timestamp.
        products: Products of this type.
    """

    __tablename__ = "product_types"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(200), nullable=False)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=_utcnow,
    )

    # Relationships
    products: Mapped[list["Product"]] = relationship(
        "Product",
        back_populates="product_type",
    )

    def __repr__(self) -> str:
        """String representation."""
        return f"<ProductType(id={self.id}, name={self.name})>"


class Product(Base):
    """Product entity in the catalog.

    Attributes:
        id: Unique product identifier.
        name: Product name.
        description: Product description.
        product_type_id: Owning product type, if any.
        created_at: Creation timestamp.
        product_type: Owning product type.
        variants: Sellable variants of this product.
    """

    __tablename__ = "products"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(500), nullable=False)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    product_type_id: Mapped[int | None] = mapped_column(
        Integer,
        ForeignKey("product_types.id", ondelete="SET NULL"),
        nullable=True,
        index=True,
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=_utcnow,
    )

    # Relationships
    product_type: Mapped["ProductType"] = relationship(
        "ProductType",
        back_populates="products",
    )
    variants: Mapped[list["ProductVariant"]] = relationship(
        "ProductVariant",
        back_populates="product",
        cascade="all, delete-orphan",
    )

    def __repr__(self) -> str:
        """String representation."""
        return f"<Product(id={self.id}, name={self.name[:30]})>"


class ProductVariant(Base):
    """Sellable variant of a product, identified by its SKU.

    Attributes:
        id: Unique variant identifier.
        product_id: Parent product ID.
        sku: Stock Keeping Unit.
        price: Unit price, never negative.
        stock: Available quantity.
        created_at: Creation timestamp.
    """

    __tablename__ = "product_variants"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    product_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("products.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    sku: Mapped[str] = mapped_column(String(100), nullable=False, index=True)
    price: Mapped[float] = mapped_column(Float, nullable=False, default=0.0)
    stock: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=_utcnow,
    )

    # Relationships
    product: Mapped["Product"] = relationship("Product", back_populates="variants")

    def __repr__(self) -> str:
        """String representation."""
        return f"<ProductVariant(id={self.id}, sku={self.sku})>"
