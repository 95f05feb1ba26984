from sqlalchemy import Column, Integer, String, Boolean, DateTime, Text, Float, ForeignKey
from sqlalchemy.sql import func
from sqlalchemy.orm import relationship
from app.database import Base
from app.models.common import generate_id

class Category(Base):
    __tablename__ = "categories"

    id = Column(String(36), primary_key=True, default=generate_id)
    name = Column(String(255), nullable=False, unique=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now())

    services = relationship("Service", back_populates="category")

class Service(Base):
    __tablename__ = "services"

    id = Column(String(36), primary_key=True, default=generate_id)
    category_id = Column(String(36), ForeignKey("categories.id"))
    name = Column(String(255), nullable=False)
    description = Column(Text)
    duration = Column(Integer, nullable=False, default=0)
    selling_price = Column(Float, nullable=False, default=0.0)
    is_active = Column(Boolean, default=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), onupdate=func.now())

    category = relationship("Category", back_populates="services")
    package_services = relationship("PackageService", back_populates="service")

class Package(Base):
    __tablename__ = "packages"

    id = Column(String(36), primary_key=True, default=generate_id)
    name = Column(String(255), nullable=False)
    description = Column(Text)
    price = Column(Float, nullable=False, default=0.0)
    is_customizable = Column(Boolean, default=False)
    is_active = Column(Boolean, default=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), onupdate=func.now())

    # Ordered: constituents render in the order they were added to the package
    package_services = relationship(
        "PackageService",
        back_populates="package",
        order_by="PackageService.position",
        cascade="all, delete-orphan"
    )

class PackageService(Base):
    __tablename__ = "package_services"

    id = Column(String(36), primary_key=True, default=generate_id)
    package_id = Column(String(36), ForeignKey("packages.id"), nullable=False)
    service_id = Column(String(36), ForeignKey("services.id"), nullable=False)
    package_selling_price = Column(Float)
    position = Column(Integer, default=0)

    package = relationship("Package", back_populates="package_services")
    service = relationship("Service", back_populates="package_services")
