from sqlalchemy import Column, Integer, String, Boolean, DateTime, Date, Text, Float, ForeignKey, Enum, JSON
from sqlalchemy.sql import func
from sqlalchemy.orm import relationship
import enum
from app.database import Base
from app.models.common import DiscountType, generate_id

class ValidityUnit(str, enum.Enum):
    DAYS = "days"
    MONTHS = "months"

class Membership(Base):
    __tablename__ = "memberships"

    id = Column(String(36), primary_key=True, default=generate_id)
    name = Column(String(255), nullable=False)
    description = Column(Text)
    validity_period = Column(Integer, nullable=False, default=30)
    validity_unit = Column(Enum(ValidityUnit), default=ValidityUnit.DAYS)
    discount_type = Column(Enum(DiscountType), nullable=False, default=DiscountType.PERCENTAGE)
    discount_value = Column(Float, nullable=False, default=0.0)
    max_discount_value = Column(Float)
    min_billing_amount = Column(Float)
    # Both empty means the membership applies to everything
    applicable_services = Column(JSON, default=list)
    applicable_packages = Column(JSON, default=list)
    is_active = Column(Boolean, default=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), onupdate=func.now())

    customers = relationship("CustomerMembership", back_populates="membership")

    @property
    def apply_to_all(self):
        return not (self.applicable_services or self.applicable_packages)

class CustomerMembership(Base):
    __tablename__ = "customer_memberships"

    id = Column(String(36), primary_key=True, default=generate_id)
    customer_id = Column(String(36), ForeignKey("customers.id"), nullable=False)
    membership_id = Column(String(36), ForeignKey("memberships.id"), nullable=False)
    start_date = Column(Date, nullable=False)
    end_date = Column(Date, nullable=False)
    created_at = Column(DateTime(timezone=True), server_default=func.now())

    customer = relationship("Customer", back_populates="memberships")
    membership = relationship("Membership", back_populates="customers")
