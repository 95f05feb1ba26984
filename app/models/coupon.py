from sqlalchemy import Column, String, Boolean, DateTime, Text, Float, Enum, JSON
from sqlalchemy.sql import func
from app.database import Base
from app.models.common import DiscountType, generate_id

class Coupon(Base):
    __tablename__ = "coupons"

    id = Column(String(36), primary_key=True, default=generate_id)
    code = Column(String(64), unique=True, index=True, nullable=False)
    description = Column(Text)
    discount_type = Column(Enum(DiscountType), nullable=False, default=DiscountType.PERCENTAGE)
    discount_value = Column(Float, nullable=False, default=0.0)
    is_active = Column(Boolean, default=True, index=True)
    apply_to_all = Column(Boolean, default=True)
    # Only consulted when apply_to_all is False
    applicable_services = Column(JSON, default=list)
    applicable_packages = Column(JSON, default=list)
    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), onupdate=func.now())
