from pydantic import BaseModel, ConfigDict, Field
from typing import Optional, List

from app.models.common import DiscountType

class CouponBase(BaseModel):
    code: str = Field(..., min_length=1, max_length=64)
    description: Optional[str] = None
    discount_type: DiscountType = DiscountType.PERCENTAGE
    discount_value: float = Field(..., ge=0)
    apply_to_all: bool = True
    applicable_services: List[str] = []
    applicable_packages: List[str] = []

class CouponCreate(CouponBase):
    pass

class CouponUpdate(BaseModel):
    description: Optional[str] = None
    discount_type: Optional[DiscountType] = None
    discount_value: Optional[float] = Field(None, ge=0)
    apply_to_all: Optional[bool] = None
    applicable_services: Optional[List[str]] = None
    applicable_packages: Optional[List[str]] = None
    is_active: Optional[bool] = None

class CouponResponse(CouponBase):
    id: str
    is_active: bool

    model_config = ConfigDict(from_attributes=True)

class CouponDiscountRequest(BaseModel):
    code: str
    subtotal: float = Field(..., ge=0)

class CouponDiscountResponse(BaseModel):
    coupon: CouponResponse
    subtotal: float
    discount: float
