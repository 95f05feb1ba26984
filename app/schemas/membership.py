from pydantic import BaseModel, ConfigDict, Field
from typing import Optional, List
from datetime import date

from app.models.common import DiscountType
from app.models.membership import ValidityUnit

class MembershipBase(BaseModel):
    name: str = Field(..., min_length=1)
    description: Optional[str] = None
    validity_period: int = Field(30, ge=1)
    validity_unit: ValidityUnit = ValidityUnit.DAYS
    discount_type: DiscountType = DiscountType.PERCENTAGE
    discount_value: float = Field(0, ge=0)
    max_discount_value: Optional[float] = Field(None, ge=0)
    min_billing_amount: Optional[float] = Field(None, ge=0)

class MembershipCreate(MembershipBase):
    apply_to_all: bool = True
    applicable_services: List[str] = []
    applicable_packages: List[str] = []

class MembershipUpdate(BaseModel):
    name: Optional[str] = None
    description: Optional[str] = None
    validity_period: Optional[int] = Field(None, ge=1)
    validity_unit: Optional[ValidityUnit] = None
    discount_type: Optional[DiscountType] = None
    discount_value: Optional[float] = Field(None, ge=0)
    max_discount_value: Optional[float] = Field(None, ge=0)
    min_billing_amount: Optional[float] = Field(None, ge=0)
    apply_to_all: Optional[bool] = None
    applicable_services: Optional[List[str]] = None
    applicable_packages: Optional[List[str]] = None
    is_active: Optional[bool] = None

class MembershipResponse(MembershipBase):
    id: str
    apply_to_all: bool
    applicable_services: List[str] = []
    applicable_packages: List[str] = []
    is_active: bool

    model_config = ConfigDict(from_attributes=True)

class MembershipAssign(BaseModel):
    customer_id: str
    start_date: Optional[date] = None

class CustomerMembershipResponse(BaseModel):
    id: str
    customer_id: str
    membership_id: str
    start_date: date
    end_date: date

    model_config = ConfigDict(from_attributes=True)
