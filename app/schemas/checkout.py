from pydantic import BaseModel, Field
from typing import Optional, List, Dict, Literal, Union, Annotated

class PackageServiceItem(BaseModel):
    id: str
    name: str
    price: float
    adjusted_price: float
    duration: int
    stylist: str = ""
    stylist_name: Optional[str] = ""
    time: str = ""
    is_customized: bool = False

class ServiceCheckoutItem(BaseModel):
    id: str
    name: str
    price: float
    adjusted_price: float
    duration: int
    type: Literal["service"] = "service"
    package_id: Optional[str] = None
    stylist: str = ""
    stylist_name: Optional[str] = ""
    time: str = ""
    formatted_duration: str = ""

class PackageCheckoutItem(BaseModel):
    id: str
    name: str
    price: float
    adjusted_price: float
    duration: int
    type: Literal["package"] = "package"
    package_id: Optional[str] = None
    stylist: str = ""
    stylist_name: Optional[str] = ""
    time: str = ""
    formatted_duration: str = ""
    services: List[PackageServiceItem] = []

CheckoutItem = Annotated[Union[ServiceCheckoutItem, PackageCheckoutItem], Field(discriminator="type")]

class CheckoutSelection(BaseModel):
    selected_services: List[str] = []
    selected_packages: List[str] = []
    selected_stylists: Dict[str, str] = {}
    selected_time_slots: Dict[str, str] = {}
    customized_services: Dict[str, List[str]] = {}
    customer_id: Optional[str] = None
    membership_id: Optional[str] = None
    coupon_code: Optional[str] = None

class CheckoutQuote(BaseModel):
    items: List[CheckoutItem]
    subtotal: float
    membership_discount: float
    coupon_discount: float
    total: float
    total_duration: int
    formatted_duration: str
    currency: str
    membership_id: Optional[str] = None
    coupon_id: Optional[str] = None
