from pydantic import BaseModel, ConfigDict
from typing import Optional

class LocationCreate(BaseModel):
    name: str
    address: Optional[str] = None
    phone_number: Optional[str] = None

class LocationResponse(LocationCreate):
    id: str
    is_active: bool

    model_config = ConfigDict(from_attributes=True)

class EmployeeBase(BaseModel):
    name: str
    email: Optional[str] = None
    phone_number: Optional[str] = None
    role: str = "stylist"
    location_id: Optional[str] = None

class EmployeeCreate(EmployeeBase):
    pass

class EmployeeUpdate(BaseModel):
    name: Optional[str] = None
    email: Optional[str] = None
    phone_number: Optional[str] = None
    role: Optional[str] = None
    location_id: Optional[str] = None
    is_active: Optional[bool] = None

class EmployeeResponse(EmployeeBase):
    id: str
    avatar: str
    is_active: bool

    model_config = ConfigDict(from_attributes=True)
