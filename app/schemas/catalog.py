from pydantic import BaseModel, ConfigDict, Field
from typing import Optional, List
from datetime import datetime

class CategoryCreate(BaseModel):
    name: str

class CategoryResponse(CategoryCreate):
    id: str

    model_config = ConfigDict(from_attributes=True)

class ServiceBase(BaseModel):
    name: str
    description: Optional[str] = None
    duration: int = Field(..., ge=0)
    selling_price: float = Field(..., ge=0)
    category_id: Optional[str] = None

class ServiceCreate(ServiceBase):
    pass

class ServiceUpdate(BaseModel):
    name: Optional[str] = None
    description: Optional[str] = None
    duration: Optional[int] = Field(None, ge=0)
    selling_price: Optional[float] = Field(None, ge=0)
    category_id: Optional[str] = None
    is_active: Optional[bool] = None

class ServiceResponse(ServiceBase):
    id: str
    is_active: bool
    created_at: Optional[datetime] = None

    model_config = ConfigDict(from_attributes=True)

class PackageServiceInput(BaseModel):
    service_id: str
    package_selling_price: Optional[float] = Field(None, ge=0)

class PackageBase(BaseModel):
    name: str
    description: Optional[str] = None
    price: float = Field(..., ge=0)
    is_customizable: bool = False

class PackageCreate(PackageBase):
    services: List[PackageServiceInput] = []

class PackageUpdate(BaseModel):
    name: Optional[str] = None
    description: Optional[str] = None
    price: Optional[float] = Field(None, ge=0)
    is_customizable: Optional[bool] = None
    is_active: Optional[bool] = None
    services: Optional[List[PackageServiceInput]] = None

class PackageServiceResponse(BaseModel):
    id: str
    service_id: str
    package_selling_price: Optional[float] = None
    service: ServiceResponse

    model_config = ConfigDict(from_attributes=True)

class PackageResponse(PackageBase):
    id: str
    is_active: bool
    created_at: Optional[datetime] = None
    package_services: List[PackageServiceResponse] = []

    model_config = ConfigDict(from_attributes=True)
