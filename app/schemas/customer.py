from pydantic import BaseModel, ConfigDict
from typing import Optional
from datetime import datetime

class CustomerCreate(BaseModel):
    full_name: str
    email: Optional[str] = None
    phone_number: Optional[str] = None
    notes: Optional[str] = None

class CustomerResponse(CustomerCreate):
    id: str
    created_at: Optional[datetime] = None

    model_config = ConfigDict(from_attributes=True)
