from typing import Optional

from sqlalchemy import or_
from sqlalchemy.orm import Session
from fastapi import HTTPException, status

from app.models.customer import Customer
from app.schemas.customer import CustomerCreate
from app.utils.validators import validate_email, validate_phone_number, sanitize_input

class CustomerService:
    @staticmethod
    def create_customer(db: Session, customer_data: CustomerCreate):
        if customer_data.email and not validate_email(customer_data.email):
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail="Invalid email address"
            )
        if customer_data.phone_number and not validate_phone_number(customer_data.phone_number):
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail="Invalid phone number"
            )

        customer = Customer(
            full_name=customer_data.full_name.strip(),
            email=customer_data.email,
            phone_number=customer_data.phone_number,
            notes=sanitize_input(customer_data.notes)
        )
        db.add(customer)
        db.commit()
        db.refresh(customer)
        return customer

    @staticmethod
    def search_customers(db: Session, query: Optional[str] = None, limit: int = 20):
        """Search customers by name, phone or email"""
        customers = db.query(Customer)
        if query:
            search_query = f"%{query}%"
            customers = customers.filter(or_(
                Customer.full_name.ilike(search_query),
                Customer.phone_number.ilike(search_query),
                Customer.email.ilike(search_query)
            ))
        return customers.order_by(Customer.full_name).limit(limit).all()

    @staticmethod
    def get_customer(db: Session, customer_id: str):
        customer = db.query(Customer).filter(Customer.id == customer_id).first()
        if not customer:
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND,
                detail="Customer not found"
            )
        return customer
