import calendar
import logging
from datetime import date, timedelta
from typing import Optional

from sqlalchemy.orm import Session, joinedload
from fastapi import HTTPException, status

from app.models.customer import Customer
from app.models.membership import Membership, CustomerMembership, ValidityUnit
from app.schemas.membership import MembershipCreate, MembershipUpdate, MembershipAssign

logger = logging.getLogger(__name__)


def add_months(start: date, months: int) -> date:
    month_index = start.month - 1 + months
    year = start.year + month_index // 12
    month = month_index % 12 + 1
    day = min(start.day, calendar.monthrange(year, month)[1])
    return date(year, month, day)


def membership_end_date(membership: Membership, start: date) -> date:
    if membership.validity_unit == ValidityUnit.MONTHS:
        return add_months(start, membership.validity_period)
    return start + timedelta(days=membership.validity_period)


class MembershipService:
    @staticmethod
    def _applicability(data: dict):
        """apply_to_all wins over any explicit service/package lists"""
        apply_to_all = data.pop("apply_to_all", None)
        if apply_to_all:
            data["applicable_services"] = []
            data["applicable_packages"] = []
        return data

    @staticmethod
    def get_memberships(db: Session, include_inactive: bool = False):
        query = db.query(Membership)
        if not include_inactive:
            query = query.filter(Membership.is_active == True)
        return query.order_by(Membership.name).all()

    @staticmethod
    def get_membership(db: Session, membership_id: str):
        membership = db.query(Membership).filter(Membership.id == membership_id).first()
        if not membership:
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND,
                detail="Membership not found"
            )
        return membership

    @staticmethod
    def create_membership(db: Session, membership_data: MembershipCreate):
        """Create a new membership plan"""
        try:
            membership = Membership(**MembershipService._applicability(membership_data.model_dump()))
            db.add(membership)
            db.commit()
            db.refresh(membership)
            logger.info("Created membership %s (%s)", membership.name, membership.id)
            return membership

        except Exception as e:
            db.rollback()
            logger.error("Error creating membership: %s", e)
            raise HTTPException(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                detail=f"Error creating membership: {str(e)}"
            )

    @staticmethod
    def update_membership(db: Session, membership_id: str, membership_data: MembershipUpdate):
        membership = MembershipService.get_membership(db, membership_id)

        update_data = MembershipService._applicability(membership_data.model_dump(exclude_unset=True))
        try:
            for field, value in update_data.items():
                setattr(membership, field, value)

            db.commit()
            db.refresh(membership)
            return membership

        except Exception as e:
            db.rollback()
            logger.error("Error updating membership %s: %s", membership_id, e)
            raise HTTPException(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                detail=f"Error updating membership: {str(e)}"
            )

    @staticmethod
    def delete_membership(db: Session, membership_id: str):
        """Soft delete a membership; customers keep the plan they already hold"""
        membership = MembershipService.get_membership(db, membership_id)
        membership.is_active = False
        db.commit()
        return {"message": "Membership deleted successfully"}

    @staticmethod
    def assign_membership(db: Session, membership_id: str, assignment: MembershipAssign):
        membership = MembershipService.get_membership(db, membership_id)
        customer = db.query(Customer).filter(Customer.id == assignment.customer_id).first()
        if not customer:
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND,
                detail="Customer not found"
            )

        start = assignment.start_date or date.today()
        customer_membership = CustomerMembership(
            customer_id=customer.id,
            membership_id=membership.id,
            start_date=start,
            end_date=membership_end_date(membership, start)
        )
        db.add(customer_membership)
        db.commit()
        db.refresh(customer_membership)
        logger.info("Assigned membership %s to customer %s until %s",
                    membership.id, customer.id, customer_membership.end_date)
        return customer_membership

    @staticmethod
    def get_active_membership(db: Session, customer_id: str, on_date: date) -> Optional[Membership]:
        """Latest-starting membership whose validity window contains on_date"""
        customer_membership = db.query(CustomerMembership).options(
            joinedload(CustomerMembership.membership)
        ).join(Membership).filter(
            CustomerMembership.customer_id == customer_id,
            CustomerMembership.start_date <= on_date,
            CustomerMembership.end_date >= on_date,
            Membership.is_active == True
        ).order_by(CustomerMembership.start_date.desc()).first()

        return customer_membership.membership if customer_membership else None
