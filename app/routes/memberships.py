from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session
from typing import List

from app.database import get_db
from app.schemas.membership import (
    MembershipCreate, MembershipUpdate, MembershipResponse,
    MembershipAssign, CustomerMembershipResponse
)
from app.services.membership_service import MembershipService

router = APIRouter()

@router.get("/", response_model=List[MembershipResponse])
def get_memberships(include_inactive: bool = Query(False), db: Session = Depends(get_db)):
    return MembershipService.get_memberships(db, include_inactive)

@router.post("/", response_model=MembershipResponse)
def create_membership(membership_data: MembershipCreate, db: Session = Depends(get_db)):
    """Create a membership plan; apply_to_all clears the applicable lists"""
    return MembershipService.create_membership(db, membership_data)

@router.get("/{membership_id}", response_model=MembershipResponse)
def get_membership(membership_id: str, db: Session = Depends(get_db)):
    return MembershipService.get_membership(db, membership_id)

@router.put("/{membership_id}", response_model=MembershipResponse)
def update_membership(membership_id: str, membership_data: MembershipUpdate, db: Session = Depends(get_db)):
    return MembershipService.update_membership(db, membership_id, membership_data)

@router.delete("/{membership_id}")
def delete_membership(membership_id: str, db: Session = Depends(get_db)):
    return MembershipService.delete_membership(db, membership_id)

@router.post("/{membership_id}/assign", response_model=CustomerMembershipResponse)
def assign_membership(membership_id: str, assignment: MembershipAssign, db: Session = Depends(get_db)):
    """Give a customer this membership from start_date (default today)"""
    return MembershipService.assign_membership(db, membership_id, assignment)
