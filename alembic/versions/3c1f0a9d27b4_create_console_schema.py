"""create_console_schema

Revision ID: 3c1f0a9d27b4
Revises:
Create Date: 2026-10-18 10:12:44.503117

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '3c1f0a9d27b4'
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None

discount_type = sa.Enum('PERCENTAGE', 'FIXED', name='discounttype')
validity_unit = sa.Enum('DAYS', 'MONTHS', name='validityunit')
appointment_status = sa.Enum('BOOKED', 'CONFIRMED', 'COMPLETED', 'CANCELED', name='appointmentstatus')


def _timestamps(updated=True):
    columns = [sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.func.now())]
    if updated:
        columns.append(sa.Column('updated_at', sa.DateTime(timezone=True)))
    return columns


def upgrade():
    # Catalog
    op.create_table('categories',
        sa.Column('id', sa.String(length=36), primary_key=True),
        sa.Column('name', sa.String(length=255), nullable=False, unique=True),
        *_timestamps(updated=False)
    )
    op.create_table('services',
        sa.Column('id', sa.String(length=36), primary_key=True),
        sa.Column('category_id', sa.String(length=36), sa.ForeignKey('categories.id')),
        sa.Column('name', sa.String(length=255), nullable=False),
        sa.Column('description', sa.Text()),
        sa.Column('duration', sa.Integer(), nullable=False),
        sa.Column('selling_price', sa.Float(), nullable=False),
        sa.Column('is_active', sa.Boolean()),
        *_timestamps()
    )
    op.create_table('packages',
        sa.Column('id', sa.String(length=36), primary_key=True),
        sa.Column('name', sa.String(length=255), nullable=False),
        sa.Column('description', sa.Text()),
        sa.Column('price', sa.Float(), nullable=False),
        sa.Column('is_customizable', sa.Boolean()),
        sa.Column('is_active', sa.Boolean()),
        *_timestamps()
    )
    op.create_table('package_services',
        sa.Column('id', sa.String(length=36), primary_key=True),
        sa.Column('package_id', sa.String(length=36), sa.ForeignKey('packages.id'), nullable=False),
        sa.Column('service_id', sa.String(length=36), sa.ForeignKey('services.id'), nullable=False),
        sa.Column('package_selling_price', sa.Float()),
        sa.Column('position', sa.Integer())
    )

    # Staff and customers
    op.create_table('locations',
        sa.Column('id', sa.String(length=36), primary_key=True),
        sa.Column('name', sa.String(length=255), nullable=False),
        sa.Column('address', sa.Text()),
        sa.Column('phone_number', sa.String(length=20)),
        sa.Column('is_active', sa.Boolean()),
        *_timestamps(updated=False)
    )
    op.create_table('employees',
        sa.Column('id', sa.String(length=36), primary_key=True),
        sa.Column('location_id', sa.String(length=36), sa.ForeignKey('locations.id')),
        sa.Column('name', sa.String(length=255), nullable=False),
        sa.Column('email', sa.String(length=255)),
        sa.Column('phone_number', sa.String(length=20)),
        sa.Column('role', sa.String(length=100)),
        sa.Column('is_active', sa.Boolean()),
        *_timestamps()
    )
    op.create_table('customers',
        sa.Column('id', sa.String(length=36), primary_key=True),
        sa.Column('full_name', sa.String(length=255), nullable=False),
        sa.Column('email', sa.String(length=255), index=True),
        sa.Column('phone_number', sa.String(length=20), index=True),
        sa.Column('notes', sa.Text()),
        *_timestamps()
    )

    # Discounts
    op.create_table('memberships',
        sa.Column('id', sa.String(length=36), primary_key=True),
        sa.Column('name', sa.String(length=255), nullable=False),
        sa.Column('description', sa.Text()),
        sa.Column('validity_period', sa.Integer(), nullable=False),
        sa.Column('validity_unit', validity_unit),
        sa.Column('discount_type', discount_type, nullable=False),
        sa.Column('discount_value', sa.Float(), nullable=False),
        sa.Column('max_discount_value', sa.Float()),
        sa.Column('min_billing_amount', sa.Float()),
        sa.Column('applicable_services', sa.JSON()),
        sa.Column('applicable_packages', sa.JSON()),
        sa.Column('is_active', sa.Boolean()),
        *_timestamps()
    )
    op.create_table('customer_memberships',
        sa.Column('id', sa.String(length=36), primary_key=True),
        sa.Column('customer_id', sa.String(length=36), sa.ForeignKey('customers.id'), nullable=False),
        sa.Column('membership_id', sa.String(length=36), sa.ForeignKey('memberships.id'), nullable=False),
        sa.Column('start_date', sa.Date(), nullable=False),
        sa.Column('end_date', sa.Date(), nullable=False),
        *_timestamps(updated=False)
    )
    op.create_table('coupons',
        sa.Column('id', sa.String(length=36), primary_key=True),
        sa.Column('code', sa.String(length=64), nullable=False, unique=True, index=True),
        sa.Column('description', sa.Text()),
        sa.Column('discount_type', discount_type, nullable=False),
        sa.Column('discount_value', sa.Float(), nullable=False),
        sa.Column('is_active', sa.Boolean(), index=True),
        sa.Column('apply_to_all', sa.Boolean()),
        sa.Column('applicable_services', sa.JSON()),
        sa.Column('applicable_packages', sa.JSON()),
        *_timestamps()
    )

    # Appointments
    op.create_table('appointments',
        sa.Column('id', sa.String(length=36), primary_key=True),
        sa.Column('customer_id', sa.String(length=36), sa.ForeignKey('customers.id'), nullable=False),
        sa.Column('location_id', sa.String(length=36), sa.ForeignKey('locations.id')),
        sa.Column('start_time', sa.DateTime(), nullable=False, index=True),
        sa.Column('end_time', sa.DateTime(), nullable=False),
        sa.Column('status', appointment_status),
        sa.Column('subtotal', sa.Float(), nullable=False),
        sa.Column('membership_discount', sa.Float()),
        sa.Column('coupon_discount', sa.Float()),
        sa.Column('total_price', sa.Float(), nullable=False),
        sa.Column('total_duration', sa.Integer()),
        sa.Column('membership_id', sa.String(length=36), sa.ForeignKey('memberships.id')),
        sa.Column('coupon_id', sa.String(length=36), sa.ForeignKey('coupons.id')),
        sa.Column('notes', sa.Text()),
        *_timestamps()
    )
    op.create_table('bookings',
        sa.Column('id', sa.String(length=36), primary_key=True),
        sa.Column('appointment_id', sa.String(length=36), sa.ForeignKey('appointments.id'), nullable=False),
        sa.Column('service_id', sa.String(length=36), sa.ForeignKey('services.id')),
        sa.Column('package_id', sa.String(length=36), sa.ForeignKey('packages.id')),
        sa.Column('employee_id', sa.String(length=36), sa.ForeignKey('employees.id')),
        sa.Column('start_time', sa.DateTime()),
        sa.Column('duration', sa.Integer()),
        sa.Column('original_price', sa.Float(), nullable=False),
        sa.Column('price_paid', sa.Float(), nullable=False),
        sa.Column('position', sa.Integer()),
        *_timestamps(updated=False)
    )

def downgrade():
    for table in (
        'bookings', 'appointments', 'coupons', 'customer_memberships', 'memberships',
        'customers', 'employees', 'locations', 'package_services', 'packages',
        'services', 'categories'
    ):
        op.drop_table(table)

    bind = op.get_bind()
    for enum_type in (appointment_status, validity_unit, discount_type):
        enum_type.drop(bind, checkfirst=True)
