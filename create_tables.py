import logging
import os
import sys

# Add the current directory to sys.path so we can import from app
sys.path.append(os.getcwd())

from app.database import engine, Base
# Import all models to ensure they are registered with Base.metadata
from app.models import (
    Category, Service, Package, PackageService,
    Location, Employee,
    Customer,
    Membership, CustomerMembership,
    Coupon,
    Appointment, Booking
)

logger = logging.getLogger("create_tables")

def create_tables():
    logger.info("Creating tables in database...")
    try:
        # This checks the DB and creates any missing tables defined in your models
        Base.metadata.create_all(bind=engine)
        logger.info("Tables ready: %s", ", ".join(sorted(Base.metadata.tables)))
        return True
    except Exception as e:
        logger.error("Error creating tables: %s", e)
        return False

if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(message)s")
    sys.exit(0 if create_tables() else 1)
