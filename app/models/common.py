import enum
import uuid


def generate_id():
    return str(uuid.uuid4())


class DiscountType(str, enum.Enum):
    PERCENTAGE = "percentage"
    FIXED = "fixed"
