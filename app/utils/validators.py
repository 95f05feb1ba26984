import re
from typing import Optional

def validate_phone_number(phone: str) -> bool:
    """Validate phone number format"""
    pattern = r'^\+?\d{7,15}$'
    return bool(re.match(pattern, phone.replace(" ", "").replace("-", "")))

def validate_email(email: str) -> bool:
    """Validate email format"""
    pattern = r'^[a-zA-Z0-9._%+-]+@[a-zA-Z0-9.-]+\.[a-zA-Z]{2,}$'
    return bool(re.match(pattern, email))

def normalize_coupon_code(code: str) -> str:
    """Coupon codes are matched case-insensitively and stored upper-cased"""
    return re.sub(r'\s+', '', code or '').upper()

def sanitize_input(text: Optional[str]) -> Optional[str]:
    """Escape markup in free-text fields shown back in the console"""
    if not text:
        return text

    sanitized = text.replace('<', '&lt;').replace('>', '&gt;')
    sanitized = sanitized.replace('"', '&quot;').replace("'", '&#x27;')

    return sanitized
