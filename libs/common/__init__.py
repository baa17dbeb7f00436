"""
Membership 공통 라이브러리
서비스 전반에서 사용할 수 있는 공통 기능을 제공합니다.
"""

from libs.common.ids import MAX_MEMBER_ID, MIN_MEMBER_ID, generate_random_number
from libs.common.validators import DATE_FORMAT, is_valid_date, is_valid_email

__all__ = [
    "MAX_MEMBER_ID",
    "MIN_MEMBER_ID",
    "generate_random_number",
    "DATE_FORMAT",
    "is_valid_date",
    "is_valid_email",
]
