"""
입력 값 검증 유틸리티
이메일, 날짜 형식 검증을 제공합니다.
"""
import re
from datetime import datetime

DATE_FORMAT = "%Y-%m-%d"

# 자릿수는 strptime이 검사하지 않으므로 먼저 확인
_DATE_SHAPE = re.compile(r"[0-9]{4}-[0-9]{2}-[0-9]{2}")
_EMAIL_PATTERN = re.compile(r"[a-zA-Z0-9._%+-]+@[a-zA-Z0-9.-]+\.[a-zA-Z]{2,}")


def is_valid_date(date_str: str) -> bool:
    """
    YYYY-MM-DD 형식의 실제 달력 날짜인지 확인합니다.
    윤년 여부를 포함해 월/일 범위를 검증합니다.

    Args:
        date_str: 검사할 문자열

    Returns:
        유효한 날짜이면 True
    """
    if not _DATE_SHAPE.fullmatch(date_str):
        return False
    if date_str.startswith("0000"):
        # datetime은 1년부터 지원하므로, 같은 윤년 규칙을 따르는 2000년으로 검사
        date_str = "2000" + date_str[4:]
    try:
        datetime.strptime(date_str, DATE_FORMAT)
    except ValueError:
        return False
    return True


def is_valid_email(email_str: str) -> bool:
    """
    이메일 형식인지 확인합니다.
    최상위 도메인은 영문자 2자 이상이어야 합니다.
    """
    return _EMAIL_PATTERN.fullmatch(email_str) is not None
