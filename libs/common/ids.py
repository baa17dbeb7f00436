"""
식별자 생성 유틸리티
"""
import secrets

MIN_MEMBER_ID = 111111
MAX_MEMBER_ID = 999999


def generate_random_number() -> int:
    """
    6자리 회원 ID를 생성합니다 (111111 ~ 999999, 양 끝 포함).
    전역 유일성은 보장하지 않으며 중복은 저장소의 고유 인덱스에서 거부됩니다.
    """
    return MIN_MEMBER_ID + secrets.randbelow(MAX_MEMBER_ID - MIN_MEMBER_ID + 1)
