from libs.schemas.member import Member, MemberUpdate

__all__ = [
    "Member",
    "MemberUpdate",
]
