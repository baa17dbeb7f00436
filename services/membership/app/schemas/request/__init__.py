from .MemberCreateSchema import MemberCreateSchema
from .MemberUpdateSchema import MemberUpdateSchema

__all__ = [
    "MemberCreateSchema",
    "MemberUpdateSchema",
]
