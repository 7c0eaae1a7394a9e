from accounts.domain.models import User, dump_snapshot, load_snapshot
from accounts.domain.value_objects import Role, UserId

__all__ = [
    "User",
    "Role",
    "UserId",
    "dump_snapshot",
    "load_snapshot",
]
