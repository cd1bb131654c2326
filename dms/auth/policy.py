"""Authorization rules.

Handlers fetch the resource first and only then ask for ownership, so a
missing resource is reported as not found rather than not authorized.
"""

from dms.auth.tokens import Identity
from dms.errors import Forbidden, NotAuthorized
from dms.models.user import Role


def require_role(identity: Identity, required_role: Role) -> None:
    if identity.role != required_role:
        raise Forbidden(f"Role {int(identity.role)} is not permitted to access this resource")


def require_owner(identity: Identity, owner_id) -> None:
    # ids arrive as ints from the database and strings from tokens
    if owner_id is None or str(owner_id) != str(identity.id):
        raise NotAuthorized()
