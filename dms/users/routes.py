
from fastapi import APIRouter
from dms.auth.deps import IdentityDep, UserRepoDep
from dms.errors import BadRequest, NotFound
from dms.schemas.auth import UserUpdateIn
from dms.utils.response import success

router = APIRouter(prefix="/me", tags=["users"])

@router.get("")
def user_details(identity: IdentityDep, users: UserRepoDep):
    user = users.find_by_id(identity.id)
    if not user:
        raise NotFound(f"User with ID {identity.id} not found")
    return success("Successfully retrieved user details", users.project(user))

@router.put("/update")
def update_user(body: UserUpdateIn, identity: IdentityDep, users: UserRepoDep):
    user = users.find_by_id(identity.id)
    if not user:
        raise NotFound(f"User with ID {identity.id} not found")

    fields = body.model_dump(exclude_none=True)
    if "email" in fields:
        other = users.find_by_email(fields["email"])
        if other and other.id != user.id:
            raise BadRequest("A user with this email already exists")

    user = users.update(user, fields)
    return success("User details have been successfully updated", users.project(user))
