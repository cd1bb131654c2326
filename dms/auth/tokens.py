"""Identity tokens.

A token is a signed JWT carrying the user id (``sub``) and the numeric role.
Nothing is stored server side; whatever verifies is trusted until it expires.
"""

import logging
from dataclasses import dataclass
from jose import JWTError
from dms.errors import InvalidToken
from dms.models.user import Role
from dms.utils.security import TokenSigner

logger = logging.getLogger(__name__)

_signer = TokenSigner()


@dataclass(frozen=True)
class Identity:
    id: str
    role: Role

    @property
    def is_admin(self) -> bool:
        return self.role == Role.ADMINISTRATOR


def issue(identity: Identity, signer: TokenSigner | None = None) -> str:
    """Sign a token for ``identity`` with the configured expiry."""
    signer = signer or _signer
    return signer.sign({"sub": str(identity.id), "role": int(identity.role)})


def verify(token: str, signer: TokenSigner | None = None) -> Identity:
    """Decode ``token`` into an Identity.

    Raises:
        InvalidToken: bad signature, expired, malformed, or the claims do not
            describe a known role.
    """
    signer = signer or _signer
    try:
        payload = signer.verify(token)
    except JWTError as e:
        logger.info("Token rejected: %s", e)
        raise InvalidToken() from e

    sub = payload.get("sub")
    if not sub:
        raise InvalidToken()
    try:
        role = Role(int(payload.get("role")))
    except (TypeError, ValueError) as e:
        raise InvalidToken() from e
    return Identity(id=str(sub), role=role)


def identity_for(user) -> Identity:
    return Identity(id=str(user.id), role=Role(user.role))
