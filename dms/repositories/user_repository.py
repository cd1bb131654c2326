from sqlalchemy import func, select
from sqlalchemy.orm import Session
from dms.models.user import User
from dms.repositories.base import escape_like, parse_id
from dms.schemas.user import UserOut
from dms.utils.security import PasswordHasher, pwd_hasher

PROFILE_FIELDS = ("user_name", "first_name", "last_name", "email")

class UserRepository:
    """Data access for users. Password hashes never leave this class."""

    def __init__(self, db: Session, hasher: PasswordHasher | None = None):
        self.db = db
        self.hasher = hasher or pwd_hasher

    @staticmethod
    def project(user: User, include_role: bool = True) -> dict:
        exclude = None if include_role else {"role"}
        return UserOut.model_validate(user).model_dump(by_alias=True, mode="json", exclude=exclude)

    def create(self, fields: dict) -> User:
        fields = dict(fields)
        password = fields.pop("password")
        fields["email"] = fields["email"].lower()
        user = User(**fields, password_hash=self.hasher.hash(password))
        self.db.add(user)
        self.db.commit()
        self.db.refresh(user)
        return user

    def find_by_email(self, email: str) -> User | None:
        stmt = select(User).where(func.lower(User.email) == email.lower())
        return self.db.scalars(stmt).first()

    def find_by_id(self, user_id) -> User | None:
        pk = parse_id(user_id)
        if pk is None:
            return None
        return self.db.get(User, pk)

    def find_by_reset_token(self, digest: str) -> User | None:
        return self.db.scalars(select(User).where(User.reset_password_token == digest)).first()

    def find_all(self) -> list[dict]:
        return [self.project(u, include_role=False) for u in self.db.scalars(select(User).order_by(User.id))]

    def search(self, keyword: str | None) -> list[dict]:
        stmt = select(User).order_by(User.id)
        if keyword:
            stmt = stmt.where(User.user_name.ilike(f"%{escape_like(keyword)}%", escape="\\"))
        return [self.project(u, include_role=False) for u in self.db.scalars(stmt)]

    def update(self, user: User, fields: dict) -> User:
        if "password" in fields or "password_hash" in fields:
            raise ValueError("passwords are changed through set_password")
        for key in PROFILE_FIELDS:
            if fields.get(key) is not None:
                setattr(user, key, fields[key].lower() if key == "email" else fields[key])
        self.db.commit()
        self.db.refresh(user)
        return user

    def set_password(self, user: User, password: str) -> User:
        user.password_hash = self.hasher.hash(password)
        user.reset_password_token = None
        user.reset_password_expires = None
        self.db.commit()
        self.db.refresh(user)
        return user

    def set_reset_token(self, user: User, digest: str, expires) -> None:
        user.reset_password_token = digest
        user.reset_password_expires = expires
        self.db.commit()

    def verify_password(self, user: User, password: str) -> bool:
        return self.hasher.verify(password, user.password_hash)

    def delete(self, user: User) -> None:
        self.db.delete(user)
        self.db.commit()
