# File: app/repositories/user_repository.py

"""
SQLAlchemy-backed UserStore.

Each mutating call commits immediately; the session itself is owned by
the caller (one per request in the API).
"""

from typing import List, Optional

from sqlalchemy import func, select
from sqlalchemy.orm import Session

from app.models.user import User
from app.services.interfaces import UserStore


class SqlAlchemyUserRepository(UserStore):
    def __init__(self, db: Session):
        self.db = db

    def exists_by_email(self, email: str) -> bool:
        stmt = select(User.id).where(User.email == email).limit(1)
        return self.db.execute(stmt).first() is not None

    def save(self, user: User) -> User:
        self.db.add(user)
        self.db.commit()
        self.db.refresh(user)
        return user

    def find_by_id(self, user_id: int) -> Optional[User]:
        return self.db.get(User, user_id)

    def find_by_email(self, email: str) -> Optional[User]:
        stmt = select(User).where(User.email == email).order_by(User.id).limit(1)
        return self.db.scalars(stmt).first()

    def find_all(self) -> List[User]:
        return list(self.db.scalars(select(User).order_by(User.id)))

    def delete(self, user: User) -> None:
        self.db.delete(user)
        self.db.commit()

    def count(self) -> int:
        return self.db.scalar(select(func.count()).select_from(User)) or 0
