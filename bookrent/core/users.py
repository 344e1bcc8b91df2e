from typing import Optional
from sqlalchemy.orm import Session
from bookrent.core.models import User
from bookrent.core.exceptions import UserNotFoundError

class UserDirectory:

    def __init__(self, session: Session):
        self.session = session

    def find(self, user_id: int) -> Optional[User]:
        return self.session.get(User, user_id)

    def resolve(self, user_id: int) -> User:
        if user := self.find(user_id):
            return user
        raise UserNotFoundError(f"User not found with id: {user_id}")
