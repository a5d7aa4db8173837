"""User domain model — maps to the 'users' table."""

from sqlalchemy import Column, Integer, String

from bencana_api.infrastructure.database import Base


class User(Base):
    __tablename__ = "users"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(200), nullable=False)
    email = Column(String(255), unique=True, nullable=False, index=True)
    # Column keeps its historical name; it only ever holds the bcrypt hash
    password_hash = Column("password", String(255), nullable=False)

    def __repr__(self):
        return f"<User {self.email}>"
