"""
User Model
"""
from dataclasses import dataclass


@dataclass
class User:
    id: int
    username: str
    email: str
    full_name: str
    password_hash: str

    def __repr__(self):
        return f"<User {self.username}>"
