"""User account entity."""

from pydantic import BaseModel


class UserAccount(BaseModel):
    """The single local user of the back office."""

    name: str
    email: str
    password_hash: str
    salt: str
