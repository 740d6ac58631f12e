"""Local account registration and login."""

import hashlib
import hmac
import secrets

from stockroom.application.dto.requests import RegisterAccountRequest
from stockroom.config import get_logger
from stockroom.core.entities import UserAccount
from stockroom.core.exceptions import AuthenticationError, ValidationError
from stockroom.core.interfaces import IRecordStore
from stockroom.core.repositories import UnitOfWork

logger = get_logger(__name__)

PBKDF2_ITERATIONS = 200_000


def _hash_password(password: str, salt: str) -> str:
    digest = hashlib.pbkdf2_hmac(
        "sha256", password.encode("utf-8"), bytes.fromhex(salt), PBKDF2_ITERATIONS
    )
    return digest.hex()


class ManageAccountUseCase:
    """
    The single local user.

    Registering again replaces the stored account. There are no sessions:
    login only checks the credentials.
    """

    def __init__(self, record_store: IRecordStore | None = None):
        self._record_store = record_store

    async def _get_uow(self) -> UnitOfWork:
        if self._record_store is None:
            from stockroom.infrastructure.storage import get_record_store

            self._record_store = await get_record_store()
        return UnitOfWork(self._record_store)

    async def register(self, request: RegisterAccountRequest) -> UserAccount:
        email = request.email.strip().lower()
        if not email:
            raise ValidationError("email", "enter an email address")
        if not request.password:
            raise ValidationError("password", "enter a password")
        if request.password != request.confirmation:
            raise ValidationError("confirmation", "passwords do not match")

        salt = secrets.token_hex(16)
        account = UserAccount(
            name=request.name.strip(),
            email=email,
            password_hash=_hash_password(request.password, salt),
            salt=salt,
        )
        uow = await self._get_uow()
        async with uow.transaction():
            uow.account.set(account)
        logger.info("account_registered", email=email)
        return account

    async def login(self, email: str, password: str) -> UserAccount:
        uow = await self._get_uow()
        account = await uow.account.get()
        if account is None:
            raise AuthenticationError("no account registered")

        expected = _hash_password(password, account.salt)
        if account.email != email.strip().lower() or not hmac.compare_digest(
            expected, account.password_hash
        ):
            logger.warning("login_failed", email=email)
            raise AuthenticationError()
        logger.info("login_succeeded", email=account.email)
        return account
