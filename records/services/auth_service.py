# /academic-records/records/services/auth_service.py

"""
Login handling.

The CLI only depends on the `Authenticator` protocol, so any object with an
`authenticate(login, secret)` method can stand in for the default fixed list
(tests inject their own). Credentials are plain text: this is an access-level
switch for a single-user program, not a security boundary.
"""

from typing import Iterable, List, Optional, Protocol

from ..core.logger import get_logger
from ..models.user_model import Credential, Role

logger = get_logger(__name__)

DEFAULT_CREDENTIALS: List[Credential] = [
    Credential(login="admin", secret="master", role=Role.ADMIN),
    Credential(login="222", secret="senha222", role=Role.PROFESSOR),
    Credential(login="111", secret="senha111", role=Role.STUDENT),
]


class Authenticator(Protocol):
    def authenticate(self, login: str, secret: str) -> Optional[Role]:
        ...


class FixedCredentialAuthenticator:
    def __init__(self, credentials: Optional[Iterable[Credential]] = None):
        self.credentials = list(credentials) if credentials is not None else list(DEFAULT_CREDENTIALS)

    def authenticate(self, login: str, secret: str) -> Optional[Role]:
        """Returns the role of the first matching entry, or None."""
        for credential in self.credentials:
            if credential.login == login and credential.secret == secret:
                logger.info(f"Login succeeded for '{login}' (role {credential.role.name}).")
                return credential.role
        logger.warning(f"Login failed for '{login}'.")
        return None
