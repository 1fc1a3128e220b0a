# /academic-records/records/main.py

# --- Core Imports ---
from getpass import getpass
from typing import Callable, Optional

# --- Application-specific Imports ---
from .cli.menu import MenuSession
from .core.logger import get_logger
from .models.user_model import Role
from .services.auth_service import Authenticator, FixedCredentialAuthenticator
from .services.database_service import DatabaseService

logger = get_logger(__name__)

MAX_LOGIN_ATTEMPTS = 3


def login(
    authenticator: Authenticator,
    input_fn: Callable[[str], str] = input,
    secret_fn: Callable[[str], str] = getpass,
    output_fn: Callable[[str], None] = print,
) -> Optional[Role]:
    """Prompts for credentials until one attempt succeeds or the attempts run out."""
    for attempt in range(1, MAX_LOGIN_ATTEMPTS + 1):
        output_fn("\n--- LOGIN ---")
        user_login = input_fn("Login: ").strip()
        secret = secret_fn("Password: ").strip()
        role = authenticator.authenticate(user_login, secret)
        if role is not None:
            output_fn(f"Login successful. Access level: {role.name}.")
            return role
        output_fn(f"Invalid credentials ({attempt}/{MAX_LOGIN_ATTEMPTS}).")
    return None


def main(
    authenticator: Optional[Authenticator] = None,
    db: Optional[DatabaseService] = None,
    input_fn: Callable[[str], str] = input,
    secret_fn: Callable[[str], str] = getpass,
    output_fn: Callable[[str], None] = print,
) -> int:
    """Console entry point. Returns the process exit code."""
    authenticator = authenticator or FixedCredentialAuthenticator()
    db = db or DatabaseService()

    store = db.load()

    role = login(authenticator, input_fn=input_fn, secret_fn=secret_fn, output_fn=output_fn)
    if role is None:
        logger.warning("Too many failed login attempts. Exiting.")
        output_fn("Too many failed attempts. Exiting.")
        return 1

    MenuSession(store, db, role, input_fn=input_fn, output_fn=output_fn).run()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
