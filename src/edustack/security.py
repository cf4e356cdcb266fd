# src/edustack/security.py
from passlib.context import CryptContext

# Salted pbkdf2; `deprecated="auto"` lets verify_and_update flag hashes to upgrade.
pwd_context = CryptContext(schemes=["pbkdf2_sha256"], deprecated="auto")

# Verified against when the username is unknown so both failure paths cost the same.
_DUMMY_HASH = pwd_context.hash("edustack-timing-equalizer")


def hash_password(password: str) -> str:
    return pwd_context.hash(password)


def verify_password(password: str, hashed: str | None) -> bool:
    if not hashed:
        pwd_context.verify(password, _DUMMY_HASH)
        return False
    try:
        return pwd_context.verify(password, hashed)
    except ValueError:
        # not a recognised hash (e.g. a legacy plaintext row)
        return False
