"""Security utilities: password hashing and JWT helpers."""

import uuid
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone

from jose import JWTError, jwt
from passlib.context import CryptContext

from notehub.core.config import get_settings
from notehub.core.errors import ConfigurationError, InvalidToken

# ── Password hashing (bcrypt) ────────────────────────────────

pwd_context = CryptContext(
    schemes=["bcrypt"],
    deprecated="auto",
    bcrypt__rounds=get_settings().bcrypt_rounds,
)


def hash_password(password: str) -> str:
    return pwd_context.hash(password)


def verify_password(plain: str, hashed: str) -> bool:
    """Compare a password with a stored hash. A malformed hash never matches."""
    try:
        return pwd_context.verify(plain, hashed)
    except (ValueError, TypeError):
        return False


# ── JWT ───────────────────────────────────────────────────────

@dataclass(frozen=True)
class TokenClaims:
    sub: str
    role: str
    tenant_id: str


def _signing_key() -> str:
    secret = get_settings().jwt_secret
    if not secret:
        raise ConfigurationError("JWT_SECRET environment variable is required")
    return secret


def ensure_signing_key() -> None:
    """Fail fast at startup when the signing secret is absent."""
    _signing_key()


def create_jwt(
    subject: str,
    role: str,
    tenant_id: str,
    expires_delta: timedelta | None = None,
) -> str:
    settings = get_settings()
    now = datetime.now(timezone.utc)
    expire = now + (expires_delta or timedelta(hours=settings.jwt_expire_hours))
    payload = {
        "sub": subject,
        "role": role,
        "tenantId": tenant_id,
        "iat": now,
        "exp": expire,
        # Distinguishes tokens issued within the same second.
        "jti": uuid.uuid4().hex,
    }
    return jwt.encode(payload, _signing_key(), algorithm=settings.jwt_algorithm)


def decode_jwt(token: str) -> TokenClaims:
    """Verify signature and expiry. Raises InvalidToken on any failure."""
    key = _signing_key()
    try:
        payload = jwt.decode(token, key, algorithms=[get_settings().jwt_algorithm])
    except JWTError as exc:
        raise InvalidToken(str(exc)) from exc

    try:
        return TokenClaims(
            sub=str(payload["sub"]),
            role=str(payload["role"]),
            tenant_id=str(payload["tenantId"]),
        )
    except KeyError as exc:
        raise InvalidToken(f"missing claim {exc}") from exc
