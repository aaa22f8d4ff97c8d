import logging
import uuid
from datetime import datetime, timedelta, timezone
from typing import Optional

from fastapi import Header, HTTPException
from jose import JWTError, jwt
from passlib.context import CryptContext

import database
from config import (
    ACCESS_TOKEN_EXPIRE_MINUTES,
    ADMIN_PASSWORD,
    ADMIN_PASSWORD_HASH,
    ADMIN_USERNAME,
    JWT_ALGORITHM,
    JWT_SECRET,
)
from schemas import ADMIN_CREDENTIAL, REVOKED_TOKEN

logger = logging.getLogger(__name__)

# Use pbkdf2_sha256 to avoid external bcrypt dependency issues
pwd_context = CryptContext(schemes=["pbkdf2_sha256"], deprecated="auto")

# Env fallback credential; a precomputed hash wins over the plain password
_env_password_hash = ADMIN_PASSWORD_HASH or pwd_context.hash(ADMIN_PASSWORD)


def hash_password(password: str) -> str:
    return pwd_context.hash(password)


def verify_password(plain_password: str, hashed_password: str) -> bool:
    try:
        return pwd_context.verify(plain_password, hashed_password)
    except ValueError:
        # unrecognized hash format
        return False


def verify_admin_credentials(username: str, password: str) -> bool:
    """
    The one credential check. Once any admin row is stored only stored rows
    count; the ADMIN_USERNAME / ADMIN_PASSWORD(_HASH) pair works only while
    the collection is empty or there is no database.
    """
    username = (username or "").strip()
    if not username or not password:
        return False
    if database.db is not None:
        collection = database.get_db()[ADMIN_CREDENTIAL]
        row = collection.find_one({"username": username})
        if row:
            return verify_password(password, row.get("password_hash", ""))
        if collection.count_documents({}, limit=1):
            return False
    if username.lower() != ADMIN_USERNAME.lower():
        return False
    return verify_password(password, _env_password_hash)


def create_access_token(username: str, expires_delta: Optional[timedelta] = None) -> str:
    expire = datetime.now(timezone.utc) + (expires_delta or timedelta(minutes=ACCESS_TOKEN_EXPIRE_MINUTES))
    to_encode = {"sub": username, "role": "admin", "jti": uuid.uuid4().hex, "exp": expire}
    return jwt.encode(to_encode, JWT_SECRET, algorithm=JWT_ALGORITHM)


def decode_token(token: str) -> dict:
    return jwt.decode(token, JWT_SECRET, algorithms=[JWT_ALGORITHM])


def is_revoked(jti: Optional[str]) -> bool:
    if not jti or database.db is None:
        return False
    return database.get_db()[REVOKED_TOKEN].find_one({"jti": jti}) is not None


def revoke(payload: dict) -> None:
    exp = payload.get("exp")
    expires_at = datetime.fromtimestamp(exp, tz=timezone.utc) if exp else None
    database.get_db()[REVOKED_TOKEN].insert_one({
        "jti": payload.get("jti"),
        "sub": payload.get("sub"),
        "expires_at": expires_at,
        "revoked_at": datetime.now(timezone.utc),
    })


def _bearer(authorization: Optional[str]) -> str:
    if not authorization or not authorization.lower().startswith("bearer "):
        raise HTTPException(status_code=401, detail="Not authenticated")
    return authorization.split(" ", 1)[1]


def get_token_payload(authorization: Optional[str] = Header(None)) -> dict:
    token = _bearer(authorization)
    try:
        payload = decode_token(token)
    except JWTError:
        raise HTTPException(status_code=401, detail="Invalid token")
    if payload.get("role") != "admin" or not payload.get("sub"):
        raise HTTPException(status_code=403, detail="Forbidden")
    if is_revoked(payload.get("jti")):
        raise HTTPException(status_code=401, detail="Token revoked")
    return payload


def get_current_admin(authorization: Optional[str] = Header(None)) -> dict:
    payload = get_token_payload(authorization)
    return {"username": payload["sub"], "role": payload["role"]}
