from datetime import datetime, timedelta, timezone
from typing import Optional
import jwt
from fastapi import HTTPException
from stayhub.config import settings

def create_access_token(user_id: int, is_host: bool = False, expires_delta: Optional[timedelta] = None) -> str:
    """Issue a bearer token for a principal (used by tests and tooling)"""
    expire = datetime.now(timezone.utc) + (
        expires_delta or timedelta(minutes=settings.ACCESS_TOKEN_EXPIRE_MINUTES)
    )
    payload = {"sub": str(user_id), "is_host": is_host, "exp": expire}
    return jwt.encode(payload, settings.SECRET_KEY, algorithm=settings.ALGORITHM)

def verify_token(token: str, credentials_exception: HTTPException) -> dict:
    """Decode a bearer token into its principal claims"""
    try:
        payload = jwt.decode(token, settings.SECRET_KEY, algorithms=[settings.ALGORITHM])
    except jwt.PyJWTError:
        raise credentials_exception

    subject = payload.get("sub")
    if subject is None or not str(subject).isdigit():
        raise credentials_exception

    return {"user_id": int(subject), "is_host": bool(payload.get("is_host", False))}
