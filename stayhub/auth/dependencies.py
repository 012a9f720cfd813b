from typing import Optional
from fastapi import Depends, HTTPException, status
from fastapi.security import OAuth2PasswordBearer
from stayhub.auth.schemas import Principal
from stayhub.auth.utils import verify_token

# Token issuance lives in the external auth service
oauth2_scheme = OAuth2PasswordBearer(tokenUrl="/api/users/login")
optional_oauth2_scheme = OAuth2PasswordBearer(tokenUrl="/api/users/login", auto_error=False)

def _credentials_exception() -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail="Could not validate credentials",
        headers={"WWW-Authenticate": "Bearer"},
    )

def get_current_principal(token: str = Depends(oauth2_scheme)) -> Principal:
    """Resolve the authenticated caller from the bearer token"""
    token_data = verify_token(token, _credentials_exception())
    return Principal(**token_data)

def get_optional_principal(token: Optional[str] = Depends(optional_oauth2_scheme)) -> Optional[Principal]:
    """Caller if a valid token was sent, otherwise anonymous"""
    if not token:
        return None
    return Principal(**verify_token(token, _credentials_exception()))
