from pydantic import BaseModel
from typing import Optional

class Principal(BaseModel):
    """Authenticated caller, as resolved by the auth layer"""
    user_id: int
    is_host: bool = False
    name: Optional[str] = None
