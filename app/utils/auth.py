import logging
from typing import Optional

from fastapi import Depends, Header, HTTPException, status

from app.utils.security import get_api_key, verify_api_key

logger = logging.getLogger(__name__)


async def require_api_key(
    authorization: Optional[str] = Header(None),
    api_key: Optional[str] = Depends(get_api_key),
):
    """Reject the request unless the Authorization header equals the API key.

    The header value is used as-is: no "Bearer" scheme is parsed.
    """
    if not verify_api_key(authorization, api_key):
        logger.warning("Rejected unauthorized job mutation")
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Unauthorized",
        )
