"""FastAPI dependency injection utilities."""

from typing import Annotated

from fastapi import Depends, HTTPException, Request, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.ext.asyncio import AsyncSession

from mindscore.core.security import decode_access_token
from mindscore.db.session import get_db
from mindscore.scoring import InstrumentCatalog, default_catalog
from mindscore.services.assessment import AssessmentService

# Security scheme
security = HTTPBearer(auto_error=False)


async def get_current_token(
    credentials: Annotated[HTTPAuthorizationCredentials | None, Depends(security)],
) -> dict | None:
    """Extract and decode the current JWT token.

    Returns:
        Decoded token payload or None
    """
    if not credentials:
        return None

    return decode_access_token(credentials.credentials)


async def get_current_user_id(
    token: Annotated[dict | None, Depends(get_current_token)],
) -> str:
    """Get the id of the authenticated user from the token subject.

    Raises:
        HTTPException: If the token is missing, invalid or has no subject
    """
    if not token or not token.get("sub"):
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Not authenticated",
            headers={"WWW-Authenticate": "Bearer"},
        )

    return str(token["sub"])


def get_catalog() -> InstrumentCatalog:
    """Get the instrument catalog used by request handlers."""
    return default_catalog()


def get_assessment_service(
    session: Annotated[AsyncSession, Depends(get_db)],
    catalog: Annotated[InstrumentCatalog, Depends(get_catalog)],
) -> AssessmentService:
    return AssessmentService(session, catalog)


def get_request_id(request: Request) -> str | None:
    """Extract request ID from headers."""
    return request.headers.get("X-Request-ID")


# Type aliases for cleaner dependency injection
CurrentUserId = Annotated[str, Depends(get_current_user_id)]
DbSession = Annotated[AsyncSession, Depends(get_db)]
Catalog = Annotated[InstrumentCatalog, Depends(get_catalog)]
Assessments = Annotated[AssessmentService, Depends(get_assessment_service)]
