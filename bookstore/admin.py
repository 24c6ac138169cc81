"""Admin routes, all behind the HTTP Basic gate.

The router-level dependency runs before any handler, so every path under
`/admin` answers an anonymous caller with the 401 challenge, including
paths that have no handler (authenticated callers get a 404 for those).
"""

from fastapi import APIRouter, Depends, HTTPException, status
from sqlmodel import Session
from . import services
from .auth import require_admin
from .config import settings
from .database import get_session
from .schemas import AdminSummary

router = APIRouter(prefix="/admin", tags=["admin"], dependencies=[Depends(require_admin)])


@router.get('', response_model=AdminSummary)
def admin_summary(username: str = Depends(require_admin), db: Session = Depends(get_session)):
    """Protected summary of the store."""
    return {
        'username': username,
        'profile': settings.PROFILE,
        'book_count': services.BookService(db).count(),
    }


@router.api_route('/{path:path}', methods=["GET", "POST", "PUT", "PATCH", "DELETE"], include_in_schema=False)
def admin_unknown(path: str):
    raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=f"no admin resource at /admin/{path}")
