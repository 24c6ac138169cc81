"""Authentication helpers and FastAPI security dependency.

Only the `/admin` routes are protected. They use HTTP Basic: the browser
(or client) is challenged with `WWW-Authenticate: Basic` and the
supplied username/password is checked against the configured admin
credentials. Every other route is public.
"""

import logging
from fastapi import Depends, HTTPException, Request, status
from fastapi.security import HTTPBasic, HTTPBasicCredentials
from .services import AdminCredentials

basic_scheme = HTTPBasic(auto_error=False)
logger = logging.getLogger("bookstore.auth")


def get_admin_credentials(request: Request) -> AdminCredentials:
    """Return the credentials object created at application startup."""
    return request.app.state.admin_credentials


def require_admin(
    credentials: HTTPBasicCredentials = Depends(basic_scheme),
    admin: AdminCredentials = Depends(get_admin_credentials),
) -> str:
    """FastAPI dependency that returns the authenticated admin username.

    Raises HTTPException(401) with a Basic challenge when credentials are
    missing or wrong.
    """
    challenge = {"WWW-Authenticate": "Basic"}
    if credentials is None:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="authentication required", headers=challenge)
    if not admin.verify(credentials.username, credentials.password):
        logger.warning("admin login failed for user %r", credentials.username)
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="invalid credentials", headers=challenge)
    return credentials.username
