"""커스텀 HTTP 예외 클래스 모듈.

Custom HTTP exception classes module.
Pre-configured HTTPException subclasses raised by services and
dependencies, so call sites never spell out status codes.

Usage:
    from lexiflow.utils.exceptions import NotFoundError
    raise NotFoundError("Case not found")
"""

from fastapi import HTTPException, status


class NotFoundError(HTTPException):
    """404 Not Found 예외 — 요청한 리소스를 찾을 수 없을 때 사용.

    Raised when a lookup or mutation matches zero rows, including rows that
    belong to another organization.
    """

    def __init__(self, detail: str = "Resource not found") -> None:
        super().__init__(status_code=status.HTTP_404_NOT_FOUND, detail=detail)


class DuplicateError(HTTPException):
    """409 Conflict 예외 — 고유 제약 위반 시 사용 (e.g. duplicate user email)."""

    def __init__(self, detail: str = "Resource already exists") -> None:
        super().__init__(status_code=status.HTTP_409_CONFLICT, detail=detail)


class ForbiddenError(HTTPException):
    """403 Forbidden 예외 — 역할 레벨 부족 시 사용 (Insufficient role level)."""

    def __init__(self, detail: str = "Insufficient permissions") -> None:
        super().__init__(status_code=status.HTTP_403_FORBIDDEN, detail=detail)


class UnauthorizedError(HTTPException):
    """401 Unauthorized 예외 — 인증 실패 시 사용.

    Raised when credentials are missing, invalid, or expired.
    """

    def __init__(self, detail: str = "Authentication required") -> None:
        super().__init__(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=detail,
            headers={"WWW-Authenticate": "Bearer"},
        )


class BadRequestError(HTTPException):
    """400 Bad Request 예외 — 스키마 검증 이후의 비즈니스 검증 실패.

    Raised when request data passes schema validation but fails a business
    check (e.g. a referenced case belongs to another organization).
    """

    def __init__(self, detail: str = "Bad request") -> None:
        super().__init__(status_code=status.HTTP_400_BAD_REQUEST, detail=detail)


class UpstreamError(HTTPException):
    """502 Bad Gateway 예외 — 외부 검색 제공자 호출 실패 시 사용.

    Raised when the external search provider is unreachable or answers with
    a non-2xx status.
    """

    def __init__(self, detail: str = "Upstream service unavailable") -> None:
        super().__init__(status_code=status.HTTP_502_BAD_GATEWAY, detail=detail)
