# chat_backend/utils/errors.py

from fastapi import HTTPException

class ForbiddenError(HTTPException):
    def __init__(self, detail: str):
        super().__init__(status_code=403, detail=detail)

class NotFoundError(HTTPException):
    def __init__(self, detail: str):
        super().__init__(status_code=404, detail=detail)

class ConflictError(HTTPException):
    def __init__(self, detail: str):
        super().__init__(status_code=409, detail=detail)

class ServiceUnavailableError(HTTPException):
    def __init__(self, detail: str):
        super().__init__(status_code=503, detail=detail)

# Domain failures, mapped onto the statuses above

class UnauthenticatedError(ForbiddenError):
    pass

class CursorNotFoundError(NotFoundError):
    def __init__(self, from_id: str):
        super().__init__(detail=f"Message '{from_id}' not found")
        self.from_id = from_id

class StoreUnavailableError(ServiceUnavailableError):
    pass
