from fastapi import HTTPException, status


class AppException(HTTPException):
    """Base application exception"""
    pass


class BadRequestError(AppException):
    def __init__(self, detail: str = "Bad request"):
        super().__init__(status_code=status.HTTP_400_BAD_REQUEST, detail=detail)


class EmailNotParsedError(BadRequestError):
    """The email was read but held no debit transaction"""
    def __init__(self, detail: str = "Could not parse transaction from email"):
        super().__init__(detail=detail)


class InternalServerError(AppException):
    def __init__(self, detail: str = "Internal server error"):
        super().__init__(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=detail)
