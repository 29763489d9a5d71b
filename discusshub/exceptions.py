from typing import Optional


class ForumError(Exception):
    """
    Lỗi nghiệp vụ cơ sở. Mỗi lớp con mang sẵn mã trạng thái HTTP tương ứng,
    handler trong main.py chuyển nó thành body {"message": ...}.
    """
    status_code: int = 500

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.message = message
        if status_code is not None:
            self.status_code = status_code


class InvalidInputError(ForumError):
    status_code = 400


class AuthenticationError(ForumError):
    status_code = 401


class MissingCredentialError(AuthenticationError):
    def __init__(self, message: str = "No token, authorization denied"):
        super().__init__(message)


class MalformedCredentialError(AuthenticationError):
    def __init__(self, message: str = "Invalid token"):
        super().__init__(message)


class ExpiredCredentialError(AuthenticationError):
    def __init__(self, message: str = "Token expired"):
        super().__init__(message)


class UnknownSubjectError(AuthenticationError):
    def __init__(self, message: str = "User not found"):
        super().__init__(message)


class ForbiddenError(ForumError):
    status_code = 403


class NotFoundError(ForumError):
    status_code = 404


class ConflictError(ForumError):
    status_code = 409
