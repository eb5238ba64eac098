class AppError(Exception):
    def __init__(self, message: str, *, status_code: int = 400) -> None:
        super().__init__(message)
        self.message = message
        self.status_code = status_code


class ValidationError(AppError):
    def __init__(self, message: str = "Missing or invalid product data") -> None:
        super().__init__(message, status_code=400)


class NotFoundError(AppError):
    def __init__(self, message: str = "Product not found") -> None:
        super().__init__(message, status_code=404)


class InternalError(AppError):
    def __init__(self, message: str = "Internal server error") -> None:
        super().__init__(message, status_code=500)
