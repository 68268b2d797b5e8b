"""
External service exceptions.
"""


class ServiceError(Exception):
    """Base exception for external service errors."""

    def __init__(self, service: str, message: str):
        self.service = service
        self.message = message
        super().__init__(message)


class ServiceUnavailable(ServiceError):
    """Service is not available (missing API key, network error, etc.)."""

    def __init__(self, service: str, reason: str = "unavailable"):
        super().__init__(service, f"{service} unavailable: {reason}")
        self.reason = reason


class LLMServiceError(ServiceError):
    """Raised when a text completion call fails."""

    def __init__(self, message: str):
        super().__init__("llm", message)


class ResearchServiceError(ServiceError):
    """Raised when a web-search completion call fails."""

    def __init__(self, message: str, status_code: int = None):
        super().__init__("research", message)
        self.status_code = status_code


class ImageServiceError(ServiceError):
    """Raised when image inference fails or returns an unusable result."""

    def __init__(self, message: str, prediction_id: str = None):
        super().__init__("images", message)
        self.prediction_id = prediction_id
