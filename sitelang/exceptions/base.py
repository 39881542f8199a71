"""
Base domain exception definitions
"""


class DomainException(Exception):
    """Base domain exception"""

    def __init__(self, message: str, code: str = "DOMAIN_ERROR",
                 details: dict = None):
        super().__init__(message)
        self.code = code
        self.details = details or {}
