"""
Local errors raised by appres before any request reaches Appwrite.

Failures reported by the Appwrite service itself are not wrapped: the SDK's
AppwriteException reaches the caller unchanged.
"""

class AppresError(Exception):
    """Base exception for all appres errors"""
    def __init__(self, message: str):
        self.message = message
        super().__init__(self.message)

class ConfigurationError(AppresError):
    """Raised when endpoint, project id or API key are not configured"""
    def __init__(self, missing: list):
        self.missing = list(missing)
        super().__init__(f"Missing Appwrite settings: {', '.join(self.missing)}")

class AttributeValidationError(AppresError, ValueError):
    """Raised when an attribute descriptor has values of the wrong type"""
    pass

class UnsupportedAttributeTypeError(AttributeValidationError):
    """Raised when an attribute descriptor names a kind appres cannot create"""
    def __init__(self, kind):
        self.kind = kind
        super().__init__(f"unsupported attribute type: {kind}")

class BucketSizeError(AppresError, ValueError):
    """Raised when a bucket's maximum file size is outside the allowed range"""
    def __init__(self, max_file_size: int, limit: int):
        self.max_file_size = max_file_size
        self.limit = limit
        super().__init__(
            f"max_file_size must be between 0 and {limit} bytes, got {max_file_size}"
        )
