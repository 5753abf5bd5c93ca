"""
Service Exceptions

Errors raised by the estimate adapters and the VehicleDatabases client.
Routes translate these into JSON error responses.
"""


class ConnectSpecsError(Exception):
    """Base class for errors raised by this service"""
    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class EstimateValidationError(ConnectSpecsError):
    """Raised when a labor estimate payload is missing or has bad fields"""
    def __init__(self, message: str, fields=None):
        self.fields = list(fields or [])
        super().__init__(message)


class ConfigurationError(ConnectSpecsError):
    """Raised when a required setting (e.g. an API key) is not configured"""


class VehicleDatabasesError(ConnectSpecsError):
    """Exception raised when the VehicleDatabases API call fails"""
    def __init__(self, error: str, status_code: int = None):
        self.status_code = status_code
        self.error = error
        super().__init__(f"VehicleDatabases request failed: {error}")
