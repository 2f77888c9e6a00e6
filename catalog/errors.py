from typing import Optional, Union

from botocore.exceptions import BotoCoreError, ClientError


class CatalogError(Exception):
    """Base class for everything that can go wrong while registering a table."""


class DescriptorError(CatalogError, ValueError):
    """The table descriptor is malformed; raised before any request is sent."""


class CatalogTransportError(CatalogError):
    """The catalog could not be reached or the client had no usable credentials."""


class CatalogServiceError(CatalogError):
    """The catalog service rejected the request."""

    def __init__(self, message: str, code: Optional[str] = None):
        super().__init__(message)
        self.code = code


class TableAlreadyExistsError(CatalogServiceError):
    pass


class CatalogAccessDeniedError(CatalogServiceError):
    pass


class CatalogValidationError(CatalogServiceError):
    pass


_SERVICE_ERRORS = {
    "AlreadyExistsException": TableAlreadyExistsError,
    "AccessDeniedException": CatalogAccessDeniedError,
    "InvalidInputException": CatalogValidationError,
    "EntityNotFoundException": CatalogValidationError,
    "ValidationException": CatalogValidationError,
}


def translate_error(exc: Union[BotoCoreError, ClientError], table: str) -> CatalogError:
    """
    Map a botocore exception raised by a Glue call onto the catalog error hierarchy.

    Args:
        exc: Exception raised by the boto3 client.
        table: Fully qualified table name, used in the error message.

    Returns:
        The CatalogError to raise in its place.
    """
    if isinstance(exc, ClientError):
        error = exc.response.get("Error", {})
        code = error.get("Code")
        message = error.get("Message") or str(exc)
        error_cls = _SERVICE_ERRORS.get(code, CatalogServiceError)
        return error_cls(f"Glue rejected create_table for {table} ({code}): {message}", code=code)
    return CatalogTransportError(f"Could not reach Glue to create {table}: {exc}")
