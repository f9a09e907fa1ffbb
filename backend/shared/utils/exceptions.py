"""
Centralized HTTP exceptions for consistent error handling.

Three kinds cover every entity operation:
- ValidationError (400): caller input rejected before any store access
- NotFoundError (404): the requested row does not exist (or is already gone)
- ExternalServiceError (500): the relational store failed; the underlying
  fault is logged and only a generic message reaches the caller

Usage:
    from shared.utils.exceptions import NotFoundError, ValidationError

    raise NotFoundError("Branch", branch_id)
    raise ValidationError("name", "El campo name del Branch es obligatorio")
"""

from typing import Any

from fastapi import HTTPException, status

from shared.config.logging import get_logger

logger = get_logger(__name__)


class AppException(HTTPException):
    """
    Base exception with automatic logging.

    All custom exceptions should inherit from this class
    to ensure consistent logging and response format.
    """

    def __init__(
        self,
        status_code: int,
        detail: str,
        log_level: str = "warning",
        headers: dict[str, str] | None = None,
        **log_context: Any,
    ):
        log_fn = getattr(logger, log_level, logger.warning)
        log_fn(detail, status_code=status_code, **log_context)

        super().__init__(status_code=status_code, detail=detail, headers=headers)


# =============================================================================
# 404 Not Found Errors
# =============================================================================


class NotFoundError(AppException):
    """
    Entity not found error (404).

    Usage:
        raise NotFoundError("Zone", 123)
    """

    def __init__(self, entity: str, entity_id: int | str | None = None, **log_context: Any):
        if entity_id is not None:
            detail = f"{entity} con ID {entity_id} no encontrado"
        else:
            detail = f"{entity} no encontrado"

        self.entity = entity
        self.entity_id = entity_id

        super().__init__(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=detail,
            log_level="warning",
            entity=entity,
            entity_id=entity_id,
            **log_context,
        )


# =============================================================================
# 400 Bad Request Errors
# =============================================================================


class ValidationError(AppException):
    """
    Input validation error (400).

    Usage:
        raise ValidationError("id", "El ID del Branch debe ser mayor que cero")
        raise ValidationError("rolId", "El rolId debe ser mayor a cero", value=0)
    """

    def __init__(self, field: str, detail: str, **log_context: Any):
        self.field = field

        super().__init__(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=detail,
            log_level="warning",
            field=field,
            **log_context,
        )


class IdMismatchError(ValidationError):
    """Route id and body id differ on a full-record update."""

    def __init__(self, route_id: int, body_id: int, **log_context: Any):
        super().__init__(
            "id",
            "El ID de la ruta no coincide con el ID del objeto.",
            route_id=route_id,
            body_id=body_id,
            **log_context,
        )


# =============================================================================
# 500 Internal Server Errors
# =============================================================================


class ExternalServiceError(AppException):
    """
    A collaborator outside the process (the relational store) failed.

    The cause is kept on the exception and written to the log with its
    traceback; the response only carries ``detail``.

    Usage:
        except SQLAlchemyError as e:
            raise ExternalServiceError("Base de datos", "Error al crear el Item", cause=e)
    """

    def __init__(
        self,
        resource: str,
        detail: str,
        cause: BaseException | None = None,
        **log_context: Any,
    ):
        self.resource = resource
        self.cause = cause

        if cause is not None:
            logger.error(
                f"{resource}: {detail}",
                error=str(cause),
                error_type=type(cause).__name__,
                exc_info=(type(cause), cause, cause.__traceback__),
            )

        super().__init__(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=detail,
            log_level="error",
            resource=resource,
            **log_context,
        )
