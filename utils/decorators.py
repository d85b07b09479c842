"""
Handler decorators for error handling, logging, and response formatting.
"""
import functools
import uuid
from typing import Callable, Any, Dict
from logger_config import get_logger
from utils.exceptions import AwsApiError, AwsCredentialsError, ValidationError

logger = get_logger(__name__)


def _error_response(
    error: Dict[str, Any],
    correlation_id: str,
    handler_name: str
) -> Dict[str, Any]:
    error["correlation_id"] = correlation_id
    return {
        "error": error,
        "metadata": {
            "correlation_id": correlation_id,
            "handler": handler_name
        }
    }


def node_handler(
    func: Callable[[Any, Any], Any]
) -> Callable[[Any, Any], Dict[str, Any]]:
    """
    Decorator for node entry points invoked as Lambda handlers.

    Provides:
    - Request correlation IDs for logging
    - Response formatting: non-dict results are returned under "result"
    - Structured error responses for validation, AWS and unexpected errors

    Args:
        func: The handler function to decorate

    Returns:
        Decorated handler function
    """
    @functools.wraps(func)
    def wrapper(event: Any, context: Any) -> Dict[str, Any]:
        correlation_id = str(uuid.uuid4())
        log_extra = {"correlation_id": correlation_id}

        logger.info(
            f"Handler {func.__name__} invoked (request id: "
            f"{getattr(context, 'aws_request_id', None) if context else None})",
            extra=log_extra
        )

        try:
            result = func(event, context)

            if not isinstance(result, dict):
                result = {"result": result}

            result.setdefault("metadata", {})
            result["metadata"]["correlation_id"] = correlation_id

            logger.info(
                f"Handler {func.__name__} completed successfully",
                extra=log_extra
            )

            return result

        except (ValidationError, ValueError) as e:
            logger.warning(
                f"Handler {func.__name__} validation error: {str(e)}",
                extra=log_extra
            )
            error = {"type": "ValidationError", "message": str(e)}
            field = getattr(e, "field", None)
            if field:
                error["field"] = field
            return _error_response(error, correlation_id, func.__name__)

        except AwsApiError as e:
            logger.error(
                f"Handler {func.__name__} AWS API error: {e.message}",
                extra=log_extra
            )
            error = {
                "type": type(e).__name__,
                "message": e.message,
                "statusCode": e.status_code,
                "awsErrorType": e.error_type
            }
            return _error_response(error, correlation_id, func.__name__)

        except AwsCredentialsError as e:
            logger.error(
                f"Handler {func.__name__} has no AWS credentials: {str(e)}",
                extra=log_extra
            )
            error = {"type": type(e).__name__, "message": str(e)}
            return _error_response(error, correlation_id, func.__name__)

        except Exception as e:
            logger.error(
                f"Handler {func.__name__} failed: {str(e)}",
                extra=log_extra,
                exc_info=True
            )
            error = {"type": type(e).__name__, "message": str(e)}
            return _error_response(error, correlation_id, func.__name__)

    return wrapper
