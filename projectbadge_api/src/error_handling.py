from functools import wraps
import inspect
import logging

from fastapi import HTTPException

from projectbadge_api.src.exceptions import ApiError

log = logging.getLogger()


def endpoint_error_handling(method):
    """
    Decorator to handle errors raised up to the top level of the endpoint. Both
    `async def` and plain `def` endpoints are supported; FastAPI runs the latter in a
    threadpool so blocking reads don't hold up the event loop
    :param method: The method for the endpoint
    :raises: Any exception caught by the execution of `method`
    """

    if inspect.iscoroutinefunction(method):

        @wraps(method)
        async def async_wrapper_error_handling(*args, **kwargs):
            try:
                return await method(*args, **kwargs)
            except Exception as exc:
                raise _to_http_exception(method, exc) from exc

        return async_wrapper_error_handling

    @wraps(method)
    def wrapper_error_handling(*args, **kwargs):
        try:
            return method(*args, **kwargs)
        except Exception as exc:
            raise _to_http_exception(method, exc) from exc

    return wrapper_error_handling


def _to_http_exception(method, exc: Exception) -> HTTPException:
    if isinstance(exc, ApiError):
        log.error("Error in endpoint '%s': %s", method.__name__, exc.args[0])
        return HTTPException(exc.status_code, exc.args[0])

    log.exception(msg=exc.args)
    # raise non-API errors as "unknown" server errors
    # for security reasons responses should not return messages that might
    # reveal details about the configuration of the server
    return HTTPException(status_code=500, detail="Unknown error")
