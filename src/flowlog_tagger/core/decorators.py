"""Common decorators for I/O error translation and performance logging."""

from __future__ import annotations

import time
import types
from functools import wraps
from typing import Callable, Type

from ..exceptions import FlowLogTaggerError
from ..logging import get_logger


logger = get_logger(__name__)


def _translate(
    exc: OSError, exc_cls: Type[FlowLogTaggerError], message: str, path
) -> FlowLogTaggerError:
    text = message.format(path=path)
    logger.error("%s: %s", text, exc)
    return exc_cls(text, context=exc.strerror or str(exc))


def reraise_io_errors(exc_cls: Type[FlowLogTaggerError], message: str) -> Callable:
    """Translate ``OSError`` raised by the wrapped call into ``exc_cls``.

    The wrapped function takes the file path as its first argument;
    ``message`` may reference it as ``{path}``. Generator functions are
    covered while they are being iterated.
    """

    def decorator(func):
        @wraps(func)
        def wrapper(path, *args, **kwargs):
            try:
                result = func(path, *args, **kwargs)
            except OSError as exc:
                raise _translate(exc, exc_cls, message, path) from exc
            if isinstance(result, types.GeneratorType):
                return _wrap_generator(result, exc_cls, message, path)
            return result

        return wrapper

    return decorator


def _wrap_generator(gen, exc_cls, message, path):
    try:
        yield from gen
    except OSError as exc:
        raise _translate(exc, exc_cls, message, path) from exc


def log_performance(func):
    """Log execution duration for ``func``."""

    @wraps(func)
    def wrapper(*args, **kwargs):
        start_time = time.perf_counter()
        try:
            result = func(*args, **kwargs)
        except Exception:
            duration = time.perf_counter() - start_time
            logger.info("%s call failed after %.3f seconds", func.__name__, duration)
            raise
        duration = time.perf_counter() - start_time
        logger.info("%s executed in %.3f seconds", func.__name__, duration)
        return result

    return wrapper
