import functools
import warnings

from .config import LOCAL_DEV_LIB_URL


def deprecated(replacement: str = 'the corresponding export from local-dev-lib'):
    """Mark a helper as superseded by hubspot-local-dev-lib."""

    def decorator(func):
        message = (
            f'{func.__module__}.{func.__qualname__} is deprecated. '
            f'Use {replacement} ({LOCAL_DEV_LIB_URL}).'
        )

        @functools.wraps(func)
        def wrapper(*args, **kwargs):
            warnings.warn(message, DeprecationWarning, stacklevel=2)
            return func(*args, **kwargs)

        wrapper.__deprecated__ = message
        return wrapper

    return decorator
