import functools
import logging

logger = logging.getLogger(__name__)


def log_call(fn):
    """Log each call of `fn` with its arguments (bound `self` omitted)."""
    @functools.wraps(fn)
    def __wrapped(*args, **kwargs):
        shown = args[1:] if args and hasattr(args[0], fn.__name__) else args
        logger.info(f"Calling {fn.__qualname__} {shown} {kwargs}")
        return fn(*args, **kwargs)
    return __wrapped
