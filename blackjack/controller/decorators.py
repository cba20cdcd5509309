"""
Decorators for engine commands.

requires_started turns a command into a silent no-op while no round is in
progress; logged_action logs command start, completion and failure.
"""

import functools
from typing import Any, Callable, Optional, TypeVar

F = TypeVar('F', bound=Callable[..., Any])


def requires_started(func: F) -> F:
    """
    Skip the decorated method unless a round is in progress.

    The instance must expose a boolean ``started`` attribute. Skipped calls
    return None and are logged at DEBUG through the instance's ``_logger``.
    """
    @functools.wraps(func)
    def wrapper(self, *args, **kwargs):
        if not self.started:
            logger = getattr(self, '_logger', None)
            if logger:
                logger.debug(f"Ignoring {func.__name__}: game has not been started")
            return None
        return func(self, *args, **kwargs)

    return wrapper


def logged_action(action_name: Optional[str] = None):
    """
    Decorator to automatically log engine commands.

    Args:
        action_name: Optional custom name for the action. If not provided,
                    the function name will be used.

    Returns:
        Decorator function.

    Example:
        @logged_action("Deal")
        def deal(self) -> None:
            ...
    """
    def decorator(func: F) -> F:
        @functools.wraps(func)
        def wrapper(self, *args, **kwargs):
            logger = getattr(self, '_logger', None)
            name = action_name or func.__name__

            if logger:
                logger.debug(f"Starting {name}")

            try:
                result = func(self, *args, **kwargs)
                if logger:
                    logger.debug(f"Completed {name}")
                return result
            except Exception as e:
                if logger:
                    logger.error(f"Failed {name}: {e}")
                raise

        return wrapper
    return decorator
