"""
Logging handler that forwards records through a SlackHook.
"""

import logging

from ..config.constants import INTERNAL_LOGGER_NAME


class SlackHandler(logging.Handler):
    """
    logging.Handler adapter for SlackHook.

    Level filtering happens twice: first by this handler's own level (the
    stdlib threshold), then by the hook's accepted levels. emit() never
    raises: delivery and message formatting errors go to
    Handler.handleError, so logging.raiseExceptions decides whether they
    reach stderr.

    Records from the library's own loggers are skipped, otherwise a failed
    post logged at DEBUG would be posted again.
    """

    def __init__(self, hook, level: int = logging.NOTSET):
        super().__init__(level)
        self.hook = hook
        self._callback = hook.get_hook()

    def emit(self, record: logging.LogRecord) -> None:
        if _is_internal(record.name):
            return
        try:
            self._callback(record)
        except RecursionError:
            raise
        except Exception:
            # bad format args or a failed post must not break the log call
            self.handleError(record)


def _is_internal(name: str) -> bool:
    return name == INTERNAL_LOGGER_NAME or name.startswith(INTERNAL_LOGGER_NAME + '.')
