"""Decorators for command functions."""

import functools
import time
import traceback
from collections.abc import Callable

import typer

from tasklist_cli.config import get_config_manager
from tasklist_cli.errors import (
    AmbiguousTaskIdError,
    TaskListError,
    TaskNotFoundError,
    TaskValidationError,
)
from tasklist_cli.utils.exit_codes import (
    ERROR_GENERAL,
    ERROR_INVALID_ARGS,
    ERROR_NOT_FOUND,
    get_exit_code_name,
)
from tasklist_cli.utils.logger import get_logger
from tasklist_cli.utils.ui.formatters import format_error


class AppError(Exception):
    """Custom application error with exit code."""

    def __init__(self, message: str, exit_code: int = ERROR_GENERAL):
        super().__init__(message)
        self.exit_code = exit_code


def _exit_code_for(error: TaskListError) -> int:
    if isinstance(error, TaskNotFoundError):
        return ERROR_NOT_FOUND
    if isinstance(error, (TaskValidationError, AmbiguousTaskIdError)):
        return ERROR_INVALID_ARGS
    return ERROR_GENERAL


def command_wrapper(func: Callable) -> Callable:
    """Log the command and turn known errors into messages and exit codes."""

    @functools.wraps(func)
    def wrapper(*args, **kwargs):
        logger = get_logger(get_config_manager().config.logging.level)
        cmd = func.__name__
        start = time.monotonic()
        logger.info("command started: %s", cmd)
        try:
            result = func(*args, **kwargs)
            elapsed = time.monotonic() - start
            logger.info("command completed: %s (%.3fs)", cmd, elapsed)
            return result

        except (AppError, TaskListError) as e:
            elapsed = time.monotonic() - start
            code = e.exit_code if isinstance(e, AppError) else _exit_code_for(e)
            logger.error(
                "command failed: %s (%.3fs) %s - %s",
                cmd,
                elapsed,
                get_exit_code_name(code),
                str(e),
            )
            format_error(str(e))
            raise typer.Exit(code=code) from e

        except typer.Exit:
            # Re-raise Typer's own exits (like --help or explicit Exit(0))
            raise

        except Exception as e:
            elapsed = time.monotonic() - start
            logger.error(
                "command failed: %s (%.3fs) %s - %s\n%s",
                cmd,
                elapsed,
                get_exit_code_name(ERROR_GENERAL),
                str(e),
                traceback.format_exc(),
            )
            format_error(f"An unexpected error occurred: {str(e)}")
            raise typer.Exit(code=ERROR_GENERAL) from e

    return wrapper
