import sys
import traceback
from typing import Any

from uvicorn.server import logger

from util.config import config

LEVELS = {"trace": 0, "debug": 1, "info": 2, "warn": 3, "warning": 3, "error": 4}


def _should_log(level: str) -> bool:
    if config.log_level == "local":
        return True  # everything goes out locally
    current_level = LEVELS.get(config.log_level, LEVELS["info"])
    request_level = LEVELS.get(level.lower(), LEVELS["info"])
    return request_level >= current_level


def _format_args(*args: Any) -> tuple[str, list[Exception]]:
    exceptions = []
    formatted_parts = []
    for arg in args:
        if isinstance(arg, Exception):
            exceptions.append(arg)
            formatted_parts.append(f"! {type(arg).__name__} (see below)")
        elif isinstance(arg, (dict, list)):
            formatted_parts.append(f"{type(arg).__name__}:\n```\n{arg!r}\n```")
        else:
            formatted_parts.append(str(arg))

    if not formatted_parts:
        return "", exceptions
    if len(formatted_parts) == 1:
        return formatted_parts[0], exceptions
    if not exceptions:
        head_lines = "\n ├─ ".join(formatted_parts[:-1])
        return f"{head_lines}\n └─ {formatted_parts[-1]}", exceptions
    # exceptions are printed below, so the tree stays open
    return "\n ├─ ".join(formatted_parts), exceptions


def _trace_of(exception: Exception, indent: str = "") -> str | None:
    if not exception.__traceback__:
        return None
    trace_lines = traceback.format_tb(exception.__traceback__)
    return "".join(f"{indent}{line.strip()}\n" for line in trace_lines).rstrip()


def _print_message(level: str, message: str, exceptions: list[Exception]):
    if _should_log(level):
        print(f"[{level[0]}] {message}")
    for exception in exceptions:
        print(f" ‼  Message: {exception}", file = sys.stderr)
        if trace := _trace_of(exception, indent = "    "):
            print(trace, file = sys.stderr)


def _emit_message(level: str, message: str, exceptions: list[Exception]):
    if _should_log(level):
        match level:
            case "TRACE" | "DEBUG":
                logger.debug(message)
            case "INFO":
                logger.info(message)
            case "WARN":
                logger.warning(message)
            case "ERROR":
                logger.error(message)
    for exception in exceptions:
        logger.error(f"Message: {exception}")
        if trace := _trace_of(exception):
            logger.error(f"Details:\n └─ {trace}")


def _log_message(level: str, message: str, exceptions: list[Exception]) -> str:
    if not _should_log(level) and not exceptions:
        return message
    if config.log_level == "local":
        _print_message(level, message, exceptions)
        return message
    try:
        _emit_message(level, message, exceptions)
    except Exception:
        # uvicorn logger unavailable, fall back to plain printing
        _print_message(level, message, exceptions)
    return message


def t(*args: Any) -> str:
    message, exceptions = _format_args(*args)
    return _log_message("TRACE", message, exceptions)


def d(*args: Any) -> str:
    message, exceptions = _format_args(*args)
    return _log_message("DEBUG", message, exceptions)


def i(*args: Any) -> str:
    message, exceptions = _format_args(*args)
    return _log_message("INFO", message, exceptions)


def w(*args: Any) -> str:
    message, exceptions = _format_args(*args)
    return _log_message("WARN", message, exceptions)


def e(*args: Any) -> str:
    message, exceptions = _format_args(*args)
    return _log_message("ERROR", message, exceptions)
