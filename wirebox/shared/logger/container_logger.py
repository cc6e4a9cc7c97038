# wirebox/shared/logger/container_logger.py
import inspect
import logging
import os
from datetime import datetime, timezone
from typing import Dict, Optional, Tuple

import structlog
from colorama import Fore, Style, init as colorama_init

colorama_init()

LEVELS = {
    "debug": logging.DEBUG,
    "info": logging.INFO,
    "warning": logging.WARNING,
    "error": logging.ERROR,
    "exception": logging.ERROR,
    "critical": logging.CRITICAL,
}


class ContainerLogger:
    """
    structlog-backed logger used by the container.

    Console output is colourised; a JSON file sink is attached only when a
    log file is given. Loggers are cached per (name, file, level, format) so
    repeated construction does not stack handlers; the level is applied by a
    processor, so loggers sharing a name can run at different levels.
    """

    _logger_cache: Dict[Tuple[str, Optional[str], str, bool], "ContainerLogger"] = {}

    LEVEL_COLORS = {
        "DEBUG": Fore.CYAN,
        "INFO": Fore.GREEN,
        "WARNING": Fore.YELLOW,
        "ERROR": Fore.RED,
        "CRITICAL": Style.BRIGHT + Fore.RED,
    }

    def __init__(
        self,
        name: str = "wirebox",
        log_file: Optional[str] = None,
        level: str = "WARNING",
        json_format: bool = False,
        context: Optional[dict] = None,
    ):
        self.name = name
        self.context = context or {}

        cache_key = (name, log_file or None, level.upper(), json_format)
        if cache_key in self._logger_cache:
            cached = self._logger_cache[cache_key]
            self.console_logger = cached.console_logger.bind(**self.context)
            self.file_logger = None
            if cached.file_logger is not None:
                self.file_logger = cached.file_logger.bind(**self.context)
            return

        log_level = getattr(logging, level.upper(), logging.WARNING)

        def drop_below_level(logger, method_name, event_dict):
            if LEVELS.get(method_name, logging.ERROR) < log_level:
                raise structlog.DropEvent
            return event_dict

        # ----------------------------
        # Caller processor
        # ----------------------------
        def add_caller(logger, method_name, event_dict):
            frame = inspect.currentframe()
            while frame:
                module_name = frame.f_globals.get("__name__")
                if (
                    module_name
                    and not module_name.startswith("structlog")
                    and not module_name.endswith("container_logger")
                ):
                    event_dict["module"] = module_name
                    event_dict["function"] = frame.f_code.co_name
                    event_dict["lineno"] = frame.f_lineno
                    break
                frame = frame.f_back
            return event_dict

        # ----------------------------
        # Console processor
        # ----------------------------
        def console_processor(logger, method_name, event_dict):
            ts = event_dict.pop("timestamp", None) or datetime.now(timezone.utc).isoformat()
            level_name = event_dict.pop("level", method_name).upper()
            logger_name = event_dict.pop("logger", self.name)
            msg = event_dict.pop("event", "")
            module = event_dict.pop("module", "")
            func = event_dict.pop("function", "")
            lineno = event_dict.pop("lineno", "")

            # caller info only for WARNING and above
            caller = ""
            if level_name in ("WARNING", "ERROR", "CRITICAL") and module and func:
                caller = f" ({module}.{func}:{lineno})"

            extra = " ".join(f"{k}={v!r}" for k, v in event_dict.items())
            color = self.LEVEL_COLORS.get(level_name, "")
            line = f"{ts} [{logger_name}] {level_name}: {msg}"
            if extra:
                line = f"{line} {extra}"
            return f"{color}{line}{caller}{Style.RESET_ALL}"

        # ----------------------------
        # Console logger
        # ----------------------------
        console_logger = logging.getLogger(f"{name}.console")
        console_logger.setLevel(logging.DEBUG)
        console_logger.propagate = False
        if not console_logger.handlers:
            ch = logging.StreamHandler()
            ch.setFormatter(logging.Formatter("%(message)s"))
            console_logger.addHandler(ch)

        console_processors = [
            drop_below_level,
            structlog.processors.TimeStamper(fmt="ISO"),
            structlog.stdlib.add_log_level,
            add_caller,
            structlog.processors.format_exc_info,
        ]
        if json_format:
            console_processors.append(structlog.processors.JSONRenderer())
        else:
            console_processors.append(console_processor)

        self.console_logger = structlog.wrap_logger(
            console_logger,
            processors=console_processors,
            wrapper_class=structlog.stdlib.BoundLogger,
            cache_logger_on_first_use=True,
        ).bind(logger=name, **self.context)

        # ----------------------------
        # File logger (JSON)
        # ----------------------------
        self.file_logger = None
        if log_file:
            file_logger = logging.getLogger(f"{name}.file.{os.path.abspath(log_file)}")
            file_logger.setLevel(logging.DEBUG)
            file_logger.propagate = False
            if not any(isinstance(h, logging.FileHandler) for h in file_logger.handlers):
                fh = logging.FileHandler(log_file, encoding="utf-8")
                fh.setFormatter(logging.Formatter("%(message)s"))
                file_logger.addHandler(fh)

            self.file_logger = structlog.wrap_logger(
                file_logger,
                processors=[
                    drop_below_level,
                    structlog.processors.TimeStamper(fmt="ISO"),
                    structlog.stdlib.add_log_level,
                    add_caller,
                    structlog.processors.StackInfoRenderer(),
                    structlog.processors.format_exc_info,
                    structlog.processors.UnicodeDecoder(),
                    structlog.processors.JSONRenderer(),
                ],
                wrapper_class=structlog.stdlib.BoundLogger,
                cache_logger_on_first_use=True,
            ).bind(logger=name, **self.context)

        self._logger_cache[cache_key] = self

    def _emit(self, level: str, msg: str, **extra):
        getattr(self.console_logger, level)(msg, **extra)
        if self.file_logger is not None:
            getattr(self.file_logger, level)(msg, **extra)

    # ----------------------------
    # Logging methods
    # ----------------------------
    def debug(self, msg: str, **extra):
        self._emit("debug", msg, **extra)

    def info(self, msg: str, **extra):
        self._emit("info", msg, **extra)

    def warning(self, msg: str, **extra):
        self._emit("warning", msg, **extra)

    def error(self, msg: str, **extra):
        self._emit("error", msg, **extra)

    def exception(self, msg: str, **extra):
        self._emit("exception", msg, **extra)
