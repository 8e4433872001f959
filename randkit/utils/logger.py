"""
Logging for randkit modules.

Every randkit module gets its own stderr logger. Its level comes from, in order:
an explicit argument, the `verbose` level that the `randkit` CLI puts on the
click context, or the process-wide level. Providers log stream construction
and seeding at debug, including the entropy an auto-seeded stream used, so a
run can be replayed with `-v`.
"""
import click
import logging
from typing import Optional

# Level applied to loggers created outside of a click context
_GLOBAL_LOG_LEVEL = logging.INFO

def verbosity_to_level(verbosity: int) -> int:
    if verbosity == 0:
        return logging.INFO
    else:
        return logging.DEBUG

def get_global_log_level() -> int:
    return _GLOBAL_LOG_LEVEL

def set_global_log_level(level: int):
    """Set the global log level that will be used by all randkit loggers"""
    global _GLOBAL_LOG_LEVEL
    _GLOBAL_LOG_LEVEL = level

    # Update loggers we have already configured
    for name in list(logging.Logger.manager.loggerDict):
        if not name.startswith("randkit"):
            continue
        logger = logging.getLogger(name)
        if logger.handlers:
            logger.setLevel(level)

def get_module_logger(mod_name: str, log_level: Optional[int] = None):
    '''Return a stream logger for a randkit module'''
    if log_level is not None:
        level = log_level
    else:
        try:
            ctx = click.get_current_context()
            level = ctx.obj.verbose if ctx and hasattr(ctx.obj, 'verbose') else _GLOBAL_LOG_LEVEL
        except RuntimeError:
            level = _GLOBAL_LOG_LEVEL

    logger = logging.getLogger(mod_name)

    if not logger.handlers:
        handler = logging.StreamHandler()
        formatter = logging.Formatter(
            '%(asctime)s %(name)-12s %(levelname)-8s %(message)s')
        handler.setFormatter(formatter)
        logger.addHandler(handler)
        logger.propagate = False  # Prevent duplicate messages

    logger.setLevel(level)
    return logger
