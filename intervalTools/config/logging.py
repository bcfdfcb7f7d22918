"""
structlog configuration for intervalTools

The library itself only logs through logging.getLogger(__name__) and never
configures anything on import.  Applications that want to see that output
call configureLogging().

Two output modes:
- Human (default): colored console output to stderr
- JSON (logJson): structured JSON lines to stderr
"""
import typing
import logging
import sys

import structlog

from intervalTools.config.settings import getSettings


def configureLogging(
    verbose:typing.Optional[bool]=None,
    logJson:typing.Optional[bool]=None,
    )->None:
    """
    Configure structlog processors and route the "intervalTools" logger to stderr

    :verbose: DEBUG-level output when True, WARNING and up otherwise
        (if None, uses the configured setting)
    :logJson: JSON renderer instead of the console renderer
        (if None, uses the configured setting)
    """
    settings=getSettings()
    if verbose is None:
        verbose=settings.verbose
    if logJson is None:
        logJson=settings.logJson
    sharedProcessors:typing.List[structlog.types.Processor]=[
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
        ]
    renderer:structlog.types.Processor
    if logJson:
        renderer=structlog.processors.JSONRenderer()
    else:
        renderer=structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())
    structlog.configure(
        processors=[
            *sharedProcessors,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
            ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=False,
        )
    formatter=structlog.stdlib.ProcessorFormatter(
        foreign_pre_chain=sharedProcessors,
        processors=[
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            renderer,
            ],
        )
    handler=logging.StreamHandler(sys.stderr)
    handler.setFormatter(formatter)
    libraryLogger=logging.getLogger("intervalTools")
    libraryLogger.handlers.clear()
    libraryLogger.addHandler(handler)
    libraryLogger.setLevel(logging.DEBUG if verbose else logging.WARNING)
    libraryLogger.propagate=False
