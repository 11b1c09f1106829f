"""
Care Registry - Patient and Practitioner Search Engine.

An in-memory registry of patients and practitioners exposed as query
tools. The core is a filter-query engine that narrows an immutable
record store through a sequence of independent filter stages.

Architecture:
    - Hexagonal Architecture (Ports & Adapters)
    - Dependency Injection for testability
    - One stage object per search criterion
    - Configuration-driven behavior via YAML

Main Components:
    - domain: Records, criteria and result types
    - validation: Criteria validation into strict shapes
    - filters: Concrete filter stages (substring, exact, phone, ranges)
    - pipeline: Orchestration of stages over a record store
    - adapters: Record store, seed data, audit logger, metrics
    - config: Configuration models and loaders
    - tools: Tool handlers producing result envelopes
    - server: MCP servers exposing the tools

Example:
    >>> from care_registry.pipeline.factory import create_patient_pipeline
    >>> pipeline = create_patient_pipeline()
    >>> patients = pipeline.search({"name": "sarah"})
    >>> print([p.id for p in patients])
    ['P002']

"""

import logging
import sys

import structlog

__version__ = "1.0.0"


def configure_logging(
    level: int = logging.INFO,
    json_output: bool = True,
    format: str = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
) -> None:
    """
    Configure logging for Care Registry.

    Both stdlib logging and structlog write to stderr; stdout is
    reserved for the MCP stdio transport.

    Args:
        level: Logging level (default: INFO)
        json_output: Render structlog events as JSON lines
        format: Log message format for stdlib loggers

    Example:
        >>> import care_registry
        >>> care_registry.configure_logging(logging.DEBUG, json_output=False)
    """
    logging.basicConfig(
        level=level,
        format=format,
        datefmt="%Y-%m-%d %H:%M:%S",
        stream=sys.stderr,
    )
    logging.getLogger("care_registry").setLevel(level)

    processors = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
    ]
    if json_output:
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer())

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(level),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
        cache_logger_on_first_use=False,
    )
