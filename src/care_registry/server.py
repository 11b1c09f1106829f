"""Care Registry MCP Servers - Thin MCP Protocol Adapters.

This module provides the FastMCP servers that expose the registry tools
via MCP protocol. All business logic is delegated to the tool handlers in
care_registry.tools, which in turn call the search pipelines.

Architecture:
    server.py (this file) - MCP protocol adapter
        | delegates to
    tools/*.py - Tool handlers (return ToolResult envelopes)
        | uses
    pipeline/*.py - Search pipelines over in-memory stores

    Tool arguments reach the handlers untouched. The input schemas are
    published from the criteria models with their camelCase aliases, and
    the criteria validator is the only place arguments are checked: both
    spellings of a field are accepted, unknown fields are ignored and no
    value is coerced.

    Failure envelopes are raised as ToolError so the client sees the
    error flag and message.

Servers:
    patient-mcp: get-patient, search-patient
    practitioner-mcp: search-practitioner, get-practitioner
"""

from __future__ import annotations

from typing import Any, Callable, Dict, Optional, Type

import structlog
from fastmcp import FastMCP
from fastmcp.exceptions import ToolError
from fastmcp.tools import Tool
from fastmcp.tools import ToolResult as MCPToolResult
from pydantic import BaseModel, Field
from pydantic.json_schema import SkipJsonSchema

from care_registry import configure_logging
from care_registry.config.loader import load_config_from_env
from care_registry.config.models import RegistryConfig
from care_registry.domain.entities import (
    LookupRequest,
    Patient,
    PatientCriteria,
    Practitioner,
    PractitionerCriteria,
)
from care_registry.pipeline.factory import (
    create_patient_pipeline,
    create_practitioner_pipeline,
)
from care_registry.pipeline.search_pipeline import SearchPipeline
from care_registry.tools import (
    GET_PATIENT,
    GET_PRACTITIONER,
    SEARCH_PATIENT,
    SEARCH_PRACTITIONER,
    ToolResult,
    ToolSpec,
    get_patient,
    get_practitioner,
    search_patients,
    search_practitioners,
)

log = structlog.get_logger(__name__)


class RegistryTool(Tool):
    """MCP tool that hands its raw arguments to a registry handler."""

    handler: SkipJsonSchema[Callable[[Dict[str, Any]], ToolResult]] = Field(
        exclude=True
    )

    async def run(self, arguments: Dict[str, Any]) -> MCPToolResult:
        result = self.handler(arguments)
        if result.is_error:
            raise ToolError(result.text)
        return MCPToolResult(
            content=result.text,
            structured_content=result.structured_content,
        )


def input_schema(model: Type[BaseModel]) -> Dict[str, Any]:
    """JSON schema of a request model, keyed by its camelCase aliases."""
    return model.model_json_schema(by_alias=True)


def _register(
    mcp: FastMCP,
    spec: ToolSpec,
    model: Type[BaseModel],
    handler: Callable[[Dict[str, Any]], ToolResult],
) -> None:
    mcp.add_tool(
        RegistryTool(
            name=spec.name,
            title=spec.title,
            description=spec.description,
            parameters=input_schema(model),
            handler=handler,
        )
    )


# ==========================================
# SERVER FACTORIES
# ==========================================


def create_patient_server(
    config: Optional[RegistryConfig] = None,
    pipeline: Optional[SearchPipeline[Patient]] = None,
) -> FastMCP:
    """Build the patient MCP server."""
    config = config or RegistryConfig()
    pipeline = pipeline or create_patient_pipeline(config)
    mcp = FastMCP(config.server.patient_name)

    _register(mcp, GET_PATIENT, LookupRequest, lambda args: get_patient(pipeline, args))
    _register(
        mcp, SEARCH_PATIENT, PatientCriteria, lambda args: search_patients(pipeline, args)
    )
    return mcp


def create_practitioner_server(
    config: Optional[RegistryConfig] = None,
    pipeline: Optional[SearchPipeline[Practitioner]] = None,
) -> FastMCP:
    """Build the practitioner MCP server."""
    config = config or RegistryConfig()
    pipeline = pipeline or create_practitioner_pipeline(config)
    mcp = FastMCP(config.server.practitioner_name)

    _register(
        mcp,
        SEARCH_PRACTITIONER,
        PractitionerCriteria,
        lambda args: search_practitioners(pipeline, args),
    )
    _register(
        mcp, GET_PRACTITIONER, LookupRequest, lambda args: get_practitioner(pipeline, args)
    )
    return mcp


# ==========================================
# ENTRY POINTS
# ==========================================


def _serve(server: FastMCP, config: RegistryConfig) -> None:
    log.info(
        "mcp_server_starting",
        server=server.name,
        version=config.server.version,
        transport="stdio",
    )
    server.run()


def run_patient_server() -> None:
    """Main entry point for the patient MCP server."""
    config = load_config_from_env()
    configure_logging(config.logging.level_number, config.logging.json_output)
    _serve(create_patient_server(config), config)


def run_practitioner_server() -> None:
    """Main entry point for the practitioner MCP server."""
    config = load_config_from_env()
    configure_logging(config.logging.level_number, config.logging.json_output)
    _serve(create_practitioner_server(config), config)


if __name__ == "__main__":
    run_patient_server()
