"""Scout Suite MCP server.

Exposes a single tool, ``do-scoutsuite-aws``, that returns the Scout Suite
command line matching the given audit settings. The host has no AWS access
and may not spawn processes, so the command is returned instead of run.
"""

import logging
from typing import Annotated, Optional

from fastmcp import FastMCP
from fastmcp.exceptions import ToolError
from mcp.types import TextContent
from pydantic import Field

from .command_builder import build_advisory, build_argv, redact_argv, render_command
from .config import config
from .models import AuditRequest, ToolFailure, ToolOutcome, ToolSuccess

logger = logging.getLogger(__name__)

TOOL_NAME = "do-scoutsuite-aws"
TOOL_DESCRIPTION = (
    "Performs an AWS cloud security audit using Scout Suite for the given target "
    "settings, allowing service/region filtering and multiple authentication methods."
)

mcp = FastMCP(config.name)


def dispatch(request: AuditRequest) -> ToolOutcome:
    """Build the advisory text, converting any unexpected error to a failure."""
    try:
        logger.debug(
            "Built command: %s", render_command(redact_argv(build_argv(request)))
        )
        return ToolSuccess(text=build_advisory(request))
    except Exception:
        logger.exception("scout command build failed")
        return ToolFailure()


@mcp.tool(name=TOOL_NAME, description=TOOL_DESCRIPTION, output_schema=None)
def do_scoutsuite_aws(
    full_report: Annotated[
        Optional[bool],
        Field(description="Return full findings instead of summary keys."),
    ] = None,
    max_workers: Annotated[
        Optional[int],
        Field(description="Maximum number of parallel worker threads used by Scout Suite (default: 10)."),
    ] = None,
    services: Annotated[
        Optional[list[str]],
        Field(description="AWS service names to include in scope (default: all services)."),
    ] = None,
    skip_services: Annotated[
        Optional[list[str]],
        Field(description="AWS service names to exclude from scope."),
    ] = None,
    profile: Annotated[
        Optional[str],
        Field(description="Use a named AWS CLI profile for authentication."),
    ] = None,
    acces_keys: Annotated[
        Optional[str],
        Field(description="Flag to run using access keys instead of profile."),
    ] = None,
    access_key_id: Annotated[
        Optional[str],
        Field(description="AWS Access Key ID used for authentication."),
    ] = None,
    secret_acces_key: Annotated[
        Optional[str],
        Field(description="AWS Secret Access Key used for authentication."),
    ] = None,
    session_token: Annotated[
        Optional[str],
        Field(description="Temporary AWS session token (if using temporary credentials)."),
    ] = None,
    regions: Annotated[
        Optional[str],
        Field(description="Comma-separated list of AWS regions to include in the scan (default: all regions)."),
    ] = None,
    exclude_regions: Annotated[
        Optional[str],
        Field(description="Comma-separated list of AWS regions to exclude from the scan."),
    ] = None,
    ip_ranges: Annotated[
        Optional[str],
        Field(description="Path to JSON file(s) containing known IP ranges to match findings against."),
    ] = None,
    ip_ranges_name_key: Annotated[
        Optional[str],
        Field(description="Key in the IP ranges file that maps to the display name of a known CIDR."),
    ] = None,
) -> list[TextContent]:
    """Return the Scout Suite command for these settings, to be run locally."""
    request = AuditRequest(
        full_report=full_report,
        max_workers=max_workers,
        services=services,
        skip_services=skip_services,
        profile=profile,
        acces_keys=acces_keys,
        access_key_id=access_key_id,
        secret_acces_key=secret_acces_key,
        session_token=session_token,
        regions=regions,
        exclude_regions=exclude_regions,
        ip_ranges=ip_ranges,
        ip_ranges_name_key=ip_ranges_name_key,
    )
    outcome = dispatch(request)
    if isinstance(outcome, ToolFailure):
        raise ToolError(outcome.message)
    return [TextContent(type="text", text=outcome.text)]


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO, format="%(asctime)s [%(name)s] %(levelname)s: %(message)s")
    mcp.run(**config.run_kwargs())
