"""Command builder: turns an AuditRequest into a Scout Suite invocation.

Nothing here executes Scout Suite. The output is advisory text the caller
copies and runs on a machine that has AWS access.
"""

from typing import Optional

from .models import AuditRequest

EXECUTABLE = "scoutsuite"

# Subcommand plus the two always-on flags: non-interactive, no browser.
BASE_ARGS = ("aws", "--force", "--no-browser")

REPORT_HINT = (
    "After running, review the generated report "
    "(scoutsuite-report/scoutsuite-results/scoutsuite_results_<timestamp>.js) for findings."
)

PREAMBLE = (
    "Scout Suite must run in an environment with AWS access. This MCP server "
    "cannot reach AWS or spawn processes, so it returns the exact command to "
    "execute locally:"
)

FULL_REPORT_NOTE = (
    "Use --full_report=true here only toggles your intent; include or omit "
    "flags as needed in the command."
)

# (attribute, flag) pairs in emission order, after --max-workers and the
# service lists.
_STRING_FLAGS = (
    ("profile", "--profile"),
    ("use_access_keys", "--access-keys"),
    ("access_key_id", "--access-key-id"),
    ("secret_access_key", "--secret-access-key"),
    ("session_token", "--session-token"),
    ("regions", "--regions"),
    ("exclude_regions", "--exclude-regions"),
    ("ip_ranges", "--ip-ranges"),
    ("ip_ranges_name_key", "--ip-ranges-name-key"),
)

# Flags that take no value token. An empty value still counts as absent.
_SWITCHES = {"--access-keys"}

SECRET_FLAGS = {"--access-key-id", "--secret-access-key", "--session-token"}


def build_argv(request: AuditRequest) -> list[str]:
    """Build the ordered argument vector (without the executable name)."""
    argv = list(BASE_ARGS)

    if request.max_workers:
        argv += ["--max-workers", str(request.max_workers)]
    if request.services:
        argv += ["--services", *request.services]
    if request.skip_services:
        argv += ["--skip", *request.skip_services]

    for attr, flag in _STRING_FLAGS:
        value: Optional[str] = getattr(request, attr)
        if not value:
            continue
        if flag in _SWITCHES:
            argv.append(flag)
        else:
            argv += [flag, value]

    return argv


def render_command(argv: list[str], executable: str = EXECUTABLE) -> str:
    """Join the vector into a single display line. No quoting is applied."""
    return " ".join([executable, *argv])


def build_advisory(request: AuditRequest, executable: str = EXECUTABLE) -> str:
    """Return the full text payload for a request."""
    lines = [
        PREAMBLE,
        render_command(build_argv(request), executable),
        REPORT_HINT,
        FULL_REPORT_NOTE if request.full_report else "",
    ]
    return "\n".join(line for line in lines if line)


def redact_argv(argv: list[str]) -> list[str]:
    """Copy of argv with credential values masked, for log output."""
    redacted = []
    mask_next = False
    for token in argv:
        redacted.append("****" if mask_next else token)
        mask_next = not mask_next and token in SECRET_FLAGS
    return redacted
