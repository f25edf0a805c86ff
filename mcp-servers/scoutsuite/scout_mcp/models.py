"""Data models for the Scout Suite MCP server."""

from typing import Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field


class AuditRequest(BaseModel):
    """Parameters of one ``do-scoutsuite-aws`` call.

    ``None`` means the field was not supplied. The wire names ``acces_keys``
    and ``secret_acces_key`` are part of the published tool contract and are
    kept as aliases.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    full_report: Optional[bool] = None
    max_workers: Optional[int] = None
    services: Optional[list[str]] = None
    skip_services: Optional[list[str]] = None
    profile: Optional[str] = None
    use_access_keys: Optional[str] = Field(default=None, alias="acces_keys")
    access_key_id: Optional[str] = None
    secret_access_key: Optional[str] = Field(default=None, alias="secret_acces_key")
    session_token: Optional[str] = None
    regions: Optional[str] = None
    exclude_regions: Optional[str] = None
    ip_ranges: Optional[str] = None
    ip_ranges_name_key: Optional[str] = None


class ToolSuccess(BaseModel):
    status: Literal["ok"] = "ok"
    text: str


class ToolFailure(BaseModel):
    status: Literal["error"] = "error"
    message: str = "Internal Server Error"


ToolOutcome = Union[ToolSuccess, ToolFailure]
