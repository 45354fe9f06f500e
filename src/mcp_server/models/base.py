"""Shared argument models for the MCP tools."""

from pydantic import BaseModel, ConfigDict, Field

from utils.slack.pagination import DEFAULT_PAGE_SIZE, PaginationRequest


class BaseMCPModel(BaseModel):
    """Tool arguments. Unknown keys are rejected so a misspelled argument fails loudly."""

    model_config = ConfigDict(
        extra="forbid",
        str_strip_whitespace=True,
        use_enum_values=True,
        validate_default=True,
    )


class PaginationModel(BaseMCPModel):
    """``cursor``/``limit``/``all`` arguments of every list tool."""

    cursor: str = Field("", description="Cursor returned as next_cursor by the previous page")
    limit: int = Field(
        DEFAULT_PAGE_SIZE,
        description=f"Items per page; values <= 0 mean {DEFAULT_PAGE_SIZE}",
    )
    all: bool = Field(False, description="Follow every cursor and return all items in one result")

    def pagination_request(self) -> PaginationRequest:
        return PaginationRequest(cursor=self.cursor, limit=self.limit, fetch_all=self.all)
