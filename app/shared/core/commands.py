# 📄 File: app/shared/core/commands.py
# 🧭 Purpose (Layman Explanation):
# The common shape of every request the app accepts, like "add this plant" or "show my tasks",
# always saying which user is asking
# 🧪 Purpose (Technical Summary):
# Pydantic base classes for CQRS commands and queries: immutable, unknown fields rejected,
# explicit acting user_id on every message
# 🔗 Dependencies:
# pydantic
# 🔄 Connected Modules / Calls From:
# Module application/commands and application/queries, HandlerBase in dependencies.py

from pydantic import BaseModel, ConfigDict, Field


class Command(BaseModel):
    """
    Base class for write commands.

    `user_id` is the acting user; handlers check it against the owner
    of whatever the command touches.
    """

    model_config = ConfigDict(frozen=True, extra="forbid", str_strip_whitespace=True)

    user_id: int = Field(..., gt=0, description="Acting user")


class Query(BaseModel):
    """Base class for read queries."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    user_id: int = Field(..., gt=0, description="Acting user")
