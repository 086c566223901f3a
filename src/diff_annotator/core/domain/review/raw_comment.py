"""Change records exchanged with the model.

Field aliases mirror the JSON keys the model reads and echoes back
(``ln``, ``relativePosition``, ``commentsToAdd``). Python code uses the
snake_case names; prompts and parsing go through the aliases.
"""

from pydantic import BaseModel, ConfigDict, Field


class ChangePayload(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    type: str = Field(description="Change kind: add or del.")
    add: bool = Field(description="True when the line was added.")
    line: int = Field(alias="ln", description="Line number of the change.")
    content: str = Field(description="Raw diff line, including its leading +/- marker.")
    relative_position: int = Field(
        alias="relativePosition", description="Position of the line inside the file's diff."
    )


class RawComment(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    path: str = Field(description="File path the change belongs to.")
    position: int = Field(description="Position of the line inside the file's diff.")
    line: int = Field(description="Line number the comment anchors to.")
    change: ChangePayload
    previously: str | None = Field(
        default=None, description="Deleted line this addition replaces, if any."
    )

    @property
    def anchor(self) -> tuple[str, int]:
        return self.path, self.line


class SuggestedComment(RawComment):
    suggestions: str | None = Field(
        default=None, description="Review suggestion in markdown. Omit when there is nothing to say."
    )

    @property
    def has_suggestion(self) -> bool:
        return bool(self.suggestions and self.suggestions.strip())


class SuggestionsPayload(BaseModel):
    """Response schema shared by every backend."""

    model_config = ConfigDict(populate_by_name=True)

    comments_to_add: list[SuggestedComment] = Field(alias="commentsToAdd")


def dump_raw_comments(comments: list[RawComment]) -> list[dict]:
    return [comment.model_dump(by_alias=True, exclude_none=True) for comment in comments]
