"""Pydantic schemas for the comment admin API."""

from pydantic import BaseModel, Field


class CommentEditRequest(BaseModel):
    contents: str = Field(..., min_length=1, max_length=2000)


class CommentResponse(BaseModel):
    comment_id: int
    todo_id: int
    author_id: int
    contents: str

    model_config = {"from_attributes": True}
