"""Domain model for comments."""

from dataclasses import dataclass


@dataclass
class Comment:
    comment_id: int
    todo_id: int
    author_id: int
    contents: str
