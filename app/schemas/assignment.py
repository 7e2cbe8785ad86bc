from typing import Any

from pydantic import BaseModel, ConfigDict

# Fields an owner may overwrite on update, in the order they are written.
ASSIGNMENT_UPDATE_FIELDS = (
    "title",
    "thumbnailURL",
    "marks",
    "description",
    "difficultyLevel",
    "dueDate",
    "email",
)


class AssignmentPayload(BaseModel):
    """Assignment fields as sent by the client. Stored verbatim, extra keys included."""

    model_config = ConfigDict(extra="allow")

    title: Any = None
    thumbnailURL: Any = None
    marks: Any = None
    description: Any = None
    difficultyLevel: Any = None
    dueDate: Any = None
    email: Any = None


class AssignmentDelete(BaseModel):
    model_config = ConfigDict(extra="allow")

    email: Any = None
