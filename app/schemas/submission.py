from typing import Any

from pydantic import BaseModel, ConfigDict

GRADE_FIELDS = ("status", "givenMark", "feedback")


class SubmissionPayload(BaseModel):
    model_config = ConfigDict(extra="allow")

    email: Any = None
    status: Any = None


class SubmissionGradeUpdate(BaseModel):
    status: Any = None
    givenMark: Any = None
    feedback: Any = None
