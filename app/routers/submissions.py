import logging
from typing import Any

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from app.core.deps import get_db
from app.db.collection import DocumentCollection
from app.models.submission import SubmittedAssignment
from app.schemas.results import InsertResult, UpdateResult
from app.schemas.submission import GRADE_FIELDS, SubmissionGradeUpdate, SubmissionPayload

logger = logging.getLogger(__name__)

router = APIRouter()


def get_submissions(db: Session = Depends(get_db)) -> DocumentCollection:
    return DocumentCollection(db, SubmittedAssignment)


@router.post("/submittedassignments", response_model=InsertResult)
def submit_assignment(
    payload: SubmissionPayload,
    submissions: DocumentCollection = Depends(get_submissions),
):
    document = payload.model_dump(exclude_unset=True)
    logger.info("new submission %s", document)
    return submissions.insert_one(document)


@router.get("/submittedassignments", response_model=list[dict[str, Any]])
def list_submissions(
    email: str | None = Query(default=None, description="Only submissions by this exact email"),
    submissions: DocumentCollection = Depends(get_submissions),
):
    return submissions.find({"email": email} if email else None)


@router.patch("/submittedassignments/{submission_id}", response_model=UpdateResult)
def grade_submission(
    submission_id: str,
    payload: SubmissionGradeUpdate,
    submissions: DocumentCollection = Depends(get_submissions),
):
    """
    Record status, givenMark and feedback on a submission.

    There is no existence check: an unknown id answers with matchedCount 0.
    """
    values = payload.model_dump()
    return submissions.update_one(
        submission_id,
        {field: values.get(field) for field in GRADE_FIELDS},
    )
