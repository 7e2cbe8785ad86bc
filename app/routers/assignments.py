import logging
from typing import Any

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from app.core.deps import get_db
from app.core.errors import NotFound
from app.core.permissions import MISSING, ensure_owner
from app.db.collection import DocumentCollection
from app.models.assignment import Assignment
from app.schemas.assignment import ASSIGNMENT_UPDATE_FIELDS, AssignmentDelete, AssignmentPayload
from app.schemas.results import DeleteResult, InsertResult, UpdateResult

logger = logging.getLogger(__name__)

router = APIRouter()


def get_assignments(db: Session = Depends(get_db)) -> DocumentCollection:
    return DocumentCollection(db, Assignment)


def _ensure_assignment_exists(assignments: DocumentCollection, assignment_id: str) -> dict[str, Any]:
    record = assignments.find_one(assignment_id)
    if record is None:
        raise NotFound("Assignment not found")
    return record


def _acting_email(payload: AssignmentPayload | AssignmentDelete | None) -> Any:
    if payload is None or "email" not in payload.model_fields_set:
        return MISSING
    return payload.email


@router.get("/assignments", response_model=list[dict[str, Any]])
def list_assignments(assignments: DocumentCollection = Depends(get_assignments)):
    return assignments.find()


@router.get("/assignments/{assignment_id}", response_model=dict[str, Any] | None)
def get_assignment(
    assignment_id: str,
    assignments: DocumentCollection = Depends(get_assignments),
):
    # a miss answers null rather than 404
    return assignments.find_one(assignment_id)


@router.post("/assignments", response_model=InsertResult)
def create_assignment(
    payload: AssignmentPayload,
    assignments: DocumentCollection = Depends(get_assignments),
):
    document = payload.model_dump(exclude_unset=True)
    logger.info("creating assignment %s", document)
    return assignments.insert_one(document)


@router.put(
    "/assignments/{assignment_id}",
    response_model=UpdateResult,
    responses={
        403: {"description": "Requester is not the creator"},
        404: {"description": "Assignment not found"},
    },
)
def update_assignment(
    assignment_id: str,
    payload: AssignmentPayload,
    assignments: DocumentCollection = Depends(get_assignments),
):
    record = _ensure_assignment_exists(assignments, assignment_id)
    ensure_owner(record, _acting_email(payload))

    values = payload.model_dump()
    return assignments.update_one(
        assignment_id,
        {field: values.get(field) for field in ASSIGNMENT_UPDATE_FIELDS},
    )


@router.delete(
    "/assignments/{assignment_id}",
    response_model=DeleteResult,
    responses={
        403: {"description": "Requester is not the creator"},
        404: {"description": "Assignment not found"},
    },
)
def delete_assignment(
    assignment_id: str,
    payload: AssignmentDelete | None = None,
    assignments: DocumentCollection = Depends(get_assignments),
):
    record = _ensure_assignment_exists(assignments, assignment_id)
    # NOTE: ownership is checked against the body email, not the token cookie
    ensure_owner(record, _acting_email(payload))

    return assignments.delete_one(assignment_id)
