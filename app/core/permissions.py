from typing import Any

from app.core.errors import Forbidden

# Stands in for an absent email, so a missing email never equals an explicit null.
MISSING = object()


def ensure_owner(record: dict[str, Any], email: Any = MISSING) -> None:
    if record.get("email", MISSING) != email:
        raise Forbidden("Unauthorized: You are not the creator of this assignment")
