import logging
from typing import Optional

from sqlalchemy.orm import Session

from workforce.core.clock import utcnow
from workforce.core.errors import ConflictError

logger = logging.getLogger(__name__)

DECISIONS = ("approved", "rejected")


def decide(
    row,
    decision: str,
    *,
    approver_profile_id: str,
    db: Session,
    comments: Optional[str] = None,
):
    """
    Apply an approve/reject decision to a pending leave or overtime row.

    status, approved_by and approved_at are always written together.
    """
    if decision not in DECISIONS:
        raise ValueError(f"Unknown decision: {decision}")
    if row.status != "pending":
        raise ConflictError(f"Request already {row.status}")

    row.status = decision
    row.approved_by = approver_profile_id
    row.approved_at = utcnow()
    if comments is not None and hasattr(row, "comments"):
        row.comments = comments

    db.flush()
    logger.info(
        "Request decided",
        extra={"table": row.__tablename__, "row_id": row.id, "decision": decision},
    )
    return row
