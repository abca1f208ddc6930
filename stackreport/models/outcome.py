"""Result of reconciling a report comment."""

from typing import Literal

from pydantic import BaseModel

from stackreport.models.comment import Comment


class ReconcileOutcome(BaseModel):
    """Which mutating call was issued and the comment it returned."""

    action: Literal["created", "updated"]
    comment: Comment
