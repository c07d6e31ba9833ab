"""
User-authored strategy record.

User strategies are stored as raw free text (not parsed blocks) and are
replaced wholesale on every change. Submission flags track whether the
record has been sent for inclusion in the bundled library:

- is_submitted: the current version has been submitted
- has_been_submitted: some earlier version was submitted

Editing a submitted strategy clears is_submitted but keeps
has_been_submitted, which marks the record as needing resubmission.
"""

from datetime import UTC, datetime
from typing import Any
from uuid import UUID, uuid4

from pydantic import BaseModel, ConfigDict, Field

STATUS_SUBMITTED = "Strategy Submitted to Oh Craps!"
STATUS_READY_TO_RESUBMIT = "Ready to resubmit."
STATUS_READY_TO_SUBMIT = "Ready to submit."

# Fields a user may change through an edit
EDITABLE_FIELDS = frozenset({"name", "buy_in", "table_minimum", "steps", "notes", "credit"})


def _now() -> datetime:
    return datetime.now(UTC)


class UserStrategy(BaseModel):
    """A strategy authored on-device by the user."""

    model_config = ConfigDict(frozen=True)

    id: UUID = Field(default_factory=uuid4)
    name: str
    buy_in: str = ""
    table_minimum: str = ""
    steps: str = ""
    notes: str = ""
    credit: str = ""
    date_created: datetime = Field(default_factory=_now)
    date_last_edited: datetime | None = None
    is_submitted: bool = False
    has_been_submitted: bool = False

    def edited(self, **changes: Any) -> "UserStrategy":
        """
        Return a copy with the given field changes applied.

        Raises:
            ValueError: If a change names a field that is not user-editable
        """
        unknown = set(changes) - EDITABLE_FIELDS
        if unknown:
            raise ValueError(f"Not editable: {', '.join(sorted(unknown))}")

        return self.model_copy(
            update={
                **changes,
                "date_last_edited": _now(),
                "is_submitted": False,
                "has_been_submitted": self.has_been_submitted or self.is_submitted,
            }
        )

    def submitted(self) -> "UserStrategy":
        """Return a copy marked as submitted."""
        return self.model_copy(update={"is_submitted": True, "has_been_submitted": True})

    def duplicated(self) -> "UserStrategy":
        """Return an unsubmitted copy with a new identity."""
        return self.model_copy(
            update={
                "id": uuid4(),
                "name": f"{self.name} Copy",
                "date_created": _now(),
                "date_last_edited": None,
                "is_submitted": False,
                "has_been_submitted": False,
            }
        )

    @property
    def submission_status(self) -> str:
        """User-facing submission status line."""
        if self.is_submitted:
            return STATUS_SUBMITTED
        if self.has_been_submitted and self.date_last_edited is not None:
            return STATUS_READY_TO_RESUBMIT
        return STATUS_READY_TO_SUBMIT
