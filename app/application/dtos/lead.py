"""Lead DTOs."""

from pydantic import ConfigDict, Field

from app.application.dtos.base import DTO

LEAD_STATUS_NEW = "new"
LEAD_SOURCE_WEBSITE = "website"


class LeadSubmission(DTO):
    """Validated booking-form submission; every field trimmed and non-empty."""

    name: str
    email: str
    phone: str
    business_name: str = Field(alias="businessName")
    message: str

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "name": "Jane Doe",
                "email": "jane@brand.com",
                "phone": "+1 505 555 0134",
                "businessName": "Jane Doe Wellness",
                "message": "We are launching a studio and need a brand identity.",
            }
        }
    )


class LeadRecord(DTO):
    """Persisted form of a submission, as written to the leads table."""

    id: str
    name: str
    email: str
    phone: str
    business_name: str
    message: str
    status: str = LEAD_STATUS_NEW
    source: str = LEAD_SOURCE_WEBSITE

    @classmethod
    def from_submission(cls, lead_id: str, submission: LeadSubmission) -> "LeadRecord":
        """Build the record for a submission with the server-assigned id."""
        return cls(
            id=lead_id,
            name=submission.name,
            email=submission.email,
            phone=submission.phone,
            business_name=submission.business_name,
            message=submission.message,
        )


def lead_row(submission: LeadSubmission) -> dict[str, str]:
    """
    Map a submission to leads-table columns.

    Args:
        submission: Validated submission

    Returns:
        Column/value mapping including the fixed status and source
    """
    return {
        "name": submission.name,
        "email": submission.email,
        "phone": submission.phone,
        "business_name": submission.business_name,
        "message": submission.message,
        "status": LEAD_STATUS_NEW,
        "source": LEAD_SOURCE_WEBSITE,
    }


class SubmitResult(DTO):
    """Result of a successful lead submission."""

    lead_id: str
