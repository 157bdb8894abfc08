"""Response schemas shared by every inbound adapter."""

from pydantic import BaseModel, ConfigDict, Field


class SubmitFormResponse(BaseModel):
    """Successful booking-form submission."""

    success: bool = True
    message: str = "Form submitted successfully"
    lead_id: str = Field(serialization_alias="leadId")

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "success": True,
                "message": "Form submitted successfully",
                "leadId": "5f0c8b9e-3f7a-4c55-9d0e-8b1e2a6f4c21",
            }
        }
    )


class ErrorResponse(BaseModel):
    """Failure body returned by both endpoints."""

    error: str
    details: str

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "error": "Failed to process form submission",
                "details": "Missing required fields",
            }
        }
    )
