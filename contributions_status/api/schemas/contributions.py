from pydantic import BaseModel


class MessageResponse(BaseModel):
    """Status-page probe payload."""

    message: str


class HealthResponse(BaseModel):
    status: str
