from pydantic import BaseModel, Field


class NotifyOwnerRequest(BaseModel):
    # Emptiness and length are checked by the notifier so callers get its messages
    title: str = Field(..., description="Notification title")
    content: str = Field(..., description="Notification body")


class NotifyOwnerResult(BaseModel):
    success: bool
