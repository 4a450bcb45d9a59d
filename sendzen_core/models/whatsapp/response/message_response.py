from pydantic import BaseModel, Field
from typing import Any, Dict, List, Optional
from enum import Enum

class MessageStatuses(Enum):
    QUEUED = "queued"
    SENT = "sent"
    DELIVERED = "delivered"
    READ = "read"
    FAILED = "failed"

class MessageResponseItem(BaseModel):
    message_id: str = Field(..., description="The message id assigned by the gateway")
    status: str = Field(..., description="The status of the message, e.g. 'queued'")
    timestamp: Optional[str] = Field(None, description="When the gateway accepted the message")
    to: Optional[str] = Field(None, description="The recipient phone number")

MessageResponse = List[MessageResponseItem]

class ApiResponse(BaseModel):
    message: str = Field(..., description="Message returned by the gateway, 'Success' when absent")
    data: Any = Field(None, description="Response payload")
    status: int = Field(..., description="HTTP status code")
    status_text: str = Field("", description="HTTP reason phrase")
    headers: Dict[str, str] = Field(default_factory=dict, description="Response headers")
