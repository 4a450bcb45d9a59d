from pydantic import BaseModel, ConfigDict, Field
from typing import Literal, Optional
from enum import Enum

class MessageTypes(Enum):
    TEXT = "text"
    IMAGE = "image"
    DOCUMENT = "document"
    VIDEO = "video"
    AUDIO = "audio"
    INTERACTIVE = "interactive"
    TEMPLATE = "template"

class BaseMessage(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    from_: str = Field(..., alias="from", description="Sender phone number with country code")
    to: str = Field(..., description="Recipient phone number with country code")

class Text(BaseModel):
    body: str = Field(..., description="The message body text")
    preview_url: Optional[bool] = Field(False, description="Whether to render a preview for links in the body")

class TextMessage(BaseMessage):
    type: Literal["text"] = Field("text", description="The type of message")
    text: Text = Field(..., description="The message content")
