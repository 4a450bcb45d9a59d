from pydantic import BaseModel, Field
from typing import Annotated, List, Literal, Optional, Union
from enum import Enum
from sendzen_core.models.whatsapp.requests.message_request import BaseMessage
from sendzen_core.models.whatsapp.requests.media_request import MediaLocator

class InteractiveMessageTypes(Enum):
    BUTTON = "button"

class InteractiveHeaderTypes(Enum):
    TEXT = "text"
    IMAGE = "image"
    VIDEO = "video"
    DOCUMENT = "document"

class InteractiveReply(BaseModel):
    id: str = Field(..., description="Unique identifier for the reply option.")
    title: str = Field(..., description="Display text for the reply button.")

class InteractiveActionButton(BaseModel):
    type: Literal["reply"] = Field(default="reply", description="Type of the button, always 'reply'.")
    reply: InteractiveReply = Field(..., description="Reply details for the button.")

class InteractiveAction(BaseModel):
    buttons: List[InteractiveActionButton] = Field(..., description="List of buttons available in the action.")

class InteractiveBody(BaseModel):
    text: str = Field(..., description="Text displayed in the body of the interactive message.")

class InteractiveFooter(BaseModel):
    text: str = Field(..., description="Text displayed in the footer of the interactive message.")

class TextHeader(BaseModel):
    type: Literal["text"] = "text"
    text: str = Field(..., description="Header text.")

class ImageHeader(BaseModel):
    type: Literal["image"] = "image"
    image: MediaLocator = Field(..., description="Header image.")

class VideoHeader(BaseModel):
    type: Literal["video"] = "video"
    video: MediaLocator = Field(..., description="Header video.")

class DocumentHeader(BaseModel):
    type: Literal["document"] = "document"
    document: MediaLocator = Field(..., description="Header document.")

InteractiveHeader = Annotated[
    Union[TextHeader, ImageHeader, VideoHeader, DocumentHeader],
    Field(discriminator="type")
]

class Interactive(BaseModel):
    type: Literal["button"] = Field(default="button", description="Type of interactive message, always 'button'.")
    header: Optional[InteractiveHeader] = Field(None, description="Optional header of the interactive message.")
    body: InteractiveBody = Field(..., description="Body content of the interactive message.")
    footer: Optional[InteractiveFooter] = Field(None, description="Optional footer of the interactive message.")
    action: InteractiveAction = Field(..., description="Action details including available buttons.")

class InteractiveMessage(BaseMessage):
    type: Literal["interactive"] = Field(default="interactive", description="Type of message, always 'interactive'.")
    interactive: Interactive = Field(..., description="Interactive message content, including body and actions.")
