from pydantic import BaseModel, Field
from typing import List, Literal, Optional
from enum import Enum
from sendzen_core.models.whatsapp.requests.message_request import BaseMessage
from sendzen_core.models.whatsapp.requests.media_request import MediaLocator

class TemplateComponentTypes(Enum):
    HEADER = "header"
    BODY = "body"
    FOOTER = "footer"
    BUTTON = "button"

class TemplateParameterTypes(Enum):
    TEXT = "text"
    IMAGE = "image"
    VIDEO = "video"
    DOCUMENT = "document"

class ButtonSubTypes(Enum):
    QUICK_REPLY = "quick_reply"
    PHONE_NUMBER = "phone_number"
    URL = "url"
    COPY_CODE = "copy_code"

class TemplateParameter(BaseModel):
    type: Literal["text", "image", "video", "document"] = Field(..., description="Type of the parameter.")
    text: Optional[str] = Field(None, description="Text content of the parameter.")
    image: Optional[MediaLocator] = Field(None, description="Image content of the parameter.")
    video: Optional[MediaLocator] = Field(None, description="Video content of the parameter.")
    document: Optional[MediaLocator] = Field(None, description="Document content of the parameter.")

class TemplateComponent(BaseModel):
    type: Literal["header", "body", "footer", "button"] = Field(..., description="Type of the component.")
    parameters: Optional[List[TemplateParameter]] = Field(None, description="List of parameters for the component.")
    sub_type: Optional[Literal["quick_reply", "phone_number", "url", "copy_code"]] = Field(None, description="Button sub type, only for button components.")
    index: Optional[int] = Field(None, description="Zero based button position, only for button components.")

class Template(BaseModel):
    name: str = Field(..., description="Name of the template to use.")
    lang_code: str = Field(..., description="Language code for the template, e.g. 'en_US'.")
    components: Optional[List[TemplateComponent]] = Field(None, description="List of components for the template.")

class TemplateMessage(BaseMessage):
    type: Literal["template"] = Field(default="template", description="Type of the message, always 'template'.")
    template: Template = Field(..., description="Template details including name and language.")
