from pydantic import BaseModel, Field
from typing import Literal, Optional
from sendzen_core.models.whatsapp.requests.message_request import BaseMessage

class MediaLocator(BaseModel):
    """
    Points at media either by a public URL (link) or by an uploaded media id.
    Exactly one of the two must be set when the message is formatted.
    """
    link: Optional[str] = Field(None, description="Public URL of the media")
    id: Optional[str] = Field(None, description="Media id returned by an upload")

class Image(MediaLocator):
    caption: Optional[str] = Field(None, description="Caption shown under the image")

class Document(MediaLocator):
    filename: str = Field(..., description="File name shown to the recipient")
    caption: Optional[str] = Field(None, description="Caption shown under the document")

class Video(MediaLocator):
    caption: str = Field(..., description="Caption shown under the video")

class Audio(MediaLocator):
    pass

class ImageMessage(BaseMessage):
    type: Literal["image"] = Field("image", description="The type of message")
    image: Image = Field(..., description="The image to send")

class DocumentMessage(BaseMessage):
    type: Literal["document"] = Field("document", description="The type of message")
    document: Document = Field(..., description="The document to send")

class VideoMessage(BaseMessage):
    type: Literal["video"] = Field("video", description="The type of message")
    video: Video = Field(..., description="The video to send")

class AudioMessage(BaseMessage):
    type: Literal["audio"] = Field("audio", description="The type of message")
    audio: Audio = Field(..., description="The audio to send")
