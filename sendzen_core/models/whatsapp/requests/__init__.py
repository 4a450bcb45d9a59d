from typing import Annotated, Union
from pydantic import Field, TypeAdapter
from sendzen_core.models.whatsapp.requests.message_request import BaseMessage, MessageTypes, Text, TextMessage
from sendzen_core.models.whatsapp.requests.media_request import MediaLocator, Image, Document, Video, Audio, ImageMessage, DocumentMessage, VideoMessage, AudioMessage
from sendzen_core.models.whatsapp.requests.interactive_message_request import InteractiveMessage, Interactive, InteractiveBody, InteractiveFooter, InteractiveAction, InteractiveReply, InteractiveActionButton, InteractiveHeader, TextHeader, ImageHeader, VideoHeader, DocumentHeader, InteractiveMessageTypes, InteractiveHeaderTypes
from sendzen_core.models.whatsapp.requests.template_message_request import TemplateMessage, Template, TemplateComponent, TemplateParameter, TemplateComponentTypes, TemplateParameterTypes, ButtonSubTypes

WhatsAppMessage = Annotated[
    Union[
        TextMessage,
        ImageMessage,
        DocumentMessage,
        VideoMessage,
        AudioMessage,
        InteractiveMessage,
        TemplateMessage,
    ],
    Field(discriminator="type")
]

whatsapp_message_adapter = TypeAdapter(WhatsAppMessage)

__all__ = [
    'BaseMessage',
    'MessageTypes',
    'Text',
    'TextMessage',
    'MediaLocator',
    'Image',
    'Document',
    'Video',
    'Audio',
    'ImageMessage',
    'DocumentMessage',
    'VideoMessage',
    'AudioMessage',
    'InteractiveMessage',
    'Interactive',
    'InteractiveBody',
    'InteractiveFooter',
    'InteractiveAction',
    'InteractiveReply',
    'InteractiveActionButton',
    'InteractiveHeader',
    'TextHeader',
    'ImageHeader',
    'VideoHeader',
    'DocumentHeader',
    'InteractiveMessageTypes',
    'InteractiveHeaderTypes',
    'TemplateMessage',
    'Template',
    'TemplateComponent',
    'TemplateParameter',
    'TemplateComponentTypes',
    'TemplateParameterTypes',
    'ButtonSubTypes',
    'WhatsAppMessage',
    'whatsapp_message_adapter'
]
