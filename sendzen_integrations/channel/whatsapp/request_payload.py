import logging
from typing import Any, Dict, List, Optional, Union
import sendzen_core.models.whatsapp.requests as wa_requests
import sendzen_integrations.channel.whatsapp.validate_message as wa_validate
from sendzen_core.errors import (
    InvalidSender,
    InvalidRecipient,
    MissingContentLocator
)
from sendzen_core.models.whatsapp.requests import MessageTypes

logger = logging.getLogger(__name__)

def resolve_media_locator(
    media: wa_requests.MediaLocator,
    message_type: str
) -> Dict[str, str]:
    """
    Returns ``{"link": ...}`` or ``{"id": ...}`` for a media locator.

    Raises:
        MissingContentLocator: neither or both of link and id are set.
    """
    if media is None or (not media.link and not media.id):
        raise MissingContentLocator(message_type)
    if media.link and media.id:
        raise MissingContentLocator(message_type, both_given=True)
    if media.link:
        return {"link": media.link}
    return {"id": media.id}

def ensure_participants(sender: str, recipient: str) -> None:
    if not wa_validate.validate_phone_number(sender):
        raise InvalidSender(sender)
    if not wa_validate.validate_phone_number(recipient):
        raise InvalidRecipient(recipient)

def get_text_payload(text: wa_requests.Text) -> Dict[str, Any]:
    return {
        "body": text.body,
        "preview_url": text.preview_url or False
    }

def get_image_payload(image: wa_requests.Image) -> Dict[str, Any]:
    image_data = resolve_media_locator(image, MessageTypes.IMAGE.value)
    if image.caption is not None:
        image_data["caption"] = image.caption
    return image_data

def get_document_payload(document: wa_requests.Document) -> Dict[str, Any]:
    document_data = resolve_media_locator(document, MessageTypes.DOCUMENT.value)
    document_data["filename"] = document.filename
    if document.caption is not None:
        document_data["caption"] = document.caption
    return document_data

def get_video_payload(video: wa_requests.Video) -> Dict[str, Any]:
    video_data = resolve_media_locator(video, MessageTypes.VIDEO.value)
    video_data["caption"] = video.caption
    return video_data

def get_audio_payload(audio: wa_requests.Audio) -> Dict[str, Any]:
    return resolve_media_locator(audio, MessageTypes.AUDIO.value)

def get_interactive_header_payload(header: wa_requests.InteractiveHeader) -> Dict[str, Any]:
    if isinstance(header, wa_requests.TextHeader):
        return {"type": header.type, "text": header.text}
    if isinstance(header, wa_requests.ImageHeader):
        return {"type": header.type, "image": resolve_media_locator(header.image, header.type)}
    if isinstance(header, wa_requests.VideoHeader):
        return {"type": header.type, "video": resolve_media_locator(header.video, header.type)}
    if isinstance(header, wa_requests.DocumentHeader):
        return {"type": header.type, "document": resolve_media_locator(header.document, header.type)}
    raise ValueError(f"Unsupported interactive header: {header!r}")

def get_interactive_payload(interactive: wa_requests.Interactive) -> Dict[str, Any]:
    replies = wa_validate.validate_interactive_buttons(interactive.action.buttons)
    interactive_data: Dict[str, Any] = {"type": interactive.type}
    if interactive.header is not None:
        interactive_data["header"] = get_interactive_header_payload(interactive.header)
    interactive_data["body"] = {"text": interactive.body.text}
    if interactive.footer is not None:
        interactive_data["footer"] = {"text": interactive.footer.text}
    interactive_data["action"] = {
        "buttons": [
            {
                "type": "reply",
                "reply": {"id": reply.id, "title": reply.title}
            } for reply in replies
        ]
    }
    return interactive_data

def get_template_parameter_payload(parameter: wa_requests.TemplateParameter) -> Dict[str, Any]:
    if parameter.type == wa_requests.TemplateParameterTypes.TEXT.value:
        return {"type": parameter.type, "text": parameter.text}
    media = getattr(parameter, parameter.type)
    return {
        "type": parameter.type,
        parameter.type: resolve_media_locator(media, parameter.type)
    }

def get_template_component_payload(component: wa_requests.TemplateComponent) -> Dict[str, Any]:
    component_data: Dict[str, Any] = {"type": component.type}
    if component.sub_type is not None:
        component_data["sub_type"] = component.sub_type
    if component.index is not None:
        component_data["index"] = component.index
    if component.parameters is not None:
        component_data["parameters"] = [
            get_template_parameter_payload(parameter)
            for parameter in component.parameters
        ]
    return component_data

def get_template_payload(template: wa_requests.Template) -> Dict[str, Any]:
    wa_validate.ensure_language_code(template.lang_code)
    template_data: Dict[str, Any] = {
        "name": template.name,
        "lang_code": template.lang_code,
    }
    if template.components is not None:
        components = wa_validate.validate_template_components(template.components)
        template_data["components"] = [
            get_template_component_payload(component)
            for component in components
        ]
    return template_data

def format_message(
    message: Union[wa_requests.WhatsAppMessage, Dict[str, Any]]
) -> Dict[str, Any]:
    """
    Turns a typed message into the gateway's wire JSON.

    The recipient key is ``To`` for every type except templates, which use
    ``to``. All validation happens here, so a message that comes back from
    this function is safe to send as-is.

    Args:
        message: A message model, or a dict that validates into one.

    Returns:
        dict: The request body.
    """
    if isinstance(message, dict):
        message = wa_requests.whatsapp_message_adapter.validate_python(message)
    ensure_participants(message.from_, message.to)

    if isinstance(message, wa_requests.TemplateMessage):
        return {
            "type": message.type,
            "from": message.from_,
            "to": message.to,
            "template": get_template_payload(message.template),
        }

    formatted_message: Dict[str, Any] = {
        "from": message.from_,
        "To": message.to,
        "type": message.type,
    }
    if isinstance(message, wa_requests.TextMessage):
        formatted_message["text"] = get_text_payload(message.text)
    elif isinstance(message, wa_requests.ImageMessage):
        formatted_message["image"] = get_image_payload(message.image)
    elif isinstance(message, wa_requests.DocumentMessage):
        formatted_message["document"] = get_document_payload(message.document)
    elif isinstance(message, wa_requests.VideoMessage):
        formatted_message["video"] = get_video_payload(message.video)
    elif isinstance(message, wa_requests.AudioMessage):
        formatted_message["audio"] = get_audio_payload(message.audio)
    elif isinstance(message, wa_requests.InteractiveMessage):
        formatted_message["interactive"] = get_interactive_payload(message.interactive)
    else:
        logger.error(f"Unsupported message type: {type(message).__name__}")
        raise ValueError(f"Unsupported message type: {type(message).__name__}")
    return formatted_message

def get_text_header(text: str) -> wa_requests.TextHeader:
    return wa_requests.TextHeader(text=text)

def get_image_header(link: Optional[str] = None, media_id: Optional[str] = None) -> wa_requests.ImageHeader:
    return wa_requests.ImageHeader(image=wa_requests.MediaLocator(link=link, id=media_id))

def get_video_header(link: Optional[str] = None, media_id: Optional[str] = None) -> wa_requests.VideoHeader:
    return wa_requests.VideoHeader(video=wa_requests.MediaLocator(link=link, id=media_id))

def get_document_header(link: Optional[str] = None, media_id: Optional[str] = None) -> wa_requests.DocumentHeader:
    return wa_requests.DocumentHeader(document=wa_requests.MediaLocator(link=link, id=media_id))

def get_interactive_buttons(buttons: List[Any]) -> List[wa_requests.InteractiveActionButton]:
    """Accepts ``{"id", "title"}`` dicts or ``InteractiveReply`` values."""
    action_buttons = []
    for button in buttons:
        if isinstance(button, wa_requests.InteractiveActionButton):
            action_buttons.append(button)
            continue
        if isinstance(button, dict):
            button = wa_requests.InteractiveReply.model_validate(button)
        action_buttons.append(wa_requests.InteractiveActionButton(reply=button))
    return action_buttons
