"""
Builders for single template components.

None of these validate: a component can be fine on its own and still be
rejected next to its siblings by ``validate_template_components``.
"""
from typing import List, Optional
from sendzen_core.models.whatsapp.requests import (
    MediaLocator,
    TemplateComponent,
    TemplateParameter,
    TemplateComponentTypes,
    TemplateParameterTypes,
    ButtonSubTypes
)

def _text_parameters(texts: List[str]) -> List[TemplateParameter]:
    return [
        TemplateParameter(
            type=TemplateParameterTypes.TEXT.value,
            text=text
        ) for text in texts
    ]

def _media_header(
    media_type: TemplateParameterTypes,
    link: Optional[str] = None,
    media_id: Optional[str] = None
) -> TemplateComponent:
    parameter = TemplateParameter(
        type=media_type.value,
        **{media_type.value: MediaLocator(link=link, id=media_id)}
    )
    return TemplateComponent(
        type=TemplateComponentTypes.HEADER.value,
        parameters=[parameter]
    )

def _button(
    sub_type: ButtonSubTypes,
    index: int,
    text: str
) -> TemplateComponent:
    return TemplateComponent(
        type=TemplateComponentTypes.BUTTON.value,
        sub_type=sub_type.value,
        index=index,
        parameters=_text_parameters([text])
    )

def create_header_text_component(text: str) -> TemplateComponent:
    return TemplateComponent(
        type=TemplateComponentTypes.HEADER.value,
        parameters=_text_parameters([text])
    )

def create_header_image_component(image_url: str) -> TemplateComponent:
    return _media_header(TemplateParameterTypes.IMAGE, link=image_url)

def create_header_image_id_component(media_id: str) -> TemplateComponent:
    return _media_header(TemplateParameterTypes.IMAGE, media_id=media_id)

def create_header_video_component(video_url: str) -> TemplateComponent:
    return _media_header(TemplateParameterTypes.VIDEO, link=video_url)

def create_header_video_id_component(media_id: str) -> TemplateComponent:
    return _media_header(TemplateParameterTypes.VIDEO, media_id=media_id)

def create_header_document_component(document_url: str) -> TemplateComponent:
    return _media_header(TemplateParameterTypes.DOCUMENT, link=document_url)

def create_header_document_id_component(media_id: str) -> TemplateComponent:
    return _media_header(TemplateParameterTypes.DOCUMENT, media_id=media_id)

def create_body_component(text_parameters: List[str]) -> TemplateComponent:
    """One text parameter per entry, in order."""
    return TemplateComponent(
        type=TemplateComponentTypes.BODY.value,
        parameters=_text_parameters(text_parameters)
    )

def create_footer_component(text_parameters: List[str]) -> TemplateComponent:
    return TemplateComponent(
        type=TemplateComponentTypes.FOOTER.value,
        parameters=_text_parameters(text_parameters)
    )

def create_quick_reply_button_component(index: int, text: str) -> TemplateComponent:
    return _button(ButtonSubTypes.QUICK_REPLY, index, text)

def create_phone_number_button_component(index: int, phone_number: str) -> TemplateComponent:
    return _button(ButtonSubTypes.PHONE_NUMBER, index, phone_number)

def create_url_button_component(index: int, url: str) -> TemplateComponent:
    return _button(ButtonSubTypes.URL, index, url)

def create_copy_code_button_component(index: int, code: str) -> TemplateComponent:
    return _button(ButtonSubTypes.COPY_CODE, index, code)
