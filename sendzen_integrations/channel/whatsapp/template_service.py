import logging
from typing import Any, List, Optional
import sendzen_integrations.channel.whatsapp.request_payload as wa_req_payload
import sendzen_integrations.channel.whatsapp.template_components as wa_components
from sendzen_core.models.sendzen.config import RequestOptions
from sendzen_core.models.whatsapp.requests import Template, TemplateMessage
from sendzen_core.models.whatsapp.response.message_response import ApiResponse
from sendzen_integrations.channel.whatsapp.sendzen.async_sendzen_client import HttpMethods
from sendzen_integrations.channel.whatsapp.whatsapp_response import with_message_items

class TemplateService:
    """Sends template messages and exposes the component builders."""

    create_header_text_component = staticmethod(wa_components.create_header_text_component)
    create_header_image_component = staticmethod(wa_components.create_header_image_component)
    create_header_image_id_component = staticmethod(wa_components.create_header_image_id_component)
    create_header_video_component = staticmethod(wa_components.create_header_video_component)
    create_header_video_id_component = staticmethod(wa_components.create_header_video_id_component)
    create_header_document_component = staticmethod(wa_components.create_header_document_component)
    create_header_document_id_component = staticmethod(wa_components.create_header_document_id_component)
    create_body_component = staticmethod(wa_components.create_body_component)
    create_footer_component = staticmethod(wa_components.create_footer_component)
    create_quick_reply_button_component = staticmethod(wa_components.create_quick_reply_button_component)
    create_phone_number_button_component = staticmethod(wa_components.create_phone_number_button_component)
    create_url_button_component = staticmethod(wa_components.create_url_button_component)
    create_copy_code_button_component = staticmethod(wa_components.create_copy_code_button_component)

    def __init__(self, sdk):
        self._sdk = sdk
        self._logger = logging.getLogger(self.__class__.__name__)

    async def asend_template_message(
        self,
        to: str,
        template_name: str,
        lang_code: str,
        components: Optional[List[Any]] = None,
        options: Optional[RequestOptions] = None
    ) -> ApiResponse:
        message = TemplateMessage(
            from_=self._sdk.get_from_number(),
            to=to,
            template=Template(
                name=template_name,
                lang_code=lang_code,
                components=components
            )
        )
        payload = wa_req_payload.format_message(message)
        self._logger.debug(f"Sending template {template_name} to {to}")
        response = await self._sdk.arequest(HttpMethods.POST.value, "", payload, options)
        return with_message_items(response)
