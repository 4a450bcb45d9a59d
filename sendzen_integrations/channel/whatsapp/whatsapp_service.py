import logging
from typing import Any, Dict, List, Optional, Union
import sendzen_core.models.whatsapp.requests as wa_requests
import sendzen_integrations.channel.whatsapp.request_payload as wa_req_payload
from sendzen_core.channel.base import BaseChannel
from sendzen_core.models.sendzen.config import RequestOptions
from sendzen_core.models.whatsapp.response.message_response import ApiResponse
from sendzen_integrations.channel.whatsapp.sendzen.async_sendzen_client import HttpMethods
from sendzen_integrations.channel.whatsapp.template_service import TemplateService
from sendzen_integrations.channel.whatsapp.whatsapp_response import with_message_items

Buttons = List[Union[Dict[str, str], wa_requests.InteractiveReply]]

class WhatsAppService(BaseChannel):
    __TEMPLATES_ROUTE = "/templates"

    def __init__(self, sdk):
        self._sdk = sdk
        self.template = TemplateService(sdk)
        self._logger = logging.getLogger(self.__class__.__name__)

    async def asend_message(
        self,
        message: Union[wa_requests.WhatsAppMessage, Dict[str, Any]],
        options: Optional[RequestOptions] = None
    ) -> ApiResponse:
        payload = wa_req_payload.format_message(message)
        response = await self._sdk.arequest(HttpMethods.POST.value, "", payload, options)
        return with_message_items(response)

    async def asend_text_message(
        self,
        to: str,
        text: str,
        preview_url: bool = False,
        options: Optional[RequestOptions] = None
    ) -> ApiResponse:
        message = wa_requests.TextMessage(
            from_=self._sdk.get_from_number(),
            to=to,
            text=wa_requests.Text(body=text, preview_url=preview_url)
        )
        return await self.asend_message(message, options)

    async def asend_image_message(
        self,
        to: str,
        image_url: str,
        caption: Optional[str] = None,
        options: Optional[RequestOptions] = None
    ) -> ApiResponse:
        message = wa_requests.ImageMessage(
            from_=self._sdk.get_from_number(),
            to=to,
            image=wa_requests.Image(link=image_url, caption=caption)
        )
        return await self.asend_message(message, options)

    async def asend_image_message_with_id(
        self,
        to: str,
        media_id: str,
        caption: Optional[str] = None,
        options: Optional[RequestOptions] = None
    ) -> ApiResponse:
        message = wa_requests.ImageMessage(
            from_=self._sdk.get_from_number(),
            to=to,
            image=wa_requests.Image(id=media_id, caption=caption)
        )
        return await self.asend_message(message, options)

    async def asend_document_message(
        self,
        to: str,
        document_url: str,
        filename: str,
        caption: Optional[str] = None,
        options: Optional[RequestOptions] = None
    ) -> ApiResponse:
        message = wa_requests.DocumentMessage(
            from_=self._sdk.get_from_number(),
            to=to,
            document=wa_requests.Document(link=document_url, filename=filename, caption=caption)
        )
        return await self.asend_message(message, options)

    async def asend_document_message_with_id(
        self,
        to: str,
        media_id: str,
        filename: str,
        caption: Optional[str] = None,
        options: Optional[RequestOptions] = None
    ) -> ApiResponse:
        message = wa_requests.DocumentMessage(
            from_=self._sdk.get_from_number(),
            to=to,
            document=wa_requests.Document(id=media_id, filename=filename, caption=caption)
        )
        return await self.asend_message(message, options)

    async def asend_video_message(
        self,
        to: str,
        video_url: str,
        caption: str,
        options: Optional[RequestOptions] = None
    ) -> ApiResponse:
        message = wa_requests.VideoMessage(
            from_=self._sdk.get_from_number(),
            to=to,
            video=wa_requests.Video(link=video_url, caption=caption)
        )
        return await self.asend_message(message, options)

    async def asend_video_message_with_id(
        self,
        to: str,
        media_id: str,
        caption: str,
        options: Optional[RequestOptions] = None
    ) -> ApiResponse:
        message = wa_requests.VideoMessage(
            from_=self._sdk.get_from_number(),
            to=to,
            video=wa_requests.Video(id=media_id, caption=caption)
        )
        return await self.asend_message(message, options)

    async def asend_audio_message(
        self,
        to: str,
        audio_url: str,
        options: Optional[RequestOptions] = None
    ) -> ApiResponse:
        message = wa_requests.AudioMessage(
            from_=self._sdk.get_from_number(),
            to=to,
            audio=wa_requests.Audio(link=audio_url)
        )
        return await self.asend_message(message, options)

    async def asend_audio_message_with_id(
        self,
        to: str,
        media_id: str,
        options: Optional[RequestOptions] = None
    ) -> ApiResponse:
        message = wa_requests.AudioMessage(
            from_=self._sdk.get_from_number(),
            to=to,
            audio=wa_requests.Audio(id=media_id)
        )
        return await self.asend_message(message, options)

    async def __asend_interactive(
        self,
        to: str,
        body_text: str,
        buttons: Buttons,
        header: Optional[wa_requests.InteractiveHeader],
        footer_text: Optional[str],
        options: Optional[RequestOptions]
    ) -> ApiResponse:
        footer = None
        if footer_text:
            footer = wa_requests.InteractiveFooter(text=footer_text)
        message = wa_requests.InteractiveMessage(
            from_=self._sdk.get_from_number(),
            to=to,
            interactive=wa_requests.Interactive(
                header=header,
                body=wa_requests.InteractiveBody(text=body_text),
                footer=footer,
                action=wa_requests.InteractiveAction(
                    buttons=wa_req_payload.get_interactive_buttons(buttons)
                )
            )
        )
        return await self.asend_message(message, options)

    async def asend_interactive_message(
        self,
        to: str,
        body_text: str,
        buttons: Buttons,
        header_text: Optional[str] = None,
        footer_text: Optional[str] = None,
        options: Optional[RequestOptions] = None
    ) -> ApiResponse:
        """
        Sends a reply-button message (1 to 3 buttons, unique ids and titles).
        """
        header = wa_req_payload.get_text_header(header_text) if header_text else None
        return await self.__asend_interactive(to, body_text, buttons, header, footer_text, options)

    async def asend_interactive_message_with_image_header(
        self,
        to: str,
        body_text: str,
        buttons: Buttons,
        image_url: str,
        footer_text: Optional[str] = None,
        options: Optional[RequestOptions] = None
    ) -> ApiResponse:
        header = wa_req_payload.get_image_header(link=image_url)
        return await self.__asend_interactive(to, body_text, buttons, header, footer_text, options)

    async def asend_interactive_message_with_image_id_header(
        self,
        to: str,
        body_text: str,
        buttons: Buttons,
        media_id: str,
        footer_text: Optional[str] = None,
        options: Optional[RequestOptions] = None
    ) -> ApiResponse:
        header = wa_req_payload.get_image_header(media_id=media_id)
        return await self.__asend_interactive(to, body_text, buttons, header, footer_text, options)

    async def asend_interactive_message_with_video_header(
        self,
        to: str,
        body_text: str,
        buttons: Buttons,
        video_url: str,
        footer_text: Optional[str] = None,
        options: Optional[RequestOptions] = None
    ) -> ApiResponse:
        header = wa_req_payload.get_video_header(link=video_url)
        return await self.__asend_interactive(to, body_text, buttons, header, footer_text, options)

    async def asend_interactive_message_with_video_id_header(
        self,
        to: str,
        body_text: str,
        buttons: Buttons,
        media_id: str,
        footer_text: Optional[str] = None,
        options: Optional[RequestOptions] = None
    ) -> ApiResponse:
        header = wa_req_payload.get_video_header(media_id=media_id)
        return await self.__asend_interactive(to, body_text, buttons, header, footer_text, options)

    async def asend_interactive_message_with_document_header(
        self,
        to: str,
        body_text: str,
        buttons: Buttons,
        document_url: str,
        footer_text: Optional[str] = None,
        options: Optional[RequestOptions] = None
    ) -> ApiResponse:
        header = wa_req_payload.get_document_header(link=document_url)
        return await self.__asend_interactive(to, body_text, buttons, header, footer_text, options)

    async def asend_interactive_message_with_document_id_header(
        self,
        to: str,
        body_text: str,
        buttons: Buttons,
        media_id: str,
        footer_text: Optional[str] = None,
        options: Optional[RequestOptions] = None
    ) -> ApiResponse:
        header = wa_req_payload.get_document_header(media_id=media_id)
        return await self.__asend_interactive(to, body_text, buttons, header, footer_text, options)

    async def aget_templates(
        self,
        options: Optional[RequestOptions] = None
    ) -> ApiResponse:
        return await self._sdk.arequest(HttpMethods.GET.value, self.__TEMPLATES_ROUTE, options=options)
