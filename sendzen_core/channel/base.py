from abc import ABC, abstractmethod
from typing import Any, Dict, List, Optional, Union
from sendzen_core.models.sendzen.config import RequestOptions
from sendzen_core.models.whatsapp.response.message_response import ApiResponse

class BaseChannel(ABC):
    """Outbound send surface of a messaging channel."""

    @abstractmethod
    async def asend_message(
        self,
        message: Union[Any, Dict[str, Any]],
        options: Optional[RequestOptions] = None
    ) -> ApiResponse:
        pass

    @abstractmethod
    async def asend_text_message(
        self,
        to: str,
        text: str,
        preview_url: bool = False,
        options: Optional[RequestOptions] = None
    ) -> ApiResponse:
        pass

    @abstractmethod
    async def asend_interactive_message(
        self,
        to: str,
        body_text: str,
        buttons: List[Any],
        header_text: Optional[str] = None,
        footer_text: Optional[str] = None,
        options: Optional[RequestOptions] = None
    ) -> ApiResponse:
        pass

    @abstractmethod
    async def aget_templates(
        self,
        options: Optional[RequestOptions] = None
    ) -> ApiResponse:
        pass
