import logging
from collections import Counter
from typing import Any, List, Optional
from sendzen_core.errors import ConfigurationError
from sendzen_core.models.sendzen.config import DeveloperOptions, RequestOptions, SendZenConfig
from sendzen_core.models.whatsapp.response.message_response import ApiResponse
from sendzen_integrations.channel.whatsapp.sendzen.async_sendzen_client import AsyncSendZenClient
from sendzen_integrations.channel.whatsapp.whatsapp_service import WhatsAppService

class WaMessageApi:
    """
    Entry point of the SendZen client.

    Holds the active configuration and transport. Both are replaced, never
    mutated, by ``update_config`` and ``update_developer_options``; a call
    that already started keeps the transport it picked up.

    Example:
        api = WaMessageApi(api_key="...", from_number="14155550100")
        await api.whatsapp.asend_text_message(to="14155552671", text="Hello")
    """

    def __init__(
        self,
        config: Optional[SendZenConfig] = None,
        reuse_client: bool = False,
        **kwargs
    ):
        self._logger = logging.getLogger(self.__class__.__name__)
        if config is None:
            self.__ensure_required(kwargs.get("api_key"), kwargs.get("from_number", kwargs.get("from")))
            config = SendZenConfig.model_validate(kwargs)
        self.__ensure_required(config.api_key, config.from_number)
        self._reuse_client = reuse_client
        self._config = config
        self._client = AsyncSendZenClient.from_config(config, reuse_client=reuse_client)
        self._retired_clients: List[AsyncSendZenClient] = []
        self._in_flight: Counter = Counter()
        self._whatsapp = None

    @staticmethod
    def __ensure_required(api_key: Optional[str], from_number: Optional[str]) -> None:
        if not api_key:
            raise ConfigurationError("API key is required")
        if not from_number:
            raise ConfigurationError("From phone number is required")

    def __swap(self, config: SendZenConfig) -> None:
        self.__ensure_required(config.api_key, config.from_number)
        if self._reuse_client:
            self._retired_clients.append(self._client)
        self._config = config
        self._client = AsyncSendZenClient.from_config(config, reuse_client=self._reuse_client)

    def get_config(self) -> SendZenConfig:
        return self._config

    def update_config(self, **overrides) -> SendZenConfig:
        self.__swap(self._config.with_overrides(**overrides))
        self._logger.debug("Configuration updated")
        return self._config

    def get_developer_options(self) -> DeveloperOptions:
        return self._config.developer_options

    def update_developer_options(self, **overrides) -> DeveloperOptions:
        developer_options = self._config.developer_options.with_overrides(**overrides)
        self.__swap(self._config.with_overrides(developer_options=developer_options))
        return developer_options

    def get_from_number(self) -> str:
        return self._config.from_number

    @property
    def whatsapp(self) -> WhatsAppService:
        if self._whatsapp is None:
            self._whatsapp = WhatsAppService(self)
        return self._whatsapp

    async def arequest(
        self,
        method: str,
        endpoint: str = "",
        data: Any = None,
        options: Optional[RequestOptions] = None
    ) -> ApiResponse:
        client = self._client
        self._in_flight[client] += 1
        try:
            return await client.arequest(method, endpoint, data, options)
        finally:
            self._in_flight[client] -= 1
            if not self._in_flight[client]:
                del self._in_flight[client]
            await self.__release_idle_clients()

    async def __release_idle_clients(self) -> None:
        # a retired client is closed once no call still holds it
        idle = [client for client in self._retired_clients if not self._in_flight[client]]
        for client in idle:
            self._retired_clients.remove(client)
            await client.aclose()

    async def __aenter__(self):
        return self

    async def __aexit__(self, exc_type, exc, tb):
        await self.aclose()

    async def aclose(self):
        for client in self._retired_clients:
            await client.aclose()
        self._retired_clients = []
        await self._client.aclose()
