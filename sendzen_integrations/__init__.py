import os

current_dir = os.path.dirname(os.path.abspath(__file__))
test_environment_path = os.path.normpath(os.path.join(current_dir, '..', 'keys.env'))

from sendzen_integrations.channel.whatsapp.sendzen.sdk import WaMessageApi
from sendzen_integrations.channel.whatsapp.sendzen.async_sendzen_client import AsyncSendZenClient
from sendzen_integrations.channel.whatsapp.whatsapp_service import WhatsAppService
from sendzen_integrations.channel.whatsapp.template_service import TemplateService

__all__ = [
    'WaMessageApi',
    'AsyncSendZenClient',
    'WhatsAppService',
    'TemplateService',
    'test_environment_path'
]
