from sendzen_core.models.whatsapp.response.message_response import ApiResponse, MessageResponse, MessageResponseItem, MessageStatuses

__all__ = [
    'ApiResponse',
    'MessageResponse',
    'MessageResponseItem',
    'MessageStatuses'
]
