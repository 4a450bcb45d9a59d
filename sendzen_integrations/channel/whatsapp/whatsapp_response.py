from sendzen_core.models.whatsapp.response.message_response import ApiResponse, MessageResponseItem

def with_message_items(response: ApiResponse) -> ApiResponse:
    """
    Parses ``response.data`` into ``MessageResponseItem`` values when the
    gateway returned the usual list of queued messages. Anything else is
    left untouched.
    """
    data = response.data
    if not isinstance(data, list):
        return response
    if not all(isinstance(item, dict) and "message_id" in item for item in data):
        return response
    return response.model_copy(update={
        "data": [MessageResponseItem.model_validate(item) for item in data]
    })
