import asyncio
import pytest
from sendzen_core.errors import ConfigurationError, InteractiveButtonCountOutOfRange, InvalidRecipient
from sendzen_core.models.sendzen.config import SendZenConfig
from sendzen_core.models.whatsapp.response.message_response import MessageResponseItem
from sendzen_integrations import WaMessageApi, WhatsAppService
from sendzen_integrations.channel.tests.fake_sendzen_server import (
    FakeSendZenServer,
    MESSAGES_PATH,
    queued_response
)

API_KEY = "sz-test-key"
SENDER = "14155550100"
RECIPIENT = "14155552671"

def _api(server: FakeSendZenServer, **kwargs) -> WaMessageApi:
    return WaMessageApi(api_key=API_KEY, from_number=SENDER, base_url=server.base_url, **kwargs)

def test_api_key_and_sender_required():
    with pytest.raises(ConfigurationError) as exc_info:
        WaMessageApi(from_number=SENDER)
    assert str(exc_info.value) == "API key is required"

    with pytest.raises(ConfigurationError) as exc_info:
        WaMessageApi(api_key=API_KEY)
    assert str(exc_info.value) == "From phone number is required"

    with pytest.raises(ConfigurationError):
        WaMessageApi(config=SendZenConfig(api_key="", from_number=SENDER))

def test_accepts_wire_alias_for_sender():
    api = WaMessageApi(**{"api_key": API_KEY, "from": SENDER})
    assert api.get_from_number() == SENDER

def test_update_config_swaps_snapshot():
    api = WaMessageApi(api_key=API_KEY, from_number=SENDER)
    before = api.get_config()
    after = api.update_config(timeout=5000, **{"from": "14155550199"})

    assert after is api.get_config()
    assert after.timeout == 5000
    assert api.get_from_number() == "14155550199"
    assert before.timeout == 30000
    assert before.from_number == SENDER

def test_rejected_update_keeps_previous_config():
    api = WaMessageApi(api_key=API_KEY, from_number=SENDER)
    before = api.get_config()
    with pytest.raises(ConfigurationError):
        api.update_config(api_key="")
    assert api.get_config() is before

def test_update_developer_options_rebuilds_transport():
    api = WaMessageApi(api_key=API_KEY, from_number=SENDER)
    client = api._client
    options = api.update_developer_options(logs=["debug", "error"])

    assert options.enable_debug_logging is True
    assert options.enable_error_logging is True
    assert options.enable_request_logging is False
    assert api.get_developer_options() == options
    assert api._client is not client
    assert api._client.developer_options == options

def test_whatsapp_service_is_lazy_and_cached():
    api = WaMessageApi(api_key=API_KEY, from_number=SENDER)
    assert api._whatsapp is None
    service = api.whatsapp
    assert isinstance(service, WhatsAppService)
    assert api.whatsapp is service

async def atest_send_text_message():
    async with FakeSendZenServer() as server:
        server.respond("POST", MESSAGES_PATH, 200, queued_response(RECIPIENT))
        async with _api(server) as api:
            response = await api.whatsapp.asend_text_message(to=RECIPIENT, text="Hello", preview_url=True)

        assert server.requests[0].body == {
            "from": SENDER,
            "To": RECIPIENT,
            "type": "text",
            "text": {"body": "Hello", "preview_url": True}
        }
        assert response.message == "Message queued successfully"
        item = response.data[0]
        assert isinstance(item, MessageResponseItem)
        assert item.message_id == "wamid.test.1"
        assert item.to == RECIPIENT

async def atest_send_media_messages():
    async with FakeSendZenServer() as server:
        api = _api(server)
        await api.whatsapp.asend_image_message(RECIPIENT, "https://example.com/a.jpg", caption="Look")
        await api.whatsapp.asend_document_message_with_id(RECIPIENT, "doc-1", filename="invoice.pdf")
        await api.whatsapp.asend_video_message(RECIPIENT, "https://example.com/a.mp4", caption="Demo")
        await api.whatsapp.asend_audio_message_with_id(RECIPIENT, "audio-1")
        await api.aclose()

        bodies = [request.body for request in server.requests]
        assert bodies[0]["image"] == {"link": "https://example.com/a.jpg", "caption": "Look"}
        assert bodies[1]["document"] == {"id": "doc-1", "filename": "invoice.pdf"}
        assert bodies[2]["video"] == {"link": "https://example.com/a.mp4", "caption": "Demo"}
        assert bodies[3]["audio"] == {"id": "audio-1"}

async def atest_send_interactive_message():
    async with FakeSendZenServer() as server:
        api = _api(server)
        await api.whatsapp.asend_interactive_message_with_image_id_header(
            to=RECIPIENT,
            body_text="Confirm your order?",
            buttons=[{"id": "yes", "title": "Yes"}, {"id": "no", "title": "No"}],
            media_id="media-1",
            footer_text="Thanks"
        )

        interactive = server.requests[0].body["interactive"]
        assert interactive["header"] == {"type": "image", "image": {"id": "media-1"}}
        assert interactive["footer"] == {"text": "Thanks"}
        assert len(interactive["action"]["buttons"]) == 2

async def atest_invalid_message_is_never_sent():
    async with FakeSendZenServer() as server:
        api = _api(server)
        buttons = [{"id": str(i), "title": f"Option {i}"} for i in range(4)]
        with pytest.raises(InteractiveButtonCountOutOfRange):
            await api.whatsapp.asend_interactive_message(RECIPIENT, "Pick one", buttons)
        with pytest.raises(InvalidRecipient):
            await api.whatsapp.asend_text_message(to="+14155552671", text="Hi")
        assert server.requests == []

async def atest_send_template_message():
    async with FakeSendZenServer() as server:
        server.respond("POST", MESSAGES_PATH, 200, queued_response(RECIPIENT, "wamid.template.1"))
        api = _api(server)
        template = api.whatsapp.template
        response = await template.asend_template_message(
            to=RECIPIENT,
            template_name="order_update",
            lang_code="en_US",
            components=[
                template.create_body_component(["John Doe", "ORD-12345"]),
                template.create_url_button_component(0, "ORD-12345"),
            ]
        )

        body = server.requests[0].body
        assert body["type"] == "template"
        assert body["to"] == RECIPIENT
        assert "To" not in body
        assert body["template"]["name"] == "order_update"
        assert body["template"]["components"][1] == {
            "type": "button",
            "sub_type": "url",
            "index": 0,
            "parameters": [{"type": "text", "text": "ORD-12345"}]
        }
        assert response.data[0].message_id == "wamid.template.1"

async def atest_get_templates():
    async with FakeSendZenServer() as server:
        server.respond("GET", MESSAGES_PATH + "/templates", 200, {
            "message": "Templates fetched",
            "data": [{"name": "order_update", "status": "APPROVED"}]
        })
        api = _api(server)
        response = await api.whatsapp.aget_templates()

        assert server.requests[0].method == "GET"
        assert response.message == "Templates fetched"
        assert response.data == [{"name": "order_update", "status": "APPROVED"}]

async def atest_in_flight_call_keeps_its_config():
    async with FakeSendZenServer(delay=0.2) as server:
        async with _api(server, reuse_client=True) as api:
            first = asyncio.ensure_future(api.whatsapp.asend_text_message(RECIPIENT, "first"))
            await asyncio.sleep(0.05)
            api.update_config(headers={"X-Config-Version": "2"})
            await first
            assert api._retired_clients == []
            await api.whatsapp.asend_text_message(RECIPIENT, "second")

        assert "X-Config-Version" not in server.requests[0].headers
        assert server.requests[1].headers["X-Config-Version"] == "2"

async def atest_retired_clients_released_after_swaps():
    async with FakeSendZenServer() as server:
        api = _api(server, reuse_client=True)
        first_client = api._client
        await api.whatsapp.asend_text_message(RECIPIENT, "before")
        assert first_client._session is not None

        api.update_config(timeout=10000)
        api.update_developer_options(logs=["error"])
        assert len(api._retired_clients) == 2

        await api.whatsapp.asend_text_message(RECIPIENT, "after")
        assert api._retired_clients == []
        assert first_client._session is None
        await api.aclose()

def test_send_text_message(event_loop):
    event_loop.run_until_complete(atest_send_text_message())

def test_send_media_messages(event_loop):
    event_loop.run_until_complete(atest_send_media_messages())

def test_send_interactive_message(event_loop):
    event_loop.run_until_complete(atest_send_interactive_message())

def test_invalid_message_is_never_sent(event_loop):
    event_loop.run_until_complete(atest_invalid_message_is_never_sent())

def test_send_template_message(event_loop):
    event_loop.run_until_complete(atest_send_template_message())

def test_get_templates(event_loop):
    event_loop.run_until_complete(atest_get_templates())

def test_in_flight_call_keeps_its_config(event_loop):
    event_loop.run_until_complete(atest_in_flight_call_keeps_its_config())

def test_retired_clients_released_after_swaps(event_loop):
    event_loop.run_until_complete(atest_retired_clients_released_after_swaps())
