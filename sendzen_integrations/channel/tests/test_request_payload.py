import json
import pytest
import sendzen_core.models.whatsapp.requests as wa_requests
import sendzen_integrations.channel.whatsapp.request_payload as wa_req_payload
import sendzen_integrations.channel.whatsapp.template_components as wa_components
from sendzen_core.errors import (
    InvalidSender,
    InvalidRecipient,
    InvalidLanguageCode,
    MissingContentLocator,
    InteractiveButtonCountOutOfRange,
    DuplicateButtonIndex
)

SENDER = "14155550100"
RECIPIENT = "14155552671"

def test_text_message_payload():
    message = wa_requests.TextMessage(
        from_=SENDER,
        to=RECIPIENT,
        text=wa_requests.Text(body="Hello", preview_url=True)
    )
    assert wa_req_payload.format_message(message) == {
        "from": SENDER,
        "To": RECIPIENT,
        "type": "text",
        "text": {"body": "Hello", "preview_url": True}
    }

def test_text_preview_url_defaults_to_false():
    message = wa_requests.TextMessage(from_=SENDER, to=RECIPIENT, text=wa_requests.Text(body="Hi"))
    assert wa_req_payload.format_message(message)["text"]["preview_url"] is False

def test_message_from_dict_with_wire_alias():
    payload = wa_req_payload.format_message({
        "from": SENDER,
        "to": RECIPIENT,
        "type": "text",
        "text": {"body": "Hello"}
    })
    assert payload["from"] == SENDER
    assert payload["To"] == RECIPIENT
    assert payload["text"] == {"body": "Hello", "preview_url": False}

def test_invalid_sender_and_recipient():
    message = wa_requests.TextMessage(from_="+14155550100", to=RECIPIENT, text=wa_requests.Text(body="Hi"))
    with pytest.raises(InvalidSender) as exc_info:
        wa_req_payload.format_message(message)
    assert exc_info.value.field == "from"

    message = wa_requests.TextMessage(from_=SENDER, to="12345", text=wa_requests.Text(body="Hi"))
    with pytest.raises(InvalidRecipient) as exc_info:
        wa_req_payload.format_message(message)
    assert exc_info.value.value == "12345"

def test_image_by_link_and_by_id():
    message = wa_requests.ImageMessage(
        from_=SENDER,
        to=RECIPIENT,
        image=wa_requests.Image(link="https://example.com/a.jpg", caption="Look")
    )
    assert wa_req_payload.format_message(message) == {
        "from": SENDER,
        "To": RECIPIENT,
        "type": "image",
        "image": {"link": "https://example.com/a.jpg", "caption": "Look"}
    }

    message = wa_requests.ImageMessage(from_=SENDER, to=RECIPIENT, image=wa_requests.Image(id="media-1"))
    assert wa_req_payload.format_message(message)["image"] == {"id": "media-1"}

def test_document_keeps_filename():
    message = wa_requests.DocumentMessage(
        from_=SENDER,
        to=RECIPIENT,
        document=wa_requests.Document(link="https://example.com/invoice.pdf", filename="invoice.pdf")
    )
    assert wa_req_payload.format_message(message)["document"] == {
        "link": "https://example.com/invoice.pdf",
        "filename": "invoice.pdf"
    }

def test_video_keeps_caption():
    message = wa_requests.VideoMessage(
        from_=SENDER,
        to=RECIPIENT,
        video=wa_requests.Video(id="video-9", caption="Demo")
    )
    assert wa_req_payload.format_message(message)["video"] == {"id": "video-9", "caption": "Demo"}

def test_audio_by_link():
    message = wa_requests.AudioMessage(
        from_=SENDER,
        to=RECIPIENT,
        audio=wa_requests.Audio(link="https://example.com/a.mp3")
    )
    assert wa_req_payload.format_message(message)["audio"] == {"link": "https://example.com/a.mp3"}

@pytest.mark.parametrize("message_type, media", [
    ("image", wa_requests.Image()),
    ("document", wa_requests.Document(filename="a.pdf")),
    ("video", wa_requests.Video(caption="c")),
    ("audio", wa_requests.Audio()),
])
def test_media_without_locator(message_type, media):
    message = wa_requests.whatsapp_message_adapter.validate_python({
        "from": SENDER,
        "to": RECIPIENT,
        "type": message_type,
        message_type: media.model_dump()
    })
    with pytest.raises(MissingContentLocator) as exc_info:
        wa_req_payload.format_message(message)
    assert exc_info.value.message_type == message_type
    assert exc_info.value.both_given is False

@pytest.mark.parametrize("message_type, extra", [
    ("image", {}),
    ("document", {"filename": "a.pdf"}),
    ("video", {"caption": "c"}),
    ("audio", {}),
])
def test_media_with_link_and_id(message_type, extra):
    message = wa_requests.whatsapp_message_adapter.validate_python({
        "from": SENDER,
        "to": RECIPIENT,
        "type": message_type,
        message_type: {"link": "https://example.com/file", "id": "media-1", **extra}
    })
    with pytest.raises(MissingContentLocator) as exc_info:
        wa_req_payload.format_message(message)
    assert exc_info.value.both_given is True

def _interactive_message(header=None, footer_text=None, buttons=None):
    buttons = buttons if buttons is not None else [{"id": "yes", "title": "Yes"}, {"id": "no", "title": "No"}]
    footer = wa_requests.InteractiveFooter(text=footer_text) if footer_text else None
    return wa_requests.InteractiveMessage(
        from_=SENDER,
        to=RECIPIENT,
        interactive=wa_requests.Interactive(
            header=header,
            body=wa_requests.InteractiveBody(text="Confirm your order?"),
            footer=footer,
            action=wa_requests.InteractiveAction(
                buttons=wa_req_payload.get_interactive_buttons(buttons)
            )
        )
    )

def test_interactive_payload_with_text_header_and_footer():
    message = _interactive_message(
        header=wa_req_payload.get_text_header("Order 42"),
        footer_text="Reply within 24h"
    )
    payload = wa_req_payload.format_message(message)
    assert payload["type"] == "interactive"
    assert payload["To"] == RECIPIENT
    assert payload["interactive"] == {
        "type": "button",
        "header": {"type": "text", "text": "Order 42"},
        "body": {"text": "Confirm your order?"},
        "footer": {"text": "Reply within 24h"},
        "action": {
            "buttons": [
                {"type": "reply", "reply": {"id": "yes", "title": "Yes"}},
                {"type": "reply", "reply": {"id": "no", "title": "No"}},
            ]
        }
    }
    assert list(payload["interactive"].keys()) == ["type", "header", "body", "footer", "action"]

def test_interactive_payload_without_optional_parts():
    payload = wa_req_payload.format_message(_interactive_message())
    assert "header" not in payload["interactive"]
    assert "footer" not in payload["interactive"]

@pytest.mark.parametrize("header, expected", [
    (wa_req_payload.get_image_header(link="https://example.com/a.jpg"),
        {"type": "image", "image": {"link": "https://example.com/a.jpg"}}),
    (wa_req_payload.get_video_header(media_id="video-1"),
        {"type": "video", "video": {"id": "video-1"}}),
    (wa_req_payload.get_document_header(link="https://example.com/a.pdf"),
        {"type": "document", "document": {"link": "https://example.com/a.pdf"}}),
])
def test_interactive_media_headers(header, expected):
    payload = wa_req_payload.format_message(_interactive_message(header=header))
    assert payload["interactive"]["header"] == expected

def test_interactive_media_header_needs_locator():
    with pytest.raises(MissingContentLocator):
        wa_req_payload.format_message(_interactive_message(header=wa_req_payload.get_image_header()))

def test_interactive_button_rules_applied():
    buttons = [{"id": str(i), "title": f"Option {i}"} for i in range(4)]
    with pytest.raises(InteractiveButtonCountOutOfRange):
        wa_req_payload.format_message(_interactive_message(buttons=buttons))

def test_template_payload():
    message = wa_requests.TemplateMessage(
        from_=SENDER,
        to=RECIPIENT,
        template=wa_requests.Template(
            name="order_update",
            lang_code="en_US",
            components=[
                wa_components.create_header_image_component("https://example.com/banner.png"),
                wa_components.create_body_component(["John Doe", "ORD-12345"]),
                wa_components.create_quick_reply_button_component(0, "Track"),
            ]
        )
    )
    assert wa_req_payload.format_message(message) == {
        "type": "template",
        "from": SENDER,
        "to": RECIPIENT,
        "template": {
            "name": "order_update",
            "lang_code": "en_US",
            "components": [
                {
                    "type": "header",
                    "parameters": [{"type": "image", "image": {"link": "https://example.com/banner.png"}}]
                },
                {
                    "type": "body",
                    "parameters": [
                        {"type": "text", "text": "John Doe"},
                        {"type": "text", "text": "ORD-12345"},
                    ]
                },
                {
                    "type": "button",
                    "sub_type": "quick_reply",
                    "index": 0,
                    "parameters": [{"type": "text", "text": "Track"}]
                },
            ]
        }
    }

def test_template_without_components():
    message = wa_requests.TemplateMessage(
        from_=SENDER,
        to=RECIPIENT,
        template=wa_requests.Template(name="hello_world", lang_code="en_US")
    )
    assert wa_req_payload.format_message(message)["template"] == {
        "name": "hello_world",
        "lang_code": "en_US"
    }

def test_template_language_code_checked_first():
    message = wa_requests.TemplateMessage(
        from_=SENDER,
        to=RECIPIENT,
        template=wa_requests.Template(
            name="order_update",
            lang_code="en-US",
            components=[
                wa_components.create_url_button_component(0, "https://example.com/a"),
                wa_components.create_phone_number_button_component(0, RECIPIENT),
            ]
        )
    )
    with pytest.raises(InvalidLanguageCode):
        wa_req_payload.format_message(message)

def test_template_component_rules_applied():
    message = wa_requests.TemplateMessage(
        from_=SENDER,
        to=RECIPIENT,
        template=wa_requests.Template(
            name="order_update",
            lang_code="en_US",
            components=[
                wa_components.create_url_button_component(0, "https://example.com/a"),
                wa_components.create_phone_number_button_component(0, RECIPIENT),
            ]
        )
    )
    with pytest.raises(DuplicateButtonIndex):
        wa_req_payload.format_message(message)

def test_template_media_parameter_by_id():
    component = wa_components.create_header_document_id_component("doc-7")
    assert wa_req_payload.get_template_component_payload(component) == {
        "type": "header",
        "parameters": [{"type": "document", "document": {"id": "doc-7"}}]
    }

def test_formatting_is_repeatable():
    message = _interactive_message(header=wa_req_payload.get_text_header("Order 42"), footer_text="Thanks")
    first = json.dumps(wa_req_payload.format_message(message))
    second = json.dumps(wa_req_payload.format_message(message))
    assert first == second
