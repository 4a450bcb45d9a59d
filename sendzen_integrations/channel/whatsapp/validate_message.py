import re
import logging
from typing import Any, Dict, Iterable, List, Sequence
from sendzen_core.errors import (
    InvalidLanguageCode,
    EmptyComponentParameters,
    TooManyButtons,
    IncompatibleButtonTypes,
    DuplicateButtonIndex,
    DuplicateButtonText,
    InteractiveButtonCountOutOfRange,
    DuplicateButtonId,
    DuplicateButtonTitle
)
from sendzen_core.models.whatsapp.requests import (
    InteractiveActionButton,
    InteractiveReply,
    TemplateComponent,
    TemplateComponentTypes,
    ButtonSubTypes
)

logger = logging.getLogger(__name__)

_PHONE_NUMBER_PATTERN = re.compile(r"^[1-9][0-9]{0,3}[1-9][0-9]{9}$")
_MAX_PHONE_NUMBER_LENGTH = 15
_LANGUAGE_CODE_PATTERN = re.compile(r"^[a-z]{2}_[A-Z]{2}$")

MIN_INTERACTIVE_BUTTONS = 1
MAX_INTERACTIVE_BUTTONS = 3

BUTTON_LIMITS = {
    ButtonSubTypes.QUICK_REPLY.value: 10,
    ButtonSubTypes.PHONE_NUMBER.value: 1,
    ButtonSubTypes.URL.value: 1,
    ButtonSubTypes.COPY_CODE.value: 1,
}

def validate_phone_number(phone: str) -> bool:
    if not isinstance(phone, str):
        return False
    return (_PHONE_NUMBER_PATTERN.fullmatch(phone) is not None
        and len(phone) <= _MAX_PHONE_NUMBER_LENGTH)

def validate_language_code(lang_code: str) -> bool:
    """Accepts codes like en_US, es_ES, fr_FR."""
    if not isinstance(lang_code, str):
        return False
    return _LANGUAGE_CODE_PATTERN.fullmatch(lang_code) is not None

def ensure_language_code(lang_code: str) -> str:
    if not validate_language_code(lang_code):
        raise InvalidLanguageCode(lang_code)
    return lang_code

def _first_duplicate(values: Iterable[Any]):
    seen = []
    for value in values:
        if value in seen:
            return True, value
        seen.append(value)
    return False, None

def _reply_of(button: Any) -> InteractiveReply:
    if isinstance(button, InteractiveActionButton):
        return button.reply
    if isinstance(button, InteractiveReply):
        return button
    if isinstance(button, dict):
        if "reply" in button:
            return InteractiveReply.model_validate(button["reply"])
        return InteractiveReply.model_validate(button)
    raise TypeError(f"Unsupported interactive button: {button!r}")

def validate_interactive_buttons(buttons: Sequence[Any]) -> List[InteractiveReply]:
    """
    Checks reply buttons of an interactive message.

    Args:
        buttons: ``InteractiveActionButton``, ``InteractiveReply`` or
            ``{"id", "title"}`` dicts.

    Returns:
        list: The buttons as ``InteractiveReply`` values, in order.

    Raises:
        InteractiveButtonCountOutOfRange: fewer than 1 or more than 3 buttons.
        DuplicateButtonId: two buttons share an id.
        DuplicateButtonTitle: two buttons share a title.
    """
    replies = [_reply_of(button) for button in buttons]
    if not MIN_INTERACTIVE_BUTTONS <= len(replies) <= MAX_INTERACTIVE_BUTTONS:
        raise InteractiveButtonCountOutOfRange(
            len(replies),
            MIN_INTERACTIVE_BUTTONS,
            MAX_INTERACTIVE_BUTTONS
        )

    has_duplicate, button_id = _first_duplicate(reply.id for reply in replies)
    if has_duplicate:
        raise DuplicateButtonId(button_id)

    has_duplicate, title = _first_duplicate(reply.title for reply in replies)
    if has_duplicate:
        raise DuplicateButtonTitle(title)
    return replies

def _as_component(component: Any) -> TemplateComponent:
    if isinstance(component, TemplateComponent):
        return component
    return TemplateComponent.model_validate(component)

def validate_template_components(components: Sequence[Any]) -> List[TemplateComponent]:
    """
    Checks a finished component list against the gateway's template rules.
    The first violation found is raised; the list itself is never modified.

    Returns:
        list: The components as ``TemplateComponent`` values, in order.
    """
    components = [_as_component(component) for component in components]
    button_type = TemplateComponentTypes.BUTTON.value
    button_components = [comp for comp in components if comp.type == button_type]
    other_components = [comp for comp in components if comp.type != button_type]

    for component in other_components:
        if not component.parameters:
            raise EmptyComponentParameters(component.type)

    if button_components:
        validate_button_components(button_components)
    return components

def validate_button_components(button_components: Sequence[TemplateComponent]) -> None:
    by_sub_type: Dict[str, List[TemplateComponent]] = {
        sub_type: [] for sub_type in BUTTON_LIMITS
    }
    for button in button_components:
        if button.sub_type in by_sub_type:
            by_sub_type[button.sub_type].append(button)

    for sub_type, limit in BUTTON_LIMITS.items():
        count = len(by_sub_type[sub_type])
        if count > limit:
            raise TooManyButtons(sub_type, limit, count)

    quick_reply = ButtonSubTypes.QUICK_REPLY.value
    phone_number = ButtonSubTypes.PHONE_NUMBER.value
    url = ButtonSubTypes.URL.value
    copy_code = ButtonSubTypes.COPY_CODE.value

    if by_sub_type[quick_reply]:
        others = [
            sub_type for sub_type in (phone_number, url, copy_code)
            if by_sub_type[sub_type]
        ]
        if others:
            raise IncompatibleButtonTypes(quick_reply, others)

    if by_sub_type[copy_code]:
        others = [
            sub_type for sub_type in (phone_number, url)
            if by_sub_type[sub_type]
        ]
        if others:
            raise IncompatibleButtonTypes(copy_code, others)

    has_duplicate, index = _first_duplicate(button.index for button in button_components)
    if has_duplicate:
        raise DuplicateButtonIndex(index)

    def button_text(button: TemplateComponent):
        if not button.parameters:
            return None
        return button.parameters[0].text

    has_duplicate, text = _first_duplicate(button_text(button) for button in button_components)
    if has_duplicate:
        raise DuplicateButtonText(text)
    logger.debug("Validated %d template button components", len(button_components))
