import json
from typing import Any, Mapping, Sequence

from features.chat.whatsapp.webview.model.message_params import MessageParams
from features.chat.whatsapp.webview.model.tap_target import TapTarget
from features.chat.whatsapp.webview.webview_button_factory import WEBVIEW_BUTTON_TYPE
from util import log
from util.config import config
from util.functions import is_present, merge_dicts, to_compact_json

CTA_URL_BUTTON_NAME = "cta_url"

# left out of the encoded params when missing, the way undefined values are dropped on the client
OMITTED_WHEN_MISSING = ("display_text", "url", "landing_page_url")


class IOSWebviewMessageBuilder:
    """
    Assembles native-flow interactive messages with webview (`cta_url`) buttons
    in the exact shape iOS clients need to open the embedded browser.
    The output is plain data; sending it is up to the transport layer.
    """

    def build(
        self,
        body_text: str | None,
        footer_text: str | None = None,
        title: str | None = None,
        subtitle: str | None = None,
        image_message: Any = None,
        buttons: Sequence[Mapping[str, Any]] | None = None,
        context_info: Mapping[str, Any] | None = None,
    ) -> dict[str, Any]:
        log.t(f"Building iOS webview message with {len(buttons or [])} button(s)")
        normalized_buttons = self.normalize_buttons(buttons or [])
        tap_targets = self.build_tap_targets(normalized_buttons)

        interactive_message: dict[str, Any] = {
            "body": {"text": body_text},
            "nativeFlowMessage": {
                "buttons": normalized_buttons,
                "messageParamsJson": self.build_message_params_json(tap_targets),
            },
            "contextInfo": merge_dicts({"dataSharingContext": {"showMmDisclosure": False}}, context_info),
        }

        header = self.build_header(image_message = image_message, title = title, subtitle = subtitle)
        if header:
            interactive_message["header"] = header
        if footer_text:
            interactive_message["footer"] = {"text": footer_text}

        if config.log_webview_message:
            log.d("Assembled iOS webview message", interactive_message)
        return {"interactiveMessage": interactive_message}

    def normalize_buttons(self, buttons: Sequence[Mapping[str, Any]]) -> list[Mapping[str, Any]]:
        return [self.normalize_button(button) for button in buttons]

    def normalize_button(self, button: Mapping[str, Any]) -> Mapping[str, Any]:
        if button.get("type") != WEBVIEW_BUTTON_TYPE and button.get("name") != CTA_URL_BUTTON_NAME:
            return button

        url = button.get("url")
        params = {
            "display_text": button.get("displayText") or button.get("text"),
            "url": url,
            "webview_presentation": button.get("webviewPresentation") or None,
            "payment_link_preview": button.get("paymentLinkPreview", False),
            "landing_page_url": button.get("landingPageUrl") or url,
            "webview_interaction": button.get("webviewInteraction", True),
        }
        params = {
            key: value for key, value in params.items()
            if value is not None or key not in OMITTED_WHEN_MISSING
        }
        return {
            "name": CTA_URL_BUTTON_NAME,
            "buttonParamsJson": to_compact_json(params),
        }

    def build_tap_targets(self, buttons: Sequence[Mapping[str, Any]]) -> list[TapTarget]:
        url_buttons = [button for button in buttons if button.get("name") == CTA_URL_BUTTON_NAME]
        log.t(f"  Deriving tap targets for {len(url_buttons)} URL button(s)")
        return [
            TapTarget(canonical_url = self.__resolve_canonical_url(button), button_index = index)
            for index, button in enumerate(url_buttons)
        ]

    def build_message_params_json(self, tap_targets: list[TapTarget]) -> str:
        message_params = MessageParams.for_tap_targets(tap_targets)
        return to_compact_json(message_params.model_dump(mode = "json"))

    def build_header(
        self,
        image_message: Any = None,
        title: str | None = None,
        subtitle: str | None = None,
    ) -> dict[str, Any] | None:
        has_image = is_present(image_message)
        if not (has_image or title or subtitle):
            return None
        header: dict[str, Any] = {"hasMediaAttachment": has_image}
        if has_image:
            header["imageMessage"] = image_message
        if title:
            header["title"] = title
        if subtitle:
            header["subtitle"] = subtitle
        return header

    def __resolve_canonical_url(self, button: Mapping[str, Any]) -> str:
        try:
            params = json.loads(button.get("buttonParamsJson"))
            url = params.get("url")
            landing_page_url = params.get("landing_page_url")
            canonical_url = url if is_present(url) else landing_page_url if is_present(landing_page_url) else ""
        except Exception as e:
            log.w("Failed to read button params, using an empty canonical URL", e)
            return ""
        return canonical_url if isinstance(canonical_url, str) else to_compact_json(canonical_url)


def create_ios_webview_message(
    body_text: str | None,
    footer_text: str | None = None,
    title: str | None = None,
    subtitle: str | None = None,
    image_message: Any = None,
    buttons: Sequence[Mapping[str, Any]] | None = None,
    context_info: Mapping[str, Any] | None = None,
) -> dict[str, Any]:
    """Creates an iOS-compatible interactive message with webview buttons."""
    return IOSWebviewMessageBuilder().build(
        body_text = body_text,
        footer_text = footer_text,
        title = title,
        subtitle = subtitle,
        image_message = image_message,
        buttons = buttons,
        context_info = context_info,
    )
