from typing import Any

WEBVIEW_BUTTON_TYPE = "webview"


def create_webview_button(
    text: str | None,
    url: str | None,
    landing_page_url: str | None = None,
    webview_interaction: bool = True,
    payment_link_preview: bool = False,
    webview_presentation: str | None = None,
) -> dict[str, Any]:
    """
    Creates a raw webview button descriptor, ready for `create_ios_webview_message`.
    Nothing is validated here; missing text or URL flow through as `None`.
    """
    return {
        "type": WEBVIEW_BUTTON_TYPE,
        "displayText": text,
        "url": url,
        "landingPageUrl": landing_page_url or url,
        "webviewInteraction": webview_interaction,
        "paymentLinkPreview": payment_link_preview,
        "webviewPresentation": webview_presentation,
    }
