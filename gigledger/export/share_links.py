"""Mini README: Build share links that carry the report text.

Structure:
    * encode_uri_component - percent-encoding matching the browser function.
    * ReportSharer - WhatsApp click-to-chat and mailto link builder.

Sharing is fire-and-forget: the links are handed to the browser and the
tracker never learns whether a message was sent.
"""

from __future__ import annotations

from urllib.parse import quote

from ..logging_utils import get_logger

LOGGER = get_logger(__name__)

# Characters encodeURIComponent leaves untouched besides alphanumerics.
_URI_COMPONENT_SAFE = "-_.!~*'()"


def encode_uri_component(text: str) -> str:
    """Percent-encode ``text`` for use inside a URL query value."""

    return quote(text, safe=_URI_COMPONENT_SAFE)


class ReportSharer:
    """Produce share targets for a rendered report message."""

    def __init__(
        self,
        *,
        whatsapp_base_url: str = "https://wa.me/",
        email_subject: str = "Monthly Finance Report",
    ) -> None:
        self.whatsapp_base_url = whatsapp_base_url
        self.email_subject = email_subject

    def whatsapp_link(self, message: str) -> str:
        link = f"{self.whatsapp_base_url}?text={encode_uri_component(message)}"
        LOGGER.info("Prepared WhatsApp share link (%s characters)", len(message))
        return link

    def email_link(self, message: str) -> str:
        link = (
            f"mailto:?subject={encode_uri_component(self.email_subject)}"
            f"&body={encode_uri_component(message)}"
        )
        LOGGER.info("Prepared e-mail share link (%s characters)", len(message))
        return link
