# File: weekplanner/layout/text.py
"""
Title clean-up shared by the screen view and the export document.
"""

import re

from weekplanner.models import Event, Variant

_SYMBOLS = re.compile(
    "["
    "\U0001F300-\U0001F6FF"  # pictographs, emoticons, transport (includes the lock)
    "☀-➿"          # misc symbols, dingbats
    "•-‥"          # bullets
    "◦▪▫"     # hollow/square bullets
    "─-▟"          # box drawing, block elements
    "←-→"          # arrows
    "]"
)

# Mis-decoded UTF-8 left behind by older exports
_MOJIBAKE = re.compile(r"Ã˜=ÃœÃ…|Ã˜=Ã|Ã˜=|ÃœÃ…|â€¢|â—¦|â–ª|â–«|â†’|â†|ðŸ”’")

_APPOINTMENT_SUFFIX = re.compile(r'\s+appointment\s*$', re.IGNORECASE)


def clean_event_title(title: str) -> str:
    """Strip symbols and mojibake, then collapse whitespace."""
    if not title:
        return ""
    title = _MOJIBAKE.sub("", title)
    title = _SYMBOLS.sub("", title)
    return re.sub(r"\s+", " ", title).strip()


def display_title(event: Event, variant: Variant) -> str:
    """Cleaned title, without the provider's " Appointment" suffix for practice events."""
    title = clean_event_title(event.title)
    if variant is Variant.PRACTICE_APPOINTMENT:
        stripped = _APPOINTMENT_SUFFIX.sub("", title)
        # "Appointment" alone stays as is
        if stripped:
            return stripped
    return title
