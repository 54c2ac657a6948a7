"""Teams MessageCard payloads for the incoming-webhook receiver."""

from typing import Any, Dict

from relay.domain.models import CARD, OutgoingMessage

CARD_TITLE = "🤖 Claude Bot"
CARD_SUBTITLE = "AI Assistent"
CARD_SUMMARY = "Claude Bot Antwort"
CARD_ICON_URL = "https://cdn-icons-png.flaticon.com/512/4712/4712027.png"
CARD_THEME_COLOR = "0078D4"


def format_exchange(question: str, answer: str) -> OutgoingMessage:
    """Question and answer as one markdown body."""
    return OutgoingMessage(
        text=f"**Frage:** {question}\n\n**Claude:** {answer}",
        formatting=CARD,
    )


def build_message_card(message: OutgoingMessage) -> Dict[str, Any]:
    return {
        "@type": "MessageCard",
        "@context": "https://schema.org/extensions",
        "summary": CARD_SUMMARY,
        "themeColor": CARD_THEME_COLOR,
        "sections": [
            {
                "activityTitle": CARD_TITLE,
                "activitySubtitle": CARD_SUBTITLE,
                "activityImage": CARD_ICON_URL,
                "text": message.text,
                "markdown": True,
            }
        ],
    }
