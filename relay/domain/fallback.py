"""Canned replies used when the Claude API is unavailable."""

from typing import List, Tuple

# Checked in order, first match wins.
CANNED_REPLIES: List[Tuple[Tuple[str, ...], str]] = [
    (("hallo", "hi"), "Hallo! Wie kann ich Ihnen helfen?"),
    (("wie geht", "wie läuft"), "Mir geht es gut, danke! Ich bin bereit, Ihnen zu helfen."),
    (
        ("hilfe", "help"),
        "Ich kann Ihnen bei verschiedenen Aufgaben helfen:\n"
        "• Fragen beantworten\n"
        "• Texte schreiben\n"
        "• Probleme lösen\n"
        "• Und vieles mehr!",
    ),
    (
        ("wer bist du", "was bist du"),
        "Ich bin ein KI-Bot, der Ihnen bei verschiedenen Aufgaben helfen kann. "
        "Stellen Sie mir einfach eine Frage!",
    ),
]

UNAVAILABLE_TEMPLATE = (
    'Ich habe Ihre Nachricht erhalten: "{message}"\n\n'
    "Leider ist die KI-API momentan nicht verfügbar. Bitte versuchen Sie es "
    "später erneut oder kontaktieren Sie den Administrator."
)

RELAY_FAILURE_TEXT = "Entschuldigung, ich konnte keine Antwort generieren."


def keyword_reply(message: str) -> str:
    """Pick a canned reply by substring trigger, else echo the message back."""
    lowered = message.lower()
    for triggers, reply in CANNED_REPLIES:
        if any(t in lowered for t in triggers):
            return reply
    return UNAVAILABLE_TEMPLATE.format(message=message)


def relay_failure_reply(message: str) -> str:
    return RELAY_FAILURE_TEXT
