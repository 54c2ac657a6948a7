"""Bot Framework activity schema (the subset the bot reads and writes)."""

from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field

MESSAGE = "message"
TYPING = "typing"
CONVERSATION_UPDATE = "conversationUpdate"


class ChannelAccount(BaseModel):
    model_config = ConfigDict(extra="allow")

    id: str = ""
    name: Optional[str] = None


class ConversationAccount(BaseModel):
    model_config = ConfigDict(extra="allow")

    id: str = ""
    name: Optional[str] = None


class Activity(BaseModel):
    model_config = ConfigDict(extra="allow", populate_by_name=True)

    type: str = MESSAGE
    id: Optional[str] = None
    text: Optional[str] = None
    service_url: str = Field("", alias="serviceUrl")
    channel_id: Optional[str] = Field(None, alias="channelId")
    from_: Optional[ChannelAccount] = Field(None, alias="from")
    recipient: Optional[ChannelAccount] = None
    conversation: Optional[ConversationAccount] = None
    members_added: List[ChannelAccount] = Field(default_factory=list, alias="membersAdded")

    @property
    def conversation_id(self) -> str:
        return self.conversation.id if self.conversation else ""

    @property
    def bot_id(self) -> Optional[str]:
        return self.recipient.id if self.recipient else None


def reply_activity(incoming: Activity, activity_type: str, text: Optional[str] = None) -> Dict[str, Any]:
    """Build an outgoing activity addressed back to the sender of ``incoming``."""
    out: Dict[str, Any] = {"type": activity_type}
    if text is not None:
        out["text"] = text
    if incoming.recipient:
        out["from"] = incoming.recipient.model_dump(exclude_none=True)
    if incoming.from_:
        out["recipient"] = incoming.from_.model_dump(exclude_none=True)
    if incoming.conversation:
        out["conversation"] = incoming.conversation.model_dump(exclude_none=True)
    if incoming.channel_id:
        out["channelId"] = incoming.channel_id
    if incoming.id:
        out["replyToId"] = incoming.id
    return out
