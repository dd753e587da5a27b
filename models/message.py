"""
Channel message data models
"""
from dataclasses import dataclass
from typing import Optional, Dict, Any


@dataclass(frozen=True)
class InboundMessage:
    """Message received from the messaging channel"""
    sender_id: str
    text: str
    type: str = "text"
    sender_name: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "InboundMessage":
        return cls(
            sender_id=str(data.get("senderId", "")),
            text=str(data.get("text") or ""),
            type=str(data.get("type", "text")),
            sender_name=data.get("senderName")
        )
