"""Transient chat log between the user and the assistant."""

import logging
from dataclasses import dataclass, field
from typing import List, Optional, Sequence

from config.constants import ASSISTANT_APOLOGY, MISSING_KEY_MESSAGE, UPSTREAM_ERROR_MESSAGE
from models.exceptions import ConfigurationError, UpstreamError
from models.update import UpdateRecord
from services.assistant_gateway import AssistantGateway


logger = logging.getLogger(__name__)


@dataclass
class Message:
    role: str  # 'user' or 'assistant'
    content: str


def greeting(update_count: int) -> str:
    return (
        f"Hello! I'm PPA. I've analyzed your team's {update_count} updates. "
        "I can identify risks, summarize progress, or help you prepare for your next sync. "
        "What's on your mind?"
    )


@dataclass
class Conversation:
    """Chat history for one session. Never persisted."""
    messages: List[Message] = field(default_factory=list)
    error: Optional[str] = None

    @classmethod
    def start(cls, update_count: int) -> "Conversation":
        return cls(messages=[Message("assistant", greeting(update_count))])

    def clear(self, update_count: int):
        self.messages = [Message("assistant", greeting(update_count))]
        self.error = None

    def send(self, gateway: AssistantGateway, records: Sequence[UpdateRecord], question: str) -> Optional[str]:
        """
        Ask the assistant and record both sides of the exchange.

        Returns the reply, or None when the question was blank or the request
        failed. Never raises: failures set `error` and add the apology reply
        instead.
        """
        question = (question or "").strip()
        if not question:
            return None

        self.error = None
        self.messages.append(Message("user", question))

        try:
            reply = gateway.ask(records, question)
        except ConfigurationError as e:
            logger.warning(f"Assistant unavailable: {e}")
            self.error = MISSING_KEY_MESSAGE
        except UpstreamError as e:
            logger.error(f"Assistant request failed: {e}")
            self.error = UPSTREAM_ERROR_MESSAGE
        except Exception as e:
            logger.exception(f"Unexpected assistant failure: {type(e).__name__}")
            self.error = UPSTREAM_ERROR_MESSAGE
        else:
            self.messages.append(Message("assistant", reply))
            return reply

        self.messages.append(Message("assistant", ASSISTANT_APOLOGY))
        return None
