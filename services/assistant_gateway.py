"""
Assistant gateway: Q&A over the team data through the Gemini REST API.

One request per call, no retries, no streaming. Without an API key nothing
is sent and ConfigurationError is raised; every other failure surfaces as
UpstreamError.
"""

import json
import logging
from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Sequence

import requests

from config.constants import DEFAULT_MODEL, GEMINI_API_BASE, SUGGESTION_COUNT
from models.exceptions import ConfigurationError, UpstreamError
from models.update import UpdateRecord


logger = logging.getLogger(__name__)


@dataclass
class AssistantConfig:
    """Credentials and model settings for the assistant."""
    api_key: str = ""
    model: str = DEFAULT_MODEL
    temperature: Optional[float] = None
    timeout: Optional[float] = None


def build_data_summary(records: Sequence[UpdateRecord]) -> str:
    """One line per record: member, initiative, progress, health and update text."""
    return "\n".join(
        f"{r.team_member} ({r.initiative}): {r.status} complete, "
        f"Health: {r.summary_health_label}. Update: {r.description}"
        for r in records
    )


def build_system_instruction(records: Sequence[UpdateRecord]) -> str:
    """Role framing, the data summary and the answering guidelines."""
    return (
        "You are PPA (Personal Project Assistant), a senior project analyst.\n"
        "Current Team Data:\n"
        f"{build_data_summary(records)}\n"
        "\n"
        "Guidelines:\n"
        "- Be concise and professional.\n"
        '- Highlight -1 health scores as "CRITICAL RISKS".\n'
        "- Aggregate progress percentages when asked about general status.\n"
        "- Suggest specific team members to follow up with."
    )


def build_suggestion_prompt(project_name: str, description: str) -> str:
    return (
        f'Based on the project "{project_name}" with description "{description}", '
        f"suggest {SUGGESTION_COUNT} concrete next steps or tasks as a JSON array of strings."
    )


class AssistantGateway:
    """
    Sends prompts to the hosted model and returns its text.

    Usage:
        gateway = AssistantGateway(AssistantConfig(api_key="..."))
        if gateway.is_ready():
            answer = gateway.ask(store.records, "Which projects are at risk?")
    """

    def __init__(self, config: Optional[AssistantConfig] = None):
        self.config = config or AssistantConfig()

    def is_ready(self) -> bool:
        """True when an API key is configured."""
        return bool((self.config.api_key or "").strip())

    def ask(self, records: Sequence[UpdateRecord], question: str) -> str:
        """Answer a free-text question about the given records."""
        self._require_key()
        payload = {
            "systemInstruction": {"parts": [{"text": build_system_instruction(records)}]},
            "contents": [{"role": "user", "parts": [{"text": question}]}],
        }
        if self.config.temperature is not None:
            payload["generationConfig"] = {"temperature": self.config.temperature}
        return self._generate(payload)

    def suggest_tasks(self, project_name: str, description: str = "") -> List[str]:
        """
        Ask for next-step tasks for a project.

        Returns an empty list when the reply is not a JSON array.
        """
        self._require_key()
        payload = {
            "contents": [{"role": "user", "parts": [{"text": build_suggestion_prompt(project_name, description)}]}],
            "generationConfig": {
                "responseMimeType": "application/json",
                "responseSchema": {"type": "ARRAY", "items": {"type": "STRING"}},
            },
        }
        text = self._generate(payload)
        return parse_suggestions(text)

    def _require_key(self):
        if not self.is_ready():
            logger.warning("Gemini API key is missing. AI features are disabled.")
            raise ConfigurationError("API_KEY_MISSING")

    def _endpoint(self) -> str:
        model_name = self.config.model.strip()
        if not model_name.startswith("models/"):
            model_name = f"models/{model_name}"
        return f"{GEMINI_API_BASE}/{model_name}:generateContent"

    def _generate(self, payload: Dict[str, Any]) -> str:
        """Call Google Gemini API and return the reply text."""
        try:
            resp = requests.post(
                self._endpoint(),
                headers={"Content-Type": "application/json"},
                params={"key": self.config.api_key.strip()},
                json=payload,
                timeout=self.config.timeout,
            )
            resp.raise_for_status()
            data = resp.json()
        except requests.RequestException as e:
            logger.error(f"Gemini request failed: {type(e).__name__}")
            raise UpstreamError(f"Assistant request failed: {type(e).__name__}") from e
        except ValueError as e:
            logger.error("Gemini returned a non-JSON response")
            raise UpstreamError("Assistant returned a non-JSON response") from e

        return extract_text(data)


def extract_text(data: Any) -> str:
    """Pull the reply text out of a generateContent response."""
    try:
        parts = data["candidates"][0]["content"]["parts"]
        text = "".join(part.get("text", "") for part in parts)
    except (KeyError, IndexError, TypeError, AttributeError) as e:
        logger.error(f"Unexpected Gemini response shape: {e!r}")
        raise UpstreamError("Assistant response had no text") from e
    return text.strip()


def parse_suggestions(text: str) -> List[str]:
    """Parse a JSON array of strings; anything else gives an empty list."""
    try:
        items = json.loads((text or "").strip() or "[]")
    except ValueError:
        logger.error("Failed to parse AI suggestions")
        return []
    if not isinstance(items, list):
        logger.error("AI suggestions were not a JSON array")
        return []
    return [str(item).strip() for item in items if isinstance(item, str) and item.strip()]
