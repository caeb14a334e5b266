"""OpenRouter chat-completion client used as the last-resort device lookup."""

import json
import logging
import re
from typing import Any, Dict, List, Optional

import requests

from src.device_lookup.config import (
    DEVICE_SPECS_SYSTEM_PROMPT,
    OPENROUTER_API_KEY,
    OPENROUTER_MAX_TOKENS,
    OPENROUTER_MODELS,
    OPENROUTER_REFERER,
    OPENROUTER_TEMPERATURE,
    OPENROUTER_TIMEOUT_SECONDS,
    OPENROUTER_TITLE,
    OPENROUTER_URL,
)
from src.device_lookup.models import DeviceSpecs

logger = logging.getLogger(__name__)

_JSON_OBJECT = re.compile(r"\{.*\}", re.DOTALL)


class OpenRouterClient:
    """Ask a list of free chat models for device specs, first usable answer wins."""

    def __init__(
        self,
        api_key: Optional[str] = None,
        models: Optional[List[str]] = None,
        timeout_seconds: int = OPENROUTER_TIMEOUT_SECONDS,
        session: Optional[requests.Session] = None,
    ):
        self.api_key = OPENROUTER_API_KEY if api_key is None else api_key
        self.models = list(models) if models is not None else list(OPENROUTER_MODELS)
        self.timeout_seconds = timeout_seconds
        self.session = session or requests.Session()

    def query_device_specs(self, device_name: str) -> Optional[DeviceSpecs]:
        """Query each configured model in turn.

        Returns:
            :class:`DeviceSpecs` from the first model that answers with a
            parseable JSON object, or None if every model fails or no API
            key is configured.
        """
        if not self.api_key:
            logger.warning("OPENROUTER_API_KEY not set, skipping AI device lookup")
            return None

        for model in self.models:
            try:
                content = self._complete(model, device_name)
            except requests.RequestException as e:
                logger.error("Model %s request failed: %s", model, e)
                continue

            if not content:
                continue

            specs = self._parse_specs(content)
            if specs is None:
                logger.warning("Model %s returned no usable JSON", model)
                continue

            logger.info("Got specs for %r from %s", device_name, model)
            return specs

        return None

    def _complete(self, model: str, device_name: str) -> Optional[str]:
        """POST one chat completion; return the message content or None."""
        response = self.session.post(
            OPENROUTER_URL,
            headers=self._headers(),
            json=self._payload(model, device_name),
            timeout=self.timeout_seconds,
        )

        if response.status_code >= 400:
            logger.error("Model %s failed with status %d", model, response.status_code)
            return None

        try:
            data = response.json()
        except ValueError:
            logger.error("Model %s did not return valid JSON", model)
            return None

        choices = data.get("choices") if isinstance(data, dict) else None
        if not isinstance(choices, list) or not choices or not isinstance(choices[0], dict):
            return None
        message = choices[0].get("message") or {}
        return message.get("content")

    def _headers(self) -> Dict[str, str]:
        return {
            "Authorization": f"Bearer {self.api_key}",
            "Content-Type": "application/json",
            "HTTP-Referer": OPENROUTER_REFERER,
            "X-Title": OPENROUTER_TITLE,
        }

    @staticmethod
    def _payload(model: str, device_name: str) -> Dict[str, Any]:
        return {
            "model": model,
            "messages": [
                {"role": "system", "content": DEVICE_SPECS_SYSTEM_PROMPT},
                {
                    "role": "user",
                    "content": f"Get specifications for this mobile device: {device_name}",
                },
            ],
            "temperature": OPENROUTER_TEMPERATURE,
            "max_tokens": OPENROUTER_MAX_TOKENS,
        }

    @staticmethod
    def _parse_specs(content: str) -> Optional[DeviceSpecs]:
        """Extract the outermost ``{...}`` block, tolerating markdown around it."""
        match = _JSON_OBJECT.search(content)
        if not match:
            return None
        try:
            data = json.loads(match.group(0))
        except json.JSONDecodeError:
            return None
        if not isinstance(data, dict):
            return None
        return DeviceSpecs.from_dict(data)
