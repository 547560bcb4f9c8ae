"""OpenAI chat completions client for macro estimation."""

import json
from dataclasses import dataclass

from openai import AsyncOpenAI, OpenAIError

from macro_tracker.domain.errors import EstimationError
from macro_tracker.services.estimator import EstimationClient


@dataclass
class OpenAIMacroClient(EstimationClient):
    """Estimation client forcing a function call on the chat completions API."""

    client: AsyncOpenAI

    @classmethod
    def create(cls, api_key: str, timeout: float) -> "OpenAIMacroClient":
        """Create an OpenAI client with a request timeout and no retries."""
        return cls(client=AsyncOpenAI(api_key=api_key, timeout=timeout, max_retries=0))

    async def call_function(
        self,
        *,
        model: str,
        messages: list[dict[str, str]],
        function: dict[str, object],
    ) -> dict[str, object]:
        """Call the model and decode the function call arguments."""
        try:
            response = await self.client.chat.completions.create(
                model=model,
                messages=messages,
                functions=[function],
                function_call={"name": function["name"]},
            )
        except OpenAIError as exc:
            raise EstimationError(f"OpenAI request failed: {exc}") from exc
        try:
            arguments = response.choices[0].message.function_call.arguments
            payload = json.loads(arguments)
        except (AttributeError, IndexError, TypeError, ValueError) as exc:
            raise EstimationError("OpenAI returned a malformed function call") from exc
        if not isinstance(payload, dict):
            raise EstimationError("OpenAI function arguments are not an object")
        return payload

    async def close(self) -> None:
        """Close the underlying HTTP client."""
        await self.client.close()
