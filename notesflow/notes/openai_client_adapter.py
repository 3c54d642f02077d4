import httpx
import openai

from notesflow.notes.client_base import BaseNotesClient
from notesflow.notes.exceptions import GenerationError, GenerationNetworkError


class OpenAIClientAdapter(BaseNotesClient):
    """Notes AI client adapter built on the OpenAI-compatible chat API."""

    def __init__(
        self,
        *,
        api_key: str,
        timeout_seconds: int,
        base_url: str | None = None,
    ) -> None:
        self._client = openai.AsyncOpenAI(
            api_key=api_key,
            timeout=timeout_seconds,
            base_url=base_url,
        )

    async def create_completion(
        self,
        *,
        model: str,
        temperature: float,
        system_prompt: str,
        user_prompt: str,
    ) -> str:
        try:
            response = await self._client.chat.completions.create(
                model=model,
                temperature=temperature,
                messages=[
                    {"role": "system", "content": system_prompt},
                    {"role": "user", "content": user_prompt},
                ],
            )
        except (openai.APIConnectionError, httpx.ConnectError, httpx.TimeoutException) as exc:
            raise GenerationNetworkError(f"AI provider network error: {exc}") from exc
        except openai.APIError as exc:
            raise GenerationNetworkError(f"AI provider API error: {exc}") from exc

        if not response.choices:
            raise GenerationError("AI returned no choices")
        content = response.choices[0].message.content
        if content is None:
            raise GenerationError("AI returned empty response")
        return content
