from abc import ABC, abstractmethod


class BaseNotesClient(ABC):
    """Contract for provider-specific notes generation AI clients."""

    @abstractmethod
    async def create_completion(
        self,
        *,
        model: str,
        temperature: float,
        system_prompt: str,
        user_prompt: str,
    ) -> str:
        """Return provider response as plain text."""
