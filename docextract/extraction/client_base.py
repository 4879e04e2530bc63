from abc import ABC, abstractmethod

from docextract.processor.models import EncodedFile


class BaseModelClient(ABC):
    """Contract for provider-specific document-understanding clients."""

    @abstractmethod
    async def generate(
        self,
        *,
        model: str,
        temperature: float,
        document: EncodedFile,
        instruction: str,
        json_schema: dict[str, object],
    ) -> str:
        """Send one document with an instruction and return the raw text reply.

        Raises:
            ModelError: if the call fails or the reply carries no text.
        """
