"""Optional provider capabilities."""
from abc import ABC, abstractmethod
from typing import List

from pydantic import BaseModel

from llmprovider.llm.models import ModelInfo, ResolutionInput


class DynamicModelsMixin(BaseModel, ABC):
    """Capability for providers that can list their models from the backend.

    Mix this into a provider class to have ``supports_dynamic_fetch`` report
    ``True``; the registry only calls ``get_dynamic_models`` on such providers.
    """

    @abstractmethod
    async def get_dynamic_models(self, resolution_input: ResolutionInput) -> List[ModelInfo]:
        """Fetch the current model list from the backend.

        Raises:
            DynamicModelFetchError: If the backend cannot be reached or answers
                with something unusable.
        """
