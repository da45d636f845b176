"""
Use Case: Get Providers Info
Lista provider ativo e configuração de cada provider (chave mascarada)
"""
from typing import Any, Dict, Mapping, Optional

from application.dtos.responses import ProviderSettings, ProvidersInfoResponse
from application.ports.input.get_providers_info_port import IGetProvidersInfoUseCase
from domain.constants import Config
from infrastructure.adapters.output.providers.provider_manager import ProviderManager
from shared.config.settings import ConfigSnapshot, get_active_provider
from shared.utils.masking import mask_secret


class GetProvidersInfoUseCase(IGetProvidersInfoUseCase):
    """Use case: show configured providers without leaking API keys"""

    def __init__(self, provider_manager: ProviderManager, config: ConfigSnapshot):
        self.provider_manager = provider_manager
        self.config = config

    def execute(self) -> ProvidersInfoResponse:
        providers = [
            ProviderSettings(name=name, settings=self._masked_section(name))
            for name in sorted(self.provider_manager.list_providers())
        ]
        return ProvidersInfoResponse(
            active_provider=get_active_provider(self.config),
            providers=providers
        )

    def _masked_section(self, name: str) -> Optional[Dict[str, Any]]:
        section = self.config.get(name)
        if not isinstance(section, Mapping):
            return None

        masked = dict(section)
        api_key = masked.get(Config.API_KEY)
        if isinstance(api_key, str):
            masked[Config.API_KEY] = mask_secret(api_key)
        return masked
