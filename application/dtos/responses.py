"""Response DTOs - Contratos de saída dos use cases"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Mapping, Optional


@dataclass(frozen=True)
class ProviderSettings:
    """Configuração de um provider já com a chave de API mascarada"""
    name: str
    settings: Optional[Mapping[str, Any]] = None

    @property
    def is_configured(self) -> bool:
        return self.settings is not None

    def to_dict(self) -> Dict[str, Any]:
        return {
            'name': self.name,
            'settings': dict(self.settings) if self.settings is not None else None,
        }


@dataclass(frozen=True)
class ProvidersInfoResponse:
    """Provider ativo + configuração de cada provider conhecido"""
    active_provider: Optional[str]
    providers: List[ProviderSettings] = field(default_factory=list)

    def get(self, name: str) -> Optional[ProviderSettings]:
        return next((p for p in self.providers if p.name == name), None)

    def to_dict(self) -> Dict[str, Any]:
        return {
            'activeProvider': self.active_provider,
            'providers': [p.to_dict() for p in self.providers],
        }
