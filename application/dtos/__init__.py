"""Application DTOs - Data Transfer Objects para contratos de saída"""

from application.dtos.responses import ProviderSettings, ProvidersInfoResponse

__all__ = [
    'ProviderSettings',
    'ProvidersInfoResponse'
]
