"""
Input Port: Interface para listar providers e suas configurações
"""
from abc import ABC, abstractmethod
from application.dtos.responses import ProvidersInfoResponse


class IGetProvidersInfoUseCase(ABC):
    """Interface para caso de uso de exibir providers configurados"""

    @abstractmethod
    def execute(self) -> ProvidersInfoResponse:
        """
        Lista o provider ativo e a configuração de cada provider conhecido

        Returns:
            ProvidersInfoResponse com chaves de API mascaradas
        """
        pass
