"""
Masking Utility
Oculta segredos (chaves de API) antes de exibir configuração
"""
from typing import Optional

MASK_CHAR = '*'


def mask_secret(secret: Optional[str]) -> Optional[str]:
    """
    Substitui o prefixo do segredo por '*'

    - len >= 4: oculta max(len - 4, len // 2) caracteres
    - len < 4: oculta len // 2 caracteres

    Examples:
        >>> mask_secret("abcdefghij")
        '******ghij'
        >>> mask_secret("abc")
        '*bc'
    """
    if secret is None:
        return None

    length = len(secret)
    if length >= 4:
        hide = max(length - 4, length // 2)
    else:
        hide = length // 2
    return MASK_CHAR * hide + secret[hide:]
