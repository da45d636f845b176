"""Utilitários compartilhados"""
from shared.utils.masking import mask_secret

__all__ = ['mask_secret']
