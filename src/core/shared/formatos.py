"""Formatos de data usados na serialização para a API."""

from datetime import date
from typing import Optional

FORMATO_DATA = "%d/%m/%Y"


def formatar_data(valor: Optional[date]) -> Optional[str]:
    """Formata data como dd/MM/yyyy (None permanece None)."""
    if valor is None:
        return None
    return valor.strftime(FORMATO_DATA)
