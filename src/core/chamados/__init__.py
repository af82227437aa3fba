"""
Domínio de Chamados.

Exports principais:
- ChamadoEntity, ChamadoStatus, ChamadoPrioridade
- ChamadoRepository, InMemoryChamadoRepository
- ChamadoService
"""

from .entities import ChamadoEntity, ChamadoStatus, ChamadoPrioridade
from .ports import ChamadoRepository, InMemoryChamadoRepository
from .dtos import ChamadoInputDTO, ChamadoOutputDTO
from .use_cases import ChamadoService

__all__ = [
    "ChamadoEntity",
    "ChamadoStatus",
    "ChamadoPrioridade",
    "ChamadoRepository",
    "InMemoryChamadoRepository",
    "ChamadoInputDTO",
    "ChamadoOutputDTO",
    "ChamadoService",
]
