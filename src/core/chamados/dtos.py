"""
Data Transfer Objects (DTOs) do Domínio de Chamados.

Enums são serializados pelo nome (ex: "ALTA") e datas como dd/MM/yyyy.
Na entrada, prioridade e status aceitam nome ou código numérico.
"""

from dataclasses import dataclass
from datetime import date
from typing import Any, Optional

from src.core.shared.formatos import formatar_data

from .entities import ChamadoEntity


# =============================================================================
# INPUT DTOs (Entrada)
# =============================================================================

@dataclass(frozen=True)
class ChamadoInputDTO:
    """
    DTO de entrada para abrir/atualizar chamado.

    Valores crus: a conversão de prioridade/status e a resolução de
    técnico/cliente ficam com o service.

    Attributes:
        titulo: Título
        prioridade: Nome ou código da prioridade
        tecnico_id: Id do técnico
        cliente_id: Id do cliente
        status: Nome ou código do status (None mantém o atual)
        observacoes: Texto livre
    """

    titulo: str
    prioridade: Any
    tecnico_id: Optional[int]
    cliente_id: Optional[int]
    status: Any = None
    observacoes: Optional[str] = None

    @classmethod
    def from_dict(cls, data: dict) -> "ChamadoInputDTO":
        """Constrói DTO a partir do corpo JSON (chaves 'tecnico' e 'cliente')."""
        return cls(
            titulo="" if data.get("titulo") is None else str(data["titulo"]),
            prioridade=data.get("prioridade"),
            tecnico_id=data.get("tecnico"),
            cliente_id=data.get("cliente"),
            status=data.get("status"),
            observacoes=data.get("observacoes"),
        )


# =============================================================================
# OUTPUT DTOs (Saída)
# =============================================================================

@dataclass
class ChamadoOutputDTO:
    """
    DTO de saída de chamado.

    nome_tecnico e nome_cliente são resolvidos pelo service.
    """

    id: int
    titulo: str
    observacoes: Optional[str]
    prioridade: str
    status: str
    tecnico_id: int
    cliente_id: int
    data_abertura: date
    data_fechamento: Optional[date]
    nome_tecnico: Optional[str] = None
    nome_cliente: Optional[str] = None

    @classmethod
    def from_entity(
        cls,
        entity: ChamadoEntity,
        nome_tecnico: Optional[str] = None,
        nome_cliente: Optional[str] = None,
    ) -> "ChamadoOutputDTO":
        return cls(
            id=entity.id,
            titulo=entity.titulo,
            observacoes=entity.observacoes,
            prioridade=entity.prioridade.name,
            status=entity.status.name,
            tecnico_id=entity.tecnico_id,
            cliente_id=entity.cliente_id,
            data_abertura=entity.data_abertura,
            data_fechamento=entity.data_fechamento,
            nome_tecnico=nome_tecnico,
            nome_cliente=nome_cliente,
        )

    def to_dict(self) -> dict:
        """Converte para dicionário (serialização JSON)."""
        return {
            "id": self.id,
            "data_abertura": formatar_data(self.data_abertura),
            "data_fechamento": formatar_data(self.data_fechamento),
            "prioridade": self.prioridade,
            "status": self.status,
            "titulo": self.titulo,
            "observacoes": self.observacoes,
            "tecnico": self.tecnico_id,
            "cliente": self.cliente_id,
            "nome_tecnico": self.nome_tecnico,
            "nome_cliente": self.nome_cliente,
        }
