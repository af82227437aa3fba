"""
Data Transfer Objects (DTOs) do Domínio de Pessoas.

O hash da senha nunca aparece em DTOs de saída.
"""

from dataclasses import dataclass, field
from datetime import date
from typing import List, Optional

from src.core.shared.exceptions import ValidationError
from src.core.shared.formatos import formatar_data

from .entities import PessoaEntity


def _texto(valor) -> str:
    return "" if valor is None else str(valor)


# =============================================================================
# INPUT DTOs (Entrada)
# =============================================================================

@dataclass(frozen=True)
class PessoaInputDTO:
    """
    DTO de entrada para criar/atualizar cliente ou técnico.

    Attributes:
        nome: Nome completo
        cpf: CPF
        email: E-mail de login
        senha: Senha em texto puro (obrigatória na criação; vazia mantém a atual)
        perfis: Nomes ou códigos de perfis solicitados (ex: ("ADMIN",))
    """

    nome: str
    cpf: str
    email: str
    senha: Optional[str] = None
    perfis: tuple = field(default_factory=tuple)

    @classmethod
    def from_dict(cls, data: dict) -> "PessoaInputDTO":
        """Constrói DTO a partir do corpo JSON (campos ausentes viram vazio)."""
        perfis = data.get("perfis")
        if perfis is None:
            perfis = ()
        elif isinstance(perfis, bool):
            raise ValidationError("Perfis inválidos", field="perfis")
        elif isinstance(perfis, (str, int)):
            perfis = (perfis,)
        elif not isinstance(perfis, (list, tuple)):
            raise ValidationError("Perfis inválidos", field="perfis")

        return cls(
            nome=_texto(data.get("nome")),
            cpf=_texto(data.get("cpf")),
            email=_texto(data.get("email")),
            senha=_texto(data.get("senha")) or None,
            perfis=tuple(perfis),
        )


# =============================================================================
# OUTPUT DTOs (Saída)
# =============================================================================

@dataclass
class PessoaOutputDTO:
    """
    DTO de saída de cliente ou técnico.

    Attributes:
        id: Identificador
        nome: Nome
        cpf: CPF
        email: E-mail
        perfis: Nomes dos perfis, ordenados pelo código
        data_criacao: Data de cadastro
    """

    id: int
    nome: str
    cpf: str
    email: str
    data_criacao: date
    perfis: List[str] = field(default_factory=list)

    @classmethod
    def from_entity(cls, entity: PessoaEntity) -> "PessoaOutputDTO":
        return cls(
            id=entity.id,
            nome=entity.nome,
            cpf=entity.cpf,
            email=entity.email,
            data_criacao=entity.data_criacao,
            perfis=[p.name for p in sorted(entity.perfis, key=lambda p: p.value)],
        )

    def to_dict(self) -> dict:
        """Converte para dicionário (serialização JSON)."""
        return {
            "id": self.id,
            "nome": self.nome,
            "cpf": self.cpf,
            "email": self.email,
            "perfis": self.perfis,
            "data_criacao": formatar_data(self.data_criacao),
        }
