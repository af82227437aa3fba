"""
Principal - identidade autenticada associada a uma requisição.

O Principal é resolvido uma única vez na borda HTTP (a partir do token)
e passado explicitamente para cada serviço. Nenhum serviço consulta
estado global para descobrir quem está chamando.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import FrozenSet, Iterable


class Perfil(Enum):
    """
    Perfis de acesso.

    Códigos numéricos preservados para compatibilidade com
    clientes que enviam o perfil como inteiro.
    """

    ADMIN = 0
    CLIENTE = 1
    TECNICO = 2

    @classmethod
    def from_value(cls, value) -> "Perfil":
        """
        Converte nome ("ADMIN", "ROLE_ADMIN") ou código (0) em Perfil.

        Raises:
            ValueError: Se valor inválido
        """
        if isinstance(value, Perfil):
            return value

        if isinstance(value, int) and not isinstance(value, bool):
            for perfil in cls:
                if perfil.value == value:
                    return perfil
            raise ValueError(f"Perfil inválido: {value}")

        nome = str(value).strip().upper()
        if nome.startswith("ROLE_"):
            nome = nome[len("ROLE_"):]
        try:
            return cls[nome]
        except KeyError:
            raise ValueError(f"Perfil inválido: {value}")


@dataclass(frozen=True)
class Principal:
    """
    Usuário autenticado: id numérico + conjunto de perfis.

    Attributes:
        id: ID da pessoa autenticada
        email: E-mail usado no login
        perfis: Perfis atuais da pessoa
    """

    id: int
    email: str = ""
    perfis: FrozenSet[Perfil] = field(default_factory=frozenset)

    @classmethod
    def de(cls, id: int, perfis: Iterable[Perfil], email: str = "") -> "Principal":
        return cls(id=id, email=email, perfis=frozenset(perfis))

    def has_any(self, *perfis: Perfil) -> bool:
        return any(p in self.perfis for p in perfis)

    @property
    def is_admin(self) -> bool:
        return Perfil.ADMIN in self.perfis

    @property
    def is_tecnico(self) -> bool:
        return Perfil.TECNICO in self.perfis

    @property
    def is_cliente_apenas(self) -> bool:
        """Cliente comum: sem ADMIN nem TECNICO."""
        return not self.has_any(Perfil.ADMIN, Perfil.TECNICO)
