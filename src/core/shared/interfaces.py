"""
Interfaces (Ports) - Contratos entre Core e Adapters.

Este módulo define as interfaces que os Adapters devem implementar.
São os "Ports" da Arquitetura Hexagonal.

Tipos de Ports:
- UnitOfWork: transação atômica
- PasswordHasher: função de hash de senha (opaca para o Core)
- TokenService: emissão/verificação de credencial assinada (opaca para o Core)

Princípio: Core define interfaces; Adapters implementam.
O fluxo de dependência sempre aponta para o Core.
"""

from abc import ABC, abstractmethod
from typing import Any, Dict, Optional


class UnitOfWork(ABC):
    """
    Unit of Work - Coordena transações atômicas.

    Pattern: Context Manager
        with uow:
            repo.save(entity1)
            repo.save(entity2)
        # Commit automático ao sair sem erro
        # Rollback automático se exceção

    Example:
        class DjangoUnitOfWork(UnitOfWork):
            def commit(self):
                ...
    """

    def __enter__(self) -> "UnitOfWork":
        self._begin_transaction()
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> bool:
        if exc_type is not None:
            self.rollback()
        else:
            self.commit()
        return False  # Não suprime exceções

    @abstractmethod
    def _begin_transaction(self) -> None:
        raise NotImplementedError

    @abstractmethod
    def commit(self) -> None:
        raise NotImplementedError

    @abstractmethod
    def rollback(self) -> None:
        raise NotImplementedError


class PasswordHasher(ABC):
    """
    Função de hash de senha de mão única.

    O Core nunca conhece o algoritmo; apenas gera e compara hashes.
    """

    @abstractmethod
    def hash(self, senha: str) -> str:
        raise NotImplementedError

    @abstractmethod
    def verify(self, senha: str, senha_hash: str) -> bool:
        raise NotImplementedError


class TokenService(ABC):
    """
    Emissão e verificação de credenciais assinadas (stateless).

    O servidor não guarda sessão: tudo que é necessário para
    identificar o usuário está no próprio token.
    """

    @abstractmethod
    def issue(self, subject: str, claims: Optional[Dict[str, Any]] = None) -> str:
        """
        Emite token para o subject (e-mail).

        Args:
            subject: Identificador de login
            claims: Claims adicionais (id, perfis)

        Returns:
            Token assinado
        """
        raise NotImplementedError

    @abstractmethod
    def verify(self, token: str) -> Optional[Dict[str, Any]]:
        """
        Verifica assinatura e expiração.

        Returns:
            Claims do token, ou None se inválido/expirado
        """
        raise NotImplementedError
