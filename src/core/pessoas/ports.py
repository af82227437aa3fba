"""
Ports (Interfaces) do Domínio de Pessoas.

Clientes e técnicos ficam no mesmo repositório porque CPF e e-mail
são únicos no conjunto de todas as pessoas. As buscas por CPF e
e-mail, portanto, ignoram o tipo.

Princípio:
    Core define interfaces → Adapters implementam
"""

from typing import Dict, List, Optional, Protocol, runtime_checkable

from .entities import PessoaEntity, TipoPessoa


@runtime_checkable
class PessoaRepository(Protocol):
    """
    Interface para persistência de Pessoas.

    Implementações:
    - DjangoPessoaRepository (ORM)
    - InMemoryPessoaRepository (para testes)
    """

    def save(self, pessoa: PessoaEntity) -> PessoaEntity:
        """
        Persiste pessoa (create ou update).

        Em uma criação, o id gerado é atribuído à entidade.

        Raises:
            ConflictError: Se o banco rejeitar CPF/e-mail duplicado
        """
        ...

    def get_by_id(self, pessoa_id: int) -> Optional[PessoaEntity]:
        ...

    def get_by_cpf(self, cpf: str) -> Optional[PessoaEntity]:
        """Busca em clientes e técnicos."""
        ...

    def get_by_email(self, email: str) -> Optional[PessoaEntity]:
        """Busca em clientes e técnicos."""
        ...

    def list_by_tipo(self, tipo: TipoPessoa) -> List[PessoaEntity]:
        ...

    def delete(self, pessoa_id: int) -> None:
        """
        Remove pessoa.

        Raises:
            ConflictError: Se a pessoa ainda estiver vinculada a chamados
        """
        ...


class InMemoryPessoaRepository:
    """
    Implementação em memória do PessoaRepository.

    Útil para testes unitários e prototipagem. Não usar em produção!

    Example:
        repo = InMemoryPessoaRepository()
        repo.save(pessoa)
        found = repo.get_by_email("ada@mail.com")
    """

    def __init__(self):
        self._pessoas: Dict[int, PessoaEntity] = {}
        self._proximo_id = 1

    def save(self, pessoa: PessoaEntity) -> PessoaEntity:
        if pessoa.id is None:
            pessoa.id = self._proximo_id
            self._proximo_id += 1
        self._pessoas[pessoa.id] = pessoa
        return pessoa

    def get_by_id(self, pessoa_id: int) -> Optional[PessoaEntity]:
        return self._pessoas.get(pessoa_id)

    def get_by_cpf(self, cpf: str) -> Optional[PessoaEntity]:
        return next((p for p in self._pessoas.values() if p.cpf == cpf), None)

    def get_by_email(self, email: str) -> Optional[PessoaEntity]:
        return next((p for p in self._pessoas.values() if p.email == email), None)

    def list_by_tipo(self, tipo: TipoPessoa) -> List[PessoaEntity]:
        return [p for p in self._pessoas.values() if p.tipo is tipo]

    def delete(self, pessoa_id: int) -> None:
        self._pessoas.pop(pessoa_id, None)

    def clear(self) -> None:
        """Limpa todos os dados (útil para testes)."""
        self._pessoas.clear()
        self._proximo_id = 1


@runtime_checkable
class VinculoChamados(Protocol):
    """
    Consulta de vínculo pessoa → chamados.

    Implementada pelos repositórios de chamados; usada para recusar a
    exclusão de pessoas que ainda abriram ou atendem chamados.
    """

    def exists_by_pessoa(self, pessoa_id: int) -> bool:
        ...
