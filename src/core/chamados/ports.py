"""
Ports (Interfaces) do Domínio de Chamados.

Princípio:
    Core define interfaces → Adapters implementam
"""

from typing import Dict, List, Optional, Protocol, runtime_checkable

from .entities import ChamadoEntity


@runtime_checkable
class ChamadoRepository(Protocol):
    """
    Interface para persistência de Chamados.

    Implementações:
    - DjangoChamadoRepository (ORM)
    - InMemoryChamadoRepository (para testes)

    As listagens filtradas existem para que o escopo de visibilidade
    seja aplicado na origem, e não depois de carregar tudo.
    """

    def save(self, chamado: ChamadoEntity) -> ChamadoEntity:
        """Persiste chamado; em uma criação, atribui o id gerado."""
        ...

    def get_by_id(self, chamado_id: int) -> Optional[ChamadoEntity]:
        ...

    def delete(self, chamado_id: int) -> None:
        ...

    def list_all(self) -> List[ChamadoEntity]:
        ...

    def list_by_cliente(self, cliente_id: int) -> List[ChamadoEntity]:
        ...

    def list_by_tecnico(self, tecnico_id: int) -> List[ChamadoEntity]:
        ...

    def exists_by_pessoa(self, pessoa_id: int) -> bool:
        """True se a pessoa é cliente ou técnico de algum chamado."""
        ...


class InMemoryChamadoRepository:
    """
    Implementação em memória do ChamadoRepository.

    Útil para testes unitários e prototipagem. Não usar em produção!
    """

    def __init__(self):
        self._chamados: Dict[int, ChamadoEntity] = {}
        self._proximo_id = 1

    def save(self, chamado: ChamadoEntity) -> ChamadoEntity:
        if chamado.id is None:
            chamado.id = self._proximo_id
            self._proximo_id += 1
        self._chamados[chamado.id] = chamado
        return chamado

    def get_by_id(self, chamado_id: int) -> Optional[ChamadoEntity]:
        return self._chamados.get(chamado_id)

    def delete(self, chamado_id: int) -> None:
        self._chamados.pop(chamado_id, None)

    def list_all(self) -> List[ChamadoEntity]:
        return list(self._chamados.values())

    def list_by_cliente(self, cliente_id: int) -> List[ChamadoEntity]:
        return [c for c in self._chamados.values() if c.cliente_id == cliente_id]

    def list_by_tecnico(self, tecnico_id: int) -> List[ChamadoEntity]:
        return [c for c in self._chamados.values() if c.tecnico_id == tecnico_id]

    def exists_by_pessoa(self, pessoa_id: int) -> bool:
        return any(
            pessoa_id in (c.cliente_id, c.tecnico_id)
            for c in self._chamados.values()
        )

    def clear(self) -> None:
        """Limpa todos os dados (útil para testes)."""
        self._chamados.clear()
        self._proximo_id = 1
