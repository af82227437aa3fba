"""
Fixtures compartilhadas pelos testes do Core.

Nada aqui toca o Django: repositórios em memória, Unit of Work fake,
hasher e serviço de token determinísticos.
"""

from typing import Any, Dict, Optional

import pytest

from src.core.chamados.entities import ChamadoEntity, ChamadoPrioridade, ChamadoStatus
from src.core.chamados.ports import InMemoryChamadoRepository
from src.core.pessoas.entities import PessoaEntity, TipoPessoa
from src.core.pessoas.ports import InMemoryPessoaRepository
from src.core.shared.interfaces import PasswordHasher, TokenService
from src.core.shared.principal import Perfil


class FakeUnitOfWork:
    """
    Fake Unit of Work para testes.

    Permite verificar commit/rollback sem banco.
    """

    def __init__(self):
        self._committed = False
        self._rolled_back = False

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        if exc_type is not None:
            self.rollback()
        else:
            self.commit()
        return False

    def _begin_transaction(self):
        pass

    def commit(self):
        self._committed = True

    def rollback(self):
        self._rolled_back = True

    @property
    def committed(self) -> bool:
        return self._committed

    @property
    def rolled_back(self) -> bool:
        return self._rolled_back


class FakePasswordHasher(PasswordHasher):
    """Hash reversível e previsível ("hash:<senha>")."""

    def hash(self, senha: str) -> str:
        return f"hash:{senha}"

    def verify(self, senha: str, senha_hash: str) -> bool:
        return senha_hash == f"hash:{senha}"


class FakeTokenService(TokenService):
    """Tokens opacos guardados em memória."""

    def __init__(self):
        self._emitidos: Dict[str, Dict[str, Any]] = {}

    def issue(self, subject: str, claims: Optional[Dict[str, Any]] = None) -> str:
        token = f"token-{len(self._emitidos) + 1}"
        self._emitidos[token] = {**(claims or {}), "sub": subject}
        return token

    def verify(self, token: str) -> Optional[Dict[str, Any]]:
        return self._emitidos.get(token)

    def claims(self, token: str) -> Dict[str, Any]:
        return self._emitidos[token]


@pytest.fixture
def pessoa_repo():
    """Fixture para repositório de pessoas em memória."""
    return InMemoryPessoaRepository()


@pytest.fixture
def chamado_repo():
    """Fixture para repositório de chamados em memória."""
    return InMemoryChamadoRepository()


@pytest.fixture
def uow():
    """Fixture para Unit of Work fake."""
    return FakeUnitOfWork()


@pytest.fixture
def hasher():
    return FakePasswordHasher()


@pytest.fixture
def token_service():
    return FakeTokenService()


@pytest.fixture
def criar_pessoa(pessoa_repo, hasher):
    """Factory: persiste uma pessoa no repositório em memória."""

    def _criar(tipo, nome, cpf, email, senha="123", perfis=()):
        pessoa = PessoaEntity.criar(
            tipo=tipo,
            nome=nome,
            cpf=cpf,
            email=email,
            senha_hash=hasher.hash(senha),
            perfis=perfis,
        )
        return pessoa_repo.save(pessoa)

    return _criar


@pytest.fixture
def admin(criar_pessoa):
    """Técnico com perfil ADMIN."""
    return criar_pessoa(TipoPessoa.TECNICO, "admin", "00000000000", "admin@mail.com", perfis=[Perfil.ADMIN])


@pytest.fixture
def tecnico(criar_pessoa):
    return criar_pessoa(TipoPessoa.TECNICO, "Bill Gates", "76045777093", "bill@mail.com")


@pytest.fixture
def outro_tecnico(criar_pessoa):
    return criar_pessoa(TipoPessoa.TECNICO, "Ada Lovelace", "98765432100", "ada@mail.com")


@pytest.fixture
def cliente(criar_pessoa):
    return criar_pessoa(TipoPessoa.CLIENTE, "Linus Torvalds", "70511744013", "linus@mail.com")


@pytest.fixture
def outro_cliente(criar_pessoa):
    return criar_pessoa(TipoPessoa.CLIENTE, "Guido van Rossum", "70511744014", "guido@mail.com")


@pytest.fixture
def criar_chamado(chamado_repo):
    """Factory: persiste um chamado no repositório em memória."""

    def _criar(tecnico, cliente, titulo="Erro ao acessar VPN",
               prioridade=ChamadoPrioridade.MEDIA, status=None):
        chamado = ChamadoEntity.criar(
            titulo=titulo,
            prioridade=prioridade,
            tecnico_id=tecnico.id,
            cliente_id=cliente.id,
            status=status,
        )
        return chamado_repo.save(chamado)

    return _criar


@pytest.fixture
def chamado_encerrado(criar_chamado, tecnico, cliente):
    return criar_chamado(tecnico, cliente, titulo="Atualização de antivírus", status=ChamadoStatus.ENCERRADO)
