"""
Fixtures para testes com Django.

O banco (SQLite em memória) é criado pelo pytest-django a partir das
migrations; cada teste roda dentro de uma transação revertida ao final.
"""

import pytest


SENHA = "123"


@pytest.fixture
def pessoa_repo(db):
    from src.adapters.django_app.pessoas.repositories import DjangoPessoaRepository
    return DjangoPessoaRepository()


@pytest.fixture
def chamado_repo(db):
    from src.adapters.django_app.chamados.repositories import DjangoChamadoRepository
    return DjangoChamadoRepository()


@pytest.fixture
def hasher():
    from src.adapters.django_app.shared.security import DjangoPasswordHasher
    return DjangoPasswordHasher()


@pytest.fixture
def pessoa_factory(pessoa_repo, hasher):
    """Factory para persistir clientes/técnicos no banco."""
    from src.core.pessoas.entities import PessoaEntity, TipoPessoa

    def create_pessoa(nome, cpf, email, tecnico=False, admin=False):
        from src.core.shared.principal import Perfil

        pessoa = PessoaEntity.criar(
            tipo=TipoPessoa.TECNICO if tecnico else TipoPessoa.CLIENTE,
            nome=nome,
            cpf=cpf,
            email=email,
            senha_hash=hasher.hash(SENHA),
            perfis=[Perfil.ADMIN] if admin else [],
        )
        return pessoa_repo.save(pessoa)

    return create_pessoa


@pytest.fixture
def admin(pessoa_factory):
    return pessoa_factory("admin", "00000000000", "admin@mail.com", tecnico=True, admin=True)


@pytest.fixture
def tecnico(pessoa_factory):
    return pessoa_factory("Bill Gates", "76045777093", "bill@mail.com", tecnico=True)


@pytest.fixture
def cliente(pessoa_factory):
    return pessoa_factory("Linus Torvalds", "70511744013", "linus@mail.com")


@pytest.fixture
def outro_cliente(pessoa_factory):
    return pessoa_factory("Guido van Rossum", "70511744014", "guido@mail.com")


@pytest.fixture
def chamado_factory(chamado_repo):
    """Factory para persistir chamados no banco."""
    from src.core.chamados.entities import ChamadoEntity, ChamadoPrioridade

    def create_chamado(tecnico, cliente, titulo="Erro ao acessar VPN", status=None):
        chamado = ChamadoEntity.criar(
            titulo=titulo,
            prioridade=ChamadoPrioridade.MEDIA,
            tecnico_id=tecnico.id,
            cliente_id=cliente.id,
            status=status,
        )
        return chamado_repo.save(chamado)

    return create_chamado


@pytest.fixture
def auth_header():
    """
    Factory: header HTTP_AUTHORIZATION para a pessoa.

    O token é emitido pelo serviço de autenticação do container.
    """
    from src.config.container import get_container

    def header(pessoa):
        token = get_container().autenticacao_service().autenticar(pessoa.email, SENHA)
        return {"HTTP_AUTHORIZATION": f"Bearer {token}"}

    return header
