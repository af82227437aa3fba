"""
Testes de Integração para os repositórios Django, Unit of Work e
adapters de segurança.

Usa banco SQLite em memória criado pelas migrations.
"""

import pytest

from src.adapters.django_app.shared.security import JoseTokenService
from src.adapters.django_app.shared.unit_of_work import DjangoUnitOfWork
from src.core.chamados.entities import ChamadoStatus
from src.core.pessoas.entities import TipoPessoa
from src.core.shared.exceptions import ConflictError
from src.core.shared.principal import Perfil


@pytest.mark.django_db
class TestDjangoPessoaRepository:
    def test_save_atribui_id(self, pessoa_repo, admin):
        assert admin.id is not None

        encontrado = pessoa_repo.get_by_id(admin.id)
        assert encontrado.tipo is TipoPessoa.TECNICO
        assert encontrado.perfis == {Perfil.ADMIN, Perfil.TECNICO}

    def test_busca_por_cpf_e_email_ignora_tipo(self, pessoa_repo, tecnico, cliente):
        assert pessoa_repo.get_by_cpf(tecnico.cpf).id == tecnico.id
        assert pessoa_repo.get_by_email(cliente.email).id == cliente.id
        assert pessoa_repo.get_by_email("ninguem@mail.com") is None

    def test_list_by_tipo(self, pessoa_repo, admin, tecnico, cliente):
        tecnicos = pessoa_repo.list_by_tipo(TipoPessoa.TECNICO)
        assert [t.id for t in tecnicos] == [admin.id, tecnico.id]

    def test_update(self, pessoa_repo, cliente):
        cliente.atualizar_dados("Linus B. Torvalds", cliente.cpf, cliente.email)
        pessoa_repo.save(cliente)

        assert pessoa_repo.get_by_id(cliente.id).nome == "Linus B. Torvalds"

    def test_unique_do_banco_vira_conflict(self, pessoa_factory, cliente):
        with pytest.raises(ConflictError) as exc:
            pessoa_factory("Outro Linus", cliente.cpf, "outro@mail.com")
        assert exc.value.message == "CPF ou Email já cadastrados no sistema."

    def test_delete_protegido_por_chamados(self, pessoa_repo, chamado_factory, tecnico, cliente):
        chamado_factory(tecnico, cliente)

        with pytest.raises(ConflictError):
            pessoa_repo.delete(cliente.id)
        assert pessoa_repo.get_by_id(cliente.id) is not None

    def test_delete(self, pessoa_repo, cliente):
        pessoa_repo.delete(cliente.id)
        assert pessoa_repo.get_by_id(cliente.id) is None


@pytest.mark.django_db
class TestDjangoChamadoRepository:
    def test_roundtrip_de_status_e_datas(self, chamado_repo, chamado_factory, tecnico, cliente):
        chamado = chamado_factory(tecnico, cliente, status=ChamadoStatus.ENCERRADO)

        salvo = chamado_repo.get_by_id(chamado.id)
        assert salvo.status is ChamadoStatus.ENCERRADO
        assert salvo.data_fechamento == salvo.data_abertura

    def test_update_reabre(self, chamado_repo, chamado_factory, tecnico, cliente):
        chamado = chamado_factory(tecnico, cliente, status=ChamadoStatus.ENCERRADO)
        chamado.alterar_status(ChamadoStatus.ANDAMENTO)
        chamado_repo.save(chamado)

        salvo = chamado_repo.get_by_id(chamado.id)
        assert salvo.status is ChamadoStatus.ANDAMENTO
        assert salvo.data_fechamento is None

    def test_listagens_filtradas(self, chamado_repo, chamado_factory, tecnico, admin, cliente, outro_cliente):
        c1 = chamado_factory(tecnico, cliente)
        c2 = chamado_factory(admin, outro_cliente)
        c3 = chamado_factory(tecnico, outro_cliente)

        assert [c.id for c in chamado_repo.list_all()] == [c1.id, c2.id, c3.id]
        assert [c.id for c in chamado_repo.list_by_tecnico(tecnico.id)] == [c1.id, c3.id]
        assert [c.id for c in chamado_repo.list_by_cliente(outro_cliente.id)] == [c2.id, c3.id]

    def test_exists_by_pessoa(self, chamado_repo, chamado_factory, tecnico, admin, cliente):
        chamado_factory(tecnico, cliente)

        assert chamado_repo.exists_by_pessoa(tecnico.id)
        assert chamado_repo.exists_by_pessoa(cliente.id)
        assert not chamado_repo.exists_by_pessoa(admin.id)

    def test_delete(self, chamado_repo, chamado_factory, tecnico, cliente):
        chamado = chamado_factory(tecnico, cliente)
        chamado_repo.delete(chamado.id)

        assert chamado_repo.get_by_id(chamado.id) is None


@pytest.mark.django_db
class TestDjangoUnitOfWork:
    def test_commit(self, pessoa_repo, pessoa_factory):
        uow = DjangoUnitOfWork()
        with uow:
            pessoa = pessoa_factory("Dennis Ritchie", "70511744015", "dennis@mail.com")

        assert uow.is_committed
        assert pessoa_repo.get_by_id(pessoa.id) is not None

    def test_rollback_em_excecao(self, pessoa_repo, pessoa_factory):
        uow = DjangoUnitOfWork()

        with pytest.raises(RuntimeError):
            with uow:
                pessoa_factory("Dennis Ritchie", "70511744015", "dennis@mail.com")
                raise RuntimeError("falha no meio da operação")

        assert uow.is_rolled_back
        assert pessoa_repo.get_by_email("dennis@mail.com") is None


class TestSecurity:
    def test_hasher(self, hasher):
        senha_hash = hasher.hash("123")

        assert senha_hash != "123"
        assert hasher.verify("123", senha_hash)
        assert not hasher.verify("errada", senha_hash)
        assert not hasher.verify("123", "")

    def test_token_roundtrip(self):
        tokens = JoseTokenService(secret="segredo", expiration_minutes=5)
        claims = tokens.verify(tokens.issue("admin@mail.com", {"id": 1, "perfis": ["ADMIN"]}))

        assert claims["sub"] == "admin@mail.com"
        assert claims["perfis"] == ["ADMIN"]
        assert claims["type"] == "access"

    def test_token_assinado_com_outro_segredo(self):
        token = JoseTokenService(secret="outro").issue("admin@mail.com")
        assert JoseTokenService(secret="segredo").verify(token) is None

    def test_token_expirado(self):
        token = JoseTokenService(secret="segredo", expiration_minutes=-1).issue("admin@mail.com")
        assert JoseTokenService(secret="segredo").verify(token) is None

    def test_token_malformado(self):
        assert JoseTokenService(secret="segredo").verify("nao-e-um-jwt") is None
