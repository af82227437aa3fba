"""
Testes Unitários para a validação de unicidade de CPF e e-mail.
"""

import pytest

from src.core.pessoas.integridade import precisa_revalidar, validar_unicidade
from src.core.shared.exceptions import ConflictError


class TestValidarUnicidade:
    def test_dados_livres(self, pessoa_repo, cliente):
        validar_unicidade(pessoa_repo, "11111111111", "novo@mail.com")

    def test_cpf_duplicado(self, pessoa_repo, cliente):
        with pytest.raises(ConflictError) as exc:
            validar_unicidade(pessoa_repo, cliente.cpf, "novo@mail.com")

        assert exc.value.message == "CPF já cadastrado no sistema!"
        assert exc.value.field == "cpf"

    def test_email_duplicado(self, pessoa_repo, cliente):
        with pytest.raises(ConflictError) as exc:
            validar_unicidade(pessoa_repo, "11111111111", cliente.email)

        assert exc.value.message == "E-mail já cadastrado no sistema!"
        assert exc.value.field == "email"

    def test_cpf_reportado_antes_do_email(self, pessoa_repo, cliente):
        with pytest.raises(ConflictError) as exc:
            validar_unicidade(pessoa_repo, cliente.cpf, cliente.email)
        assert exc.value.field == "cpf"

    def test_espaco_compartilhado_entre_tipos(self, pessoa_repo, tecnico):
        """Um cliente não pode usar o CPF de um técnico."""
        with pytest.raises(ConflictError):
            validar_unicidade(pessoa_repo, tecnico.cpf, "novo@mail.com")

    def test_propria_pessoa_ignorada_na_atualizacao(self, pessoa_repo, cliente):
        validar_unicidade(pessoa_repo, cliente.cpf, cliente.email, excluir_id=cliente.id)

    def test_conflito_com_outra_pessoa_na_atualizacao(self, pessoa_repo, cliente, outro_cliente):
        with pytest.raises(ConflictError):
            validar_unicidade(pessoa_repo, outro_cliente.cpf, cliente.email, excluir_id=cliente.id)


class TestPrecisaRevalidar:
    def test_mesmos_dados(self, cliente):
        assert precisa_revalidar(cliente, cliente.cpf, cliente.email) is False

    def test_cpf_alterado(self, cliente):
        assert precisa_revalidar(cliente, "11111111111", cliente.email) is True

    def test_email_alterado(self, cliente):
        assert precisa_revalidar(cliente, cliente.cpf, "outro@mail.com") is True
