"""
Entidades do Domínio de Pessoas.

Uma pessoa é um registro base (nome, CPF, e-mail, senha) mais um
conjunto de perfis. O tipo (Cliente ou Técnico) é uma marcação,
não uma hierarquia de classes.

Entidades:
- PessoaEntity: registro de cliente ou técnico
- TipoPessoa: variante (CLIENTE | TECNICO)

Regras de Negócio Encapsuladas:
- Nome, CPF e e-mail obrigatórios; e-mail com formato válido
- Técnico sempre possui o perfil TECNICO (pode acumular ADMIN)
- Cliente possui apenas o perfil CLIENTE
- Hash de senha nunca sai da entidade para as respostas
"""

import re
from dataclasses import dataclass, field
from datetime import date
from enum import Enum
from typing import ClassVar, Iterable, Optional, Set

from src.core.shared.exceptions import ValidationError
from src.core.shared.principal import Perfil, Principal


EMAIL_REGEX = re.compile(r"^[^@\s]+@[^@\s]+\.[^@\s]+$")


class TipoPessoa(Enum):
    """Variantes de pessoa."""

    CLIENTE = "Cliente"
    TECNICO = "Técnico"

    @property
    def perfil_base(self) -> Perfil:
        """Perfil que toda pessoa deste tipo possui."""
        if self is TipoPessoa.TECNICO:
            return Perfil.TECNICO
        return Perfil.CLIENTE


@dataclass
class PessoaEntity:
    """
    Entidade de Domínio: Pessoa (Cliente ou Técnico).

    Invariantes:
    - id é atribuído pelo repositório e nunca muda
    - perfis nunca é vazio e sempre contém o perfil base do tipo
    - data_criacao é definida uma única vez

    Attributes:
        id: Identificador numérico (None até ser persistida)
        tipo: CLIENTE ou TECNICO
        nome: Nome completo
        cpf: CPF, único entre todas as pessoas
        email: E-mail de login, único entre todas as pessoas
        senha: Hash da senha
        perfis: Conjunto de perfis
        data_criacao: Data de cadastro

    Example:
        tecnico = PessoaEntity.criar(
            tipo=TipoPessoa.TECNICO,
            nome="Ada Lovelace",
            cpf="98765432100",
            email="ada@mail.com",
            senha_hash=hasher.hash("123"),
            perfis=[Perfil.ADMIN],
        )
    """

    id: Optional[int] = None
    tipo: TipoPessoa = TipoPessoa.CLIENTE
    nome: str = ""
    cpf: str = ""
    email: str = ""
    senha: str = ""
    perfis: Set[Perfil] = field(default_factory=set)
    data_criacao: date = field(default_factory=date.today)

    NOME_MAX_LENGTH: ClassVar[int] = 200
    CPF_MAX_LENGTH: ClassVar[int] = 20
    EMAIL_MAX_LENGTH: ClassVar[int] = 254

    @classmethod
    def criar(
        cls,
        tipo: TipoPessoa,
        nome: str,
        cpf: str,
        email: str,
        senha_hash: str,
        perfis: Optional[Iterable[Perfil]] = None,
    ) -> "PessoaEntity":
        """
        Factory method para criar pessoa com validações.

        Args:
            tipo: CLIENTE ou TECNICO
            nome: Nome (obrigatório)
            cpf: CPF (obrigatório)
            email: E-mail (obrigatório, formato válido)
            senha_hash: Hash já calculado da senha
            perfis: Perfis adicionais (apenas técnicos aceitam ADMIN)

        Returns:
            Nova instância de PessoaEntity sem id

        Raises:
            ValidationError: Se dados de entrada inválidos
        """
        cls.validar_dados(nome, cpf, email)

        if not senha_hash:
            raise ValidationError("Senha é obrigatória", field="senha")

        pessoa = cls(
            tipo=tipo,
            nome=nome.strip(),
            cpf=cpf.strip(),
            email=email.strip(),
            senha=senha_hash,
        )
        pessoa.definir_perfis(perfis or [])
        return pessoa

    @classmethod
    def validar_dados(cls, nome: str, cpf: str, email: str) -> None:
        """Valida campos obrigatórios comuns a criação e atualização."""
        if not nome or not nome.strip():
            raise ValidationError("O campo NOME é requerido", field="nome")

        if len(nome.strip()) > cls.NOME_MAX_LENGTH:
            raise ValidationError(
                f"Nome deve ter no máximo {cls.NOME_MAX_LENGTH} caracteres",
                field="nome",
            )

        if not cpf or not cpf.strip():
            raise ValidationError("O campo CPF é requerido", field="cpf")

        if len(cpf.strip()) > cls.CPF_MAX_LENGTH:
            raise ValidationError(
                f"CPF deve ter no máximo {cls.CPF_MAX_LENGTH} caracteres",
                field="cpf",
            )

        if not email or not email.strip():
            raise ValidationError("O campo EMAIL é requerido", field="email")

        if len(email.strip()) > cls.EMAIL_MAX_LENGTH:
            raise ValidationError(
                f"E-mail deve ter no máximo {cls.EMAIL_MAX_LENGTH} caracteres",
                field="email",
            )

        if not EMAIL_REGEX.match(email.strip()):
            raise ValidationError(f"E-mail inválido: {email}", field="email")

    def definir_perfis(self, perfis: Iterable[Perfil]) -> None:
        """
        Define perfis respeitando o tipo.

        O perfil base do tipo é sempre mantido. Clientes não
        acumulam outros perfis.
        """
        novos = {self.tipo.perfil_base}
        if self.tipo is TipoPessoa.TECNICO:
            novos.update(p for p in perfis if p is Perfil.ADMIN)
        self.perfis = novos

    def atualizar_dados(self, nome: str, cpf: str, email: str) -> None:
        """Substitui nome, CPF e e-mail (validados)."""
        self.validar_dados(nome, cpf, email)
        self.nome = nome.strip()
        self.cpf = cpf.strip()
        self.email = email.strip()

    def alterar_senha(self, senha_hash: str) -> None:
        if not senha_hash:
            raise ValidationError("Senha é obrigatória", field="senha")
        self.senha = senha_hash

    def to_principal(self) -> Principal:
        """Identidade autenticada correspondente a esta pessoa."""
        return Principal.de(self.id, self.perfis, email=self.email)

    @property
    def is_tecnico(self) -> bool:
        return self.tipo is TipoPessoa.TECNICO

    @property
    def is_cliente(self) -> bool:
        return self.tipo is TipoPessoa.CLIENTE

    @property
    def is_admin(self) -> bool:
        return Perfil.ADMIN in self.perfis

    def __str__(self) -> str:
        return f"{self.tipo.value} #{self.id} {self.nome} <{self.email}>"
