#!/usr/bin/env python
"""
Setup rápido para desenvolvimento local.

Este script:
1. Configura Django settings
2. Cria banco de dados SQLite
3. Executa migrations
4. Cria dados de exemplo (opcional): administrador, técnicos,
   clientes e chamados. Todas as senhas são "123".

Uso:
    python scripts/quick_setup.py
    python scripts/quick_setup.py --with-sample-data
"""

import os
import sys
import argparse

# Adicionar raiz do projeto ao path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

SENHA_PADRAO = "123"

TECNICOS = [
    # (nome, cpf, email, admin?)
    ("admin", "00000000000", "admin@mail.com", True),
    ("Bill Gates", "76045777093", "bill@mail.com", False),
    ("Arisio", "7184712141243", "arisio@mail.com", False),
    ("Steve Jobs", "12345678901", "steve@mail.com", False),
    ("Ada Lovelace", "98765432100", "ada@mail.com", False),
]

CLIENTES = [
    ("Linus Torvalds", "70511744013", "linus@mail.com"),
    ("Guido van Rossum", "70511744014", "guido@mail.com"),
    ("Dennis Ritchie", "70511744015", "dennis@mail.com"),
]

CHAMADOS = [
    # (prioridade, status, titulo, observacoes, email técnico, email cliente)
    ("MEDIA", "ANDAMENTO", "Erro ao acessar VPN", "primeiro chamado", "bill@mail.com", "linus@mail.com"),
    ("ALTA", "ANDAMENTO", "Sistema lento no login", "segundo chamado", "bill@mail.com", "guido@mail.com"),
    ("BAIXA", "ANDAMENTO", "Solicitação de instalação de software", "terceiro chamado", "arisio@mail.com", "linus@mail.com"),
    ("ALTA", "ABERTO", "Impressora não imprime", "quarto chamado", "steve@mail.com", "guido@mail.com"),
    ("MEDIA", "ENCERRADO", "Recuperação de senha de e-mail", "quinto chamado", "ada@mail.com", "dennis@mail.com"),
    ("BAIXA", "ENCERRADO", "Atualização de antivírus", "sexto chamado", "arisio@mail.com", "dennis@mail.com"),
    ("ALTA", "ANDAMENTO", "Erro crítico no servidor de banco de dados", "setimo chamado", "steve@mail.com", "linus@mail.com"),
    ("MEDIA", "ANDAMENTO", "Solicitação de acesso a pasta compartilhada", "oitavo chamado", "ada@mail.com", "guido@mail.com"),
    ("MEDIA", "ANDAMENTO", "Problema de conexão Wi-Fi", "nono chamado", "ada@mail.com", "linus@mail.com"),
]


def setup_django():
    """Configura Django para uso standalone."""
    os.environ.setdefault('DJANGO_SETTINGS_MODULE', 'src.config.settings')

    # Forçar SQLite para desenvolvimento rápido
    os.environ.pop('DATABASE_URL', None)
    os.environ.pop('DATABASE_HOST', None)

    import django
    django.setup()


def run_migrations():
    """Executa migrations."""
    from django.core.management import call_command

    print("📦 Executando migrations...")
    call_command('migrate', verbosity=1)
    print("✅ Migrations concluídas!")


def create_sample_data():
    """
    Cria dados de exemplo.

    Idempotente: se o administrador já existe, nada é criado.
    """
    from django.db import transaction

    from src.core.chamados.entities import ChamadoEntity, ChamadoPrioridade, ChamadoStatus
    from src.core.pessoas.entities import PessoaEntity, TipoPessoa
    from src.core.shared.principal import Perfil
    from src.adapters.django_app.chamados.repositories import DjangoChamadoRepository
    from src.adapters.django_app.pessoas.repositories import DjangoPessoaRepository
    from src.adapters.django_app.shared.security import DjangoPasswordHasher

    pessoa_repo = DjangoPessoaRepository()
    chamado_repo = DjangoChamadoRepository()

    if pessoa_repo.get_by_email("admin@mail.com") is not None:
        print("ℹ️  Dados de exemplo já existem, nada a fazer.")
        return

    senha_hash = DjangoPasswordHasher().hash(SENHA_PADRAO)
    ids = {}

    with transaction.atomic():
        print("👷 Criando técnicos...")
        for nome, cpf, email, admin in TECNICOS:
            tecnico = PessoaEntity.criar(
                tipo=TipoPessoa.TECNICO,
                nome=nome,
                cpf=cpf,
                email=email,
                senha_hash=senha_hash,
                perfis=[Perfil.ADMIN] if admin else [],
            )
            ids[email] = pessoa_repo.save(tecnico).id
            print(f"   ✓ {nome} <{email}>")

        print("🙋 Criando clientes...")
        for nome, cpf, email in CLIENTES:
            cliente = PessoaEntity.criar(
                tipo=TipoPessoa.CLIENTE,
                nome=nome,
                cpf=cpf,
                email=email,
                senha_hash=senha_hash,
            )
            ids[email] = pessoa_repo.save(cliente).id
            print(f"   ✓ {nome} <{email}>")

        print("📝 Criando chamados...")
        for prioridade, status, titulo, observacoes, tecnico, cliente in CHAMADOS:
            chamado = ChamadoEntity.criar(
                titulo=titulo,
                prioridade=ChamadoPrioridade[prioridade],
                status=ChamadoStatus[status],
                observacoes=observacoes,
                tecnico_id=ids[tecnico],
                cliente_id=ids[cliente],
            )
            chamado_repo.save(chamado)
            print(f"   ✓ {titulo[:50]}")

    print(f"✅ {len(TECNICOS)} técnicos, {len(CLIENTES)} clientes e {len(CHAMADOS)} chamados criados!")


def check_connection():
    """Verifica conexão com o banco."""
    from django.db import connection, DatabaseError

    print("🔍 Verificando conexão com o banco...")

    try:
        with connection.cursor() as cursor:
            cursor.execute("SELECT 1")
        print("✅ Conexão OK!")
        return True
    except DatabaseError as e:
        print(f"❌ Erro de conexão: {e}")
        return False


def show_info():
    """Mostra informações do setup."""
    from django.conf import settings

    print("\n" + "=" * 60)
    print("📊 Informações do Setup")
    print("=" * 60)
    print(f"  Database Engine: {settings.DATABASES['default']['ENGINE']}")
    print(f"  Database Name: {settings.DATABASES['default']['NAME']}")
    print(f"  Debug Mode: {settings.DEBUG}")
    print("=" * 60)
    print("\n🚀 Próximos passos:")
    print("   1. python manage.py runserver")
    print("   2. POST http://localhost:8000/login {\"email\": \"admin@mail.com\", \"senha\": \"123\"}")
    print("   3. GET  http://localhost:8000/chamados (header Authorization: Bearer <token>)")
    print("\n")


def main():
    parser = argparse.ArgumentParser(description='Setup rápido para desenvolvimento')
    parser.add_argument(
        '--with-sample-data',
        action='store_true',
        help='Criar dados de exemplo'
    )
    parser.add_argument(
        '--check-only',
        action='store_true',
        help='Apenas verificar conexão'
    )

    args = parser.parse_args()

    print("\n" + "=" * 60)
    print("🔧 Helpdesk - Quick Setup")
    print("=" * 60 + "\n")

    setup_django()

    if args.check_only:
        check_connection()
        return

    if not check_connection():
        print("\n⚠️  Certifique-se de que o banco de dados está acessível.")
        return

    run_migrations()

    if args.with_sample_data:
        create_sample_data()

    show_info()


if __name__ == '__main__':
    main()
