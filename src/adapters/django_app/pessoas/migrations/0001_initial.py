"""
Migration inicial para o domínio de Pessoas.

Cria a tabela:
- pessoas: Clientes e técnicos (CPF e e-mail únicos entre os dois)
"""

from django.db import migrations, models
import django.utils.timezone


class Migration(migrations.Migration):
    """Migration inicial."""

    initial = True

    dependencies = [
    ]

    operations = [
        migrations.CreateModel(
            name='PessoaModel',
            fields=[
                ('id', models.BigAutoField(
                    auto_created=True,
                    primary_key=True,
                    serialize=False,
                    verbose_name='ID'
                )),
                ('tipo', models.CharField(
                    max_length=10,
                    choices=[
                        ('CLIENTE', 'Cliente'),
                        ('TECNICO', 'Técnico'),
                    ],
                    db_index=True,
                    help_text='Cliente ou Técnico'
                )),
                ('nome', models.CharField(
                    max_length=200,
                    help_text='Nome completo'
                )),
                ('cpf', models.CharField(
                    max_length=20,
                    unique=True,
                    help_text='CPF, único entre clientes e técnicos'
                )),
                ('email', models.CharField(
                    max_length=254,
                    unique=True,
                    help_text='E-mail de login, único entre clientes e técnicos'
                )),
                ('senha', models.CharField(
                    max_length=255,
                    help_text='Hash da senha'
                )),
                ('perfis', models.JSONField(
                    default=list,
                    help_text='Nomes dos perfis (ADMIN, CLIENTE, TECNICO)'
                )),
                ('data_criacao', models.DateField(
                    default=django.utils.timezone.localdate,
                    help_text='Data de cadastro'
                )),
            ],
            options={
                'db_table': 'pessoas',
                'verbose_name': 'Pessoa',
                'verbose_name_plural': 'Pessoas',
                'ordering': ['id'],
            },
        ),
    ]
