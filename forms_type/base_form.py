"""Base comum dos formulários de cadastro.

Os campos dos formulários seguem snake_case em português; a API usa camelCase.
``ApiForm`` faz a conversão nos dois sentidos: ``to_payload`` monta o JSON de
envio e ``dados_iniciais`` transforma o registro da API nos dados do formulário.
"""
from datetime import date, datetime

from flask_wtf import FlaskForm
from wtforms import BooleanField, SelectField, SubmitField
from wtforms.fields import DateField

UFS = [
    (1, 'AC'), (2, 'AL'), (3, 'AP'), (4, 'AM'), (5, 'BA'), (6, 'CE'), (7, 'DF'),
    (8, 'ES'), (9, 'GO'), (10, 'MA'), (11, 'MT'), (12, 'MS'), (13, 'MG'), (14, 'PA'),
    (15, 'PB'), (16, 'PR'), (17, 'PE'), (18, 'PI'), (19, 'RJ'), (20, 'RN'), (21, 'RS'),
    (22, 'RO'), (23, 'RR'), (24, 'SC'), (25, 'SP'), (26, 'SE'), (27, 'TO'),
]

SIM_NAO = [(0, 'Não'), (1, 'Sim')]

VAZIO = ('', 'Selecione...')

# Catálogo 'pt' distribuído com o WTForms (mensagens padrão de validação)
LOCALES = ('pt_BR', 'pt')


def int_ou_none(valor):
    """Coerção para SelectField: '' e None viram None"""
    if valor in (None, ''):
        return None
    return int(valor)


def com_vazio(opcoes, rotulo='Selecione...'):
    return [('', rotulo)] + list(opcoes)


def camel_case(nome):
    primeiro, *resto = nome.split('_')
    return primeiro + ''.join(p[:1].upper() + p[1:] for p in resto)


def so_digitos(valor):
    if not valor:
        return valor
    return ''.join(c for c in valor if c.isdigit())


class FlagField(BooleanField):
    """Checkbox enviado à API como 0/1"""


class ApiForm(FlaskForm):
    class Meta:
        locales = LOCALES

    # Chaves da API que não seguem a conversão automática snake -> camel
    ALIASES = {}
    # Campos que não fazem parte do payload
    IGNORAR = ('submit', 'csrf_token')

    @classmethod
    def chave_api(cls, nome):
        return cls.ALIASES.get(nome) or camel_case(nome)

    def campos_api(self):
        for field in self:
            if field.short_name in self.IGNORAR or isinstance(field, SubmitField):
                continue
            yield field

    def to_payload(self):
        payload = {}
        for field in self.campos_api():
            valor = field.data
            if isinstance(field, FlagField):
                valor = 1 if valor else 0
            elif isinstance(valor, str):
                valor = valor.strip()
            payload[self.chave_api(field.short_name)] = valor
        return payload

    @classmethod
    def campos_declarados(cls):
        for nome in dir(cls):
            if nome.startswith('_') or nome in cls.IGNORAR:
                continue
            unbound = getattr(cls, nome)
            if hasattr(unbound, '_formfield'):
                yield nome, unbound

    @classmethod
    def dados_iniciais(cls, registro):
        """Converte um registro da API (camelCase) nos dados do formulário."""
        registro = registro or {}
        dados = {}
        for nome, unbound in cls.campos_declarados():
            chave = cls.chave_api(nome)
            if registro.get(chave) is None:
                continue
            valor = registro[chave]
            if issubclass(unbound.field_class, DateField) and isinstance(valor, str):
                valor = para_data(valor)
            elif issubclass(unbound.field_class, SelectField) and isinstance(valor, bool):
                valor = int(valor)
            dados[nome] = valor
        return dados


def para_data(valor):
    """Aceita 'AAAA-MM-DD' ou um timestamp ISO completo"""
    if not valor:
        return None
    if isinstance(valor, datetime):
        return valor.date()
    if isinstance(valor, date):
        return valor
    try:
        return date.fromisoformat(valor[:10])
    except ValueError:
        return None
