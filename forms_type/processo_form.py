# Formulário de criação de processo de cálculo da folha (competência + filtros opcionais)
from datetime import date

from wtforms import IntegerField, SelectField, SubmitField
from wtforms.fields import DateField
from wtforms.validators import InputRequired, NumberRange, Optional

from config_folha import TIPOS_FOLHA

from .base_form import ApiForm, com_vazio, int_ou_none


def _filtro(rotulo):
    return SelectField(rotulo, coerce=int_ou_none, choices=com_vazio([], 'Todos'), validators=[Optional()], validate_choice=False)


class ProcessoForm(ApiForm):
    tipo_processo = IntegerField('Tipo de Processo', default=1, validators=[InputRequired(message='Tipo de processo é obrigatório'), NumberRange(min=1, message='Tipo de processo é obrigatório')])
    mes = IntegerField('Mês', default=lambda: date.today().month, validators=[InputRequired(message='Mês deve ser entre 1 e 12'), NumberRange(min=1, max=12, message='Mês deve ser entre 1 e 12')])
    ano = IntegerField('Ano', default=lambda: date.today().year, validators=[InputRequired(message='Ano deve ser maior ou igual a 2000'), NumberRange(min=2000, message='Ano deve ser maior ou igual a 2000')])
    numero_folha = IntegerField('Número da Folha', default=1, validators=[InputRequired(message='Número da folha deve ser maior ou igual a 1'), NumberRange(min=1, message='Número da folha deve ser maior ou igual a 1')])
    tipo_folha = SelectField('Tipo de Folha', coerce=int_ou_none, choices=TIPOS_FOLHA, default=1, validators=[InputRequired(message='Tipo de folha é obrigatório')])
    data_pagamento = DateField('Data de Pagamento', validators=[Optional()])
    empresa_inicial = _filtro('Empresa Inicial')
    empresa_final = _filtro('Empresa Final')
    filial_inicial = _filtro('Filial Inicial')
    filial_final = _filtro('Filial Final')
    funcionario_inicial = _filtro('Funcionário Inicial')
    funcionario_final = _filtro('Funcionário Final')
    submit = SubmitField('Criar Processo')

    def carregar_opcoes(self, empresas, filiais, funcionarios):
        opcoes_empresas = [(e['id'], e.get('razaoSocial') or f"Empresa {e['id']}") for e in empresas]
        opcoes_filiais = [(f['id'], f.get('descricao') or f"Filial {f['id']}") for f in filiais]
        opcoes_funcionarios = [(f['id'], f.get('nomeFuncionario') or f"Funcionário {f['id']}") for f in funcionarios]
        self.empresa_inicial.choices = self.empresa_final.choices = com_vazio(opcoes_empresas, 'Todas')
        self.filial_inicial.choices = self.filial_final.choices = com_vazio(opcoes_filiais, 'Todas')
        self.funcionario_inicial.choices = self.funcionario_final.choices = com_vazio(opcoes_funcionarios, 'Todos')
