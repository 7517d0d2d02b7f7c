# Formulário de Evento (provento/desconto) da tabela de eventos
from wtforms import StringField, IntegerField, DecimalField, SelectField, SubmitField
from wtforms.validators import InputRequired, NumberRange, Optional, Length

from .base_form import ApiForm, SIM_NAO, com_vazio, int_ou_none

TIPOS_PROVENTO_DESCONTO = [(1, 'Provento'), (2, 'Desconto')]


class EventoForm(ApiForm):
    id_tabela_evento = SelectField('Tabela de Eventos', coerce=int_ou_none, choices=com_vazio([]),
                                   validators=[InputRequired(message='Tabela de Eventos é obrigatória')])
    id_evento_grupo = SelectField('Grupo de Eventos', coerce=int_ou_none, choices=com_vazio([]), validators=[Optional()])
    cod_evento = IntegerField('Código do Evento', validators=[InputRequired(message='Código do Evento é obrigatório'),
                                                              NumberRange(min=1, message='Código do Evento é obrigatório')])
    descricao = StringField('Descrição', validators=[Optional(), Length(max=260)])
    descricao_abreviada = StringField('Descrição Abreviada', validators=[Optional(), Length(max=100)])
    tipo_provento_desconto = SelectField('Tipo Provento/Desconto', coerce=int_ou_none,
                                         choices=com_vazio(TIPOS_PROVENTO_DESCONTO), validators=[Optional()])
    indice_base = DecimalField('Índice Base', places=2, validators=[Optional()])
    ordem_impressao = IntegerField('Ordem de Impressão', validators=[Optional()])
    valor_minimo = DecimalField('Valor Mínimo', places=2, validators=[Optional()])
    valor_maximo = DecimalField('Valor Máximo', places=2, validators=[Optional()])
    tipo_evento_especial = IntegerField('Tipo Evento Especial', validators=[Optional()])
    referencia = IntegerField('Referência', validators=[Optional()])
    rendimentos_anuais = SelectField('Rendimentos Anuais', coerce=int_ou_none, choices=com_vazio(SIM_NAO), validators=[Optional()])
    calcula_proporcional = SelectField('Calcula Proporcional', coerce=int_ou_none, choices=com_vazio(SIM_NAO), validators=[Optional()])
    submit = SubmitField('Salvar')

    def carregar_opcoes(self, tabelas, grupos):
        self.id_tabela_evento.choices = com_vazio((t['id'], t.get('descricao') or f"Tabela {t['id']}") for t in tabelas)
        self.id_evento_grupo.choices = com_vazio((g['id'], g.get('descricao') or f"Grupo {g['id']}") for g in grupos)
