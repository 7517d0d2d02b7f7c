# Formulário para cadastro de departamentos (vinculados a uma divisão)
from wtforms import StringField, IntegerField, SelectField, SubmitField
from wtforms.validators import InputRequired, DataRequired, NumberRange, Length

from .base_form import ApiForm, com_vazio, int_ou_none

class DepartamentoForm(ApiForm):
    id_divisao = SelectField('Divisão', coerce=int_ou_none, choices=com_vazio([]), validators=[InputRequired(message='Divisão é obrigatória')])  # Divisão
    codigo = IntegerField('Código', validators=[InputRequired(message='Código é obrigatório'), NumberRange(min=1, message='Código é obrigatório')])  # Código do departamento
    descricao = StringField('Descrição', validators=[DataRequired(message='Descrição é obrigatória'), Length(max=100, message='Descrição deve ter no máximo 100 caracteres')])  # Descrição
    submit = SubmitField('Salvar')  # Botão de envio

    def carregar_divisoes(self, divisoes):
        self.id_divisao.choices = com_vazio((d['id'], d.get('descricao') or f"Divisão {d['id']}") for d in divisoes)
