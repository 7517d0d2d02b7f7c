"""Formulários dos cadastros de apoio: sindicatos, bases de cálculo e funções."""
from wtforms import StringField, DecimalField, SelectField, BooleanField, SubmitField
from wtforms.validators import DataRequired, InputRequired, Optional, Length

from .base_form import ApiForm, com_vazio, int_ou_none


class SindicatoForm(ApiForm):
    descricao = StringField('Descrição', validators=[Optional(), Length(max=100, message='Descrição deve ter no máximo 100 caracteres')])
    submit = SubmitField('Salvar')


class BaseCalculoForm(ApiForm):
    codigo = StringField('Código', validators=[DataRequired(message='Código é obrigatório')])
    descricao = StringField('Descrição', validators=[DataRequired(message='Descrição é obrigatória')])
    ativo = BooleanField('Ativo', default=True)
    submit = SubmitField('Salvar')


class FuncaoForm(ApiForm):
    """Função (cargo) vinculada a um CBO, com faixa salarial opcional."""
    id_cbo = SelectField('CBO', coerce=int_ou_none, choices=com_vazio([]), validators=[InputRequired(message='CBO é obrigatório')])
    descricao = StringField('Descrição', validators=[DataRequired(message='Descrição é obrigatória'), Length(max=100, message='Descrição deve ter no máximo 100 caracteres')])
    piso_salarial = DecimalField('Piso Salarial', places=2, validators=[Optional()])
    teto_salarial = DecimalField('Teto Salarial', places=2, validators=[Optional()])
    submit = SubmitField('Salvar')

    def carregar_cbos(self, cbos):
        self.id_cbo.choices = com_vazio(
            (c['id'], f"{c.get('codigo', '')} - {c.get('descricao', '')}".strip(' -')) for c in cbos
        )

    def validate(self, extra_validators=None):
        if not super().validate(extra_validators=extra_validators):
            return False
        piso, teto = self.piso_salarial.data, self.teto_salarial.data
        if piso and teto and piso > teto:
            self.piso_salarial.errors.append('Piso salarial deve ser menor ou igual ao teto salarial')
            return False
        return True
