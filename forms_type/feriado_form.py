# Formulário para cadastro de feriados (nacionais, estaduais ou municipais)
from wtforms import StringField, SelectField, BooleanField, SubmitField
from wtforms.fields import DateField
from wtforms.validators import DataRequired, InputRequired, Optional, Length, Regexp

from .base_form import ApiForm, com_vazio, int_ou_none

TIPOS_FERIADO = [(1, 'Nacional'), (2, 'Estadual'), (3, 'Municipal')]
TIPOS_ADICAO = [(0, 'Fixo'), (1, 'Variável')]

HORA_REGEX = r'^([01]\d|2[0-3]):[0-5]\d(:[0-5]\d)?$'


class FeriadoForm(ApiForm):
    id_filial = SelectField('Filial', coerce=int_ou_none, choices=com_vazio([], 'Todas'), validators=[Optional()])
    data_feriado = DateField('Data do Feriado', validators=[DataRequired(message='Data é obrigatória')])
    descricao = StringField('Descrição', validators=[DataRequired(message='Descrição é obrigatória'), Length(max=100, message='Descrição deve ter no máximo 100 caracteres')])
    tipo_feriado = SelectField('Tipo de Feriado', coerce=int_ou_none, choices=com_vazio(TIPOS_FERIADO), validators=[InputRequired(message='Tipo de Feriado é obrigatório')])
    id_municipio = SelectField('Município', coerce=int_ou_none, choices=com_vazio([]), validators=[Optional()])
    tipo_adicao_feriado = SelectField('Tipo de Adição', coerce=int_ou_none, choices=com_vazio(TIPOS_ADICAO), validators=[Optional()])
    feriado_parcial = BooleanField('Feriado Parcial')
    hora_inicio = StringField('Hora de Início', validators=[Optional(), Regexp(HORA_REGEX, message='Hora inválida')])
    hora_final = StringField('Hora Final', validators=[Optional(), Regexp(HORA_REGEX, message='Hora inválida')])
    desconta_ferias_coletivas = BooleanField('Desconta Férias Coletivas')
    desconta_ferias = BooleanField('Desconta Férias')
    submit = SubmitField('Salvar')

    def carregar_opcoes(self, filiais, municipios):
        self.id_filial.choices = com_vazio(
            ((f['id'], f.get('descricao') or f.get('denominacaoCep') or f"Filial {f['id']}") for f in filiais), 'Todas'
        )
        self.id_municipio.choices = com_vazio((m['id'], m.get('nome') or f"Município {m['id']}") for m in municipios)

    def to_payload(self):
        payload = super().to_payload()
        # Horário só faz sentido para feriado parcial
        if not payload.get('feriadoParcial'):
            payload.pop('horaInicio', None)
            payload.pop('horaFinal', None)
        return payload
