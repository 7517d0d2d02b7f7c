"""Formulário de Horário de trabalho e do seu quadro semanal.

O quadro tem uma linha por dia da semana (0 = Domingo ... 6 = Sábado) com até
três pares de entrada/saída e o total de horas do dia.
"""
from wtforms import Form, StringField, IntegerField, DecimalField, BooleanField, HiddenField, SubmitField
from wtforms.fields import FieldList, FormField
from wtforms.validators import DataRequired, Optional, Length, NumberRange, Regexp

from .base_form import ApiForm

DIAS_SEMANA = [
    (0, 'Domingo'), (1, 'Segunda-feira'), (2, 'Terça-feira'), (3, 'Quarta-feira'),
    (4, 'Quinta-feira'), (5, 'Sexta-feira'), (6, 'Sábado'),
]

HORA_REGEX = r'^([01]\d|2[0-3]):[0-5]\d(:[0-5]\d)?$'
MARCACOES = ('entrada1', 'saida1', 'entrada2', 'saida2', 'entrada3', 'saida3')


def _hora(rotulo):
    return StringField(rotulo, validators=[Optional(), Regexp(HORA_REGEX, message='Hora inválida')])


class QuadroHorarioLinhaForm(Form):
    dia_semana = HiddenField()
    entrada1 = _hora('Entrada 1')
    saida1 = _hora('Saída 1')
    entrada2 = _hora('Entrada 2')
    saida2 = _hora('Saída 2')
    entrada3 = _hora('Entrada 3')
    saida3 = _hora('Saída 3')
    total_horas = _hora('Total Horas')

    def preenchida(self):
        return any((self[campo].data or '').strip() for campo in MARCACOES)


def linhas_quadro(itens=None):
    """Monta as 7 linhas do quadro (uma por dia) a partir dos itens da API."""
    por_dia = {item.get('diaSemana'): item for item in (itens or [])}
    linhas = []
    for dia, _ in DIAS_SEMANA:
        item = por_dia.get(dia, {})
        linha = {'dia_semana': dia, 'total_horas': item.get('totalHoras') or ''}
        for campo in MARCACOES:
            linha[campo] = item.get(campo) or ''
        linhas.append(linha)
    return linhas


class HorarioForm(ApiForm):
    DIAS_SEMANA = DIAS_SEMANA
    IGNORAR = ApiForm.IGNORAR + ('quadro',)
    SECOES = [
        ('Principal', ['descricao', 'hora_texto1', 'hora_texto2', 'hora_texto3', 'hora_texto4',
                       'hora_texto5', 'hora_texto6', 'hora_texto7', 'hora_texto8',
                       'perc_he_noturna', 'perc_he_domingo', 'perc_he_feriado',
                       'tolerancia_faltas', 'tolerancia_hora_extra', 'tolerancia_entrada', 'tolerancia_saida',
                       'dias_trabalhados_semana', 'horas_trabalhadas_dia', 'horas_trabalhadas_mes',
                       'horas_trabalhadas_semana', 'horario_flexivel', 'possui_horario_noturno']),
    ]

    descricao = StringField('Descrição', validators=[DataRequired(message='Descrição é obrigatória'), Length(max=100, message='Descrição deve ter no máximo 100 caracteres')])
    hora_texto1 = StringField('Texto Horário 1', validators=[Optional(), Length(max=30)])
    hora_texto2 = StringField('Texto Horário 2', validators=[Optional(), Length(max=30)])
    hora_texto3 = StringField('Texto Horário 3', validators=[Optional(), Length(max=30)])
    hora_texto4 = StringField('Texto Horário 4', validators=[Optional(), Length(max=30)])
    hora_texto5 = StringField('Texto Horário 5', validators=[Optional(), Length(max=30)])
    hora_texto6 = StringField('Texto Horário 6', validators=[Optional(), Length(max=30)])
    hora_texto7 = StringField('Texto Horário 7', validators=[Optional(), Length(max=30)])
    hora_texto8 = StringField('Texto Horário 8', validators=[Optional(), Length(max=30)])
    perc_he_noturna = DecimalField('Percentual Hora Extra Noturna', validators=[Optional()])
    perc_he_domingo = DecimalField('Percentual Hora Extra Domingo', validators=[Optional()])
    perc_he_feriado = DecimalField('Percentual Hora Extra Feriado', validators=[Optional()])
    tolerancia_faltas = _hora('Tolerância Faltas')
    tolerancia_hora_extra = _hora('Tolerância Hora Extra')
    tolerancia_entrada = _hora('Tolerância Entrada')
    tolerancia_saida = _hora('Tolerância Saída')
    dias_trabalhados_semana = IntegerField('Dias Trabalhados Semana', validators=[Optional(), NumberRange(min=0, max=7)])
    horas_trabalhadas_dia = DecimalField('Horas Trabalhadas Dia', validators=[Optional()])
    horas_trabalhadas_mes = DecimalField('Horas Trabalhadas Mês', validators=[Optional(), NumberRange(max=220, message='Horas trabalhadas no mês não pode ultrapassar 220h')])
    horas_trabalhadas_semana = DecimalField('Horas Trabalhadas Semana', validators=[Optional()])
    horario_flexivel = BooleanField('Horário Flexível')
    possui_horario_noturno = BooleanField('Possui Horário Noturno')

    quadro = FieldList(FormField(QuadroHorarioLinhaForm), min_entries=len(DIAS_SEMANA), max_entries=len(DIAS_SEMANA))

    submit = SubmitField('Salvar')

    def quadro_payload(self):
        """Linhas do quadro a enviar: apenas dias com alguma entrada/saída."""
        itens = []
        for indice, linha in enumerate(self.quadro):
            if not linha.form.preenchida():
                continue
            dia = linha.form.dia_semana.data
            item = {'diaSemana': int(dia) if dia not in (None, '') else indice}
            for campo in MARCACOES:
                item[campo] = (linha.form[campo].data or '').strip() or None
            item['totalHoras'] = (linha.form.total_horas.data or '').strip() or None
            itens.append(item)
        return itens
