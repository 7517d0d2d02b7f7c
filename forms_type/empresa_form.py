"""Formulário de Empresa, organizado nas abas da tela de edição.

A tabela de eventos é o único campo obrigatório; o restante espelha as
configurações de folha que o backend aceita. CPF e telefone são enviados só com
dígitos.
"""
from wtforms import StringField, IntegerField, DecimalField, SelectField, SubmitField
from wtforms.validators import InputRequired, NumberRange, Optional, Length

from .base_form import ApiForm, FlagField, SIM_NAO, com_vazio, int_ou_none, so_digitos

REGIMES = [(0, 'Competência'), (1, 'Caixa')]
OPCOES_SIMPLES = [
    (1, 'Não Optante'), (2, 'Optante'), (3, 'Optante - Suspenso'),
    (4, 'Optante - Excluído'), (5, 'Optante - Cancelado'), (6, 'Optante - Inapto'),
]
GERA_SALARIO = [(0, 'Horas'), (1, 'Valor'), (2, 'Dias')]

TABELA_EVENTOS_PADRAO = [{'id': 1, 'descricao': 'Tabela Padrão'}]


class EmpresaForm(ApiForm):
    SECOES = [
        ('Identificação', ['id_tabela_evento', 'razao_social', 'nome_responsavel', 'cpf_responsavel',
                           'qualificacao_responsavel', 'regime', 'capital_social_sind_patronal',
                           'micro_empresa', 'opcao_simples']),
        ('Configurações de Folha', ['gera_salario', 'calculo_dsr_horista', 'arredondamento',
                                    'mes_competencia', 'ano_competencia', 'fracionar_ferias_por_mes',
                                    'calcula_licenca_remunerada', 'altera_periodo_aquisitivo',
                                    'pagar_abono_antes_ferias', 'calcula_compl_decimo_desc', 'dsr_sabado']),
        ('Tributação', ['atividade_tributada']),
        ('Contato', ['ddd_responsavel', 'telefone_responsavel']),
    ]

    # Identificação
    id_tabela_evento = SelectField('Tabela de Eventos', coerce=int_ou_none,
                                   validators=[InputRequired(message='Tabela de Eventos é obrigatória'),
                                               NumberRange(min=1, message='Tabela de Eventos é obrigatória')])
    razao_social = StringField('Razão Social', validators=[Optional(), Length(max=150)])
    nome_responsavel = StringField('Nome do Responsável', validators=[Optional()])
    cpf_responsavel = StringField('CPF do Responsável', validators=[Optional(), Length(max=14)])
    qualificacao_responsavel = StringField('Qualificação do Responsável', validators=[Optional()])
    regime = SelectField('Regime', coerce=int_ou_none, choices=com_vazio(REGIMES), validators=[Optional()])
    capital_social_sind_patronal = DecimalField('Capital Social Sindicato Patronal', validators=[Optional()])
    micro_empresa = FlagField('Microempresa')
    opcao_simples = SelectField('Opção pelo Simples', coerce=int_ou_none, choices=com_vazio(OPCOES_SIMPLES), validators=[Optional()])

    # Configurações de Folha
    gera_salario = SelectField('Gera Salário', coerce=int_ou_none, choices=com_vazio(GERA_SALARIO), validators=[Optional()])
    calculo_dsr_horista = SelectField('Cálculo DSR Horista', coerce=int_ou_none, choices=SIM_NAO, default=0, validators=[Optional()])
    arredondamento = DecimalField('Arredondamento', validators=[Optional()])
    mes_competencia = IntegerField('Mês de Competência', validators=[Optional(), NumberRange(min=1, max=12, message='Mês deve ser entre 1 e 12')])
    ano_competencia = IntegerField('Ano de Competência', validators=[Optional(), NumberRange(min=2000, max=2100, message='Ano deve ser entre 2000 e 2100')])
    fracionar_ferias_por_mes = FlagField('Fracionar férias por mês')
    calcula_licenca_remunerada = FlagField('Calcular licença remunerada')
    altera_periodo_aquisitivo = FlagField('Alterar período aquisitivo')
    pagar_abono_antes_ferias = FlagField('Pagar abono antes das férias')
    calcula_compl_decimo_desc = FlagField('Calcular complemento 13º')
    dsr_sabado = FlagField('DSR sábado')

    # Tributação
    atividade_tributada = SelectField('Atividade Tributada', coerce=int_ou_none, choices=com_vazio(SIM_NAO), validators=[Optional()])

    # Contato
    ddd_responsavel = IntegerField('DDD', validators=[Optional(), NumberRange(min=11, max=99, message='DDD deve ser entre 11 e 99')])
    telefone_responsavel = StringField('Telefone', validators=[Optional(), Length(max=15)])

    submit = SubmitField('Salvar')

    def carregar_tabelas(self, tabelas):
        self.id_tabela_evento.choices = com_vazio(
            (t['id'], t.get('descricao') or f"Tabela {t['id']}") for t in tabelas
        )

    def to_payload(self):
        payload = super().to_payload()
        payload['cpfResponsavel'] = so_digitos(payload.get('cpfResponsavel'))
        payload['telefoneResponsavel'] = so_digitos(payload.get('telefoneResponsavel'))
        return payload
