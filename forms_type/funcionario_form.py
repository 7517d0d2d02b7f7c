"""Formulário de Funcionário.

É o maior cadastro do painel; os campos ficam agrupados nas mesmas abas da tela
(dados pessoais, documentos, vínculo, bancários, endereço, cálculos e outros).
"""
from wtforms import StringField, IntegerField, DecimalField, SelectField, TextAreaField, SubmitField
from wtforms.fields import DateField
from wtforms.validators import DataRequired, InputRequired, NumberRange, Optional, Length

from .base_form import ApiForm, FlagField, UFS, SIM_NAO, com_vazio, int_ou_none

SEXOS = [(1, 'Masculino'), (2, 'Feminino')]
ESTADOS_CIVIS = [(1, 'Solteiro(a)'), (2, 'Casado(a)'), (3, 'Divorciado(a)'), (4, 'Viúvo(a)'), (5, 'União Estável')]
ESCOLARIDADES = [
    (1, 'Analfabeto'), (2, 'Ensino Fundamental Incompleto'), (3, 'Ensino Fundamental Completo'),
    (4, 'Ensino Médio Incompleto'), (5, 'Ensino Médio Completo'), (6, 'Ensino Superior Incompleto'),
    (7, 'Ensino Superior Completo'),
]
RACAS = [(1, 'Branca'), (2, 'Preta'), (3, 'Parda'), (4, 'Amarela'), (5, 'Indígena'), (6, 'Não Informado')]
TIPOS_SALARIO = [(1, 'Mensal'), (2, 'Horista'), (3, 'Diário')]
TIPOS_CONTRATO = [(1, 'Prazo Indeterminado'), (2, 'Prazo Determinado'), (3, 'Experiência')]
TIPOS_PAGAMENTO = [(1, 'Dinheiro'), (2, 'Cheque'), (3, 'Crédito em Conta')]
TIPOS_SANGUINEOS = [(0, 'Não Informado'), (1, 'A+'), (2, 'A-'), (3, 'B+'), (4, 'B-'),
                    (5, 'AB+'), (6, 'AB-'), (7, 'O+'), (8, 'O-')]


def _uf(rotulo):
    return SelectField(rotulo, coerce=int_ou_none, choices=com_vazio(UFS), validators=[Optional()])


def _data(rotulo):
    return DateField(rotulo, validators=[Optional()])


def _texto(rotulo, maximo):
    return StringField(rotulo, validators=[Optional(), Length(max=maximo)])


class FuncionarioForm(ApiForm):
    ALIASES = {
        'data_opcao_fgts': 'dataOpcaoFGTS',
        'conta_fgts': 'contaFGTS',
        'digito_conta_fgts': 'digitoContaFGTS',
        'matricula_inss': 'matriculaINSS',
    }
    SECOES = [
        ('Dados Pessoais', ['nome_funcionario', 'cpf', 'pis', 'data_nascimento', 'sexo', 'estado_civil',
                            'escolaridade', 'raca_funcionario', 'naturalidade', 'estado_naturalidade',
                            'nome_pai', 'nome_mae', 'nome_conjuge']),
        ('Documentos', ['carteira_numero', 'carteira_serie', 'carteira_estado', 'carteira_data_exped',
                        'identidade', 'uf_identidade', 'data_expedicao_identidade', 'orgao_expedidor_identidade',
                        'titulo_eleitor', 'titulo_eleitor_secao', 'titulo_eleitor_zona', 'carteira_reservista',
                        'matricula_inss', 'habilitacao_numero', 'habilitacao_categoria', 'habilitacao_validade',
                        'registro_livro']),
        ('Vínculo', ['id_empresa', 'matricula', 'id_funcao', 'data_admissao', 'id_horario', 'tipo_salario',
                     'tipo_contrato', 'data_opcao_fgts', 'data_vec_to_contr_exp', 'data_aviso_previo',
                     'data_aquisicao_ferias', 'data_entrada_transferencia', 'data_saida_transferencia']),
        ('Bancários', ['id_agencia', 'conta_corrente_operacao', 'conta_corrente_numero', 'conta_corrente_digito',
                       'conta_fgts', 'digito_conta_fgts', 'percentual_adiantamento', 'tipo_pagamento']),
        ('Endereço/Contato', ['cep', 'denominacao_cep', 'localidade_cep', 'bairro_cep', 'uf_cep', 'numero_cep',
                              'complemento_cep', 'id_municipio', 'ddd', 'telefone']),
        ('Cálculos/Config', ['imprime_folha', 'possui_alvara', 'usa_vale_transporte', 'calc_contribuicao_conf',
                             'desc_cont_conf_mes_adm', 'calc_reversao_salarial', 'desc_rev_sal_mes_adm',
                             'calc_mensalidade_sindical', 'desc_mens_sind_mes_adm', 'calc_contribuicao_sindical',
                             'calcular_complemento_salarial', 'complemento_funcao']),
        ('Outros', ['id_nacionalidade', 'naturalizacao', 'naturalizacao_ano_chegada', 'id_gps',
                    'id_exposicao_agente_nocivo', 'id_categoria', 'tipo_sanguineo', 'deficiencia_fisica',
                    'vencimento_exame_medico', 'data_estabilidade', 'observacao']),
    ]

    # Dados Pessoais
    nome_funcionario = StringField('Nome do Funcionário', validators=[DataRequired(message='Nome é obrigatório'), Length(max=100, message='Nome deve ter no máximo 100 caracteres')])
    cpf = _texto('CPF', 18)
    pis = _texto('PIS', 18)
    data_nascimento = _data('Data de Nascimento')
    sexo = SelectField('Sexo', coerce=int_ou_none, choices=com_vazio(SEXOS), validators=[InputRequired(message='Sexo é obrigatório')])
    estado_civil = SelectField('Estado Civil', coerce=int_ou_none, choices=com_vazio(ESTADOS_CIVIS), validators=[InputRequired(message='Estado Civil é obrigatório')])
    escolaridade = SelectField('Escolaridade', coerce=int_ou_none, choices=com_vazio(ESCOLARIDADES), validators=[InputRequired(message='Escolaridade é obrigatória')])
    raca_funcionario = SelectField('Raça/Cor', coerce=int_ou_none, choices=com_vazio(RACAS), validators=[InputRequired(message='Raça/Cor é obrigatória')])
    naturalidade = _texto('Naturalidade', 50)
    estado_naturalidade = _uf('Estado Naturalidade')
    nome_pai = _texto('Nome do Pai', 100)
    nome_mae = _texto('Nome da Mãe', 100)
    nome_conjuge = _texto('Nome do Cônjuge', 100)

    # Documentos
    carteira_numero = _texto('Número CTPS', 10)
    carteira_serie = _texto('Série CTPS', 6)
    carteira_estado = _uf('Estado CTPS')
    carteira_data_exped = _data('Data de Expedição CTPS')
    identidade = _texto('Número RG', 17)
    uf_identidade = _uf('UF RG')
    data_expedicao_identidade = _data('Data Expedição RG')
    orgao_expedidor_identidade = _texto('Órgão Expedidor', 20)
    titulo_eleitor = _texto('Título de Eleitor', 20)
    titulo_eleitor_secao = _texto('Seção', 10)
    titulo_eleitor_zona = _texto('Zona', 10)
    carteira_reservista = _texto('Reservista', 20)
    matricula_inss = _texto('Matrícula INSS', 20)
    habilitacao_numero = _texto('Habilitação (CNH)', 20)
    habilitacao_categoria = _texto('Categoria CNH', 5)
    habilitacao_validade = _data('Validade CNH')
    registro_livro = _texto('Registro Livro', 20)

    # Vínculo
    id_empresa = SelectField('Empresa', coerce=int_ou_none, choices=com_vazio([]), validators=[InputRequired(message='Empresa é obrigatória')])
    matricula = IntegerField('Matrícula', validators=[InputRequired(message='Matrícula é obrigatória'), NumberRange(min=1, message='Matrícula é obrigatória')])
    id_funcao = SelectField('Função', coerce=int_ou_none, choices=com_vazio([]), validate_choice=False, validators=[Optional()])
    data_admissao = _data('Data de Admissão')
    id_horario = SelectField('Horário', coerce=int_ou_none, choices=com_vazio([]), validate_choice=False, validators=[Optional()])
    tipo_salario = SelectField('Tipo Salário', coerce=int_ou_none, choices=com_vazio(TIPOS_SALARIO), validators=[Optional()])
    tipo_contrato = SelectField('Tipo Contrato', coerce=int_ou_none, choices=com_vazio(TIPOS_CONTRATO), validators=[Optional()])
    data_opcao_fgts = _data('Data Opção FGTS')
    data_vec_to_contr_exp = _data('Venc. Contrato Exp.')
    data_aviso_previo = _data('Data Aviso Prévio')
    data_aquisicao_ferias = _data('Aquisição Férias')
    data_entrada_transferencia = _data('Data Entrada Transferência')
    data_saida_transferencia = _data('Data Saída Transferência')

    # Bancários
    id_agencia = IntegerField('ID Agência', validators=[Optional()])
    conta_corrente_operacao = _texto('Operação', 6)
    conta_corrente_numero = _texto('Número da Conta', 12)
    conta_corrente_digito = _texto('Dígito da Conta', 2)
    conta_fgts = _texto('Conta FGTS', 17)
    digito_conta_fgts = _texto('Dígito Conta FGTS', 5)
    percentual_adiantamento = DecimalField('Percentual Adiantamento', validators=[Optional(), NumberRange(min=0, max=100)])
    tipo_pagamento = SelectField('Tipo Pagamento', coerce=int_ou_none, choices=com_vazio(TIPOS_PAGAMENTO), validators=[Optional()])

    # Endereço/Contato
    cep = _texto('CEP', 9)
    denominacao_cep = _texto('Denominação CEP', 100)
    localidade_cep = _texto('Localidade (Cidade)', 50)
    bairro_cep = _texto('Bairro', 50)
    uf_cep = _texto('UF', 2)
    numero_cep = _texto('Número', 10)
    complemento_cep = _texto('Complemento', 50)
    id_municipio = IntegerField('ID Município', validators=[Optional()])
    ddd = IntegerField('DDD', validators=[Optional(), NumberRange(min=11, max=99, message='DDD deve ser entre 11 e 99')])
    telefone = _texto('Telefone', 9)

    # Cálculos/Config
    imprime_folha = SelectField('Imprime na Folha', coerce=int_ou_none, choices=SIM_NAO, default=1, validators=[Optional()])
    possui_alvara = SelectField('Possui Alvará', coerce=int_ou_none, choices=SIM_NAO, default=0, validators=[Optional()])
    usa_vale_transporte = SelectField('Usa Vale Transporte', coerce=int_ou_none, choices=SIM_NAO, default=0, validators=[Optional()])
    calc_contribuicao_conf = FlagField('Calc. Contrib. Confederativa')
    desc_cont_conf_mes_adm = FlagField('Desc. Cont. Conf. Mês Adm')
    calc_reversao_salarial = FlagField('Calc. Reversão Salarial')
    desc_rev_sal_mes_adm = FlagField('Desc. Rev. Sal. Mês Adm')
    calc_mensalidade_sindical = FlagField('Calc. Mensalidade Sindical')
    desc_mens_sind_mes_adm = FlagField('Desc. Mens. Sind. Mês Adm')
    calc_contribuicao_sindical = FlagField('Calc. Contribuição Sindical')
    calcular_complemento_salarial = FlagField('Calcular Complemento Salarial')
    complemento_funcao = DecimalField('Valor Complemento Função', places=2, validators=[Optional()])

    # Outros
    id_nacionalidade = IntegerField('ID Nacionalidade', validators=[Optional()])
    naturalizacao = SelectField('Naturalizado', coerce=int_ou_none, choices=com_vazio(SIM_NAO), validators=[Optional()])
    naturalizacao_ano_chegada = IntegerField('Ano de Chegada', validators=[Optional(), NumberRange(min=1900, max=2100)])
    id_gps = IntegerField('ID GPS', validators=[Optional()])
    id_exposicao_agente_nocivo = IntegerField('ID Exposição Agente Nocivo', validators=[Optional()])
    id_categoria = IntegerField('ID Categoria', validators=[Optional()])
    tipo_sanguineo = SelectField('Tipo Sanguíneo', coerce=int_ou_none, choices=TIPOS_SANGUINEOS, default=0, validators=[Optional()])
    deficiencia_fisica = SelectField('Deficiência Física', coerce=int_ou_none, choices=SIM_NAO, default=0, validators=[Optional()])
    vencimento_exame_medico = _data('Vencimento Exame Médico')
    data_estabilidade = _data('Data Estabilidade')
    observacao = TextAreaField('Observação', validators=[Optional(), Length(max=1500)])

    submit = SubmitField('Salvar')

    def carregar_opcoes(self, empresas, funcoes=(), horarios=()):
        self.id_empresa.choices = com_vazio((e['id'], e.get('razaoSocial') or f"Empresa {e['id']}") for e in empresas)
        self.id_funcao.choices = com_vazio((f['id'], f.get('descricao') or f"Função {f['id']}") for f in funcoes)
        self.id_horario.choices = com_vazio((h['id'], h.get('descricao') or f"Horário {h['id']}") for h in horarios)
