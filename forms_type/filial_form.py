# Formulário para cadastro/edição de filiais (estabelecimentos) de uma empresa
from wtforms import StringField, IntegerField, SelectField, TextAreaField, BooleanField, SubmitField
from wtforms.validators import Optional, Length, NumberRange, Regexp, Email

from .base_form import ApiForm, UFS, com_vazio, int_ou_none

TIPOS_INSCRICAO = [(1, 'CNPJ'), (2, 'CEI'), (3, 'CPF')]


class FilialForm(ApiForm):
    ALIASES = {'id_aliquota_fpas': 'idAliquotaFPAS', 'id_rat': 'idRAT'}
    SECOES = [
        ('Identificação', ['id_empresa', 'tipo_inscricao', 'inscricao', 'inscricao_estadual',
                           'uf_inscricao_estadual', 'matricula_inss']),
        ('Endereço', ['cep', 'numero_cep', 'denominacao_cep', 'bairro_cep', 'localidade_cep',
                      'uf_cep', 'complemento_cep']),
        ('Contato', ['ddd', 'telefone', 'email']),
        ('Tabelas', ['id_cnae', 'id_natureza_estab', 'id_sindicato_patronal', 'id_municipio',
                     'id_aliquota_fpas', 'id_gps', 'id_agencia', 'id_rat']),
        ('Outros', ['observacao', 'status_processar']),
    ]

    id_empresa = SelectField('Empresa', coerce=int_ou_none, choices=com_vazio([]), validators=[Optional()])
    id_cnae = IntegerField('ID CNAE', validators=[Optional()])
    id_natureza_estab = IntegerField('ID Natureza do Estabelecimento', validators=[Optional()])
    id_sindicato_patronal = IntegerField('ID Sindicato Patronal', validators=[Optional()])
    id_municipio = IntegerField('ID Município', validators=[Optional()])
    id_aliquota_fpas = IntegerField('ID Alíquota FPAS', validators=[Optional()])
    id_gps = IntegerField('ID GPS', validators=[Optional()])
    id_agencia = IntegerField('ID Agência', validators=[Optional()])
    id_rat = IntegerField('ID RAT', validators=[Optional()])
    tipo_inscricao = SelectField('Tipo Inscrição', coerce=int_ou_none, choices=com_vazio(TIPOS_INSCRICAO), validators=[Optional()])
    inscricao = StringField('Inscrição (CNPJ/CEI/CPF)', validators=[Optional(), Length(max=18)])
    cep = StringField('CEP', validators=[Optional(), Length(max=9), Regexp(r'^\d{5}-?\d{3}$', message='CEP inválido')])
    denominacao_cep = StringField('Logradouro', validators=[Optional(), Length(max=50)])
    localidade_cep = StringField('Localidade', validators=[Optional(), Length(max=50)])
    bairro_cep = StringField('Bairro', validators=[Optional(), Length(max=50)])
    uf_cep = SelectField('UF', coerce=int_ou_none, choices=com_vazio(UFS), validators=[Optional()])
    complemento_cep = StringField('Complemento', validators=[Optional(), Length(max=35)])
    numero_cep = StringField('Número', validators=[Optional(), Length(max=11)])
    ddd = IntegerField('DDD', validators=[Optional(), NumberRange(min=11, max=99, message='DDD deve ser entre 11 e 99')])
    telefone = StringField('Telefone', validators=[Optional(), Length(max=9)])
    uf_inscricao_estadual = SelectField('UF Inscrição Estadual', coerce=int_ou_none, choices=com_vazio(UFS), validators=[Optional()])
    inscricao_estadual = StringField('Inscrição Estadual', validators=[Optional(), Length(max=17)])
    matricula_inss = StringField('Matrícula INSS', validators=[Optional(), Length(max=14)])
    email = StringField('Email', validators=[Optional(), Email(message='Email inválido'), Length(max=100)])
    observacao = TextAreaField('Observação', validators=[Optional(), Length(max=1500)])
    status_processar = BooleanField('Status Processar', default=True)
    submit = SubmitField('Salvar')

    def carregar_empresas(self, empresas):
        self.id_empresa.choices = com_vazio(
            (e['id'], e.get('razaoSocial') or f"Empresa {e['id']}") for e in empresas
        )
