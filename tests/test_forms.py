from datetime import date
from decimal import Decimal

import pytest

from forms_type import (
    LoginForm, EmpresaForm, FilialForm, DepartamentoForm, IncidenciaForm, FuncaoForm,
    FeriadoForm, HorarioForm, ProcessoForm, TABELA_EVENTOS_PADRAO, linhas_quadro,
)
from forms_type.base_form import camel_case, int_ou_none, para_data


def validar(flask_app, form_class, dados, preparar=None, **kwargs):
    with flask_app.test_request_context(method='POST', data=dados):
        form = form_class(**kwargs)
        if preparar:
            preparar(form)
        valido = form.validate()
        return valido, form


def test_camel_case_e_coercao():
    assert camel_case('id_tabela_evento') == 'idTabelaEvento'
    assert camel_case('descricao') == 'descricao'
    assert int_ou_none('') is None
    assert int_ou_none('7') == 7


def test_para_data_aceita_iso_e_timestamp():
    assert para_data('2024-03-15') == date(2024, 3, 15)
    assert para_data('2024-03-15T10:00:00.000Z') == date(2024, 3, 15)
    assert para_data('invalida') is None
    assert para_data(None) is None


@pytest.mark.parametrize('senha,valido', [('12345', False), ('123456', True)])
def test_login_senha_minimo_6(flask_app, senha, valido):
    resultado, form = validar(flask_app, LoginForm, {'login': 'admin', 'senha': senha})
    assert resultado is valido
    if not valido:
        assert 'Senha deve ter no mínimo 6 caracteres' in form.senha.errors


def test_login_obrigatorio(flask_app):
    resultado, form = validar(flask_app, LoginForm, {'login': '', 'senha': '123456'})
    assert not resultado
    assert 'Login é obrigatório' in form.login.errors


@pytest.mark.parametrize('mes,valido', [('0', False), ('1', True), ('12', True), ('13', False)])
def test_processo_mes_entre_1_e_12(flask_app, mes, valido):
    dados = {'tipo_processo': '1', 'mes': mes, 'ano': '2024', 'numero_folha': '1', 'tipo_folha': '1'}
    resultado, form = validar(flask_app, ProcessoForm, dados)
    assert resultado is valido
    if not valido:
        assert 'Mês deve ser entre 1 e 12' in form.mes.errors


def test_processo_ano_minimo_2000(flask_app):
    dados = {'tipo_processo': '1', 'mes': '5', 'ano': '1999', 'numero_folha': '1', 'tipo_folha': '1'}
    resultado, form = validar(flask_app, ProcessoForm, dados)
    assert not resultado
    assert 'Ano deve ser maior ou igual a 2000' in form.ano.errors


def test_processo_payload_sem_filtros_vazios(flask_app):
    dados = {'tipo_processo': '1', 'mes': '5', 'ano': '2024', 'numero_folha': '2', 'tipo_folha': '2',
             'empresa_inicial': '', 'data_pagamento': '2024-06-05'}
    resultado, form = validar(flask_app, ProcessoForm, dados)
    assert resultado
    payload = form.to_payload()
    assert payload['mes'] == 5
    assert payload['numeroFolha'] == 2
    assert payload['tipoFolha'] == 2
    assert payload['dataPagamento'] == date(2024, 6, 5)
    assert payload['empresaInicial'] is None


def test_processo_valores_padrao(flask_app):
    with flask_app.test_request_context():
        form = ProcessoForm(formdata=None)
        hoje = date.today()
        assert form.tipo_processo.data == 1
        assert form.numero_folha.data == 1
        assert form.tipo_folha.data == 1
        assert form.mes.data == hoje.month
        assert form.ano.data == hoje.year


@pytest.mark.parametrize('ddd,valido', [('10', False), ('11', True), ('99', True), ('100', False)])
def test_empresa_ddd_entre_11_e_99(flask_app, ddd, valido):
    dados = {'id_tabela_evento': '1', 'ddd_responsavel': ddd}
    resultado, form = validar(flask_app, EmpresaForm, dados,
                              preparar=lambda f: f.carregar_tabelas(TABELA_EVENTOS_PADRAO))
    assert resultado is valido


def test_empresa_tabela_de_eventos_obrigatoria(flask_app):
    resultado, form = validar(flask_app, EmpresaForm, {'razao_social': 'ACME'},
                              preparar=lambda f: f.carregar_tabelas(TABELA_EVENTOS_PADRAO))
    assert not resultado
    assert 'Tabela de Eventos é obrigatória' in form.id_tabela_evento.errors


def test_empresa_payload_cpf_e_telefone_so_digitos(flask_app):
    dados = {'id_tabela_evento': '1', 'cpf_responsavel': '123.456.789-00',
             'telefone_responsavel': '(11) 9999-8888', 'micro_empresa': 'y'}
    resultado, form = validar(flask_app, EmpresaForm, dados,
                              preparar=lambda f: f.carregar_tabelas(TABELA_EVENTOS_PADRAO))
    assert resultado
    payload = form.to_payload()
    assert payload['cpfResponsavel'] == '12345678900'
    assert payload['telefoneResponsavel'] == '1199998888'
    assert payload['microEmpresa'] == 1
    assert payload['dsrSabado'] == 0
    assert payload['idTabelaEvento'] == 1


@pytest.mark.parametrize('cep,valido', [('12345-678', True), ('12345678', True), ('1234-567', False), ('abcde-fgh', False)])
def test_filial_cep(flask_app, cep, valido):
    resultado, form = validar(flask_app, FilialForm, {'cep': cep})
    assert resultado is valido
    if not valido:
        assert 'CEP inválido' in form.cep.errors


def test_filial_email_invalido(flask_app):
    resultado, form = validar(flask_app, FilialForm, {'email': 'nao-e-email'})
    assert not resultado
    assert 'Email inválido' in form.email.errors


def test_filial_aliases_da_api(flask_app):
    resultado, form = validar(flask_app, FilialForm, {'id_aliquota_fpas': '3', 'id_rat': '2'})
    assert resultado
    payload = form.to_payload()
    assert payload['idAliquotaFPAS'] == 3
    assert payload['idRAT'] == 2


def test_departamento_divisao_obrigatoria(flask_app):
    resultado, form = validar(flask_app, DepartamentoForm, {'codigo': '1', 'descricao': 'RH'},
                              preparar=lambda f: f.carregar_divisoes([{'id': 3, 'descricao': 'Adm'}]))
    assert not resultado
    assert 'Divisão é obrigatória' in form.id_divisao.errors


@pytest.mark.parametrize('horas,valido', [('220', True), ('220.5', False)])
def test_horario_horas_mes_ate_220(flask_app, horas, valido):
    dados = {'descricao': 'Comercial', 'horas_trabalhadas_mes': horas}
    resultado, form = validar(flask_app, HorarioForm, dados, data={'quadro': linhas_quadro()})
    assert resultado is valido
    if not valido:
        assert 'Horas trabalhadas no mês não pode ultrapassar 220h' in form.horas_trabalhadas_mes.errors


def test_horario_quadro_envia_apenas_dias_preenchidos(flask_app):
    dados = {
        'descricao': 'Comercial',
        'quadro-0-dia_semana': '0', 'quadro-0-total_horas': '08:00',
        'quadro-1-dia_semana': '1', 'quadro-1-entrada1': '08:00', 'quadro-1-saida1': '12:00',
        'quadro-1-entrada2': '13:00', 'quadro-1-saida2': '17:00', 'quadro-1-total_horas': '08:00',
    }
    resultado, form = validar(flask_app, HorarioForm, dados, data={'quadro': linhas_quadro()})
    assert resultado
    assert form.quadro_payload() == [{
        'diaSemana': 1, 'entrada1': '08:00', 'saida1': '12:00', 'entrada2': '13:00', 'saida2': '17:00',
        'entrada3': None, 'saida3': None, 'totalHoras': '08:00',
    }]
    assert 'quadro' not in form.to_payload()


def test_horario_hora_invalida_no_quadro(flask_app):
    dados = {'descricao': 'Comercial', 'quadro-2-dia_semana': '2', 'quadro-2-entrada1': '25:00'}
    resultado, form = validar(flask_app, HorarioForm, dados, data={'quadro': linhas_quadro()})
    assert not resultado


def test_linhas_quadro_a_partir_da_api():
    linhas = linhas_quadro([{'id': 9, 'diaSemana': 3, 'entrada1': '07:00', 'saida1': '11:00'}])
    assert len(linhas) == 7
    assert [l['dia_semana'] for l in linhas] == list(range(7))
    assert linhas[3]['entrada1'] == '07:00'
    assert linhas[0]['entrada1'] == ''


def test_funcao_piso_maior_que_teto(flask_app):
    dados = {'id_cbo': '1', 'descricao': 'Analista', 'piso_salarial': '5000', 'teto_salarial': '3000'}
    resultado, form = validar(flask_app, FuncaoForm, dados,
                              preparar=lambda f: f.carregar_cbos([{'id': 1, 'codigo': '2124', 'descricao': 'Analista'}]))
    assert not resultado
    assert 'Piso salarial deve ser menor ou igual ao teto salarial' in form.piso_salarial.errors


def test_funcao_piso_igual_ao_teto(flask_app):
    dados = {'id_cbo': '1', 'descricao': 'Analista', 'piso_salarial': '3000', 'teto_salarial': '3000'}
    resultado, form = validar(flask_app, FuncaoForm, dados,
                              preparar=lambda f: f.carregar_cbos([{'id': 1, 'codigo': '2124', 'descricao': 'Analista'}]))
    assert resultado
    assert form.to_payload()['pisoSalarial'] == Decimal('3000.00')


def _opcoes_incidencia(form):
    form.carregar_opcoes([{'id': 1, 'descricao': 'INSS'}], [{'id': 2, 'descricao': 'Salário'}])


def test_incidencia_percentual_e_valor_fixo_exclusivos(flask_app):
    dados = {'id_tipo_incidencia': '1', 'id_base_calculo': '2', 'percentual': '10', 'valor_fixo': '50'}
    resultado, form = validar(flask_app, IncidenciaForm, dados, preparar=_opcoes_incidencia)
    assert not resultado
    assert 'Informe percentual ou valor fixo, não ambos' in form.valor_fixo.errors


def test_incidencia_tipo_obrigatorio(flask_app):
    resultado, form = validar(flask_app, IncidenciaForm, {'id_base_calculo': '2', 'percentual': '10'},
                              preparar=_opcoes_incidencia)
    assert not resultado
    assert 'Selecione um Tipo de Incidência' in form.id_tipo_incidencia.errors


def test_incidencia_payload_com_evento(flask_app):
    dados = {'id_tipo_incidencia': '1', 'id_base_calculo': '2', 'percentual': '8', 'ativo': 'y'}
    resultado, form = validar(flask_app, IncidenciaForm, dados, preparar=_opcoes_incidencia)
    assert resultado
    payload = form.payload_para(42)
    assert payload['idEvento'] == 42
    assert payload['idTipoIncidencia'] == 1
    assert payload['percentual'] == Decimal('8')
    assert payload['valorFixo'] is None
    assert payload['ativo'] is True


def test_feriado_sem_parcial_nao_envia_horas(flask_app):
    dados = {'data_feriado': '2024-12-25', 'descricao': 'Natal', 'tipo_feriado': '1',
             'hora_inicio': '08:00', 'hora_final': '12:00'}
    resultado, form = validar(flask_app, FeriadoForm, dados, preparar=lambda f: f.carregar_opcoes([], []))
    assert resultado
    payload = form.to_payload()
    assert 'horaInicio' not in payload
    assert payload['dataFeriado'] == date(2024, 12, 25)


def test_feriado_data_obrigatoria(flask_app):
    dados = {'descricao': 'Natal', 'tipo_feriado': '1'}
    resultado, form = validar(flask_app, FeriadoForm, dados, preparar=lambda f: f.carregar_opcoes([], []))
    assert not resultado
    assert 'Data é obrigatória' in form.data_feriado.errors


def test_dados_iniciais_converte_registro_da_api():
    registro = {'id': 5, 'dataFeriado': '2024-11-15T00:00:00.000Z', 'descricao': 'Proclamação',
                'tipoFeriado': 1, 'feriadoParcial': False, 'idFilial': None}
    dados = FeriadoForm.dados_iniciais(registro)
    assert dados['data_feriado'] == date(2024, 11, 15)
    assert dados['descricao'] == 'Proclamação'
    assert dados['tipo_feriado'] == 1
    assert 'id_filial' not in dados
    assert 'id' not in dados


def test_dados_iniciais_usa_aliases():
    dados = FilialForm.dados_iniciais({'idAliquotaFPAS': 4, 'idRAT': 1})
    assert dados == {'id_aliquota_fpas': 4, 'id_rat': 1}
