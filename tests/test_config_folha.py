from datetime import date, datetime
from decimal import Decimal

from config_folha import (
    competencia,
    rotulo_tipo_folha,
    formatar_moeda,
    formatar_data,
    totais_recibos,
    folhas_processadas,
    linhas_csv_recibos,
)


def test_competencia():
    assert competencia(3, 2024) == '03/2024'
    assert competencia(12, 2023) == '12/2023'
    assert competencia(None, 2024) == '-'


def test_rotulo_tipo_folha():
    assert rotulo_tipo_folha(1) == 'Mensal'
    assert rotulo_tipo_folha(2) == '13º Salário'
    assert rotulo_tipo_folha(3) == 'Férias'
    assert rotulo_tipo_folha(4) == 'Rescisão'
    assert rotulo_tipo_folha(9) == '-'


def test_formatar_moeda():
    assert formatar_moeda(1234.5) == 'R$ 1234,50'
    assert formatar_moeda(Decimal('0.456')) == 'R$ 0,46'
    assert formatar_moeda(None) == 'R$ 0,00'
    assert formatar_moeda('100') == 'R$ 100,00'


def test_formatar_data():
    assert formatar_data('2024-05-31T12:00:00.000Z') == '31/05/2024'
    assert formatar_data(date(2024, 1, 2)) == '02/01/2024'
    assert formatar_data(datetime(2024, 1, 2, 10, 30)) == '02/01/2024'
    assert formatar_data(None) == '-'
    assert formatar_data('lixo') == '-'


def test_totais_recibos():
    recibos = [
        {'totalProventos': 3000, 'totalDescontos': 450.5, 'totalLiquido': 2549.5},
        {'totalProventos': '1500.25', 'totalDescontos': None, 'totalLiquido': 1500.25},
        {},
    ]
    totais = totais_recibos(recibos)
    assert totais['quantidade'] == 3
    assert totais['proventos'] == Decimal('4500.25')
    assert totais['descontos'] == Decimal('450.5')
    assert totais['liquido'] == Decimal('4049.75')


def test_folhas_processadas():
    processos = [{'id': 1, 'dataProcessamento': '2024-02-01'}, {'id': 2, 'dataProcessamento': None}, {'id': 3}]
    assert folhas_processadas(processos) == 1


def test_linhas_csv_recibos():
    processo = {'mes': 2, 'ano': 2024, 'tipoFolha': 1}
    recibos = [{'idFuncionario': 7, 'funcionario': {'nomeFuncionario': 'Ana', 'matricula': 10},
                'totalProventos': 2000, 'totalDescontos': 200, 'totalLiquido': 1800}]
    linhas = linhas_csv_recibos(processo, recibos)
    assert linhas[0] == ['Competência', '02/2024', 'Tipo de Folha', 'Mensal']
    assert linhas[2] == [10, 'Ana', 'R$ 2000,00', 'R$ 200,00', 'R$ 1800,00']
    assert linhas[-1] == ['TOTAIS', '', 'R$ 2000,00', 'R$ 200,00', 'R$ 1800,00']
