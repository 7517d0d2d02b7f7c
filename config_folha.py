from datetime import date, datetime
from decimal import Decimal, InvalidOperation

TIPOS_FOLHA = [(1, 'Mensal'), (2, '13º Salário'), (3, 'Férias'), (4, 'Rescisão')]

# Função para montar a competência de um processo no formato MM/AAAA
# Parâmetros:
#   mes: mês de referência (1-12)
#   ano: ano de referência
# Retorna: texto 'MM/AAAA' ou '-' quando faltar algum dos dois

def competencia(mes, ano):
    if not mes or not ano:
        return '-'
    return f'{int(mes):02d}/{ano}'


def rotulo_tipo_folha(tipo_folha):
    """Rótulo do tipo de folha (1 Mensal, 2 13º Salário, 3 Férias, 4 Rescisão)"""
    return dict(TIPOS_FOLHA).get(tipo_folha, '-')


def para_decimal(valor):
    if valor in (None, ''):
        return Decimal('0')
    try:
        return Decimal(str(valor))
    except InvalidOperation:
        return Decimal('0')


# Função para formatar valores monetários como na tela de recibos
# Parâmetros:
#   valor: número (int, float, Decimal ou texto numérico)
# Retorna: texto 'R$ 1234,56' (duas casas, vírgula decimal, sem separador de milhar)

def formatar_moeda(valor):
    return 'R$ ' + f'{para_decimal(valor):.2f}'.replace('.', ',')


def formatar_data(valor):
    """Data no formato dd/mm/aaaa; aceita date, datetime ou texto ISO. Vazio vira '-'."""
    if not valor:
        return '-'
    if isinstance(valor, datetime):
        valor = valor.date()
    if not isinstance(valor, date):
        try:
            valor = date.fromisoformat(str(valor)[:10])
        except ValueError:
            return '-'
    return valor.strftime('%d/%m/%Y')


def sim_nao(valor):
    return 'Sim' if valor else 'Não'


# Função para totalizar os recibos de um processo
# Parâmetros:
#   recibos: lista de recibos devolvidos por /recibos?idProcesso=
# Retorna: dicionário com quantidade, proventos, descontos e líquido (Decimal)

def totais_recibos(recibos):
    return {
        'quantidade': len(recibos),
        'proventos': sum((para_decimal(r.get('totalProventos')) for r in recibos), Decimal('0')),
        'descontos': sum((para_decimal(r.get('totalDescontos')) for r in recibos), Decimal('0')),
        'liquido': sum((para_decimal(r.get('totalLiquido')) for r in recibos), Decimal('0')),
    }


def folhas_processadas(processos):
    """Quantidade de processos que já passaram pelo cálculo"""
    return sum(1 for p in processos if p.get('dataProcessamento'))


def linhas_csv_recibos(processo, recibos):
    """Linhas do CSV de exportação dos recibos de um processo (separador ';')."""
    linhas = [['Competência', competencia(processo.get('mes'), processo.get('ano')),
               'Tipo de Folha', rotulo_tipo_folha(processo.get('tipoFolha'))]]
    linhas.append(['Matrícula', 'Funcionário', 'Proventos', 'Descontos', 'Líquido'])
    for recibo in recibos:
        funcionario = recibo.get('funcionario') or {}
        linhas.append([
            funcionario.get('matricula', ''),
            funcionario.get('nomeFuncionario') or f"Funcionário {recibo.get('idFuncionario', '')}",
            formatar_moeda(recibo.get('totalProventos')),
            formatar_moeda(recibo.get('totalDescontos')),
            formatar_moeda(recibo.get('totalLiquido')),
        ])
    totais = totais_recibos(recibos)
    linhas.append([])
    linhas.append(['TOTAIS', '', formatar_moeda(totais['proventos']),
                   formatar_moeda(totais['descontos']), formatar_moeda(totais['liquido'])])
    return linhas
