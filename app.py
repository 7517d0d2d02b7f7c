import csv
import io
import os
from datetime import datetime

from flask import Flask, render_template, redirect, url_for, flash, request, Response, session
from flask_login import LoginManager, login_user, logout_user, login_required, current_user
from flask_wtf.csrf import CSRFProtect

from api_client import FopagApi, ApiError, SessaoExpiradaError
from config_folha import (
    competencia,
    rotulo_tipo_folha,
    formatar_moeda,
    formatar_data,
    sim_nao,
    totais_recibos,
    folhas_processadas,
    linhas_csv_recibos,
)
from forms_type import (
    LoginForm, EmpresaForm, FilialForm, DepartamentoForm, EventoForm, IncidenciaForm,
    SindicatoForm, BaseCalculoForm, FuncaoForm, FeriadoForm, FuncionarioForm, HorarioForm,
    ProcessoForm, TABELA_EVENTOS_PADRAO, linhas_quadro,
)
from forms_type.empresa_form import REGIMES
from forms_type.evento_form import TIPOS_PROVENTO_DESCONTO
from forms_type.feriado_form import TIPOS_FERIADO
from logging_config import configurar_logging, log
from models import db, Usuario, Auditoria

app = Flask(__name__)
app.config.from_object(os.getenv('FOPAG_CONFIG', 'config.Config'))

configurar_logging(app.config['LOG_LEVEL'], app.config['LOG_DIR'])

db.init_app(app)
csrf = CSRFProtect(app)

login_manager = LoginManager()
login_manager.init_app(app)
login_manager.login_view = 'login'
login_manager.login_message = 'Faça login para acessar o painel.'
login_manager.login_message_category = 'warning'

app.add_template_filter(formatar_moeda, 'moeda')
app.add_template_filter(formatar_data, 'data')
app.add_template_filter(rotulo_tipo_folha, 'tipo_folha')
app.add_template_filter(sim_nao, 'sim_nao')

# Menu lateral: (rótulo, endpoint) ou (rótulo, [itens])
MENU = [
    ('Dashboard', 'index'),
    ('Cadastros', [
        ('Empresas', 'empresas'),
        ('Filiais', 'filiais'),
        ('Departamentos', 'departamentos'),
        ('Eventos', 'eventos'),
        ('Bases de Cálculo', 'bases_calculo'),
        ('Funções', 'funcoes'),
        ('Sindicatos', 'sindicatos'),
        ('Funcionários', 'funcionarios'),
        ('Horários', 'horarios'),
        ('Feriados', 'feriados'),
    ]),
    ('Cálculos', 'calculos'),
    ('Auditoria', 'auditoria'),
]


@login_manager.user_loader
def load_user(user_id):
    dados = session.get('usuario')
    if not dados or not session.get('token') or str(dados.get('id')) != user_id:
        return None
    return Usuario.from_session(dados)


def get_api():
    """Cliente da API com o token do usuário logado"""
    return FopagApi(
        app.config['FOPAG_API_URL'],
        token=session.get('token'),
        timeout=app.config['FOPAG_API_TIMEOUT'],
    )


@app.errorhandler(SessaoExpiradaError)
def sessao_expirada(e):
    log.info(f'Sessão expirada para {session.get("usuario", {}).get("login")}')
    logout_user()
    session.pop('token', None)
    session.pop('usuario', None)
    flash('Sessão expirada. Faça login novamente.', 'warning')
    return redirect(url_for('login'))


def mensagem_erro(erro, padrao):
    """Mensagem a exibir para uma falha da API; 401 segue para o tratador global."""
    if isinstance(erro, SessaoExpiradaError):
        raise erro
    return erro.mensagem or padrao


def registrar_auditoria(acao, entidade, entidade_id=None, detalhes=None):
    usuario = current_user.login or current_user.nome
    auditoria = Auditoria(
        usuario=usuario,
        acao=acao,
        entidade=entidade,
        entidade_id=entidade_id,
        detalhes=detalhes,
    )
    db.session.add(auditoria)
    db.session.commit()
    log.info(f'{acao} de {entidade} {entidade_id or ""} por {usuario}')


def id_criado(resposta):
    if isinstance(resposta, dict):
        return resposta.get('id')
    return None


def carregar_lista(caminho, erro, params=None):
    """GET de uma coleção para as telas de listagem: devolve (registros, mensagem de erro)."""
    try:
        return get_api().listar(caminho, params), None
    except ApiError as e:
        return [], mensagem_erro(e, erro)


def carregar_registro(caminho, registro_id, erro):
    try:
        return get_api().get(f'{caminho}/{registro_id}') or {}
    except ApiError as e:
        flash(mensagem_erro(e, erro), 'danger')
        return None


def excluir_registro(caminho, entidade, registro_id, sucesso, erro):
    try:
        get_api().delete(f'{caminho}/{registro_id}')
    except ApiError as e:
        flash(mensagem_erro(e, erro), 'danger')
        return False
    registrar_auditoria('Exclusão', entidade, registro_id)
    flash(sucesso, 'success')
    return True


def opcoes(registros, campo, rotulo):
    return [(r['id'], r.get(campo) or f"{rotulo} {r['id']}") for r in registros]


def montar_linhas(registros, celulas, editar, deletar, id_param):
    return [
        {
            'celulas': celulas(r),
            'editar_url': url_for(editar, **{id_param: r['id']}) if editar else None,
            'deletar_url': url_for(deletar, **{id_param: r['id']}),
        }
        for r in registros
    ]


@app.context_processor
def inject_menu():
    return dict(menu=MENU, ano_atual=datetime.now().year)


# ---------------------------------------------------------------------------
# Autenticação
# ---------------------------------------------------------------------------

@app.route('/login', methods=['GET', 'POST'])
def login():
    if current_user.is_authenticated:
        return redirect(url_for('index'))
    form = LoginForm()
    if form.validate_on_submit():
        try:
            token, dados_usuario = get_api().login(form.login.data.strip(), form.senha.data)
        except ApiError as e:
            log.warning(f'Falha de login para {form.login.data}: {e.status_code}')
            flash(e.mensagem or 'Erro ao fazer login. Verifique suas credenciais.', 'danger')
        else:
            usuario = Usuario.from_api(dados_usuario)
            session['token'] = token
            session['usuario'] = usuario.to_session()
            login_user(usuario)
            log.info(f'Login de {usuario.login}')
            flash('Login realizado com sucesso!', 'success')
            return redirect(url_for('index'))
    return render_template('login.html', form=form)


@app.route('/logout', methods=['GET', 'POST'])
@login_required
def logout():
    logout_user()
    session.pop('token', None)
    session.pop('usuario', None)
    flash('Você saiu do sistema.', 'success')
    return redirect(url_for('login'))


@app.route('/')
@app.route('/index')
@login_required
def index():
    api = get_api()

    def contar(caminho, contagem=len):
        try:
            return contagem(api.listar(caminho))
        except SessaoExpiradaError:
            raise
        except ApiError:
            return '-'

    cards = [
        ('Total de Empresas', contar('/empresas')),
        ('Total de Funcionários', contar('/funcionarios')),
        ('Folhas Processadas', contar('/processos', folhas_processadas)),
    ]
    return render_template('dashboard.html', cards=cards)


# ---------------------------------------------------------------------------
# Empresas
# ---------------------------------------------------------------------------

@app.route('/empresas')
@login_required
def empresas():
    registros, erro = carregar_lista('/empresas', 'Erro ao carregar empresas')
    regimes = dict(REGIMES)
    linhas = montar_linhas(
        registros,
        lambda e: [e.get('razaoSocial') or '-', e.get('nomeResponsavel') or '-',
                   regimes.get(e.get('regime'), '-'), formatar_data(e.get('createdAt'))],
        'editar_empresa', 'deletar_empresa', 'empresa_id',
    )
    return render_template(
        'lista.html', titulo='Empresas', novo_url=url_for('nova_empresa'), novo_rotulo='Nova Empresa',
        colunas=['Razão Social', 'Responsável', 'Regime', 'Data de Cadastro'], linhas=linhas,
        vazio='Nenhuma empresa cadastrada', erro=erro,
        confirmacao='Tem certeza que deseja excluir esta empresa?',
    )


def form_empresa(registro=None):
    form = EmpresaForm(data=EmpresaForm.dados_iniciais(registro)) if registro else EmpresaForm()
    form.carregar_tabelas(get_api().listar_opcoes('/tabela-eventos', TABELA_EVENTOS_PADRAO))
    return form


@app.route('/empresas/nova', methods=['GET', 'POST'])
@login_required
def nova_empresa():
    form = form_empresa()
    if form.validate_on_submit():
        try:
            resposta = get_api().post('/empresas', form.to_payload())
        except ApiError as e:
            flash(mensagem_erro(e, 'Erro ao salvar empresa'), 'danger')
        else:
            registrar_auditoria('Cadastro', 'Empresa', id_criado(resposta), form.razao_social.data)
            flash('Empresa cadastrada com sucesso!', 'success')
            return redirect(url_for('empresas'))
    return render_template('formulario.html', form=form, titulo='Nova Empresa', voltar_url=url_for('empresas'))


@app.route('/empresas/<int:empresa_id>/editar', methods=['GET', 'POST'])
@login_required
def editar_empresa(empresa_id):
    empresa = carregar_registro('/empresas', empresa_id, 'Erro ao carregar empresa')
    if empresa is None:
        return redirect(url_for('empresas'))
    form = form_empresa(empresa)
    if form.validate_on_submit():
        try:
            get_api().patch(f'/empresas/{empresa_id}', form.to_payload())
        except ApiError as e:
            flash(mensagem_erro(e, 'Erro ao salvar empresa'), 'danger')
        else:
            registrar_auditoria('Edição', 'Empresa', empresa_id, form.razao_social.data)
            flash('Empresa atualizada com sucesso!', 'success')
            return redirect(url_for('editar_empresa', empresa_id=empresa_id))
    return render_template('formulario.html', form=form, titulo='Editar Empresa', voltar_url=url_for('empresas'))


@app.route('/empresas/<int:empresa_id>/deletar', methods=['POST'])
@login_required
def deletar_empresa(empresa_id):
    excluir_registro('/empresas', 'Empresa', empresa_id, 'Empresa excluída com sucesso!', 'Erro ao excluir empresa')
    return redirect(url_for('empresas'))


# ---------------------------------------------------------------------------
# Filiais
# ---------------------------------------------------------------------------

@app.route('/filiais')
@login_required
def filiais():
    registros, erro = carregar_lista('/filiais', 'Erro ao carregar filiais')
    empresas_por_id = dict(opcoes(get_api().listar_opcoes('/empresas'), 'razaoSocial', 'Empresa'))
    linhas = montar_linhas(
        registros,
        lambda f: [f.get('inscricao') or '-', f.get('denominacaoCep') or '-', f.get('localidadeCep') or '-',
                   empresas_por_id.get(f.get('idEmpresa'), '-')],
        'editar_filial', 'deletar_filial', 'filial_id',
    )
    return render_template(
        'lista.html', titulo='Filiais', novo_url=url_for('nova_filial'), novo_rotulo='Nova Filial',
        colunas=['Inscrição', 'Logradouro', 'Localidade', 'Empresa'], linhas=linhas,
        vazio='Nenhuma filial cadastrada', erro=erro,
        confirmacao='Tem certeza que deseja excluir esta filial?',
    )


def form_filial(registro=None):
    form = FilialForm(data=FilialForm.dados_iniciais(registro)) if registro else FilialForm()
    form.carregar_empresas(get_api().listar_opcoes('/empresas'))
    return form


@app.route('/filiais/nova', methods=['GET', 'POST'])
@login_required
def nova_filial():
    form = form_filial()
    if form.validate_on_submit():
        try:
            resposta = get_api().post('/filiais', form.to_payload())
        except ApiError as e:
            flash(mensagem_erro(e, 'Erro ao salvar filial'), 'danger')
        else:
            registrar_auditoria('Cadastro', 'Filial', id_criado(resposta), form.inscricao.data)
            flash('Filial cadastrada com sucesso!', 'success')
            return redirect(url_for('filiais'))
    return render_template('formulario.html', form=form, titulo='Nova Filial', voltar_url=url_for('filiais'))


@app.route('/filiais/<int:filial_id>/editar', methods=['GET', 'POST'])
@login_required
def editar_filial(filial_id):
    filial = carregar_registro('/filiais', filial_id, 'Erro ao carregar filial')
    if filial is None:
        return redirect(url_for('filiais'))
    form = form_filial(filial)
    if form.validate_on_submit():
        try:
            get_api().patch(f'/filiais/{filial_id}', form.to_payload())
        except ApiError as e:
            flash(mensagem_erro(e, 'Erro ao salvar filial'), 'danger')
        else:
            registrar_auditoria('Edição', 'Filial', filial_id, form.inscricao.data)
            flash('Filial atualizada com sucesso!', 'success')
            return redirect(url_for('filiais'))
    return render_template('formulario.html', form=form, titulo='Editar Filial', voltar_url=url_for('filiais'))


@app.route('/filiais/<int:filial_id>/deletar', methods=['POST'])
@login_required
def deletar_filial(filial_id):
    excluir_registro('/filiais', 'Filial', filial_id, 'Filial excluída com sucesso!', 'Erro ao excluir filial')
    return redirect(url_for('filiais'))


# ---------------------------------------------------------------------------
# Departamentos
# ---------------------------------------------------------------------------

@app.route('/departamentos')
@login_required
def departamentos():
    id_divisao = request.args.get('idDivisao', type=int)
    divisoes = opcoes(get_api().listar_opcoes('/divisoes'), 'descricao', 'Divisão')
    registros, erro = carregar_lista('/departamentos', 'Erro ao carregar departamentos', {'idDivisao': id_divisao})
    nomes = dict(divisoes)
    linhas = montar_linhas(
        registros,
        lambda d: [d.get('codigo'), d.get('descricao'), nomes.get(d.get('idDivisao'), '-'),
                   formatar_data(d.get('createdAt'))],
        'editar_departamento', 'deletar_departamento', 'departamento_id',
    )
    return render_template(
        'lista.html', titulo='Departamentos', novo_url=url_for('novo_departamento'), novo_rotulo='Novo Departamento',
        colunas=['Código', 'Descrição', 'Divisão', 'Data de Cadastro'], linhas=linhas,
        vazio='Nenhum departamento cadastrado', erro=erro,
        confirmacao='Tem certeza que deseja excluir este departamento?',
        filtro={'nome': 'idDivisao', 'rotulo': 'Divisão', 'opcoes': divisoes, 'valor': id_divisao, 'todos': 'Todas'},
    )


def form_departamento(registro=None):
    form = DepartamentoForm(data=DepartamentoForm.dados_iniciais(registro)) if registro else DepartamentoForm()
    form.carregar_divisoes(get_api().listar_opcoes('/divisoes'))
    return form


@app.route('/departamentos/novo', methods=['GET', 'POST'])
@login_required
def novo_departamento():
    form = form_departamento()
    if form.validate_on_submit():
        try:
            resposta = get_api().post('/departamentos', form.to_payload())
        except ApiError as e:
            flash(mensagem_erro(e, 'Erro ao salvar departamento'), 'danger')
        else:
            registrar_auditoria('Cadastro', 'Departamento', id_criado(resposta), form.descricao.data)
            flash('Departamento cadastrado com sucesso!', 'success')
            return redirect(url_for('departamentos'))
    return render_template('formulario.html', form=form, titulo='Novo Departamento', voltar_url=url_for('departamentos'))


@app.route('/departamentos/<int:departamento_id>/editar', methods=['GET', 'POST'])
@login_required
def editar_departamento(departamento_id):
    departamento = carregar_registro('/departamentos', departamento_id, 'Erro ao carregar departamento')
    if departamento is None:
        return redirect(url_for('departamentos'))
    form = form_departamento(departamento)
    if form.validate_on_submit():
        try:
            get_api().patch(f'/departamentos/{departamento_id}', form.to_payload())
        except ApiError as e:
            flash(mensagem_erro(e, 'Erro ao salvar departamento'), 'danger')
        else:
            registrar_auditoria('Edição', 'Departamento', departamento_id, form.descricao.data)
            flash('Departamento atualizado com sucesso!', 'success')
            return redirect(url_for('departamentos'))
    return render_template('formulario.html', form=form, titulo='Editar Departamento', voltar_url=url_for('departamentos'))


@app.route('/departamentos/<int:departamento_id>/deletar', methods=['POST'])
@login_required
def deletar_departamento(departamento_id):
    excluir_registro('/departamentos', 'Departamento', departamento_id,
                     'Departamento excluído com sucesso!', 'Erro ao excluir departamento')
    return redirect(url_for('departamentos'))


# ---------------------------------------------------------------------------
# Eventos e incidências
# ---------------------------------------------------------------------------

@app.route('/eventos')
@login_required
def eventos():
    id_tabela = request.args.get('idTabelaEvento', type=int)
    tabelas = opcoes(get_api().listar_opcoes('/tabela-eventos'), 'descricao', 'Tabela')
    registros, erro = carregar_lista('/eventos', 'Erro ao carregar eventos', {'idTabelaEvento': id_tabela})
    tipos = dict(TIPOS_PROVENTO_DESCONTO)
    linhas = montar_linhas(
        registros,
        lambda e: [e.get('codEvento'), e.get('descricao') or '-', e.get('descricaoAbreviada') or '-',
                   tipos.get(e.get('tipoProventoDesconto'), '-')],
        'editar_evento', 'deletar_evento', 'evento_id',
    )
    return render_template(
        'lista.html', titulo='Eventos', novo_url=url_for('novo_evento'), novo_rotulo='Novo Evento',
        colunas=['Código', 'Descrição', 'Descrição Abreviada', 'Tipo'], linhas=linhas,
        vazio='Nenhum evento cadastrado', erro=erro,
        confirmacao='Tem certeza que deseja excluir este evento?',
        filtro={'nome': 'idTabelaEvento', 'rotulo': 'Tabela de Eventos', 'opcoes': tabelas, 'valor': id_tabela, 'todos': 'Todas'},
    )


def form_evento(registro=None):
    form = EventoForm(data=EventoForm.dados_iniciais(registro)) if registro else EventoForm()
    api = get_api()
    form.carregar_opcoes(api.listar_opcoes('/tabela-eventos'), api.listar_opcoes('/evento-grupos'))
    return form


@app.route('/eventos/novo', methods=['GET', 'POST'])
@login_required
def novo_evento():
    form = form_evento()
    if form.validate_on_submit():
        try:
            resposta = get_api().post('/eventos', form.to_payload())
        except ApiError as e:
            flash(mensagem_erro(e, 'Erro ao salvar evento'), 'danger')
        else:
            registrar_auditoria('Cadastro', 'Evento', id_criado(resposta), form.descricao.data)
            flash('Evento cadastrado com sucesso!', 'success')
            return redirect(url_for('eventos'))
    return render_template('formulario.html', form=form, titulo='Novo Evento', voltar_url=url_for('eventos'))


def render_evento(evento_id, form, form_incidencia, incidencia_id=None):
    """Tela de edição do evento com a tabela e o formulário de incidências."""
    api = get_api()
    tipos = api.listar_opcoes('/tipos-incidencia')
    bases = api.listar_opcoes('/bases-calculo')
    form_incidencia.carregar_opcoes(tipos, bases)
    try:
        incidencias = api.listar(f'/eventos/{evento_id}/incidencias')
    except SessaoExpiradaError:
        raise
    except ApiError as e:
        log.warning(f'Incidências do evento {evento_id} indisponíveis: {e}')
        incidencias = []
    nomes_tipos = dict(opcoes(tipos, 'descricao', 'Tipo'))
    nomes_bases = dict(opcoes(bases, 'descricao', 'Base'))
    for inc in incidencias:
        inc['tipo_descricao'] = (nomes_tipos.get(inc.get('idTipoIncidencia'))
                                 or inc.get('tipoIncidenciaDescricao') or inc.get('idTipoIncidencia'))
        inc['base_descricao'] = (nomes_bases.get(inc.get('idBaseCalculo'))
                                 or inc.get('baseCalculoDescricao') or inc.get('idBaseCalculo'))
    if incidencia_id:
        acao_incidencia = url_for('editar_incidencia', evento_id=evento_id, incidencia_id=incidencia_id)
    else:
        acao_incidencia = url_for('nova_incidencia', evento_id=evento_id)
    return render_template(
        'evento_editar.html', form=form, form_incidencia=form_incidencia, incidencias=incidencias,
        evento_id=evento_id, acao_incidencia=acao_incidencia, incidencia_id=incidencia_id,
        acao_form=url_for('editar_evento', evento_id=evento_id),
        titulo='Editar Evento', voltar_url=url_for('eventos'),
    )


@app.route('/eventos/<int:evento_id>/editar', methods=['GET', 'POST'])
@login_required
def editar_evento(evento_id):
    evento = carregar_registro('/eventos', evento_id, 'Erro ao carregar evento')
    if evento is None:
        return redirect(url_for('eventos'))
    form = form_evento(evento)
    if form.validate_on_submit():
        try:
            get_api().patch(f'/eventos/{evento_id}', form.to_payload())
        except ApiError as e:
            flash(mensagem_erro(e, 'Erro ao salvar evento'), 'danger')
        else:
            registrar_auditoria('Edição', 'Evento', evento_id, form.descricao.data)
            flash('Evento atualizado com sucesso!', 'success')
            return redirect(url_for('editar_evento', evento_id=evento_id))
    return render_evento(evento_id, form, IncidenciaForm(prefix='incidencia', formdata=None))


@app.route('/eventos/<int:evento_id>/deletar', methods=['POST'])
@login_required
def deletar_evento(evento_id):
    excluir_registro('/eventos', 'Evento', evento_id, 'Evento excluído com sucesso!', 'Erro ao excluir evento')
    return redirect(url_for('eventos'))


def salvar_incidencia(evento_id, incidencia_id=None):
    evento = carregar_registro('/eventos', evento_id, 'Erro ao carregar evento')
    if evento is None:
        return redirect(url_for('eventos'))
    api = get_api()
    form_incidencia = IncidenciaForm(prefix='incidencia')
    form_incidencia.carregar_opcoes(api.listar_opcoes('/tipos-incidencia'), api.listar_opcoes('/bases-calculo'))
    if form_incidencia.validate_on_submit():
        payload = form_incidencia.payload_para(evento_id)
        try:
            if incidencia_id:
                api.put(f'/incidencias/{incidencia_id}', payload)
                registro_id, acao = incidencia_id, 'Edição'
            else:
                registro_id, acao = id_criado(api.post('/incidencias', payload)), 'Cadastro'
        except ApiError as e:
            flash(mensagem_erro(e, 'Erro ao salvar incidência'), 'danger')
        else:
            registrar_auditoria(acao, 'Incidência', registro_id, f'Evento {evento_id}')
            flash('Incidência salva com sucesso!', 'success')
            return redirect(url_for('editar_evento', evento_id=evento_id))
    form = EventoForm(data=EventoForm.dados_iniciais(evento), formdata=None)
    form.carregar_opcoes(api.listar_opcoes('/tabela-eventos'), api.listar_opcoes('/evento-grupos'))
    return render_evento(evento_id, form, form_incidencia, incidencia_id)


@app.route('/eventos/<int:evento_id>/incidencias', methods=['POST'])
@login_required
def nova_incidencia(evento_id):
    return salvar_incidencia(evento_id)


@app.route('/eventos/<int:evento_id>/incidencias/<int:incidencia_id>/editar', methods=['GET', 'POST'])
@login_required
def editar_incidencia(evento_id, incidencia_id):
    if request.method == 'POST':
        return salvar_incidencia(evento_id, incidencia_id)
    evento = carregar_registro('/eventos', evento_id, 'Erro ao carregar evento')
    if evento is None:
        return redirect(url_for('eventos'))
    try:
        incidencias = get_api().listar(f'/eventos/{evento_id}/incidencias')
    except ApiError as e:
        flash(mensagem_erro(e, 'Erro ao carregar incidência'), 'danger')
        return redirect(url_for('editar_evento', evento_id=evento_id))
    incidencia = next((i for i in incidencias if i.get('id') == incidencia_id), None)
    if incidencia is None:
        flash('Incidência não encontrada', 'danger')
        return redirect(url_for('editar_evento', evento_id=evento_id))
    form = form_evento(evento)
    form_incidencia = IncidenciaForm(prefix='incidencia', formdata=None,
                                     data=IncidenciaForm.dados_iniciais(incidencia))
    return render_evento(evento_id, form, form_incidencia, incidencia_id)


@app.route('/eventos/<int:evento_id>/incidencias/<int:incidencia_id>/deletar', methods=['POST'])
@login_required
def deletar_incidencia(evento_id, incidencia_id):
    excluir_registro('/incidencias', 'Incidência', incidencia_id,
                     'Incidência removida com sucesso!', 'Erro ao excluir incidência')
    return redirect(url_for('editar_evento', evento_id=evento_id))


# ---------------------------------------------------------------------------
# Bases de cálculo
# ---------------------------------------------------------------------------

@app.route('/bases-calculo')
@login_required
def bases_calculo():
    registros, erro = carregar_lista('/bases-calculo', 'Erro ao carregar bases de cálculo')
    linhas = montar_linhas(
        registros,
        lambda b: [b.get('codigo'), b.get('descricao'), sim_nao(b.get('ativo'))],
        'editar_base_calculo', 'deletar_base_calculo', 'base_id',
    )
    return render_template(
        'lista.html', titulo='Bases de Cálculo', novo_url=url_for('nova_base_calculo'), novo_rotulo='Nova Base de Cálculo',
        colunas=['Código', 'Descrição', 'Ativo'], linhas=linhas,
        vazio='Nenhuma base de cálculo cadastrada', erro=erro,
        confirmacao='Tem certeza que deseja excluir esta base de cálculo?',
    )


@app.route('/bases-calculo/nova', methods=['GET', 'POST'])
@login_required
def nova_base_calculo():
    form = BaseCalculoForm()
    if form.validate_on_submit():
        try:
            resposta = get_api().post('/bases-calculo', form.to_payload())
        except ApiError as e:
            flash(mensagem_erro(e, 'Erro ao salvar base de cálculo'), 'danger')
        else:
            registrar_auditoria('Cadastro', 'Base de Cálculo', id_criado(resposta), form.descricao.data)
            flash('Base de cálculo cadastrada com sucesso!', 'success')
            return redirect(url_for('bases_calculo'))
    return render_template('formulario.html', form=form, titulo='Nova Base de Cálculo', voltar_url=url_for('bases_calculo'))


@app.route('/bases-calculo/<int:base_id>/editar', methods=['GET', 'POST'])
@login_required
def editar_base_calculo(base_id):
    base = carregar_registro('/bases-calculo', base_id, 'Erro ao carregar base de cálculo')
    if base is None:
        return redirect(url_for('bases_calculo'))
    form = BaseCalculoForm(data=BaseCalculoForm.dados_iniciais(base))
    if form.validate_on_submit():
        try:
            get_api().put(f'/bases-calculo/{base_id}', form.to_payload())
        except ApiError as e:
            flash(mensagem_erro(e, 'Erro ao salvar base de cálculo'), 'danger')
        else:
            registrar_auditoria('Edição', 'Base de Cálculo', base_id, form.descricao.data)
            flash('Base de cálculo atualizada com sucesso!', 'success')
            return redirect(url_for('bases_calculo'))
    return render_template('formulario.html', form=form, titulo='Editar Base de Cálculo', voltar_url=url_for('bases_calculo'))


@app.route('/bases-calculo/<int:base_id>/deletar', methods=['POST'])
@login_required
def deletar_base_calculo(base_id):
    excluir_registro('/bases-calculo', 'Base de Cálculo', base_id,
                     'Base de cálculo excluída com sucesso!', 'Erro ao excluir base de cálculo')
    return redirect(url_for('bases_calculo'))


# ---------------------------------------------------------------------------
# Funções
# ---------------------------------------------------------------------------

@app.route('/funcoes')
@login_required
def funcoes():
    registros, erro = carregar_lista('/funcoes', 'Erro ao carregar funções')
    linhas = montar_linhas(
        registros,
        lambda f: [f.get('descricao'), formatar_moeda(f['pisoSalarial']) if f.get('pisoSalarial') is not None else '-',
                   formatar_moeda(f['tetoSalarial']) if f.get('tetoSalarial') is not None else '-'],
        'editar_funcao', 'deletar_funcao', 'funcao_id',
    )
    return render_template(
        'lista.html', titulo='Funções', novo_url=url_for('nova_funcao'), novo_rotulo='Nova Função',
        colunas=['Descrição', 'Piso Salarial', 'Teto Salarial'], linhas=linhas,
        vazio='Nenhuma função cadastrada', erro=erro,
        confirmacao='Tem certeza que deseja excluir esta função?',
    )


def form_funcao(registro=None):
    form = FuncaoForm(data=FuncaoForm.dados_iniciais(registro)) if registro else FuncaoForm()
    form.carregar_cbos(get_api().listar_opcoes('/cbos'))
    return form


@app.route('/funcoes/nova', methods=['GET', 'POST'])
@login_required
def nova_funcao():
    form = form_funcao()
    if form.validate_on_submit():
        try:
            resposta = get_api().post('/funcoes', form.to_payload())
        except ApiError as e:
            flash(mensagem_erro(e, 'Erro ao salvar função'), 'danger')
        else:
            registrar_auditoria('Cadastro', 'Função', id_criado(resposta), form.descricao.data)
            flash('Função cadastrada com sucesso!', 'success')
            return redirect(url_for('funcoes'))
    return render_template('formulario.html', form=form, titulo='Nova Função', voltar_url=url_for('funcoes'))


@app.route('/funcoes/<int:funcao_id>/editar', methods=['GET', 'POST'])
@login_required
def editar_funcao(funcao_id):
    funcao = carregar_registro('/funcoes', funcao_id, 'Erro ao carregar função')
    if funcao is None:
        return redirect(url_for('funcoes'))
    form = form_funcao(funcao)
    if form.validate_on_submit():
        try:
            get_api().patch(f'/funcoes/{funcao_id}', form.to_payload())
        except ApiError as e:
            flash(mensagem_erro(e, 'Erro ao salvar função'), 'danger')
        else:
            registrar_auditoria('Edição', 'Função', funcao_id, form.descricao.data)
            flash('Função atualizada com sucesso!', 'success')
            return redirect(url_for('funcoes'))
    return render_template('formulario.html', form=form, titulo='Editar Função', voltar_url=url_for('funcoes'))


@app.route('/funcoes/<int:funcao_id>/deletar', methods=['POST'])
@login_required
def deletar_funcao(funcao_id):
    excluir_registro('/funcoes', 'Função', funcao_id, 'Função excluída com sucesso!', 'Erro ao excluir função')
    return redirect(url_for('funcoes'))


# ---------------------------------------------------------------------------
# Sindicatos
# ---------------------------------------------------------------------------

@app.route('/sindicatos')
@login_required
def sindicatos():
    registros, erro = carregar_lista('/sindicatos', 'Erro ao carregar sindicatos')
    linhas = montar_linhas(
        registros,
        lambda s: [s.get('descricao') or '-', formatar_data(s.get('createdAt'))],
        'editar_sindicato', 'deletar_sindicato', 'sindicato_id',
    )
    return render_template(
        'lista.html', titulo='Sindicatos', novo_url=url_for('novo_sindicato'), novo_rotulo='Novo Sindicato',
        colunas=['Descrição', 'Data de Cadastro'], linhas=linhas,
        vazio='Nenhum sindicato cadastrado', erro=erro,
        confirmacao='Tem certeza que deseja excluir este sindicato?',
    )


@app.route('/sindicatos/novo', methods=['GET', 'POST'])
@login_required
def novo_sindicato():
    form = SindicatoForm()
    if form.validate_on_submit():
        try:
            resposta = get_api().post('/sindicatos', form.to_payload())
        except ApiError as e:
            flash(mensagem_erro(e, 'Erro ao salvar sindicato'), 'danger')
        else:
            registrar_auditoria('Cadastro', 'Sindicato', id_criado(resposta), form.descricao.data)
            flash('Sindicato cadastrado com sucesso!', 'success')
            return redirect(url_for('sindicatos'))
    return render_template('formulario.html', form=form, titulo='Novo Sindicato', voltar_url=url_for('sindicatos'))


@app.route('/sindicatos/<int:sindicato_id>/editar', methods=['GET', 'POST'])
@login_required
def editar_sindicato(sindicato_id):
    sindicato = carregar_registro('/sindicatos', sindicato_id, 'Erro ao carregar sindicato')
    if sindicato is None:
        return redirect(url_for('sindicatos'))
    form = SindicatoForm(data=SindicatoForm.dados_iniciais(sindicato))
    if form.validate_on_submit():
        try:
            get_api().patch(f'/sindicatos/{sindicato_id}', form.to_payload())
        except ApiError as e:
            flash(mensagem_erro(e, 'Erro ao salvar sindicato'), 'danger')
        else:
            registrar_auditoria('Edição', 'Sindicato', sindicato_id, form.descricao.data)
            flash('Sindicato atualizado com sucesso!', 'success')
            return redirect(url_for('sindicatos'))
    return render_template('formulario.html', form=form, titulo='Editar Sindicato', voltar_url=url_for('sindicatos'))


@app.route('/sindicatos/<int:sindicato_id>/deletar', methods=['POST'])
@login_required
def deletar_sindicato(sindicato_id):
    excluir_registro('/sindicatos', 'Sindicato', sindicato_id, 'Sindicato excluído com sucesso!', 'Erro ao excluir sindicato')
    return redirect(url_for('sindicatos'))


# ---------------------------------------------------------------------------
# Funcionários
# ---------------------------------------------------------------------------

@app.route('/funcionarios')
@login_required
def funcionarios():
    id_empresa = request.args.get('idEmpresa', type=int)
    empresas_lista = get_api().listar_opcoes('/empresas')
    registros, erro = carregar_lista('/funcionarios', 'Erro ao carregar funcionários', {'idEmpresa': id_empresa})
    razoes = {e['id']: e.get('razaoSocial') for e in empresas_lista}
    linhas = montar_linhas(
        registros,
        lambda f: [f.get('matricula'), f.get('nomeFuncionario'), f.get('cpf') or '-',
                   razoes.get(f.get('idEmpresa')) or '-', formatar_data(f.get('dataAdmissao'))],
        'editar_funcionario', 'deletar_funcionario', 'funcionario_id',
    )
    return render_template(
        'lista.html', titulo='Funcionários', novo_url=url_for('novo_funcionario'), novo_rotulo='Novo Funcionário',
        colunas=['Matrícula', 'Nome', 'CPF', 'Empresa', 'Data Admissão'], linhas=linhas,
        vazio='Nenhum funcionário cadastrado', erro=erro,
        confirmacao='Tem certeza que deseja excluir este funcionário?',
        filtro={'nome': 'idEmpresa', 'rotulo': 'Empresa', 'opcoes': opcoes(empresas_lista, 'razaoSocial', 'Empresa'), 'valor': id_empresa, 'todos': 'Todas'},
    )


def form_funcionario(registro=None):
    form = FuncionarioForm(data=FuncionarioForm.dados_iniciais(registro)) if registro else FuncionarioForm()
    api = get_api()
    form.carregar_opcoes(api.listar_opcoes('/empresas'), api.listar_opcoes('/funcoes'), api.listar_opcoes('/horarios'))
    return form


@app.route('/funcionarios/novo', methods=['GET', 'POST'])
@login_required
def novo_funcionario():
    form = form_funcionario()
    if form.validate_on_submit():
        try:
            resposta = get_api().post('/funcionarios', form.to_payload())
        except ApiError as e:
            flash(mensagem_erro(e, 'Erro ao salvar funcionário'), 'danger')
        else:
            registrar_auditoria('Cadastro', 'Funcionário', id_criado(resposta),
                                f'{form.matricula.data} - {form.nome_funcionario.data}')
            flash('Funcionário cadastrado com sucesso!', 'success')
            return redirect(url_for('funcionarios'))
    return render_template('formulario.html', form=form, titulo='Novo Funcionário', voltar_url=url_for('funcionarios'))


@app.route('/funcionarios/<int:funcionario_id>/editar', methods=['GET', 'POST'])
@login_required
def editar_funcionario(funcionario_id):
    funcionario = carregar_registro('/funcionarios', funcionario_id, 'Erro ao carregar funcionário')
    if funcionario is None:
        return redirect(url_for('funcionarios'))
    form = form_funcionario(funcionario)
    if form.validate_on_submit():
        try:
            get_api().patch(f'/funcionarios/{funcionario_id}', form.to_payload())
        except ApiError as e:
            flash(mensagem_erro(e, 'Erro ao salvar funcionário'), 'danger')
        else:
            registrar_auditoria('Edição', 'Funcionário', funcionario_id,
                                f'{form.matricula.data} - {form.nome_funcionario.data}')
            flash('Funcionário atualizado com sucesso!', 'success')
            return redirect(url_for('funcionarios'))
    return render_template('formulario.html', form=form, titulo='Editar Funcionário', voltar_url=url_for('funcionarios'))


@app.route('/funcionarios/<int:funcionario_id>/deletar', methods=['POST'])
@login_required
def deletar_funcionario(funcionario_id):
    excluir_registro('/funcionarios', 'Funcionário', funcionario_id,
                     'Funcionário excluído com sucesso!', 'Erro ao excluir funcionário')
    return redirect(url_for('funcionarios'))


# ---------------------------------------------------------------------------
# Horários
# ---------------------------------------------------------------------------

@app.route('/horarios')
@login_required
def horarios():
    registros, erro = carregar_lista('/horarios', 'Erro ao carregar horários')
    linhas = montar_linhas(
        registros,
        lambda h: [h.get('descricao'), h.get('horasTrabalhadasMes') or '-', h.get('horasTrabalhadasSemana') or '-',
                   h.get('diasTrabalhadosSemana') or '-', sim_nao(h.get('horarioFlexivel')),
                   sim_nao(h.get('possuiHorarioNoturno'))],
        'editar_horario', 'deletar_horario', 'horario_id',
    )
    return render_template(
        'lista.html', titulo='Horários', novo_url=url_for('novo_horario'), novo_rotulo='Novo Horário',
        colunas=['Descrição', 'Horas/Mês', 'Horas/Semana', 'Dias/Semana', 'Flexível', 'Noturno'], linhas=linhas,
        vazio='Nenhum horário cadastrado', erro=erro,
        confirmacao='Tem certeza que deseja excluir este horário?',
    )


def substituir_quadro(api, horario_id, itens):
    """Apaga o quadro atual do horário e grava as linhas preenchidas."""
    for existente in api.listar_opcoes(f'/horarios/{horario_id}/quadro'):
        try:
            api.delete(f'/horarios/{horario_id}/quadro/{existente["id"]}')
        except SessaoExpiradaError:
            raise
        except ApiError as e:
            log.warning(f'Falha ao remover quadro {existente.get("id")} do horário {horario_id}: {e}')
    for item in itens:
        api.post(f'/horarios/{horario_id}/quadro', item)


def salvar_horario(form, horario_id=None):
    """Grava o horário e depois o quadro.

    Devolve (horario_id, quadro_salvo). Falhas ao gravar o horário sobem como
    ApiError; uma vez gravado, falhas do quadro só marcam quadro_salvo=False.
    """
    api = get_api()
    payload = form.to_payload()
    if horario_id is None:
        horario_id = id_criado(api.post('/horarios', payload))
        acao = 'Cadastro'
    else:
        api.patch(f'/horarios/{horario_id}', payload)
        acao = 'Edição'
    registrar_auditoria(acao, 'Horário', horario_id, form.descricao.data)
    if horario_id is None:
        log.warning(f'POST /horarios sem id na resposta; quadro de "{form.descricao.data}" não gravado')
        return None, False
    try:
        substituir_quadro(api, horario_id, form.quadro_payload())
    except SessaoExpiradaError:
        raise
    except ApiError as e:
        log.warning(f'Falha ao gravar o quadro do horário {horario_id}: {e}')
        return horario_id, False
    return horario_id, True


def quadro_nao_salvo(horario_id, mensagem):
    flash(f'{mensagem} O quadro de horários não foi salvo; revise-o e salve novamente.', 'warning')
    if horario_id is None:
        return redirect(url_for('horarios'))
    return redirect(url_for('editar_horario', horario_id=horario_id))


@app.route('/horarios/novo', methods=['GET', 'POST'])
@login_required
def novo_horario():
    form = HorarioForm(data={'quadro': linhas_quadro()})
    if form.validate_on_submit():
        try:
            horario_id, quadro_salvo = salvar_horario(form)
        except ApiError as e:
            flash(mensagem_erro(e, 'Erro ao salvar horário'), 'danger')
        else:
            if not quadro_salvo:
                # O horário já existe no backend: segue para a edição, não para um novo cadastro
                return quadro_nao_salvo(horario_id, 'Horário cadastrado.')
            flash('Horário cadastrado com sucesso!', 'success')
            return redirect(url_for('horarios'))
    return render_template('horario_form.html', form=form, titulo='Novo Horário', voltar_url=url_for('horarios'))


@app.route('/horarios/<int:horario_id>/editar', methods=['GET', 'POST'])
@login_required
def editar_horario(horario_id):
    horario = carregar_registro('/horarios', horario_id, 'Erro ao carregar horário')
    if horario is None:
        return redirect(url_for('horarios'))
    quadro = get_api().listar_opcoes(f'/horarios/{horario_id}/quadro')
    dados = HorarioForm.dados_iniciais(horario)
    dados['quadro'] = linhas_quadro(quadro)
    form = HorarioForm(data=dados)
    if form.validate_on_submit():
        try:
            _, quadro_salvo = salvar_horario(form, horario_id)
        except ApiError as e:
            flash(mensagem_erro(e, 'Erro ao salvar horário'), 'danger')
        else:
            if not quadro_salvo:
                return quadro_nao_salvo(horario_id, 'Horário atualizado.')
            flash('Horário atualizado com sucesso!', 'success')
            return redirect(url_for('horarios'))
    return render_template('horario_form.html', form=form, titulo='Editar Horário', voltar_url=url_for('horarios'))


@app.route('/horarios/<int:horario_id>/deletar', methods=['POST'])
@login_required
def deletar_horario(horario_id):
    excluir_registro('/horarios', 'Horário', horario_id, 'Horário excluído com sucesso!', 'Erro ao excluir horário')
    return redirect(url_for('horarios'))


# ---------------------------------------------------------------------------
# Feriados
# ---------------------------------------------------------------------------

@app.route('/feriados')
@login_required
def feriados():
    id_filial = request.args.get('idFilial', type=int)
    filiais_opcoes = opcoes(get_api().listar_opcoes('/filiais'), 'descricao', 'Filial')
    registros, erro = carregar_lista('/feriados', 'Erro ao carregar feriados', {'idFilial': id_filial})
    nomes_filiais = dict(filiais_opcoes)
    tipos = dict(TIPOS_FERIADO)
    linhas = montar_linhas(
        registros,
        lambda f: [formatar_data(f.get('dataFeriado')), f.get('descricao'), tipos.get(f.get('tipoFeriado'), '-'),
                   nomes_filiais.get(f['idFilial'], '-') if f.get('idFilial') else 'Todas',
                   sim_nao(f.get('feriadoParcial'))],
        'editar_feriado', 'deletar_feriado', 'feriado_id',
    )
    return render_template(
        'lista.html', titulo='Feriados', novo_url=url_for('novo_feriado'), novo_rotulo='Novo Feriado',
        colunas=['Data', 'Descrição', 'Tipo', 'Filial', 'Parcial'], linhas=linhas,
        vazio='Nenhum feriado cadastrado', erro=erro,
        confirmacao='Tem certeza que deseja excluir este feriado?',
        filtro={'nome': 'idFilial', 'rotulo': 'Filial', 'opcoes': filiais_opcoes, 'valor': id_filial, 'todos': 'Todas'},
    )


def form_feriado(registro=None):
    form = FeriadoForm(data=FeriadoForm.dados_iniciais(registro)) if registro else FeriadoForm()
    api = get_api()
    form.carregar_opcoes(api.listar_opcoes('/filiais'), api.listar_opcoes('/municipios'))
    return form


@app.route('/feriados/novo', methods=['GET', 'POST'])
@login_required
def novo_feriado():
    form = form_feriado()
    if form.validate_on_submit():
        try:
            resposta = get_api().post('/feriados', form.to_payload())
        except ApiError as e:
            flash(mensagem_erro(e, 'Erro ao salvar feriado'), 'danger')
        else:
            registrar_auditoria('Cadastro', 'Feriado', id_criado(resposta), form.descricao.data)
            flash('Feriado cadastrado com sucesso!', 'success')
            return redirect(url_for('feriados'))
    return render_template('formulario.html', form=form, titulo='Novo Feriado', voltar_url=url_for('feriados'))


@app.route('/feriados/<int:feriado_id>/editar', methods=['GET', 'POST'])
@login_required
def editar_feriado(feriado_id):
    feriado = carregar_registro('/feriados', feriado_id, 'Erro ao carregar feriado')
    if feriado is None:
        return redirect(url_for('feriados'))
    form = form_feriado(feriado)
    if form.validate_on_submit():
        try:
            get_api().patch(f'/feriados/{feriado_id}', form.to_payload())
        except ApiError as e:
            flash(mensagem_erro(e, 'Erro ao salvar feriado'), 'danger')
        else:
            registrar_auditoria('Edição', 'Feriado', feriado_id, form.descricao.data)
            flash('Feriado atualizado com sucesso!', 'success')
            return redirect(url_for('feriados'))
    return render_template('formulario.html', form=form, titulo='Editar Feriado', voltar_url=url_for('feriados'))


@app.route('/feriados/<int:feriado_id>/deletar', methods=['POST'])
@login_required
def deletar_feriado(feriado_id):
    excluir_registro('/feriados', 'Feriado', feriado_id, 'Feriado excluído com sucesso!', 'Erro ao excluir feriado')
    return redirect(url_for('feriados'))


# ---------------------------------------------------------------------------
# Cálculos (processos de folha)
# ---------------------------------------------------------------------------

@app.route('/calculos', methods=['GET', 'POST'])
@login_required
def calculos():
    """Listagem e criação de processos de cálculo.

    - GET: lista os processos com competência, tipo de folha e datas
    - POST: cria um novo processo (ainda não processado)
    """
    api = get_api()
    form = ProcessoForm()
    form.carregar_opcoes(api.listar_opcoes('/empresas'), api.listar_opcoes('/filiais'), api.listar_opcoes('/funcionarios'))
    if form.validate_on_submit():
        try:
            resposta = api.post('/processos', form.to_payload())
        except ApiError as e:
            flash(mensagem_erro(e, 'Erro ao criar processo'), 'danger')
        else:
            registrar_auditoria('Cadastro', 'Processo', id_criado(resposta),
                                f'Competência {competencia(form.mes.data, form.ano.data)}')
            flash('Processo criado com sucesso!', 'success')
            return redirect(url_for('calculos'))
    processos, erro = carregar_lista('/processos', 'Erro ao carregar processos')
    for processo in processos:
        processo['competencia'] = competencia(processo.get('mes'), processo.get('ano'))
    return render_template('calculos.html', form=form, processos=processos, erro=erro)


@app.route('/calculos/<int:processo_id>')
@login_required
def calculo_detalhe(processo_id):
    api = get_api()
    try:
        processo = api.get(f'/processos/{processo_id}')
    except SessaoExpiradaError:
        raise
    except ApiError as e:
        log.warning(f'Processo {processo_id} indisponível: {e}')
        processo = None
    if not processo:
        return render_template('calculo_detalhe.html', processo=None), 404
    recibos = api.listar_opcoes('/recibos', params={'idProcesso': processo_id})
    return render_template(
        'calculo_detalhe.html',
        processo=processo,
        competencia=competencia(processo.get('mes'), processo.get('ano')),
        recibos=recibos,
        totais=totais_recibos(recibos),
    )


@app.route('/calculos/<int:processo_id>/processar', methods=['POST'])
@login_required
def processar_calculo(processo_id):
    try:
        resposta = get_api().post(f'/processos/{processo_id}/processar')
    except ApiError as e:
        flash(mensagem_erro(e, 'Erro ao processar folha'), 'danger')
    else:
        recibos_criados = (resposta or {}).get('recibosCriados') or 0
        registrar_auditoria('Processamento', 'Processo', processo_id, f'{recibos_criados} recibos criados')
        flash(f'Processamento concluído! {recibos_criados} recibos criados.', 'success')
    return redirect(url_for('calculos'))


@app.route('/calculos/<int:processo_id>/deletar', methods=['POST'])
@login_required
def deletar_calculo(processo_id):
    excluir_registro('/processos', 'Processo', processo_id, 'Processo excluído com sucesso!', 'Erro ao excluir processo')
    return redirect(url_for('calculos'))


@app.route('/calculos/<int:processo_id>/exportar')
@login_required
def exportar_calculo(processo_id):
    api = get_api()
    try:
        processo = api.get(f'/processos/{processo_id}') or {}
        recibos = api.listar('/recibos', {'idProcesso': processo_id})
    except ApiError as e:
        flash(mensagem_erro(e, 'Erro ao exportar recibos'), 'danger')
        return redirect(url_for('calculo_detalhe', processo_id=processo_id))

    def generate():
        output = io.StringIO()
        writer = csv.writer(output, delimiter=';')
        for linha in linhas_csv_recibos(processo, recibos):
            writer.writerow(linha)
        return output.getvalue()

    nome = f'recibos_processo_{processo_id}.csv'
    return Response(generate(), mimetype='text/csv', headers={"Content-Disposition": f"attachment;filename={nome}"})


# ---------------------------------------------------------------------------
# Auditoria
# ---------------------------------------------------------------------------

@app.route('/auditoria')
@login_required
def auditoria():
    logs = Auditoria.query.order_by(Auditoria.data.desc()).limit(100).all()
    return render_template('auditoria.html', logs=logs)


@app.cli.command('init-db')
def init_db():
    """Cria as tabelas do banco local (auditoria)."""
    db.create_all()
    log.info('Banco local inicializado')


with app.app_context():
    db.create_all()


if __name__ == '__main__':
    app.run(debug=True)
