import json
from datetime import date
from decimal import Decimal

import pytest
import requests

from api_client import FopagApi, ApiError, SessaoExpiradaError, limpar_payload, extrair_mensagem


def resposta(status, corpo=None):
    r = requests.Response()
    r.status_code = status
    r._content = json.dumps(corpo).encode() if corpo is not None else b''
    return r


class SessaoFake:
    """Substitui requests.Session: guarda a última requisição e devolve a resposta configurada."""

    def __init__(self, resposta=None, erro=None):
        self.resposta = resposta
        self.erro = erro
        self.requisicoes = []

    def request(self, metodo, url, **kwargs):
        self.requisicoes.append((metodo, url, kwargs))
        if self.erro:
            raise self.erro
        return self.resposta


def cliente(sessao, token='abc123'):
    return FopagApi('http://fopag.test/', token=token, timeout=5, session=sessao)


def test_envia_token_bearer():
    sessao = SessaoFake(resposta(200, []))
    cliente(sessao).get('/empresas')
    metodo, url, kwargs = sessao.requisicoes[0]
    assert metodo == 'GET'
    assert url == 'http://fopag.test/empresas'
    assert kwargs['headers']['Authorization'] == 'Bearer abc123'
    assert kwargs['timeout'] == 5


def test_sem_token_nao_envia_authorization():
    sessao = SessaoFake(resposta(200, []))
    cliente(sessao, token=None).get('/empresas')
    assert 'Authorization' not in sessao.requisicoes[0][2]['headers']


def test_limpar_payload():
    payload = {'a': None, 'b': '', 'c': 0, 'd': Decimal('10.50'), 'e': date(2024, 1, 31), 'f': 'x', 'g': False}
    assert limpar_payload(payload) == {'c': 0, 'd': 10.5, 'e': '2024-01-31', 'f': 'x', 'g': False}


def test_post_envia_payload_limpo():
    sessao = SessaoFake(resposta(201, {'id': 9}))
    criado = cliente(sessao).post('/sindicatos', {'descricao': 'Comerciários', 'observacao': ''})
    assert criado == {'id': 9}
    assert sessao.requisicoes[0][2]['json'] == {'descricao': 'Comerciários'}


def test_mensagem_em_lista_e_unida():
    r = resposta(400, {'message': ['descricao must be shorter', 'codigo must be positive']})
    assert extrair_mensagem(r) == 'descricao must be shorter; codigo must be positive'


def test_mensagem_ausente():
    assert extrair_mensagem(resposta(500)) is None
    assert extrair_mensagem(resposta(500, ['x'])) is None


def test_erro_http_vira_api_error():
    sessao = SessaoFake(resposta(409, {'message': 'Código já cadastrado'}))
    with pytest.raises(ApiError) as exc:
        cliente(sessao).post('/eventos', {'codEvento': 1})
    assert exc.value.mensagem == 'Código já cadastrado'
    assert exc.value.status_code == 409
    assert not isinstance(exc.value, SessaoExpiradaError)


def test_401_vira_sessao_expirada():
    sessao = SessaoFake(resposta(401, {'message': 'Unauthorized'}))
    with pytest.raises(SessaoExpiradaError) as exc:
        cliente(sessao).get('/empresas')
    assert exc.value.status_code == 401


def test_falha_de_conexao_vira_api_error_sem_mensagem():
    sessao = SessaoFake(erro=requests.ConnectionError('recusada'))
    with pytest.raises(ApiError) as exc:
        cliente(sessao).get('/empresas')
    assert exc.value.mensagem is None
    assert exc.value.status_code is None


def test_resposta_vazia_devolve_none():
    sessao = SessaoFake(resposta(204))
    assert cliente(sessao).delete('/empresas/1') is None


def test_listar_remove_filtros_vazios():
    sessao = SessaoFake(resposta(200, [{'id': 1}]))
    registros = cliente(sessao).listar('/eventos', {'idTabelaEvento': None, 'busca': ''})
    assert registros == [{'id': 1}]
    assert sessao.requisicoes[0][2]['params'] is None


def test_listar_envia_filtro_informado():
    sessao = SessaoFake(resposta(200, []))
    cliente(sessao).listar('/funcionarios', {'idEmpresa': 2})
    assert sessao.requisicoes[0][2]['params'] == {'idEmpresa': 2}


def test_listar_opcoes_usa_padrao_em_falha():
    sessao = SessaoFake(resposta(500))
    padrao = [{'id': 1, 'descricao': 'Tabela Padrão'}]
    assert cliente(sessao).listar_opcoes('/tabela-eventos', padrao) == padrao
    assert cliente(sessao).listar_opcoes('/divisoes') == []


def test_listar_opcoes_propaga_sessao_expirada():
    sessao = SessaoFake(resposta(401))
    with pytest.raises(SessaoExpiradaError):
        cliente(sessao).listar_opcoes('/divisoes')


def test_login_devolve_token_e_usuario():
    corpo = {'access_token': 'jwt', 'user': {'id': 1, 'nome': 'Admin', 'login': 'admin', 'tipo': 1}}
    sessao = SessaoFake(resposta(201, corpo))
    token, usuario = cliente(sessao, token=None).login('admin', 'segredo')
    assert token == 'jwt'
    assert usuario['nome'] == 'Admin'
    assert sessao.requisicoes[0][2]['json'] == {'login': 'admin', 'senha': 'segredo'}


def test_login_sem_token_falha():
    sessao = SessaoFake(resposta(200, {'user': {}}))
    with pytest.raises(ApiError):
        cliente(sessao, token=None).login('admin', 'segredo')
