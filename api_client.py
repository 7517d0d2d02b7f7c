"""Cliente da API REST do backend de folha de pagamento.

Todas as telas do painel conversam com o backend por aqui. Falhas de rede ou
respostas fora da faixa 2xx viram ``ApiError``; o 401 vira
``SessaoExpiradaError`` para que a aplicação possa forçar um novo login.
"""
from datetime import date, datetime
from decimal import Decimal

import requests

from logging_config import log


class ApiError(Exception):
    """Falha em uma chamada ao backend."""

    def __init__(self, mensagem=None, status_code=None):
        super().__init__(mensagem or 'Falha na requisição')
        self.mensagem = mensagem  # Mensagem enviada pelo servidor (quando houver)
        self.status_code = status_code


class SessaoExpiradaError(ApiError):
    """Token ausente, inválido ou expirado (HTTP 401)."""


def limpar_payload(payload):
    """Remove campos vazios e converte valores para tipos serializáveis em JSON."""
    limpo = {}
    for chave, valor in payload.items():
        if valor is None or valor == '':
            continue
        if isinstance(valor, Decimal):
            valor = float(valor)
        elif isinstance(valor, (date, datetime)):
            valor = valor.isoformat()
        limpo[chave] = valor
    return limpo


def extrair_mensagem(response):
    """Lê o campo 'message' do corpo de erro; listas são unidas com '; '."""
    try:
        corpo = response.json()
    except ValueError:
        return None
    if not isinstance(corpo, dict):
        return None
    mensagem = corpo.get('message')
    if isinstance(mensagem, list):
        return '; '.join(str(m) for m in mensagem)
    return mensagem or None


class FopagApi:
    def __init__(self, base_url, token=None, timeout=30, session=None):
        self.base_url = base_url.rstrip('/')
        self.token = token
        self.timeout = timeout
        self.session = session or requests.Session()

    def _headers(self):
        headers = {'Accept': 'application/json'}
        if self.token:
            headers['Authorization'] = f'Bearer {self.token}'
        return headers

    def request(self, metodo, caminho, params=None, json=None):
        url = f'{self.base_url}/{caminho.lstrip("/")}'
        log.debug(f'{metodo} {url} params={params}')
        try:
            response = self.session.request(
                metodo, url,
                params=params,
                json=json,
                headers=self._headers(),
                timeout=self.timeout,
            )
        except requests.RequestException as e:
            log.warning(f'Falha de conexão em {metodo} {url}: {e}')
            raise ApiError(None) from e

        if response.status_code == 401:
            raise SessaoExpiradaError(extrair_mensagem(response), 401)
        if not response.ok:
            mensagem = extrair_mensagem(response)
            log.warning(f'{metodo} {url} -> {response.status_code}: {mensagem}')
            raise ApiError(mensagem, response.status_code)

        if not response.content:
            return None
        try:
            return response.json()
        except ValueError:
            return None

    def get(self, caminho, params=None):
        return self.request('GET', caminho, params=params)

    def post(self, caminho, payload=None):
        return self.request('POST', caminho, json=limpar_payload(payload or {}))

    def patch(self, caminho, payload):
        return self.request('PATCH', caminho, json=limpar_payload(payload))

    def put(self, caminho, payload):
        return self.request('PUT', caminho, json=limpar_payload(payload))

    def delete(self, caminho):
        return self.request('DELETE', caminho)

    def listar(self, caminho, params=None):
        """GET de uma coleção; filtros vazios não são enviados."""
        params = {k: v for k, v in (params or {}).items() if v not in (None, '')}
        dados = self.get(caminho, params=params or None)
        return dados or []

    def listar_opcoes(self, caminho, padrao=None, params=None):
        """Carrega uma lista auxiliar (lookup); em caso de falha devolve o padrão."""
        try:
            return self.listar(caminho, params)
        except SessaoExpiradaError:
            raise
        except ApiError as e:
            log.warning(f'Lookup {caminho} indisponível ({e.status_code}); usando padrão')
            return list(padrao or [])

    def login(self, login, senha):
        """Autentica no backend e devolve (access_token, dados do usuário)."""
        dados = self.request('POST', '/auth/login', json={'login': login, 'senha': senha})
        if not isinstance(dados, dict) or not dados.get('access_token'):
            raise ApiError(None)
        return dados['access_token'], dados.get('user') or {}
