import os

import pytest

os.environ['FOPAG_CONFIG'] = 'config.TestingConfig'

import app as app_module
from api_client import FopagApi
from models import db


class FakeApi(FopagApi):
    """FopagApi sem rede: registra as chamadas e devolve respostas pré-definidas.

    ``respostas`` é indexado por (MÉTODO, caminho). Se o valor for uma exceção
    ela é levantada, como faria o cliente real.
    """

    def __init__(self):
        super().__init__('http://fopag.test', token='token-teste')
        self.respostas = {}
        self.chamadas = []

    def responder(self, metodo, caminho, valor):
        self.respostas[(metodo, caminho)] = valor

    def request(self, metodo, caminho, params=None, json=None):
        self.chamadas.append((metodo, caminho, params, json))
        valor = self.respostas.get((metodo, caminho))
        if isinstance(valor, Exception):
            raise valor
        return valor

    def chamadas_de(self, metodo, caminho=None):
        return [c for c in self.chamadas if c[0] == metodo and (caminho is None or c[1] == caminho)]


@pytest.fixture
def flask_app():
    app = app_module.app
    with app.app_context():
        db.drop_all()
        db.create_all()
    yield app
    with app.app_context():
        db.session.remove()


@pytest.fixture
def api(monkeypatch):
    fake = FakeApi()
    monkeypatch.setattr(app_module, 'get_api', lambda: fake)
    return fake


@pytest.fixture
def client(flask_app):
    return flask_app.test_client()


@pytest.fixture
def logado(client, api):
    with client.session_transaction() as sess:
        sess['token'] = 'token-teste'
        sess['usuario'] = {'id': '1', 'nome': 'Administrador', 'login': 'admin', 'tipo': '1'}
        sess['_user_id'] = '1'
        sess['_fresh'] = True
    return client
