# Modelo Usuario: usuário autenticado no backend (mantido na sessão, não no banco local)
from flask_login import UserMixin


class Usuario(UserMixin):
    def __init__(self, id, nome, login='', tipo=None):
        self.id = str(id)  # Identificador do usuário no backend
        self.nome = nome  # Nome exibido na barra superior
        self.login = login  # Login usado na autenticação
        self.tipo = tipo  # Tipo/perfil informado pelo backend

    @classmethod
    def from_api(cls, dados):
        """Cria o usuário a partir do objeto 'user' devolvido por /auth/login"""
        return cls(
            id=dados.get('id'),
            nome=dados.get('nome') or 'Usuário',
            login=dados.get('login') or '',
            tipo=str(dados['tipo']) if dados.get('tipo') is not None else None,
        )

    def to_session(self):
        """Serializa para guardar na sessão assinada do Flask"""
        return {'id': self.id, 'nome': self.nome, 'login': self.login, 'tipo': self.tipo}

    @classmethod
    def from_session(cls, dados):
        return cls(dados['id'], dados['nome'], dados.get('login', ''), dados.get('tipo'))

    def __repr__(self):
        return f'<Usuario {self.login}>'
