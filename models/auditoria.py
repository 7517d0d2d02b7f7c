# Modelo Auditoria: registra ações feitas pelo painel para rastreabilidade
from . import db
from datetime import datetime


class Auditoria(db.Model):
    __tablename__ = 'auditoria'  # Nome da tabela no banco de dados
    id = db.Column(db.Integer, primary_key=True)  # Identificador único do log
    usuario = db.Column(db.String(150), nullable=False)  # Login de quem realizou a ação
    acao = db.Column(db.String(100), nullable=False)  # Tipo de ação (Cadastro, Edição, Exclusão, Processamento)
    entidade = db.Column(db.String(100), nullable=False)  # Entidade afetada (Empresa, Evento, Processo, etc)
    entidade_id = db.Column(db.Integer, nullable=True)  # ID da entidade no backend (quando conhecido)
    data = db.Column(db.DateTime, default=datetime.utcnow)  # Data/hora da ação
    detalhes = db.Column(db.Text)  # Detalhes adicionais da ação

    def __repr__(self):
        return f'<Auditoria {self.acao} {self.entidade} {self.entidade_id}>'
