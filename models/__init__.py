# Inicialização do SQLAlchemy e importação dos modelos do painel
from flask_sqlalchemy import SQLAlchemy

db = SQLAlchemy()  # Instância global do banco local (auditoria)

from .usuario import Usuario
from .auditoria import Auditoria
