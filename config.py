# Configuração da aplicação (carregada via app.config.from_object)
import os

from dotenv import load_dotenv

load_dotenv()


class Config:
    """Configuração padrão lida das variáveis de ambiente (.env)."""
    SECRET_KEY = os.getenv('SECRET_KEY', 'fopag-painel-dev')  # Assinatura da sessão e CSRF

    # Backend de folha de pagamento (API REST)
    FOPAG_API_URL = os.getenv('FOPAG_API_URL', 'http://localhost:3001')
    FOPAG_API_TIMEOUT = float(os.getenv('FOPAG_API_TIMEOUT', '30'))

    # Banco local usado apenas para o log de auditoria
    SQLALCHEMY_DATABASE_URI = os.getenv('DATABASE_URL', 'sqlite:///fopag_painel.db')
    SQLALCHEMY_TRACK_MODIFICATIONS = False

    LOG_LEVEL = os.getenv('LOG_LEVEL', 'INFO')
    LOG_DIR = os.getenv('LOG_DIR', 'logs')

    # Sem Flask-Babel: as mensagens padrão vêm do catálogo do próprio WTForms (Meta.locales)
    WTF_I18N_ENABLED = False


class TestingConfig(Config):
    TESTING = True
    WTF_CSRF_ENABLED = False
    SQLALCHEMY_DATABASE_URI = 'sqlite://'
    FOPAG_API_URL = 'http://fopag.test'
    LOG_DIR = None  # Sem arquivo de log nos testes
