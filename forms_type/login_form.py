# Formulário de login no backend de folha
from flask_wtf import FlaskForm
from wtforms import StringField, PasswordField, SubmitField
from wtforms.validators import DataRequired, Length

from .base_form import LOCALES

class LoginForm(FlaskForm):
    class Meta:
        locales = LOCALES

    login = StringField('Login', validators=[DataRequired(message='Login é obrigatório')])  # Login do usuário
    senha = PasswordField('Senha', validators=[DataRequired(message='Senha deve ter no mínimo 6 caracteres'), Length(min=6, message='Senha deve ter no mínimo 6 caracteres')])  # Senha do usuário
    submit = SubmitField('Entrar')  # Botão de login
