# Formulário de Incidência: liga um evento a uma base de cálculo por percentual OU valor fixo
from wtforms import SelectField, DecimalField, BooleanField, SubmitField
from wtforms.validators import InputRequired, Optional, NumberRange

from .base_form import ApiForm, com_vazio, int_ou_none

class IncidenciaForm(ApiForm):
    id_tipo_incidencia = SelectField('Tipo de Incidência', coerce=int_ou_none, choices=com_vazio([]), validators=[InputRequired(message='Selecione um Tipo de Incidência')])
    id_base_calculo = SelectField('Base de Cálculo', coerce=int_ou_none, choices=com_vazio([]), validators=[InputRequired(message='Selecione uma Base de Cálculo')])
    percentual = DecimalField('Percentual (%)', validators=[Optional(), NumberRange(min=0)])  # Percentual aplicado sobre a base
    valor_fixo = DecimalField('Valor Fixo (R$)', validators=[Optional(), NumberRange(min=0)])  # Valor fixo (exclusivo com o percentual)
    ativo = BooleanField('Ativo', default=True)
    submit = SubmitField('Salvar Incidência')

    def carregar_opcoes(self, tipos, bases):
        self.id_tipo_incidencia.choices = com_vazio((t['id'], t.get('descricao') or f"Tipo {t['id']}") for t in tipos)
        self.id_base_calculo.choices = com_vazio((b['id'], b.get('descricao') or f"Base {b['id']}") for b in bases)

    def validate(self, extra_validators=None):
        if not super().validate(extra_validators=extra_validators):
            return False
        if self.percentual.data is not None and self.valor_fixo.data is not None:
            self.valor_fixo.errors.append('Informe percentual ou valor fixo, não ambos')
            return False
        return True

    def payload_para(self, evento_id):
        payload = self.to_payload()
        payload['idEvento'] = evento_id
        return payload
