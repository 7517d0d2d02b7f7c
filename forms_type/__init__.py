from .login_form import LoginForm
from .empresa_form import EmpresaForm, TABELA_EVENTOS_PADRAO
from .filial_form import FilialForm
from .departamento_form import DepartamentoForm
from .evento_form import EventoForm
from .incidencia_form import IncidenciaForm
from .cadastros_simples_form import SindicatoForm, BaseCalculoForm, FuncaoForm
from .feriado_form import FeriadoForm
from .funcionario_form import FuncionarioForm
from .horario_form import HorarioForm, linhas_quadro
from .processo_form import ProcessoForm, TIPOS_FOLHA
