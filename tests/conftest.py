"""
Pytest configuration and shared fixtures for the PV sizing engine tests.
"""
import pytest
import sys
from pathlib import Path

# Add the project root to the Python path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from dimensionador_fv.services.modelos import EntradaSistema


@pytest.fixture
def entrada_residencial():
    """Sistema residencial típico: 8 módulos de 575 W, conta de R$ 650"""
    return EntradaSistema(
        cantidad_modulos=8,
        potencia_modulo_w=575,
        modulos_por_string=8,
        valor_factura=650,
        tarifa_energia=0.95,
        hsp=5.8,
        inversor_seleccionado="Automático (Sugerido pelo Sistema)",
        valor_inversion=18000,
        entrada=5400,
        tipo_techo="Cerâmico",
    )


@pytest.fixture
def entrada_comercial():
    """Sistema comercial: 40 módulos de 575 W (23 kWp)"""
    return EntradaSistema(
        cantidad_modulos=40,
        potencia_modulo_w=575,
        modulos_por_string=14,
        valor_factura=3200,
        tarifa_energia=0.95,
        hsp=5.5,
        valor_inversion=75000,
        tipo_techo="Metálico",
    )


@pytest.fixture
def custom_params_conservador():
    """Parámetros personalizados más conservadores"""
    return {
        'eficiencia_sistema': 0.75,
        'ratio_dc_ac_maximo': 1.25,
        'tasa_inflacion_anual': 0.04,
    }
