"""
Configuración de parámetros ajustables del dimensionador fotovoltaico.

Este módulo centraliza las constantes de ingeniería y financieras que usa
el motor de cálculo. Cada función del motor acepta un diccionario
``custom_params`` opcional que sobrescribe estos valores.

Para modificar los valores por defecto, cambia los valores en DEFAULT_PARAMS.
"""

# =============================================================================
# PARÁMETROS CONFIGURABLES POR DEFECTO
# =============================================================================

DEFAULT_PARAMS = {
    # --- Estimación de módulos ---
    "eficiencia_sistema": 0.80,  # 80% - Pérdidas de inversor, cableado y temperatura
    "dias_mes_factura": 30,  # Días por mes para pasar de consumo mensual a diario

    # --- Strings ---
    "max_modulos_por_string": 19,  # Límite seguro para inversores de 1000 V (~50 V Voc por módulo)
    "max_busqueda_strings": 50,  # Tope de la búsqueda de cantidad de strings

    # --- Inversor ---
    "ratio_dc_ac_maximo": 1.45,  # 145% de sobrecarga máxima en la selección automática
    "umbral_trifasico_kw": 8,  # Desde este tamaño el inversor automático es trifásico
    "tension_monofasica_v": 220,
    "tension_trifasica_v": 380,
    "divisor_rango_min": 1.5,  # Rango de inversor sugerido: P/1.5 ...
    "divisor_rango_max": 1.15,  # ... hasta P/1.15

    # --- Sobrecarga (solo informativo) ---
    "sobrecarga_ideal_min": 105,  # %
    "sobrecarga_ideal_max": 130,  # %

    # --- Protecciones ---
    "factor_corriente_diseno": 1.25,  # Multiplicador de seguridad sobre la corriente nominal

    # --- Características físicas ---
    "area_por_modulo_m2": 2.1,
    "peso_por_modulo_kg": 23,
    "metros_cable_por_modulo": 10,

    # --- Generación ---
    "dias_mes_pronostico": 30.4,  # Días promedio por mes del pronóstico mensual
    "dias_mes_especificacion": 30,  # Días por mes de los totales de la ficha técnica

    # --- Financieros ---
    "tasa_inflacion_anual": 0.06,  # 6% de reajuste anual de la tarifa
    "horizonte_anos": 25,
    "porcentaje_entrada_default": 0.30,  # 30% de entrada si no se informa
}

# =============================================================================
# LÍMITES Y VALIDACIONES
# =============================================================================

PARAM_LIMITS = {
    "eficiencia_sistema": {"min": 0.5, "max": 1.0, "step": 0.01},
    "max_modulos_por_string": {"min": 1, "max": 40, "step": 1},
    "ratio_dc_ac_maximo": {"min": 1.0, "max": 2.0, "step": 0.05},
    "factor_corriente_diseno": {"min": 1.0, "max": 2.0, "step": 0.05},
    "tasa_inflacion_anual": {"min": 0, "max": 0.3, "step": 0.005},
    "horizonte_anos": {"min": 1, "max": 40, "step": 1},
    "porcentaje_entrada_default": {"min": 0, "max": 1.0, "step": 0.05},
}

# =============================================================================
# DESCRIPCIONES PARA UI
# =============================================================================

PARAM_DESCRIPTIONS = {
    "eficiencia_sistema": "Eficiencia global usada para estimar la cantidad de módulos a partir de la factura. Típicamente 75-85%.",
    "max_modulos_por_string": "Máximo de módulos en serie por string para no superar la tensión del inversor.",
    "ratio_dc_ac_maximo": "Relación DC/AC máxima aceptada al elegir el inversor automáticamente.",
    "factor_corriente_diseno": "Factor de seguridad aplicado a la corriente nominal antes de elegir cable y disyuntor.",
    "tasa_inflacion_anual": "Reajuste anual de la tarifa de energía usado en la proyección de ahorro.",
}

# =============================================================================
# FUNCIONES DE ACCESO
# =============================================================================

def get_param(name: str, custom_params: dict = None) -> float:
    """
    Obtiene el valor de un parámetro, priorizando valores personalizados.

    Args:
        name: Nombre del parámetro
        custom_params: Diccionario opcional con valores personalizados

    Returns:
        Valor del parámetro (personalizado si existe, default si no)
    """
    if custom_params and name in custom_params:
        return custom_params[name]
    return DEFAULT_PARAMS.get(name, 0)


def get_all_params(custom_params: dict = None) -> dict:
    """Combina los parámetros por defecto con los personalizados."""
    params = DEFAULT_PARAMS.copy()
    if custom_params:
        params.update(custom_params)
    return params


def validate_param(name: str, value: float) -> tuple:
    """
    Valida un parámetro contra sus límites.

    Returns:
        Tuple (is_valid, error_message)
    """
    if name not in PARAM_LIMITS:
        return True, ""

    limits = PARAM_LIMITS[name]
    if value < limits["min"]:
        return False, f"{name} debe ser >= {limits['min']}"
    if value > limits["max"]:
        return False, f"{name} debe ser <= {limits['max']}"

    return True, ""
