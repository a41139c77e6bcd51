"""
Servicio de cálculos financieros: payback, proyección de ahorro a 25 años
y valores comerciales de la propuesta (precio de venta, margen, entrada).
"""
import io
import math

import numpy as np
import numpy_financial as npf
import pandas as pd

from dimensionador_fv.config import SENTINELA_SIN_DATO
from dimensionador_fv.config_parametros import get_param
from dimensionador_fv.services.modelos import ProyeccionFinanciera


def _monto(valor):
    if valor is None or valor <= 0:
        return 0
    return valor


def calcular_payback(inversion, base_ahorro_mensual):
    """
    Tiempo de retorno simple en meses, formateado con un decimal.

    Devuelve "---" si la base de ahorro no es positiva.
    """
    base_ahorro_mensual = _monto(base_ahorro_mensual)
    if base_ahorro_mensual <= 0:
        return SENTINELA_SIN_DATO
    meses = _monto(inversion) / base_ahorro_mensual
    return f"{meses:.1f} meses"


def proyectar_finanzas(inversion, base_ahorro_mensual, custom_params=None):
    """
    Proyección de ahorro con reajuste anual de la tarifa.

    La base puede ser el valor de la factura o la generación mensual por la
    tarifa; la decide el llamador. El ahorro de cada año crece con la
    inflación (6% por defecto) y se acumula durante el horizonte (25 años).

    Args:
        inversion: Valor de la inversión (no entra en la suma)
        base_ahorro_mensual: Ahorro mensual del primer año
        custom_params: Parámetros personalizados opcionales

    Returns:
        ProyeccionFinanciera
    """
    ahorro_mensual = _monto(base_ahorro_mensual)
    ahorro_anual = ahorro_mensual * 12

    tasa = get_param("tasa_inflacion_anual", custom_params)
    horizonte = int(get_param("horizonte_anos", custom_params))

    ahorro_total = 0
    ahorro_ano = ahorro_anual
    for _ in range(horizonte):
        ahorro_total += ahorro_ano
        ahorro_ano = ahorro_ano * (1 + tasa)

    return ProyeccionFinanciera(
        ahorro_mensual=ahorro_mensual,
        ahorro_anual=ahorro_anual,
        ahorro_total_25_anos=ahorro_total,
    )


def base_ahorro_por_generacion(generacion_mensual_kwh, tarifa):
    """Ahorro mensual estimado como generación mensual por tarifa."""
    return _monto(generacion_mensual_kwh) * _monto(tarifa)


def consumo_estimado_kwh(valor_factura, tarifa):
    """Consumo mensual estimado a partir de la factura (kWh)."""
    if _monto(tarifa) <= 0:
        return 0
    return int(math.floor(_monto(valor_factura) / tarifa + 0.5))


def calcular_precio_venta(costo_kit, margen_pct):
    """Precio final del proyecto: costo del kit más el margen, redondeado."""
    precio = _monto(costo_kit) * (1 + (margen_pct or 0) / 100)
    return int(math.floor(precio + 0.5))


def calcular_margen(precio_venta, costo_kit):
    """Margen (%) implícito en un precio de venta, con un decimal."""
    if _monto(costo_kit) <= 0:
        return 0
    return round(((_monto(precio_venta) / costo_kit) - 1) * 100, 1)


def calcular_entrada(inversion, entrada=None, custom_params=None):
    """Entrada informada, o 30% de la inversión si no se informó."""
    if entrada is not None:
        return entrada
    return _monto(inversion) * get_param("porcentaje_entrada_default", custom_params)


def resumen_pago(inversion, entrada=None, custom_params=None):
    """
    Condiciones de pago de la propuesta.

    Returns:
        dict: entrada, porcentaje de entrada (entero) y saldo restante
    """
    inversion = _monto(inversion)
    valor_entrada = calcular_entrada(inversion, entrada, custom_params)
    porcentaje = int(math.floor(valor_entrada / inversion * 100 + 0.5)) if inversion > 0 else 0
    return {
        "entrada": valor_entrada,
        "porcentaje_entrada": porcentaje,
        "saldo": inversion - valor_entrada,
    }


def tabla_proyeccion_ahorro(inversion, base_ahorro_mensual, custom_params=None):
    """
    Tabla año a año de la proyección de ahorro.

    Returns:
        pd.DataFrame: columnas Año, Ahorro_Anual, Ahorro_Acumulado y
        Saldo_Acumulado (ahorro acumulado menos inversión)
    """
    ahorro_anual = _monto(base_ahorro_mensual) * 12
    tasa = get_param("tasa_inflacion_anual", custom_params)
    horizonte = int(get_param("horizonte_anos", custom_params))

    anos = np.arange(1, horizonte + 1)
    ahorro_por_ano = ahorro_anual * (1 + tasa) ** (anos - 1)
    # Suma geométrica acumulada, igual a la suma año a año
    ahorro_acumulado = -npf.fv(tasa, anos, ahorro_anual, 0) if tasa else ahorro_anual * anos

    df = pd.DataFrame({
        "Año": anos,
        "Ahorro_Anual": ahorro_por_ano,
        "Ahorro_Acumulado": ahorro_acumulado,
    })
    df["Saldo_Acumulado"] = df["Ahorro_Acumulado"] - _monto(inversion)
    return df


def ano_retorno(tabla):
    """Primer año en que el saldo acumulado deja de ser negativo, o None."""
    positivos = tabla.loc[tabla["Saldo_Acumulado"] >= 0, "Año"]
    if positivos.empty:
        return None
    return int(positivos.iloc[0])


def generar_csv_proyeccion(inversion, base_ahorro_mensual, custom_params=None):
    """CSV de la proyección de ahorro año a año."""
    df = tabla_proyeccion_ahorro(inversion, base_ahorro_mensual, custom_params)
    csv_buffer = io.StringIO()
    df.to_csv(csv_buffer, index=False, float_format='%.2f')
    return csv_buffer.getvalue()
