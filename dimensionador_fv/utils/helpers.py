"""
Funciones de utilidad y validación para la aplicación.
"""
from dimensionador_fv.config import TIPOS_TECHO


def validar_datos_entrada(entrada):
    """Valida que los datos de entrada sean coherentes y válidos"""
    errores = []

    if entrada.valor_factura is None or entrada.valor_factura < 0:
        errores.append("O valor da conta não pode ser negativo")

    if entrada.tarifa_energia is None or entrada.tarifa_energia <= 0:
        errores.append("A tarifa de energia deve ser maior que 0")

    if entrada.hsp is None or entrada.hsp <= 0:
        errores.append("O HSP deve ser maior que 0")

    if entrada.potencia_modulo_w is None or entrada.potencia_modulo_w <= 0:
        errores.append("A potência do módulo deve ser maior que 0")

    if entrada.cantidad_modulos is None or entrada.cantidad_modulos < 0:
        errores.append("A quantidade de módulos não pode ser negativa")

    if entrada.modulos_por_string is None or entrada.modulos_por_string < 0:
        errores.append("Os módulos por string não podem ser negativos")
    elif entrada.cantidad_modulos is not None and 0 < entrada.cantidad_modulos < entrada.modulos_por_string:
        errores.append("Os módulos por string não podem superar a quantidade de módulos")

    if entrada.valor_inversion is None or entrada.valor_inversion < 0:
        errores.append("O investimento não pode ser negativo")

    if entrada.tipo_techo not in TIPOS_TECHO:
        errores.append(f"O tipo de telhado deve ser um de: {', '.join(TIPOS_TECHO)}")

    return errores


def formatear_moneda(valor):
    """Formatea un valor numérico como moneda brasileña (R$ 18.000,00)"""
    try:
        texto = f"{valor:,.2f}"
    except (ValueError, TypeError):
        return "R$ 0,00"
    return "R$ " + texto.replace(",", "_").replace(".", ",").replace("_", ".")


def formatear_kwh(valor):
    """Formatea energía en kWh con separador de miles"""
    try:
        return f"{valor:,.0f} kWh".replace(",", ".")
    except (ValueError, TypeError):
        return "0 kWh"
