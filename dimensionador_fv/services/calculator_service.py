"""
Servicio de cálculos técnicos para sistemas fotovoltaicos: cantidad de
módulos, strings, inversor, protecciones y pronóstico de generación.

Todas las funciones son puras. Con entradas degeneradas (factura o tarifa
en cero, sin módulos) devuelven 0 o el texto "---" en lugar de lanzar
excepciones.
"""
import logging
import math
import re
from dataclasses import replace

from dimensionador_fv.config import (
    CABLE_MAXIMO,
    FACTORES_ESTACIONALES,
    INVERSORES_ESTANDAR_KW,
    INVERSORES_POR_ETIQUETA,
    MESES,
    POTENCIA_MODULO_DEFAULT_W,
    SENTINELA_SIN_DATO,
    TABLA_CABLES,
)
from dimensionador_fv.config_parametros import get_param
from dimensionador_fv.services.checklist_service import generar_checklist
from dimensionador_fv.services.financial_service import calcular_payback, proyectar_finanzas, resumen_pago
from dimensionador_fv.services.modelos import (
    EspecificacionesTecnicas,
    InversorCatalogo,
    ProduccionMensual,
    ResultadoProyecto,
)

logger = logging.getLogger(__name__)

_PATRON_KW = re.compile(r"(\d+(?:\.\d+)?)\s*kW", re.IGNORECASE)
_PATRON_W = re.compile(r"(\d+)\s*W", re.IGNORECASE)


def redondear(valor):
    """Redondea al entero más cercano, con las mitades hacia arriba. No finitos dan 0."""
    if not math.isfinite(valor):
        return 0
    return int(math.floor(valor + 0.5))


def _positivo(valor):
    if valor is None or not math.isfinite(valor):
        return 0
    return valor if valor > 0 else 0


def estimar_cantidad_modulos(valor_factura, tarifa, hsp, potencia_modulo_w, custom_params=None):
    """
    Estima cuántos módulos cubren el consumo de la factura.

    consumo mensual = factura / tarifa, consumo diario = mensual / 30,
    kWp requeridos = diario / (HSP * eficiencia), módulos = techo(kWp * 1000 / W).

    Args:
        valor_factura: Valor mensual de la factura
        tarifa: Precio del kWh
        hsp: Horas solares pico del sitio
        potencia_modulo_w: Potencia de cada módulo en W
        custom_params: Parámetros personalizados opcionales

    Returns:
        int: Cantidad de módulos (0 si la factura o la tarifa no son positivas)
    """
    valor_factura = _positivo(valor_factura)
    tarifa = _positivo(tarifa)
    if valor_factura <= 0 or tarifa <= 0:
        return 0
    if _positivo(hsp) <= 0 or _positivo(potencia_modulo_w) <= 0:
        return 0

    eficiencia = get_param("eficiencia_sistema", custom_params)
    dias_mes = get_param("dias_mes_factura", custom_params)

    consumo_mensual_kwh = valor_factura / tarifa
    consumo_diario_kwh = consumo_mensual_kwh / dias_mes
    kwp_requeridos = consumo_diario_kwh / (hsp * eficiencia)

    modulos = (kwp_requeridos * 1000) / potencia_modulo_w
    if not math.isfinite(modulos):
        logger.debug("Estimación de módulos no finita (factura %s, tarifa %s)", valor_factura, tarifa)
        return 0
    return int(math.ceil(modulos))


def sugerir_modulos_por_string(total_modulos, custom_params=None):
    """
    Sugiere cuántos módulos poner en serie por string.

    Si todo cabe en una string se devuelve el total. Si no, se prueban 2, 3, ...
    strings hasta que techo(total / n) no supere el máximo seguro. Pasado el
    tope de búsqueda se devuelve 1.
    """
    total_modulos = _positivo(total_modulos)
    if total_modulos <= 0:
        return 0

    max_por_string = get_param("max_modulos_por_string", custom_params)
    max_strings = get_param("max_busqueda_strings", custom_params)

    if total_modulos <= max_por_string:
        return int(total_modulos)

    numero_strings = 2
    while True:
        modulos_por_string = int(math.ceil(total_modulos / numero_strings))
        if modulos_por_string <= max_por_string:
            return modulos_por_string
        numero_strings += 1
        if numero_strings > max_strings:
            logger.debug("Búsqueda de strings sin solución para %s módulos", total_modulos)
            return 1


def interpretar_etiqueta_inversor(etiqueta):
    """
    Recupera potencia (kW) y fase de una etiqueta de texto libre.

    Busca primero un número seguido de "kW" y luego de "W". Es trifásico si
    la etiqueta dice "trifásico". Devuelve potencia 0 si no encuentra nada.
    """
    if not etiqueta or "Automático" in etiqueta:
        return InversorCatalogo(etiqueta or "", 0, False)

    kw = 0
    coincidencia_kw = _PATRON_KW.search(etiqueta)
    coincidencia_w = _PATRON_W.search(etiqueta)
    if coincidencia_kw:
        kw = float(coincidencia_kw.group(1))
    elif coincidencia_w:
        kw = float(coincidencia_w.group(1)) / 1000

    return InversorCatalogo(etiqueta, kw, "trifásico" in etiqueta.lower())


def _etiqueta_automatica(potencia_kw, trifasico):
    fase = "Trifásico 380V" if trifasico else "Mono/Bifásico 220V"
    return f"Inversor {potencia_kw:g}kW ({fase})"


def seleccionar_inversor(potencia_total_kw, inversor_seleccionado=None, custom_params=None):
    """
    Resuelve el inversor del sistema.

    Selección manual: se usa la entrada del catálogo (o se interpreta la
    etiqueta si no está en él). Si la potencia resulta 0 se cae a la
    selección automática sin avisar.

    Selección automática: primer tamaño de la escalera estándar con
    relación DC/AC <= 1.45; si ninguno cumple, el más grande. Es trifásico
    desde 8 kW.

    Returns:
        InversorCatalogo: etiqueta, potencia en kW y fase
    """
    if inversor_seleccionado and "Automático" not in inversor_seleccionado:
        manual = INVERSORES_POR_ETIQUETA.get(inversor_seleccionado)
        if manual is None:
            manual = interpretar_etiqueta_inversor(inversor_seleccionado)
        if manual.potencia_kw > 0:
            return manual
        logger.debug("Inversor '%s' sin potencia reconocible, se usa selección automática",
                     inversor_seleccionado)

    ratio_maximo = get_param("ratio_dc_ac_maximo", custom_params)
    umbral_trifasico = get_param("umbral_trifasico_kw", custom_params)
    potencia_total_kw = _positivo(potencia_total_kw)

    elegido = next(
        (kw for kw in INVERSORES_ESTANDAR_KW if potencia_total_kw / kw <= ratio_maximo),
        INVERSORES_ESTANDAR_KW[-1],
    )
    trifasico = elegido >= umbral_trifasico
    return InversorCatalogo(_etiqueta_automatica(elegido, trifasico), elegido, trifasico)


def calcular_rango_inversor(potencia_total_kw, custom_params=None):
    """Rango de potencia de inversor recomendado, como texto."""
    potencia_total_kw = _positivo(potencia_total_kw)
    minimo = potencia_total_kw / get_param("divisor_rango_min", custom_params)
    maximo = potencia_total_kw / get_param("divisor_rango_max", custom_params)
    return f"{minimo:.1f}kW - {maximo:.1f}kW"


def clasificar_sobrecarga(porcentaje, custom_params=None):
    """
    Clasificación informativa de la sobrecarga DC/AC.

    < 105% subutilizado, 105-130% ideal, > 130% riesgo alto. No bloquea el
    dimensionamiento.
    """
    if porcentaje is None or porcentaje <= 0:
        return SENTINELA_SIN_DATO
    if porcentaje < get_param("sobrecarga_ideal_min", custom_params):
        return "baixo"
    if porcentaje <= get_param("sobrecarga_ideal_max", custom_params):
        return "ideal"
    return "alto"


def calcular_corriente_nominal(potencia_inversor_kw, trifasico, custom_params=None):
    """
    Corriente nominal de salida del inversor (A).

    Monofásico/bifásico: I = P / 220. Trifásico: I = P / (380 * raíz de 3).
    """
    potencia_w = _positivo(potencia_inversor_kw) * 1000
    if trifasico:
        return potencia_w / (get_param("tension_trifasica_v", custom_params) * math.sqrt(3))
    return potencia_w / get_param("tension_monofasica_v", custom_params)


def seleccionar_cable_y_disyuntor(corriente_diseno):
    """
    Busca sección de cable y disyuntor para la corriente de diseño.

    Recorre TABLA_CABLES en orden ascendente y devuelve el primer par cuyo
    límite no sea superado.
    """
    for limite, calibre, disyuntor in TABLA_CABLES:
        if corriente_diseno <= limite:
            return calibre, disyuntor
    return CABLE_MAXIMO


def describir_strings(cantidad_modulos, modulos_por_string):
    """Texto de la configuración de strings, p. ej. "2 Strings de 12 módulos"."""
    if cantidad_modulos <= 0 or modulos_por_string <= 0:
        return SENTINELA_SIN_DATO

    if cantidad_modulos % modulos_por_string == 0:
        return f"{cantidad_modulos // modulos_por_string} Strings de {modulos_por_string} módulos"

    numero_strings = int(math.ceil(cantidad_modulos / modulos_por_string))
    return f"~{numero_strings} Strings (Config. Mista / Sugerido: {modulos_por_string}/str)"


def _generacion_anual_ficha(potencia_total_kw, hsp, custom_params=None):
    dias = get_param("dias_mes_especificacion", custom_params)
    return sum(potencia_total_kw * hsp * factor * dias for factor in FACTORES_ESTACIONALES)


def dimensionar_sistema(entrada, custom_params=None):
    """
    Calcula la ficha técnica completa a partir de la entrada del sistema.

    Args:
        entrada: EntradaSistema
        custom_params: Parámetros personalizados opcionales

    Returns:
        EspecificacionesTecnicas
    """
    cantidad = int(_positivo(entrada.cantidad_modulos))
    potencia_modulo = _positivo(entrada.potencia_modulo_w) or POTENCIA_MODULO_DEFAULT_W
    potencia_total_kw = (cantidad * potencia_modulo) / 1000
    hsp = _positivo(entrada.hsp)

    # 1. Inversor
    inversor = seleccionar_inversor(potencia_total_kw, entrada.inversor_seleccionado, custom_params)
    trifasico = inversor.trifasico
    tension = get_param("tension_trifasica_v" if trifasico else "tension_monofasica_v", custom_params)

    sobrecarga_pct = (potencia_total_kw / inversor.potencia_kw) * 100 if inversor.potencia_kw > 0 else 0

    # 2. Características físicas
    area = round(cantidad * get_param("area_por_modulo_m2", custom_params), 1)
    peso = cantidad * get_param("peso_por_modulo_kg", custom_params)

    # 3. Eléctrico
    corriente_nominal = calcular_corriente_nominal(inversor.potencia_kw, trifasico, custom_params)
    corriente_diseno = corriente_nominal * get_param("factor_corriente_diseno", custom_params)
    calibre, disyuntor = seleccionar_cable_y_disyuntor(corriente_diseno)

    # 4. Strings
    modulos_por_string = int(_positivo(entrada.modulos_por_string))
    if cantidad > 0 and modulos_por_string > cantidad:
        modulos_por_string = cantidad

    # 5. Totales de generación (mes de 30 días, no concilia con el pronóstico mensual)
    generacion_anual = _generacion_anual_ficha(potencia_total_kw, hsp, custom_params)

    return EspecificacionesTecnicas(
        potencia_total_kw=potencia_total_kw,
        potencia_inversor_kw=inversor.potencia_kw,
        trifasico=trifasico,
        inversor_sugerido=inversor.etiqueta,
        rango_inversor=calcular_rango_inversor(potencia_total_kw, custom_params),
        sobrecarga=f"{redondear(sobrecarga_pct)}%",
        sobrecarga_porcentaje=sobrecarga_pct,
        clasificacion_sobrecarga=clasificar_sobrecarga(sobrecarga_pct, custom_params),
        tension_sistema_v=tension,
        corriente_nominal_a=round(corriente_nominal, 1),
        corriente_diseno_a=corriente_diseno,
        calibre_cable_mm2=calibre,
        disyuntor_a=disyuntor,
        area_requerida_m2=area,
        peso_total_kg=peso,
        configuracion_strings=describir_strings(cantidad, modulos_por_string),
        generacion_diaria_kwh=redondear(generacion_anual / 365),
        generacion_mensual_kwh=redondear(generacion_anual / 12),
        generacion_anual_kwh=redondear(generacion_anual),
    )


def pronosticar_produccion(potencia_total_kw, hsp, custom_params=None):
    """
    Generación mensual estimada (kWh) de enero a diciembre.

    generación = kWp * HSP * factor estacional * 30.4, redondeada por mes.
    """
    potencia_total_kw = _positivo(potencia_total_kw)
    hsp = _positivo(hsp)
    dias = get_param("dias_mes_pronostico", custom_params)

    return [
        ProduccionMensual(mes, redondear(potencia_total_kw * hsp * factor * dias))
        for mes, factor in zip(MESES, FACTORES_ESTACIONALES)
    ]


def calcular_proyecto(entrada, checklist_anterior=None, base_ahorro=None, custom_params=None):
    """
    Recalcula todo el proyecto para la entrada actual.

    El llamador lo invoca de nuevo cada vez que cambia un campo; las
    observaciones del checklist anterior se conservan por id.

    Args:
        entrada: EntradaSistema
        checklist_anterior: Lista de ItemChecklist de la ejecución previa
        base_ahorro: Ahorro mensual a usar en payback y proyección.
            Si es None se usa el valor de la factura.
        custom_params: Parámetros personalizados opcionales

    Returns:
        ResultadoProyecto
    """
    especificaciones = dimensionar_sistema(entrada, custom_params)
    produccion = pronosticar_produccion(especificaciones.potencia_total_kw, entrada.hsp, custom_params)

    if base_ahorro is None:
        base_ahorro = entrada.valor_factura

    checklist = generar_checklist(
        int(_positivo(entrada.cantidad_modulos)),
        especificaciones.calibre_cable_mm2,
        especificaciones.disyuntor_a,
        entrada.tipo_techo,
        especificaciones.inversor_sugerido,
        checklist_anterior,
        custom_params=custom_params,
    )

    return ResultadoProyecto(
        especificaciones=especificaciones,
        produccion=produccion,
        payback=calcular_payback(entrada.valor_inversion, base_ahorro),
        finanzas=proyectar_finanzas(entrada.valor_inversion, base_ahorro, custom_params),
        checklist=checklist,
        pago=resumen_pago(entrada.valor_inversion, entrada.entrada, custom_params),
    )


def actualizar_entrada(entrada, custom_params=None, **cambios):
    """
    Devuelve una nueva entrada con los campos cambiados.

    Si cambia la factura (y es positiva) se recalculan la cantidad de
    módulos y los módulos por string, como hace el formulario comercial.
    """
    nueva = replace(entrada, **cambios)
    if "valor_factura" in cambios and _positivo(nueva.valor_factura) > 0:
        sugeridos = estimar_cantidad_modulos(
            nueva.valor_factura, nueva.tarifa_energia, nueva.hsp, nueva.potencia_modulo_w,
            custom_params=custom_params,
        )
        if sugeridos > 0:
            nueva = replace(
                nueva,
                cantidad_modulos=sugeridos,
                modulos_por_string=sugerir_modulos_por_string(sugeridos, custom_params),
            )
    return nueva
