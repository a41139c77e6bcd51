"""
Registros de entrada y salida del motor de dimensionamiento.

Todos son inmutables: el llamador cambia un campo con
``dataclasses.replace`` y vuelve a ejecutar ``calcular_proyecto``.
"""
from dataclasses import dataclass, field
from typing import List, Optional, Union


# =============================
# Entrada
# =============================

@dataclass(frozen=True)
class EntradaSistema:
    cantidad_modulos: int = 0
    potencia_modulo_w: int = 575
    modulos_por_string: int = 0
    valor_factura: float = 0.0
    tarifa_energia: float = 0.95
    hsp: float = 5.8
    inversor_seleccionado: str = "Automático (Sugerido pelo Sistema)"
    valor_inversion: float = 0.0
    entrada: Optional[float] = None
    tipo_techo: str = "Cerâmico"


# =============================
# Catálogo
# =============================

@dataclass(frozen=True)
class InversorCatalogo:
    etiqueta: str
    potencia_kw: float
    trifasico: bool


# =============================
# Ficha técnica
# =============================

@dataclass(frozen=True)
class EspecificacionesTecnicas:
    potencia_total_kw: float
    potencia_inversor_kw: float
    trifasico: bool
    inversor_sugerido: str
    rango_inversor: str
    sobrecarga: str
    sobrecarga_porcentaje: float
    clasificacion_sobrecarga: str
    tension_sistema_v: int
    corriente_nominal_a: float
    corriente_diseno_a: float
    calibre_cable_mm2: str
    disyuntor_a: str
    area_requerida_m2: float
    peso_total_kg: float
    configuracion_strings: str
    generacion_diaria_kwh: int
    generacion_mensual_kwh: int
    generacion_anual_kwh: int


# =============================
# Producción y finanzas
# =============================

@dataclass(frozen=True)
class ProduccionMensual:
    mes: str
    generacion_kwh: int


@dataclass(frozen=True)
class ProyeccionFinanciera:
    ahorro_mensual: float
    ahorro_anual: float
    ahorro_total_25_anos: float


# =============================
# Checklist
# =============================

@dataclass(frozen=True)
class ItemChecklist:
    id: str
    etiqueta: str
    cantidad: Union[str, int]
    observacion: str = ""


@dataclass(frozen=True)
class ResultadoProyecto:
    especificaciones: EspecificacionesTecnicas
    produccion: List[ProduccionMensual]
    payback: str
    finanzas: ProyeccionFinanciera
    checklist: List[ItemChecklist] = field(default_factory=list)
    pago: dict = field(default_factory=dict)
