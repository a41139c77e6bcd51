"""
Tablas estáticas del dimensionador: catálogos de equipos, escalera de
inversores, tabla de conductores y curva estacional de generación.
"""
from dimensionador_fv.services.modelos import InversorCatalogo

# Catálogo de módulos fotovoltaicos disponibles (W)
OPCIONES_MODULOS = (
    {"etiqueta": "450W Monocristalino", "potencia_w": 450},
    {"etiqueta": "550W Monocristalino", "potencia_w": 550},
    {"etiqueta": "575W Monocristalino (Padrão)", "potencia_w": 575},
    {"etiqueta": "600W Monocristalino", "potencia_w": 600},
    {"etiqueta": "660W Monocristalino", "potencia_w": 660},
    {"etiqueta": "700W N-Type (Alta Potência)", "potencia_w": 700},
    {"etiqueta": "715W Bifacial", "potencia_w": 715},
)

POTENCIA_MODULO_DEFAULT_W = 575

INVERSOR_AUTOMATICO = "Automático (Sugerido pelo Sistema)"

# Catálogo de inversores para selección manual. Se guarda potencia y fase
# junto a la etiqueta para no depender del texto.
OPCIONES_INVERSORES = (
    InversorCatalogo("Microinversor 600W (2 MPPT)", 0.6, False),
    InversorCatalogo("Microinversor 1.2kW (4 MPPT)", 1.2, False),
    InversorCatalogo("Microinversor 1.6kW (4 MPPT)", 1.6, False),
    InversorCatalogo("Microinversor 2.0kW (4 MPPT)", 2.0, False),
    InversorCatalogo("Inversor 3kW (Mono 220V)", 3, False),
    InversorCatalogo("Inversor 4kW (Mono 220V)", 4, False),
    InversorCatalogo("Inversor 5kW (Mono 220V)", 5, False),
    InversorCatalogo("Inversor 6kW (Mono 220V)", 6, False),
    InversorCatalogo("Inversor 8kW (Mono/Bifásico 220V)", 8, False),
    InversorCatalogo("Inversor 10kW (Trifásico 380V)", 10, True),
    InversorCatalogo("Inversor 12kW (Trifásico 380V)", 12, True),
    InversorCatalogo("Inversor 15kW (Trifásico 380V)", 15, True),
    InversorCatalogo("Inversor 20kW (Trifásico 380V)", 20, True),
    InversorCatalogo("Inversor 25kW (Trifásico 380V)", 25, True),
    InversorCatalogo("Inversor 30kW (Trifásico 380V)", 30, True),
    InversorCatalogo("Inversor 33kW (Trifásico 380V)", 33, True),
    InversorCatalogo("Inversor 40kW (Trifásico 380V)", 40, True),
    InversorCatalogo("Inversor 50kW (Trifásico 380V)", 50, True),
    InversorCatalogo("Inversor 60kW (Trifásico 380V)", 60, True),
    InversorCatalogo("Inversor 75kW (Trifásico 380V)", 75, True),
    InversorCatalogo("Inversor 100kW (Trifásico 380V)", 100, True),
)

INVERSORES_POR_ETIQUETA = {inv.etiqueta: inv for inv in OPCIONES_INVERSORES}

# Escalera de tamaños estándar para la selección automática (kW), ascendente
INVERSORES_ESTANDAR_KW = (
    1, 1.5, 2, 2.5, 3, 3.6, 4, 5, 6, 7, 8, 9, 10,
    12, 15, 20, 25, 30, 33, 40, 50, 60, 75, 100,
)

# Corriente de diseño máxima (A) -> (sección del cable CA, disyuntor).
# Se recorre en orden ascendente, gana el primer límite que cumple.
TABLA_CABLES = (
    (21, "2.5mm²", "20A"),
    (28, "4.0mm²", "25A"),
    (36, "6.0mm²", "32A"),
    (50, "10.0mm²", "50A"),
    (68, "16.0mm²", "63A"),
    (89, "25.0mm²", "80A"),
    (111, "35.0mm²", "100A"),
    (145, "50.0mm²", "125A"),
    (190, "70.0mm²", "160A"),
)
CABLE_MAXIMO = ("95.0mm² +", "200A +")

MESES = ("JAN", "FEV", "MAR", "ABR", "MAI", "JUN", "JUL", "AGO", "SET", "OUT", "NOV", "DEZ")

# Multiplicador estacional de irradiancia, enero a diciembre
FACTORES_ESTACIONALES = (1.0, 0.9, 0.8, 0.8, 0.9, 1.0, 1.1, 1.2, 1.1, 1.0, 1.0, 1.0)

TIPOS_TECHO = ("Cerâmico", "Fibrocimento", "Metálico", "Laje", "Solo")

KIT_ESTRUCTURA_POR_TECHO = {
    "Cerâmico": "Kit Gancho (Telha Colonial)",
    "Fibrocimento": "Kit Parafuso Prisioneiro",
    "Metálico": "Kit Mini-Trilho / Metálico",
    "Laje": "Estrutura de Triângulo (Laje)",
    "Solo": "Estrutura Solo (Cerâmico/Concreto)",
}
KIT_ESTRUCTURA_DEFAULT = "Kit Fixação Padrão"

SENTINELA_SIN_DATO = "---"
