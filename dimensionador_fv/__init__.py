"""
Dimensionador fotovoltaico: ficha técnica, pronóstico de generación,
retorno financiero y lista de materiales a partir de la factura del cliente.
"""
__version__ = "1.0.0"
