"""
Lista de materiales (checklist) de la instalación.
"""
from dimensionador_fv.config import KIT_ESTRUCTURA_DEFAULT, KIT_ESTRUCTURA_POR_TECHO
from dimensionador_fv.config_parametros import get_param
from dimensionador_fv.services.modelos import ItemChecklist


def kit_estructura(tipo_techo):
    """Descripción del kit de fijación según el tipo de techo."""
    tipo = (tipo_techo or "").strip()
    return KIT_ESTRUCTURA_POR_TECHO.get(tipo, KIT_ESTRUCTURA_DEFAULT)


def calcular_lista_materiales(cantidad_modulos, calibre_cable, disyuntor, tipo_techo,
                              modelo_inversor, custom_params=None):
    """
    Lista de materiales por defecto, en orden fijo.

    Cada ítem tiene un id estable; el del inversor es "8".
    """
    cantidad_modulos = max(int(cantidad_modulos or 0), 0)
    metros_cable = cantidad_modulos * get_param("metros_cable_por_modulo", custom_params)

    return [
        ItemChecklist("1", "Painéis Solares", cantidad_modulos, ""),
        ItemChecklist("8", modelo_inversor, "1 un", "Verificar modelo e fabricante na proposta"),
        ItemChecklist("2", "Cabo Solar (m)", metros_cable, ""),
        ItemChecklist("3", "Cabo CA", calibre_cable, ""),
        ItemChecklist("4", "Disjuntor CA", disyuntor, ""),
        ItemChecklist("5", "Estrutura Fixação", "1 Kit", kit_estructura(tipo_techo)),
        ItemChecklist("6", "String Box", "1 un", ""),
        ItemChecklist("7", "Conectores MC4", "1 Kit", ""),
    ]


def combinar_checklist(nuevos, anteriores=None):
    """
    Conserva las observaciones escritas por el usuario.

    Etiqueta y cantidad siempre vienen de la lista nueva; la observación
    anterior gana cuando no está vacía y el id coincide.
    """
    if not anteriores:
        return list(nuevos)

    observaciones = {item.id: item.observacion for item in anteriores}
    combinados = []
    for item in nuevos:
        previa = observaciones.get(item.id)
        if previa:
            item = ItemChecklist(item.id, item.etiqueta, item.cantidad, previa)
        combinados.append(item)
    return combinados


def generar_checklist(cantidad_modulos, calibre_cable, disyuntor, tipo_techo,
                      modelo_inversor, items_anteriores=None, custom_params=None):
    """Regenera el checklist para la ficha actual manteniendo las observaciones."""
    nuevos = calcular_lista_materiales(
        cantidad_modulos, calibre_cable, disyuntor, tipo_techo, modelo_inversor, custom_params
    )
    return combinar_checklist(nuevos, items_anteriores)


def actualizar_observacion(items, item_id, observacion):
    """Devuelve la lista con la observación del ítem cambiada."""
    return [
        ItemChecklist(item.id, item.etiqueta, item.cantidad, observacion) if item.id == item_id else item
        for item in items
    ]
