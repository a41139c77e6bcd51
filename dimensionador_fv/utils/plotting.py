import logging

import matplotlib
matplotlib.use("Agg")
import matplotlib.pyplot as plt

logger = logging.getLogger(__name__)


def generar_grafica_produccion(produccion, filename="grafica_producao.png", consumo_mensual_kwh=None):
    """
    Genera y guarda la gráfica de generación mensual.
    Retorna True si se generó correctamente, False si hubo error.
    """
    fig, ax = plt.subplots(figsize=(10, 5))
    try:
        meses = [p.mes for p in produccion]
        generacion = [p.generacion_kwh for p in produccion]

        ax.bar(meses, generacion, color='orange', edgecolor='black', label='Geração Estimada', width=0.7)
        if consumo_mensual_kwh:
            ax.axhline(y=consumo_mensual_kwh, color='grey', linestyle='--', linewidth=1.5, label='Consumo Mensal')
        ax.set_ylabel("kWh")
        ax.set_title("Geração Mensal Estimada", fontweight="bold")

        ax.legend()
        fig.tight_layout()
        fig.savefig(filename, dpi=100)
        return True
    except (OSError, ValueError) as e:
        logger.warning("Error generando gráfica: %s", e)
        return False
    finally:
        plt.close(fig)
