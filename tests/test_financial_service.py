"""
Unit tests for financial_service.py - payback, savings projection and
commercial values of the proposal.
"""
import pytest
import numpy_financial as npf

from dimensionador_fv.services.financial_service import (
    ano_retorno,
    base_ahorro_por_generacion,
    calcular_entrada,
    calcular_margen,
    calcular_payback,
    calcular_precio_venta,
    consumo_estimado_kwh,
    generar_csv_proyeccion,
    proyectar_finanzas,
    resumen_pago,
    tabla_proyeccion_ahorro,
)


def _suma_geometrica(anual, tasa=0.06, anos=25):
    return sum(anual * (1 + tasa) ** i for i in range(anos))


# =============================================================================
# Tests for calcular_payback
# =============================================================================

class TestCalcularPayback:
    """Tests for the simple payback in months."""

    def test_zero_basis_returns_sentinel(self):
        assert calcular_payback(18000, 0) == "---"

    def test_negative_basis_returns_sentinel(self):
        assert calcular_payback(18000, -50) == "---"

    def test_none_basis_returns_sentinel(self):
        assert calcular_payback(18000, None) == "---"

    def test_thirty_months(self):
        assert calcular_payback(18000, 600) == "30.0 meses"

    def test_one_decimal(self):
        assert calcular_payback(18000, 650) == "27.7 meses"

    def test_zero_investment(self):
        assert calcular_payback(0, 600) == "0.0 meses"


# =============================================================================
# Tests for proyectar_finanzas
# =============================================================================

class TestProyectarFinanzas:
    """Tests for the 25-year savings projection."""

    def test_annual_savings(self):
        proyeccion = proyectar_finanzas(18000, 600)
        assert proyeccion.ahorro_mensual == 600
        assert proyeccion.ahorro_anual == 7200

    def test_total_is_geometric_sum(self):
        proyeccion = proyectar_finanzas(18000, 600)
        assert proyeccion.ahorro_total_25_anos == pytest.approx(_suma_geometrica(7200))

    def test_total_matches_future_value(self):
        """The 25-term sum equals the future value of an annuity at 6%."""
        proyeccion = proyectar_finanzas(18000, 600)
        assert proyeccion.ahorro_total_25_anos == pytest.approx(-npf.fv(0.06, 25, 7200, 0))

    def test_total_value(self):
        proyeccion = proyectar_finanzas(18000, 600)
        assert proyeccion.ahorro_total_25_anos == pytest.approx(395_024.5, abs=1)

    def test_zero_basis(self):
        proyeccion = proyectar_finanzas(18000, 0)
        assert proyeccion.ahorro_total_25_anos == 0

    def test_custom_inflation(self, custom_params_conservador):
        proyeccion = proyectar_finanzas(18000, 600, custom_params=custom_params_conservador)
        assert proyeccion.ahorro_total_25_anos == pytest.approx(_suma_geometrica(7200, tasa=0.04))

    def test_basis_from_generation(self):
        base = base_ahorro_por_generacion(787, 0.95)
        assert base == pytest.approx(747.65)
        assert proyectar_finanzas(18000, base).ahorro_anual == pytest.approx(747.65 * 12)


# =============================================================================
# Tests for the yearly projection table
# =============================================================================

class TestTablaProyeccionAhorro:
    """Tests for the pandas projection table and CSV export."""

    def test_has_one_row_per_year(self):
        df = tabla_proyeccion_ahorro(18000, 600)
        assert len(df) == 25
        assert list(df.columns) == ["Año", "Ahorro_Anual", "Ahorro_Acumulado", "Saldo_Acumulado"]
        assert df["Año"].iloc[0] == 1

    def test_last_cumulative_matches_projection(self):
        df = tabla_proyeccion_ahorro(18000, 600)
        total = proyectar_finanzas(18000, 600).ahorro_total_25_anos
        assert df["Ahorro_Acumulado"].iloc[-1] == pytest.approx(total)

    def test_cumulative_is_running_sum(self):
        df = tabla_proyeccion_ahorro(18000, 600)
        assert df["Ahorro_Acumulado"].tolist() == pytest.approx(df["Ahorro_Anual"].cumsum().tolist())

    def test_zero_inflation(self):
        df = tabla_proyeccion_ahorro(18000, 600, custom_params={"tasa_inflacion_anual": 0})
        assert df["Ahorro_Acumulado"].iloc[-1] == pytest.approx(7200 * 25)

    def test_payback_year(self):
        """7200 + 7632 < 18000 < 7200 + 7632 + 8089.92"""
        assert ano_retorno(tabla_proyeccion_ahorro(18000, 600)) == 3

    def test_no_payback_without_savings(self):
        assert ano_retorno(tabla_proyeccion_ahorro(18000, 0)) is None

    def test_csv_export(self):
        csv = generar_csv_proyeccion(18000, 600)
        lineas = csv.strip().splitlines()
        assert lineas[0] == "Año,Ahorro_Anual,Ahorro_Acumulado,Saldo_Acumulado"
        assert len(lineas) == 26
        assert lineas[1].startswith("1,7200.00,7200.00,-10800.00")


# =============================================================================
# Tests for commercial helpers
# =============================================================================

class TestValoresComerciales:
    """Tests for sale price, margin and down payment."""

    def test_sale_price_from_cost_and_margin(self):
        assert calcular_precio_venta(12000, 50) == 18000

    def test_sale_price_is_rounded(self):
        assert calcular_precio_venta(9999, 33.3) == 13329

    def test_margin_from_price(self):
        assert calcular_margen(18000, 12000) == 50.0

    def test_margin_without_cost(self):
        assert calcular_margen(18000, 0) == 0

    def test_default_down_payment_is_thirty_percent(self):
        assert calcular_entrada(18000) == pytest.approx(5400)

    def test_explicit_down_payment_wins(self):
        assert calcular_entrada(18000, 2000) == 2000

    def test_payment_summary(self):
        resumen = resumen_pago(18000, 5400)
        assert resumen == {"entrada": 5400, "porcentaje_entrada": 30, "saldo": 12600}

    def test_payment_summary_without_investment(self):
        assert resumen_pago(0)["porcentaje_entrada"] == 0

    def test_down_payment_percentage_rounds_half_up(self):
        """2250 of 18000 is exactly 12.5%."""
        assert resumen_pago(18000, 2250)["porcentaje_entrada"] == 13

    def test_estimated_consumption(self):
        assert consumo_estimado_kwh(650, 0.95) == 684

    def test_estimated_consumption_without_tariff(self):
        assert consumo_estimado_kwh(650, 0) == 0
