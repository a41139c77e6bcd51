"""Motor de cálculo de servicios del dimensionador."""
