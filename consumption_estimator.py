"""
Proportional estimate of sector consumption from a year's supply figures.

Used for fiscal years that have neither verified nor override consumption
data. Each ratio was calibrated once against the verified 2023-24 balance and
is applied unchanged to every other year, so estimates drift as India's fuel
mix changes.

2023-24 calibration (KToE):
    Coal          supply 545,438  final 200,947  -> 36.8 %
    Natural Gas   supply  63,115  final  39,687  -> 62.9 %
    Lignite       supply   9,798  final   1,585  -> 16.2 %
    Oil Products  market 317,620  final 252,286  -> 79.4 %
                  (crude supply 269,417 + oil product imports 48,203)
    Electricity   fuels  662,692  final 132,698  -> 20.0 %
                  (coal + gas + hydro + nuclear + solar/wind + lignite)
"""

from typing import Dict, Mapping

COAL_FINAL_SHARE = 0.368
NATURAL_GAS_FINAL_SHARE = 0.629
LIGNITE_FINAL_SHARE = 0.162
OIL_PRODUCTS_FINAL_SHARE = 0.794
ELECTRICITY_FINAL_SHARE = 0.200

NATURAL_GAS_SPLIT: Dict[str, float] = {
    "Industry": 0.034,
    "Transport": 0.359,
    "Others": 0.027,
    "Non-energy use": 0.580,
}

OIL_PRODUCTS_SPLIT: Dict[str, float] = {
    "Industry": 0.137,
    "Transport": 0.585,
    "Others": 0.185,
    "Non-energy use": 0.093,
}

ELECTRICITY_SPLIT: Dict[str, float] = {
    "Industry": 0.418,
    "Transport": 0.021,
    "Others": 0.561,
    "Non-energy use": 0,
}

# Commodities consumed only through transformation (refining or generation)
TRANSFORMATION_ONLY = ("Crude Oil", "Hydro", "Nuclear", "Solar, Wind, Others")

ELECTRICITY_FUELS = (
    "Coal",
    "Natural Gas",
    "Hydro",
    "Nuclear",
    "Solar, Wind, Others",
    "Lignite",
)


def commodity_supply(year_supply: Mapping, commodity: str) -> float:
    """Production + Imports for one commodity, 0 when absent."""
    sources = year_supply.get(commodity)
    if not sources:
        return 0
    return (sources.get("Production") or 0) + (sources.get("Imports") or 0)


def _single_sector(sector: str, final: float) -> Dict[str, float]:
    sectors = {"Industry": 0, "Transport": 0, "Others": 0, "Non-energy use": 0}
    sectors[sector] = final
    sectors["Final consumption"] = final
    return sectors


def _split(final: float, shares: Mapping[str, float]) -> Dict[str, float]:
    sectors = {sector: final * share for sector, share in shares.items()}
    sectors["Final consumption"] = final
    return sectors


def estimate_consumption(year_supply: Mapping) -> Dict[str, Dict[str, float]]:
    """
    Estimate a year's sector consumption breakdown from its supply.

    Args:
        year_supply: {commodity: {"Production": value, "Imports": value}}

    Returns:
        {commodity: {"Industry", "Transport", "Others", "Non-energy use",
        "Final consumption"}} for all nine MoSPI commodities
    """
    result = {}

    # Coal and lignite: final use is entirely industrial
    coal_final = commodity_supply(year_supply, "Coal") * COAL_FINAL_SHARE
    result["Coal"] = _single_sector("Industry", coal_final)

    gas_final = commodity_supply(year_supply, "Natural Gas") * NATURAL_GAS_FINAL_SHARE
    result["Natural Gas"] = _split(gas_final, NATURAL_GAS_SPLIT)

    for commodity in TRANSFORMATION_ONLY:
        result[commodity] = _single_sector("Industry", 0)

    lignite_final = commodity_supply(year_supply, "Lignite") * LIGNITE_FINAL_SHARE
    result["Lignite"] = _single_sector("Industry", lignite_final)

    # Oil product supply is imports only (domestic output is counted as crude)
    oil_market_supply = (commodity_supply(year_supply, "Crude Oil")
                         + commodity_supply(year_supply, "Oil Products"))
    oil_final = oil_market_supply * OIL_PRODUCTS_FINAL_SHARE
    result["Oil Products"] = _split(oil_final, OIL_PRODUCTS_SPLIT)

    fuel_supply = sum(commodity_supply(year_supply, fuel) for fuel in ELECTRICITY_FUELS)
    electricity_imports = commodity_supply(year_supply, "Electricity")
    electricity_final = (fuel_supply * ELECTRICITY_FINAL_SHARE) + electricity_imports
    result["Electricity"] = _split(electricity_final, ELECTRICITY_SPLIT)

    return result
