"""
Embedded MoSPI energy balance figures (KToE).

SUPPLY_DATA holds Production and Imports for every commodity and fiscal year
from 2012-13 to 2023-24. CONSUMPTION_DATA holds the verified sector-level
consumption for 2023-24 only (rows where end_use_sub_sector is null); other
years come from the override file or from the estimator.

Source: MoSPI Energy Balance dataset (eSankhyiki API), use_of_energy_balance
codes 1 (supply) and 2 (consumption).

Both tables are exposed read-only.
"""

from types import MappingProxyType
from typing import Any, Mapping


def _freeze(table: Any) -> Any:
    if isinstance(table, dict):
        return MappingProxyType({key: _freeze(value) for key, value in table.items()})
    return table


_SUPPLY = {
    "2023-24": {
        "Coal": {"Production": 403799.46, "Imports": 141638.82},
        "Crude Oil": {"Production": 30002.27, "Imports": 239414.80},
        "Natural Gas": {"Production": 33704.73, "Imports": 29410.30},
        "Hydro": {"Production": 11558.82, "Imports": 0},
        "Nuclear": {"Production": 12492.78, "Imports": 0},
        "Solar, Wind, Others": {"Production": 20288.67, "Imports": 0},
        "Lignite": {"Production": 9786.09, "Imports": 11.88},
        "Oil Products": {"Production": 0, "Imports": 48202.82},
        "Electricity": {"Production": 0, "Imports": 571.79},
    },
    "2022-23": {
        "Coal": {"Production": 359797.83, "Imports": 126342.73},
        "Crude Oil": {"Production": 29820.95, "Imports": 237819.29},
        "Natural Gas": {"Production": 31866.22, "Imports": 24331.37},
        "Hydro": {"Production": 13965.49, "Imports": 0},
        "Nuclear": {"Production": 11951.68, "Imports": 0},
        "Solar, Wind, Others": {"Production": 18252.85, "Imports": 0},
        "Lignite": {"Production": 10038.71, "Imports": 5.22},
        "Oil Products": {"Production": 0, "Imports": 44702.72},
        "Electricity": {"Production": 0, "Imports": 657.02},
    },
    "2021-22": {
        "Coal": {"Production": 312680.97, "Imports": 115989.25},
        "Crude Oil": {"Production": 30343.85, "Imports": 217053.53},
        "Natural Gas": {"Production": 31471.48, "Imports": 28700.65},
        "Hydro": {"Production": 13070.62, "Imports": 0},
        "Nuclear": {"Production": 12277.69, "Imports": 0},
        "Solar, Wind, Others": {"Production": 15284.37, "Imports": 0},
        "Lignite": {"Production": 10828.28, "Imports": 2.57},
        "Oil Products": {"Production": 0, "Imports": 39911.65},
        "Electricity": {"Production": 0, "Imports": 685.76},
    },
    "2020-21": {
        "Coal": {"Production": 297774.74, "Imports": 115541.29},
        "Crude Oil": {"Production": 31164.89, "Imports": 200782.55},
        "Natural Gas": {"Production": 26521.88, "Imports": 30553.74},
        "Hydro": {"Production": 12954.92, "Imports": 0},
        "Nuclear": {"Production": 11213.64, "Imports": 0},
        "Solar, Wind, Others": {"Production": 13278.87, "Imports": 0},
        "Lignite": {"Production": 9553.92, "Imports": 0.82},
        "Oil Products": {"Production": 0, "Imports": 42915.38},
        "Electricity": {"Production": 0, "Imports": 821.10},
    },
    "2019-20": {
        "Coal": {"Production": 308651.92, "Imports": 130996.86},
        "Crude Oil": {"Production": 32876.92, "Imports": 231947.15},
        "Natural Gas": {"Production": 28685.04, "Imports": 31170.93},
        "Hydro": {"Production": 13426.08, "Imports": 0},
        "Nuclear": {"Production": 12111.00, "Imports": 0},
        "Solar, Wind, Others": {"Production": 12439.68, "Imports": 0},
        "Lignite": {"Production": 10175.43, "Imports": 2.64},
        "Oil Products": {"Production": 0, "Imports": 43047.24},
        "Electricity": {"Production": 0, "Imports": 546.15},
    },
    "2018-19": {
        "Coal": {"Production": 310731.41, "Imports": 123696.31},
        "Crude Oil": {"Production": 34955.64, "Imports": 231480.04},
        "Natural Gas": {"Production": 30238.82, "Imports": 26437.13},
        "Hydro": {"Production": 11624.07, "Imports": 0},
        "Nuclear": {"Production": 9854.19, "Imports": 0},
        "Solar, Wind, Others": {"Production": 11217.24, "Imports": 0},
        "Lignite": {"Production": 10484.26, "Imports": 76.96},
        "Oil Products": {"Production": 0, "Imports": 33119.79},
        "Electricity": {"Production": 0, "Imports": 378.04},
    },
    "2017-18": {
        "Coal": {"Production": 289970.60, "Imports": 110333.76},
        "Crude Oil": {"Production": 36469.31, "Imports": 225281.81},
        "Natural Gas": {"Production": 30032.71, "Imports": 25239.93},
        "Hydro": {"Production": 10856.23, "Imports": 0},
        "Nuclear": {"Production": 9993.23, "Imports": 0},
        "Solar, Wind, Others": {"Production": 8958.42, "Imports": 0},
        "Lignite": {"Production": 10437.38, "Imports": 32.41},
        "Oil Products": {"Production": 0, "Imports": 33920.34},
        "Electricity": {"Production": 0, "Imports": 436.20},
    },
    "2016-17": {
        "Coal": {"Production": 290295.92, "Imports": 101177.63},
        "Crude Oil": {"Production": 36800.94, "Imports": 218637.84},
        "Natural Gas": {"Production": 29340.42, "Imports": 22857.53},
        "Hydro": {"Production": 10536.82, "Imports": 0},
        "Nuclear": {"Production": 9881.11, "Imports": 0},
        "Solar, Wind, Others": {"Production": 7208.97, "Imports": 0},
        "Lignite": {"Production": 9952.88, "Imports": 3.02},
        "Oil Products": {"Production": 0, "Imports": 34412.35},
        "Electricity": {"Production": 0, "Imports": 483.09},
    },
    "2015-16": {
        "Coal": {"Production": 285600.07, "Imports": 107058.46},
        "Crude Oil": {"Production": 37754.39, "Imports": 207312.74},
        "Natural Gas": {"Production": 29664.69, "Imports": 19674.17},
        "Hydro": {"Production": 10447.86, "Imports": 0},
        "Nuclear": {"Production": 9750.22, "Imports": 0},
        "Solar, Wind, Others": {"Production": 5833.12, "Imports": 0},
        "Lignite": {"Production": 10543.92, "Imports": 1.98},
        "Oil Products": {"Production": 0, "Imports": 28362.25},
        "Electricity": {"Production": 0, "Imports": 451.00},
    },
    "2014-15": {
        "Coal": {"Production": 274301.05, "Imports": 110186.74},
        "Crude Oil": {"Production": 38285.05, "Imports": 193601.99},
        "Natural Gas": {"Production": 30960.05, "Imports": 17115.36},
        "Hydro": {"Production": 11127.40, "Imports": 0},
        "Nuclear": {"Production": 9408.28, "Imports": 0},
        "Solar, Wind, Others": {"Production": 6554.89, "Imports": 0},
        "Lignite": {"Production": 10527.32, "Imports": 4.37},
        "Oil Products": {"Production": 0, "Imports": 20887.26},
        "Electricity": {"Production": 0, "Imports": 430.67},
    },
    "2013-14": {
        "Coal": {"Production": 256930.84, "Imports": 83249.70},
        "Crude Oil": {"Production": 38619.70, "Imports": 193401.01},
        "Natural Gas": {"Production": 32569.29, "Imports": 16374.20},
        "Hydro": {"Production": 11607.99, "Imports": 0},
        "Nuclear": {"Production": 8919.97, "Imports": 0},
        "Solar, Wind, Others": {"Production": 5798.32, "Imports": 0},
        "Lignite": {"Production": 10654.50, "Imports": 5.44},
        "Oil Products": {"Production": 0, "Imports": 16637.49},
        "Electricity": {"Production": 0, "Imports": 481.42},
    },
    "2012-13": {
        "Coal": {"Production": 253772.52, "Imports": 74274.78},
        "Crude Oil": {"Production": 38692.83, "Imports": 188860.32},
        "Natural Gas": {"Production": 37419.81, "Imports": 16202.74},
        "Hydro": {"Production": 9790.11, "Imports": 0},
        "Nuclear": {"Production": 8565.11, "Imports": 0},
        "Solar, Wind, Others": {"Production": 5091.14, "Imports": 0},
        "Lignite": {"Production": 10797.75, "Imports": 0.35},
        "Oil Products": {"Production": 0, "Imports": 16425.56},
        "Electricity": {"Production": 0, "Imports": 412.33},
    },
}

# "Final consumption" is the row total of the four sector roles.
# Crude Oil, Hydro, Nuclear and Solar/Wind/Others have no direct final use.
_CONSUMPTION = {
    "2023-24": {
        "Coal": {"Industry": 200947.38, "Transport": 0, "Others": 0, "Non-energy use": 0, "Final consumption": 200947.38},
        "Crude Oil": {"Industry": 0, "Transport": 0, "Others": 0, "Non-energy use": 0, "Final consumption": 0},
        "Natural Gas": {"Industry": 1348.41, "Transport": 14258.81, "Others": 1057.22, "Non-energy use": 23022.90, "Final consumption": 39687.34},
        "Hydro": {"Industry": 0, "Transport": 0, "Others": 0, "Non-energy use": 0, "Final consumption": 0},
        "Nuclear": {"Industry": 0, "Transport": 0, "Others": 0, "Non-energy use": 0, "Final consumption": 0},
        "Solar, Wind, Others": {"Industry": 0, "Transport": 0, "Others": 0, "Non-energy use": 0, "Final consumption": 0},
        "Lignite": {"Industry": 1584.87, "Transport": 0, "Others": 0, "Non-energy use": 0, "Final consumption": 1584.87},
        "Oil Products": {"Industry": 34456.93, "Transport": 147680.08, "Others": 46723.92, "Non-energy use": 23425.37, "Final consumption": 252286.30},
        "Electricity": {"Industry": 55470, "Transport": 2838, "Others": 74390, "Non-energy use": 0, "Final consumption": 132698},
    },
}

SUPPLY_DATA: Mapping[str, Mapping[str, Mapping[str, float]]] = _freeze(_SUPPLY)
CONSUMPTION_DATA: Mapping[str, Mapping[str, Mapping[str, float]]] = _freeze(_CONSUMPTION)
