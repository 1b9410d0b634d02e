"""
Generate the static JSON files for the India Energy Sankey diagram.

For every fiscal year and unit in the configuration this script:
1. Flattens the embedded supply figures into rows
2. Resolves consumption data (embedded -> override file -> estimate)
3. Rescales rows when the unit is not KToE (1 KToE = 0.04187 PetaJoules)
4. Builds the Sankey balance
5. Writes public/data/mospi/energy-sankey-{year}-{unit}.json

Exit codes: 0 when every file was written, 2 when some failed, 1 when none
were written.

Run:  python generate_energy_data.py
"""

import json
import sys
import warnings
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional

import numpy as np
import pandas as pd

import config
from consumption_resolver import load_consumption_overrides, resolve_consumption
from energy_data import CONSUMPTION_DATA, SUPPLY_DATA
from energy_rows import EnergyRow, consumption_rows_for, supply_rows_for
from energy_transform import EnergyBalance, transform_energy_balance
from energy_units import KTOE_TO_PJ, STORAGE_UNIT, EnergyUnit, conversion_factor, convert_rows

SUMMARY_COLUMNS = [
    "year", "unit", "status", "flows", "total_supply",
    "total_consumption", "consumption_share", "source", "error",
]


@dataclass
class GenerationReport:
    records: List[Dict[str, Any]] = field(default_factory=list)
    sources: Dict[str, str] = field(default_factory=dict)

    def add(self, year: str, unit: str, status: str, source: str,
            balance: Optional[EnergyBalance] = None, error: str = "") -> None:
        self.records.append({
            "year": year,
            "unit": unit,
            "status": status,
            "flows": len(balance.links) if balance else 0,
            "total_supply": balance.total_supply if balance else np.nan,
            "total_consumption": balance.total_consumption if balance else np.nan,
            "source": source,
            "error": error,
        })

    @property
    def succeeded(self) -> int:
        return sum(1 for record in self.records if record["status"] == "ok")

    @property
    def failures(self) -> List[Dict[str, Any]]:
        return [record for record in self.records if record["status"] != "ok"]

    @property
    def exit_code(self) -> int:
        if self.failures and self.succeeded == 0:
            return 1
        if self.failures:
            return 2
        return 0

    def to_frame(self) -> pd.DataFrame:
        df = pd.DataFrame(self.records, columns=[c for c in SUMMARY_COLUMNS if c != "consumption_share"])
        supply = df["total_supply"].astype(float)
        consumption = df["total_consumption"].astype(float)
        with np.errstate(divide="ignore", invalid="ignore"):
            df["consumption_share"] = np.where(supply > 0, consumption / supply, np.nan)
        return df[SUMMARY_COLUMNS]


def artifact_path(output_dir, year: str, unit) -> Path:
    """Path of the JSON file for one fiscal year and unit."""
    unit_slug = EnergyUnit(unit).value.lower()
    return Path(output_dir) / f"energy-sankey-{year}-{unit_slug}.json"


def write_energy_balance(balance: EnergyBalance, output_dir) -> Path:
    """
    Write one energy balance to its JSON file.

    Args:
        balance: Result of transform_energy_balance()
        output_dir: Directory for the generated files (created if missing)

    Returns:
        Path of the written file
    """
    output_path = artifact_path(output_dir, balance.year, balance.unit)
    output_path.parent.mkdir(parents=True, exist_ok=True)
    with open(output_path, "w", encoding="utf-8") as f:
        json.dump(balance.to_dict(), f, indent=2, ensure_ascii=False)
    return output_path


def check_conservation(balance: EnergyBalance, verified_year: str, strict: bool = False) -> bool:
    """
    Check that final consumption does not exceed primary supply.

    Estimated years may break this because the estimation ratios are fixed;
    those are only flagged. The verified year must satisfy it.

    Args:
        balance: Energy balance to check
        verified_year: Fiscal year whose consumption figures are verified
        strict: Raise instead of warning when the verified year fails

    Returns:
        True if totalSupply >= totalConsumption

    Raises:
        ValueError: If strict and the verified year fails the check
    """
    if balance.total_supply >= balance.total_consumption:
        return True

    message = (
        f"{balance.year} {balance.unit.value}: consumption "
        f"{balance.total_consumption:,.2f} exceeds supply {balance.total_supply:,.2f}"
    )
    if strict and balance.year == verified_year:
        raise ValueError(message)
    warnings.warn(message)
    return False


def build_energy_balance(year: str, unit,
                         supply_rows: List[EnergyRow],
                         consumption_rows: List[EnergyRow]) -> EnergyBalance:
    """Transform KToE rows into a balance in ``unit``, rescaling first if needed."""
    unit = EnergyUnit(unit)
    if unit is not STORAGE_UNIT:
        factor = conversion_factor(unit)
        supply_rows = convert_rows(supply_rows, factor)
        consumption_rows = convert_rows(consumption_rows, factor)
    return transform_energy_balance(supply_rows, consumption_rows, unit, year)


def run_generation(config_dict: Optional[Dict[str, Any]] = None,
                   supply_table=SUPPLY_DATA,
                   consumption_table=CONSUMPTION_DATA) -> GenerationReport:
    """
    Generate every (year, unit) file named in the configuration.

    Args:
        config_dict: Optional configuration dictionary (uses defaults if None)
        supply_table: Supply figures by year
        consumption_table: Verified consumption figures by year

    Returns:
        GenerationReport with one record per (year, unit)
    """
    if config_dict is None:
        config_dict = config.get_config()

    config.validate_config(config_dict)

    paths = config_dict["paths"]
    output_dir = Path(paths["output_dir"])
    output_dir.mkdir(parents=True, exist_ok=True)

    print("Step 1: Loading consumption overrides...")
    overrides = load_consumption_overrides(paths.get("overrides"))
    if overrides:
        print(f"  Override years: {', '.join(sorted(overrides))}")
    else:
        print("  No consumption overrides found; missing years will be estimated.")

    print("\nStep 2: Building energy balances...")
    report = GenerationReport()

    for year in config_dict["energy_years"]:
        supply_rows = supply_rows_for(year, supply_table.get(year))
        resolution = resolve_consumption(year, overrides, supply_table, consumption_table)
        report.sources[year] = resolution.source

        if not supply_rows:
            print(f"  SKIP  {year} - no embedded supply data")
            for unit in config_dict["units"]:
                report.add(year, unit, "failed", resolution.source, error="No supply data")
            continue

        consumption_rows = consumption_rows_for(year, resolution.data)

        for unit in config_dict["units"]:
            try:
                balance = build_energy_balance(year, unit, supply_rows, consumption_rows)
                check_conservation(balance, config_dict["verified_year"])
                output_path = write_energy_balance(balance, output_dir)
            except Exception as e:
                print(f"  FAIL  {year} {unit:<11} -> {e}")
                report.add(year, unit, "failed", resolution.source, error=str(e))
                continue

            print(
                f"  OK    {year} {unit:<11} -> {output_path.name} "
                f"({len(balance.links)} flows, supply: {round(balance.total_supply):,}, "
                f"consumption: {round(balance.total_consumption):,}) "
                f"[consumption: {resolution.source}]"
            )
            report.add(year, unit, "ok", resolution.source, balance=balance)

    summary_csv = paths.get("summary_csv")
    if summary_csv:
        report.to_frame().to_csv(summary_csv, index=False)
        print(f"\nExported run summary to {summary_csv}")

    return report


def print_summary(report: GenerationReport, config_dict: Dict[str, Any]) -> None:
    years = config_dict["energy_years"]
    units = config_dict["units"]

    print("\n" + "=" * 60)
    print("Summary")
    print("=" * 60)
    print(f"  Total expected:  {len(years) * len(units)} files ({len(years)} years x {len(units)} units)")
    print(f"  Succeeded:       {report.succeeded}")
    print(f"  Failed:          {len(report.failures)}")

    print("\n  Consumption data sources:")
    for year in years:
        print(f"    {year}: {report.sources.get(year, 'n/a')}")

    if report.failures:
        print("\n  Failed combinations:")
        for failure in report.failures:
            print(f"    - {failure['year']} {failure['unit']}: {failure['error']}")

    print(f"\n  Output directory: {config_dict['paths']['output_dir']}")


def default_overrides_path() -> Path:
    """Overrides file location, resolved next to this script rather than the working directory."""
    return Path(__file__).resolve().parent / config.DEFAULT_DATA_PATHS["overrides"]


def main(argv: Optional[List[str]] = None) -> int:
    import argparse

    parser = argparse.ArgumentParser(description="Generate static India energy Sankey JSON files")
    parser.add_argument("--output-dir", default=config.DEFAULT_DATA_PATHS["output_dir"],
                        help="Output directory (default: public/data/mospi)")
    parser.add_argument("--overrides", default=str(default_overrides_path()),
                        help="Optional consumption overrides JSON file")
    parser.add_argument("--years", nargs="+", default=None,
                        help="Fiscal years to generate (default: all 12)")
    parser.add_argument("--units", nargs="+", choices=config.KNOWN_UNITS, default=None,
                        help="Units to generate (default: KToE PetaJoules)")
    parser.add_argument("--summary-csv", default="",
                        help="Optional path for a CSV summary of the run")

    args = parser.parse_args(argv)

    custom_params = {}
    if args.years:
        custom_params["energy_years"] = args.years
    if args.units:
        custom_params["units"] = args.units

    config_dict = config.get_config(
        custom_paths={
            "output_dir": args.output_dir,
            "overrides": args.overrides,
            "summary_csv": args.summary_csv,
        },
        custom_params=custom_params,
    )

    print("\n=== India Energy Sankey Data Generator ===\n")
    print("  Supply data:       Embedded for all years (verified from MoSPI API)")
    print("  Consumption data:  Embedded for 2023-24, overrides/estimated for others")
    print(f"  Conversion:        1 KToE = {KTOE_TO_PJ} PetaJoules\n")

    report = run_generation(config_dict)
    print_summary(report, config_dict)

    if report.exit_code == 1:
        print("\n✗ Error: No files were generated. Check the failures above.", file=sys.stderr)
    elif report.exit_code == 2:
        warnings.warn("Some files failed to generate. Check the failures above.")
    else:
        print(f"\n✓ All {report.succeeded} files generated successfully!")

    return report.exit_code


if __name__ == "__main__":
    sys.exit(main())
