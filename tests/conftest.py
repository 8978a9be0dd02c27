"""Shared pytest fixtures for PyChemLib tests."""
import pytest
from pathlib import Path

from pychemlib.data import TABLES_DIR, DEFAULT_CONFIG_PATH
from pychemlib.parsing.repository import ChemicalRepository, set_default_repository

ELEMENT_HEADER = ("AtomicNumber,Element,Symbol,AtomicMass,Period,Group,Phase,Type,IonicRadius,AtomicRadius,"
                  "Electronegativity,FirstIonization,Density,MeltingPoint,BoilingPoint,NumberOfIsotopes,"
                  "SpecificHeat,ElectronConfiguration,NumberOfValence")

SMALL_ELEMENTS = [
    "1,Hydrogen,H,1.008,1,1,gas,Nonmetal,,0.79,2.2,13.598,0.0000899,14.01,20.28,3,14.304,1s1,1",
    "2,Helium,He,4.0026,1,18,gas,Noble Gas,,0.49,,24.587,0.000179,0.95,4.22,5,5.193,1s2,2",
    "10,Neon,Ne,20.18,2,18,gas,Noble Gas,,0.51,,21.565,0.0009,24.703,27.07,8,1.03,[He] 2s2 2p6,8",
    "11,Sodium,Na,22.99,3,1,solid,Alkali Metal,1.02,2.2,0.93,5.139,0.971,371.15,1156,7,1.228,[Ne] 3s1,1",
    "13,Aluminum,Al,26.982,3,13,solid,Metal,0.535,1.8,1.61,5.986,2.7,933.4,2792,8,0.897,[Ne] 3s2 3p1,3",
]

SMALL_IONS = [
    "Na+,Sodium,1",
    "Cl-,Chloride,-1",
    "SO4--,Sulfate,-2",
    "NH4+,Ammonium,1",
]

SMALL_COMPOUNDS = [
    "962,Water,18.015,H2O,1,0",
    "280,Carbon Dioxide,44.009,CO2,34.1,0",
    "24823,Ozone,47.998,O3,,0",
]


def write_table(path: Path, header: str, rows: list) -> Path:
    """Write a comma-separated table with a header line."""
    path.write_text("\n".join([header] + rows) + "\n", encoding="utf-8")
    return path


@pytest.fixture(autouse=True)
def reset_default_repository():
    """Make every test start and end with the packaged default repository."""
    set_default_repository(None)
    yield
    set_default_repository(None)


@pytest.fixture
def packaged_tables_dir():
    """Path to the packaged reference tables."""
    return TABLES_DIR


@pytest.fixture
def packaged_config_path():
    """Path to the packaged table configuration."""
    return DEFAULT_CONFIG_PATH


@pytest.fixture
def tables_dir(tmp_path):
    """Directory with small element, ion and compound tables."""
    directory = tmp_path / "tables"
    directory.mkdir()
    write_table(directory / "elements.csv", ELEMENT_HEADER, SMALL_ELEMENTS)
    write_table(directory / "ions.csv", "Symbol,Name,Charge", SMALL_IONS)
    write_table(directory / "compounds.csv",
                "CID,Name,MolecularWeight,MolecularFormula,PolarArea,RotatableBonds", SMALL_COMPOUNDS)
    return directory


@pytest.fixture
def table_config_path(tables_dir):
    """YAML configuration pointing at the small tables with a relative resource root."""
    config_path = tables_dir.parent / "tables.yaml"
    config_path.write_text(
        "resource_root: tables\n"
        "lookup_strategy: scan\n"
        "header: true\n"
        "tables:\n"
        "  elements: elements.csv\n"
        "  ions: ions.csv\n"
        "  compounds: compounds.csv\n",
        encoding="utf-8",
    )
    return config_path


@pytest.fixture
def packaged_repository():
    """Indexed repository over the packaged tables."""
    return ChemicalRepository()


@pytest.fixture
def scan_repository():
    """Scanning repository over the packaged tables."""
    return ChemicalRepository(strategy="scan")


@pytest.fixture(params=["index", "scan"])
def small_repository(request, tables_dir):
    """Repository over the small tables, once per lookup strategy."""
    return ChemicalRepository(resource_root=tables_dir, strategy=request.param)
