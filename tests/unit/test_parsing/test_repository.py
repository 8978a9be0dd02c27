"""Unit tests for ChemicalRepository."""

import math
import pytest
from pychemlib.core.compounds import Compound
from pychemlib.core.elements import Element
from pychemlib.core.exceptions import ChemicalNotFoundError, ElectronConfigError
from pychemlib.core.ions import Ion
from pychemlib.parsing.repository import ChemicalRepository, get_default_repository, set_default_repository


class TestRepositoryLookups:
    """Lookups that must behave the same under both strategies."""

    def test_get_element(self, small_repository):
        """Test element lookup by atomic number."""
        al = small_repository.get_element(13)
        assert isinstance(al, Element)
        assert al.symbol == "Al"
        assert al.name == "Aluminum"
        assert al.atomic_mass == pytest.approx(26.982)
        assert al.repository is small_repository

    def test_get_element_by_symbol(self, small_repository):
        """Test element lookup by symbol."""
        assert small_repository.get_element_by_symbol("Na").atomic_number == 11

    def test_get_element_not_found(self, small_repository):
        """Test that unknown atomic numbers raise ChemicalNotFoundError."""
        with pytest.raises(ChemicalNotFoundError) as exc_info:
            small_repository.get_element(26)
        assert exc_info.value.table == "elements"
        with pytest.raises(ChemicalNotFoundError):
            small_repository.get_element(0)

    @pytest.mark.parametrize("atomic_number", [0, 119, -5])
    def test_get_element_out_of_range(self, packaged_repository, scan_repository, atomic_number):
        """Test atomic numbers just outside the packaged table under both strategies."""
        for repository in (packaged_repository, scan_repository):
            with pytest.raises(ChemicalNotFoundError) as exc_info:
                repository.get_element(atomic_number)
            assert exc_info.value.key == str(atomic_number)

    def test_get_element_last_row(self, packaged_repository, scan_repository):
        """Test that the last row of the packaged table is found."""
        assert packaged_repository.get_element(118).symbol == "Og"
        assert scan_repository.get_element(118).symbol == "Og"

    def test_get_element_unknown_symbol(self, small_repository):
        """Test that unknown and miscased symbols raise ChemicalNotFoundError."""
        with pytest.raises(ChemicalNotFoundError):
            small_repository.get_element_by_symbol("Xx")
        with pytest.raises(ChemicalNotFoundError):
            small_repository.get_element_by_symbol("al")

    def test_get_element_non_integer(self, small_repository):
        """Test that non-integer atomic numbers are not found."""
        with pytest.raises(ChemicalNotFoundError):
            small_repository.get_element(1.5)
        with pytest.raises(ChemicalNotFoundError):
            small_repository.get_element("13")
        with pytest.raises(ChemicalNotFoundError):
            small_repository.get_element(True)

    def test_get_ion(self, small_repository):
        """Test ion lookup by symbol."""
        ion = small_repository.get_ion("SO4--")
        assert isinstance(ion, Ion)
        assert ion.name == "Sulfate"
        assert ion.charge == -2

    def test_get_ion_not_found(self, small_repository):
        """Test that unknown and miscased ion symbols raise ChemicalNotFoundError."""
        with pytest.raises(ChemicalNotFoundError) as exc_info:
            small_repository.get_ion("Cl")
        assert exc_info.value.table == "ions"
        assert exc_info.value.key == "Cl"
        with pytest.raises(ChemicalNotFoundError):
            small_repository.get_ion("nh4+")

    def test_get_ion_returns_fresh_objects(self, small_repository):
        """Test that mutating a returned ion does not affect later lookups."""
        ion = small_repository.get_ion("Na+")
        ion.charge_plus()
        again = small_repository.get_ion("Na+")
        assert again.symbol == "Na+"
        assert again.charge == 1

    def test_get_compound(self, small_repository):
        """Test compound lookup by formula."""
        water = small_repository.get_compound("H2O")
        assert isinstance(water, Compound)
        assert water.cid == 962
        assert water.name == "Water"

    def test_get_compound_unknown_value(self, small_repository):
        """Test that blank fields load as sentinels."""
        ozone = small_repository.get_compound("O3")
        assert math.isnan(ozone.polar_area)
        assert ozone.rotatable_bonds == 0

    def test_get_compound_not_found(self, small_repository):
        """Test that unknown formulas raise ChemicalNotFoundError."""
        with pytest.raises(ChemicalNotFoundError) as exc_info:
            small_repository.get_compound("XYZ")
        assert exc_info.value.table == "compounds"

    def test_expand_electron_config(self, small_repository):
        """Test electron configuration expansion through the repository."""
        assert small_repository.expand_electron_config("[Ne] 3s2 3p1") == "1s2 2s2 2p6 3s2 3p1"
        assert small_repository.get_element(11).get_full_electron_config() == "1s2 2s2 2p6 3s1"

    def test_expand_missing_core(self, small_repository):
        """Test expansion when the core element is not in the table."""
        assert small_repository.expand_electron_config("[Ar] 4s1") is None
        with pytest.raises(ElectronConfigError):
            small_repository.expand_electron_config("[Ar] 4s1", strict=True)


class TestRepositoryConfiguration:
    """Construction, configuration and caching."""

    def test_default_construction(self, packaged_tables_dir):
        """Test that the packaged tables are used by default."""
        repository = ChemicalRepository()
        assert repository.resource_root == packaged_tables_dir
        assert repository.strategy == "index"
        assert repository.header is True

    def test_invalid_strategy(self):
        """Test that unknown strategies are rejected."""
        with pytest.raises(ValueError, match="Unknown lookup strategy"):
            ChemicalRepository(strategy="cached")

    def test_unknown_table_name(self):
        """Test that unknown table names are rejected."""
        with pytest.raises(ValueError, match="Unknown table names"):
            ChemicalRepository(table_files={"isotopes": "isotopes.csv"})

    def test_table_path(self, tables_dir):
        """Test table path resolution."""
        repository = ChemicalRepository(resource_root=tables_dir, table_files={"ions": "other_ions.csv"})
        assert repository.table_path("elements") == tables_dir / "elements.csv"
        assert repository.table_path("ions") == tables_dir / "other_ions.csv"
        with pytest.raises(ValueError):
            repository.table_path("isotopes")

    def test_from_config(self, table_config_path, tables_dir):
        """Test creating a repository from YAML."""
        repository = ChemicalRepository.from_config(table_config_path)
        assert repository.resource_root == tables_dir.resolve()
        assert repository.strategy == "scan"
        assert repository.get_element(10).symbol == "Ne"

    def test_missing_table_file(self, tmp_path):
        """Test that a missing table surfaces as FileNotFoundError."""
        repository = ChemicalRepository(resource_root=tmp_path)
        with pytest.raises(FileNotFoundError):
            repository.get_element(1)

    def test_index_loaded_once(self, tables_dir):
        """Test that the index strategy reads a table only once."""
        repository = ChemicalRepository(resource_root=tables_dir, strategy="index")
        assert repository.get_ion("Na+").charge == 1
        (tables_dir / "ions.csv").write_text("Symbol,Name,Charge\nNa+,Sodium,2\n", encoding="utf-8")
        assert repository.get_ion("Na+").charge == 1
        repository.clear_cache()
        assert repository.get_ion("Na+").charge == 2

    def test_scan_reads_every_time(self, tables_dir):
        """Test that the scan strategy sees table changes immediately."""
        repository = ChemicalRepository(resource_root=tables_dir, strategy="scan")
        assert repository.get_ion("Na+").charge == 1
        (tables_dir / "ions.csv").write_text("Symbol,Name,Charge\nNa+,Sodium,2\n", encoding="utf-8")
        assert repository.get_ion("Na+").charge == 2

    @pytest.mark.parametrize("strategy", ["index", "scan"])
    def test_duplicate_keys_first_wins(self, tables_dir, strategy):
        """Test that the first row wins when keys repeat."""
        (tables_dir / "ions.csv").write_text("Symbol,Name,Charge\nNa+,Sodium,1\nNa+,Natrium,1\n",
                                             encoding="utf-8")
        repository = ChemicalRepository(resource_root=tables_dir, strategy=strategy)
        assert repository.get_ion("Na+").name == "Sodium"

    def test_headerless_tables(self, tmp_path):
        """Test tables without a header line."""
        (tmp_path / "ions.csv").write_text("Na+,Sodium,1\n", encoding="utf-8")
        repository = ChemicalRepository(resource_root=tmp_path, header=False)
        assert repository.get_ion("Na+").name == "Sodium"


class TestDefaultRepository:
    """The shared module-level repository."""

    def test_default_repository_is_shared(self):
        """Test that the default repository is created once."""
        assert get_default_repository() is get_default_repository()

    def test_set_default_repository(self, tables_dir):
        """Test replacing and resetting the default repository."""
        repository = ChemicalRepository(resource_root=tables_dir)
        set_default_repository(repository)
        assert get_default_repository() is repository
        set_default_repository(None)
        assert get_default_repository() is not repository
