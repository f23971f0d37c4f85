from pathlib import Path

from lane_analytics.data import locations
from lane_analytics.data.locations import LocationDirectory, format_route


def test_builtin_table_resolves_known_zip3() -> None:
    directory = LocationDirectory()

    assert directory.resolve("750") == "DFW"
    assert directory.resolve("786") == "AUS"
    assert directory.resolve("150") == "PIT"
    assert len(directory) > 700


def test_trailing_xx_suffix_is_ignored() -> None:
    assert LocationDirectory().resolve("750xx") == "DFW"
    assert LocationDirectory().resolve("750XX") == "DFW"


def test_unknown_code_falls_back_to_code() -> None:
    directory = LocationDirectory({"750": "DFW"})

    assert directory.resolve("00Axx") == "00A"


def test_format_route_uses_short_names() -> None:
    directory = LocationDirectory({"750": "DFW", "786": "AUS"})

    assert format_route("750", "786", directory) == "DFW→AUS"


def test_from_settings_merges_override_file(tmp_path: Path, monkeypatch) -> None:
    path = tmp_path / "names.csv"
    path.write_text("code,name\n750,DAL\n00A,TST\n,missing\n", encoding="utf-8")
    monkeypatch.setattr(locations.settings, "location_names_file", path)

    directory = LocationDirectory.from_settings()

    assert directory.resolve("750") == "DAL"
    assert directory.resolve("00A") == "TST"
    assert directory.resolve("786") == "AUS"


def test_from_settings_ignores_missing_override(tmp_path: Path, monkeypatch) -> None:
    monkeypatch.setattr(locations.settings, "location_names_file", tmp_path / "absent.csv")

    assert LocationDirectory.from_settings().resolve("750") == "DFW"
