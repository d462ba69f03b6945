import pytest

from hitchroma.schemes import DomainDatabase, database_aliases, database_colors, color_by_database

samples_raw_names = {
    "PFAM": "Pfam",
    "pfam": "Pfam",
    "GENE3D": "CATH-Gene3D",
    "CATHGENE3D": "CATH-Gene3D",
    "CATH-GENE3D": "CATH-Gene3D",
    "SSF": "SUPERFAMILY",
    "PROFILE": "PROSITE profiles",
    "PROSITE_PROFILES": "PROSITE profiles",
    "PROSITE PROFILES": "PROSITE profiles",
    "PROSITE": "PROSITE patterns",
    "PROSITE_PATTERNS": "PROSITE patterns",
    "TIGERFAMS": "TIGRFAMs",
    "tigrfams": "TIGRFAMs",
    "smart": "SMART",
    "ProDom": "PRODOM",
}


def test_known_databases():
    assert color_by_database("Pfam") == "rgb(211,47,47)"
    assert color_by_database("PROSITE profiles") == "rgb(0,150,136)"
    assert color_by_database("CATH-Gene3D") == "rgb(205,220,57)"


def test_raw_annotation_names():
    for raw, display in samples_raw_names.items():
        assert DomainDatabase.lookup(raw) is DomainDatabase(display), raw
        assert color_by_database(raw) == color_by_database(display)


def test_raw_names_are_not_grey():
    for raw in ("PFAM", "GENE3D", "SSF", "PROFILE", "PROSITE"):
        assert color_by_database(raw) != "rgb(128,128,128)"


@pytest.mark.parametrize("name", ["Unknown", "", "IPR", "InterPro", None])
def test_unknown_database_is_grey(name):
    assert color_by_database(name) == "rgb(128,128,128)"


def test_every_database_has_a_color():
    assert set(database_colors) == set(DomainDatabase)
    for database in DomainDatabase:
        assert color_by_database(database.value) != "rgb(128,128,128)"


def test_every_database_resolves_from_its_upper_case_name():
    for database in DomainDatabase:
        assert database_aliases[database.value.upper()] is database


def test_lookup():
    assert DomainDatabase.lookup("TIGRFAMs") is DomainDatabase.TIGRFAMS
    assert DomainDatabase.lookup("TIGR") is None
