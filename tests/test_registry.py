# tests/test_registry.py

import pytest

import calsys
from calsys.bootstrap import build_registry
from calsys.core.engine import CalendarRegistry
from calsys.engines.specs import ALL_SPECS, SystemSpec
from calsys.engines.gregorian import GregorianSystem
from calsys.engines.lunar import LunarSystem

@pytest.mark.parametrize("name", ["buddhist", "unknown", "", "LUNAR", None, 42])
def test_unknown_type_falls_back_to_gregorian(name):
    assert calsys.get_calendar_system(name).type == "gregorian"

def test_known_types():
    assert calsys.get_calendar_system("gregorian").type == "gregorian"
    assert calsys.get_calendar_system("lunar").type == "lunar"
    assert calsys.get_calendar_system("lunar").label_key == "calendar.lunar"

def test_systems_are_singletons():
    assert calsys.get_calendar_system("lunar") is calsys.get_calendar_system("lunar")

def test_supported_types_are_ordered():
    assert calsys.SUPPORTED_CALENDAR_TYPES == ("gregorian", "lunar")
    assert calsys.supported_calendar_types() == ("gregorian", "lunar")
    assert calsys.is_supported("lunar")
    assert not calsys.is_supported("buddhist")
    assert calsys.list_systems() == ["gregorian", "lunar"]

def test_fallback_is_logged(caplog):
    with caplog.at_level("DEBUG", logger="calsys.core.engine"):
        calsys.get_calendar_system("buddhist")
    assert "buddhist" in caplog.text

def test_register_refuses_to_overwrite():
    reg = build_registry()
    with pytest.raises(KeyError):
        reg.register("lunar", GregorianSystem())
    custom = LunarSystem(type="lunar-modern", label_key="calendar.lunar_modern", year_range=(2000, 2050))
    reg.register("lunar-modern", custom)
    assert reg.get("lunar-modern") is custom
    assert reg.types() == ("gregorian", "lunar", "lunar-modern")
    reg.register("lunar", custom, overwrite=True)
    assert reg.get("lunar") is custom

def test_registry_requires_gregorian_fallback():
    with pytest.raises(KeyError):
        CalendarRegistry({"lunar": LunarSystem()})

def test_shortcuts():
    d = calsys.CalendarDate(day=15, month=1, year=2025)
    g = calsys.to_gregorian("lunar", d)
    assert calsys.from_gregorian("lunar", g) == d
    assert calsys.format_date("lunar", d) == "正月十五"
    assert calsys.format_date("nonsense", g) == "2025-02-12"
    assert len(calsys.months_in_year("lunar", 2025)) == 13
    assert calsys.days_in_month("gregorian", 2024, 2) == 29
    assert calsys.year_range("lunar") == (1900, 2100)

# --- Specs / factory ---

def test_specs():
    assert list(ALL_SPECS) == ["gregorian", "lunar"]
    assert SystemSpec.like("lunar").year_range == (1900, 2100)
    with pytest.raises(KeyError):
        SystemSpec.like("buddhist")

def test_tweaked_spec_builds_a_narrower_system():
    spec = SystemSpec.like("lunar").tweak(year_range=(2000, 2050))
    system = calsys.make_system(spec)
    assert system.get_year_range() == (2000, 2050)
    assert system.type == "lunar"
    with pytest.raises(calsys.UnsupportedYearError):
        system.to_gregorian(calsys.CalendarDate(day=1, month=1, year=1999))
    with pytest.raises(calsys.UnsupportedYearError):
        system.from_gregorian(calsys.CalendarDate(day=1, month=6, year=2051))

def test_lunar_range_must_fit_the_table():
    with pytest.raises(ValueError):
        calsys.make_system(SystemSpec.like("lunar").tweak(year_range=(1800, 2100)))

def test_unknown_kind():
    with pytest.raises(TypeError):
        calsys.make_system(SystemSpec.like("lunar").tweak(kind="hebrew"))

def test_tweak_leaves_the_base_spec_alone():
    base = SystemSpec.like("lunar")
    narrow = base.tweak(year_range=(2000, 2050))
    assert base.year_range == (1900, 2100)
    assert narrow != base
    # specs are fully immutable values, usable as set members
    assert len({base, narrow, base.tweak()}) == 2
