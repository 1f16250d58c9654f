def test_import_pokebattle_package() -> None:
    import importlib

    module = importlib.import_module("pokebattle")
    assert module.__version__


def test_import_services_exports() -> None:
    from pokebattle.services import BattleController, BattleService, RosterLoader

    assert BattleController and BattleService and RosterLoader


def test_lookup_error_is_builtin_lookup_error() -> None:
    from pokebattle.data.errors import CombatantLookupError

    error = CombatantLookupError(42)
    assert isinstance(error, LookupError)
    assert error.combatant_id == 42
    assert "42" in str(error)
