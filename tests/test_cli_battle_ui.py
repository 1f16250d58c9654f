from __future__ import annotations

import json
from pathlib import Path
from typing import Iterator, List

from pokebattle.presentation.cli import app
from pokebattle.services import BattleController, BattleService, RosterLoader
from tests.helpers.stubs import FakeCatalog, ScriptedRNG


def _install_controller(monkeypatch, values: List[int], failing_ids=()) -> BattleController:
    rng = ScriptedRNG(values)
    controller = BattleController(BattleService(), RosterLoader(FakeCatalog(failing_ids=failing_ids), rng), rng)
    monkeypatch.setattr(app, "_build_controller", lambda config, seed: controller)
    return controller


def _feed_inputs(monkeypatch, answers: List[str]) -> None:
    iterator: Iterator[str] = iter(answers)
    monkeypatch.setattr("builtins.input", lambda prompt="": next(iterator))


def _argv(tmp_path: Path) -> List[str]:
    return ["--config", str(tmp_path / "config.json")]


def test_attack_renders_round_message(monkeypatch, capsys, tmp_path: Path) -> None:
    _install_controller(monkeypatch, [1, 4, 3, 4])
    _feed_inputs(monkeypatch, ["1", "2"])

    app.main(_argv(tmp_path))

    output = capsys.readouterr().out
    assert "Creature-1 faces Creature-4!" in output
    assert "You rolled 3 = 3. Opponent rolled 4 = 4." in output
    assert "HP 96/100" in output
    assert "HP 97/100" in output
    assert output.rstrip().endswith("Goodbye!")


def test_invalid_menu_choice_reprompts(monkeypatch, capsys, tmp_path: Path) -> None:
    _install_controller(monkeypatch, [1, 4])
    _feed_inputs(monkeypatch, ["x", "9", "2"])

    app.main(_argv(tmp_path))

    output = capsys.readouterr().out
    assert "Invalid selection." in output
    assert "Please enter a value between 1 and 2." in output


def test_lookup_failure_offers_retry(monkeypatch, capsys, tmp_path: Path) -> None:
    _install_controller(monkeypatch, [1, 4, 2, 3], failing_ids=(4,))
    _feed_inputs(monkeypatch, ["y", "2"])

    app.main(_argv(tmp_path))

    output = capsys.readouterr().out
    assert "Could not load creature #4." in output
    assert "Creature-2 faces Creature-3!" in output


def test_lookup_failure_can_quit(monkeypatch, capsys, tmp_path: Path) -> None:
    _install_controller(monkeypatch, [1, 4], failing_ids=(4,))
    _feed_inputs(monkeypatch, ["n"])

    app.main(_argv(tmp_path))

    output = capsys.readouterr().out
    assert "Could not load creature #4." in output
    assert "Goodbye!" in output
    assert "Actions" not in output


def test_game_over_prompts_continuation(monkeypatch, capsys, tmp_path: Path) -> None:
    controller = _install_controller(monkeypatch, [1, 4, 1, 5, 9])
    answers = iter(["1", "1", "2"])

    def fake_input(prompt: str = "") -> str:
        if controller.state.round_number == 0 and controller.state.opponent.catalog_id == 4:
            controller.state.player_hp = 1
        return next(answers)

    monkeypatch.setattr("builtins.input", fake_input)

    app.main(_argv(tmp_path))

    output = capsys.readouterr().out
    assert "Game Over!" in output
    assert "Continue with a new opponent" in output
    assert "Get new creatures" in output
    assert "A new challenger appears: Creature-9!" in output
    assert controller.state.player.catalog_id == 1
    assert controller.state.player_hp == 100


def test_game_over_quit_option(monkeypatch, capsys, tmp_path: Path) -> None:
    controller = _install_controller(monkeypatch, [1, 4, 5, 1])
    answers = iter(["1", "3"])

    def fake_input(prompt: str = "") -> str:
        if controller.state.round_number == 0:
            controller.state.opponent_hp = 2
        return next(answers)

    monkeypatch.setattr("builtins.input", fake_input)

    app.main(_argv(tmp_path))

    output = capsys.readouterr().out
    assert "You Win!" in output
    assert output.rstrip().endswith("Goodbye!")


def test_missing_catalog_file_exits_cleanly(capsys, tmp_path: Path) -> None:
    app.main(["--offline", "--catalog-file", str(tmp_path / "nope.json"), "--config", str(tmp_path / "c.json")])

    output = capsys.readouterr().out
    assert "Could not open the creature catalog" in output
    assert "nope.json" in output
    assert output.rstrip().endswith("Goodbye!")


def test_malformed_catalog_file_exits_cleanly(capsys, tmp_path: Path) -> None:
    catalog_path = tmp_path / "creatures.json"
    catalog_path.write_text("[1, 2]", encoding="utf-8")

    app.main(["--offline", "--catalog-file", str(catalog_path), *_argv(tmp_path)])

    output = capsys.readouterr().out
    assert "Could not open the creature catalog" in output
    assert output.rstrip().endswith("Goodbye!")


def test_catalog_file_implies_offline(monkeypatch, capsys, tmp_path: Path) -> None:
    catalog_path = tmp_path / "creatures.json"
    catalog_path.write_text(json.dumps({"1": {"name": "onlyone", "image": "x.png"}}), encoding="utf-8")
    _feed_inputs(monkeypatch, ["2"])

    app.main(["--seed", "3", "--catalog-file", str(catalog_path), *_argv(tmp_path)])

    output = capsys.readouterr().out
    assert "Onlyone faces Onlyone!" in output
    assert output.rstrip().endswith("Goodbye!")
