"""Console-driven UI loops for PokeBattle."""
from __future__ import annotations

import argparse
import asyncio
import logging
from pathlib import Path
from typing import Any, Awaitable, Callable, Dict, List, Literal, Sequence

from pokebattle.core.rng import RNG
from pokebattle.data.catalogs import CombatantCatalog, HttpCatalog, JsonCatalog
from pokebattle.data.errors import CatalogError, CombatantLookupError
from pokebattle.presentation.cli.config import load_config, save_config
from pokebattle.presentation.cli.render import (
    debug_enabled,
    render_battle_view,
    render_bullet_lines,
    render_menu,
)
from pokebattle.services import (
    BattleController,
    BattleEvent,
    BattleResolvedEvent,
    BattleService,
    BattleStartedEvent,
    OpponentReplacedEvent,
    RosterLoader,
)

BattleAction = Literal["attack", "quit"]
ContinueAction = Literal["keep_player", "new_pair", "quit"]

_CONTINUE_OPTIONS: List[tuple[str, ContinueAction]] = [
    ("Continue with a new opponent", "keep_player"),
    ("Get new creatures", "new_pair"),
    ("Quit", "quit"),
]


def main(argv: Sequence[str] | None = None) -> None:
    """Start the interactive CLI session."""
    args = _parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if debug_enabled() else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    config = _resolve_config(args)
    if args.save_config:
        save_config(config, args.config)
    print("=== PokeBattle ===")
    try:
        controller = _build_controller(config, seed=args.seed)
    except CatalogError as exc:
        print(f"Could not open the creature catalog: {exc}")
        print("Goodbye!")
        return
    if not _run_load(controller.load):
        print("Goodbye!")
        return
    _run_session(controller)
    print("Goodbye!")


def _parse_args(argv: Sequence[str] | None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="pokebattle", description="Dice battles between random creatures")
    parser.add_argument("--seed", type=int, default=None, help="Seed for dice and creature picks")
    parser.add_argument("--offline", action="store_true", help="Use the bundled creature catalog")
    parser.add_argument("--catalog-url", type=str, default=None, help="Base URL of the creature catalog")
    parser.add_argument(
        "--catalog-file", type=Path, default=None, help="JSON catalog file to play from (implies --offline)"
    )
    parser.add_argument("--timeout", type=float, default=None, help="Catalog request timeout in seconds")
    parser.add_argument("--config", type=Path, default=None, help="Path to a JSON config file")
    parser.add_argument("--save-config", action="store_true", help="Persist the effective options")
    return parser.parse_args(argv)


def _resolve_config(args: argparse.Namespace) -> Dict[str, Any]:
    """Layer command-line flags over the config file."""
    config = load_config(args.config)
    if args.offline or args.catalog_file is not None:
        config["offline"] = True
    if args.catalog_url:
        config["catalog_url"] = args.catalog_url
    if args.timeout is not None and args.timeout > 0:
        config["timeout_seconds"] = args.timeout
    config["catalog_file"] = args.catalog_file
    return config


def _build_catalog(config: Dict[str, Any]) -> CombatantCatalog:
    if config.get("offline"):
        return JsonCatalog(config.get("catalog_file"))
    return HttpCatalog(config["catalog_url"], timeout_seconds=config["timeout_seconds"])


def _build_controller(config: Dict[str, Any], *, seed: int | None) -> BattleController:
    """Construct the BattleController with a concrete catalog."""
    rng = RNG(seed)
    catalog = _build_catalog(config)
    max_id = config["max_id"]
    if isinstance(catalog, JsonCatalog):
        max_id = min(max_id, max(catalog.ids(), default=1))
    loader = RosterLoader(catalog, rng, max_id=max_id)
    return BattleController(BattleService(), loader, rng)


def _run_load(operation: Callable[[], Awaitable[List[BattleEvent]]]) -> bool:
    """Run a roster load, offering a retry after lookup failures."""
    while True:
        print("Loading creatures...")
        try:
            events = asyncio.run(operation())
        except CombatantLookupError as exc:
            print(f"Could not load creature #{exc.combatant_id}.")
            if not _prompt_yes_no("Retry? (y/n): "):
                return False
            continue
        _render_battle_events(events)
        return True


def _run_session(controller: BattleController) -> None:
    """Alternate battle rounds and continuation choices until the user quits."""
    while True:
        render_battle_view(controller.get_battle_view())
        if controller.state.awaiting_continuation:
            choice = _prompt_continue_action()
            if choice == "quit":
                return
            keep_player = choice == "keep_player"
            if not _run_load(lambda: controller.continue_battle(keep_player)):
                return
            continue
        if _prompt_battle_action() == "quit":
            return
        result = controller.resolve_round()
        _render_battle_events(result.events)


def _prompt_battle_action() -> BattleAction:
    options: List[tuple[str, BattleAction]] = [("Attack", "attack"), ("Quit", "quit")]
    return _prompt_option("Actions", options)


def _prompt_continue_action() -> ContinueAction:
    return _prompt_option("Game Over - what would you like to do?", _CONTINUE_OPTIONS)


def _prompt_option(title: str, options: Sequence[tuple[str, Any]]) -> Any:
    while True:
        render_menu(title, [label for label, _ in options])
        choice = input("Select an option: ").strip()
        try:
            index = int(choice) - 1
        except ValueError:
            print("Invalid selection.")
            continue
        if 0 <= index < len(options):
            return options[index][1]
        print(f"Please enter a value between 1 and {len(options)}.")


def _prompt_yes_no(prompt: str) -> bool:
    while True:
        raw = input(prompt).strip().lower()
        if raw in ("y", "yes"):
            return True
        if raw in ("n", "no"):
            return False
        print("Please answer y or n.")


def _render_battle_events(events: List[BattleEvent]) -> None:
    lines: List[str] = []
    for event in events:
        if isinstance(event, BattleStartedEvent):
            lines.append(f"{event.player_name.title()} faces {event.opponent_name.title()}!")
        elif isinstance(event, OpponentReplacedEvent):
            lines.append(f"A new challenger appears: {event.opponent_name.title()}!")
        elif isinstance(event, BattleResolvedEvent):
            lines.append(f"Battle resolved: {event.outcome}.")
    render_bullet_lines(lines)
