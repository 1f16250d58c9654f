from pathlib import Path

import pokebattle
from pokebattle.data import paths


def test_get_catalog_path_base_path(tmp_path: Path) -> None:
    target = tmp_path / "other.json"
    assert paths.get_catalog_path(target) == target


def test_bundled_catalog_ships_inside_package() -> None:
    catalog_path = paths.get_catalog_path()
    package_dir = Path(pokebattle.__file__).resolve().parent

    assert catalog_path.name == "creatures.json"
    assert catalog_path.exists()
    assert catalog_path.is_relative_to(package_dir)
    assert catalog_path.parent == paths.get_package_data_dir()
