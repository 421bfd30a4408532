from __future__ import annotations

from pathlib import Path
import sys
import pytest

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

from recipefinder.domain import Recipe  # noqa: E402


@pytest.fixture()
def example_catalog() -> Path:
    return ROOT / "fixtures" / "catalog.yaml"


@pytest.fixture()
def temp_home(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    monkeypatch.setenv("HOME", str(tmp_path))
    return tmp_path


@pytest.fixture()
def sample_recipes() -> list[Recipe]:
    return [
        Recipe(
            recipe_id="1",
            name="Pasta",
            cuisine="Italian",
            ingredients=("pasta", "tomato"),
            cooking_time=30,
            difficulty="Easy",
            device_support="Both",
        ),
        Recipe(
            recipe_id="2",
            name="Chickpea Curry",
            cuisine="Indian",
            ingredients=("chickpeas", "coconut milk"),
            cooking_time=45,
            difficulty="Medium",
            device_support="MoMe",
        ),
        Recipe(
            recipe_id="3",
            name="Ramen",
            cuisine="Japanese",
            ingredients=("noodles", "pork", "egg"),
            cooking_time=120,
            difficulty="Hard",
            device_support="Simmr",
            status="pending",
        ),
        Recipe(
            recipe_id="4",
            name="Meatball Sub",
            cuisine="Italian-American",
            ingredients=("beef", "bread roll", "marinara"),
            cooking_time=0,
            difficulty="Easy",
            device_support="MoMe",
        ),
    ]
