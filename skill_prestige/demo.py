"""Create demo save data for development/testing."""

import shutil

from skill_prestige.models import PlayerState, Recipe
from skill_prestige.storage import Storage

DEMO_RECIPES = [
    Recipe(name="Scarecrow", kind="crafting", unlock="Farming 1"),
    Recipe(name="Basic Fertilizer", kind="crafting", unlock="Farming 1"),
    Recipe(name="Quality Sprinkler", kind="crafting", unlock="Farming 6"),
    Recipe(name="Bait", kind="crafting", unlock="Fishing 2"),
    Recipe(name="Crab Pot", kind="crafting", unlock="Fishing 3"),
    Recipe(name="Wild Seeds (Sp)", kind="crafting", unlock="Foraging 1"),
    Recipe(name="Cherry Bomb", kind="crafting", unlock="Mining 1"),
    Recipe(name="Life Elixir", kind="crafting", unlock="Combat 2"),
    Recipe(name="Chest", kind="crafting"),
    Recipe(name="Fried Egg", kind="cooking"),
    Recipe(name="Hashbrowns", kind="cooking", unlock="Farming 2"),
    Recipe(name="Sashimi", kind="cooking", unlock="Fishing 2"),
    Recipe(name="Survival Burger", kind="cooking", unlock="Foraging 2"),
    Recipe(name="Miner's Treat", kind="cooking", unlock="Mining 3"),
    Recipe(name="Roots Platter", kind="cooking", unlock="Combat 3"),
]

DEMO_PLAYER = PlayerState(
    experience={
        "Farming": 32000,
        "Fishing": 15000,
        "Foraging": 9000,
        "Mining": 20500,
        "Combat": 15000,
    },
    professions={1, 4},
    crafting_recipes={
        "Scarecrow": 3,
        "Basic Fertilizer": 12,
        "Quality Sprinkler": 20,
        "Bait": 40,
        "Cherry Bomb": 5,
        "Chest": 7,
    },
    cooking_recipes={
        "Fried Egg": 2,
        "Hashbrowns": 1,
        "Sashimi": 0,
        "Miner's Treat": 1,
    },
)


def create_demo_data(storage: Storage) -> None:
    """Wipe the save directory and write a fresh demo save."""
    if storage.base_path.exists():
        shutil.rmtree(storage.base_path)
    storage.base_path.mkdir(parents=True, exist_ok=True)

    storage.save_recipes(DEMO_RECIPES)
    storage.save_player(DEMO_PLAYER.model_copy(deep=True))
