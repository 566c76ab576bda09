"""Константы API: баннеры и метаданные документации."""
from typing import TypedDict


class TagInfo(TypedDict):
    name: str
    description: str


API_TITLE = "Videogames API"
API_VERSION = "1.0.0"
API_DESCRIPTION = "Simple API for registering video games"

TAGS: list[TagInfo] = [
    {"name": "Games", "description": "Game CRUD"},
    {"name": "Banners", "description": "Promotional banner list"},
]

BANNERS: tuple[str, ...] = (
    "https://example.com/images/banner1.jpg",
    "https://example.com/images/banner2.jpg",
    "https://example.com/images/banner3.jpg",
)


def get_banners() -> list[str]:
    """Фиксированный список баннеров (новая копия на каждый вызов)."""
    return list(BANNERS)
