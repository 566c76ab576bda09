"""
Хранилище игр (in-memory).
Данные живут только пока жив процесс; id не переиспользуются после удаления.
"""
import logging
import threading
from dataclasses import dataclass
from typing import Any

logger = logging.getLogger(__name__)


class StoreError(Exception):
    status_code = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ValidationError(StoreError):
    status_code = 400


class NotFoundError(StoreError):
    status_code = 404


@dataclass
class Game:
    id: int
    title: str
    platform: str
    release_year: int | None = None
    image_url: str | None = None

    def to_dict(self) -> dict[str, Any]:
        """Payload для клиента (ключи в camelCase)."""
        return {
            "id": self.id,
            "title": self.title,
            "platform": self.platform,
            "releaseYear": self.release_year,
            "imageUrl": self.image_url,
        }


class GameStore:
    """
    Список игр + счётчик id.
    Все операции под одним локом: FastAPI выполняет sync-эндпоинты в пуле потоков.
    """

    def __init__(self):
        self._games: list[Game] = []
        self._next_id = 1
        self._lock = threading.Lock()

    def __len__(self) -> int:
        with self._lock:
            return len(self._games)

    def create(
        self,
        title: str | None,
        platform: str | None,
        release_year: int | None = None,
        image_url: str | None = None,
    ) -> Game:
        if not title or not platform:
            raise ValidationError("Title and platform are required")
        with self._lock:
            game = Game(
                id=self._next_id,
                title=title,
                platform=platform,
                release_year=release_year or None,
                image_url=image_url or None,
            )
            self._next_id += 1
            self._games.append(game)
        logger.info("Store: created game id=%s title=%r", game.id, game.title)
        return game

    def list(self) -> list[Game]:
        with self._lock:
            return list(self._games)

    def get(self, game_id: int) -> Game:
        with self._lock:
            return self._find(game_id)

    def update(
        self,
        game_id: int,
        title: str | None = None,
        platform: str | None = None,
        release_year: int | None = None,
        image_url: str | None = None,
    ) -> Game:
        """
        Частичное обновление: перезаписываются только truthy-поля.
        Пустая строка / 0 / None означают «без изменений» — очистить поле нельзя.
        """
        with self._lock:
            game = self._find(game_id)
            if title:
                game.title = title
            if platform:
                game.platform = platform
            if release_year:
                game.release_year = release_year
            if image_url:
                game.image_url = image_url
        logger.info("Store: updated game id=%s", game_id)
        return game

    def delete(self, game_id: int) -> Game:
        with self._lock:
            game = self._find(game_id)
            self._games.remove(game)
        logger.info("Store: deleted game id=%s", game_id)
        return game

    def _find(self, game_id: int) -> Game:
        for g in self._games:
            if g.id == game_id:
                return g
        logger.debug("Store: game id=%s not found", game_id)
        raise NotFoundError("Game not found")
