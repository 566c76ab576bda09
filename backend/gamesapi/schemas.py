"""Pydantic-модели тела запросов и ответов (JSON в camelCase)."""
from pydantic import BaseModel, ConfigDict, Field


class _Base(BaseModel):
    model_config = ConfigDict(populate_by_name=True)


class GameIn(_Base):
    """Тело POST /games. Обязательность title/platform проверяет хранилище (400, не 422)."""

    title: str | None = Field(default=None, description="Game title")
    platform: str | None = Field(default=None, description="Game platform")
    release_year: int | None = Field(default=None, alias="releaseYear", description="Release year")
    image_url: str | None = Field(default=None, alias="imageUrl", description="Game image URL")


class GameUpdate(GameIn):
    """Тело PUT /games/{id}: любые поля, пустые значения игнорируются."""


class GameOut(_Base):
    id: int = Field(description="Game ID")
    title: str
    platform: str
    release_year: int | None = Field(default=None, alias="releaseYear")
    image_url: str | None = Field(default=None, alias="imageUrl")


class ErrorOut(BaseModel):
    error: str
