"""
HTTP-эндпоинты: CRUD игр и список баннеров.
Хендлеры только переводят запрос в операцию хранилища; ошибки ловит обработчик в main.
"""
from fastapi import APIRouter, Depends, Request, status

from .constants import get_banners
from .schemas import ErrorOut, GameIn, GameOut, GameUpdate
from .store import GameStore

router = APIRouter()

_NOT_FOUND = {404: {"model": ErrorOut, "description": "Game not found"}}


def get_store(request: Request) -> GameStore:
    return request.app.state.store


@router.post(
    "/games",
    tags=["Games"],
    summary="Register a new game",
    status_code=status.HTTP_201_CREATED,
    response_model=GameOut,
    responses={400: {"model": ErrorOut, "description": "Title and platform are required"}},
)
def create_game(body: GameIn | None = None, store: GameStore = Depends(get_store)):
    body = body or GameIn()
    game = store.create(body.title, body.platform, body.release_year, body.image_url)
    return game.to_dict()


@router.get("/games", tags=["Games"], summary="List all games", response_model=list[GameOut])
def list_games(store: GameStore = Depends(get_store)):
    return [g.to_dict() for g in store.list()]


@router.get(
    "/games/{game_id}",
    tags=["Games"],
    summary="Get a game by ID",
    response_model=GameOut,
    responses=_NOT_FOUND,
)
def get_game(game_id: int, store: GameStore = Depends(get_store)):
    return store.get(game_id).to_dict()


@router.put(
    "/games/{game_id}",
    tags=["Games"],
    summary="Update a game",
    response_model=GameOut,
    responses=_NOT_FOUND,
)
def update_game(game_id: int, body: GameUpdate | None = None, store: GameStore = Depends(get_store)):
    body = body or GameUpdate()
    game = store.update(
        game_id,
        title=body.title,
        platform=body.platform,
        release_year=body.release_year,
        image_url=body.image_url,
    )
    return game.to_dict()


@router.delete(
    "/games/{game_id}",
    tags=["Games"],
    summary="Delete a game",
    response_model=GameOut,
    responses=_NOT_FOUND,
)
def delete_game(game_id: int, store: GameStore = Depends(get_store)):
    return store.delete(game_id).to_dict()


@router.get("/banners", tags=["Banners"], summary="List banner URLs", response_model=list[str])
def list_banners():
    return get_banners()
