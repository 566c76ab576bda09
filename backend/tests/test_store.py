import threading

import pytest

from gamesapi.store import Game, GameStore, NotFoundError, ValidationError


def test_create_assigns_increasing_ids(store):
    halo = store.create("Halo", "Xbox")
    mario = store.create("Mario", "Switch", 1985, "https://example.com/mario.png")

    assert halo == Game(id=1, title="Halo", platform="Xbox")
    assert mario.id == 2
    assert mario.release_year == 1985
    assert mario.image_url == "https://example.com/mario.png"


@pytest.mark.parametrize("title,platform", [(None, "Xbox"), ("Halo", None), ("", "Xbox"), ("Halo", "")])
def test_create_requires_title_and_platform(store, title, platform):
    with pytest.raises(ValidationError) as exc_info:
        store.create(title, platform)
    assert exc_info.value.status_code == 400
    assert len(store) == 0


def test_create_stores_falsy_optionals_as_none(store):
    game = store.create("Halo", "Xbox", 0, "")
    assert game.release_year is None
    assert game.image_url is None


def test_failed_create_does_not_consume_id(store):
    with pytest.raises(ValidationError):
        store.create("", "Xbox")
    assert store.create("Halo", "Xbox").id == 1


def test_get_returns_created_record(store):
    created = store.create("Halo", "Xbox")
    assert store.get(created.id) == created


def test_get_missing_raises(store):
    with pytest.raises(NotFoundError) as exc_info:
        store.get(42)
    assert exc_info.value.status_code == 404
    assert exc_info.value.message == "Game not found"


def test_update_changes_only_supplied_fields(store):
    game = store.create("Halo", "Xbox", 2001, "https://example.com/halo.png")
    updated = store.update(game.id, title="X")
    assert updated == Game(
        id=game.id,
        title="X",
        platform="Xbox",
        release_year=2001,
        image_url="https://example.com/halo.png",
    )


def test_update_ignores_falsy_values(store):
    game = store.create("Halo", "Xbox", 2001, "https://example.com/halo.png")
    store.update(game.id, title="", platform="", release_year=0, image_url="")
    assert store.get(game.id).title == "Halo"
    assert store.get(game.id).release_year == 2001
    assert store.get(game.id).image_url == "https://example.com/halo.png"


def test_update_overwrites_platform_year_and_image(store):
    game = store.create("Halo", "Xbox", 2001, "https://example.com/halo.png")
    updated = store.update(game.id, platform="PC", release_year=2002, image_url="u")
    assert updated == Game(id=game.id, title="Halo", platform="PC", release_year=2002, image_url="u")
    assert store.get(game.id) == updated


def test_update_missing_raises(store):
    with pytest.raises(NotFoundError):
        store.update(1, title="X")


def test_delete_then_get_fails_and_id_not_reused(store):
    halo = store.create("Halo", "Xbox")
    store.create("Mario", "Switch")

    assert store.delete(halo.id) == halo
    with pytest.raises(NotFoundError):
        store.get(halo.id)
    with pytest.raises(NotFoundError):
        store.delete(halo.id)
    assert store.create("Zelda", "Switch").id == 3
    assert [g.title for g in store.list()] == ["Mario", "Zelda"]


def test_list_is_a_snapshot(store):
    store.create("Halo", "Xbox")
    snapshot = store.list()
    snapshot.clear()
    assert len(store.list()) == 1


def test_list_length_tracks_creates_minus_deletes(store):
    ids = [store.create(f"Game {i}", "PC").id for i in range(5)]
    store.delete(ids[1])
    store.delete(ids[3])
    assert len(store.list()) == 3
    assert len(store) == 3


def test_to_dict_uses_camel_case():
    game = Game(id=1, title="Halo", platform="Xbox")
    assert game.to_dict() == {
        "id": 1,
        "title": "Halo",
        "platform": "Xbox",
        "releaseYear": None,
        "imageUrl": None,
    }


def test_concurrent_creates_get_unique_ids():
    store = GameStore()

    def worker():
        for _ in range(50):
            store.create("Halo", "Xbox")

    threads = [threading.Thread(target=worker) for _ in range(8)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    ids = [g.id for g in store.list()]
    assert len(ids) == 400
    assert sorted(set(ids)) == list(range(1, 401))
