from models import Farm
from repositories import FarmRepository


def _add(repo, name, location, area=None):
    return repo.create(Farm(name=name, location=location, area=area))


def test_create_assigns_incrementing_ids(db_session):
    repo = FarmRepository(db_session)
    first = _add(repo, "Sunrise", "Valencia")
    second = _add(repo, "Sunset", "Murcia")
    assert first.id == 1
    assert second.id == 2


def test_get_by_id_and_exists(db_session):
    repo = FarmRepository(db_session)
    farm = _add(repo, "Sunrise", "Valencia", area=12.5)
    db_session.commit()

    found = repo.get_by_id(farm.id)
    assert found is not None
    assert found.name == "Sunrise"
    assert found.area == 12.5
    assert repo.exists(farm.id)
    assert repo.get_by_id(999) is None
    assert not repo.exists(999)


def test_get_all_is_ordered_and_paginated(db_session):
    repo = FarmRepository(db_session)
    for i in range(5):
        _add(repo, f"Farm {i}", "Valencia")
    db_session.commit()

    assert [f.name for f in repo.get_all()] == [f"Farm {i}" for i in range(5)]
    assert [f.name for f in repo.get_all(limit=2, offset=1)] == ["Farm 1", "Farm 2"]
    assert repo.count() == 5


def test_delete_by_id(db_session):
    repo = FarmRepository(db_session)
    farm = _add(repo, "Sunrise", "Valencia")
    db_session.commit()

    assert repo.delete_by_id(farm.id) is True
    assert repo.delete_by_id(farm.id) is False
    assert repo.count() == 0


def test_search_filters(db_session):
    repo = FarmRepository(db_session)
    _add(repo, "Sunrise", "Valencia")
    _add(repo, "Sunset", "Murcia")
    _add(repo, "Orange Grove", "Valencia")
    db_session.commit()

    assert [f.name for f in repo.search()] == ["Sunrise", "Sunset", "Orange Grove"]
    assert [f.name for f in repo.search(name="sun")] == ["Sunrise", "Sunset"]
    assert [f.name for f in repo.search(location="valencia")] == ["Sunrise", "Orange Grove"]
    assert [f.name for f in repo.search(name="sun", location="valencia")] == ["Sunrise"]
    assert repo.search(name="nothing") == []


def test_out_of_range_ids_are_absent(db_session):
    repo = FarmRepository(db_session)
    _add(repo, "Sunrise", "Valencia")
    db_session.commit()

    for farm_id in (2 ** 63, -(2 ** 63) - 1, 10 ** 30):
        assert repo.get_by_id(farm_id) is None
        assert not repo.exists(farm_id)
        assert repo.delete_by_id(farm_id) is False
    assert repo.count() == 1
