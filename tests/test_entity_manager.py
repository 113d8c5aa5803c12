from ecsgame.entity_manager import EntityManager


def test_added_entity_visible_only_after_update():
    manager = EntityManager()
    e = manager.add_entity("enemy")
    assert manager.entities() == []
    assert manager.entities("enemy") == []
    manager.update()
    assert manager.entities() == [e]
    assert manager.entities("enemy") == [e]


def test_ids_are_sequential_from_zero():
    manager = EntityManager()
    ids = [manager.add_entity("enemy").id for _ in range(3)]
    assert ids == [0, 1, 2]


def test_entities_grouped_by_tag_in_order():
    manager = EntityManager()
    a = manager.add_entity("enemy")
    b = manager.add_entity("bullet")
    c = manager.add_entity("enemy")
    manager.update()
    assert manager.entities("enemy") == [a, c]
    assert manager.entities("bullet") == [b]
    assert manager.entities() == [a, b, c]


def test_destroyed_entities_removed_on_update():
    manager = EntityManager()
    a = manager.add_entity("enemy")
    b = manager.add_entity("enemy")
    manager.update()
    a.destroy()
    assert a in manager.entities("enemy")
    manager.update()
    assert manager.entities("enemy") == [b]
    assert manager.entities() == [b]


def test_entity_destroyed_before_first_update_never_appears():
    manager = EntityManager()
    e = manager.add_entity("bullet")
    e.destroy()
    manager.update()
    assert manager.entities("bullet") == []
    assert manager.entities() == []


def test_unknown_tag_gives_empty_list():
    manager = EntityManager()
    assert manager.entities("ghost") == []
    assert "ghost" in manager.entity_map


def test_ids_keep_increasing_after_removal():
    manager = EntityManager()
    first = manager.add_entity("enemy")
    manager.update()
    first.destroy()
    manager.update()
    second = manager.add_entity("enemy")
    assert second.id > first.id