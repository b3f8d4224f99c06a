import pytest
from planet_sim.registry import BodyRegistry
from planet_sim.types import Body
from planet_sim.errors import NotFound


def test_ids_are_monotonic_and_never_reused():
    registry = BodyRegistry()
    a = registry.add(Body(radius=1.0))
    b = registry.add(Body(radius=1.0))
    registry.remove(b)
    c = registry.add(Body(radius=1.0))

    assert (a, b, c) == (0, 1, 2)
    assert registry.next_id == 3
    assert registry.ids() == [a, c]


def test_add_assigns_id_to_body():
    registry = BodyRegistry(first_id=10)
    body = Body(radius=1.0)
    body_id = registry.add(body)
    assert body.id == body_id == 10
    assert registry.get(body_id) is body


def test_remove_returns_body_and_keeps_others():
    registry = BodyRegistry()
    ids = [registry.add(Body(position=(k, 0), radius=1.0)) for k in range(4)]
    removed = registry.remove(ids[1])

    assert removed.position[0] == 1.0
    assert ids[1] not in registry
    assert [b.id for b in registry.bodies()] == [ids[0], ids[2], ids[3]]
    assert len(registry) == 3


def test_remove_unknown_raises_not_found():
    registry = BodyRegistry()
    body_id = registry.add(Body(radius=1.0))
    registry.remove(body_id)

    with pytest.raises(NotFound) as info:
        registry.remove(body_id)
    assert info.value.body_id == body_id
    assert str(body_id) in str(info.value)

    with pytest.raises(KeyError):
        registry.get(42)


def test_iteration_is_insertion_ordered():
    registry = BodyRegistry()
    ids = [registry.add(Body(radius=1.0)) for _ in range(3)]
    assert [body_id for body_id, _ in registry] == ids
    assert all(body.id == body_id for body_id, body in registry.items())
