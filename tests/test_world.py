from dataclasses import dataclass, field

from tilequest.tiled_types import Property, PropertyType
from tilequest.world import Lifetime, World


@dataclass
class Inventory:
    items: list = field(default_factory=list)


def test_lifetime_expires_at_end_of_frame():
    world = World()
    e = world.create()
    world.set_lifetime(e, 1.0)
    world.update_lifetimes(0.5)
    world.destroy_entities_to_be_destroyed_at_end_of_frame()
    assert world.valid(e)
    assert world.registry.get(e, Lifetime).time == 0.5
    world.update_lifetimes(0.5)
    assert world.valid(e)
    world.destroy_entities_to_be_destroyed_at_end_of_frame()
    assert not world.valid(e)


def test_destroy_at_end_of_frame_is_deferred():
    world = World()
    e = world.create()
    world.destroy_at_end_of_frame(e)
    world.destroy_at_end_of_frame(e)
    assert world.valid(e)
    world.destroy_entities_to_be_destroyed_at_end_of_frame()
    assert not world.valid(e)
    world.destroy_at_end_of_frame(e)
    world.destroy_entities_to_be_destroyed_at_end_of_frame()
    assert not world.valid(e)


def test_destroy_immediately_tolerates_invalid():
    world = World()
    e = world.create()
    world.destroy_immediately(e)
    assert not world.valid(e)
    world.destroy_immediately(e)
    world.destroy_immediately(None)
    assert not world.valid(None)


def test_clear_drops_pending_destruction():
    world = World()
    e = world.create()
    world.destroy_at_end_of_frame(e)
    world.clear()
    assert not world.valid(e)
    f = world.create(hint=e)
    world.destroy_entities_to_be_destroyed_at_end_of_frame()
    assert world.valid(f)


def test_names():
    world = World()
    a = world.create()
    b = world.create()
    world.set_name(a, "hero")
    world.set_name(b, "villain")
    assert world.get_name(a) == "hero"
    assert world.find_entity_by_name("villain") == b
    assert world.find_entity_by_name("nobody") is None
    assert world.find_entity_by_name("") is None
    assert world.get_name(world.create()) == ""


def test_tags():
    world = World()
    a = world.create()
    world.set_tag(a, "player")
    assert world.get_tag(a) == "player"
    assert world.find_entity_by_tag("player") == a
    assert world.find_entity_by_tag("enemy") is None
    assert world.get_tag(world.create()) is None


def test_properties():
    world = World()
    e = world.create()
    props = [
        Property("speed", PropertyType.FLOAT, 1.5),
        Property("hp", PropertyType.INT, 3),
        Property("text", PropertyType.STRING, "hello"),
        Property("locked", PropertyType.BOOL, True),
        Property("target", PropertyType.OBJECT, 7),
    ]
    world.set_properties(e, props)
    assert world.get_float_property(e, "speed") == 1.5
    assert world.get_int_property(e, "hp") == 3
    assert world.get_string_property(e, "text") == "hello"
    assert world.get_bool_property(e, "locked") is True
    assert world.get_object_property(e, "target") == 7
    assert world.get_int_property(e, "speed") is None
    assert world.get_properties(e) == props


def test_properties_missing():
    world = World()
    e = world.create()
    assert world.get_properties(e) is None
    assert world.get_float_property(e, "speed") is None


def test_deep_copy_is_independent():
    world = World()
    e = world.create()
    world.set_name(e, "chest")
    world.registry.emplace(e, Inventory(["key"]))
    clone = world.deep_copy(e)
    assert clone != e
    assert world.get_name(clone) == "chest"
    world.registry.get(clone, Inventory).items.append("coin")
    assert world.registry.get(e, Inventory).items == ["key"]
    assert world.registry.get(clone, Inventory).items == ["key", "coin"]