import xml.etree.ElementTree as ET
from types import SimpleNamespace

import pytest

from tombgrid.cells import CellPos, Surface
from tombgrid.events import OskEvent
from tombgrid.resources.entities import Registry
from tombgrid.resources.object_loader import (
    AutoNavComponent,
    LaraComponent,
    MeshComponent,
    ObjectLoader,
    RouteComponent,
    read_f3,
    read_i3,
    read_route_node,
)

TRIANGLE = "v 0 0 0\nv 1 0 0\nv 0 1 0\nf 1 2 3\n"


@pytest.fixture
def loader(tmp_path):
    return ObjectLoader(SimpleNamespace(resource_dir=str(tmp_path) + "/"))


def _write(tmp_path, name, text):
    path = tmp_path / name
    path.write_text(text)
    return str(path)


def test_read_i3():
    assert read_i3(ET.fromstring('<t cell="1 -2 3"/>'), "cell") == CellPos(1, -2, 3)


def test_read_i3_missing_attribute_is_zero():
    assert read_i3(ET.fromstring("<t/>"), "cell") == CellPos(0, 0, 0)


def test_read_f3():
    assert read_f3(ET.fromstring('<t p="1.5 -2 0.25"/>'), "p") == (1.5, -2.0, 0.25)


def test_read_route_node_attributes_and_children():
    node = ET.fromstring(
        '<tile cell="1 2 3" template="tile.floor" trigger="door" is_trap="true" allow_saw="yes">'
        '<trigger_camera position="0 5 10"/>'
        '<trigger_level target="level_2"/>'
        '<trigger_switch toggle="gate"/>'
        '<enemy template="enemy.saw"/>'
        '<trigger value="open"><cell offset="0 0 1"/></trigger>'
        "</tile>"
    )
    route_node = read_route_node(node)
    assert route_node.cell == CellPos(1, 2, 3)
    assert route_node.template_name == "tile.floor"
    assert route_node.trigger == "door"
    assert route_node.trap is True
    assert route_node.allow_saw is True
    assert route_node.camera_trigger == (0.0, 5.0, 10.0)
    assert route_node.level_trigger == "level_2"
    assert route_node.switch_trigger == "gate"
    assert route_node.enemy == "enemy.saw"
    assert [(t.value, t.cell_offset) for t in route_node.triggers] == [("open", CellPos(0, 0, 1))]


def test_read_route_node_false_flags():
    route_node = read_route_node(ET.fromstring('<tile cell="0 0 0" is_trap="false" allow_saw="0"/>'))
    assert route_node.trap is False
    assert route_node.allow_saw is False
    assert route_node.trigger is None


def test_trigger_with_unknown_child_raises():
    node = ET.fromstring('<tile cell="0 0 0"><trigger value="x"><bogus/></trigger></tile>')
    with pytest.raises(ValueError):
        read_route_node(node)


def test_load_object_with_route_lara_and_auto_nav(tmp_path, loader):
    path = _write(
        tmp_path,
        "level.xml",
        "<object><name>level_1</name>"
        '<route><tile cell="0 0 0" template="a"/><tile cell="0 0 1" template="b"/></route>'
        '<lara cell="0 0 1" offset="0 0.5 0" surface="side"/>'
        '<auto_nav><event id="forward"/><event id="left"/><event id="interact"/></auto_nav>'
        "</object>",
    )
    obj = loader.load_object(path)
    assert obj.name == "level_1"
    route = obj.components[RouteComponent]
    assert [tile.template_name for tile in route.tiles] == ["a", "b"]
    lara = obj.components[LaraComponent]
    assert lara.initial_pos == CellPos(0, 0, 1)
    assert lara.offset == (0.0, 0.5, 0.0)
    assert lara.surface is Surface.SIDE
    assert obj.components[AutoNavComponent].events == [
        OskEvent.MOVE_FORWARD,
        OskEvent.MOVE_LEFT,
        OskEvent.INTERACT,
    ]


def test_load_object_mesh_is_relative_to_resource_dir(tmp_path, loader):
    _write(tmp_path, "tri.obj", TRIANGLE)
    path = _write(tmp_path, "thing.xml", '<object><mesh filename="tri.obj"/></object>')
    obj = loader.load_object(path)
    mesh = obj.components[MeshComponent].mesh
    assert len(mesh.model.meshes) == 1


def test_unknown_auto_nav_event_raises(tmp_path, loader):
    path = _write(tmp_path, "bad.xml", '<object><auto_nav><event id="jump"/></auto_nav></object>')
    with pytest.raises(ValueError):
        loader.load_object(path)


def test_missing_file_raises_runtime_error(tmp_path, loader):
    with pytest.raises(RuntimeError):
        loader.load_object(str(tmp_path / "absent.xml"))


def test_malformed_file_raises_runtime_error(tmp_path, loader):
    path = _write(tmp_path, "broken.xml", "<object><name>")
    with pytest.raises(RuntimeError):
        loader.load_object(path)


def test_non_object_root_gives_empty_object(tmp_path, loader):
    path = _write(tmp_path, "other.xml", "<thing><name>x</name></thing>")
    obj = loader.load_object(path)
    assert obj.name == ""
    assert obj.components == {}


def test_created_entity_gets_independent_route(tmp_path, loader):
    path = _write(tmp_path, "r.xml", '<object><route><tile cell="1 1 1" template="t"/></route></object>')
    obj = loader.load_object(path)
    registry = Registry()
    entity = obj.create(registry)
    stored = registry.get(entity, RouteComponent)
    assert stored == obj.components[RouteComponent]
    stored.tiles.clear()
    assert len(obj.components[RouteComponent].tiles) == 1


def test_created_entity_shares_mesh(tmp_path, loader):
    _write(tmp_path, "tri.obj", TRIANGLE)
    path = _write(tmp_path, "m.xml", '<object><mesh filename="tri.obj"/></object>')
    obj = loader.load_object(path)
    registry = Registry()
    entity = obj.create(registry)
    assert registry.get(entity, MeshComponent).mesh is obj.components[MeshComponent].mesh