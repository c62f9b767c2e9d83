from sceneview.entity import Entity, Transform, Vector3
from sceneview.light import PointLight, PointLightEntity
from sceneview.mesh import Color


def test_new_light_is_white_with_unit_intensity():
    light = PointLightEntity()
    assert light.light_color == Color.WHITE
    assert light.intensity == 1.0


def test_new_light_carries_light_and_transform():
    light = PointLightEntity()
    assert any(c is light.point_light for c in light.components)
    assert any(isinstance(c, Transform) for c in light.components)
    assert light.translation == Vector3(0.0, 0.0, 0.0)


def test_color_and_intensity_round_trip():
    light = PointLightEntity()
    color = Color(10, 20, 30)
    light.light_color = color
    light.intensity = 2.5
    assert light.light_color == color
    assert light.point_light.color == color
    assert light.intensity == 2.5


def test_parent_links_child():
    root = Entity()
    light = PointLightEntity(root)
    assert light.parent is root
    assert light in root.children


def test_set_point_light_replaces_component_and_emits():
    light = PointLightEntity()
    old = light.point_light
    calls = []
    light.point_light_changed.connect(lambda: calls.append(True))
    new = PointLight(color=Color.GREEN, intensity=0.5)
    light.set_point_light(new)
    assert light.point_light is new
    assert light.light_color == Color.GREEN
    assert light.intensity == 0.5
    assert not any(c is old for c in light.components)
    assert calls == [True]