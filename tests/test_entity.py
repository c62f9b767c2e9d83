import pytest

from sceneview.entity import Entity, Quaternion, Signal, Transform, TransformEntity, Vector3


def approx_vec(vec):
    return pytest.approx(tuple(vec), abs=1e-9)


def test_signal_calls_slots_in_order():
    calls = []
    sig = Signal()
    sig.connect(lambda v: calls.append(("a", v)))
    sig.connect(lambda v: calls.append(("b", v)))
    sig.emit(5)
    assert calls == [("a", 5), ("b", 5)]


def test_signal_disconnect():
    calls = []
    sig = Signal()
    slot = calls.append
    sig.connect(slot)
    sig.disconnect(slot)
    sig.emit(1)
    assert calls == []
    assert len(sig) == 0


def test_signal_disconnect_unknown_raises():
    with pytest.raises(ValueError):
        Signal().disconnect(print)


def test_vector_arithmetic_round_trip():
    a = Vector3(1.5, -2.0, 3.0)
    b = Vector3(0.5, 4.0, -1.0)
    assert (a + b) - b == a
    assert a * 2 == 2 * a
    assert tuple(a) == (1.5, -2.0, 3.0)


def test_identity_from_zero_angles():
    assert Quaternion.from_euler_angles(0, 0, 0) == Quaternion(1.0, 0.0, 0.0, 0.0)


@pytest.mark.parametrize(
    "angles",
    [(10.0, 20.0, 30.0), (-45.0, 120.0, 5.0), (0.0, 90.0, 0.0), (30.0, -170.0, -60.0)],
)
def test_euler_round_trip(angles):
    q = Quaternion.from_euler_angles(*angles)
    assert q.length() == pytest.approx(1.0)
    assert tuple(q.to_euler_angles()) == pytest.approx(angles, abs=1e-6)


def test_euler_ignores_quaternion_scale():
    q = Quaternion.from_euler_angles(15.0, 25.0, 35.0)
    scaled = Quaternion(q.w * 3, q.x * 3, q.y * 3, q.z * 3)
    assert tuple(scaled.to_euler_angles()) == pytest.approx((15.0, 25.0, 35.0), abs=1e-6)
    assert scaled.normalized().length() == pytest.approx(1.0)


def test_gimbal_lock_sets_roll_to_zero():
    euler = Quaternion.from_euler_angles(90.0, 0.0, 0.0).to_euler_angles()
    assert euler.x == pytest.approx(90.0)
    assert euler.z == 0.0


def test_transform_defaults():
    t = Transform()
    assert t.translation == Vector3()
    assert t.rotation == Quaternion()
    assert t.scale == Vector3(1.0, 1.0, 1.0)
    assert (t.rotation_x, t.rotation_y, t.rotation_z) == (0.0, 0.0, 0.0)


def test_transform_rotation_axes_update_quaternion():
    t = Transform()
    t.rotation_x = 20.0
    t.rotation_y = 35.0
    assert t.rotation == Quaternion.from_euler_angles(20.0, 35.0, 0.0)
    assert t.rotation_x == 20.0
    assert t.rotation_y == 35.0


def test_transform_set_rotation_updates_axes():
    t = Transform()
    t.rotation = Quaternion.from_euler_angles(12.0, -40.0, 7.0)
    assert (t.rotation_x, t.rotation_y, t.rotation_z) == pytest.approx((12.0, -40.0, 7.0), abs=1e-6)


def test_transform_changed_emitted_only_on_change():
    t = Transform()
    count = []
    t.changed.connect(lambda: count.append(1))
    t.translation = Vector3(1, 2, 3)
    t.translation = Vector3(1, 2, 3)
    t.rotation_z = 10.0
    assert len(count) == 2


def test_entity_parent_and_children():
    root = Entity()
    child = Entity(root)
    other = Entity()
    assert root.children == (child,)
    child.parent = other
    assert root.children == ()
    assert other.children == (child,)
    assert child.parent is other


def test_add_component_once_and_remove():
    entity = Entity()
    component = object()
    entity.add_component(component)
    entity.add_component(component)
    entity.add_component(None)
    assert entity.components == (component,)
    entity.remove_component(component)
    entity.remove_component(component)
    assert entity.components == ()


def test_transform_entity_starts_at_origin():
    entity = TransformEntity()
    assert entity.transform in entity.components
    assert entity.translation == Vector3(0.0, 0.0, 0.0)
    assert entity.rotation == Quaternion()


def test_transform_entity_delegates_to_transform():
    entity = TransformEntity()
    entity.translation = Vector3(1.0, 2.0, 3.0)
    entity.scale = Vector3(2.0, 2.0, 2.0)
    rot = Quaternion.from_euler_angles(0.0, 45.0, 0.0)
    entity.rotation = rot
    assert entity.transform.translation == Vector3(1.0, 2.0, 3.0)
    assert entity.transform.scale == Vector3(2.0, 2.0, 2.0)
    assert entity.transform.rotation == rot


def test_set_transform_replaces_component_and_emits():
    entity = TransformEntity()
    old = entity.transform
    new = Transform(translation=Vector3(5.0, 0.0, 0.0))
    events = []
    entity.transform_component_changed.connect(lambda: events.append(True))
    entity.set_transform(new)
    assert entity.transform is new
    assert old not in entity.components
    assert new in entity.components
    assert entity.translation == Vector3(5.0, 0.0, 0.0)
    assert events == [True]