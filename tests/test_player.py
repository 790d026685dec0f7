import math

import numpy as np
import pytest

from celroll.camera import Camera
from celroll.components import Component, ComponentType, GameObject, ObjectType
from celroll.input import Action
from celroll.platform import IcePlatform, JumpPlatform, Platform
from celroll.player import Player
from celroll.rotation import Quaternion


class FakeTransform(Component):
    component_type = ComponentType.TRANSFORM

    def __init__(self, position=(0.0, 0.0, 0.0), scale=(1.0, 1.0, 1.0)):
        super().__init__()
        self.position = np.array([*position, 1.0])
        self.previous_position = self.position.copy()
        self.scale = np.array(scale, dtype=float)
        self.previous_scale = self.scale.copy()
        self.rotation = Quaternion()
        self.previous_rotation = Quaternion()

    def save_state(self):
        self.previous_position = self.position.copy()
        self.previous_scale = self.scale.copy()
        self.previous_rotation = self.rotation


class FakeRigidBody(Component):
    component_type = ComponentType.RIGID_BODY

    def __init__(self):
        super().__init__()
        self.velocity = np.zeros(4)
        self.is_grounded = False
        self.forces = []
        self.sources = []
        self.init_calls = 0

    def add_input_force(self, force, delta_time):
        self.forces.append((np.array(force), delta_time))

    def init_values(self):
        self.velocity = np.zeros(4)
        self.init_calls += 1

    def add_gravitational_source(self, source):
        self.sources.append(source)


class FakeGravity(Component):
    component_type = ComponentType.GRAVITY


class FakeAnimation(Component):
    component_type = ComponentType.ANIMATION


class FakeSurface(Component):
    component_type = ComponentType.PHYSICS_MATERIAL

    def __init__(self, friction, bounciness):
        super().__init__()
        self.friction = friction
        self.bounciness = bounciness


class Thing(GameObject):
    def __init__(self, kind, with_surface=False):
        super().__init__()
        self.kind = kind
        if with_surface:
            self.add_component(FakeTransform())
            self.add_component(FakeSurface(0.5, 0.5))

    def object_type(self):
        return self.kind


class FakeShader:
    def set_mat4(self, name, value):
        pass

    def set_float(self, name, value):
        pass

    def set_vec3(self, name, value):
        pass


class FakeMaterial:
    def __init__(self):
        self.shader = FakeShader()


class FakeMesh:
    def draw(self, material):
        pass


def make_player(position=(0.0, 0.0, 0.0), **kwargs):
    camera = Camera(FakeTransform(), -90.0, -30.0)
    rigid = FakeRigidBody()
    gravity = FakeGravity()
    player = Player(camera, FakeTransform(position), rigid, gravity, **kwargs)
    return player, camera, rigid, gravity


UP = np.array([0.0, 1.0, 0.0, 0.0])


def test_construction_disables_physics_and_targets_camera():
    player, camera, rigid, gravity = make_player()
    assert rigid.enabled is False
    assert gravity.enabled is False
    assert camera.is_free_cam is False
    assert np.linalg.norm(camera.position()[:3]) == pytest.approx(10.0)


def test_object_type():
    player, *_ = make_player()
    assert player.object_type() is ObjectType.PLAYER


def test_forward_input_pushes_in_camera_plane():
    player, camera, rigid, gravity = make_player()
    player.process_keyboard(Action.FORWARD, 0.25)
    assert rigid.enabled and gravity.enabled
    force, dt = rigid.forces[-1]
    assert dt == 0.25
    assert force[1] == pytest.approx(0.0)
    assert np.linalg.norm(force[:3]) == pytest.approx(player.movement_speed * 10.0)
    assert force[0] * camera.front[0] + force[2] * camera.front[2] > 0.0


def test_left_and_right_are_opposite():
    player, _, rigid, _ = make_player()
    player.process_keyboard(Action.LEFT, 0.1)
    player.process_keyboard(Action.RIGHT, 0.1)
    left, right = rigid.forces[0][0], rigid.forces[1][0]
    assert np.allclose(left, -right)


def test_disabled_input_is_ignored():
    player, _, rigid, gravity = make_player()
    player.input_enabled = False
    player.process_keyboard(Action.FORWARD, 0.1)
    assert rigid.forces == []
    assert rigid.enabled is False


def test_jump_from_ground():
    player, _, rigid, _ = make_player()
    player.set_grounded(True)
    platform = Platform(FakeTransform())
    player.handle_collision(platform, UP, 0.0, 0.016)
    assert np.allclose(player.current_surface_normal, UP)
    before = player.position()
    player.process_keyboard(Action.JUMP, 0.016)
    assert np.allclose(rigid.velocity, UP * 10.0)
    assert player.position()[1] == pytest.approx(before[1] + 0.1)
    assert rigid.forces[-1][0][1] == 0.0


def test_jump_in_air_does_nothing():
    player, _, rigid, _ = make_player()
    player.process_keyboard(Action.JUMP, 0.016)
    assert np.allclose(rigid.velocity, np.zeros(4))


def test_platform_collision_bounces_and_pushes_out():
    player, _, rigid, _ = make_player()
    rigid.velocity = np.array([3.0, -4.0, 0.0, 0.0])
    player.handle_collision(JumpPlatform(FakeTransform()), UP, 0.4, 0.016)
    assert rigid.velocity[1] > 0.0
    assert 0.0 < rigid.velocity[0] < 3.0
    assert player.position()[1] == pytest.approx(0.2)


def test_other_object_reflects_velocity():
    player, _, rigid, _ = make_player()
    rigid.velocity = np.array([3.0, -4.0, 0.0, 0.0])
    player.handle_collision(Thing(ObjectType.OTHER, with_surface=True), UP, 0.0, 0.016)
    assert np.allclose(rigid.velocity, [3.0, 4.0, 0.0, 0.0])


def test_collision_without_surface_is_ignored():
    player, _, rigid, _ = make_player()
    rigid.velocity = np.array([1.0, -1.0, 0.0, 0.0])
    player.handle_collision(Thing(ObjectType.OTHER), UP, 1.0, 0.016)
    assert np.allclose(rigid.velocity, [1.0, -1.0, 0.0, 0.0])
    assert np.allclose(player.position(), [0.0, 0.0, 0.0, 1.0])


def test_death_with_animation_and_respawn():
    calls = {}

    def factory(points, duration, on_end):
        calls["points"] = points
        calls["duration"] = duration
        calls["on_end"] = on_end
        return FakeAnimation()

    player, _, rigid, gravity = make_player((3.0, 4.0, 5.0), respawn_animation=factory)
    rigid.enable()
    gravity.enable()
    player.handle_collision(Thing(ObjectType.DEATH_BOX), UP, 0.0, 0.016)

    assert player.is_on_death_routine is True
    assert player.input_enabled is False
    assert rigid.enabled is False and gravity.enabled is False
    assert calls["duration"] == 5.0
    assert np.allclose(calls["points"][-1], -player.position()[:3])
    assert player.get_component(ComponentType.ANIMATION) is not None

    rigid.velocity = np.array([1.0, 0.0, 0.0, 0.0])
    player.handle_collision(Thing(ObjectType.OTHER, with_surface=True), UP, 1.0, 0.016)
    assert np.allclose(rigid.velocity, [1.0, 0.0, 0.0, 0.0])

    calls["on_end"]()
    assert player.is_on_death_routine is False
    assert player.input_enabled is True
    assert rigid.init_calls == 1
    assert player.get_component(ComponentType.ANIMATION) is None


def test_star_without_animation_respawns_at_spawn():
    player, _, rigid, _ = make_player((7.0, -3.0, 2.0))
    player.handle_collision(Thing(ObjectType.STAR), UP, 0.0, 0.016)
    assert np.allclose(player.position(), [0.0, 0.0, 0.0, 1.0])
    assert player.input_enabled is True
    assert rigid.init_calls == 1


def test_set_position_round_trip():
    player, *_ = make_player()
    player.set_position((1.5, -2.0, 8.0))
    assert np.allclose(player.position(), [1.5, -2.0, 8.0, 1.0])


def test_update_rotation_without_velocity_keeps_rotation():
    player, *_ = make_player()
    player.update_rotation(0.1)
    assert player.transform.rotation == Quaternion()


def test_update_rotation_vertical_velocity_keeps_rotation():
    player, _, rigid, _ = make_player()
    rigid.velocity = np.array([0.0, -5.0, 0.0, 0.0])
    player.update_rotation(0.1)
    assert player.transform.rotation == Quaternion()


def _rolled_angle(is_ice):
    player, _, rigid, _ = make_player()
    rigid.velocity = np.array([2.0, 0.0, 0.0, 0.0])
    player.update_rotation(0.1, is_ice)
    rotation = player.transform.rotation
    assert rotation.length() == pytest.approx(1.0)
    return 2.0 * math.acos(min(1.0, abs(rotation.w)))


def test_ice_rolls_less():
    normal = _rolled_angle(False)
    ice = _rolled_angle(True)
    assert normal > 0.0
    assert ice == pytest.approx(0.2 * normal)


def test_grounded_ice_contact_rotates_less():
    player, _, rigid, _ = make_player()
    player.set_grounded(True)
    rigid.velocity = np.array([2.0, 0.0, 0.0, 0.0])
    player.handle_collision(IcePlatform(FakeTransform()), UP, 0.0, 0.1)
    assert player.transform.rotation != Quaternion()
    assert np.allclose(player.current_surface_normal, UP)


def test_add_gravitational_source_forwards():
    player, _, rigid, _ = make_player()
    source = object()
    player.add_gravitational_source(source)
    assert rigid.sources == [source]


def test_render_keeps_camera_on_player():
    player, camera, _, _ = make_player(mesh=FakeMesh(), material=FakeMaterial())
    player.set_position((5.0, 0.0, 0.0))
    player.render(1.0)
    offset = camera.position() - player.position()
    assert np.linalg.norm(offset[:3]) == pytest.approx(10.0)


def test_render_without_mesh_raises():
    player, *_ = make_player()
    with pytest.raises(RuntimeError):
        player.render(0.5)