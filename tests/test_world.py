"""Tests for nearest-hit search and the shadow test."""

import pytest

from phongtracer.core.vector import Vector3
from phongtracer.core.ray import Ray
from phongtracer.geometry.sphere import Sphere
from phongtracer.geometry.triangle import Triangle
from phongtracer.geometry.world import Scene, is_occluded, nearest_hit
from phongtracer.materials.light import Light


@pytest.fixture
def light_behind(white):
    return Light(Vector3(0, 0, 10), white)


class TestNearestHit:

    def test_empty_scene(self, forward_ray):
        assert nearest_hit(forward_ray, []) is None

    def test_picks_closest_regardless_of_order(self, forward_ray, white_material):
        far = Sphere(Vector3(0, 0, 20), 1.0, white_material)
        near = Sphere(Vector3(0, 0, 10), 1.0, white_material)
        for objects in ([far, near], [near, far]):
            obj, rec = nearest_hit(forward_ray, objects)
            assert obj is near
            assert rec.point.z == pytest.approx(9.0)

    def test_sphere_against_triangle(self, forward_ray, white_material):
        sphere = Sphere(Vector3(0, 0, 10), 1.0, white_material)
        wall = Triangle(Vector3(-1, -1, 5), Vector3(1, -1, 5), Vector3(0, 1, 5), white_material)
        obj, _ = nearest_hit(forward_ray, [sphere, wall])
        assert obj is wall

    def test_tie_keeps_first(self, forward_ray, white_material):
        a = Sphere(Vector3(0, 0, 10), 1.0, white_material)
        b = Sphere(Vector3(0, 0, 10), 1.0, white_material)
        obj, _ = nearest_hit(forward_ray, [a, b])
        assert obj is a


class TestOcclusion:

    def test_own_object_is_excluded(self, forward_ray, white_material, light_behind):
        sphere = Sphere(Vector3(0, 0, 5), 1.0, white_material)
        rec = sphere.intersect(forward_ray)
        assert not is_occluded(rec, light_behind, [sphere], exclude=sphere)
        # Without the exclusion the far side of the sphere blocks the light
        assert is_occluded(rec, light_behind, [sphere], exclude=None)

    def test_blocker_between(self, forward_ray, white_material, white):
        sphere = Sphere(Vector3(0, 0, 5), 1.0, white_material)
        blocker = Sphere(Vector3(-1.5, 0, 2.5), 0.5, white_material)
        rec = sphere.intersect(forward_ray)
        light = Light(Vector3(-3, 0, 1), white)
        assert is_occluded(rec, light, [sphere, blocker], exclude=sphere)

    def test_blocker_beyond_light(self, forward_ray, white_material, white):
        sphere = Sphere(Vector3(0, 0, 5), 1.0, white_material)
        blocker = Sphere(Vector3(-1.5, 0, 2.5), 0.5, white_material)
        rec = sphere.intersect(forward_ray)
        light = Light(Vector3(-1, 0, 3), white)
        assert not is_occluded(rec, light, [sphere, blocker], exclude=sphere)


class TestScene:

    def test_add_and_clear(self, white_material, white):
        scene = Scene()
        scene.add(Sphere(Vector3(0, 0, 5), 1.0, white_material))
        scene.add_light(Light(Vector3(0, 0, 0), white))
        assert len(scene) == 1
        assert len(scene.lights) == 1
        scene.clear()
        assert len(scene) == 0
        assert scene.lights == []

    def test_keeps_insertion_order(self, white_material):
        spheres = [Sphere(Vector3(0, 0, z), 1.0, white_material) for z in (5, 10, 15)]
        scene = Scene(objects=spheres)
        assert scene.objects == spheres
        assert scene.objects is not spheres

    def test_delegates(self, forward_ray, white_material, light_behind):
        sphere = Sphere(Vector3(0, 0, 5), 1.0, white_material)
        scene = Scene([sphere], [light_behind])
        obj, rec = scene.nearest_hit(forward_ray)
        assert obj is sphere
        assert not scene.is_occluded(rec, light_behind, exclude=sphere)
