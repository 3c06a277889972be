"""Offline Phong-shaded ray tracer for spheres and triangles."""
from phongtracer.core.vector import Vector3
from phongtracer.core.ray import Ray
from phongtracer.geometry.hittable import HitRecord, Hittable
from phongtracer.geometry.sphere import Sphere
from phongtracer.geometry.triangle import Triangle
from phongtracer.geometry.world import Scene
from phongtracer.materials.material import Material
from phongtracer.materials.light import Light, LightMode
from phongtracer.camera.camera import Camera
from phongtracer.renderer.raytracer import Renderer, trace_phong

__version__ = "0.1.0"
