# ==============================================================================
# File: tests/test_placement.py
# Purpose: 2D spawn points -> placed objects in world space.
# ==============================================================================
import sys
import unittest
from pathlib import Path

sys.path.append(str(Path(__file__).parent.parent))

from scatter_engine.core.preset import ScatterSettings, load_preset
from scatter_engine.core.utils.rng import RNG, seed_from_any
from scatter_engine.world.placement import GrassSpawner, place_objects, world_positions

SETTINGS = ScatterSettings(
    area_half_length=10.0,
    num_rings=40,
    ring_radius_increment=0.5,
    stagger_ring_modulo=2,
    stagger_ring_offset=0.25,
    circle_center_offset=2.0,
)


class TestWorldPositions(unittest.TestCase):
    def test_plane_maps_to_xz_plus_center(self):
        pos = world_positions([(1.0, 2.0), (-3.0, 4.5)], center=(10.0, 5.0, -1.0))
        self.assertEqual(pos.shape, (2, 3))
        self.assertEqual(pos[0].tolist(), [11.0, 5.0, 1.0])
        self.assertEqual(pos[1].tolist(), [7.0, 5.0, 3.5])

    def test_empty(self):
        self.assertEqual(world_positions([]).shape, (0, 3))


class TestPlaceObjects(unittest.TestCase):
    points = [(0.0, 0.0), (1.0, -1.0), (2.5, 3.0)]

    def test_one_object_per_point_in_order(self):
        placed = place_objects(self.points, prefab_id="grass_a", seed=3)
        self.assertEqual(len(placed), 3)
        self.assertEqual([p.position for p in placed],
                         [(0.0, 0.0, 0.0), (1.0, 0.0, -1.0), (2.5, 0.0, 3.0)])
        self.assertTrue(all(p.prefab_id == "grass_a" for p in placed))
        self.assertTrue(all(p.scale == 1.0 for p in placed))

    def test_yaw_only_and_in_range(self):
        for obj in place_objects(self.points * 20, seed=11):
            pitch, yaw, roll = obj.rotation
            self.assertEqual((pitch, roll), (0.0, 0.0))
            self.assertGreaterEqual(yaw, 0.0)
            self.assertLess(yaw, 360.0)

    def test_same_seed_same_rotations(self):
        a = place_objects(self.points, seed="meadow")
        b = place_objects(self.points, seed="meadow")
        c = place_objects(self.points, seed="other")
        self.assertEqual([o.rotation for o in a], [o.rotation for o in b])
        self.assertNotEqual([o.rotation for o in a], [o.rotation for o in c])

    def test_fixed_rotation(self):
        placed = place_objects(self.points, random_yaw=False)
        self.assertTrue(all(o.rotation == (0.0, 0.0, 0.0) for o in placed))


class TestGrassSpawner(unittest.TestCase):
    def test_calculate_then_spawn(self):
        spawner = GrassSpawner(SETTINGS, prefab_id="grass", center=(100.0, 0.0, 50.0))
        points = spawner.calculate_points()
        placed = spawner.spawn(points, seed=1)
        self.assertEqual(len(placed), len(points))
        for (x, y), obj in zip(points, placed):
            self.assertAlmostEqual(obj.position[0], x + 100.0)
            self.assertAlmostEqual(obj.position[2], y + 50.0)

    def test_spawn_computes_points_when_not_given(self):
        spawner = GrassSpawner(SETTINGS)
        self.assertEqual(len(spawner.spawn()), len(spawner.calculate_points()))

    def test_from_preset(self):
        preset = load_preset("grass/meadow_dense")
        spawner = GrassSpawner.from_preset(preset)
        self.assertEqual(spawner.prefab_id, "grass_tall")
        self.assertEqual(spawner.settings, preset.scatter)
        self.assertEqual(spawner.center, (0.0, 0.0, 0.0))


class TestRNG(unittest.TestCase):
    def test_uniform_range(self):
        rng = RNG(5)
        values = [rng.uniform() for _ in range(1000)]
        self.assertTrue(all(0.0 <= v < 1.0 for v in values))

    def test_string_seed_is_stable(self):
        self.assertEqual(seed_from_any("grass"), seed_from_any(b"grass"))
        self.assertEqual(RNG("grass").u64(), RNG("grass").u64())

    def test_bad_seed_type(self):
        with self.assertRaises(TypeError):
            seed_from_any(1.5)


if __name__ == "__main__":
    unittest.main()
