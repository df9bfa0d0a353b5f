import unittest

from mazecraft.maze import FINISH_GLYPH, START_GLYPH, WALL_GLYPH, Maze


class TestBasicMaze(unittest.TestCase):
    def setUp(self):
        self.m = Maze.create(3, 3, seed=42)

    def test_corner_roles(self):
        self.assertTrue(self.m.cell_at(0, 2).is_start)
        self.assertFalse(self.m.cell_at(0, 2).is_finish)
        self.assertTrue(self.m.cell_at(2, 0).is_finish)
        self.assertFalse(self.m.cell_at(2, 0).is_start)

    def test_single_start_and_finish(self):
        starts = [c for c in self.m.grid.cells() if c.is_start]
        finishes = [c for c in self.m.grid.cells() if c.is_finish]
        self.assertEqual(len(starts), 1)
        self.assertEqual(len(finishes), 1)

    def test_render_shape_and_top_row(self):
        lines = self.m.render().split("\n")
        self.assertEqual(len(lines), 9)
        for line in lines:
            self.assertEqual(len(line), 9)
        self.assertEqual(lines[0][0:3], WALL_GLYPH * 3)

    def test_markers_in_render(self):
        lines = self.m.render().split("\n")
        # start block is the bottom-left, finish block the top-right
        self.assertEqual(lines[7][1], START_GLYPH)
        self.assertEqual(lines[1][7], FINISH_GLYPH)

    def test_dimensions(self):
        self.assertEqual(self.m.width, 3)
        self.assertEqual(self.m.height, 3)
        self.assertEqual(len(self.m.grid), 9)


if __name__ == "__main__":
    unittest.main()
