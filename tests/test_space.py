import unittest

from cube_fold.space import DIRECTIONS, Direction, Point, Rotation, rotate_local


class TestRotationGroup(unittest.TestCase):
    def test_quarter_turns_four_times_is_identity(self):
        for rotation in (Rotation.LEFT, Rotation.RIGHT):
            total = Rotation.NONE
            for _ in range(4):
                total = total.compose(rotation)
            self.assertIs(total, Rotation.NONE, msg=f"Failed for {rotation}")

    def test_half_twice_is_identity(self):
        self.assertIs(Rotation.HALF.compose(Rotation.HALF), Rotation.NONE)

    def test_compose_with_inverse_is_identity(self):
        for rotation in Rotation:
            self.assertIs(rotation.compose(rotation.inverse()), Rotation.NONE)
            self.assertIs(rotation.inverse().compose(rotation), Rotation.NONE)

    def test_inverse_values(self):
        self.assertIs(Rotation.NONE.inverse(), Rotation.NONE)
        self.assertIs(Rotation.HALF.inverse(), Rotation.HALF)
        self.assertIs(Rotation.LEFT.inverse(), Rotation.RIGHT)
        self.assertIs(Rotation.RIGHT.inverse(), Rotation.LEFT)

    def test_composition_is_associative(self):
        for a in Rotation:
            for b in Rotation:
                for c in Rotation:
                    self.assertIs(a.compose(b).compose(c), a.compose(b.compose(c)))

    def test_from_char(self):
        self.assertIs(Rotation.from_char("L"), Rotation.LEFT)
        self.assertIs(Rotation.from_char("R"), Rotation.RIGHT)
        self.assertIs(Rotation.from_char("H"), Rotation.HALF)
        self.assertIs(Rotation.from_char("N"), Rotation.NONE)
        with self.assertRaises(ValueError):
            Rotation.from_char("X")


class TestDirection(unittest.TestCase):
    def test_password_codes(self):
        self.assertEqual(Direction.RIGHT.as_int(), 0)
        self.assertEqual(Direction.DOWN.as_int(), 1)
        self.assertEqual(Direction.LEFT.as_int(), 2)
        self.assertEqual(Direction.UP.as_int(), 3)

    def test_vectors_point_down_the_screen(self):
        self.assertEqual(Direction.UP.as_vector(), Point(0, -1))
        self.assertEqual(Direction.DOWN.as_vector(), Point(0, 1))
        self.assertEqual(Direction.LEFT.as_vector(), Point(-1, 0))
        self.assertEqual(Direction.RIGHT.as_vector(), Point(1, 0))

    def test_right_turn_is_clockwise(self):
        self.assertIs(Direction.UP.rotate(Rotation.RIGHT), Direction.RIGHT)
        self.assertIs(Direction.RIGHT.rotate(Rotation.RIGHT), Direction.DOWN)
        self.assertIs(Direction.UP.rotate(Rotation.LEFT), Direction.LEFT)

    def test_rotate_respects_composition(self):
        for direction in DIRECTIONS:
            for a in Rotation:
                for b in Rotation:
                    self.assertIs(direction.rotate(a).rotate(b), direction.rotate(a.compose(b)))

    def test_inverse_is_half_turn_and_negates_vector(self):
        for direction in DIRECTIONS:
            self.assertIs(direction.inverse(), direction.rotate(Rotation.HALF))
            self.assertEqual(direction.inverse().as_vector(), -direction.as_vector())

    def test_between_finds_unique_rotation(self):
        for start in DIRECTIONS:
            for end in DIRECTIONS:
                rotation = Rotation.between(start, end)
                self.assertIs(start.rotate(rotation), end)


class TestPoint(unittest.TestCase):
    def test_arithmetic(self):
        a = Point(3, -2)
        b = Point(1, 5)
        self.assertEqual(a + b, Point(4, 3))
        self.assertEqual(a - b, Point(2, -7))
        self.assertEqual(-a, Point(-3, 2))
        self.assertEqual(b.scale(4), Point(4, 20))
        self.assertEqual(str(a), "(3, -2)")

    def test_points_are_hashable_keys(self):
        table = {Point(1, 2): "a"}
        self.assertEqual(table[Point(1, 2)], "a")


class TestRotateLocal(unittest.TestCase):
    def test_rotation_moves_points_like_directions(self):
        size = 5
        origin = Point(2, 4)
        for rotation in Rotation:
            start = rotate_local(origin, rotation, size)
            for direction in DIRECTIONS:
                moved = rotate_local(origin + direction.as_vector(), rotation, size)
                self.assertEqual(moved - start, direction.rotate(rotation).as_vector())

    def test_corners_stay_on_the_face(self):
        size = 4
        corners = [Point(1, 1), Point(size, 1), Point(1, size), Point(size, size)]
        for rotation in Rotation:
            rotated = {rotate_local(c, rotation, size) for c in corners}
            self.assertEqual(rotated, set(corners))

    def test_half_turn_matches_two_quarter_turns(self):
        size = 4
        for x in range(1, size + 1):
            for y in range(1, size + 1):
                p = Point(x, y)
                twice = rotate_local(rotate_local(p, Rotation.LEFT, size), Rotation.LEFT, size)
                self.assertEqual(twice, rotate_local(p, Rotation.HALF, size))


if __name__ == "__main__":
    unittest.main()
