from vivotk.upsample import PointCloud, PointXyzRgba, upsample


def _pair(distance):
    first = PointXyzRgba(0.0, 0.0, 0.0, 200, 100, 50, 255)
    second = PointXyzRgba(distance, 0.0, 0.0, 20, 40, 60, 255)
    return PointCloud([first, second])


def test_factor_one_returns_input():
    cloud = _pair(1.0)
    assert upsample(cloud, 1) is cloud


def test_close_pair_gains_interpolated_points():
    cloud = _pair(1.0)
    originals = list(cloud.points)
    result = upsample(cloud, 2)
    assert result.number_of_points == 6
    assert result.points[-2:] == originals
    interpolated = result.points[:-2]
    assert all(0.0 < p.x <= 1.0 for p in interpolated)
    xs = [p.x for p in interpolated]
    assert xs == sorted(xs)


def test_last_interpolated_point_sits_on_neighbour():
    cloud = _pair(1.0)
    first = cloud.points[0]
    result = upsample(cloud, 2)
    last = result.points[-3]
    assert last.x == 1.0
    assert (last.r, last.g, last.b, last.a) == (first.r, first.g, first.b, first.a)


def test_distant_points_are_not_interpolated():
    cloud = _pair(10.0)
    originals = list(cloud.points)
    result = upsample(cloud, 2)
    assert result.points == originals


def test_coincident_points_get_zero_colour():
    a = PointXyzRgba(1.0, 1.0, 1.0, 10, 20, 30, 255)
    b = PointXyzRgba(1.0, 1.0, 1.0, 40, 50, 60, 255)
    result = upsample(PointCloud([a, b]), 2)
    added = result.points[:-2]
    assert len(added) == 4
    assert all((p.r, p.g, p.b, p.a) == (0, 0, 0, 0) for p in added)