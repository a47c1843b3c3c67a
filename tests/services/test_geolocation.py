"""
거리 계산 테스트
"""
import pytest

from gymcheckin.services.geolocation import calculate_distance, is_within_radius

COORDINATES = [
    (-23.1309312, -46.563328),
    (-23.0835318, -46.5407408),
    (37.5665, 126.9780),
    (0.0, 0.0),
    (89.9, -179.9),
    (-45.0, 179.9),
]


@pytest.mark.parametrize("a", COORDINATES)
@pytest.mark.parametrize("b", COORDINATES)
def test_distance_is_symmetric(a, b):
    assert calculate_distance(*a, *b) == calculate_distance(*b, *a)


@pytest.mark.parametrize("point", COORDINATES)
def test_distance_to_itself_is_zero(point):
    assert calculate_distance(*point, *point) == 0


def test_one_degree_of_latitude():
    """위도 1도 ≈ 111.19km"""
    assert calculate_distance(0.0, 0.0, 1.0, 0.0) == pytest.approx(111194.93, rel=1e-6)


def test_distant_gym_is_outside_radius():
    distance = calculate_distance(-23.1309312, -46.563328, -23.0835318, -46.5407408)
    assert distance > 1000
    assert not is_within_radius(-23.1309312, -46.563328, -23.0835318, -46.5407408, radius_meters=100)


def test_nearby_point_is_inside_radius():
    # 위도 0.0005도 ≈ 55.6m
    assert is_within_radius(-23.1309312, -46.563328, -23.1304312, -46.563328, radius_meters=100)
    assert not is_within_radius(-23.1309312, -46.563328, -23.1304312, -46.563328, radius_meters=50)
