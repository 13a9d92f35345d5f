import logging

import pytest

from gmaps_services.keys import DistanceMatrixKey, GeocodingKey, Status


@pytest.mark.parametrize("key", [k for k in DistanceMatrixKey if k is not DistanceMatrixKey.UNKNOWN])
def test_distance_matrix_key_lookup_matches_every_known_name(key):
    assert DistanceMatrixKey.get(key.value) is key


@pytest.mark.parametrize("key", [k for k in GeocodingKey if k is not GeocodingKey.UNKNOWN])
def test_geocoding_key_lookup_matches_every_known_name(key):
    assert GeocodingKey.get(key.value) is key


@pytest.mark.parametrize("name", ["fare", "duration_in_traffic", "", "STATUS", "Status", "UNKNOWN"])
def test_unknown_names_map_to_unknown(name):
    assert DistanceMatrixKey.get(name) is DistanceMatrixKey.UNKNOWN
    assert GeocodingKey.get(name) is GeocodingKey.UNKNOWN


def test_registries_are_independent():
    assert GeocodingKey.get("rows") is GeocodingKey.UNKNOWN
    assert DistanceMatrixKey.get("formatted_address") is DistanceMatrixKey.UNKNOWN


def test_status_lookup():
    assert Status.get("OK") is Status.OK
    assert Status.get("ZERO_RESULTS") is Status.ZERO_RESULTS
    assert Status.get("OVER_QUERY_LIMIT") is Status.OVER_QUERY_LIMIT
    assert Status.get("UNKNOWN_ERROR") is Status.UNKNOWN_ERROR
    assert Status.get("OVER_DAILY_LIMIT") is Status.UNKNOWN
    assert Status.get("ok") is Status.UNKNOWN


def test_unknown_name_is_logged_once(caplog):
    caplog.set_level(logging.INFO, logger="gmaps_services.keys")

    GeocodingKey.get("navigation_points_once")
    GeocodingKey.get("navigation_points_once")

    messages = [r.getMessage() for r in caplog.records if "navigation_points_once" in r.getMessage()]
    assert len(messages) == 1


def test_logged_names_are_capped(monkeypatch, caplog):
    from gmaps_services import keys

    monkeypatch.setattr(keys, "_reported", set())
    monkeypatch.setattr(keys, "_MAX_REPORTED", 2)
    caplog.set_level(logging.INFO, logger="gmaps_services.keys")

    for name in ("extra_1", "extra_2", "extra_3", "extra_4"):
        assert DistanceMatrixKey.get(name) is DistanceMatrixKey.UNKNOWN

    assert len(keys._reported) == 2
    assert [r.getMessage() for r in caplog.records] == [
        "Unknown response key: 'extra_1', skipping it",
        "Unknown response key: 'extra_2', skipping it",
    ]
