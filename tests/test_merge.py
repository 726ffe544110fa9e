from config_station.domain.services.merge import merge_config


def test_env_overrides_shared_keys_without_mutating_inputs():
    file_map = {"name": "herp", "port": 80}
    env_map = {"name": "wins", "id": "1"}

    merged = merge_config(file_map, env_map)

    assert merged == {"name": "wins", "port": 80, "id": "1"}
    assert file_map == {"name": "herp", "port": 80}
    assert env_map == {"name": "wins", "id": "1"}
    assert merged is not file_map and merged is not env_map


def test_single_source_passes_through():
    assert merge_config({}, {"id": "1"}) == {"id": "1"}
    assert merge_config({"id": 1}, {}) == {"id": 1}
