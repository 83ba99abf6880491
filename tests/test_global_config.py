import pytest

from docindex.document_creators import MAX_INPUT_SIZE_BYTES
from global_config import GlobalConfig


@pytest.fixture
def clean_env(monkeypatch):
    for name in GlobalConfig.model_fields:
        monkeypatch.delenv(name.upper(), raising=False)


def test_defaults_describe_a_local_cluster(clean_env):
    config = GlobalConfig(_env_file=None)

    assert config.opensearch_host == "localhost"
    assert config.opensearch_port == 9200
    assert config.auth_mode == "none"
    assert config.max_input_bytes == MAX_INPUT_SIZE_BYTES


def test_target_index_comes_from_the_request_not_the_settings():
    assert "index_name" not in GlobalConfig.model_fields
