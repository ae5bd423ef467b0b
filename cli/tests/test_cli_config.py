from afinimaki_cli import config
from afinimaki_client.config_types import DEFAULT_ENDPOINT


def _use_tmp_config_dir(tmp_path, monkeypatch) -> None:
    def _config_dir(_: str) -> str:
        return str(tmp_path)

    monkeypatch.setattr(config, "user_config_dir", _config_dir)


def _clear_env(monkeypatch) -> None:
    for name in (config.ENV_API_KEY, config.ENV_API_SECRET, config.ENV_ENDPOINT_URL):
        monkeypatch.delenv(name, raising=False)


def test_load_config_defaults_when_missing(tmp_path, monkeypatch) -> None:
    _use_tmp_config_dir(tmp_path, monkeypatch)
    _clear_env(monkeypatch)
    cfg = config.load_config()
    assert cfg.endpoint_url == DEFAULT_ENDPOINT
    assert cfg.api_key == ""
    assert cfg.debug is False


def test_save_and_load_config(tmp_path, monkeypatch) -> None:
    _use_tmp_config_dir(tmp_path, monkeypatch)
    _clear_env(monkeypatch)
    cfg = config.AppConfig(
        endpoint_url="http://127.0.0.1:8080/RPC2",
        api_key="k" * 32,
        api_secret="s" * 32,
        timeout_s=3.5,
        debug=True,
    )

    path = config.save_config(cfg)
    contents = tmp_path.joinpath("config.toml").read_text(encoding="utf-8")

    assert path.endswith("config.toml")
    assert 'endpoint_url = "http://127.0.0.1:8080/RPC2"' in contents
    assert config.load_config() == cfg


def test_env_overrides_file(tmp_path, monkeypatch) -> None:
    _use_tmp_config_dir(tmp_path, monkeypatch)
    tmp_path.joinpath("config.toml").write_text(
        '\n'.join(
            [
                'endpoint_url = "http://file.test/RPC2"',
                f'api_key = "{"f" * 32}"',
                f'api_secret = "{"g" * 32}"',
                "",
            ]
        ),
        encoding="utf-8",
    )
    monkeypatch.setenv(config.ENV_API_KEY, "e" * 32)
    monkeypatch.delenv(config.ENV_API_SECRET, raising=False)
    monkeypatch.setenv(config.ENV_ENDPOINT_URL, "env.test/RPC2")

    cfg = config.load_config()
    assert cfg.api_key == "e" * 32
    assert cfg.api_secret == "g" * 32
    assert cfg.endpoint_url == "http://env.test/RPC2"

    assert config.load_config(env=False).api_key == "f" * 32


def test_from_toml_ignores_bad_values() -> None:
    cfg = config.from_toml({"timeout_s": "soon", "debug": "yes"})
    assert cfg.timeout_s == 15.0
    assert cfg.debug is False


def test_normalize_endpoint_url() -> None:
    assert config.normalize_endpoint_url("api.afinimaki.com/RPC2") == "http://api.afinimaki.com/RPC2"
    assert config.normalize_endpoint_url(" http://x.test/RPC2 ") == "http://x.test/RPC2"
    assert config.normalize_endpoint_url("https://x.test") == "https://x.test"
    assert config.normalize_endpoint_url("") == ""


def test_mask_secret() -> None:
    assert config.mask_secret("") == "(empty)"
    assert config.mask_secret("abcd") == "****"
    masked = config.mask_secret("abcd" + "x" * 24 + "wxyz")
    assert masked.startswith("abcd")
    assert masked.endswith("wxyz")
    assert "x" not in masked
