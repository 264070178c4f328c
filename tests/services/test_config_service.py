"""Tests for ConfigService."""

import json
from pathlib import Path

import pytest
from pytest_mock import MockerFixture

from domain.config import Config
from domain.exceptions import ServiceError
from domain.resolution import DEFAULT_CATALOG, Resolution, ResolutionCatalog
from services.bing_service import BingWallpaperService
from services.config_service import ConfigService


@pytest.fixture
def config_service(temp_dir: Path) -> ConfigService:
    """Create ConfigService with temporary config file."""
    config_file = temp_dir / "config.json"
    return ConfigService(config_file=config_file)


def test_config_service_init(config_service: ConfigService):
    """Test ConfigService initialization."""
    assert config_service.config_dir == config_service.config_file.parent
    assert not config_service.config_file.exists()


def test_default_config_path(mocker: MockerFixture, temp_dir: Path):
    mocker.patch("services.config_service.Path.home", return_value=temp_dir)
    service = ConfigService()
    assert service.config_file == temp_dir / ".config" / "bingwall" / "config.json"


def test_load_default_config(config_service: ConfigService):
    """Test loading default configuration creates the file."""
    config = config_service.load_config()
    assert config.base_url == "http://bing.com"
    assert config.resolutions == DEFAULT_CATALOG
    assert config.market is None
    assert config_service.config_file.exists()


def test_load_existing_config(config_service: ConfigService):
    """Test loading existing configuration."""
    with open(config_service.config_file, "w") as f:
        json.dump(
            {
                "base_url": "https://www.bing.com",
                "resolutions": [[800, 600], [1366, 768]],
                "market": "ja-JP",
            },
            f,
        )

    config = config_service.load_config()
    assert config.base_url == "https://www.bing.com"
    assert list(config.resolutions) == [Resolution(800, 600), Resolution(1366, 768)]
    assert config.market == "ja-JP"


def test_save_config(config_service: ConfigService):
    """Test saving configuration."""
    config = Config(
        base_url="https://www.bing.com",
        resolutions=ResolutionCatalog.from_pairs([(1920, 1080)]),
        market="en-US",
    )
    config_service.save_config(config)

    with open(config_service.config_file) as f:
        saved = json.load(f)
    assert saved == {
        "base_url": "https://www.bing.com",
        "resolutions": [[1920, 1080]],
        "market": "en-US",
    }
    assert config_service.get_config() is config


def test_save_invalid_config(config_service: ConfigService):
    with pytest.raises(ServiceError, match="Failed to save configuration"):
        config_service.save_config(Config(base_url="not a url"))
    assert not config_service.config_file.exists()


def test_load_invalid_json(config_service: ConfigService):
    config_service.config_file.write_text("{ not json")
    with pytest.raises(ServiceError, match="Failed to load configuration"):
        config_service.load_config()


@pytest.mark.parametrize(
    "data",
    [
        {"base_url": "bing.com"},
        {"resolutions": [["wide", 768]]},
        {"resolutions": 5},
        ["not", "an", "object"],
    ],
)
def test_load_invalid_values(config_service: ConfigService, data):
    config_service.config_file.write_text(json.dumps(data))
    with pytest.raises(ServiceError) as exc_info:
        config_service.load_config()
    assert exc_info.value.__cause__ is not None


def test_get_config_loads_once(config_service: ConfigService):
    first = config_service.get_config()
    assert config_service.get_config() is first


def test_service_from_saved_config(config_service: ConfigService):
    config_service.save_config(Config(base_url="https://cn.bing.com", market="zh-CN"))

    service = BingWallpaperService.from_config(ConfigService(config_service.config_file).load_config())
    assert service.base_url == "https://cn.bing.com"
    assert service.config.market == "zh-CN"
