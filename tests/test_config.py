from flightspotter import config as config_module
from flightspotter.config import Settings, get_opensky_credentials
from flightspotter.main import default_view_config


class FakeSSM:
    def __init__(self, values: dict[str, str]):
        self.values = values
        self.requested: list[str] = []

    def get_parameter(self, Name: str, WithDecryption: bool = False):
        self.requested.append(Name)
        return {"Parameter": {"Value": self.values.get(Name, "")}}


def test_opensky_auth_prefers_explicit_credentials(monkeypatch):
    fake = FakeSSM({})
    monkeypatch.setattr(config_module, "_ssm_client", fake)
    settings = Settings(opensky_username="spotter", opensky_password="pw", opensky_ssm_prefix="/fs")

    assert settings.opensky_auth() == ("spotter", "pw")
    assert fake.requested == []


def test_opensky_auth_reads_ssm(monkeypatch):
    fake = FakeSSM({"/fs/opensky/username": "ssm-user", "/fs/opensky/password": "ssm-pw"})
    monkeypatch.setattr(config_module, "_ssm_client", fake)
    get_opensky_credentials.cache_clear()
    settings = Settings(opensky_username=None, opensky_password=None, opensky_ssm_prefix="/fs/opensky")

    assert settings.opensky_auth() == ("ssm-user", "ssm-pw")
    assert settings.opensky_auth() == ("ssm-user", "ssm-pw")
    assert fake.requested == ["/fs/opensky/username", "/fs/opensky/password"]
    get_opensky_credentials.cache_clear()


def test_opensky_auth_empty_ssm_values_mean_anonymous(monkeypatch):
    monkeypatch.setattr(config_module, "_ssm_client", FakeSSM({}))
    get_opensky_credentials.cache_clear()
    settings = Settings(opensky_username=None, opensky_password=None, opensky_ssm_prefix="/empty")

    assert settings.opensky_auth() is None
    get_opensky_credentials.cache_clear()


def test_opensky_auth_defaults_to_anonymous():
    settings = Settings(opensky_username=None, opensky_password=None, opensky_ssm_prefix=None)
    assert settings.opensky_auth() is None


def test_default_view_config_from_settings(monkeypatch):
    monkeypatch.setattr(config_module.settings, "observer_lat", 51.47)
    monkeypatch.setattr(config_module.settings, "observer_lon", -0.45)
    monkeypatch.setattr(config_module.settings, "observer_left_bearing", 350.0)
    monkeypatch.setattr(config_module.settings, "observer_right_bearing", 10.0)
    monkeypatch.setattr(config_module.settings, "observer_max_distance_km", 15.0)

    view = default_view_config()

    assert view is not None
    assert view.location.latitude == 51.47
    assert view.left_bearing == 350.0
    assert view.max_distance == 15.0


def test_default_view_config_missing_or_invalid(monkeypatch):
    monkeypatch.setattr(config_module.settings, "observer_lat", None)
    monkeypatch.setattr(config_module.settings, "observer_lon", None)
    assert default_view_config() is None

    monkeypatch.setattr(config_module.settings, "observer_lat", 51.47)
    monkeypatch.setattr(config_module.settings, "observer_lon", -0.45)
    monkeypatch.setattr(config_module.settings, "observer_max_distance_km", -1.0)
    assert default_view_config() is None
