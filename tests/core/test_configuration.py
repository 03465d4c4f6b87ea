"""BaseConfiguration: tests for setters, credential caching and validation.

Tests cover:
    - hashed key is derived in either setter order and cached
    - get_hashed_key without credentials raises ConfigurationError
    - countrycode validation
    - client id and api key reject invalid values with ValidationError
    - api url normalization
    - version/module identifier forwarded to the transport
    - facade back-reference before/after binding
"""

import gc

import pytest

from core.config import SdkSettings
from core.configuration import BaseConfiguration
from core.credentials import derive_hashed_key
from core.domain.models import Donation, Receiver
from core.domain.registry import ModelRegistry
from core.errors import ConfigurationError, ElefundsException, StateError, ValidationError
from core.facade import Facade


class ShopDonation(Donation):
    shop_reference: str = ""


# ─── credentials ─────────────────────────────────────────────────

def test_hashed_key_same_in_either_setter_order():
    a = BaseConfiguration().set_client_id(42).set_api_key("secret")
    b = BaseConfiguration().set_api_key("secret").set_client_id(42)
    assert a.get_hashed_key() == b.get_hashed_key() == derive_hashed_key(42, "secret")


def test_hashed_key_missing_both_credentials_raises():
    with pytest.raises(ConfigurationError) as excinfo:
        BaseConfiguration().get_hashed_key()
    assert excinfo.value.code == 1347889008107


def test_hashed_key_missing_api_key_raises():
    config = BaseConfiguration().set_client_id(42)
    with pytest.raises(ConfigurationError):
        config.get_hashed_key()


def test_hashed_key_is_cached_after_first_computation():
    config = BaseConfiguration().set_client_id(42).set_api_key("secret")
    first = config.get_hashed_key()
    config.set_api_key("rotated")
    config.set_client_id(43)
    assert config.get_hashed_key() == first


def test_client_id_is_coerced_to_int():
    config = BaseConfiguration().set_client_id("1001")
    assert config.get_client_id() == 1001


@pytest.mark.parametrize("value", ["abc", None, "", 4.5j])
def test_set_client_id_rejects_non_integer_values(value):
    config = BaseConfiguration()
    with pytest.raises(ValidationError) as excinfo:
        config.set_client_id(value)
    assert excinfo.value.code == 1347889008105
    assert repr(value) in excinfo.value.additional_information
    assert config.get_client_id() is None


@pytest.mark.parametrize("value", [None, "", 12345])
def test_set_api_key_rejects_missing_or_non_string_values(value):
    config = BaseConfiguration().set_client_id(42)
    with pytest.raises(ValidationError) as excinfo:
        config.set_api_key(value)
    assert excinfo.value.code == 1347889008106
    with pytest.raises(ConfigurationError) as excinfo:
        config.get_hashed_key()
    assert excinfo.value.code == 1347889008107


def test_configuration_errors_are_elefunds_exceptions():
    with pytest.raises(ElefundsException):
        BaseConfiguration().get_hashed_key()


# ─── countrycode / api url ───────────────────────────────────────

def test_countrycode_defaults_to_en():
    assert BaseConfiguration().get_countrycode() == "en"


def test_set_countrycode_accepts_two_characters():
    assert BaseConfiguration().set_countrycode("de").get_countrycode() == "de"


@pytest.mark.parametrize("value", ["deu", "d", "", None, 12])
def test_set_countrycode_rejects_invalid_values(value):
    config = BaseConfiguration()
    with pytest.raises(ValidationError) as excinfo:
        config.set_countrycode(value)
    assert excinfo.value.code == 1347965897
    assert config.get_countrycode() == "en"


def test_validation_error_is_a_configuration_and_value_error():
    with pytest.raises(ConfigurationError):
        BaseConfiguration().set_countrycode("deu")
    with pytest.raises(ValueError):
        BaseConfiguration().set_countrycode("deu")


def test_set_api_url_strips_trailing_slash():
    config = BaseConfiguration().set_api_url("http://api.example.com/v1/")
    assert config.get_api_url() == "http://api.example.com/v1"


def test_set_api_url_strips_repeated_trailing_slashes():
    config = BaseConfiguration().set_api_url("http://api.example.com///")
    assert config.get_api_url() == "http://api.example.com"


def test_set_api_url_does_not_validate():
    assert BaseConfiguration().set_api_url("not a url").get_api_url() == "not a url"


# ─── strategies ──────────────────────────────────────────────────

def test_set_donation_class_name_registers_on_registry():
    registry = ModelRegistry()
    config = BaseConfiguration(model_registry=registry)
    config.set_donation_class_name(ShopDonation)
    assert type(registry.create_donation()) is ShopDonation
    assert config.get_donation_class_name().endswith("ShopDonation")


def test_set_receiver_class_name_accepts_dotted_path():
    config = BaseConfiguration()
    config.set_receiver_class_name("core.domain.models.Receiver")
    assert config.get_receiver_class_name() == "core.domain.models.Receiver"
    assert type(config.get_model_registry().create_receiver()) is Receiver


def test_set_receiver_class_name_propagates_registry_failure():
    config = BaseConfiguration()
    with pytest.raises(ConfigurationError) as excinfo:
        config.set_receiver_class_name("shop.models.DoesNotExist")
    assert excinfo.value.code == 1347893442820
    assert config.get_receiver_class_name() is None


def test_configurations_do_not_share_registry_by_default():
    a = BaseConfiguration().set_donation_class_name(ShopDonation)
    b = BaseConfiguration()
    assert type(b.get_model_registry().create_donation()) is Donation
    assert type(a.get_model_registry().create_donation()) is ShopDonation


def test_version_and_module_identifier_forwarded_to_transport(fake_rest):
    config = BaseConfiguration(rest=fake_rest)
    config.set_version_and_module_identifier("1.2.3", "elefunds-magento")
    assert fake_rest.user_agent == "elefunds-magento v1.2.3"


def test_version_and_module_identifier_defaults(fake_rest):
    BaseConfiguration(rest=fake_rest).set_version_and_module_identifier()
    assert fake_rest.user_agent.startswith("elefunds-sdk v")


def test_version_and_module_identifier_without_transport_raises():
    with pytest.raises(ConfigurationError):
        BaseConfiguration().set_version_and_module_identifier("1.0.0", "shop")


def test_share_services_are_copied():
    services = ["facebook"]
    config = BaseConfiguration().set_available_share_services(services)
    services.append("twitter")
    assert config.get_available_share_services() == ["facebook"]


# ─── facade back-reference ───────────────────────────────────────

def test_facade_property_before_binding_raises():
    with pytest.raises(StateError):
        BaseConfiguration().facade


def test_facade_property_after_binding_returns_facade():
    config = BaseConfiguration()
    facade = Facade().set_configuration(config)
    assert config.facade is facade


def test_facade_back_reference_does_not_keep_facade_alive():
    config = BaseConfiguration()
    facade = Facade().set_configuration(config)
    del facade
    gc.collect()
    with pytest.raises(StateError):
        config.facade


# ─── from_settings ───────────────────────────────────────────────

def test_from_settings_seeds_credentials_and_url(settings):
    config = BaseConfiguration.from_settings(settings)
    assert config.get_client_id() == 42
    assert config.get_api_url() == "https://api.example.com/v1"
    assert config.get_hashed_key() == derive_hashed_key(42, "secret")


def test_from_settings_skips_empty_api_key():
    settings = SdkSettings(_env_file=None, client_id=42, api_key="")
    config = BaseConfiguration.from_settings(settings)
    with pytest.raises(ConfigurationError) as excinfo:
        config.get_hashed_key()
    assert excinfo.value.code == 1347889008107
