import pytest
from flask import Flask

from extensions import build_reset_config, init_password_reset_service, init_supabase
from utils.account_directory import SupabaseAccountDirectory
from utils.exceptions import ConfigurationError


SETTINGS = {
    'SUPABASE_URL': "https://project.supabase.co",
    'SUPABASE_SECRET_KEY': "service-role-key",
    'MAILGUN_API_KEY': "key-123",
    'MAILGUN_DOMAIN': "mg.example.com",
    'MAILGUN_BASE_URL': "https://api.eu.mailgun.net",
}


def test_build_reset_config_applies_overrides():
    config = build_reset_config({**SETTINGS, 'PASSWORD_RESET_LENGTH': 14, 'PASSWORD_RESET_FROM_NAME': "Acme"})

    assert config.mailgun_domain == "mg.example.com"
    assert config.mailgun_base_url == "https://api.eu.mailgun.net"
    assert config.options.password_length == 14
    assert config.options.from_name == "Acme"
    assert config.options.salt_rounds == 10


def test_build_reset_config_requires_connection_settings():
    with pytest.raises(ConfigurationError):
        build_reset_config({**SETTINGS, 'MAILGUN_DOMAIN': None})


def test_init_reuses_app_supabase_client(mocker):
    create_client = mocker.patch("extensions.create_client")
    app = Flask(__name__)
    app.config.update(SETTINGS)

    init_supabase(app)
    init_password_reset_service(app)

    create_client.assert_called_once_with("https://project.supabase.co", "service-role-key")
    directory = app.password_reset_service.directory
    assert isinstance(directory, SupabaseAccountDirectory)
    assert directory.client is create_client.return_value
    assert app.password_reset_service.sender.base_url == "https://api.eu.mailgun.net"


def test_init_without_mailgun_leaves_service_unset(mocker):
    mocker.patch("extensions.create_client")
    app = Flask(__name__)
    app.config.update({**SETTINGS, 'MAILGUN_API_KEY': None})

    init_supabase(app)
    init_password_reset_service(app)

    assert app.supabase_client is not None
    assert app.password_reset_service is None
