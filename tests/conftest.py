import pytest

from tests.fakes import FakeDirectory, FakeSender
from utils.password_reset_service import PasswordResetService, ResetConfig, ResetOptions


@pytest.fixture
def reset_config():
    return ResetConfig(
        supabase_url="https://project.supabase.co",
        supabase_key="service-role-key",
        mailgun_api_key="key-123",
        mailgun_domain="mg.example.com",
        options=ResetOptions(salt_rounds=4),
    )


@pytest.fixture
def directory():
    return FakeDirectory(users=[{'id': 'u1', 'email': 'user@example.com'}])


@pytest.fixture
def sender():
    return FakeSender()


@pytest.fixture
def service(reset_config, directory, sender):
    return PasswordResetService(reset_config, directory=directory, sender=sender)
