import pytest

from hr_master.core.config import Config, validate_settings

@pytest.mark.parametrize("environment", ["production", "staging", "testing"])
def test_default_admin_password_refused_outside_development(environment):
    config = Config(environment=environment, admin_username="root", admin_password="admin")
    with pytest.raises(RuntimeError):
        validate_settings(config)

def test_missing_admin_password_refused_outside_development():
    config = Config(environment="production", admin_username="root", admin_password=None)
    with pytest.raises(RuntimeError):
        validate_settings(config)

def test_strong_admin_password_accepted():
    validate_settings(Config(environment="production", admin_username="root", admin_password="N0t-a-default!"))

def test_no_bootstrap_admin_accepted():
    validate_settings(Config(environment="production", admin_username=None, admin_password=None))

def test_development_allows_default_password():
    validate_settings(Config(environment="development", admin_username="root", admin_password="admin"))
