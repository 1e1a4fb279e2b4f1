import pytest

from bank_accounts import config as config_module
from bank_accounts.accounts import account_counter


@pytest.fixture(autouse=True)
def fresh_state(monkeypatch):
    """Start every test with a zero account counter and default config"""
    for name in ("BANK_LOG_LEVEL", "BANK_LOG_FORMAT", "BANK_LOG_FILE",
                 "BANK_CURRENCY_SYMBOL", "BANK_AMOUNT_PRECISION"):
        monkeypatch.delenv(name, raising=False)
    config_module.reload_config()
    account_counter.reset()
    yield
    account_counter.reset()
    config_module.reload_config()
