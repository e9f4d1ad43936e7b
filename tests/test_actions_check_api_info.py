"""
Tests for the check_api_info action.

**Purpose**: Verify exit codes and output of the configuration check script
without touching the network. The environment is controlled with monkeypatch.
"""

import sys
from pathlib import Path

import pytest

# Add project root to path so we can import actions module
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from actions.check_api_info import main, mask_secret, parse_args
from apca.config.api_info import ENV_API_BASE_URL, ENV_KEY_ID, ENV_SECRET
from apca.config.settings import reset_api_info

SECRET = "YYYYYYYYYYYYYYYYYYYYYYYYYYYYYYYYYYYYabcd"


@pytest.fixture(autouse=True)
def clean_api_env(monkeypatch):
    for name in (ENV_API_BASE_URL, ENV_KEY_ID, ENV_SECRET):
        monkeypatch.delenv(name, raising=False)
    reset_api_info()
    yield
    reset_api_info()


def test_mask_secret_keeps_last_characters():
    assert mask_secret("abcdefgh") == "****efgh"
    assert mask_secret("abcdefgh", visible=2) == "******gh"


def test_mask_secret_short_values_fully_masked():
    assert mask_secret("abc") == "***"
    assert mask_secret("abcd") == "****"
    assert mask_secret("") == ""
    assert mask_secret("abcdef", visible=0) == "******"


def test_parse_args_defaults():
    args = parse_args([])

    assert args.env_file is None
    assert args.verbose is False


def test_parse_args_options():
    args = parse_args(["--env-file", "paper.env", "--verbose"])

    assert args.env_file == "paper.env"
    assert args.verbose is True


def test_main_success(monkeypatch, capsys):
    monkeypatch.setenv(ENV_KEY_ID, "PKTESTKEY")
    monkeypatch.setenv(ENV_SECRET, SECRET)

    exit_code = main([])

    out = capsys.readouterr().out
    assert exit_code == 0
    assert "https://paper-api.alpaca.markets/" in out
    assert "PKTESTKEY" in out
    assert SECRET not in out
    assert out.rstrip().endswith("abcd")


def test_main_missing_key_id(monkeypatch, capsys):
    monkeypatch.setenv(ENV_SECRET, SECRET)

    exit_code = main([])

    err = capsys.readouterr().err
    assert exit_code == 1
    assert "Configuration error" in err
    assert "APCA_API_KEY_ID" in err


def test_main_invalid_base_url(monkeypatch, capsys):
    monkeypatch.setenv(ENV_API_BASE_URL, "not a url")
    monkeypatch.setenv(ENV_KEY_ID, "PKTESTKEY")
    monkeypatch.setenv(ENV_SECRET, SECRET)

    exit_code = main([])

    err = capsys.readouterr().err
    assert exit_code == 1
    assert "not a url" in err


def test_main_loads_env_file(monkeypatch, tmp_path, capsys):
    env_file = tmp_path / "paper.env"
    env_file.write_text(
        f"{ENV_KEY_ID}=PKFROMFILE\n{ENV_SECRET}={SECRET}\n",
        encoding="utf-8",
    )
    # load_dotenv writes into os.environ; let monkeypatch undo it
    monkeypatch.setenv(ENV_KEY_ID, "placeholder")
    monkeypatch.setenv(ENV_SECRET, "placeholder")
    monkeypatch.delenv(ENV_KEY_ID)
    monkeypatch.delenv(ENV_SECRET)

    exit_code = main(["--env-file", str(env_file)])

    out = capsys.readouterr().out
    assert exit_code == 0
    assert "PKFROMFILE" in out


def test_main_env_file_does_not_override_exported(monkeypatch, tmp_path, capsys):
    env_file = tmp_path / "paper.env"
    env_file.write_text(f"{ENV_KEY_ID}=PKFROMFILE\n", encoding="utf-8")
    monkeypatch.setenv(ENV_KEY_ID, "PKEXPORTED")
    monkeypatch.setenv(ENV_SECRET, SECRET)

    exit_code = main(["--env-file", str(env_file)])

    out = capsys.readouterr().out
    assert exit_code == 0
    assert "PKEXPORTED" in out
    assert "PKFROMFILE" not in out
