from navigator.config import DEFAULT_MODEL, Settings


def test_defaults(monkeypatch, tmp_path):
    for var in ("GEMINI_API_KEY", "GOOGLE_API_KEY", "NAVIGATOR_MODEL", "NAVIGATOR_REQUEST_TIMEOUT", "NAVIGATOR_LOG_LEVEL"):
        monkeypatch.delenv(var, raising=False)

    settings = Settings.from_env(tmp_path / ".env")

    assert settings.api_key is None
    assert settings.model == DEFAULT_MODEL
    assert settings.request_timeout == 60.0
    assert settings.log_level == "INFO"


def test_gemini_key_wins_over_google_key(monkeypatch, tmp_path):
    monkeypatch.setenv("GEMINI_API_KEY", "gemini")
    monkeypatch.setenv("GOOGLE_API_KEY", "google")
    assert Settings.from_env(tmp_path / ".env").api_key == "gemini"


def test_google_key_fallback(monkeypatch, tmp_path):
    monkeypatch.delenv("GEMINI_API_KEY", raising=False)
    monkeypatch.setenv("GOOGLE_API_KEY", "google")
    assert Settings.from_env(tmp_path / ".env").api_key == "google"


def test_reads_dotenv_file(monkeypatch, tmp_path):
    # Recording them as unset makes teardown remove what load_dotenv adds.
    monkeypatch.delenv("NAVIGATOR_MODEL", raising=False)
    monkeypatch.delenv("NAVIGATOR_REQUEST_TIMEOUT", raising=False)
    env_file = tmp_path / ".env"
    env_file.write_text("NAVIGATOR_MODEL=google_genai:gemini-1.5-pro\nNAVIGATOR_REQUEST_TIMEOUT=15\n")

    settings = Settings.from_env(env_file)

    assert settings.model == "google_genai:gemini-1.5-pro"
    assert settings.request_timeout == 15.0
