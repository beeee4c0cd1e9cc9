from pathlib import Path

from src.library_hours.config import Settings


def test_data_files_default_to_data_root(tmp_path: Path):
    settings = Settings(_env_file=None, data_root=tmp_path)

    assert settings.schedules_file == tmp_path.resolve() / "schedules.json"
    assert settings.exceptions_file == tmp_path.resolve() / "closure_exceptions.json"


def test_explicit_data_files_are_kept(tmp_path: Path):
    custom = tmp_path / "elsewhere" / "hours.json"

    settings = Settings(_env_file=None, data_root=tmp_path, schedules_file=custom)

    assert settings.schedules_file == custom.resolve()
    assert settings.exceptions_file == tmp_path.resolve() / "closure_exceptions.json"


def test_default_location_and_origins_are_normalised():
    settings = Settings(
        _env_file=None,
        default_location=" masoro ",
        frontend_allowed_origins="https://library.example.org, http://localhost:3000",
    )

    assert settings.default_location == "MASORO"
    assert settings.frontend_allowed_origins == ("https://library.example.org", "http://localhost:3000")
