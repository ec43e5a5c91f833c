"""Verify package imports work correctly."""


def test_import_letras() -> None:
    """Test that letras can be imported and version matches pyproject."""
    import tomllib
    from pathlib import Path

    import letras

    with (Path(__file__).resolve().parent.parent / "pyproject.toml").open("rb") as f:
        expected = tomllib.load(f)["project"]["version"]
    assert letras.__version__ == expected


def test_version_format() -> None:
    """Test version string format."""
    from letras import __version__

    parts = __version__.split(".")
    assert len(parts) == 3
    assert all(part.isdigit() for part in parts)


def test_public_api() -> None:
    """Everything in __all__ resolves."""
    import letras

    for name in letras.__all__:
        assert hasattr(letras, name), name
