"""Verify package imports work correctly."""


def test_import_bigote() -> None:
    """Test that bigote can be imported and version matches pyproject."""
    import tomllib
    from pathlib import Path

    import bigote

    with (Path(__file__).resolve().parent.parent / "pyproject.toml").open("rb") as f:
        expected = tomllib.load(f)["project"]["version"]
    assert bigote.__version__ == expected


def test_version_format() -> None:
    """Test version string format."""
    from bigote import __version__

    parts = __version__.split(".")
    assert len(parts) == 3
    assert all(part.isdigit() for part in parts)
