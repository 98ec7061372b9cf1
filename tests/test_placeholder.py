"""Placeholder test verifying package import."""


def test_import() -> None:
    """Verify top-level package is importable."""
    import jsontext

    assert jsontext.__version__ is not None
    assert jsontext.__version__ == "0.1.0"
