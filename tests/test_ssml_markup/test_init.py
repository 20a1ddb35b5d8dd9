"""Test module for ssml_markup package initialization."""


def test_package_import() -> None:
    """Test that the package can be imported successfully."""
    # Arrange & Act
    import ssml_markup

    # Assert
    assert ssml_markup is not None


def test_package_has_version() -> None:
    """Test that the package has a version attribute."""
    import ssml_markup

    assert isinstance(ssml_markup.__version__, str)
    assert ssml_markup.__version__ == "0.1.0"


def test_package_exports_public_api() -> None:
    """Test that the level 1 and level 2 API is exported at top level."""
    import ssml_markup

    for name in ("parse", "serialize", "round_trip", "escape_entities",
                 "unescape_entities", "SSMLProcessor", "MalformedMarkupError"):
        assert name in ssml_markup.__all__
        assert hasattr(ssml_markup, name)
