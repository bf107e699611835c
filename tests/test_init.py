"""Tests for the escape_stream package exports."""

import escape_stream


def test_public_api_exported():
    """Test every name in __all__ is importable from the package."""
    for name in escape_stream.__all__:
        assert hasattr(escape_stream, name), name


def test_version_is_string():
    """Test the package exposes a version string."""
    assert isinstance(escape_stream.__version__, str)
    assert escape_stream.__version__


def test_docstring_example():
    """Test the quick-start flow from the package docstring."""
    wrapped = escape_stream.Escaped('say "hi"', escape_stream.DebugEscaper())
    assert f"{wrapped}" == 'say \\"hi\\"'
