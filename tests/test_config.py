"""Tests for escaping configuration."""

from pydantic import ValidationError
import pytest

from escape_stream import DebugEscaper
from escape_stream import EscapeConfig
from escape_stream import EscapeStyle
from escape_stream import Passthrough
from escape_stream import UnicodeEscaper


def test_defaults():
    """Test default configuration selects quote-escaping debug style."""
    config = EscapeConfig()
    assert config.style is EscapeStyle.DEBUG
    assert config.escape_quotes is True
    assert isinstance(config.build_escaper(), DebugEscaper)


def test_style_from_string():
    """Test styles can be given by their string value."""
    assert EscapeConfig(style="unicode").style is EscapeStyle.UNICODE
    assert isinstance(EscapeConfig(style="none").build_escaper(), Passthrough)
    assert isinstance(EscapeConfig(style="unicode").build_escaper(), UnicodeEscaper)


def test_invalid_style():
    """Test unknown styles fail validation."""
    with pytest.raises(ValidationError):
        EscapeConfig(style="shell")  # type: ignore[arg-type]


def test_escape_quotes_applied():
    """Test the quote flag reaches the built escaper."""
    escaper = EscapeConfig(escape_quotes=False).build_escaper()
    assert isinstance(escaper, DebugEscaper)
    assert escaper.escape_quotes is False


def test_build_escaper_fresh_each_call():
    """Test every call builds an independent escaper."""
    config = EscapeConfig()
    assert config.build_escaper() is not config.build_escaper()


def test_frozen():
    """Test configuration is immutable."""
    config = EscapeConfig()
    with pytest.raises(ValidationError):
        config.style = EscapeStyle.UNICODE  # type: ignore[misc]


def test_from_dict():
    """Test configuration loads from plain data."""
    config = EscapeConfig.model_validate({"style": "default", "escape_quotes": False})
    assert config.style is EscapeStyle.DEFAULT
    assert config.escape_quotes is False
