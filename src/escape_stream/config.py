"""Configuration for default escaping behaviour."""

from pydantic import BaseModel
from pydantic import Field

from escape_stream.escapers import Escaper
from escape_stream.escapers import EscapeStyle
from escape_stream.escapers import get_escaper


class EscapeConfig(BaseModel):
    """Configuration naming the escaper used when none is given explicitly.

    Attributes:
        style: Built-in escaping convention. Default is ``debug``.
        escape_quotes: Whether the debug and default styles escape single
            and double quotes. Default is True.

    """

    model_config = {"frozen": True}

    style: EscapeStyle = Field(default=EscapeStyle.DEBUG)
    escape_quotes: bool = Field(default=True)

    def build_escaper(self) -> Escaper:
        """Create a fresh escaper for this configuration."""
        return get_escaper(self.style, escape_quotes=self.escape_quotes)


DEFAULT_CONFIG = EscapeConfig()
