"""
Application settings and configuration

Uses pydantic-settings for type-safe configuration via environment variables.
All settings use MD2BACKLOG_ prefix (e.g., MD2BACKLOG_INDENT_SIZE=4).

Settings can also be loaded from a .env file in the project root. Only the
CLI reads these; the converter itself takes explicit arguments.
"""

from pathlib import PurePath

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class AppSettings(BaseSettings):
    """
    Application configuration via environment variables.

    Environment variables use MD2BACKLOG_ prefix.

    Examples:
        MD2BACKLOG_INDENT_SIZE=4
        MD2BACKLOG_OUTPUT_EXTENSION=.backlog
        MD2BACKLOG_COLOR_OUTPUT=false
    """

    model_config = SettingsConfigDict(
        env_prefix="MD2BACKLOG_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # Conversion configuration
    indent_size: int = Field(
        default=2,
        ge=1,
        description="Spaces per nesting level for space-indented lists (CLI default)",
    )

    # Output configuration
    output_extension: str = Field(
        default=".txt",
        description="Suffix used when the output file name is derived from the input",
    )

    # Comparison configuration
    diff_context_lines: int = Field(
        default=3,
        ge=0,
        description="Unchanged lines shown around each hunk of the reference diff",
    )

    color_output: bool = Field(
        default=True,
        description="Colour diffs and previews with Pygments",
    )

    terminal_background: str = Field(
        default="dark",
        description="Terminal background for Pygments TerminalFormatter ('dark' or 'light')",
    )

    def outputName_make(self, input_name: str) -> str:
        """
        Derive the output file name from the input file name.

        Args:
            input_name: Input file name, possibly with directories

        Returns:
            Base name with its suffix replaced by output_extension

        Example:
            >>> settings = AppSettings()
            >>> settings.outputName_make('docs/guide.md')
            'guide.txt'
        """
        return PurePath(input_name).stem + self.output_extension


# Singleton instance - import this in your code
appsettings = AppSettings()
