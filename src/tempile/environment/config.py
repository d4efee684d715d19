"""Compile options for tempile."""

from __future__ import annotations

from dataclasses import dataclass, fields

from tempile.environment.exceptions import ConfigurationError

# Human-readable option names used in error messages
_OPTION_LABELS = {
    "package_name": "package name",
    "template_name": "template name",
    "filename": "file name",
    "src_path": "src path",
}


@dataclass(frozen=True, slots=True)
class CompileOptions:
    """Required settings for one compilation.

    Attributes:
        package_name: Package clause of the generated Go file
        template_name: Name of the generated render function
        filename: Template file name, used in diagnostics only
        src_path: Directory the resolver searches for included templates

    Example:
        >>> options = CompileOptions(
        ...     package_name="views",
        ...     template_name="Index",
        ...     filename="index.html",
        ...     src_path="templates/",
        ... )
        >>> options.validate()
    """

    package_name: str
    template_name: str
    filename: str
    src_path: str

    def validate(self) -> None:
        """Raise ConfigurationError naming the first empty option."""
        for option in fields(self):
            if not getattr(self, option.name):
                label = _OPTION_LABELS[option.name]
                raise ConfigurationError(
                    f"missing {label} in compile options", field=option.name
                )
