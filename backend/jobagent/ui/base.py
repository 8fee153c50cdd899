"""
Base component class for the JobAgent dashboard.

Components build HTML in plain Python; every piece of user-provided text goes
through ``escape``.
"""

from typing import Any, Optional
import html


class Component:
    """Base class for all UI components"""

    def render(self) -> str:
        raise NotImplementedError("Subclasses must implement render()")

    @staticmethod
    def escape(text: Optional[str]) -> str:
        """Escape HTML entities; None renders as an empty string."""
        return html.escape(str(text)) if text is not None else ""

    @staticmethod
    def classes(*args: str, **conditionals: bool) -> str:
        """Build a CSS class string.

        Example:
            >>> Component.classes("nav-link", active=True, disabled=False)
            "nav-link active"
        """
        classes = [a for a in args if a]
        classes.extend(key.replace("_", "-") for key, value in conditionals.items() if value)
        return " ".join(classes)

    @staticmethod
    def attributes(**attrs: Any) -> str:
        """Build HTML attributes from keyword arguments.

        Trailing underscore maps reserved names (class_ -> class); inner
        underscores become hyphens (aria_label -> aria-label).
        """
        result = []
        for key, value in attrs.items():
            if key.endswith("_"):
                key = key[:-1]
            else:
                key = key.replace("_", "-")

            if value is True:
                result.append(key)
            elif value is not False and value is not None:
                result.append(f'{key}="{html.escape(str(value))}"')

        return " ".join(result)
