"""Pretty formatters used in class __format__ methods."""

from collections.abc import Sequence


def _display_value(value: object) -> object:
    """Show strings with control characters in their escaped repr form."""
    if isinstance(value, str) and not value.isprintable():
        return repr(value)
    return value


def _collect_fields(obj: object, prefix: str = "") -> tuple[list[tuple[str, object]], int]:
    """Collect the public (field_name, value) pairs of an object and find the label width.

    Args:
        obj: The object to inspect, which can be a dataclass or any class with __dict__.
        prefix: Prefix to prepend to field names.

    Returns:
        Tuple:
            1. list of (field_label, value) pairs, skipping `None` values
            2. maximum width of all field labels including the trailing colon
    """
    if hasattr(obj, "__dataclass_fields__"):
        field_names = obj.__dataclass_fields__.keys()
    elif hasattr(obj, "__dict__"):
        field_names = obj.__dict__.keys()
    else:
        return [], 0

    fields = [
        (f"{prefix}{name}:", getattr(obj, name))
        for name in field_names
        if not name.startswith("_") and getattr(obj, name) is not None
    ]
    max_width = max((len(label) for label, _ in fields), default=0)
    return fields, max_width


def pretty_print_two_columns(obj: object, prefix: str = "") -> str:
    """Pretty print any dataclass or class with __dict__ in two aligned columns.

    Args:
        obj: The object to format.
        prefix: Prefix to prepend to field names.

    Returns:
        A formatted string representing the object in two columns.
    """
    fields, field_width = _collect_fields(obj, prefix)
    lines = []
    for field_label, value in fields:
        # Normalize value to sequence for multi-line values
        if isinstance(value, str) or not isinstance(value, Sequence):
            value = [value]

        iterator = iter(value)
        lines.append(f"{field_label:<{field_width}} {_display_value(next(iterator))}")
        for line in iterator:
            lines.append(" " * field_width + f" {_display_value(line)}")

    return "\n".join(lines)


class TwoColumnFormatMixin:
    """Mixin to provide __format__ and __str__ methods for two-column formatting."""

    _format_prefix: str = ""

    def __format__(self, format_spec: str) -> str:
        """Format the object as a two-column string.

        Args:
            format_spec: Format specification string.

        Returns:
            A formatted string representing the object.
        """
        return format(pretty_print_two_columns(self, self._format_prefix), format_spec)

    def __str__(self) -> str:
        """Two-column string of the object."""
        return format(self, "")
