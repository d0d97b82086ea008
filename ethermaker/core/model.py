"""Enhanced BaseModel with rich display capabilities."""

from typing import Any

from pydantic import BaseModel
from rich.console import Console
from rich.table import Table


class DisplayModel(BaseModel):
    def display(self, console: Console | None = None, title: str | None = None) -> None:
        """Display the model as a formatted table."""

        if console is None:
            console = Console()

        table = Table(title=title or self.__class__.__name__, show_header=True)
        table.add_column("Field", style="cyan")
        table.add_column("Value", style="green")

        for field_name, field_value in self:
            if field_value is not None:
                table.add_row(self._format_label(field_name), self._format_value(field_value))

        console.print(table)

    def _format_label(self, field_name: str) -> str:
        field = type(self).model_fields.get(field_name)
        if field is not None and field.title:
            return field.title
        return field_name.replace("_", " ").capitalize()

    def _format_value(self, value: Any) -> str:
        """Format a value for display."""

        if isinstance(value, bool):
            return str(value).lower()
        return str(value)
