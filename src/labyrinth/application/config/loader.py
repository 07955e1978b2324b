"""Layout file loader with comprehensive error handling.

Loads JSON layout files and reports file system, JSON parsing and schema
validation problems as a single ConfigError type with actionable messages.
"""

import json
from pathlib import Path
from typing import Any

from pydantic import ValidationError as PydanticValidationError

from labyrinth.application.config.schema import MazeLayoutConfig


class ConfigError(Exception):
    """Exception raised for layout configuration errors.

    Attributes:
        message: The primary error message
        error_type: Category of error (file_not_found, json_parse, validation, ...)
        path: Path to the layout file (if applicable)
        details: Additional error details (line/column for JSON, validation errors, etc.)
    """

    def __init__(
        self,
        message: str,
        error_type: str = "unknown",
        path: Path | None = None,
        details: list[dict[str, Any]] | None = None,
    ) -> None:
        self.message = message
        self.error_type = error_type
        self.path = path
        self.details = details or []
        super().__init__(message)

    def __str__(self) -> str:
        return self.message


def _format_json_path(loc: tuple[str | int, ...]) -> str:
    """Format a Pydantic location tuple as a JSON path string.

    Examples:
        >>> _format_json_path(("doors", 0, "between"))
        'doors[0].between'
        >>> _format_json_path(())
        '<root>'
    """
    parts: list[str] = []
    for segment in loc:
        if isinstance(segment, int):
            if parts:
                parts[-1] = f"{parts[-1]}[{segment}]"
            else:
                parts.append(f"[{segment}]")
        else:
            parts.append(str(segment))
    return ".".join(parts) or "<root>"


def _extract_validation_errors(
    error: PydanticValidationError,
) -> list[dict[str, Any]]:
    details: list[dict[str, Any]] = []
    for err in error.errors():
        details.append(
            {
                "path": _format_json_path(err["loc"]),
                "message": err["msg"],
                "value": err.get("input"),
                "error_type": err["type"],
            }
        )
    return details


def _format_validation_error_message(details: list[dict[str, Any]]) -> str:
    lines = ["Layout validation failed:"]
    for detail in details:
        lines.append(f"  - {detail['path']}: {detail['message']}")
    return "\n".join(lines)


def load_config_from_dict(
    data: dict[str, Any], path: Path | None = None
) -> MazeLayoutConfig:
    """Validate layout data that is already parsed.

    Args:
        data: Dictionary containing layout data
        path: Originating file, used only for error reporting

    Raises:
        ConfigError: With error_type "validation" if the data does not match
            the schema.
    """
    try:
        return MazeLayoutConfig.model_validate(data)
    except PydanticValidationError as e:
        details = _extract_validation_errors(e)
        raise ConfigError(
            message=_format_validation_error_message(details),
            error_type="validation",
            path=path,
            details=details,
        ) from e


def load_config(path: Path) -> MazeLayoutConfig:
    """Load and validate a maze layout from a JSON file.

    Raises:
        ConfigError: If the file cannot be loaded or validated.
            The error_type attribute indicates the specific error category:
            - "file_not_found": File does not exist
            - "permission_denied" / "file_read_error": File cannot be read
            - "json_parse": Invalid JSON syntax
            - "validation": Schema validation failed

    Example:
        >>> try:
        ...     config = load_config(Path("ring.json"))
        ... except ConfigError as e:
        ...     print(f"Error: {e}")
    """
    if not path.exists():
        raise ConfigError(
            message=f"Layout file not found: {path}",
            error_type="file_not_found",
            path=path,
        )

    try:
        content = path.read_text(encoding="utf-8")
    except PermissionError:
        raise ConfigError(
            message=f"Permission denied reading layout file: {path}",
            error_type="permission_denied",
            path=path,
        )
    except OSError as e:
        raise ConfigError(
            message=f"Error reading layout file: {path}: {e}",
            error_type="file_read_error",
            path=path,
        )

    try:
        data = json.loads(content)
    except json.JSONDecodeError as e:
        raise ConfigError(
            message=f"Invalid JSON in layout file: {path} (line {e.lineno}, column {e.colno}): {e.msg}",
            error_type="json_parse",
            path=path,
            details=[{"line": e.lineno, "column": e.colno, "message": e.msg}],
        )

    if not isinstance(data, dict):
        raise ConfigError(
            message=f"Layout file must contain a JSON object: {path}",
            error_type="validation",
            path=path,
        )

    return load_config_from_dict(data, path=path)
