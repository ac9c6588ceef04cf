from pathlib import Path

TEMPLATES_DIR = Path(__file__).parent


class ResourceNotFound(FileNotFoundError):
    """Raised when a bundled prompt template is missing or unreadable."""


def load_template(name: str) -> str:
    """Load a prompt template by file name from the templates directory."""
    path = TEMPLATES_DIR / name
    if not path.is_file():
        raise ResourceNotFound(f"Template not found: {name}")
    try:
        return path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise ResourceNotFound(f"Template not found: {name}") from e


def list_templates() -> list[str]:
    """List available prompt template names."""
    return sorted(p.name for p in TEMPLATES_DIR.glob("*.txt"))
