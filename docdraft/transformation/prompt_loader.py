from pathlib import Path

from docdraft.transformation.exceptions import TransformationError

_DEFAULT_PROMPT_DIR = Path(__file__).parent / "prompts"

SYSTEM_PROMPT = "system_prompt.txt"
CHUNK_PROMPT = "chunk_prompt.txt"
SYNTHESIS_PROMPT = "synthesis_prompt.txt"
SMALL_DOCUMENT_PROMPT = "small_document_prompt.txt"


def load_prompt_template(name: str, prompt_dir: Path | None = None) -> str:
    """Load a prompt template by file name.

    Args:
        name: Template file name, e.g. ``chunk_prompt.txt``.
        prompt_dir: Directory holding the templates.
                    Defaults to the bundled ``prompts`` directory.

    Returns:
        The raw template string with ``str.format`` placeholders.

    Raises:
        TransformationError: if the file cannot be read.
    """
    path = (prompt_dir or _DEFAULT_PROMPT_DIR) / name
    try:
        return path.read_text(encoding="utf-8")
    except OSError as exc:
        raise TransformationError(f"Failed to load prompt template {name}: {exc}") from exc
