from pathlib import Path

import yaml
from pydantic import ValidationError

from factorial_lab.rules.models import Rules


def _extract_yaml(content: str) -> str:
    """Return the first ```yaml fenced block, or the whole content if there is none."""
    lines = content.splitlines()
    starts = [i for i, line in enumerate(lines) if line.strip().startswith("```yaml")]
    if not starts:
        return content

    block = []
    for line in lines[starts[0] + 1 :]:
        if line.strip().startswith("```"):
            break
        block.append(line)
    return "\n".join(block)


def load_rules(path: Path | None = None) -> Rules:
    """
    Load and validate the rules file.
    Returns built-in defaults when path is None.
    Raises FileNotFoundError if file missing.
    Raises ValueError if YAML or schema invalid.
    """
    if path is None:
        return Rules()

    if not path.exists():
        raise FileNotFoundError(f"Rules file not found at: {path}")

    with open(path) as f:
        content = f.read()

    try:
        data = yaml.safe_load(_extract_yaml(content))
    except yaml.YAMLError as e:
        raise ValueError(f"Invalid YAML syntax in rules file: {e}") from e

    # An empty file means "all defaults"
    if data is None:
        data = {}

    try:
        return Rules.model_validate(data)
    except ValidationError as e:
        raise ValueError(f"Rules validation failed:\n{e}") from e
