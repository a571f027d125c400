"""Prompt assembly.

Builds the two prompts the humanizer sends: the authorship analysis
request and the rewrite system instruction. Templates are loaded from
YAML files for editability.
"""

from __future__ import annotations

import re
from pathlib import Path

import yaml

from humanizer.state.run_state import Options

_PLACEHOLDER_RE = re.compile(r"\{([a-z_]+)\}")


def _fill(template: str, values: dict[str, str]) -> str:
    """Substitute ``{key}`` placeholders in one pass.

    Unknown placeholders and braces in user text are left alone.
    """
    return _PLACEHOLDER_RE.sub(
        lambda m: values.get(m.group(1), m.group(0)),
        template,
    )


class PromptAssembler:
    """Assembles prompts from YAML templates and runtime data."""

    def __init__(self, templates_dir: Path | None = None):
        if templates_dir is None:
            templates_dir = Path(__file__).parent / "templates"
        self._templates_dir = templates_dir
        self._templates: dict[str, dict] = {}
        self._load_templates()

    def _load_templates(self) -> None:
        """Load all YAML templates from the templates directory."""
        if not self._templates_dir.exists():
            return
        for yaml_file in self._templates_dir.glob("*.yaml"):
            with open(yaml_file, encoding="utf-8") as f:
                self._templates[yaml_file.stem] = yaml.safe_load(f) or {}

    def get_template(self, name: str) -> dict:
        """Get a loaded template by name."""
        if name not in self._templates:
            raise KeyError(f"Template not found: {name}")
        return self._templates[name]

    def build_analysis_prompt(self, text: str) -> str:
        template = self.get_template("analysis")
        role = template.get("role", "").strip()
        instructions = _fill(template.get("instructions", ""), {"text": text}).strip()
        return "\n".join(s for s in (role, instructions) if s)

    def analysis_schema(self) -> dict:
        schema = self.get_template("analysis").get("schema")
        if not isinstance(schema, dict):
            raise KeyError("Template 'analysis' has no schema")
        return schema

    def build_rewrite_instruction(self, options: Options) -> str:
        """Fill the style guide with audience/tone, defaulting empty hints."""
        template = self.get_template("humanizer")
        defaults = template.get("defaults", {}) or {}
        audience = options.audience if options.audience.strip() else defaults.get("audience", "")
        tone = options.tone if options.tone.strip() else defaults.get("tone", "")
        values = {"audience": str(audience), "tone": str(tone)}
        return _fill(template.get("instructions", ""), values).strip()
