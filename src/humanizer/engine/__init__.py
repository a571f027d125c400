"""Run orchestration and the language-model client."""
