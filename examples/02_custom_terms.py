#!/usr/bin/env python3
"""Example: Custom term tables (termlint)

Shows the two ways of configuring terms: appending to the built-in
table, or replacing it entirely.  Configuring both at once is an error
raised before any model is scanned.

Usage:
    python examples/02_custom_terms.py
"""
from __future__ import annotations

from pathlib import Path

import termlint
from termlint.plugins import create_validator

MODEL_PATH = Path(__file__).with_name("weather.yaml")

APPEND_CONFIG = """
appendNoninclusiveTerms:
  sanity: [confidence, coherence]
"""


def main() -> None:
    model = termlint.load_model(MODEL_PATH)

    # Built-in terms plus project-specific ones.
    config = termlint.TermsConfig.from_yaml(APPEND_CONFIG)
    print("Appended terms:")
    for diagnostic in termlint.validate(model, config):
        print(f"  {diagnostic.message}")

    # Replace the built-ins through the validator registry.
    validator = create_validator(
        "NoninclusiveTerms",
        {"replaceNoninclusiveTerms": {"forecast": ["prediction"]}},
    )
    print("\nReplaced terms:")
    for diagnostic in validator.validate(model):
        print(f"  {diagnostic.message}")

    # Both at once is rejected.
    try:
        create_validator(
            "NoninclusiveTerms",
            {
                "appendNoninclusiveTerms": {"a": ["b"]},
                "replaceNoninclusiveTerms": {"c": ["d"]},
            },
        )
    except termlint.ConfigurationError as exc:
        print(f"\nRejected configuration: {exc}")


if __name__ == "__main__":
    main()
