#!/usr/bin/env python3
"""Example: Quickstart (termlint)

Minimal working example: load a model, scan it for non-inclusive terms
with the built-in term table, and print every finding.

Usage:
    python examples/01_quickstart.py

Requirements:
    pip install termlint
"""
from __future__ import annotations

import termlint

MODEL_SOURCE = '''
{
  "smithy": "2.0",
  "shapes": {
    "example.cluster#MasterNode": {
      "type": "structure",
      "traits": {
        "smithy.api#documentation": "Coordinates every slave in the cluster."
      },
      "members": {
        "whitelistedHosts": {"target": "example.cluster#HostList"}
      }
    },
    "example.cluster#HostList": {
      "type": "list",
      "member": {"target": "smithy.api#String"}
    }
  }
}
'''


def main() -> None:
    print(f"termlint version: {termlint.__version__}")

    model = termlint.loads_model(MODEL_SOURCE, filename="cluster.json")
    print(f"Loaded {len(model.shapes)} shape(s) from namespace(s): {', '.join(model.namespaces)}")

    diagnostics = termlint.validate(model)
    print(f"\n{len(diagnostics)} finding(s):")
    for diagnostic in diagnostics:
        print(f"  {diagnostic}")


if __name__ == "__main__":
    main()
