"""termlint: find non-inclusive terms in the text of a semantic model.

Public API
----------
The stable public surface is everything exported from this module.
Anything inside submodules not re-exported here is considered private
and may change without notice.

Example
-------
::

    import termlint

    model = termlint.loads_model('''
        {"smithy": "2.0",
         "shapes": {"example.db#MasterRecord": {"type": "structure"}}}
    ''')

    diagnostics = termlint.validate(model)
    print(diagnostics[0].message)
    # Structure shape uses a non-inclusive term 'Master'. Consider using
    # one of the following terms instead: 'Primary', 'Parent' and 'Main'.

    # Add project-specific terms on top of the built-ins
    config = termlint.TermsConfig.from_dict(
        {"appendNoninclusiveTerms": {"sanity check": ["confidence check"]}}
    )
    diagnostics = termlint.validate(model, config)

    termlint.__version__
    '0.1.0'
"""
from __future__ import annotations

from typing import TYPE_CHECKING

from termlint.errors import ConfigurationError, InvariantViolation, ModelLoadError
from termlint.validator.terms import TermsConfig

__version__: str = "0.1.0"

if TYPE_CHECKING:
    from pathlib import Path

    from termlint.model.nodes import Model
    from termlint.validator.diagnostics import Diagnostic


def load_model(path: "str | Path") -> "Model":
    """Read a JSON or YAML model document from ``path``.

    Raises
    ------
    termlint.ModelLoadError
        If the file cannot be read or does not describe a model.
    """
    from termlint.model.loader import load_model as _load_model

    return _load_model(path)


def loads_model(text: str, filename: str = "<string>") -> "Model":
    """Parse a JSON or YAML model document from a string."""
    from termlint.model.loader import loads_model as _loads_model

    return _loads_model(text, filename=filename)


def validate(model: "Model", config: TermsConfig | None = None) -> list["Diagnostic"]:
    """Scan ``model`` for non-inclusive terms.

    Parameters
    ----------
    model:
        The model to validate.
    config:
        Optional append/replace configuration; defaults to the built-in terms.

    Returns
    -------
    list[Diagnostic]
        One WARNING per term found, in model order.

    Raises
    ------
    termlint.ConfigurationError
        If ``config`` is invalid.
    """
    from termlint.validator.validator import validate as _validate

    return _validate(model, config)


__all__ = [
    "__version__",
    "ConfigurationError",
    "InvariantViolation",
    "ModelLoadError",
    "TermsConfig",
    "load_model",
    "loads_model",
    "validate",
]
