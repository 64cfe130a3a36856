"""Validator registry for termlint.

Third-party validators register via ``importlib.metadata`` entry-points
under the "termlint.validators" group.

Example
-------
Declare a validator in pyproject.toml:

.. code-block:: toml

    [project.entry-points."termlint.validators"]
    MyValidator = "my_package.validators:MyValidator"
"""
from __future__ import annotations

from termlint.plugins.registry import (
    VALIDATORS,
    ValidatorAlreadyRegisteredError,
    ValidatorNotFoundError,
    ValidatorRegistry,
    create_validator,
)

__all__ = [
    "VALIDATORS",
    "ValidatorRegistry",
    "ValidatorNotFoundError",
    "ValidatorAlreadyRegisteredError",
    "create_validator",
]
