"""Kernel error hierarchy — public re-export surface.

Hierarchy::

    BaseError
    └── ApplicationError         (application.py)
        ├── SessionUsageError    (mp_session.session.errors)
        └── ConfigError          (mp_session.config.validation)
"""

from mp_session.kernel.errors.application import ApplicationError
from mp_session.kernel.errors.base import BaseError

__all__ = ["ApplicationError", "BaseError"]
