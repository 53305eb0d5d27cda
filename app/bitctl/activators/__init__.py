"""Component activators for enabling and disabling bash-it components.

This module provides the abstract Activator interface and the bash-it
filesystem implementation.
"""

from bitctl.activators.base import ActivationResult, Activator
from bitctl.activators.bash_it import BashItActivator

__all__ = ["ActivationResult", "Activator", "BashItActivator"]
