"""extwizard -- browser extension project wizard core.

Validates wizard configurations, fills in smart defaults and scaffolds
template sets into a project directory.
"""

__version__ = "0.1.0"
