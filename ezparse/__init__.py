"""EZ notation parser: turns line-oriented type declarations into a structured model.

Modules:
- aliases.py: Shorthand type expansion (l-X, ob-X, <i>, [s], ...).
- fields.py: Regex extraction of names, descriptions, types and parameters.
- model.py: Data structures for files, namespaces, types and members.
- ez_parse.py: Line classification, model building and the parse driver.
- fs_scan.py: Directory scanning for notation files.
- config.py: Environment-driven settings.
- errors.py: Parse errors with source location.
"""

__all__ = [
	"aliases",
	"fields",
	"model",
	"ez_parse",
	"fs_scan",
	"config",
	"errors",
]
