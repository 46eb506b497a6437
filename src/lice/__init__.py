"""lice: stamp a license header onto every supported source file in a tree.

``__version__`` comes from the installed distribution metadata; a source
checkout without an install reports ``_FALLBACK_VERSION``, which is kept in
step with ``[project].version`` in pyproject.toml. The CLI prints it for
``--version`` and in the ``--help`` description.
"""

from __future__ import annotations

from importlib.metadata import PackageNotFoundError, version

__all__ = ["__version__"]

_FALLBACK_VERSION = "0.1.0"


def _installed_version() -> str:
	try:
		return version("lice")
	except PackageNotFoundError:  # pragma: no cover - running from src/ without install
		return _FALLBACK_VERSION


__version__ = _installed_version()
