"""Header injector — render a boilerplate template and prepend it to a file."""

from __future__ import annotations

import logging
from pathlib import Path

from k_license.core.templates import DEFAULT_CATALOG, TemplateCatalog
from k_license.errors import InjectionError, TemplateReadError

_logger = logging.getLogger(__name__)

YEAR_PLACEHOLDER = "YEAR"


def render_template(text: str, year: str) -> str:
    """Replace every literal ``YEAR`` in *text* with *year*."""
    return text.replace(YEAR_PLACEHOLDER, year)


def load_template(templates_dir: Path, name: str, year: str) -> str:
    """Read ``templates_dir/name`` and substitute the year."""
    path = Path(templates_dir) / name
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise TemplateReadError(path, exc.strerror or str(exc)) from exc
    return render_template(text, year)


def inject_header(
    path: Path,
    templates_dir: Path,
    year: str,
    *,
    catalog: TemplateCatalog = DEFAULT_CATALOG,
) -> bool:
    """Prepend the rendered template for *path* followed by a newline.

    Returns True if the file was rewritten, False for a zero-byte file,
    which is left untouched.  The template is loaded first, so a missing
    template fails even for empty targets.  The original bytes follow the
    separator unchanged; existing file permissions are kept.
    """
    header = load_template(templates_dir, catalog.resolve(path), year)

    try:
        original = path.read_bytes()
    except OSError as exc:
        raise InjectionError(path, exc.strerror or str(exc)) from exc

    if not original:
        _logger.info("%s is empty, no modification required", path)
        return False

    try:
        path.write_bytes(header.encode("utf-8") + b"\n" + original)
    except OSError as exc:
        raise InjectionError(path, exc.strerror or str(exc)) from exc
    return True
