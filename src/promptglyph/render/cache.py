"""Compile-once cache of prompt templates.

Template sources are Jinja2 text. Each distinct source string is parsed and
compiled at most once per cache; the compiled template is immutable and is
shared by every later render, across threads.

Name lookup at render time: template-local names first, then helpers and
Jinja2 globals, then fields of the data value. Data can never shadow a helper.

Locking:

- ``_lock`` guards the template map, the per-source lock table and the
  counters. It is only ever held for a dict operation.
- A per-source lock is held while that source compiles, so concurrent
  callers asking for the same source wait for one compile instead of
  repeating it. Callers for other sources are never blocked by a compile.
- Rendering takes no lock.
"""

from __future__ import annotations

import logging
import threading
from collections.abc import Mapping
from typing import Any

from jinja2 import Environment, StrictUndefined, Template, TemplateSyntaxError, UndefinedError
from jinja2 import meta, nodes
from jinja2.runtime import Context
from jinja2.utils import missing

from promptglyph.render.errors import CompileError, RenderError
from promptglyph.render.helpers import HelperRegistry

logger = logging.getLogger(__name__)

# Callables Jinja2 provides inside macros and blocks.
_IMPLICIT_CALLABLES = frozenset({"caller", "super", "varargs", "kwargs"})

# Render variable carrying the caller's data value.
_DATA_KEY = "__promptglyph_data__"


def _lookup_field(data: Any, name: str) -> Any:
    """Return field *name* of *data*, or ``missing`` if it has none."""
    if data is None:
        return missing
    if isinstance(data, Mapping):
        return data[name] if name in data else missing
    if name.startswith("_"):
        return missing
    try:
        return getattr(data, name)
    except AttributeError:
        return missing


class _DataContext(Context):
    """Resolves names the template and globals leave open against the data value."""

    def resolve_or_missing(self, key: str) -> Any:
        rv = super().resolve_or_missing(key)
        if rv is not missing:
            return rv
        return _lookup_field(self.parent.get(_DATA_KEY), key)


class _PromptEnvironment(Environment):
    context_class = _DataContext


class TemplateCache:
    """Thread-safe compile-once template store bound to a helper registry."""

    def __init__(self, registry: HelperRegistry | None = None) -> None:
        self._registry = registry if registry is not None else HelperRegistry()
        self._env = _PromptEnvironment(
            undefined=StrictUndefined,
            autoescape=False,
            keep_trailing_newline=True,
        )
        self._env.globals.update(self._registry)
        self._templates: dict[str, Template] = {}
        self._compiling: dict[str, threading.Lock] = {}
        self._lock = threading.Lock()
        self._compilations = 0
        self._hits = 0
        self._misses = 0

    @property
    def stats(self) -> dict[str, int]:
        with self._lock:
            return {
                "compilations": self._compilations,
                "hits": self._hits,
                "misses": self._misses,
                "entries": len(self._templates),
            }

    def get_or_compile(self, source: str) -> Template:
        """Return the compiled template for *source*, compiling it on first use.

        Raises :class:`CompileError` if the source does not parse or calls a
        function that is neither a registered helper nor a Jinja2 global.
        Failures are not remembered; the next call compiles again.
        """
        with self._lock:
            template = self._templates.get(source)
            if template is not None:
                self._hits += 1
                return template
            self._misses += 1
            source_lock = self._compiling.setdefault(source, threading.Lock())

        with source_lock:
            with self._lock:
                template = self._templates.get(source)
            if template is not None:
                return template
            try:
                compiled = self._compile(source)
                with self._lock:
                    # First insert wins if a duplicate compile ever races us.
                    template = self._templates.setdefault(source, compiled)
            finally:
                with self._lock:
                    if self._compiling.get(source) is source_lock:
                        del self._compiling[source]
        return template

    def render(self, source: str, data: Any = None) -> str:
        """Compile (or fetch) *source* and render it against *data*.

        *data* may be any value. Template names that are not helpers are
        looked up as keys of a mapping or attributes of anything else,
        properties included, and only when the template uses them. Raises
        :class:`CompileError` or :class:`RenderError`; a failed render
        returns nothing.
        """
        template = self.get_or_compile(source)
        try:
            return template.render({_DATA_KEY: data})
        except UndefinedError as exc:
            raise RenderError(exc.message or str(exc), source) from exc
        except Exception as exc:
            raise RenderError(f"{type(exc).__name__}: {exc}", source) from exc

    def _compile(self, source: str) -> Template:
        with self._lock:
            self._compilations += 1
        try:
            tree = self._env.parse(source)
            self._check_calls(tree, source)
            template = self._env.from_string(tree)
        except TemplateSyntaxError as exc:
            raise CompileError(exc.message or str(exc), source, lineno=exc.lineno) from exc
        logger.debug("Compiled template %r", source[:60])
        return template

    def _check_calls(self, tree: nodes.Template, source: str) -> None:
        """Reject calls to names the template neither defines nor can resolve."""
        undeclared = meta.find_undeclared_variables(tree)
        for call in tree.find_all(nodes.Call):
            target = call.node
            if not isinstance(target, nodes.Name):
                continue
            name = target.name
            if name not in undeclared or name in _IMPLICIT_CALLABLES:
                continue
            if name not in self._registry and name not in self._env.globals:
                raise CompileError(f"function {name!r} not defined", source, lineno=call.lineno)

    def __contains__(self, source: object) -> bool:
        with self._lock:
            return source in self._templates

    def __len__(self) -> int:
        with self._lock:
            return len(self._templates)
