"""Template-driven console line formatting."""

from conlog.lib.format.compose import context_prefix, format_line
from conlog.lib.format.directive import Directive, parse_directive, scan_template
from conlog.lib.format.render import render, render_default

__all__ = [
    "Directive",
    "context_prefix",
    "format_line",
    "parse_directive",
    "render",
    "render_default",
    "scan_template",
]
