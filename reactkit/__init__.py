"""reactkit -- a command line tool for React development.

Scaffolds new React projects and generates component boilerplate from
Jinja2 templates.
"""

__version__ = "1.0.0"
