"""Repo command app definition."""

from cyclopts import App

app = App(name="repo", help="Manage and publish to spec repos", help_on_error=True)
