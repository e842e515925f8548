"""Config command app definition."""

from cyclopts import App

app = App(name="config", help="Inspect podrepo configuration", help_on_error=True)
