"""
clockifish: A CLI for the Clockify time tracking API.

- Starts, stops and inspects the running Clockify timer
- Totals tracked hours for the current week and month
- Can be used as a CLI (via `python -m clockifish` or `clockifish` if installed as a package)
"""

__version__ = "1.0.0"
