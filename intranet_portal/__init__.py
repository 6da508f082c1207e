"""Corporate intranet portal: directory, calendar, tasks and chat assistant"""

__version__ = "0.1.0"
