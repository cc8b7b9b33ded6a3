"""i18ncheck: flags un-internationalized text in HTML templates."""

__version__ = "0.1.0"
