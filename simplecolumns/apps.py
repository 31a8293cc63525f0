from django.apps import AppConfig


class SimpleColumnsConfig(AppConfig):
    name = 'simplecolumns'
    verbose_name = 'Simple Columns'

    def ready(self):
        """Fail fast on a broken SIMPLE_COLUMNS setting."""
        from simplecolumns.conf import get_column_settings

        get_column_settings()
