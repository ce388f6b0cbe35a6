from django.apps import AppConfig


class BootstrapUiConfig(AppConfig):
    name = 'bootstrap_ui'
    verbose_name = 'Bootstrap UI'
