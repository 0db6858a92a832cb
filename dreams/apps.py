from django.apps import AppConfig


class DreamsConfig(AppConfig):
    default_auto_field = "django.db.models.BigAutoField"
    name = "dreams"
    verbose_name = "Dreams"
