from django.apps import AppConfig


class MdxEngineConfig(AppConfig):
    default_auto_field = 'django.db.models.BigAutoField'
    name = 'mdxengine'
    verbose_name = 'MDX engine'
